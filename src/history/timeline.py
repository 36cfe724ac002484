"""Fold per-commit changes into per-dependency timelines."""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from typing import TypeVar

from .differ import diff
from .models import ChangeEvent, Commit, History, Snapshot

T = TypeVar("T")


def adjacent_pairs(items: Sequence[T]) -> list[tuple[T, T]]:
    """Pair each item with its successor: [a, b, c] -> [(a, b), (b, c)]."""
    return list(zip(items, items[1:]))


def aggregate(triples: Iterable[tuple[Snapshot, Snapshot, Commit]]) -> History:
    """
    Diff each (before, after, commit) triple and group the events by dependency.

    Triples must be in chronological order; each dependency's events keep
    that order.

    Args:
        triples: (older snapshot, newer snapshot, newer commit), oldest pair first

    Returns:
        Mapping of dependency name to its events, oldest first
    """
    history: defaultdict[str, list[ChangeEvent]] = defaultdict(list)

    for before, after, commit in triples:
        for event in diff(before, after, commit):
            history[event.name].append(event)

    return dict(history)


def flatten(history: History) -> list[ChangeEvent]:
    """
    Merge all timelines into one list ordered by timestamp.

    The sort is stable, so events with equal timestamps keep their
    per-dependency order.
    """
    events = [event for timeline in history.values() for event in timeline]
    return sorted(events, key=lambda event: event.timestamp)
