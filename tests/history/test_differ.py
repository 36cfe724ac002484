"""Tests for diffing adjacent snapshots."""

from datetime import datetime, timezone

import pytest

from history.differ import diff
from history.models import Commit

COMMIT = Commit(
    id="abcdef1234567890",
    author="Jane Doe",
    timestamp=datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc),
    subject="Update deps (#42)",
    reference=42,
)


def names_by_action(events):
    grouped = {"added": set(), "removed": set(), "updated": set()}
    for event in events:
        grouped[event.action].add(event.name)
    return grouped


def test_added():
    """A new dependency without a specifier is added with version None."""
    events = diff({}, {"pry": None}, COMMIT)

    assert len(events) == 1
    assert events[0].action == "added"
    assert events[0].name == "pry"
    assert events[0].version is None


def test_removed():
    """A dropped dependency records its last specifier."""
    events = diff({"byebug": "1.0"}, {}, COMMIT)

    assert len(events) == 1
    assert events[0].action == "removed"
    assert events[0].version == "1.0"


def test_updated():
    """A changed specifier records both sides."""
    events = diff({"rails": "6.1.0"}, {"rails": "7.0.4"}, COMMIT)

    assert len(events) == 1
    event = events[0]
    assert event.action == "updated"
    assert event.version_from == "6.1.0"
    assert event.version_to == "7.0.4"
    assert event.version is None


def test_unchanged_is_silent():
    """An identical specifier produces no event."""
    assert diff({"rspec": "3.0"}, {"rspec": "3.0"}, COMMIT) == []


def test_specifier_appearing_is_an_update():
    """Pinning a previously unconstrained dependency is an update, not add/remove."""
    events = diff({"pry": None}, {"pry": "0.14"}, COMMIT)

    assert [(e.action, e.version_from, e.version_to) for e in events] == [
        ("updated", None, "0.14")
    ]


def test_events_carry_newer_commit_metadata():
    """Every event copies the newer commit's metadata."""
    (event,) = diff({}, {"pry": None}, COMMIT)

    assert event.author == "Jane Doe"
    assert event.timestamp == COMMIT.timestamp
    assert event.message == "Update deps (#42)"
    assert event.reference == 42
    assert event.commit_id == "abcdef1234567890"
    assert event.short_id == "abcdef1"


def test_mixed_changes_emit_added_removed_updated():
    before = {"rails": "6.1.0", "byebug": "1.0", "rspec": "3.0"}
    after = {"rails": "7.0.4", "rspec": "3.0", "pry": None}

    events = diff(before, after, COMMIT)

    assert [(e.action, e.name) for e in events] == [
        ("added", "pry"),
        ("removed", "byebug"),
        ("updated", "rails"),
    ]


SNAPSHOTS = [
    {},
    {"pry": None},
    {"rails": "6.1.0", "byebug": "1.0", "rspec": "3.0"},
    {"rails": "7.0.4", "rspec": "3.0", "pry": None},
    {"rails": None, "sidekiq": "7.1"},
]

PAIRS = [(a, b) for a in SNAPSHOTS for b in SNAPSHOTS]


@pytest.mark.parametrize("before,after", PAIRS)
def test_groups_partition_names(before, after):
    """Each name falls in at most one group, and only changed names appear."""
    events = diff(before, after, COMMIT)
    grouped = names_by_action(events)

    assert len(events) == sum(len(names) for names in grouped.values())
    assert not grouped["added"] & grouped["removed"]
    assert not grouped["added"] & grouped["updated"]
    assert not grouped["removed"] & grouped["updated"]

    unchanged = {n for n in before if n in after and before[n] == after[n]}
    all_names = set(before) | set(after)
    assert grouped["added"] | grouped["removed"] | grouped["updated"] | unchanged == all_names


@pytest.mark.parametrize("snapshot", SNAPSHOTS)
def test_diff_with_itself_is_empty(snapshot):
    assert diff(snapshot, dict(snapshot), COMMIT) == []


@pytest.mark.parametrize("before,after", PAIRS)
def test_reverse_diff_swaps_roles(before, after):
    """Diffing in reverse swaps added/removed and from/to."""
    forward = diff(before, after, COMMIT)
    backward = diff(after, before, COMMIT)

    fwd = names_by_action(forward)
    bwd = names_by_action(backward)
    assert fwd["added"] == bwd["removed"]
    assert fwd["removed"] == bwd["added"]
    assert fwd["updated"] == bwd["updated"]

    fwd_updates = {e.name: (e.version_from, e.version_to) for e in forward if e.action == "updated"}
    bwd_updates = {e.name: (e.version_to, e.version_from) for e in backward if e.action == "updated"}
    assert fwd_updates == bwd_updates
