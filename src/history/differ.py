"""Classify dependency changes between two adjacent snapshots."""

from .models import Action, ChangeEvent, Commit, Snapshot


def _event(action: Action, name: str, commit: Commit, **versions: str | None) -> ChangeEvent:
    return ChangeEvent(
        action=action,
        name=name,
        author=commit.author,
        timestamp=commit.timestamp,
        message=commit.subject,
        commit_id=commit.id,
        reference=commit.reference,
        **versions,
    )


def diff(before: Snapshot, after: Snapshot, commit: Commit) -> list[ChangeEvent]:
    """
    Compare two snapshots and emit one event per changed dependency.

    - "added": in after but not in before
    - "removed": in before but not in after
    - "updated": in both with a different specifier (a specifier appearing
      or disappearing on a dependency present in both counts as an update)

    Args:
        before: Snapshot at the older commit
        after: Snapshot at the newer commit
        commit: The newer commit; its metadata is copied onto every event

    Returns:
        Added events, then removed, then updated
    """
    added = [name for name in after if name not in before]
    removed = [name for name in before if name not in after]
    common = [name for name in before if name in after]

    events = [_event("added", name, commit, version=after[name]) for name in added]
    events += [_event("removed", name, commit, version=before[name]) for name in removed]

    # Removal wins over update for the same pair
    removed_names = set(removed)
    updated = [
        name for name in common if before[name] != after[name] and name not in removed_names
    ]
    events += [
        _event("updated", name, commit, version_from=before[name], version_to=after[name])
        for name in updated
    ]

    return events
