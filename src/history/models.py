"""Data models for manifest history reconstruction."""

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Literal

from common.constants import SHORT_ID_LENGTH

Action = Literal["added", "removed", "updated"]

# Dependency name -> version specifier (None means unconstrained)
Snapshot = dict[str, str | None]


@dataclass(frozen=True)
class Commit:
    """A commit that touched the manifest."""

    id: str
    author: str
    timestamp: datetime
    subject: str
    reference: int | None = None


@dataclass(frozen=True)
class ChangeEvent:
    """A single dependency change introduced by one commit.

    "added" and "removed" events carry ``version``; "updated" events carry
    ``version_from`` and ``version_to`` instead. Commit metadata is copied
    from the newer commit of the diffed pair.
    """

    action: Action
    name: str
    author: str
    timestamp: datetime
    message: str
    commit_id: str
    reference: int | None = None
    version: str | None = None
    version_from: str | None = None
    version_to: str | None = None

    @property
    def short_id(self) -> str:
        return self.commit_id[:SHORT_ID_LENGTH]

    def to_dict(self) -> dict:
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        return data


# Dependency name -> its events, oldest first
History = dict[str, list[ChangeEvent]]
