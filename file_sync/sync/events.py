"""Event types flowing through the sync engine."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Root(Enum):
    """Which managed root a raw event was observed on."""
    SOURCE = "source"
    DESTINATION = "destination"


class ChangeKind(str, Enum):
    """Kinds of change, shared by raw and normalized events."""

    CREATED = "created"
    CHANGED = "changed"
    DELETED = "deleted"
    RENAMED = "renamed"


@dataclass(frozen=True)
class RawChangeEvent:
    """A change notification as delivered by a watcher.

    For RENAMED events ``src_path`` is the old path and ``dest_path`` the
    new one; for every other kind ``dest_path`` is None.
    """

    kind: ChangeKind
    src_path: str
    origin: Root
    dest_path: Optional[str] = None

    @property
    def paths(self) -> tuple:
        """All paths reported by this event."""
        if self.dest_path is None:
            return (self.src_path,)
        return (self.src_path, self.dest_path)


@dataclass(frozen=True)
class SyncEvent:
    """A mutation the engine actually performed on the opposite root.

    For RENAMED events ``old_path`` is the path before the rename.
    """

    kind: ChangeKind
    path: str
    old_path: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert event to dictionary."""
        data = {"event": self.kind.value, "path": self.path}
        if self.old_path is not None:
            data["old_path"] = self.old_path
        return data
