"""Decides whether a file change should overwrite its counterpart.

There is no record of what the engine itself wrote, so echoes of its own
copies are told apart from real edits using size and modification time
only. A copy preserves size (and, via shutil.copy2, the mtime), so the echo
of a copy never satisfies both conditions below.
"""

import os
from dataclasses import dataclass

from file_sync.config import DEFAULT_PROPAGATION_MARGIN


@dataclass(frozen=True)
class FileMeta:
    """Size and modification time of a file."""

    size: int
    mtime: float

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "FileMeta":
        return cls(size=st.st_size, mtime=st.st_mtime)


def read_meta(path: str) -> FileMeta:
    """Read metadata for path.

    Raises:
        OSError: If the path does not exist or cannot be read
    """
    return FileMeta.from_stat(os.stat(path))


def should_propagate(
    source: FileMeta,
    dest: FileMeta,
    margin: float = DEFAULT_PROPAGATION_MARGIN,
) -> bool:
    """Whether source should overwrite an existing destination file.

    True only if the source is at least ``margin`` seconds newer AND the
    sizes differ.

    Example:
        >>> should_propagate(FileMeta(100, 10.0), FileMeta(90, 7.0))
        True
        >>> should_propagate(FileMeta(100, 10.0), FileMeta(90, 9.0))
        False
    """
    return source.mtime >= dest.mtime + margin and source.size != dest.size


class ConflictHeuristic:
    """should_propagate() bound to a configured margin."""

    def __init__(self, margin: float = DEFAULT_PROPAGATION_MARGIN):
        self.margin = margin

    def should_propagate(self, source: FileMeta, dest: FileMeta) -> bool:
        return should_propagate(source, dest, self.margin)
