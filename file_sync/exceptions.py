"""Exceptions raised by File Sync.

Only usage and configuration errors are raised to callers. Filesystem errors
that happen while mirroring a change are handled per operation inside the
engine and never surface here.
"""


class FileSyncError(Exception):
    """Base class for all File Sync errors."""


class AlreadyRunningError(FileSyncError):
    """Raised when starting an engine that is already running."""


class NotRunningError(FileSyncError):
    """Raised when stopping an engine that is not running."""


class PathOutsideRootError(FileSyncError, ValueError):
    """Raised when a path does not start with the root it is mapped from."""

    def __init__(self, path: str, root: str):
        super().__init__(f"Path {path!r} is not under root {root!r}")
        self.path = path
        self.root = root


class ConfigError(FileSyncError, ValueError):
    """Raised for invalid configuration values or config files."""
