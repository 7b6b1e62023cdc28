"""Observers of the mutations performed by a SyncEngine.

An observer receives one call per successful mutation on the target root,
synchronously and in the order the mutations happen. Subclass SyncObserver
and override the hooks you need.
"""

import logging
import sys
import threading
from typing import Optional, TextIO


class SyncObserver:
    """Base class for sync observers. All hooks default to no-ops."""

    def on_created(self, path: str) -> None:
        """A file or directory was created at path."""

    def on_changed(self, path: str) -> None:
        """An existing file at path was overwritten."""

    def on_deleted(self, path: str) -> None:
        """The file or directory at path was deleted."""

    def on_renamed(self, old_path: str, new_path: str) -> None:
        """old_path was renamed to new_path."""


class ConsoleOutputObserver(SyncObserver):
    """Prints one line per mutation, e.g. ``Created /backup/a.txt``."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        # Both watcher threads may print at once
        self._lock = threading.Lock()

    def _write(self, line: str) -> None:
        stream = self.stream or sys.stdout
        with self._lock:
            print(line, file=stream, flush=True)

    def on_created(self, path: str) -> None:
        self._write(f"Created {path}")

    def on_changed(self, path: str) -> None:
        self._write(f"Changed {path}")

    def on_deleted(self, path: str) -> None:
        self._write(f"Deleted {path}")

    def on_renamed(self, old_path: str, new_path: str) -> None:
        self._write(f"Renamed {old_path} to {new_path}")


class LoggingObserver(SyncObserver):
    """Logs each mutation at INFO with ``event``/``path`` extra fields."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("file_sync.events")

    def on_created(self, path: str) -> None:
        self.logger.info(f"Created {path}", extra={"event": "created", "path": path})

    def on_changed(self, path: str) -> None:
        self.logger.info(f"Changed {path}", extra={"event": "changed", "path": path})

    def on_deleted(self, path: str) -> None:
        self.logger.info(f"Deleted {path}", extra={"event": "deleted", "path": path})

    def on_renamed(self, old_path: str, new_path: str) -> None:
        self.logger.info(
            f"Renamed {old_path} to {new_path}",
            extra={"event": "renamed", "path": new_path, "old_path": old_path},
        )
