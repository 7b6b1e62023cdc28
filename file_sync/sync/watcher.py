"""Recursive directory watching on top of watchdog.

Each DirectoryWatcher runs its own watchdog Observer thread, so events from
the source and destination roots are delivered concurrently.
"""

import logging
import os
from typing import Callable, Optional

from watchdog.events import (
    FileSystemEvent,
    FileSystemEventHandler,
    FileSystemMovedEvent,
)
from watchdog.observers import Observer

from file_sync.sync.events import ChangeKind, RawChangeEvent, Root

logger = logging.getLogger(__name__)

EventCallback = Callable[[RawChangeEvent], None]


class _RawEventHandler(FileSystemEventHandler):
    """Translates watchdog events into RawChangeEvents for one root."""

    def __init__(self, origin: Root, callback: EventCallback):
        super().__init__()
        self.origin = origin
        self.callback = callback

    def _emit(self, kind: ChangeKind, event: FileSystemEvent) -> None:
        dest_path = None
        if isinstance(event, FileSystemMovedEvent):
            dest_path = os.fsdecode(event.dest_path)
        self.callback(RawChangeEvent(
            kind=kind,
            src_path=os.fsdecode(event.src_path),
            origin=self.origin,
            dest_path=dest_path,
        ))

    def on_created(self, event):
        self._emit(ChangeKind.CREATED, event)

    def on_modified(self, event):
        self._emit(ChangeKind.CHANGED, event)

    def on_deleted(self, event):
        self._emit(ChangeKind.DELETED, event)

    def on_moved(self, event):
        # A directory move is followed by one synthetic move per child;
        # mirroring the directory already moved them
        if getattr(event, "is_synthetic", False):
            return
        self._emit(ChangeKind.RENAMED, event)


class DirectoryWatcher:
    """Watches one root recursively and forwards raw change events.

    Attributes:
        root: Directory being watched
        origin: Which managed root this is
        callback: Receives every RawChangeEvent, on the observer thread
    """

    def __init__(self, root: str, origin: Root, callback: EventCallback):
        self.root = root
        self.origin = origin
        self.callback = callback
        self._observer: Optional[Observer] = None

    @property
    def running(self) -> bool:
        return self._observer is not None and self._observer.is_alive()

    def start(self) -> None:
        """Start watching.

        Raises:
            OSError: If the root cannot be watched (e.g. does not exist)
        """
        if not os.path.isdir(self.root):
            raise FileNotFoundError(f"Watch root does not exist: {self.root}")

        observer = Observer()
        observer.schedule(
            _RawEventHandler(self.origin, self.callback),
            self.root,
            recursive=True,
        )
        observer.start()
        self._observer = observer
        logger.debug(f"Watching {self.origin.value} root {self.root}")

    def stop(self, timeout: float = 10.0) -> None:
        """Stop watching and wait for the observer thread to finish."""
        observer = self._observer
        if observer is None:
            return
        self._observer = None
        observer.stop()
        observer.join(timeout=timeout)
        logger.debug(f"Stopped watching {self.origin.value} root {self.root}")
