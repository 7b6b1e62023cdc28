"""Shared pytest fixtures for File Sync tests.

Provides temporary source/destination roots, config objects, a recording
observer and a fake watcher factory for driving the engine without real
file system notifications.
"""

import logging
import os
import time
from pathlib import Path

import pytest

from file_sync.config import SyncConfig
from file_sync.observers import SyncObserver
from file_sync.sync.engine import SyncEngine


class RecordingObserver(SyncObserver):
    """Collects (kind, path...) tuples for every notification."""

    def __init__(self):
        self.events = []

    def on_created(self, path):
        self.events.append(("created", path))

    def on_changed(self, path):
        self.events.append(("changed", path))

    def on_deleted(self, path):
        self.events.append(("deleted", path))

    def on_renamed(self, old_path, new_path):
        self.events.append(("renamed", old_path, new_path))


class FakeWatcher:
    """Stands in for DirectoryWatcher; records start/stop calls."""

    def __init__(self, root, origin, callback):
        self.root = root
        self.origin = origin
        self.callback = callback
        self.started = False
        self.stopped = False

    def start(self):
        self.started = True

    def stop(self, timeout=10.0):
        self.stopped = True


class FakeWatcherFactory:
    """Watcher factory that remembers every watcher it built."""

    def __init__(self):
        self.watchers = []

    def __call__(self, root, origin, callback):
        watcher = FakeWatcher(root, origin, callback)
        self.watchers.append(watcher)
        return watcher


def write_file(path: Path, content: str = "", mtime: float = None) -> Path:
    """Write a file (creating parents) and optionally set its mtime."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


def wait_for(predicate, timeout: float = 10.0, interval: float = 0.05) -> bool:
    """Poll predicate until it is true or timeout expires."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(interval)
    return predicate()


@pytest.fixture
def roots(tmp_path):
    """Create temporary source and destination roots."""
    source = tmp_path / "source"
    destination = tmp_path / "destination"
    source.mkdir()
    destination.mkdir()
    return {"source": source, "destination": destination, "root": tmp_path}


@pytest.fixture
def sync_config(roots):
    """SyncConfig for the temporary roots."""
    return SyncConfig(
        source=roots["source"],
        destination=roots["destination"],
        ignore_patterns=["*.tmp", "*/cache/*"],
        case_sensitive=True,
    )


@pytest.fixture
def watcher_factory():
    return FakeWatcherFactory()


@pytest.fixture
def recorder():
    return RecordingObserver()


@pytest.fixture
def engine(sync_config, watcher_factory, recorder):
    """SyncEngine wired to fake watchers and a recording observer."""
    engine = SyncEngine(sync_config, watcher_factory=watcher_factory)
    engine.attach_observer(recorder)
    return engine


@pytest.fixture
def isolated_root_logger(monkeypatch):
    """Give the root logger a private handler list and restore its level."""
    root = logging.getLogger()
    level = root.level
    monkeypatch.setattr(root, "handlers", [])
    yield root
    for handler in list(root.handlers):
        handler.close()
    root.setLevel(level)
