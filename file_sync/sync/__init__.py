"""Synchronization module for File Sync.

This module provides:
- SyncEngine: Live one-way or two-way mirroring driven by watcher events
- DirectoryWatcher: watchdog-based recursive watcher for one root
- IgnoreMatcher: Glob patterns that suppress events
- ConflictHeuristic: Size + mtime check that stops echo ping-pong
- FileOperations: Best-effort filesystem mutations
"""

from file_sync.sync.engine import EngineState, SyncEngine
from file_sync.sync.events import ChangeKind, RawChangeEvent, Root, SyncEvent
from file_sync.sync.heuristic import ConflictHeuristic, FileMeta, read_meta, should_propagate
from file_sync.sync.ignore import IgnoreMatcher, matches
from file_sync.sync.operations import FileOperations
from file_sync.sync.watcher import DirectoryWatcher

__all__ = [
    "SyncEngine",
    "EngineState",
    "ChangeKind",
    "RawChangeEvent",
    "Root",
    "SyncEvent",
    "ConflictHeuristic",
    "FileMeta",
    "read_meta",
    "should_propagate",
    "IgnoreMatcher",
    "matches",
    "FileOperations",
    "DirectoryWatcher",
]
