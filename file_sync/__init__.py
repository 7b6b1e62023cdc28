"""File Sync - live directory mirroring driven by file system notifications.

Keeps a destination folder in sync with a source folder for the lifetime of
the process, optionally in both directions. Changes are picked up from
watchdog notifications instead of periodic scans and mirrored immediately.

Key Features:
    - One-way (source -> destination) or two-way mirroring
    - Glob ignore patterns matched against full paths ("*/tmp/*", "*.exe")
    - Size + timestamp heuristic that stops two-way echo loops
    - Best-effort operations: a failing file never stops the watcher
    - Observer hooks for created/changed/deleted/renamed mutations

Quick Start:
    from file_sync import SyncEngine, SyncConfig, ConsoleOutputObserver

    engine = SyncEngine(SyncConfig(
        source="C:/testdir1",
        destination="C:/testdir2",
        ignore_patterns=["*/tmp/*", "*.exe"],
    ))
    engine.attach_observer(ConsoleOutputObserver())
    engine.start(two_way_sync=True)
    ...
    engine.stop()

Classes:
    SyncEngine: Watches the roots and mirrors changes
    SyncConfig: Roots, ignore patterns and heuristic settings
    SyncObserver: Base class for mutation observers
    EngineState: STOPPED, RUNNING_ONE_WAY, RUNNING_TWO_WAY
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .config import (
    SyncConfig,
    LogConfig,
    Platform,
    load_config,
)

from .exceptions import (
    FileSyncError,
    AlreadyRunningError,
    NotRunningError,
    PathOutsideRootError,
    ConfigError,
)

from .observers import SyncObserver, ConsoleOutputObserver, LoggingObserver

from .sync.engine import SyncEngine, EngineState
from .sync.events import ChangeKind, RawChangeEvent, Root, SyncEvent
from .sync.ignore import IgnoreMatcher
from .sync.heuristic import ConflictHeuristic, FileMeta

# Public API
__all__ = [
    "__version__",
    "__license__",
    # Main classes
    "SyncEngine",
    "create_sync",
    "SyncConfig",
    "LogConfig",
    "load_config",
    # Enums
    "EngineState",
    "Platform",
    "ChangeKind",
    "Root",
    # Events and observers
    "RawChangeEvent",
    "SyncEvent",
    "SyncObserver",
    "ConsoleOutputObserver",
    "LoggingObserver",
    # Components
    "IgnoreMatcher",
    "ConflictHeuristic",
    "FileMeta",
    # Errors
    "FileSyncError",
    "AlreadyRunningError",
    "NotRunningError",
    "PathOutsideRootError",
    "ConfigError",
]


def create_sync(
    source: str,
    destination: str,
    ignore_patterns=None,
    two_way: bool = False,
) -> SyncEngine:
    """Convenience function to create a SyncEngine for a folder pair.

    Args:
        source: Source root
        destination: Destination root
        ignore_patterns: Glob patterns to ignore
        two_way: Default mode used by start()

    Returns:
        Configured, not yet started SyncEngine

    Example:
        engine = create_sync("./build", "//server/share/build", ["*.tmp"])
        engine.start()
    """
    config = SyncConfig(
        source=source,
        destination=destination,
        ignore_patterns=ignore_patterns or [],
        two_way=two_way,
    )
    return SyncEngine(config)
