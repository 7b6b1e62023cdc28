"""Sync engine for File Sync.

SyncEngine mirrors live changes between two directory trees:
- one-way: changes under the source root are applied to the destination
- two-way: changes under either root are applied to the other

The engine keeps no per-file state. Echoes of its own mutations, observed
by the opposite watcher in two-way mode, are stopped by the conflict
heuristic (size and mtime only).
"""

import atexit
import logging
import os
import stat
import threading
from enum import Enum
from typing import Callable, List, Optional, Tuple

from file_sync.config import SyncConfig
from file_sync.exceptions import AlreadyRunningError, NotRunningError
from file_sync.observers import SyncObserver
from file_sync.sync.events import ChangeKind, RawChangeEvent, Root, SyncEvent
from file_sync.sync.heuristic import ConflictHeuristic, FileMeta, read_meta
from file_sync.sync.ignore import IgnoreMatcher
from file_sync.sync.operations import FailureCallback, FileOperations
from file_sync.sync.watcher import DirectoryWatcher, EventCallback
from file_sync.utils.paths import RootPair
from file_sync.utils.platform import is_case_insensitive_filesystem

logger = logging.getLogger(__name__)

WatcherFactory = Callable[[str, Root, EventCallback], DirectoryWatcher]


class EngineState(Enum):
    """Lifecycle state of a SyncEngine."""
    STOPPED = "stopped"
    RUNNING_ONE_WAY = "running_one_way"
    RUNNING_TWO_WAY = "running_two_way"


class SyncEngine:
    """Mirrors file system changes from one root to the other.

    Raw events come from one watcher per active root, each on its own
    thread. handle_raw_event() holds no lock: it only reads configuration
    that is fixed after construction, and each event mutates only its own
    mapped path. Two events racing on the same path are not coordinated.

    Attributes:
        config: SyncConfig with roots, ignore patterns and heuristic margin
        roots: Normalized source/destination roots
        ignore: Compiled ignore patterns

    Example:
        engine = SyncEngine(SyncConfig(source="C:/in", destination="D:/out"))
        engine.attach_observer(ConsoleOutputObserver())
        engine.start(two_way_sync=True)
        ...
        engine.stop()
    """

    def __init__(
        self,
        config: SyncConfig,
        watcher_factory: Optional[WatcherFactory] = None,
        on_failure: Optional[FailureCallback] = None,
    ):
        """Initialize sync engine.

        Args:
            config: Configuration for this folder pair
            watcher_factory: Builds a watcher for (root, origin, callback).
                             Defaults to the watchdog-based DirectoryWatcher.
            on_failure: Called with (operation, path, error) whenever a
                        filesystem mutation is abandoned
        """
        self.config = config

        case_sensitive = config.case_sensitive
        if case_sensitive is None:
            case_sensitive = not is_case_insensitive_filesystem()

        self.roots = RootPair(config.source, config.destination, case_sensitive)
        self.ignore = IgnoreMatcher(config.ignore_patterns)
        self.heuristic = ConflictHeuristic(config.propagation_margin)
        self.operations = FileOperations(on_failure=on_failure)

        self._watcher_factory = watcher_factory or DirectoryWatcher
        self._watchers: List[DirectoryWatcher] = []
        self._state = EngineState.STOPPED

        # Copy-on-write: notification iterates a snapshot without locking
        self._observers: Tuple[SyncObserver, ...] = ()
        self._observers_lock = threading.Lock()

        self._shutdown_registered = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def running(self) -> bool:
        """Is the engine watching at least the source root?"""
        return self._state is not EngineState.STOPPED

    @property
    def is_two_way_running(self) -> bool:
        return self._state is EngineState.RUNNING_TWO_WAY

    def start(self, two_way_sync: Optional[bool] = None) -> None:
        """Start watching and mirroring changes.

        Not safe to call concurrently with start() or stop().

        Args:
            two_way_sync: Also apply destination changes back to the source.
                          None uses config.two_way.

        Raises:
            AlreadyRunningError: If the engine is already running
            OSError: If a root cannot be watched
        """
        if self._state is not EngineState.STOPPED:
            raise AlreadyRunningError("File sync is already running.")

        if two_way_sync is None:
            two_way_sync = self.config.two_way

        plan = [(self.roots.source, Root.SOURCE)]
        if two_way_sync:
            plan.append((self.roots.destination, Root.DESTINATION))

        started: List[DirectoryWatcher] = []
        try:
            for root, origin in plan:
                watcher = self._watcher_factory(root, origin, self.handle_raw_event)
                watcher.start()
                started.append(watcher)
        except Exception:
            for watcher in started:
                watcher.stop()
            raise

        self._watchers = started
        self._state = (
            EngineState.RUNNING_TWO_WAY if two_way_sync else EngineState.RUNNING_ONE_WAY
        )
        self._register_shutdown_handler()

        logger.info(
            f"Sync started ({'two-way' if two_way_sync else 'one-way'}): "
            f"{self.roots.source} -> {self.roots.destination}"
        )

    def stop(self) -> None:
        """Stop watching. Mutations already in flight are allowed to finish.

        Raises:
            NotRunningError: If the engine is not running
        """
        if self._state is EngineState.STOPPED:
            raise NotRunningError("File sync is not running.")

        self._unregister_shutdown_handler()
        self._stop_watchers()

    def _stop_watchers(self) -> None:
        watchers, self._watchers = self._watchers, []
        self._state = EngineState.STOPPED
        for watcher in watchers:
            watcher.stop()

        logger.info(f"Sync stopped: {self.roots.source} -> {self.roots.destination}")

    def _register_shutdown_handler(self) -> None:
        if not self._shutdown_registered:
            atexit.register(self._on_shutdown)
            self._shutdown_registered = True

    def _unregister_shutdown_handler(self) -> None:
        if self._shutdown_registered:
            atexit.unregister(self._on_shutdown)
            self._shutdown_registered = False

    def _on_shutdown(self) -> None:
        # atexit drops the registration once the handler has run
        self._shutdown_registered = False
        if self.running:
            logger.debug("Stopping sync at interpreter exit")
            self._stop_watchers()

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def attach_observer(self, observer: SyncObserver) -> None:
        """Subscribe an observer to performed mutations.

        Observers are called synchronously on the watcher thread, in the
        order mutations happen. They should return quickly and must not
        raise; an exception is logged and does not reach other observers.
        """
        with self._observers_lock:
            self._observers = self._observers + (observer,)

    def _notify(self, event: SyncEvent) -> None:
        logger.debug(f"Sync {event.kind.value}: {event.path}", extra=event.to_dict())
        for observer in self._observers:
            try:
                if event.kind is ChangeKind.CREATED:
                    observer.on_created(event.path)
                elif event.kind is ChangeKind.CHANGED:
                    observer.on_changed(event.path)
                elif event.kind is ChangeKind.DELETED:
                    observer.on_deleted(event.path)
                else:
                    observer.on_renamed(event.old_path, event.path)
            except Exception:
                logger.exception(f"Observer {observer!r} failed on {event.kind.value} event")

    # ------------------------------------------------------------------
    # Event handling
    # ------------------------------------------------------------------

    def handle_raw_event(self, event: RawChangeEvent) -> None:
        """Mirror one raw change onto the opposite root.

        Runs every filesystem operation synchronously. Filesystem errors
        abandon the mutation silently (logged at DEBUG).
        """
        if self.ignore.matches_any(*event.paths):
            logger.debug(f"Ignored {event.kind.value}: {event.src_path}")
            return

        if event.kind is ChangeKind.RENAMED:
            self._handle_renamed(event)
            return

        target = self.roots.to_opposite(event.src_path)
        if target is None:
            logger.debug(f"Discarded event outside managed roots: {event.src_path}")
            return

        if event.kind is ChangeKind.CREATED:
            self._handle_created(event.src_path, target)
        elif event.kind is ChangeKind.CHANGED:
            self._handle_changed(event.src_path, target)
        elif event.kind is ChangeKind.DELETED:
            self._handle_deleted(target)

    def _source_stat(self, path: str) -> Optional[os.stat_result]:
        try:
            return os.stat(path)
        except OSError as e:
            logger.debug(f"Source vanished before it could be mirrored: {path}: {e}")
            return None

    def _copy_as_new(self, source: str, target: str) -> None:
        if self.operations.copy_file(source, target):
            self.operations.clear_attributes(target)
            self._notify(SyncEvent(ChangeKind.CREATED, target))

    def _overwrite_if_newer(self, source_meta: FileMeta, source: str, target: str) -> bool:
        """Overwrite target when the heuristic allows.

        Returns:
            False if the target's metadata could not be read, True otherwise
        """
        try:
            target_meta = read_meta(target)
        except OSError:
            return False

        if self.heuristic.should_propagate(source_meta, target_meta):
            self.operations.clear_attributes(target)
            if self.operations.copy_file(source, target):
                self._notify(SyncEvent(ChangeKind.CHANGED, target))
        return True

    def _handle_created(self, source: str, target: str) -> None:
        st = self._source_stat(source)
        if st is None:
            return

        if stat.S_ISDIR(st.st_mode):
            if not os.path.isdir(target) and self.operations.make_directory(target):
                self._notify(SyncEvent(ChangeKind.CREATED, target))
            return

        if not self._overwrite_if_newer(FileMeta.from_stat(st), source, target):
            # Nothing readable at the target: a plain create
            self._copy_as_new(source, target)

    def _handle_changed(self, source: str, target: str) -> None:
        st = self._source_stat(source)
        if st is None or stat.S_ISDIR(st.st_mode):
            # Directories are mirrored through create/delete only
            return

        if not self._overwrite_if_newer(FileMeta.from_stat(st), source, target):
            self.operations.clear_attributes(target)
            self._copy_as_new(source, target)

    def _handle_deleted(self, target: str) -> None:
        # The source is gone; only the target can tell file from directory
        if os.path.isdir(target):
            if self.operations.remove_directory(target):
                self._notify(SyncEvent(ChangeKind.DELETED, target))
        elif os.path.lexists(target):
            self.operations.clear_attributes(target)
            if self.operations.remove_file(target):
                self._notify(SyncEvent(ChangeKind.DELETED, target))

    def _handle_renamed(self, event: RawChangeEvent) -> None:
        old_target = self.roots.to_opposite(event.src_path)
        new_target = self.roots.to_opposite(event.dest_path)
        if old_target is None or new_target is None:
            logger.debug(
                f"Discarded rename outside managed roots: "
                f"{event.src_path} -> {event.dest_path}"
            )
            return

        if os.path.lexists(old_target):
            if self.operations.move(old_target, new_target):
                self._notify(SyncEvent(ChangeKind.RENAMED, new_target, old_path=old_target))
            return

        # Old path already gone (e.g. the echo of our own rename): treat the
        # new path as a fresh creation
        self._handle_created(event.dest_path, new_target)
