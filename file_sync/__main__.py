"""CLI entry point for File Sync.

Usage:
    python -m file_sync run SOURCE DESTINATION [--two-way] [--ignore PATTERN ...]
    python -m file_sync run --config sync.json
    python -m file_sync check-ignore PATH [--ignore PATTERN ...] [--config FILE]

Commands:
    run           Mirror SOURCE into DESTINATION until interrupted
    check-ignore  Report whether a path would be ignored
"""

import argparse
import logging
import sys
import threading
from pathlib import Path
from typing import Optional

from file_sync import __version__
from file_sync.config import LogConfig, SyncConfig, load_config
from file_sync.exceptions import ConfigError, FileSyncError
from file_sync.observers import ConsoleOutputObserver, LoggingObserver
from file_sync.sync.engine import SyncEngine
from file_sync.sync.ignore import IgnoreMatcher
from file_sync.utils.logging import configure_logging

logger = logging.getLogger("file_sync")


def resolve_config(args: argparse.Namespace) -> tuple:
    """Merge --config file values with command line arguments.

    Command line roots and flags win over the file; ignore patterns from
    both are combined.

    Returns:
        Tuple of (SyncConfig, LogConfig)

    Raises:
        ConfigError: If no source/destination is given
    """
    if args.config:
        sync_config, log_config = load_config(args.config)
    else:
        sync_config, log_config = None, LogConfig()

    source = getattr(args, "source", None)
    destination = getattr(args, "destination", None)
    ignore = list(getattr(args, "ignore", None) or [])

    if sync_config is None:
        if not source or not destination:
            raise ConfigError("SOURCE and DESTINATION are required without --config")
        sync_config = SyncConfig(source=source, destination=destination)

    if source:
        sync_config.source = Path(source)
    if destination:
        sync_config.destination = Path(destination)
    sync_config.ignore_patterns = sync_config.ignore_patterns + ignore
    if getattr(args, "two_way", False):
        sync_config.two_way = True

    if getattr(args, "verbose", False):
        log_config.level = "DEBUG"
    if getattr(args, "json_logs", False):
        log_config.json_output = True
    if getattr(args, "log_file", None):
        log_config.log_file = Path(args.log_file)

    return sync_config, log_config


def cmd_run(args: argparse.Namespace, stop_event: Optional[threading.Event] = None) -> int:
    """Handle the 'run' command - mirror until interrupted.

    Args:
        args: Parsed CLI arguments
        stop_event: Stops the loop when set (Ctrl+C also stops it)

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        sync_config, log_config = resolve_config(args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(
        level=log_config.level,
        json_output=log_config.json_output,
        log_file=log_config.log_file,
    )

    engine = SyncEngine(sync_config)
    if not args.quiet:
        engine.attach_observer(ConsoleOutputObserver())
    if log_config.log_file:
        engine.attach_observer(LoggingObserver())

    try:
        engine.start()
    except (FileSyncError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    mode = "two-way" if engine.is_two_way_running else "one-way"
    print(f"Syncing ({mode}) {engine.roots.source} -> {engine.roots.destination}")
    if sync_config.ignore_patterns:
        print(f"  Ignoring: {', '.join(sync_config.ignore_patterns)}")
    print("Press Ctrl+C to stop.")

    stop_event = stop_event or threading.Event()
    try:
        while not stop_event.wait(0.5):
            pass
    except KeyboardInterrupt:
        logger.info("Stopping...")
    finally:
        engine.stop()

    return 0


def cmd_check_ignore(args: argparse.Namespace) -> int:
    """Handle the 'check-ignore' command.

    Returns:
        0 if the path is ignored, 1 if it would be synced
    """
    patterns = list(args.ignore or [])
    if args.config:
        try:
            sync_config, _ = load_config(args.config)
        except ConfigError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        patterns = sync_config.ignore_patterns + patterns

    matcher = IgnoreMatcher(patterns)
    if matcher.matches(args.path):
        print(f"ignored: {args.path}")
        return 0
    print(f"synced: {args.path}")
    return 1


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="file_sync",
        description="Mirror a directory tree into another using live change notifications",
    )
    parser.add_argument(
        "--version", action="version",
        version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # run command
    run_parser = subparsers.add_parser("run", help="Mirror SOURCE into DESTINATION")
    run_parser.add_argument("source", nargs="?", help="Source directory")
    run_parser.add_argument("destination", nargs="?", help="Destination directory")
    run_parser.add_argument("--config", help="JSON config file")
    run_parser.add_argument(
        "--two-way", action="store_true",
        help="Also apply destination changes back to the source"
    )
    run_parser.add_argument(
        "--ignore", action="append", metavar="PATTERN",
        help="Glob pattern to ignore, e.g. '*/tmp/*' (repeatable)"
    )
    run_parser.add_argument("-q", "--quiet", action="store_true", help="Do not print mutations")
    run_parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    run_parser.add_argument("--json-logs", action="store_true", help="Log JSON lines")
    run_parser.add_argument("--log-file", help="Also write logs (and mutations) to this file")

    # check-ignore command
    check_parser = subparsers.add_parser("check-ignore", help="Test a path against ignore patterns")
    check_parser.add_argument("path", help="Full path to test")
    check_parser.add_argument("--ignore", action="append", metavar="PATTERN", help="Glob pattern")
    check_parser.add_argument("--config", help="JSON config file with ignore patterns")

    return parser


def main(argv=None) -> int:
    """Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    commands = {
        "run": cmd_run,
        "check-ignore": cmd_check_ignore,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
