#!/usr/bin/env python3
"""Basic usage example for File Sync.

This example demonstrates:
1. Creating a SyncEngine for a source/destination pair
2. Attaching the console observer
3. Starting one-way mirroring
4. Creating, changing, renaming and deleting files in the source
5. Stopping the engine

Run this example:
    python basic_usage.py
"""

import os
import tempfile
import time
from pathlib import Path

from file_sync import ConsoleOutputObserver, SyncConfig, SyncEngine


def settle(seconds: float = 1.0) -> None:
    """Give the watcher thread time to deliver notifications."""
    time.sleep(seconds)


def main():
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)

        source = temp_path / "source"
        destination = temp_path / "destination"
        staging = temp_path / "staging"
        for directory in (source, destination, staging):
            directory.mkdir()

        print("=" * 60)
        print("File Sync - Basic Usage Example")
        print("=" * 60)

        # ---------------------------------------------------------------------
        # Step 1: Create the engine
        # ---------------------------------------------------------------------
        print("\n[1] Creating SyncEngine...")

        config = SyncConfig(
            source=source,
            destination=destination,
            ignore_patterns=["*.tmp"],        # Never mirror scratch files
        )
        engine = SyncEngine(config)
        engine.attach_observer(ConsoleOutputObserver())
        print(f"    Roots: {engine.roots}")

        # ---------------------------------------------------------------------
        # Step 2: Start one-way mirroring
        # ---------------------------------------------------------------------
        print("\n[2] Starting one-way sync...")
        engine.start()
        print(f"    State: {engine.state.value}")

        # ---------------------------------------------------------------------
        # Step 3: Work in the source
        # ---------------------------------------------------------------------
        print("\n[3] Creating files in the source...")

        # Files written in place can be seen half-written; build them
        # elsewhere and move them in
        report = staging / "report.txt"
        report.write_text("quarterly numbers")
        os.replace(report, source / "report.txt")
        (source / "notes").mkdir()
        (source / "scratch.tmp").write_text("ignored")
        settle()

        print("\n[4] Renaming and deleting...")
        os.rename(source / "report.txt", source / "report-final.txt")
        settle()
        (source / "report-final.txt").unlink()
        settle()

        # ---------------------------------------------------------------------
        # Step 5: Stop
        # ---------------------------------------------------------------------
        print("\n[5] Stopping...")
        engine.stop()
        print(f"    State: {engine.state.value}")
        print(f"    Destination now holds: {sorted(p.name for p in destination.iterdir())}")

        print("\n" + "=" * 60)
        print("Example complete!")
        print("=" * 60)


if __name__ == "__main__":
    main()
