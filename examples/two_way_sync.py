#!/usr/bin/env python3
"""Two-way sync example for File Sync.

Both roots are watched. A change on either side is applied to the other
one, and the echo of that copy is dropped because the copy carries the
same size and modification time as its origin.

Run this example:
    python two_way_sync.py
"""

import os
import tempfile
import time
from pathlib import Path

from file_sync import SyncConfig, SyncEngine, SyncObserver


class CountingObserver(SyncObserver):
    """Counts mutations by kind and prints them."""

    def __init__(self):
        self.counts = {"created": 0, "changed": 0, "deleted": 0, "renamed": 0}

    def on_created(self, path):
        self.counts["created"] += 1
        print(f"    + {path}")

    def on_changed(self, path):
        self.counts["changed"] += 1
        print(f"    ~ {path}")

    def on_deleted(self, path):
        self.counts["deleted"] += 1
        print(f"    - {path}")

    def on_renamed(self, old_path, new_path):
        self.counts["renamed"] += 1
        print(f"    > {old_path} -> {new_path}")


def place(path: Path, content: str, staging: Path) -> None:
    """Write content next door, then move it into place in one step."""
    staged = staging / path.name
    staged.write_text(content)
    os.replace(staged, path)


def main():
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)

        laptop = temp_path / "laptop"
        share = temp_path / "share"
        staging = temp_path / "staging"
        for directory in (laptop, share, staging):
            directory.mkdir()

        print("=" * 60)
        print("File Sync - Two-Way Example")
        print("=" * 60)

        observer = CountingObserver()
        engine = SyncEngine(SyncConfig(
            source=laptop,
            destination=share,
            ignore_patterns=["*/tmp/*", "*.exe"],
        ))
        engine.attach_observer(observer)
        engine.start(two_way_sync=True)
        print(f"\nTwo-way running: {engine.is_two_way_running}")

        print("\n[1] New file on the laptop...")
        place(laptop / "todo.txt", "buy milk", staging)
        time.sleep(1.0)

        print("\n[2] Someone edits it on the share...")
        # An edit less than two seconds newer than the laptop copy is
        # skipped, so push its timestamp ahead
        place(share / "todo.txt", "buy milk\nbuy bread\n", staging)
        future = time.time() + 5
        os.utime(share / "todo.txt", (future, future))
        time.sleep(1.0)
        print(f"    Laptop copy: {(laptop / 'todo.txt').read_text()!r}")

        print("\n[3] Ignored paths stay put...")
        (share / "tmp").mkdir()
        (share / "tmp" / "lock").write_text("x")
        place(share / "setup.exe", "binary", staging)
        time.sleep(1.0)
        print(f"    Laptop has tmp/lock: {(laptop / 'tmp' / 'lock').exists()}")
        print(f"    Laptop has setup.exe: {(laptop / 'setup.exe').exists()}")

        engine.stop()
        print(f"\nMutations: {observer.counts}")

        print("\n" + "=" * 60)
        print("Example complete!")
        print("=" * 60)


if __name__ == "__main__":
    main()
