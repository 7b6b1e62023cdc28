"""Example scripts for File Sync.

Available examples:

basic_usage.py
    One-way mirroring: create, change, rename and delete files in the
    source and watch them appear in the destination.
    Start here to understand the core workflow.

two_way_sync.py
    Two-way mirroring with ignore patterns and a custom observer.
    Shows how the timestamp heuristic keeps echoes from bouncing back.

Run any example:
    python examples/basic_usage.py
    python examples/two_way_sync.py
"""
