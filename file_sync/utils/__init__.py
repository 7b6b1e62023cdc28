"""Utility modules for File Sync.

This package provides:
- paths: Root normalization and path mapping between the two roots
- platform: Platform detection and file attribute helpers
- logging: Text/JSON logging setup for the command line
"""

from file_sync.utils.paths import RootPair, map_path, normalize_root
from file_sync.utils.platform import (
    clear_blocking_attributes,
    detect_platform,
    is_case_insensitive_filesystem,
)
from file_sync.utils.logging import configure_logging, get_logger

__all__ = [
    "RootPair",
    "map_path",
    "normalize_root",
    "clear_blocking_attributes",
    "detect_platform",
    "is_case_insensitive_filesystem",
    "configure_logging",
    "get_logger",
]
