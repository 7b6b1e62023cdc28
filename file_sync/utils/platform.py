"""Platform detection and filesystem attribute helpers.

Handles Windows/POSIX differences for:
- Case sensitivity of root prefix matching
- Clearing read-only/system attributes that block overwrite or delete
"""

import ctypes
import logging
import os
import stat
import sys
from typing import Optional

from file_sync.config import Platform

logger = logging.getLogger(__name__)

# winnt.h
FILE_ATTRIBUTE_NORMAL = 0x80


def detect_platform() -> Platform:
    """Detect the current operating system platform.

    Returns:
        Platform.WINDOWS, Platform.LINUX, or Platform.MACOS based on sys.platform

    Example:
        >>> if detect_platform() == Platform.WINDOWS:
        ...     print("UNC roots are supported")
    """
    if sys.platform == "win32":
        return Platform.WINDOWS
    elif sys.platform == "darwin":
        return Platform.MACOS
    else:
        # Linux and other Unix-like systems
        return Platform.LINUX


def is_case_insensitive_filesystem(platform: Optional[Platform] = None) -> bool:
    """Whether paths on the platform's default filesystem ignore case.

    NTFS and APFS/HFS+ are case-insensitive by default, Linux filesystems
    are not. Individual volumes may differ; SyncConfig.case_sensitive
    overrides this guess.

    Args:
        platform: Platform to check (detected when None or AUTO)

    Returns:
        True for Windows and macOS, False otherwise
    """
    if platform is None or platform == Platform.AUTO:
        platform = detect_platform()
    return platform in (Platform.WINDOWS, Platform.MACOS)


def clear_blocking_attributes(path: str) -> bool:
    """Clear attributes that would block overwriting or deleting a file.

    On Windows resets the file to FILE_ATTRIBUTE_NORMAL (drops read-only,
    system and hidden). Elsewhere adds owner read/write permission bits.

    Args:
        path: File to update

    Returns:
        True if the attributes were updated, False on failure
    """
    if detect_platform() == Platform.WINDOWS:
        try:
            if ctypes.windll.kernel32.SetFileAttributesW(str(path), FILE_ATTRIBUTE_NORMAL):
                return True
            logger.debug(f"SetFileAttributesW failed for {path}: {ctypes.WinError()}")
            return False
        except (AttributeError, OSError) as e:
            logger.debug(f"Cannot clear attributes of {path}: {e}")
            return False

    try:
        mode = os.stat(path).st_mode
        os.chmod(path, stat.S_IMODE(mode) | stat.S_IRUSR | stat.S_IWUSR)
        return True
    except OSError as e:
        logger.debug(f"Cannot clear attributes of {path}: {e}")
        return False
