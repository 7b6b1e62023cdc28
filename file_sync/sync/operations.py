"""Best-effort filesystem mutations used by the sync engine.

Every operation may fail (permission denied, file vanished, file locked).
A failure abandons that one mutation: it is logged at DEBUG level, handed to
the optional failure callback and reported as False. Nothing is retried and
nothing is raised, so a bad event never stops the watchers.
"""

import logging
import os
import shutil
from typing import Callable, Optional

from file_sync.utils.platform import clear_blocking_attributes

logger = logging.getLogger(__name__)

FailureCallback = Callable[[str, str, Exception], None]


class FileOperations:
    """Filesystem mutations with per-operation error suppression.

    Attributes:
        on_failure: Callback receiving (operation, path, error) for each
                    abandoned mutation
    """

    def __init__(self, on_failure: Optional[FailureCallback] = None):
        self.on_failure = on_failure

    def _failed(self, operation: str, path: str, error: Exception) -> bool:
        logger.debug(f"{operation} failed for {path}: {error}")
        if self.on_failure:
            try:
                self.on_failure(operation, path, error)
            except Exception as cb_error:
                logger.error(f"on_failure callback error: {cb_error}")
        return False

    def clear_attributes(self, path: str) -> bool:
        """Clear read-only/system attributes; failure is not reported."""
        return clear_blocking_attributes(path)

    def copy_file(self, src: str, dst: str) -> bool:
        """Copy src over dst, preserving its modification time.

        Missing parent directories of dst are created first.
        """
        try:
            parent = os.path.dirname(dst)
            if parent and not os.path.isdir(parent):
                os.makedirs(parent, exist_ok=True)
            shutil.copy2(src, dst)
            logger.debug(f"Copied {src} -> {dst}")
            return True
        except OSError as e:
            return self._failed("copy", dst, e)

    def make_directory(self, path: str) -> bool:
        """Create a directory (and missing parents)."""
        try:
            os.makedirs(path, exist_ok=True)
            return True
        except OSError as e:
            return self._failed("mkdir", path, e)

    def remove_file(self, path: str) -> bool:
        try:
            os.remove(path)
            return True
        except OSError as e:
            return self._failed("remove", path, e)

    def remove_directory(self, path: str) -> bool:
        """Remove an empty directory. Non-empty directories are left alone."""
        try:
            os.rmdir(path)
            return True
        except OSError as e:
            return self._failed("rmdir", path, e)

    def move(self, src: str, dst: str) -> bool:
        """Rename src to dst within one volume."""
        try:
            os.rename(src, dst)
            return True
        except OSError as e:
            return self._failed("rename", src, e)
