"""Translation of paths between the two synchronized roots.

A path under one root is mapped to the other root by swapping the root
prefix. No normalization of "..", symlinks or case is performed: paths are
taken exactly as the watcher reports them.
"""

import os
from pathlib import Path
from typing import Optional, Union

from file_sync.exceptions import PathOutsideRootError


def normalize_root(root: Union[str, Path]) -> str:
    """Return an absolute root path that always ends with a separator.

    Args:
        root: Root directory

    Returns:
        Absolute path string ending with os.sep
    """
    root = os.path.abspath(os.fspath(root))
    if not root.endswith(os.sep):
        root += os.sep
    return root


def starts_with_root(path: str, root: str, case_sensitive: bool = True) -> bool:
    """Check whether path lies under root by plain prefix comparison."""
    if case_sensitive:
        return path.startswith(root)
    return path[:len(root)].casefold() == root.casefold()


def map_path(
    path: str,
    from_root: str,
    to_root: str,
    case_sensitive: bool = True,
) -> str:
    """Map a path rooted in from_root into to_root.

    Args:
        path: Absolute path under from_root
        from_root: Root prefix to strip
        to_root: Root prefix to prepend
        case_sensitive: Compare the prefix case-sensitively

    Returns:
        The equivalent path under to_root

    Raises:
        PathOutsideRootError: If path does not start with from_root

    Example:
        >>> map_path("/a/docs/x.txt", "/a/", "/b/")
        '/b/docs/x.txt'
    """
    if not starts_with_root(path, from_root, case_sensitive):
        raise PathOutsideRootError(path, from_root)
    return to_root + path[len(from_root):]


class RootPair:
    """The source and destination roots of one sync pair.

    Attributes:
        source: Normalized source root
        destination: Normalized destination root
        case_sensitive: Whether prefix matching respects case
    """

    def __init__(
        self,
        source: Union[str, Path],
        destination: Union[str, Path],
        case_sensitive: bool = True,
    ):
        self.source = normalize_root(source)
        self.destination = normalize_root(destination)
        self.case_sensitive = case_sensitive

    def to_opposite(self, path: str) -> Optional[str]:
        """Map a path under either root onto the other root.

        The source root is tried first, then the destination root.

        Returns:
            The mapped path, or None if path is outside both roots
        """
        if starts_with_root(path, self.source, self.case_sensitive):
            return map_path(path, self.source, self.destination, self.case_sensitive)
        if starts_with_root(path, self.destination, self.case_sensitive):
            return map_path(path, self.destination, self.source, self.case_sensitive)
        return None

    def __repr__(self) -> str:
        return f"RootPair(source={self.source!r}, destination={self.destination!r})"
