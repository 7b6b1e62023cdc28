"""Glob-style ignore patterns.

Patterns use ``*`` for any run of characters and ``?`` for exactly one
character; everything else is literal. A pattern must match the whole
reported path, case-insensitively. Forward and back slashes are treated as
the same separator so one pattern set works for Windows, UNC and POSIX
paths::

    *.exe       any exe file anywhere in the tree
    */tmp/*     anything below a directory called tmp
"""

import re
from functools import lru_cache
from typing import Iterable, List, Pattern


def _unify_separators(text: str) -> str:
    return text.replace("\\", "/")


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> Pattern:
    """Translate a glob pattern into an anchored, case-insensitive regex."""
    parts = []
    for char in _unify_separators(pattern):
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.IGNORECASE | re.DOTALL)


def matches(path: str, patterns: Iterable[str]) -> bool:
    """Return True if any pattern matches the full path.

    Args:
        path: Path as reported by the watcher
        patterns: Glob patterns

    Example:
        >>> matches("C:\\\\x\\\\tmp\\\\y.txt", ["*/tmp/*"])
        True
    """
    candidate = _unify_separators(path)
    return any(compile_pattern(p).fullmatch(candidate) for p in patterns)


class IgnoreMatcher:
    """A fixed, ordered set of ignore patterns.

    Attributes:
        patterns: The configured glob patterns
    """

    def __init__(self, patterns: Iterable[str] = ()):
        self.patterns: List[str] = [p for p in patterns if p]
        self._compiled = [compile_pattern(p) for p in self.patterns]

    def matches(self, path: str) -> bool:
        """Return True if the path should be ignored."""
        candidate = _unify_separators(path)
        for regex in self._compiled:
            if regex.fullmatch(candidate):
                return True
        return False

    def matches_any(self, *paths: str) -> bool:
        """Return True if any of the paths should be ignored."""
        return any(self.matches(path) for path in paths)

    def __bool__(self) -> bool:
        return bool(self.patterns)

    def __repr__(self) -> str:
        return f"IgnoreMatcher({self.patterns!r})"
