"""Wildcard matching for uninstall selection.

``*`` matches any sequence of characters; every other character is taken
literally. Matching is unanchored: a pattern selects a name when it
matches anywhere inside it.
"""

import re
from collections.abc import Iterable

WILDCARD = "*"


def compile_wildcard(pattern: str) -> re.Pattern[str]:
    """Translate a wildcard pattern into a compiled regular expression.

    Example:
        >>> compile_wildcard("redis*").pattern
        'redis.*'
    """
    parts = (re.escape(part) for part in pattern.split(WILDCARD))
    return re.compile(".*".join(parts))


def filter_names(pattern: str, names: Iterable[str]) -> list[str]:
    """Return the names selected by ``pattern``, keeping input order."""
    regex = compile_wildcard(pattern)
    return [name for name in names if regex.search(name)]
