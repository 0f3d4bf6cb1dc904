"""
Helpers for splitting and compiling comma-separated option values.
"""

import re
from typing import List, Pattern, Tuple

_UNESCAPED_COMMA = re.compile(r"(?<!\\),")


def parse_regex_list(value: str) -> List[str]:
    """
    Split a comma-separated list of regular expressions.

    A backslash-escaped comma (``\\,``) is kept as a literal comma inside the
    expression. Entries are trimmed and blank entries are dropped.
    """
    if not value:
        return []
    patterns = []
    for item in _UNESCAPED_COMMA.split(value):
        item = item.replace("\\,", ",").strip()
        if item:
            patterns.append(item)
    return patterns


def compile_regex_list(value: str) -> Tuple[Pattern, ...]:
    """Compile each entry of a comma-separated regex list, ignoring case."""
    return tuple(re.compile(pattern, re.IGNORECASE) for pattern in parse_regex_list(value))


def matches_any(patterns, text: str) -> bool:
    """Return True if any pattern matches the whole of ``text``."""
    return any(pattern.fullmatch(text) for pattern in patterns)
