"""File discovery utilities.

Patterns are checked against strict glob rules (classes with optional
``^``, ``a-z`` ranges, ``\\`` escapes) so that malformed classes are
reported instead of silently matched literally. Expansion itself is
glob.glob, where ``[!...]`` negates a class and ``*`` also matches names
starting with a dot.
"""

import glob

from .errors import PatternInvalid


def _class_char(pattern: str, i: int) -> int:
    """Consume one (possibly escaped) character inside a class; return the next index."""
    if i >= len(pattern) or pattern[i] in "-]":
        raise PatternInvalid(pattern, "syntax error in pattern")
    if pattern[i] == "\\":
        i += 1
        if i >= len(pattern):
            raise PatternInvalid(pattern, "syntax error in pattern")
    return i + 1


def _skip_class(pattern: str, i: int) -> int:
    """Validate the class opening at pattern[i] == '['; return the index after its ']'."""
    i += 1
    if i < len(pattern) and pattern[i] == "^":
        i += 1
    ranges = 0
    while True:
        if i < len(pattern) and pattern[i] == "]" and ranges:
            return i + 1
        i = _class_char(pattern, i)
        if i < len(pattern) and pattern[i] == "-":
            i = _class_char(pattern, i + 1)
        ranges += 1


def validate_pattern(pattern: str) -> None:
    """Reject patterns that cannot be expanded.

    A class runs from ``[`` to the first ``]`` that follows at least one
    character or range, so ``[[]`` is valid and ``[]]`` is not.

    Raises:
        PatternInvalid: On an empty pattern, a NUL byte, a trailing escape
            or a malformed character class.
    """
    if not pattern:
        raise PatternInvalid(pattern, "empty pattern")
    if "\0" in pattern:
        raise PatternInvalid(pattern, "embedded NUL byte")

    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "[":
            i = _skip_class(pattern, i)
        elif char == "\\":
            if i + 1 >= len(pattern):
                raise PatternInvalid(pattern, "syntax error in pattern")
            i += 2
        else:
            i += 1


def expand_pattern(pattern: str) -> list[str]:
    """Expand a glob pattern to matching file names.

    Args:
        pattern: Shell-style pattern (``*``, ``?``, ``[...]``).

    Returns:
        Sorted list of matching paths, as written relative to the pattern,
        hidden files included.

    Raises:
        PatternInvalid: If the pattern is malformed.
    """
    validate_pattern(pattern)
    return sorted(glob.glob(pattern, include_hidden=True))
