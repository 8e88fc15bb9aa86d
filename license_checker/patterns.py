"""Compilation of user supplied patterns.

Patterns may be written in the delimited ``/pattern/flags`` form familiar from
JavaScript and sed, or (for file and directory filters) as a bare regular
expression.
"""
from __future__ import annotations

import re
from typing import Optional

from license_checker.constants import REGEX_PATTERN
from license_checker.exceptions import InvalidPatternError

# Delimited-form flags and the Python flags they map to
FLAG_MAP: dict[str, re.RegexFlag] = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}

# Accepted for compatibility, no Python equivalent needed. Together with
# FLAG_MAP these are the letters REGEX_PATTERN accepts after the last slash.
IGNORED_FLAGS = frozenset({"g", "u"})


def _parse_flags(flags: str, value: str) -> re.RegexFlag:
    seen: set[str] = set()
    compiled = re.RegexFlag(0)

    for flag in flags:
        if flag in seen:
            raise InvalidPatternError(f"Duplicate flag '{flag}' in pattern {value}")
        seen.add(flag)

        if flag not in IGNORED_FLAGS:
            compiled |= FLAG_MAP[flag]

    return compiled


def is_delimited_pattern(value: str) -> bool:
    """Check if a string has the ``/pattern/flags`` shape."""
    return REGEX_PATTERN.match(value) is not None


def compile_pattern(value: str) -> Optional[re.Pattern[str]]:
    """Compile a ``/pattern/flags`` string to a regular expression.

    Args:
        value: String that may be a delimited pattern.

    Returns:
        The compiled pattern, or None when ``value`` is not delimited and
        should be treated as literal text.

    Raises:
        InvalidPatternError: If ``value`` is delimited but its pattern or
            flags are invalid.
    """
    shape = REGEX_PATTERN.match(value)
    if shape is None:
        return None

    pattern, flags = shape.group(1), shape.group(2)
    compiled_flags = _parse_flags(flags, value)

    try:
        return re.compile(pattern, compiled_flags)
    except re.error as e:
        raise InvalidPatternError(f"Invalid pattern {value}: {e}") from e


def compile_filter(value: str) -> re.Pattern[str]:
    """Compile a file or directory filter.

    Delimited patterns are handled by :func:`compile_pattern`; anything else
    is compiled as a bare regular expression.

    Raises:
        InvalidPatternError: If the filter is not a valid regular expression.
    """
    compiled = compile_pattern(value)
    if compiled is not None:
        return compiled

    try:
        return re.compile(value)
    except re.error as e:
        raise InvalidPatternError(f"Invalid pattern '{value}': {e}") from e
