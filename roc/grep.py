# roc/grep.py
from __future__ import annotations
import re

from roc.errors import InvalidPatternError


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """
    Compile a filter pattern, failing loudly on bad syntax.
    """
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise InvalidPatternError(f"invalid filter pattern {pattern!r}: {exc}") from exc


def grep(text: str, pattern: str | re.Pattern[str]) -> str:
    """
    Keep the lines of text that match pattern, in their original order.

    A line matches if it contains the pattern literally or the pattern, read
    as a regular expression, is found in it. Matching is case sensitive.
    """
    regex = pattern if isinstance(pattern, re.Pattern) else compile_pattern(pattern)
    literal = regex.pattern
    return "\n".join(
        line
        for line in text.splitlines()
        if literal in line or regex.search(line)
    )
