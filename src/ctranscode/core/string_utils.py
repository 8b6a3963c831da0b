"""Line-oriented text utilities.

This module splits captured process output into lines and filters lines by
literal substring. Both functions are pure and order preserving.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

# "\r\n" and "\n\r" must be tried before the single-character separators so
# that each two-character pair counts as one line break.
_LINE_BREAK_RE = re.compile(r"\r\n|\n\r|\r|\n")


def split_lines(text: str) -> tuple[str, ...]:
    """Split text into lines on any of the four newline conventions.

    The separators "\\r\\n", "\\n\\r", "\\r" and "\\n" each count as a single
    line break. A final line without a terminator is kept. The empty segment
    that follows a terminating line break is dropped, so "a\\nb\\n" and
    "a\\nb" both yield two lines.

    Args:
        text: Captured text.

    Returns:
        Tuple of lines without their terminators. Empty text yields ().

    Example:
        >>> split_lines("a\\r\\nb\\n\\rc\\rd\\ne")
        ('a', 'b', 'c', 'd', 'e')
    """
    if not text:
        return ()
    lines = _LINE_BREAK_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return tuple(lines)


def grep_lines(lines: Iterable[str], substring: str) -> tuple[str, ...]:
    """Select lines containing a literal substring.

    The match is a plain, case-sensitive ``in`` test; the substring is never
    interpreted as a pattern.

    Args:
        lines: Lines to search.
        substring: Literal text to look for.

    Returns:
        Matching lines in their original order.

    Example:
        >>> grep_lines(["Video: h264", "Audio: aac"], "Video:")
        ('Video: h264',)
    """
    return tuple(line for line in lines if substring in line)
