#!/usr/bin/env python3
"""
Fixed-width console formatting that coexists with ANSI color codes

Two independent passes:
- trunc_pad() fits a (possibly colored) string into a console column
- strip_escapes() removes color codes from text destined for the report file
"""

from lib.constants import (
    ANSI_STYLE_PATTERN, ANSI_RESET, ELLIPSIS, ELLIPSIS_WIDTH,
)


def strip_escapes(text: str) -> str:
    """Remove every \\x1b[Nm / \\x1b[N;Nm sequence"""
    return ANSI_STYLE_PATTERN.sub('', text)


def visible_len(text: str) -> int:
    """Number of code points left once color codes are stripped"""
    return len(strip_escapes(text))


def colorize(text: str, style: str) -> str:
    """Wrap text in an ANSI style and a reset"""
    return f"{style}{text}{ANSI_RESET}"


def trunc_pad(text: str, width: int, side: str = 'l') -> str:
    """
    Truncate or pad text to width columns.

    Length is counted in code points. A string longer than width keeps its
    first width-3 code points followed by a dim "..." marker. A shorter one is
    padded with spaces: on the right when side is 'l', on the left when 'r'.
    A width of zero or less yields ''.
    """
    if width <= 0:
        return ''

    length = len(text)
    if length > width:
        return text[:max(width - ELLIPSIS_WIDTH, 0)] + ELLIPSIS

    padding = ' ' * (width - length)
    if side == 'r':
        return padding + text
    return text + padding
