#!/usr/bin/env python3
"""
Seconds to HH:MM:SS timecode conversion
"""

import math


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)"""
    if value < 0:
        return int(math.ceil(value - 0.5))
    return int(math.floor(value + 0.5))


def seconds_to_hhmmss(seconds: float) -> str:
    """
    Convert seconds (SS or SS.MS) to a zero-padded HH:MM:SS timecode.

    Sub-second remainders are rounded to the nearest second and carried into
    minutes and hours, so 59.6 becomes 00:01:00 rather than 00:00:60.
    Hours are not capped and simply grow past two digits.
    """
    total = round_half_away(seconds)
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"
