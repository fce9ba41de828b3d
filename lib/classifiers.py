#!/usr/bin/env python3
"""
Duration bucket and resolution classification

Both classifiers are pure functions of their inputs.
"""

from typing import Iterable

from lib.constants import (
    SD_MAX_WIDTH, SD_MAX_HEIGHT, RESOLUTION_SD, RESOLUTION_HD,
)


def classify_duration(minutes: int, buckets: Iterable[int]) -> int:
    """
    Map a whole-minute duration to its reporting bucket.

    Buckets are sorted descending first. The result is the smallest bucket
    that is >= minutes; durations above every bucket are clamped into the
    largest one.

        30 < x <= 60  ->  60
    """
    ordered = sorted(buckets, reverse=True)
    if not ordered:
        raise ValueError("duration bucket list is empty")

    bucket = ordered[0]
    for candidate in ordered[1:]:
        if minutes <= candidate:
            bucket = candidate
        else:
            break
    return bucket


def classify_resolution(width: int, height: int) -> str:
    """Return 'HD' for anything larger than PAL SD (1024x576), else 'SD'"""
    if width > SD_MAX_WIDTH or height > SD_MAX_HEIGHT:
        return RESOLUTION_HD
    return RESOLUTION_SD
