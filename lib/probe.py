#!/usr/bin/env python3
"""
Media duration probe via ffprobe
"""

import json
import logging
import math
import re
import subprocess
from pathlib import Path
from typing import Union

from lib.errors import ProbeError, DurationUnparsableError

logger = logging.getLogger(__name__)

# ffmpeg banner form, e.g. "  Duration: 00:47:12.36, start: 0.000000"
DURATION_HHMMSS_PATTERN = re.compile(
    r'(?:^|Duration: )(\d{2}):(\d{2}):(\d{2}(?:\.\d+)?)'
)


def probe_duration(path: Union[str, Path], ffprobe: str = 'ffprobe') -> str:
    """
    Return the container duration of a media file as reported by ffprobe.

    The value is the raw string from format.duration (seconds, fractional).
    Raises ProbeError when ffprobe is missing, fails, or reports no duration.
    """
    cmd = [
        ffprobe, '-v', 'quiet',
        '-print_format', 'json',
        '-show_format',
        str(path),
    ]
    logger.debug(f"Probing {path}")
    try:
        # Container tags may hold arbitrary bytes; only format.duration matters
        result = subprocess.run(
            cmd, capture_output=True, check=True,
            encoding='utf-8', errors='replace',
        )
    except FileNotFoundError as e:
        raise ProbeError(f"{ffprobe} not found: {e}") from e
    except subprocess.CalledProcessError as e:
        raise ProbeError(
            f"Could not get metadata from file {path} (exit {e.returncode})"
        ) from e

    try:
        data = json.loads(result.stdout)
    except ValueError as e:
        raise ProbeError(f"Could not get metadata from file {path}: {e}") from e

    duration = (data.get('format') or {}).get('duration')
    if not duration:
        raise ProbeError(f"Could not get metadata from file {path}: no duration")
    return str(duration)


def parse_duration(text: str) -> float:
    """
    Parse a probed duration into seconds.

    Accepts plain seconds ("2832.36") and HH:MM:SS.ms timecodes, optionally
    inside an ffmpeg "Duration: ..." banner line.
    """
    value = text.strip()
    try:
        seconds = float(value)
    except ValueError:
        match = DURATION_HHMMSS_PATTERN.search(value)
        if not match:
            raise DurationUnparsableError(f"Unparsable duration: {text!r}")
        hh, mm, ss = match.groups()
        seconds = int(hh) * 3600 + int(mm) * 60 + float(ss)

    if not math.isfinite(seconds) or seconds < 0:
        raise DurationUnparsableError(f"Unparsable duration: {text!r}")
    return seconds
