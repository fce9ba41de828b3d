#!/usr/bin/env python3
"""
Filename parser for extracting catalog metadata from media filenames

Filenames follow one fixed layout:

    [sNNeNN][_]coid<catalog id>..._r<width>x<height>p...

e.g. "s01e02coid12345_r1920x1080p.mp4". There are no fallback patterns:
anything that does not fit is rejected rather than partially parsed.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from lib.constants import FILENAME_PATTERN, FILENAME_PATTERN_HINT
from lib.errors import MalformedFilenameError


@dataclass(frozen=True)
class FilenameFields:
    """Container for the fields encoded in a filename"""
    catalog_id: str
    width: int = 0
    height: int = 0
    season: str = ''   # '' when the sNNeNN prefix is absent
    episode: str = ''


@dataclass(frozen=True)
class ParseResult:
    """Outcome of FilenameParser.parse(): either fields or an error reason"""
    filename: str
    fields: Optional[FilenameFields] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.fields is not None

    def unwrap(self) -> FilenameFields:
        """Return the parsed fields or raise MalformedFilenameError"""
        if self.fields is None:
            raise MalformedFilenameError(self.filename, FILENAME_PATTERN_HINT)
        return self.fields


def _to_int(value: Optional[str]) -> int:
    """Parse a numeric group, 0 when absent or unparsable"""
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


class FilenameParser:
    """Parse catalog id, season/episode and resolution from a filename"""

    def __init__(self, pattern=FILENAME_PATTERN):
        self.pattern = pattern

    def parse(self, filename: str) -> ParseResult:
        """
        Extract FilenameFields from a file name (or path; only the base name is used).

        Returns a failed ParseResult when the pattern does not match or the
        catalog id group is empty.
        """
        name = Path(filename).name
        match = self.pattern.search(name)
        if not match:
            return ParseResult(
                filename=name,
                error=f"does not match {FILENAME_PATTERN_HINT}",
            )

        season, episode, catalog_id, width, height = match.groups()
        if not catalog_id or catalog_id == name:
            return ParseResult(
                filename=name,
                error=f"no catalog id, expected {FILENAME_PATTERN_HINT}",
            )

        return ParseResult(
            filename=name,
            fields=FilenameFields(
                catalog_id=catalog_id,
                width=_to_int(width),
                height=_to_int(height),
                season=season or '',
                episode=episode or '',
            ),
        )
