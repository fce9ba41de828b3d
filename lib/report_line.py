#!/usr/bin/env python3
"""
Report record assembly

Turns parsed filename fields, a catalog entry and a probed duration into one
ReportRecord, which renders both as a tab-separated report line and as an
aligned console line.
"""

from dataclasses import dataclass
from typing import Iterable

from lib.catalog import CatalogEntry
from lib.classifiers import classify_duration, classify_resolution
from lib.constants import (
    CATEGORY_SHOW, DURATION_LABEL_FORMAT, SHOW_EPISODE_FORMAT,
    SHOW_PLACEHOLDER_FORMAT, TITLE_WIDTH, CATALOG_ID_WIDTH,
    DURATION_LABEL_WIDTH, FILENAME_WIDTH, COLUMN_SEPARATOR,
    DEFAULT_DURATION_BUCKETS,
)
from lib.display import trunc_pad
from lib.parser import FilenameFields
from lib.timecode import seconds_to_hhmmss


@dataclass(frozen=True)
class ReportRecord:
    """One line of the report"""
    display_name: str
    catalog_id: str
    duration_label: str   # e.g. "60 минут"
    resolution: str       # 'SD' or 'HD'
    timecode: str         # HH:MM:SS
    file_name: str

    @property
    def duration_resolution(self) -> str:
        return f"{self.duration_label} {self.resolution}"

    def to_tsv(self) -> str:
        """Tab-separated report line, newline-terminated"""
        return '\t'.join([
            self.display_name,
            self.catalog_id,
            self.duration_resolution,
            self.timecode,
            self.file_name,
        ]) + '\n'


def display_name(fields: FilenameFields, entry: CatalogEntry) -> str:
    """Catalog title, with season/episode appended for shows"""
    if entry.category != CATEGORY_SHOW:
        return entry.title
    if fields.season and fields.episode:
        return SHOW_EPISODE_FORMAT.format(
            title=entry.title, season=fields.season, episode=fields.episode
        )
    return SHOW_PLACEHOLDER_FORMAT.format(title=entry.title)


class ReportLineBuilder:
    """Compose classifiers and formatters into report records"""

    def __init__(self, buckets: Iterable[int] = DEFAULT_DURATION_BUCKETS):
        self.buckets = tuple(sorted(buckets, reverse=True))

    def build(self, fields: FilenameFields, entry: CatalogEntry,
              duration_seconds: float, file_name: str) -> ReportRecord:
        minutes = int(duration_seconds // 60)
        bucket = classify_duration(minutes, self.buckets)
        return ReportRecord(
            display_name=display_name(fields, entry),
            catalog_id=fields.catalog_id,
            duration_label=DURATION_LABEL_FORMAT.format(bucket=bucket),
            resolution=classify_resolution(fields.width, fields.height),
            timecode=seconds_to_hhmmss(duration_seconds),
            file_name=file_name,
        )

    def console_line(self, record: ReportRecord, index: int, total: int) -> str:
        """
        Aligned progress line: "  7/120  Title...  12345  60 минут HD  00:47:12  file.mp4"

        index is 1-based and right-justified to the digit count of total.
        """
        counter = f"{index:>{len(str(total))}d}/{total}"
        columns = [
            counter,
            trunc_pad(record.display_name, TITLE_WIDTH, 'l'),
            trunc_pad(record.catalog_id, CATALOG_ID_WIDTH, 'l'),
            trunc_pad(record.duration_resolution, DURATION_LABEL_WIDTH, 'l'),
            record.timecode,
            trunc_pad(record.file_name, FILENAME_WIDTH, 'l'),
        ]
        return COLUMN_SEPARATOR.join(columns) + '\n'
