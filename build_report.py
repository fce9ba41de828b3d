#!/usr/bin/env python3
"""
build_report.py - Duration report builder (v1.0)

Reads a list of media file paths and writes one tab-separated report line per
file: catalog title, catalog id, duration bucket + SD/HD, HH:MM:SS, file name.

Pipeline per file (strictly sequential, input order):
1. Check the path exists
2. Parse filename → catalog id, season/episode, resolution
3. Catalog lookup → title + category (shows get season/episode appended)
4. ffprobe → duration in seconds
5. Classify duration bucket and resolution, format timecode
6. Append plain-text line to the report, print colored progress line

Any failure aborts the whole batch. Lines already written stay in the report.
"""

import sys
import logging
import argparse
from collections import defaultdict
from functools import partial
from pathlib import Path
from typing import Callable, List, Optional

import colorama

from lib.catalog import CatalogClient
from lib.config import ReportConfig, load_config
from lib.constants import DEFAULT_CONFIG_PATH, FILENAME_PATTERN_HINT
from lib.errors import (
    ReportError, PathNotFoundError, MalformedFilenameError, CatalogLookupError,
    CredentialMissingError,
)
from lib.output import ConsoleWriter, ReportFileWriter, read_path_list
from lib.parser import FilenameParser
from lib.probe import probe_duration, parse_duration
from lib.report_line import ReportLineBuilder, ReportRecord

logger = logging.getLogger(__name__)


class BatchDriver:
    """Run the report pipeline over a list of paths, failing fast"""

    def __init__(self, config: ReportConfig, catalog=None,
                 probe: Optional[Callable[[str], str]] = None):
        self.config = config
        self.parser = FilenameParser()
        self.builder = ReportLineBuilder(config.duration_buckets)
        self.catalog = catalog or CatalogClient(
            api_url=config.catalog_api_url,
            client_id=config.catalog_client_id,
            timeout=config.catalog_timeout,
        )
        self.probe = probe or partial(probe_duration, ffprobe=config.ffprobe_path)
        self.stats = defaultdict(int)
        self.category_counts = defaultdict(int)

    def process_path(self, path: str) -> ReportRecord:
        """Derive the report record for one path (no output side effects)"""
        file_path = Path(path)
        if not file_path.exists():
            raise PathNotFoundError(path)

        fields = self.parser.parse(file_path.name).unwrap()

        logger.debug(f"Looking up catalog id {fields.catalog_id}")
        entry = self.catalog.lookup(fields.catalog_id)
        if not entry.complete:
            raise CatalogLookupError(
                f"Empty title or category for catalog id {fields.catalog_id}",
                'empty', fields.catalog_id,
            )
        duration = parse_duration(self.probe(path))
        record = self.builder.build(fields, entry, duration, file_path.name)
        self.category_counts[entry.category] += 1
        return record

    def run(self, paths: List[str], writer: ReportFileWriter,
            console: ConsoleWriter) -> int:
        """Process every path in order; returns the number of records written"""
        total = len(paths)
        for i, path in enumerate(paths, 1):
            record = self.process_path(path)
            writer.write(record.to_tsv())
            console.print_line(self.builder.console_line(record, i, total))
            self.stats['processed'] += 1
        return self.stats['processed']

    def log_summary(self, output_path: Path):
        """Log the completion summary with per-category counts"""
        logger.info(f"Wrote {self.stats['processed']} lines to {output_path}")
        for category, count in sorted(self.category_counts.items()):
            logger.info(f"  {category:15s}: {count:4d}")


def report_error(console: ConsoleWriter, error: ReportError):
    """Print the diagnostic for a batch-aborting error"""
    logger.error(f"Aborting batch: {type(error).__name__}: {error}")
    console.fatal(str(error))
    if isinstance(error, MalformedFilenameError):
        console.print(f"MUST BE: {FILENAME_PATTERN_HINT}\n\n")
    elif isinstance(error, (CatalogLookupError, CredentialMissingError)):
        console.warn("Could not get data from the catalog")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Build a duration report for a list of media files (v1.0)',
        epilog="""
Filenames must look like: s01e02coid12345_r1920x1080p.mp4

Examples:
  python build_report.py
  python build_report.py -i fileList.txt -o report.txt
  python build_report.py --config my_config.yaml --verbose
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--config', type=Path, default=None,
                        help=f'Configuration file (default: {DEFAULT_CONFIG_PATH})')
    parser.add_argument('--file-list', '-i', type=Path, default=None,
                        help='Newline-delimited list of media paths (default: fileList.txt)')
    parser.add_argument('--output', '-o', type=Path, default=None,
                        help='Report output path (default: report.txt)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Log per-file lookups and probes')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    colorama.just_fix_windows_console()
    console = ConsoleWriter()

    try:
        config = load_config(
            args.config or Path(DEFAULT_CONFIG_PATH),
            required=args.config is not None,
        )
    except (OSError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        console.fatal(f"Invalid configuration: {e}")
        return 1

    list_path = args.file_list or config.file_list
    output_path = args.output or config.output

    driver = BatchDriver(config)
    try:
        paths = read_path_list(list_path)
        logger.info(f"Loaded {len(paths)} paths from {list_path}")
        with ReportFileWriter(output_path) as writer:
            driver.run(paths, writer, console)
    except ReportError as e:
        report_error(console, e)
        return 1

    driver.log_summary(output_path)
    return 0


if __name__ == '__main__':
    sys.exit(main())
