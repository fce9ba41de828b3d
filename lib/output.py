#!/usr/bin/env python3
"""
Input list reading, report file writing and console output

The report file gets plain text only; the console keeps its colors.
"""

import sys
import logging
from pathlib import Path
from typing import List, TextIO, Optional

from lib.constants import (
    ANSI_RED_BOLD, ANSI_YELLOW_BOLD, ANSI_HIDE_CURSOR, ANSI_SHOW_CURSOR,
)
from lib.display import strip_escapes, colorize
from lib.errors import InputListError, OutputCreateError, WriteFailedError

logger = logging.getLogger(__name__)


def read_path_list(list_path: Path) -> List[str]:
    """Read one path per line; blank lines are skipped. Empty list is an error."""
    try:
        with open(list_path, 'r', encoding='utf-8-sig') as f:
            paths = [line.rstrip('\r\n') for line in f]
    except OSError as e:
        raise InputListError(f"Could not read {list_path}: {e}") from e

    paths = [p for p in paths if p.strip()]
    if not paths:
        raise InputListError(f"ERROR: \"{list_path}\" is empty.")
    return paths


class ReportFileWriter:
    """Append-only writer for the report file (truncated on open)"""

    def __init__(self, output_path: Path):
        self.output_path = output_path
        self._file: Optional[TextIO] = None
        self.lines_written = 0

    def open(self) -> 'ReportFileWriter':
        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self.output_path, 'w', encoding='utf-8', newline='\n')
        except OSError as e:
            raise OutputCreateError(f"Could not create {self.output_path}: {e}") from e
        return self

    def write(self, text: str):
        """Write text with all color codes removed"""
        if self._file is None:
            raise WriteFailedError(f"{self.output_path} is not open")
        try:
            self._file.write(strip_escapes(text))
            self._file.flush()
        except OSError as e:
            raise WriteFailedError(f"Could not write to {self.output_path}: {e}") from e
        self.lines_written += 1

    def close(self):
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> 'ReportFileWriter':
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class ConsoleWriter:
    """Progress and diagnostics on the terminal, printed with the cursor hidden"""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def print(self, *parts):
        self.stream.write(ANSI_HIDE_CURSOR)
        self.stream.write(''.join(str(p) for p in parts))
        self.stream.write(ANSI_SHOW_CURSOR)
        self.stream.flush()

    def print_line(self, line: str):
        self.print(line)

    def fatal(self, message: str):
        self.print(colorize(message, ANSI_RED_BOLD), '\n')

    def warn(self, message: str):
        self.print(colorize(message, ANSI_YELLOW_BOLD), '\n')
