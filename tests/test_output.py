#!/usr/bin/env python3
"""
Test suite for lib/output.py — input list, report file, console
"""

import io
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from lib.constants import ANSI_HIDE_CURSOR, ANSI_SHOW_CURSOR, ANSI_RED_BOLD, ANSI_RESET
from lib.errors import InputListError, OutputCreateError, WriteFailedError
from lib.output import ConsoleWriter, ReportFileWriter, read_path_list


class TestReadPathList:

    def test_lines_in_order(self, tmp_path):
        path = tmp_path / 'fileList.txt'
        path.write_text("/a/one.mp4\n/b/two.mp4\n\n", encoding='utf-8')
        assert read_path_list(path) == ['/a/one.mp4', '/b/two.mp4']

    def test_crlf_and_spaces_kept(self, tmp_path):
        path = tmp_path / 'fileList.txt'
        path.write_bytes(b"/a/with space.mp4\r\n")
        assert read_path_list(path) == ['/a/with space.mp4']

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputListError):
            read_path_list(tmp_path / 'absent.txt')

    def test_empty_file(self, tmp_path):
        path = tmp_path / 'fileList.txt'
        path.write_text("", encoding='utf-8')
        with pytest.raises(InputListError) as exc:
            read_path_list(path)
        assert 'is empty' in str(exc.value)


class TestReportFileWriter:

    def test_strips_escapes_and_truncates_existing(self, tmp_path):
        path = tmp_path / 'report.txt'
        path.write_text("old contents\n", encoding='utf-8')
        with ReportFileWriter(path) as writer:
            writer.write("\x1b[31;1mMovie\x1b[0m\t1\n")
            writer.write("Second\t2\n")
        assert path.read_text(encoding='utf-8') == "Movie\t1\nSecond\t2\n"
        assert writer.lines_written == 2

    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / 'out' / 'report.txt'
        with ReportFileWriter(path) as writer:
            writer.write("x\n")
        assert path.exists()

    def test_cannot_create(self, tmp_path):
        with pytest.raises(OutputCreateError):
            ReportFileWriter(tmp_path).open()

    def test_write_after_close(self, tmp_path):
        writer = ReportFileWriter(tmp_path / 'report.txt').open()
        writer.close()
        with pytest.raises(WriteFailedError):
            writer.write("x\n")


class TestConsoleWriter:

    def test_cursor_hidden_while_printing(self):
        stream = io.StringIO()
        ConsoleWriter(stream).print_line("hello\n")
        assert stream.getvalue() == ANSI_HIDE_CURSOR + "hello\n" + ANSI_SHOW_CURSOR

    def test_fatal_is_red(self):
        stream = io.StringIO()
        ConsoleWriter(stream).fatal("boom")
        assert ANSI_RED_BOLD + "boom" + ANSI_RESET + "\n" in stream.getvalue()
