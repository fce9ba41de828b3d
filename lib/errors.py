#!/usr/bin/env python3
"""
Error types for the report pipeline

Every error is fatal to the whole batch: build_report.main() catches
ReportError, prints one diagnostic line and exits non-zero.
"""

from typing import Optional


class ReportError(Exception):
    """Base class for all batch-aborting errors"""


class InputListError(ReportError):
    """Input path list is missing, unreadable or empty"""


class OutputCreateError(ReportError):
    """Report file could not be created"""


class WriteFailedError(ReportError):
    """Appending a record to the report file failed"""


class PathNotFoundError(ReportError):
    """An input path does not exist"""

    def __init__(self, path: str):
        super().__init__(f"{path}: No such file or directory.")
        self.path = path


class MalformedFilenameError(ReportError):
    """Filename does not match the catalog filename pattern"""

    def __init__(self, filename: str, expected: str):
        super().__init__(f"FileName is wrong: {filename}")
        self.filename = filename
        self.expected = expected


class CredentialMissingError(ReportError):
    """Catalog client id is not configured"""


class CatalogLookupError(ReportError):
    """
    Catalog lookup failed.

    cause is one of: 'network', 'http', 'encoding', 'decode', 'empty'
    """

    def __init__(self, message: str, cause: str, catalog_id: Optional[str] = None):
        super().__init__(message)
        self.cause = cause
        self.catalog_id = catalog_id


class ProbeError(ReportError):
    """Duration probe could not read metadata from a file"""


class DurationUnparsableError(ReportError):
    """Probe returned a duration string that is not a number of seconds"""
