from __future__ import annotations

from typing import Optional


class ReportError(Exception):
    """Base class for everything that aborts a report run."""


class ReadError(ReportError):
    pass


class WriteError(ReportError):
    pass


class FormatError(ReportError):
    """Input is not well-formed delimited text."""

    def __init__(self, message: str, line: Optional[int] = None):
        super().__init__(message)
        self.line = line


class DataError(ReportError):
    """A cell could not be turned into a price or quantity."""

    def __init__(self, message: str, item: Optional[str] = None, line: Optional[int] = None):
        super().__init__(message)
        self.item = item
        self.line = line
