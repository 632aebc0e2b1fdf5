"""Exceptions raised by the scanning core."""

from typing import Optional


class DepextifyError(Exception):
    """Base class for all depextify errors."""


class ShellParseError(DepextifyError):
    """
    A shell fragment could not be parsed.

    Attributes:
        line: 1-based line of the first offending node (fragment-relative)
        column: 1-based column of the first offending node
    """

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} at {line}:{column}"
        super().__init__(message)


class ScanError(DepextifyError):
    """A fatal error that aborts the whole scan (missing target, unreadable directory)."""
