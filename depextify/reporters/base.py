"""
Reporter base - presentation options and the reporter interface
"""

from dataclasses import dataclass
from typing import Protocol

from depextify.core.models import ScanResult

DEFAULT_LEXER = "bash"
DEFAULT_STYLE = "monokai"


@dataclass
class ReportOptions:
    """
    How a scan result is presented.

    Attributes:
        show_count: show how often each command occurs
        show_pos: show every occurrence with its line
        is_directory: the scan target was a directory (print file headers)
        use_color: colored, syntax-highlighted output
        lexer: pygments lexer for source lines
        style: pygments style for source lines
    """
    show_count: bool = False
    show_pos: bool = False
    is_directory: bool = False
    use_color: bool = False
    lexer: str = DEFAULT_LEXER
    style: str = DEFAULT_STYLE


class Reporter(Protocol):
    """Reporter protocol"""

    def report(self, result: ScanResult, options: ReportOptions) -> None:
        """Write the report"""
        ...
