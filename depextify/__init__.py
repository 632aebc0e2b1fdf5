"""depextify: find the external commands a shell script depends on.

Scans shell scripts, Makefiles, Dockerfiles, CI workflows and Taskfiles and
reports every external executable they invoke, with its position.
"""

__version__ = "0.1.0"

from depextify.core import (
    Occurrence,
    ScanConfig,
    ScanResult,
    ScanError,
    ShellParseError,
    analyze_shell_code,
)
from depextify.extractors import get_extractor, is_shell_file
from depextify.scanner import Scanner, scan

__all__ = [
    "__version__",
    "Occurrence",
    "ScanConfig",
    "ScanResult",
    "ScanError",
    "ShellParseError",
    "analyze_shell_code",
    "get_extractor",
    "is_shell_file",
    "Scanner",
    "scan",
]
