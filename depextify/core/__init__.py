"""
Core Layer

Shell parsing, classification tables and position translation.
"""

from depextify.core.errors import (
    DepextifyError,
    ScanError,
    ShellParseError,
)
from depextify.core.models import (
    CommandPositions,
    Occurrence,
    Position,
    ScanConfig,
    ScanResult,
)
from depextify.core.lists import (
    BUILTINS,
    COREUTILS,
    COMMON,
    CATEGORIES,
    build_suppression_set,
    get_builtins,
    get_coreutils,
    get_common,
)
from depextify.core.shell import analyze_shell_code

__all__ = [
    # errors
    "DepextifyError",
    "ScanError",
    "ShellParseError",
    # models
    "CommandPositions",
    "Occurrence",
    "Position",
    "ScanConfig",
    "ScanResult",
    # lists
    "BUILTINS",
    "COREUTILS",
    "COMMON",
    "CATEGORIES",
    "build_suppression_set",
    "get_builtins",
    "get_coreutils",
    "get_common",
    # shell
    "analyze_shell_code",
]
