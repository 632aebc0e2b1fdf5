"""
Data models

Positions produced by the extractors, the occurrences reported to the user
and the scan result that maps files to the commands they invoke.
"""

from dataclasses import asdict, dataclass, field
from typing import NamedTuple


class Position(NamedTuple):
    """
    Raw location of a command name.

    Attributes:
        line: line number (1-based)
        column: column in characters (1-based)
        length: length of the command name in characters
    """
    line: int
    column: int
    length: int


# command name -> positions, in discovery order
CommandPositions = dict[str, list[Position]]


@dataclass(frozen=True)
class Occurrence:
    """
    One invocation site of an external command.

    Attributes:
        line: line number in the host file (1-based)
        column: column in characters (1-based)
        length: length of the command name
        source_text: the full host line the command appears on
    """
    line: int
    column: int
    length: int
    source_text: str


@dataclass
class ScanConfig:
    """
    Options that decide what a scan visits and which commands it keeps.

    Attributes:
        no_builtins: suppress shell builtins and keywords
        no_coreutils: suppress GNU coreutils
        no_common: suppress common tools (grep, curl, git, ...)
        show_hidden: descend into dot-files and dot-directories
        extra_ignores: additional command names to suppress
        excludes: gitignore-style patterns of paths to skip
    """
    no_builtins: bool = True
    no_coreutils: bool = True
    no_common: bool = True
    show_hidden: bool = False
    extra_ignores: list[str] = field(default_factory=list)
    excludes: list[str] = field(default_factory=list)


class ScanResult(dict[str, dict[str, list[Occurrence]]]):
    """Mapping of file path -> command name -> occurrences."""

    def counts(self) -> dict[str, dict[str, int]]:
        return {
            path: {cmd: len(occs) for cmd, occs in commands.items()}
            for path, commands in self.items()
        }

    def names(self) -> dict[str, list[str]]:
        return {path: sorted(commands) for path, commands in self.items()}

    def max_line(self) -> int:
        return max(
            (occ.line for commands in self.values() for occs in commands.values() for occ in occs),
            default=0,
        )

    def to_data(self, show_pos: bool = False, show_count: bool = False) -> dict:
        """
        Build the plain-data view used by the serializers.

        Args:
            show_pos: include every occurrence with its position
            show_count: include per-command counts (ignored when show_pos is set)

        Returns:
            dict ready for json.dumps / yaml.safe_dump
        """
        if show_pos:
            return {
                path: {cmd: [asdict(occ) for occ in occs] for cmd, occs in commands.items()}
                for path, commands in self.items()
            }
        if show_count:
            return self.counts()
        return self.names()
