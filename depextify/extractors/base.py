"""Extractor base class.

An extractor turns the raw bytes of one file into command positions expressed
in that file's own coordinates.
"""

from abc import ABC, abstractmethod

from depextify.core.models import CommandPositions
from depextify.core.positions import shift_position
from depextify.core.shell import analyze_shell_code


def decode_content(content: bytes) -> str:
    return content.decode("utf-8", errors="replace")


def merge_positions(results: CommandPositions, commands: CommandPositions) -> None:
    """Append every position of commands to results, keeping discovery order."""
    for cmd, positions in commands.items():
        results.setdefault(cmd, []).extend(positions)


def merge_shifted(results: CommandPositions, commands: CommandPositions, anchor_line: int) -> None:
    """Merge fragment positions after moving them to anchor_line."""
    merge_positions(results, {
        cmd: [shift_position(anchor_line, p) for p in positions]
        for cmd, positions in commands.items()
    })


class Extractor(ABC):
    """Base class for command extractors."""

    name: str = ""

    @abstractmethod
    def extract(self, content: bytes) -> CommandPositions:
        """
        Extract the commands invoked by a file.

        Args:
            content: full file content

        Returns:
            command name -> positions in host-file coordinates
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ShellExtractor(Extractor):
    """Extracts commands from a plain shell script.

    A syntax error anywhere in the script raises ShellParseError and the
    caller drops the whole file.
    """

    name = "shell"

    def extract(self, content: bytes) -> CommandPositions:
        return analyze_shell_code(decode_content(content))

