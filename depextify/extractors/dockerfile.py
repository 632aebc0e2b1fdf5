"""Dockerfile RUN instruction extraction.

Only the shell form of RUN is analysed. The exec form (RUN ["cmd", "arg"])
already is an argv and is skipped.
"""

import logging
import re

from depextify.core.errors import ShellParseError
from depextify.core.models import CommandPositions
from depextify.core.positions import split_lines
from depextify.core.shell import analyze_shell_code
from depextify.extractors.base import Extractor, decode_content, merge_shifted

logger = logging.getLogger(__name__)

RUN_PATTERN = re.compile(r"^[ \t]*(RUN)(?=[ \t]|$)")
# BuildKit flags such as --mount=type=cache,target=/root/.cache
OPTION_PATTERN = re.compile(r"[ \t]+(--\S+)")


def _continues(line: str) -> bool:
    return line.rstrip().endswith("\\")


def blank_options(rest: str) -> str:
    """Replace leading --flag tokens with spaces of equal width."""
    pos = 0
    while True:
        match = OPTION_PATTERN.match(rest, pos)
        if not match:
            return rest
        start, end = match.span(1)
        rest = rest[:start] + " " * (end - start) + rest[end:]
        pos = end


def run_to_shell(line: str) -> str | None:
    """
    Turn a RUN instruction line into a shell line of the same width.

    Returns:
        the shell line, or None when the line is not a shell-form RUN
    """
    match = RUN_PATTERN.match(line)
    if not match:
        return None

    rest = line[match.end(1):]
    if rest.strip().startswith("["):
        return None

    return line[:match.start(1)] + "   " + blank_options(rest)


class DockerfileExtractor(Extractor):
    """Extracts commands from RUN instructions, following line continuations."""

    name = "dockerfile"

    def extract(self, content: bytes) -> CommandPositions:
        results: CommandPositions = {}
        buffer: list[str] = []
        start_line = 0

        for line_number, line in enumerate(split_lines(decode_content(content)), 1):
            if buffer:
                stripped = line.strip()
                if not stripped or stripped.startswith("#"):
                    # Docker drops these inside a continuation; keep the line count
                    buffer.append("\\")
                    continue

                buffer.append(line)
                if not _continues(line):
                    self._analyze(buffer, start_line, results)
                    buffer = []
                continue

            script = run_to_shell(line)
            if script is None:
                continue

            start_line = line_number
            buffer = [script]
            if not _continues(line):
                self._analyze(buffer, start_line, results)
                buffer = []

        if buffer:
            while buffer and buffer[-1] == "\\":
                buffer.pop()
            if buffer:
                buffer[-1] = buffer[-1].rstrip().rstrip("\\")
                self._analyze(buffer, start_line, results)

        return results

    def _analyze(self, buffer: list[str], start_line: int, results: CommandPositions) -> None:
        try:
            commands = analyze_shell_code("\n".join(buffer))
        except ShellParseError as e:
            logger.debug(f"Skipping RUN instruction on line {start_line}: {e}")
            return
        merge_shifted(results, commands, start_line)
