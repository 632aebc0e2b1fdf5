"""Makefile recipe extraction."""

import logging

from depextify.core.errors import ShellParseError
from depextify.core.models import CommandPositions
from depextify.core.positions import split_lines
from depextify.core.shell import analyze_shell_code
from depextify.extractors.base import Extractor, decode_content, merge_shifted

logger = logging.getLogger(__name__)

# Recipe prefixes: silent, ignore errors, always execute
RECIPE_MODIFIERS = "@-+"


def recipe_to_shell(line: str) -> str:
    """
    Turn a tab-prefixed recipe line into a shell line of the same width.

    The leading tab and any recipe modifiers that follow it become spaces, so
    every column keeps its position.
    """
    chars = list(line)
    chars[0] = " "
    for i in range(1, len(chars)):
        if chars[i] in RECIPE_MODIFIERS:
            chars[i] = " "
        elif chars[i] in " \t":
            continue
        else:
            break
    return "".join(chars)


class MakefileExtractor(Extractor):
    """Extracts commands from Makefile recipe lines.

    Each recipe line is analysed on its own; a line that does not parse is
    skipped and the remaining lines are still analysed.
    """

    name = "makefile"

    def extract(self, content: bytes) -> CommandPositions:
        results: CommandPositions = {}

        for line_number, line in enumerate(split_lines(decode_content(content)), 1):
            if not line.startswith("\t"):
                continue

            script = recipe_to_shell(line)
            try:
                commands = analyze_shell_code(script)
            except ShellParseError as e:
                logger.debug(f"Skipping recipe on line {line_number}: {e}")
                continue

            merge_shifted(results, commands, line_number)

        return results
