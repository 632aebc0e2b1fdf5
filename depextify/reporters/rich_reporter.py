"""
Rich text reporter - the default human-readable output

Plain mode prints sorted file and command names. Color mode styles them and
syntax-highlights each source line with the command itself in bold red.
"""

import sys
from typing import TextIO

from rich.console import Console
from rich.syntax import Syntax
from rich.text import Text

from depextify.core.models import Occurrence, ScanResult
from depextify.reporters.base import DEFAULT_LEXER, ReportOptions

PATH_STYLE = "cyan"
COMMAND_STYLE = "bold"
NUMBER_STYLE = "green"
COLON_STYLE = "yellow"
MATCH_STYLE = "bold red"


def guess_lexer(path: str, lexer: str) -> str:
    """Keep an explicit lexer; replace the default one by a guess from the file name."""
    if lexer != DEFAULT_LEXER:
        return lexer
    guessed = Syntax.guess_lexer(path)
    return guessed if guessed != "default" else DEFAULT_LEXER


def highlight_source(occurrence: Occurrence, lexer: str, style: str) -> Text:
    """
    Syntax-highlight a source line and mark the command span.

    The line is stripped first; the span is shifted by the removed indentation
    and left unmarked when it does not fit the line.
    """
    line = occurrence.source_text
    stripped = line.lstrip()
    shift = len(line) - len(stripped)
    stripped = stripped.rstrip()

    syntax = Syntax(stripped, lexer, theme=style, background_color="default")
    text = syntax.highlight(stripped)
    text.rstrip()

    start = occurrence.column - 1 - shift
    end = start + occurrence.length
    if start >= 0 and end <= len(text.plain):
        text.stylize(MATCH_STYLE, start, end)
    return text


class RichReporter:
    """Text reporter, optionally colored"""

    def __init__(self, console: Console | None = None, output: TextIO | None = None):
        self.console = console
        self.output = output or sys.stdout

    def render(self, result: ScanResult, options: ReportOptions) -> list[Text]:
        """Build the report lines; styles are only applied in color mode."""
        color = options.use_color

        def styled(value: str, style: str) -> Text:
            return Text(value, style=style) if color else Text(value)

        width = len(str(result.max_line())) if options.show_pos else 0
        indent = "  " if options.is_directory else ""
        lines: list[Text] = []

        for path in sorted(result):
            if options.is_directory:
                lines.append(styled(path, PATH_STYLE))

            lexer = guess_lexer(path, options.lexer) if color else options.lexer
            commands = result[path]

            for cmd in sorted(commands):
                occurrences = commands[cmd]
                header = Text(indent)
                header.append_text(styled(cmd, COMMAND_STYLE))
                if options.show_count or options.show_pos:
                    header.append_text(styled(":", COLON_STYLE))
                    if options.show_count:
                        header.append_text(styled(f" {len(occurrences)}", NUMBER_STYLE))
                lines.append(header)

                if not options.show_pos:
                    continue

                for occ in occurrences:
                    row = Text(f"{indent}  ")
                    row.append_text(styled(f"{occ.line:>{width}}", NUMBER_STYLE))
                    row.append_text(styled(":", COLON_STYLE))
                    row.append("  ")
                    if color:
                        row.append_text(highlight_source(occ, lexer, options.style))
                    else:
                        row.append(occ.source_text.strip())
                    lines.append(row)

        return lines

    def render_plain(self, result: ScanResult, options: ReportOptions) -> str:
        return "".join(f"{line.plain}\n" for line in self.render(result, options))

    def report(self, result: ScanResult, options: ReportOptions) -> None:
        if not options.use_color:
            print(self.render_plain(result, options), file=self.output, end="")
            return

        console = self.console or Console(
            file=self.output,
            force_terminal=True,
            highlight=False,
            soft_wrap=True,
        )
        for line in self.render(result, options):
            console.print(line)
