"""
CLI entry point - built with Typer

Scan flow:
1. load settings (.depextify.yaml) and merge command-line options
2. scan the target file or directory
3. print the result as text, JSON or YAML
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from depextify.config import load_settings
from depextify.core.errors import ScanError
from depextify.core.lists import CATEGORIES
from depextify.reporters import OUTPUT_FORMATS, ReportOptions, get_reporter
from depextify.scanner import Scanner

app = typer.Typer(
    name="depextify",
    help="depextify: list the external commands your scripts depend on.",
    add_completion=False,
)

# Rich consoles for output
console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False)

NAMES_PER_LINE = 5


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def _split_names(value: Optional[str]) -> list[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def print_category(out: Console, name: str, commands: list[str], use_color: bool) -> None:
    """Print one classification table, five names per line."""
    header = f"[cyan]{name}[/cyan]:" if use_color else f"{name}:"
    out.print(header, markup=use_color)
    for i in range(0, len(commands), NAMES_PER_LINE):
        out.print("  " + ", ".join(commands[i:i + NAMES_PER_LINE]), markup=False)
    out.print()


@app.command()
def scan(
    target: str = typer.Argument(
        ...,
        help="Shell script, Makefile, Dockerfile, workflow/Taskfile YAML or directory",
    ),
    count: Optional[bool] = typer.Option(
        None,
        "--count/--no-count",
        help="Show how often each command appears",
    ),
    pos: Optional[bool] = typer.Option(
        None,
        "--pos/--no-pos",
        help="Show line number and source line of each occurrence",
    ),
    hidden: Optional[bool] = typer.Option(
        None,
        "--hidden/--no-hidden",
        help="Scan hidden files and directories",
    ),
    builtin: Optional[bool] = typer.Option(
        None,
        "--builtin/--no-builtin",
        help="Include/ignore shell builtins (default: ignore)",
    ),
    coreutils: Optional[bool] = typer.Option(
        None,
        "--coreutils/--no-coreutils",
        help="Include/ignore coreutils commands (default: ignore)",
    ),
    common: Optional[bool] = typer.Option(
        None,
        "--common/--no-common",
        help="Include/ignore common commands such as grep or curl (default: ignore)",
    ),
    ignores: Optional[str] = typer.Option(
        None,
        "--ignores",
        help="Comma-separated list of commands to ignore",
    ),
    exclude: Optional[list[str]] = typer.Option(
        None,
        "--exclude",
        "-e",
        help="Gitignore-style pattern of paths to skip (repeatable; the target matches as typed)",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: text (default), json or yaml",
    ),
    color: Optional[bool] = typer.Option(
        None,
        "--color/--no-color",
        help="Enable/disable colored output (default: auto)",
    ),
    lexer: Optional[str] = typer.Option(
        None,
        "--lexer",
        help="Pygments lexer for source lines (default: guessed, bash)",
    ),
    style: Optional[str] = typer.Option(
        None,
        "--style",
        help="Pygments style for source lines (env: DEPEXTIFY_STYLE)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show detailed output",
    ),
) -> None:
    """
    Scan a file or directory for the external commands it invokes.

    Examples:
        depextify scan install.sh
        depextify scan . --pos
        depextify scan . --coreutils --format json
        depextify scan Makefile --ignores go,docker
    """
    _setup_logging(verbose)
    settings = load_settings()

    if count is not None:
        settings.show_count = count
    if pos is not None:
        settings.show_pos = pos
    if hidden is not None:
        settings.show_hidden = hidden
    if builtin is not None:
        settings.no_builtins = not builtin
    if coreutils is not None:
        settings.no_coreutils = not coreutils
    if common is not None:
        settings.no_common = not common
    settings.ignores.extend(_split_names(ignores))
    settings.excludes.extend(exclude or [])
    if output_format is not None:
        settings.format = output_format
    if color is not None:
        settings.use_color = color
    if lexer is not None:
        settings.lexer = lexer
    if style is not None:
        settings.style = style

    if settings.format not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"unknown format '{settings.format}' (expected one of: {', '.join(OUTPUT_FORMATS)})",
            param_hint="--format",
        )

    def on_file_scanned(file_path: str, extractor: str) -> None:
        err_console.print(f"[dim]  ({extractor}) {escape(file_path)}[/dim]")

    scanner = Scanner(settings.to_scan_config(), on_file=on_file_scanned if verbose else None)
    try:
        result = scanner.scan(target)
    except ScanError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    use_color = settings.use_color if settings.use_color is not None else sys.stdout.isatty()
    options = ReportOptions(
        show_count=settings.show_count,
        show_pos=settings.show_pos,
        is_directory=Path(target).is_dir(),
        use_color=use_color and settings.format == "text",
        lexer=settings.lexer,
        style=settings.style,
    )
    get_reporter(settings.format).report(result, options)


@app.command("list")
def list_categories(
    categories: str = typer.Argument(
        "all",
        help="Comma-separated categories to list (builtins, coreutils, common) or \"all\"",
    ),
    color: Optional[bool] = typer.Option(
        None,
        "--color/--no-color",
        help="Enable/disable colored output (default: auto)",
    ),
) -> None:
    """List the commands of the suppression tables."""
    use_color = color if color is not None else sys.stdout.isatty()
    out = Console(force_terminal=True, highlight=False, soft_wrap=True) if use_color else console
    names = _split_names(categories)
    if "all" in names:
        names = list(CATEGORIES)

    for name in names:
        if name not in CATEGORIES:
            err_console.print(f"[yellow]Warning:[/yellow] unknown category {escape(repr(name))}")
            continue
        print_category(out, name, sorted(CATEGORIES[name]), use_color)


@app.command()
def version() -> None:
    """Show the version of depextify."""
    from depextify import __version__
    console.print(f"depextify v{__version__}", markup=False)


if __name__ == "__main__":
    app()
