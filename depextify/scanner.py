"""
Core scanning

Walks a file or a directory tree, hands each candidate file to its extractor
and keeps the commands that survive the suppression tables.
"""

import logging
import os
import stat
from pathlib import Path
from typing import Callable, Optional

from depextify.core.errors import ScanError, ShellParseError
from depextify.core.lists import build_suppression_set
from depextify.core.models import CommandPositions, Occurrence, ScanConfig, ScanResult
from depextify.core.positions import split_lines
from depextify.extractors.base import decode_content
from depextify.extractors.dispatch import resolve_extractor
from depextify.filters.exclusion import ExclusionMatcher

logger = logging.getLogger(__name__)

# Progress callback: (file path, extractor name)
ProgressCallback = Callable[[str, str], None]


def collect_occurrences(
    positions: CommandPositions,
    lines: list[str],
    suppressed: frozenset[str],
) -> dict[str, list[Occurrence]]:
    """
    Drop suppressed commands and attach the host line to every position.

    Positions that point outside the file (or past the end of their line) are
    dropped rather than reported with a wrong source line.
    """
    occurrences: dict[str, list[Occurrence]] = {}
    for cmd, cmd_positions in positions.items():
        if cmd in suppressed:
            continue
        for position in cmd_positions:
            if position.line < 1 or position.line > len(lines):
                continue
            source = lines[position.line - 1]
            if position.column < 1 or position.column + position.length - 1 > len(source):
                continue
            occurrences.setdefault(cmd, []).append(Occurrence(
                line=position.line,
                column=position.column,
                length=position.length,
                source_text=source,
            ))
    return occurrences


class Scanner:
    """Scans files and directories for the external commands they invoke."""

    def __init__(self, config: Optional[ScanConfig] = None, on_file: Optional[ProgressCallback] = None):
        self.config = config or ScanConfig()
        self.on_file = on_file
        self._suppressed = build_suppression_set(self.config)

    def scan(self, target: str | Path) -> ScanResult:
        """
        Scan a file or a directory tree.

        Raises:
            ScanError: the target does not exist or a directory cannot be listed
        """
        target = Path(target)
        try:
            info = os.stat(target)
        except OSError as e:
            raise ScanError(f"cannot access {target}: {e.strerror or e}") from e

        matcher = ExclusionMatcher.for_target(target, self.config.excludes)
        if matcher.patterns:
            logger.debug(f"Exclusion patterns: {matcher.get_patterns()}")

        result = ScanResult()
        if stat.S_ISDIR(info.st_mode):
            if matcher.is_target_excluded(target, is_dir=True):
                logger.debug(f"Excluded scan target {target}")
            else:
                self._walk(target, matcher, result)
        elif not matcher.is_excluded(target):
            self.process_file(target, result, force_shell=True)
        return result

    def _walk(self, root: Path, matcher: ExclusionMatcher, result: ScanResult) -> None:
        visited: set[str] = set()
        # each entry carries the real paths of the directories above it
        stack: list[tuple[Path, frozenset[str]]] = [(root, frozenset())]

        while stack:
            popped, ancestors = stack.pop()
            directory = Path(os.path.normpath(popped))
            if str(directory) in visited:
                continue
            visited.add(str(directory))

            real = os.path.realpath(directory)
            if real in ancestors:
                logger.debug(f"Skipping {directory}: link back to {real}")
                continue

            if matcher.is_excluded(directory, is_dir=True):
                logger.debug(f"Excluded directory {directory}")
                continue

            subdirs: list[Path] = []
            for entry in self._list_directory(directory):
                name = entry.name
                if name in (".", ".."):
                    continue
                if not self.config.show_hidden and name.startswith("."):
                    continue

                kind = self._entry_kind(entry)
                if kind is None:
                    continue

                path = directory / name
                if matcher.is_excluded(path, is_dir=kind == "dir"):
                    logger.debug(f"Excluded {path}")
                    continue

                if kind == "dir":
                    # symlinked directories are walked through the link path
                    subdirs.append(path)
                else:
                    self.process_file(path, result)

            below = ancestors | {real}
            stack.extend((subdir, below) for subdir in reversed(subdirs))

    @staticmethod
    def _list_directory(directory: Path) -> list[os.DirEntry]:
        try:
            with os.scandir(directory) as it:
                return sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise ScanError(f"cannot read directory {directory}: {e.strerror or e}") from e

    @staticmethod
    def _entry_kind(entry: os.DirEntry) -> str | None:
        """'dir', 'file' or None (broken link, special file, vanished entry)."""
        try:
            if entry.is_symlink():
                info = os.stat(entry.path)
                if stat.S_ISDIR(info.st_mode):
                    return "dir"
                return "file" if stat.S_ISREG(info.st_mode) else None
            if entry.is_dir(follow_symlinks=False):
                return "dir"
            if entry.is_file(follow_symlinks=False):
                return "file"
        except OSError as e:
            logger.debug(f"Skipping {entry.path}: {e}")
        return None

    def process_file(self, path: Path, result: ScanResult, force_shell: bool = False) -> None:
        """
        Extract, filter and record the commands of one file.

        Unreadable files and files that fail to parse are left out of the result.
        """
        extractor = resolve_extractor(path, force_shell=force_shell)
        if extractor is None:
            return

        try:
            content = path.read_bytes()
        except OSError as e:
            logger.debug(f"Cannot read {path}: {e}")
            return

        if self.on_file:
            self.on_file(str(path), extractor.name)

        try:
            positions = extractor.extract(content)
        except ShellParseError as e:
            logger.debug(f"Skipping {path}: {e}")
            return

        if not positions:
            return

        lines = split_lines(decode_content(content))
        occurrences = collect_occurrences(positions, lines, self._suppressed)
        if occurrences:
            result[str(path)] = occurrences


def scan(
    target: str | Path,
    config: Optional[ScanConfig] = None,
    on_file: Optional[ProgressCallback] = None,
) -> ScanResult:
    """Scan target with config and return path -> command -> occurrences."""
    return Scanner(config, on_file=on_file).scan(target)
