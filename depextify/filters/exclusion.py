"""Pathspec-based path exclusion.

This module uses the pathspec library for gitignore semantics: wildcards,
directory-only patterns and negation (the last matching pattern wins).
"""

import logging
import os
from pathlib import Path
from typing import Iterable

import pathspec

logger = logging.getLogger(__name__)

# Ignore file read from the scan root (or the working directory for a file target)
IGNORE_FILE_NAME = ".depextifyignore"


def load_ignore_file(directory: Path) -> list[str]:
    """Read the pattern lines of the ignore file in directory, if there is one."""
    ignore_path = directory / IGNORE_FILE_NAME
    if not ignore_path.is_file():
        return []

    try:
        with open(ignore_path, encoding="utf-8") as f:
            return f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read {ignore_path}: {e}")
        return []


class ExclusionMatcher:
    """Decides which paths a scan skips."""

    def __init__(self, base: Path, patterns: Iterable[str] = ()):
        """
        Compile the patterns once for the whole scan.

        Args:
            base: directory patterns are relative to
            patterns: gitignore-style patterns, in precedence order
        """
        self.base = Path(os.path.abspath(base))
        self.patterns = [p for p in patterns if p is not None]
        self._spec = pathspec.GitIgnoreSpec.from_lines(self.patterns)

    @classmethod
    def for_target(cls, target: Path, excludes: Iterable[str] = ()) -> "ExclusionMatcher":
        """
        Build the matcher for a scan target.

        Configured excludes come first, then the ignore file of the scan root
        (directory target) or of the current working directory (file target).
        """
        base = target if target.is_dir() else Path.cwd()
        return cls(base, [*excludes, *load_ignore_file(base)])

    def _relative(self, path: Path) -> str | None:
        absolute = Path(os.path.abspath(path))
        try:
            relative = absolute.relative_to(self.base)
        except ValueError:
            return absolute.as_posix().lstrip("/")

        if relative == Path("."):
            return None
        return relative.as_posix()

    def is_excluded(self, path: Path, is_dir: bool = False) -> bool:
        if not self.patterns:
            return False

        relative = self._relative(path)
        if not relative:
            return False
        if is_dir:
            relative += "/"
        return self._spec.match_file(relative)

    def is_target_excluded(self, target: Path, is_dir: bool = False) -> bool:
        """
        Match a scan target by the path as it was written.

        "." and "..", alone or as leading components, carry no name: scanning
        "." from inside a directory called build is not excluded by "build/",
        scanning "build" is.
        """
        if not self.patterns:
            return False

        parts = [p for p in Path(os.path.normpath(target)).parts if p not in ("/", ".", "..")]
        if not parts:
            return False
        written = "/".join(parts)
        if is_dir:
            written += "/"
        return self._spec.match_file(written)

    def get_patterns(self) -> list[str]:
        return list(self.patterns)
