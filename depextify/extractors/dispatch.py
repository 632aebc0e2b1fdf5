"""Maps file paths to the extractor that understands them."""

import logging
import re
from pathlib import Path

from depextify.extractors.base import Extractor, ShellExtractor
from depextify.extractors.dockerfile import DockerfileExtractor
from depextify.extractors.makefile import MakefileExtractor
from depextify.extractors.structured import StructuredExtractor

logger = logging.getLogger(__name__)

MAKEFILE_PATTERN = re.compile(r"([Mm]akefile|MAKEFILE|GNUmakefile)")
DOCKERFILE_PATTERN = re.compile(r"(Dockerfile|DOCKERFILE)")
TASKFILE_PATTERN = re.compile(r"(Taskfile|taskfile)\.ya?ml")
WORKFLOW_DIRS = (".github/workflows", ".gitea/workflows", ".forgejo/workflows")
YAML_SUFFIXES = (".yml", ".yaml")

SHELL_EXTENSION_PATTERN = re.compile(r"\.(ba|b|z|k|da)?sh$")
SHEBANG_PATTERN = re.compile(r"^#!\s*/.*(sh|bash|zsh|ksh)")


def get_extractor(path: str | Path) -> Extractor | None:
    """
    Pick the extractor for a host format.

    Checked in order: Makefile, Dockerfile, CI workflow YAML, Taskfile.

    Returns:
        the extractor, or None when the caller should fall back to plain shell
        detection (see is_shell_file)
    """
    posix = Path(path).as_posix()
    base = Path(path).name

    if MAKEFILE_PATTERN.search(base):
        return MakefileExtractor()
    if DOCKERFILE_PATTERN.search(base):
        return DockerfileExtractor()
    if any(d in posix for d in WORKFLOW_DIRS) and posix.endswith(YAML_SUFFIXES):
        return StructuredExtractor()
    if TASKFILE_PATTERN.search(base):
        return StructuredExtractor()

    return None


def is_shell_file(path: str | Path) -> bool:
    """
    Whether a file is a plain shell script.

    A shell extension is enough; an extension-less file needs a shell shebang.
    """
    path = Path(path)
    if SHELL_EXTENSION_PATTERN.search(path.name):
        return True
    if path.suffix:
        return False

    try:
        with open(path, "rb") as f:
            first_line = f.readline(4096)
    except OSError as e:
        logger.debug(f"Cannot read {path}: {e}")
        return False

    return bool(SHEBANG_PATTERN.match(first_line.decode("utf-8", errors="replace")))


def resolve_extractor(path: str | Path, force_shell: bool = False) -> Extractor | None:
    """
    The extractor a scan should use for a file, or None to skip it.

    Args:
        path: file path
        force_shell: treat files without a specific extractor as shell scripts
            (used for an explicitly named single-file target)
    """
    extractor = get_extractor(path)
    if extractor is not None:
        return extractor
    if force_shell or is_shell_file(path):
        return ShellExtractor()
    return None
