"""
Extractors

Per-format readers that locate shell code in a file and report the commands
it runs in that file's coordinates.
"""

from depextify.extractors.base import (
    Extractor,
    ShellExtractor,
)
from depextify.extractors.makefile import MakefileExtractor
from depextify.extractors.dockerfile import DockerfileExtractor
from depextify.extractors.structured import StructuredExtractor
from depextify.extractors.dispatch import (
    get_extractor,
    is_shell_file,
    resolve_extractor,
)

__all__ = [
    "Extractor",
    "ShellExtractor",
    "MakefileExtractor",
    "DockerfileExtractor",
    "StructuredExtractor",
    "get_extractor",
    "is_shell_file",
    "resolve_extractor",
]
