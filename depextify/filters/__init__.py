"""Path filtering for depextify.

Gitignore-style exclusion of files and directories from a scan, from the
configured patterns and the .depextifyignore file.
"""

from depextify.filters.exclusion import (
    ExclusionMatcher,
    IGNORE_FILE_NAME,
    load_ignore_file,
)

__all__ = [
    "ExclusionMatcher",
    "IGNORE_FILE_NAME",
    "load_ignore_file",
]
