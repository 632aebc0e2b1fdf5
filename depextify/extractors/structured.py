"""YAML extraction for CI workflows and task runners.

Shell fragments live in scalar values:

- GitHub / Gitea / Forgejo workflows: ``run: <script>``
- Taskfiles: ``cmd: <script>`` and ``cmds: [<script>, {cmd: <script>}]``

Block scalars are re-indented relative to the document, so positions are
mapped back by searching each fragment line inside its host line.
"""

import logging
from pathlib import PurePosixPath

import yaml

from depextify.core.errors import ShellParseError
from depextify.core.models import CommandPositions
from depextify.core.positions import split_lines, translate_embedded
from depextify.core.shell import analyze_shell_code
from depextify.extractors.base import Extractor, decode_content, merge_positions

logger = logging.getLogger(__name__)

SCRIPT_KEYS = frozenset({"run", "cmd"})
SCRIPT_LIST_KEY = "cmds"
STR_TAG = "tag:yaml.org,2002:str"

# Step-level `shell:` values whose scripts are POSIX-family shell
SHELL_NAMES = frozenset({"sh", "bash", "zsh", "ksh", "dash"})


def _key_name(node: yaml.Node) -> str | None:
    if isinstance(node, yaml.ScalarNode):
        return node.value
    return None


def _is_script(node: yaml.Node) -> bool:
    return isinstance(node, yaml.ScalarNode) and node.tag == STR_TAG


def content_start_line(node: yaml.ScalarNode) -> int:
    """
    Host line (1-based) holding the first line of a scalar's value.

    Block scalars (| and >) start on the line after their indicator.
    """
    line = node.start_mark.line + 1
    if node.style in ("|", ">"):
        line += 1
    return line


def _runs_posix_shell(mapping: yaml.MappingNode) -> bool:
    """False when the mapping declares a non-POSIX `shell:` (pwsh, python, cmd...)."""
    for key, value in mapping.value:
        if _key_name(key) == "shell" and isinstance(value, yaml.ScalarNode):
            words = value.value.split()
            if not words:
                return True
            return PurePosixPath(words[0]).name in SHELL_NAMES
    return True


class StructuredExtractor(Extractor):
    """Extracts commands from YAML documents (CI workflows, Taskfiles)."""

    name = "yaml"

    def extract(self, content: bytes) -> CommandPositions:
        text = decode_content(content)
        try:
            documents = list(yaml.compose_all(text, Loader=yaml.SafeLoader))
        except yaml.YAMLError as e:
            logger.debug(f"Malformed YAML document: {e}")
            return {}

        host_lines = split_lines(text)
        results: CommandPositions = {}
        seen: set[int] = set()

        for document in documents:
            if document is not None:
                self._walk(document, host_lines, results, seen)

        return results

    def _walk(
        self,
        node: yaml.Node,
        host_lines: list[str],
        results: CommandPositions,
        seen: set[int],
    ) -> None:
        # Aliases share node objects; visit each one once
        if id(node) in seen:
            return
        seen.add(id(node))

        if isinstance(node, yaml.MappingNode):
            posix = _runs_posix_shell(node)
            for key, value in node.value:
                name = _key_name(key)
                if name in SCRIPT_KEYS and _is_script(value):
                    if posix:
                        self._analyze(value, host_lines, results)
                elif name == SCRIPT_LIST_KEY and isinstance(value, yaml.SequenceNode):
                    # Mapping items ({cmd: ...}) are reached by the walk below
                    for item in value.value:
                        if _is_script(item):
                            self._analyze(item, host_lines, results)
                self._walk(value, host_lines, results, seen)

        elif isinstance(node, yaml.SequenceNode):
            for child in node.value:
                self._walk(child, host_lines, results, seen)

    def _analyze(self, node: yaml.ScalarNode, host_lines: list[str], results: CommandPositions) -> None:
        anchor_line = content_start_line(node)
        try:
            commands = analyze_shell_code(node.value)
        except ShellParseError as e:
            logger.debug(f"Skipping script at line {anchor_line}: {e}")
            return

        fragment_lines = node.value.split("\n")
        translated: CommandPositions = {}
        for cmd, positions in commands.items():
            for position in positions:
                host_position = translate_embedded(anchor_line, position, fragment_lines, host_lines)
                if host_position is not None:
                    translated.setdefault(cmd, []).append(host_position)

        merge_positions(results, translated)
