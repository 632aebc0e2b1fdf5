"""Shell command extraction using tree-sitter.

Parses a shell fragment into a syntax tree and reports the literal command
names it invokes. The walk is done in two passes:

1. collect the names of all functions defined in the fragment
2. visit every command node and keep its name when it is a plain word,
   is not one of those functions and is not a flag

Commands built from expansions, substitutions, quoting or concatenation are
not reported: a missing command is acceptable, a wrong one is not.
"""

from functools import lru_cache
from typing import Callable, Iterator

import tree_sitter_bash
from tree_sitter import Language, Node, Parser

from depextify.core.errors import ShellParseError
from depextify.core.models import CommandPositions, Position


BASH_LANGUAGE = Language(tree_sitter_bash.language())


@lru_cache(maxsize=1)
def _get_parser() -> Parser:
    return Parser(BASH_LANGUAGE)


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield every node below root (inclusive) in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def walk(root: Node, visit: Callable[[Node], None]) -> None:
    """Call visit on every node of the tree."""
    for node in iter_nodes(root):
        visit(node)


def parse_shell(code: str) -> tuple[Node, bytes]:
    """
    Parse shell code.

    Returns:
        (root node, source bytes the node offsets refer to)

    Raises:
        ShellParseError: the tree contains an ERROR or MISSING node
    """
    src = code.encode("utf-8")
    tree = _get_parser().parse(src)
    root = tree.root_node
    # The bash grammar rejects some valid bash (case ;& and ;;& terminators,
    # extglob !(...) patterns); such fragments fail like any syntax error.
    if root.has_error:
        for node in iter_nodes(root):
            if node.is_error or node.is_missing:
                row, col = node.start_point
                raise ShellParseError(
                    "invalid shell syntax",
                    line=row + 1,
                    column=_char_column(src.split(b"\n"), row, col) + 1,
                )
        raise ShellParseError("invalid shell syntax")
    return root, src


def _char_column(lines: list[bytes], row: int, byte_col: int) -> int:
    """Convert a tree-sitter byte column into a character column (0-based)."""
    if row >= len(lines):
        return byte_col
    return len(lines[row][:byte_col].decode("utf-8", errors="replace"))


def _node_text(node: Node) -> str:
    return node.text.decode("utf-8", errors="replace") if node.text else ""


def collect_local_functions(root: Node) -> set[str]:
    """Names of every function defined anywhere in the tree."""
    names: set[str] = set()

    def visit(node: Node) -> None:
        if node.type == "function_definition":
            name = node.child_by_field_name("name")
            if name is not None:
                names.add(_node_text(name))

    walk(root, visit)
    return names


def literal_command_name(command: Node) -> Node | None:
    """Return the word node naming a command, or None when it is not a single literal."""
    name = command.child_by_field_name("name")
    if name is None:
        return None
    parts = name.named_children
    if len(parts) != 1 or parts[0].type != "word":
        return None
    return parts[0]


def is_reportable(name: str, local_functions: set[str]) -> bool:
    return bool(name) and not name.startswith("-") and name not in local_functions


def collect_commands(root: Node, src: bytes, local_functions: set[str]) -> CommandPositions:
    """Collect literal command names with their fragment-relative positions."""
    commands: CommandPositions = {}
    lines = src.split(b"\n")

    def visit(node: Node) -> None:
        if node.type != "command":
            return
        word = literal_command_name(node)
        if word is None:
            return
        name = _node_text(word)
        if not is_reportable(name, local_functions):
            return
        row, col = word.start_point
        commands.setdefault(name, []).append(Position(
            line=row + 1,
            column=_char_column(lines, row, col) + 1,
            length=len(name),
        ))

    walk(root, visit)
    return commands


def analyze_shell_code(code: str) -> CommandPositions:
    """
    Extract the commands invoked by a shell fragment.

    Positions are relative to the fragment: its first line is line 1 and its
    first column is column 1.

    Raises:
        ShellParseError: the fragment is not valid shell
    """
    root, src = parse_shell(code)
    local_functions = collect_local_functions(root)
    return collect_commands(root, src, local_functions)
