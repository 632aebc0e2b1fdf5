"""Translation of fragment-relative positions into host-file positions."""

from typing import Optional, Sequence

from depextify.core.models import Position


def split_lines(text: str) -> list[str]:
    """Split on newlines only, dropping a trailing carriage return from each line."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def shift_position(anchor_line: int, position: Position) -> Position:
    """
    Move a fragment position to the host line the fragment starts on.

    The fragment occupies the host lines verbatim, so only the line changes.
    """
    return position._replace(line=position.line + anchor_line - 1)


def translate_embedded(
    anchor_line: int,
    position: Position,
    fragment_lines: Sequence[str],
    host_lines: Sequence[str],
) -> Optional[Position]:
    """
    Map a position inside an embedded (possibly re-indented) scalar to the host file.

    The host line is anchor_line - 1 + position.line. The column is corrected by
    the offset at which the fragment line occurs in that host line; when it
    cannot be found the offset is 0.

    Args:
        anchor_line: host line (1-based) holding the first fragment line
        position: fragment-relative position
        fragment_lines: the fragment split on newlines
        host_lines: the host file split on newlines

    Returns:
        host position, or None when either line index is out of range
    """
    rel_idx = position.line - 1
    abs_idx = anchor_line - 1 + rel_idx
    if rel_idx < 0 or rel_idx >= len(fragment_lines) or abs_idx >= len(host_lines):
        return None

    offset = host_lines[abs_idx].find(fragment_lines[rel_idx])
    if offset == -1:
        offset = 0

    return Position(line=abs_idx + 1, column=position.column + offset, length=position.length)
