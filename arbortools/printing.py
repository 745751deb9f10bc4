"""Text rendering of binary trees."""

from __future__ import annotations

import sys
from typing import TextIO

from arbortools.tree import Node


class _Canvas:
    """Rows of characters that grow as they are written to."""

    def __init__(self, rows: int) -> None:
        self._rows: list[list[str]] = [[] for _ in range(rows)]

    def put(self, row: int, column: int, char: str) -> None:
        line = self._rows[row]
        if column >= len(line):
            line.extend(" " * (column + 1 - len(line)))
        line[column] = char

    def write(self, row: int, column: int, text: str) -> None:
        for shift, char in enumerate(text):
            self.put(row, column + shift, char)

    def lines(self) -> list[str]:
        return ["".join(line).rstrip(" ") for line in self._rows]


def _layout(node: Node, offset: int, depth: int, canvas: _Canvas) -> int:
    label = f"({node.value:03d})"
    width = len(label)
    left = _layout(node.left, offset, depth + 1, canvas) if node.left else 0
    right = (
        _layout(node.right, offset + left + width, depth + 1, canvas)
        if node.right
        else 0
    )
    canvas.write(depth, offset + left, label)
    if depth:
        is_left = node.parent is not None and node.parent.left is node
        if is_left:
            start, length = offset + left + width // 2, width + right
        else:
            start, length = offset - width // 2, left + width
        canvas.write(depth - 1, start, "-" * length)
        canvas.put(depth - 1, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Node | None) -> str:
    """Draw the tree as lines of text, one per level; empty for no tree."""
    if tree is None:
        return ""
    canvas = _Canvas(tree.height() + 1)
    _layout(tree, 0, 0, canvas)
    return "\n".join(canvas.lines())


def print_tree(tree: Node | None, file: TextIO | None = None) -> None:
    """Write the drawing of the tree, each line ending in a newline."""
    if tree is None:
        return
    out = sys.stdout if file is None else file
    out.write(render(tree) + "\n")