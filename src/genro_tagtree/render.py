# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Canonical renderer for TagNode trees.

Output layout, for a node at depth d with unit width w::

    <w*d spaces><name key="value" ...>
    <w*(d+1) spaces>text
    ...children rendered at depth d+1...
    <w*d spaces></name>

A node with neither text nor children is a single line ``<name .../>``.
Every line ends with a newline. Values are written verbatim: no escaping
of ``<``, ``>``, ``&`` or ``"`` is performed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import DEFAULT_INDENT_WIDTH

if TYPE_CHECKING:
    from .node import TagNode


def _open_tag(node: TagNode) -> str:
    attrs = ''.join(f' {key}="{value}"' for key, value in node.attributes)
    return f"<{node.name}{attrs}"


def _node_lines(node: TagNode, depth: int, width: int, lines: list[str]) -> None:
    """Append the lines of node (rendered at depth) to lines.

    Uses an explicit stack of (node, depth, closing) work items so the
    nesting depth of the tree is not bound by the interpreter stack.
    """
    stack: list[tuple[TagNode, int, bool]] = [(node, depth, False)]
    while stack:
        current, level, closing = stack.pop()
        spaces = ' ' * (width * level)

        if closing:
            lines.append(f"{spaces}</{current.name}>\n")
            continue

        if current.is_self_closing:
            lines.append(f"{spaces}{_open_tag(current)}/>\n")
            continue

        lines.append(f"{spaces}{_open_tag(current)}>\n")
        if current.text:
            lines.append(f"{' ' * (width * (level + 1))}{current.text}\n")
        stack.append((current, level, True))
        for child in reversed(current.children):
            stack.append((child, level + 1, False))


def render_node(
    node: TagNode, depth: int = 0, indent_width: int = DEFAULT_INDENT_WIDTH
) -> str:
    """Render node and its subtree starting at the given depth.

    Args:
        node: The node to render.
        depth: Nesting level of node in the output.
        indent_width: Spaces per nesting level.

    Returns:
        The rendered text.
    """
    lines: list[str] = []
    _node_lines(node, depth, indent_width, lines)
    return ''.join(lines)
