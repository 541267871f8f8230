"""Indented text dump of an AST."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO

from ncc.ast import Node, node_name


def _pad(indent: int) -> str:
    return " " * (indent * 2)


def _lines(node: Optional[Node], indent: int) -> Iterator[str]:
    if node is None:
        yield "NULL node"
        return

    header = f"{_pad(indent)}{node_name(node)} ({int(node.type)}): "
    if not node.is_terminal:
        count = len(node.children)
        plural = "" if count == 1 else "ren"
        yield f"{_pad(indent)}{node_name(node)} ({int(node.type)}): ({count} child{plural})"
        for child in node.children:
            yield from _lines(child, indent + 1)
        return

    text = node.text if node.text is not None else ""
    yield header + text
    if node.lhs is not None:
        yield f"{_pad(indent + 1)}LHS: "
        yield from _lines(node.lhs, indent + 2)
    if node.op_text is not None:
        yield f"{_pad(indent + 1)}Operator: {node.op_text}"
    if node.rhs is not None:
        yield f"{_pad(indent + 1)}RHS: "
        yield from _lines(node.rhs, indent + 2)
    if node.false_expr is not None:
        yield f"{_pad(indent + 1)}Ternary False Expression: "
        yield from _lines(node.false_expr, indent + 2)


def format_ast(node: Optional[Node]) -> str:
    """Render an AST as indented text, one node per line."""
    return "".join(line + "\n" for line in _lines(node, 0))


def print_ast(node: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the rendering of an AST to a stream (standard output by default)."""
    (file if file is not None else sys.stdout).write(format_ast(node))