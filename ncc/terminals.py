"""Builders for leaf AST nodes: literals, identifiers, operators and keywords."""

from __future__ import annotations

import re
import string
from typing import Callable, Optional, Sequence, TypeVar

from ncc.ast import (
    ArithmeticOperator,
    AssignmentOperator,
    AstBuildError,
    EqualityOperator,
    FloatLiteralType,
    Keyword,
    Node,
    NodeType,
    PostfixOperator,
    RelationalOperator,
    ShiftOperator,
    UnaryOperator,
    make_list_node,
    make_terminal_node,
    node_type_name,
)

Children = Sequence[Optional[Node]]

_ULLONG_MAX = 2**64 - 1
_C_WHITESPACE = " \t\n\v\f\r"

_E = TypeVar("_E")

_DECIMAL_FLOAT = re.compile(r"(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_HEX_FLOAT = re.compile(r"0[xX]([0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)([pP][+-]?\d+)?")
_SPECIAL_FLOAT = re.compile(r"(infinity|inf|nan)", re.IGNORECASE)
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_OCT_DIGITS = re.compile(r"[0-7]+")
_DEC_DIGITS = re.compile(r"[0-9]+")


def _require_no_children(node_type: NodeType, children: Children) -> None:
    if children:
        raise AstBuildError(
            f"{node_type_name(node_type)} expected no children, but got {len(children)}"
        )


def _leaf(node_type: NodeType, text: str, children: Children) -> Node:
    _require_no_children(node_type, children)
    return make_terminal_node(node_type, text)


def _operator_node(
    node_type: NodeType,
    text: str,
    children: Children,
    lookup: Callable[[str], _E],
    message: str,
) -> Node:
    _require_no_children(node_type, children)
    try:
        op = lookup(text)
    except ValueError:
        raise AstBuildError(f"{node_type_name(node_type)}{message}{text}") from None
    node = make_terminal_node(node_type, text)
    node.op = op
    return node


def _parse_unsigned(text: str) -> int:
    """Parse the leading integer of text the way strtoull does with base 0."""
    s = text.lstrip(_C_WHITESPACE)
    negative = False
    if s[:1] in ("+", "-"):
        negative = s[0] == "-"
        s = s[1:]

    if s[:2] in ("0x", "0X") and len(s) > 2 and s[2] in string.hexdigits:
        match, base = _HEX_DIGITS.match(s, 2), 16
    elif s.startswith("0"):
        match, base = _OCT_DIGITS.match(s), 8
    else:
        match, base = _DEC_DIGITS.match(s), 10

    if match is None:
        return 0
    value = int(match.group(0), base)
    if value > _ULLONG_MAX:
        return _ULLONG_MAX
    if negative:
        value = (-value) & _ULLONG_MAX
    return value


def _as_long_long(value: int) -> int:
    return value - 2**64 if value >= 2**63 else value


def _parse_float(text: str) -> float:
    """Parse the leading floating-point number of text the way strtold does."""
    s = text.lstrip(_C_WHITESPACE)
    sign = 1.0
    if s[:1] in ("+", "-"):
        sign = -1.0 if s[0] == "-" else 1.0
        s = s[1:]

    match = _HEX_FLOAT.match(s)
    if match is not None:
        return sign * float.fromhex(match.group(0))
    match = _DECIMAL_FLOAT.match(s)
    if match is not None:
        return sign * float(match.group(0))
    match = _SPECIAL_FLOAT.match(s)
    if match is not None:
        return sign * float(match.group(0))
    return 0.0


def _suffix_text(children: Children) -> Optional[str]:
    if len(children) != 2:
        return None
    suffix = children[1]
    if suffix is None or not suffix.is_terminal:
        return None
    return suffix.text


def _require_one_or_two(node_type: NodeType, children: Children) -> None:
    if not 1 <= len(children) <= 2:
        raise AstBuildError(
            f"{node_type_name(node_type)} expected 1 or 2 children, but got {len(children)}"
        )


def build_integer_base(text: str, children: Children) -> Node:
    """Build the digits part of an integer literal."""
    return _leaf(NodeType.INTEGER_BASE, text, children)


def build_float_base(text: str, children: Children) -> Node:
    """Build the digits part of a floating-point literal."""
    return _leaf(NodeType.FLOAT_BASE, text, children)


def build_integer_literal(text: str, children: Children) -> Node:
    """Build an integer literal from its text and its base and optional suffix."""
    _require_one_or_two(NodeType.INTEGER_LITERAL, children)
    node = make_terminal_node(NodeType.INTEGER_LITERAL, text)
    node.value = _as_long_long(_parse_unsigned(text))
    suffix = _suffix_text(children)
    if suffix is not None:
        node.is_unsigned = "u" in suffix or "U" in suffix
        node.is_long = "l" in suffix or "L" in suffix
    return node


def build_float_literal(text: str, children: Children) -> Node:
    """Build a floating-point literal from its text and its base and optional suffix."""
    _require_one_or_two(NodeType.FLOAT_LITERAL, children)
    node = make_terminal_node(NodeType.FLOAT_LITERAL, text)
    node.value = _parse_float(text)
    node.float_type = FloatLiteralType.DOUBLE
    if len(children) == 2:
        suffix = _suffix_text(children) or ""
        if "f" in suffix or "F" in suffix:
            node.float_type = FloatLiteralType.FLOAT
        elif "l" in suffix or "L" in suffix:
            node.float_type = FloatLiteralType.LONG_DOUBLE
    return node


def build_string_literal(text: str, children: Children) -> Node:
    """Build a string literal node."""
    return _leaf(NodeType.STRING_LITERAL, text, children)


def build_character_literal(text: str, children: Children) -> Node:
    """Build a character literal node."""
    return _leaf(NodeType.CHARACTER_LITERAL, text, children)


def build_literal_suffix(text: str, children: Children) -> Node:
    """Build a literal suffix node such as "u" or "f"."""
    return _leaf(NodeType.LITERAL_SUFFIX, text, children)


def build_identifier(text: str, children: Children) -> Node:
    """Build an identifier node."""
    return _leaf(NodeType.IDENTIFIER, text, children)


def build_pointer(text: str, children: Children) -> Node:
    """Build a pointer declarator node."""
    return _leaf(NodeType.POINTER, text, children)


def build_continue_statement(text: str, children: Children) -> Node:
    """Build a continue statement node."""
    return _leaf(NodeType.CONTINUE_STATEMENT, text, children)


def build_break_statement(text: str, children: Children) -> Node:
    """Build a break statement node."""
    return _leaf(NodeType.BREAK_STATEMENT, text, children)


def build_assignment_operator(text: str, children: Children) -> Node:
    """Build an assignment operator node; unrecognised text counts as simple assignment."""
    _require_no_children(NodeType.ASSIGNMENT_OPERATOR, children)
    node = make_terminal_node(NodeType.ASSIGNMENT_OPERATOR, text)
    try:
        node.op = AssignmentOperator(text)
    except ValueError:
        node.op = AssignmentOperator.SIMPLE
    return node


def build_unary_operator(text: str, children: Children) -> Node:
    """Build a unary operator node."""
    return _operator_node(
        NodeType.UNARY_OPERATOR, text, children, UnaryOperator, ": Unknown operator: "
    )


def build_relational_operator(text: str, children: Children) -> Node:
    """Build a relational operator node."""
    return _operator_node(
        NodeType.RELATIONAL_OPERATOR, text, children, RelationalOperator, ": Unknown operator: "
    )


def build_equality_operator(text: str, children: Children) -> Node:
    """Build an equality operator node."""
    return _operator_node(
        NodeType.EQUALITY_OPERATOR, text, children, EqualityOperator, ", Unknown operator: "
    )


def build_shift_operator(text: str, children: Children) -> Node:
    """Build a shift operator node."""
    return _operator_node(
        NodeType.SHIFT_OPERATOR, text, children, ShiftOperator, ": Unknown shift operator: "
    )


def build_arithmetic_operator(text: str, children: Children) -> Node:
    """Build an arithmetic operator node."""
    return _operator_node(
        NodeType.ARITHMETIC_OPERATOR,
        text,
        children,
        ArithmeticOperator,
        ": Unknown arithmetic operator: ",
    )


def build_postfix_operator(text: str, children: Children) -> Node:
    """Build a postfix increment or decrement operator node."""
    return _operator_node(
        NodeType.POSTFIX_OPERATOR,
        text,
        children,
        PostfixOperator,
        ": Unsupported postfix operator: ",
    )


_KEYWORDS = {"struct": Keyword.STRUCT, "union": Keyword.UNION}


def build_keyword(text: str, children: Children) -> Node:
    """Build a keyword node; only "struct" and "union" are recognised."""
    keyword = _KEYWORDS.get(text)
    if keyword is None:
        raise AstBuildError(f"{node_type_name(NodeType.KEYWORD)}: Unknown keyword: {text}")
    node = make_terminal_node(NodeType.KEYWORD, text)
    node.keyword = keyword
    return node


def build_type_specifier(text: str, children: Children) -> Node:
    """Build a type specifier: a terminal for plain types, a list for compound ones."""
    if not children:
        return make_terminal_node(NodeType.TYPE_SPECIFIER, text)
    return make_list_node(NodeType.TYPE_SPECIFIER, children)