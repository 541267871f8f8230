"""Builders for expression, return and declaration AST nodes."""

from __future__ import annotations

from typing import Optional, Sequence

from ncc.ast import (
    AstBuildError,
    BitwiseOperator,
    LogicalOperator,
    Node,
    NodeType,
    make_list_node,
    make_terminal_node,
    node_name,
    node_type_name,
)

Children = Sequence[Optional[Node]]


def _require_count(node_type: NodeType, children: Children, expected: int, wording: str = "") -> None:
    if len(children) != expected:
        raise AstBuildError(
            f"{node_type_name(node_type)} expected {wording}{expected} children, "
            f"but got {len(children)}"
        )


def _is_type(node: Optional[Node], node_type: NodeType) -> bool:
    return node is not None and node.type == node_type


def _binary_with_operator_node(
    node_type: NodeType,
    operator_type: NodeType,
    text: str,
    children: Children,
    what: str,
    wording: str = "",
) -> Node:
    """Build a binary expression from [lhs, operator node, rhs]."""
    _require_count(node_type, children, 3, wording)
    lhs, op_node, rhs = children
    if not _is_type(op_node, operator_type):
        raise AstBuildError(
            f"{node_type_name(node_type)} expected {what} node at index 1, "
            f"but got {node_name(op_node)}"
        )
    node = make_terminal_node(node_type, text)
    node.lhs = lhs
    node.rhs = rhs
    node.op = op_node.op
    node.op_text = op_node.text
    return node


def _binary_fixed_operator(
    node_type: NodeType,
    text: str,
    children: Children,
    op,
) -> Node:
    """Build a binary expression from [lhs, rhs] with an operator implied by the rule."""
    _require_count(node_type, children, 2)
    node = make_terminal_node(node_type, text)
    node.lhs, node.rhs = children
    node.op = op
    node.op_text = op.value
    return node


def build_assignment(text: str, children: Children) -> Node:
    """Build an assignment from [target, assignment operator, value]."""
    return _binary_with_operator_node(
        NodeType.ASSIGNMENT,
        NodeType.ASSIGNMENT_OPERATOR,
        text,
        children,
        "shift operator",
    )


def build_unary_expression(text: str, children: Children) -> Node:
    """Build a unary expression from [unary operator, operand]; the operand becomes lhs."""
    if len(children) != 2:
        raise AstBuildError(
            f"{node_type_name(NodeType.UNARY_EXPRESSION)} expected at 2 children, "
            f"but got {len(children)}"
        )
    op_node, operand = children
    if not _is_type(op_node, NodeType.UNARY_OPERATOR):
        raise AstBuildError(
            f"{node_type_name(NodeType.UNARY_EXPRESSION)} expected operator node, "
            f"but got {node_name(op_node)}"
        )
    node = make_terminal_node(NodeType.UNARY_EXPRESSION, text)
    node.lhs = operand
    node.op = op_node.op
    node.op_text = op_node.text
    return node


def build_relational_expression(text: str, children: Children) -> Node:
    """Build a relational comparison from [lhs, operator, rhs]."""
    return _binary_with_operator_node(
        NodeType.RELATIONAL_EXPRESSION,
        NodeType.RELATIONAL_OPERATOR,
        text,
        children,
        "relational operator",
    )


def build_equality_expression(text: str, children: Children) -> Node:
    """Build an equality comparison from [lhs, operator, rhs]."""
    return _binary_with_operator_node(
        NodeType.EQUALITY_EXPRESSION,
        NodeType.EQUALITY_OPERATOR,
        text,
        children,
        "equality operator",
    )


def build_bitwise_and_expression(text: str, children: Children) -> Node:
    """Build a bitwise AND from [lhs, rhs]."""
    return _binary_fixed_operator(NodeType.BITWISE_EXPRESSION, text, children, BitwiseOperator.AND)


def build_bitwise_xor_expression(text: str, children: Children) -> Node:
    """Build a bitwise exclusive OR from [lhs, rhs]."""
    return _binary_fixed_operator(NodeType.BITWISE_EXPRESSION, text, children, BitwiseOperator.XOR)


def build_bitwise_or_expression(text: str, children: Children) -> Node:
    """Build a bitwise inclusive OR from [lhs, rhs]."""
    return _binary_fixed_operator(NodeType.BITWISE_EXPRESSION, text, children, BitwiseOperator.OR)


def build_logical_and_expression(text: str, children: Children) -> Node:
    """Build a logical AND from [lhs, rhs]."""
    return _binary_fixed_operator(NodeType.LOGICAL_EXPRESSION, text, children, LogicalOperator.AND)


def build_logical_or_expression(text: str, children: Children) -> Node:
    """Build a logical OR from [lhs, rhs]."""
    return _binary_fixed_operator(NodeType.LOGICAL_EXPRESSION, text, children, LogicalOperator.OR)


def build_shift_expression(text: str, children: Children) -> Node:
    """Build a shift from [lhs, shift operator, rhs]."""
    return _binary_with_operator_node(
        NodeType.SHIFT_EXPRESSION,
        NodeType.SHIFT_OPERATOR,
        text,
        children,
        "shift operator",
        wording="exactly ",
    )


def build_arithmetic_expression(text: str, children: Children) -> Node:
    """Build an arithmetic operation from [lhs, arithmetic operator, rhs]."""
    return _binary_with_operator_node(
        NodeType.ARITHMETIC_EXPRESSION,
        NodeType.ARITHMETIC_OPERATOR,
        text,
        children,
        "arithmetic operator",
    )


def build_postfix_expression(text: str, children: Children) -> Optional[Node]:
    """Build a postfix expression from [primary, postfix parts].

    With no postfix parts the primary expression itself is returned.
    """
    if len(children) != 2:
        raise AstBuildError(
            f"{node_type_name(NodeType.POSTFIX_EXPRESSION)} expected 2 children, "
            f"but got {len(children)}"
        )
    base, postfix = children
    if not _is_type(postfix, NodeType.POSTFIX_PARTS):
        type_number = "NULL" if postfix is None else int(postfix.type)
        raise AstBuildError(
            f"{node_type_name(NodeType.POSTFIX_EXPRESSION)} expected postfix parts node "
            f"at index 1, but got {node_name(postfix)} ({type_number})"
        )
    if not postfix.children:
        return base
    node = make_terminal_node(NodeType.POSTFIX_EXPRESSION, text)
    node.lhs = base
    node.rhs = postfix
    return node


def build_conditional_expression(text: str, children: Children) -> Optional[Node]:
    """Build a conditional from [condition] or [condition, ternary operation].

    A lone condition is returned unchanged. Otherwise the condition becomes lhs,
    the true branch rhs and the false branch false_expr.
    """
    if len(children) == 1:
        return children[0]
    if len(children) != 2:
        raise AstBuildError(
            f"{node_type_name(NodeType.CONDITIONAL_EXPRESSION)} expected 2 children, "
            f"but got {len(children)}"
        )
    condition, ternary = children
    if ternary is None or len(ternary.children) < 2:
        raise AstBuildError(
            f"{node_type_name(NodeType.CONDITIONAL_EXPRESSION)} expected a ternary operation "
            f"with 2 children, but got {node_name(ternary)}"
        )
    node = make_terminal_node(NodeType.CONDITIONAL_EXPRESSION, text)
    node.lhs = condition
    node.rhs = ternary.children[0]
    node.false_expr = ternary.children[1]
    return node


def build_comma_expression(text: str, children: Children) -> Optional[Node]:
    """Build a comma expression; a single expression is returned unchanged."""
    if not children:
        raise AstBuildError(
            f"{node_type_name(NodeType.COMMA_EXPRESSION)} expected at least 1 child, but got 0"
        )
    if len(children) == 1:
        return children[0]
    return make_list_node(NodeType.COMMA_EXPRESSION, children)


def build_return_statement(text: str, children: Children) -> Node:
    """Build a return statement; an optional returned expression becomes lhs."""
    if len(children) > 1:
        raise AstBuildError(
            f"{node_type_name(NodeType.RETURN_STATEMENT)} expected no more than 1 child"
        )
    node = make_terminal_node(NodeType.RETURN_STATEMENT, text)
    if children:
        node.lhs = children[0]
    return node


def build_declaration(text: str, children: Children) -> Node:
    """Build a declaration from [extension, specifiers, init declarator list]."""
    _require_count(NodeType.DECLARATION, children, 3)
    return make_list_node(NodeType.DECLARATION, children)