"""Mapping from grammar actions to the builders that turn them into AST nodes."""

from __future__ import annotations

import enum
from typing import Callable, Dict, Optional, Sequence

from ncc import expressions, terminals
from ncc.ast import AstBuildError, Node, NodeType, make_list_node

Children = Sequence[Optional[Node]]
Handler = Callable[[str, Children], Optional[Node]]


class Action(enum.Enum):
    """Semantic actions that the C grammar attaches to its rules."""

    IDENTIFIER = enum.auto()
    INTEGER_BASE = enum.auto()
    FLOAT_BASE = enum.auto()
    INTEGER_VALUE = enum.auto()
    FLOAT_VALUE = enum.auto()
    STRING_LITERAL = enum.auto()
    CHARACTER_LITERAL = enum.auto()
    LITERAL_SUFFIX = enum.auto()
    FUNCTION_CALL = enum.auto()
    POSTFIX_OPERATOR = enum.auto()
    POSTFIX_EXPRESSION = enum.auto()
    ARRAY_SUBSCRIPT = enum.auto()
    MEMBER_ACCESS_DOT = enum.auto()
    MEMBER_ACCESS_ARROW = enum.auto()
    UNARY_OPERATOR = enum.auto()
    UNARY_EXPRESSION = enum.auto()
    CAST_EXPRESSION = enum.auto()
    RELATIONAL_OPERATOR = enum.auto()
    RELATIONAL = enum.auto()
    EQUALITY_OPERATOR = enum.auto()
    EQUALITY = enum.auto()
    BITWISE_AND_EXPRESSION = enum.auto()
    BITWISE_EXCLUSIVE_OR_EXPRESSION = enum.auto()
    BITWISE_INCLUSIVE_OR_EXPRESSION = enum.auto()
    LOGICAL_AND_EXPRESSION = enum.auto()
    LOGICAL_OR_EXPRESSION = enum.auto()
    SHIFT_OPERATOR = enum.auto()
    SHIFT_EXPRESSION = enum.auto()
    ARITHMETIC_OPERATOR = enum.auto()
    ARITHMETIC_EXPRESSION = enum.auto()
    ASSIGNMENT_OPERATOR = enum.auto()
    ASSIGNMENT = enum.auto()
    TYPE_SPECIFIER = enum.auto()
    DECL_SPECIFIERS = enum.auto()
    POINTER = enum.auto()
    DIRECT_DECLARATOR = enum.auto()
    DECLARATOR_SUFFIX = enum.auto()
    DECLARATOR = enum.auto()
    OPTIONAL_KW_EXTENSION = enum.auto()
    OPTIONAL_INIT_DECLARATOR_LIST = enum.auto()
    DECLARATION = enum.auto()
    IF_STATEMENT = enum.auto()
    SWITCH_STATEMENT = enum.auto()
    WHILE_STATEMENT = enum.auto()
    DO_WHILE_STATEMENT = enum.auto()
    FOR_STATEMENT = enum.auto()
    LABELED_STATEMENT = enum.auto()
    LABELED_IDENTIFIER = enum.auto()
    CASE_LABEL = enum.auto()
    SWITCH_CASE = enum.auto()
    DEFAULT_STATEMENT = enum.auto()
    GOTO_STATEMENT = enum.auto()
    CONTINUE_STATEMENT = enum.auto()
    BREAK_STATEMENT = enum.auto()
    RETURN_STATEMENT = enum.auto()
    COMPOUND_STATEMENT = enum.auto()
    FUNCTION_DEFINITION = enum.auto()
    TRANSLATION_UNIT = enum.auto()
    INIT_DECLARATOR = enum.auto()
    INITIALIZER_LIST = enum.auto()
    TYPE_NAME = enum.auto()
    EXPRESSION_STATEMENT = enum.auto()
    STRUCT_SPECIFIER = enum.auto()
    POSTFIX_PARTS = enum.auto()
    TYPEDEF_DECLARATION = enum.auto()
    KEYWORD = enum.auto()
    TERNARY_OPERATION = enum.auto()
    CONDITIONAL_EXPRESSION = enum.auto()
    COMMA_EXPRESSION = enum.auto()
    ENUM_SPECIFIER = enum.auto()
    ENUMERATOR = enum.auto()
    FUNCTION_POINTER_DECLARATOR = enum.auto()


def list_node_builder(node_type: NodeType) -> Handler:
    """Return a handler that wraps its children in a list node of the given type."""

    def build(text: str, children: Children) -> Node:
        return make_list_node(node_type, children)

    build.__name__ = f"build_{node_type.name.lower()}"
    return build


class ActionRegistry:
    """Holds the handler to run for each grammar action."""

    def __init__(self) -> None:
        self._handlers: Dict[Action, Handler] = {}

    def register(self, action: Action, handler: Handler) -> None:
        """Set the handler for an action, replacing any earlier one."""
        self._handlers[action] = handler

    def handler(self, action: Action) -> Optional[Handler]:
        """Return the handler for an action, or None if none is registered."""
        return self._handlers.get(action)

    def build(self, action: Action, text: str, children: Children) -> Optional[Node]:
        """Run the handler for an action on the matched text and child nodes."""
        handler = self._handlers.get(action)
        if handler is None:
            raise AstBuildError(f"No handler registered for action {action.name}")
        return handler(text, list(children))

    def __contains__(self, action: object) -> bool:
        return action in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)


_LIST_ACTIONS = {
    Action.FUNCTION_CALL: NodeType.FUNCTION_CALL,
    Action.ARRAY_SUBSCRIPT: NodeType.ARRAY_SUBSCRIPT,
    Action.MEMBER_ACCESS_DOT: NodeType.MEMBER_ACCESS_DOT,
    Action.MEMBER_ACCESS_ARROW: NodeType.MEMBER_ACCESS_ARROW,
    Action.CAST_EXPRESSION: NodeType.CAST_EXPRESSION,
    Action.DECL_SPECIFIERS: NodeType.DECL_SPECIFIERS,
    Action.DIRECT_DECLARATOR: NodeType.DIRECT_DECLARATOR,
    Action.DECLARATOR_SUFFIX: NodeType.DECLARATOR_SUFFIX,
    Action.DECLARATOR: NodeType.DECLARATOR,
    Action.OPTIONAL_KW_EXTENSION: NodeType.OPTIONAL_KW_EXTENSION,
    Action.OPTIONAL_INIT_DECLARATOR_LIST: NodeType.OPTIONAL_INIT_DECLARATOR_LIST,
    Action.IF_STATEMENT: NodeType.IF_STATEMENT,
    Action.SWITCH_STATEMENT: NodeType.SWITCH_STATEMENT,
    Action.WHILE_STATEMENT: NodeType.WHILE_STATEMENT,
    Action.DO_WHILE_STATEMENT: NodeType.DO_WHILE_STATEMENT,
    Action.FOR_STATEMENT: NodeType.FOR_STATEMENT,
    Action.LABELED_STATEMENT: NodeType.LABELED_STATEMENT,
    Action.LABELED_IDENTIFIER: NodeType.LABELED_IDENTIFIER,
    Action.CASE_LABEL: NodeType.CASE_LABEL,
    Action.SWITCH_CASE: NodeType.SWITCH_CASE,
    Action.DEFAULT_STATEMENT: NodeType.DEFAULT_STATEMENT,
    Action.GOTO_STATEMENT: NodeType.GOTO_STATEMENT,
    Action.COMPOUND_STATEMENT: NodeType.COMPOUND_STATEMENT,
    Action.FUNCTION_DEFINITION: NodeType.FUNCTION_DEFINITION,
    Action.TRANSLATION_UNIT: NodeType.TRANSLATION_UNIT,
    Action.INIT_DECLARATOR: NodeType.INIT_DECLARATOR,
    Action.INITIALIZER_LIST: NodeType.INITIALIZER_LIST,
    Action.TYPE_NAME: NodeType.TYPE_NAME,
    Action.EXPRESSION_STATEMENT: NodeType.EXPRESSION_STATEMENT,
    Action.STRUCT_SPECIFIER: NodeType.STRUCT_DEFINITION,
    Action.POSTFIX_PARTS: NodeType.POSTFIX_PARTS,
    Action.TYPEDEF_DECLARATION: NodeType.TYPEDEF_DECLARATION,
    Action.TERNARY_OPERATION: NodeType.TERNARY_OPERATION,
    Action.ENUM_SPECIFIER: NodeType.ENUM_SPECIFIER,
    Action.ENUMERATOR: NodeType.ENUMERATOR,
    Action.FUNCTION_POINTER_DECLARATOR: NodeType.FUNCTION_POINTER_DECLARATOR,
}

_BUILDERS: Dict[Action, Handler] = {
    Action.IDENTIFIER: terminals.build_identifier,
    Action.INTEGER_BASE: terminals.build_integer_base,
    Action.FLOAT_BASE: terminals.build_float_base,
    Action.INTEGER_VALUE: terminals.build_integer_literal,
    Action.FLOAT_VALUE: terminals.build_float_literal,
    Action.STRING_LITERAL: terminals.build_string_literal,
    Action.CHARACTER_LITERAL: terminals.build_character_literal,
    Action.LITERAL_SUFFIX: terminals.build_literal_suffix,
    Action.POSTFIX_OPERATOR: terminals.build_postfix_operator,
    Action.POSTFIX_EXPRESSION: expressions.build_postfix_expression,
    Action.UNARY_OPERATOR: terminals.build_unary_operator,
    Action.UNARY_EXPRESSION: expressions.build_unary_expression,
    Action.RELATIONAL_OPERATOR: terminals.build_relational_operator,
    Action.RELATIONAL: expressions.build_relational_expression,
    Action.EQUALITY_OPERATOR: terminals.build_equality_operator,
    Action.EQUALITY: expressions.build_equality_expression,
    Action.BITWISE_AND_EXPRESSION: expressions.build_bitwise_and_expression,
    Action.BITWISE_EXCLUSIVE_OR_EXPRESSION: expressions.build_bitwise_xor_expression,
    Action.BITWISE_INCLUSIVE_OR_EXPRESSION: expressions.build_bitwise_or_expression,
    Action.LOGICAL_AND_EXPRESSION: expressions.build_logical_and_expression,
    Action.LOGICAL_OR_EXPRESSION: expressions.build_logical_or_expression,
    Action.SHIFT_OPERATOR: terminals.build_shift_operator,
    Action.SHIFT_EXPRESSION: expressions.build_shift_expression,
    Action.ARITHMETIC_OPERATOR: terminals.build_arithmetic_operator,
    Action.ARITHMETIC_EXPRESSION: expressions.build_arithmetic_expression,
    Action.ASSIGNMENT_OPERATOR: terminals.build_assignment_operator,
    Action.ASSIGNMENT: expressions.build_assignment,
    Action.TYPE_SPECIFIER: terminals.build_type_specifier,
    Action.POINTER: terminals.build_pointer,
    Action.DECLARATION: expressions.build_declaration,
    Action.CONTINUE_STATEMENT: terminals.build_continue_statement,
    Action.BREAK_STATEMENT: terminals.build_break_statement,
    Action.RETURN_STATEMENT: expressions.build_return_statement,
    Action.KEYWORD: terminals.build_keyword,
    Action.CONDITIONAL_EXPRESSION: expressions.build_conditional_expression,
    Action.COMMA_EXPRESSION: expressions.build_comma_expression,
}


def default_registry() -> ActionRegistry:
    """Return a registry with a handler for every grammar action."""
    registry = ActionRegistry()
    for action, handler in _BUILDERS.items():
        registry.register(action, handler)
    for action, node_type in _LIST_ACTIONS.items():
        registry.register(action, list_node_builder(node_type))
    return registry