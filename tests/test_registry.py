import pytest

from ncc.ast import (
    ArithmeticOperator,
    AstBuildError,
    BitwiseOperator,
    Keyword,
    NodeType,
    make_list_node,
    make_terminal_node,
)
from ncc.registry import Action, ActionRegistry, default_registry, list_node_builder


@pytest.fixture
def registry():
    return default_registry()


def test_default_registry_covers_every_action(registry):
    assert all(registry.handler(action) is not None for action in Action)
    assert len(registry) == len(Action)


def test_empty_registry_has_no_handlers():
    reg = ActionRegistry()
    assert reg.handler(Action.IDENTIFIER) is None
    assert Action.IDENTIFIER not in reg


def test_build_unregistered_action_raises():
    with pytest.raises(AstBuildError):
        ActionRegistry().build(Action.IDENTIFIER, "x", [])


def test_register_replaces_handler():
    reg = ActionRegistry()
    reg.register(Action.IDENTIFIER, list_node_builder(NodeType.TYPE_NAME))
    reg.register(Action.IDENTIFIER, list_node_builder(NodeType.ENUMERATOR))
    node = reg.build(Action.IDENTIFIER, "x", [])
    assert node.type == NodeType.ENUMERATOR


def test_list_node_builder_keeps_children_in_order():
    a = make_terminal_node(NodeType.IDENTIFIER, "a")
    b = make_terminal_node(NodeType.IDENTIFIER, "b")
    node = list_node_builder(NodeType.COMPOUND_STATEMENT)("{a; b;}", [a, b])
    assert node.type == NodeType.COMPOUND_STATEMENT
    assert not node.is_terminal
    assert node.children == [a, b]


def test_identifier_action(registry):
    node = registry.build(Action.IDENTIFIER, "main", [])
    assert node.type == NodeType.IDENTIFIER
    assert node.text == "main"
    assert node.is_terminal


def test_identifier_with_children_raises(registry):
    child = make_terminal_node(NodeType.IDENTIFIER, "x")
    with pytest.raises(AstBuildError):
        registry.build(Action.IDENTIFIER, "x", [child])


def test_struct_specifier_maps_to_struct_definition(registry):
    kw = registry.build(Action.KEYWORD, "struct", [])
    assert kw.keyword == Keyword.STRUCT
    node = registry.build(Action.STRUCT_SPECIFIER, "struct s", [kw])
    assert node.type == NodeType.STRUCT_DEFINITION
    assert node.children == [kw]


def test_arithmetic_expression_via_registry(registry):
    lhs = registry.build(Action.IDENTIFIER, "a", [])
    op = registry.build(Action.ARITHMETIC_OPERATOR, "+", [])
    rhs = registry.build(Action.IDENTIFIER, "b", [])
    node = registry.build(Action.ARITHMETIC_EXPRESSION, "a + b", [lhs, op, rhs])
    assert node.type == NodeType.ARITHMETIC_EXPRESSION
    assert node.op == ArithmeticOperator.ADD
    assert node.op_text == "+"
    assert node.lhs is lhs and node.rhs is rhs


def test_bitwise_xor_via_registry(registry):
    lhs = registry.build(Action.IDENTIFIER, "a", [])
    rhs = registry.build(Action.IDENTIFIER, "b", [])
    node = registry.build(Action.BITWISE_EXCLUSIVE_OR_EXPRESSION, "a ^ b", [lhs, rhs])
    assert node.op == BitwiseOperator.XOR
    assert node.op_text == "^"


def test_declaration_requires_three_children(registry):
    with pytest.raises(AstBuildError):
        registry.build(Action.DECLARATION, "int x;", [])


def test_conditional_with_ternary_operation(registry):
    cond = registry.build(Action.IDENTIFIER, "c", [])
    yes = registry.build(Action.IDENTIFIER, "y", [])
    no = registry.build(Action.IDENTIFIER, "n", [])
    ternary = registry.build(Action.TERNARY_OPERATION, "? y : n", [yes, no])
    assert ternary.type == NodeType.TERNARY_OPERATION
    node = registry.build(Action.CONDITIONAL_EXPRESSION, "c ? y : n", [cond, ternary])
    assert node.type == NodeType.CONDITIONAL_EXPRESSION
    assert node.lhs is cond
    assert node.rhs is yes
    assert node.false_expr is no


def test_postfix_expression_with_empty_parts_returns_base(registry):
    base = registry.build(Action.IDENTIFIER, "x", [])
    parts = registry.build(Action.POSTFIX_PARTS, "", [])
    assert registry.build(Action.POSTFIX_EXPRESSION, "x", [base, parts]) is base


def test_build_accepts_any_sequence(registry):
    a = registry.build(Action.IDENTIFIER, "a", [])
    b = registry.build(Action.IDENTIFIER, "b", [])
    node = registry.build(Action.COMMA_EXPRESSION, "a, b", (a, b))
    assert node.type == NodeType.COMMA_EXPRESSION
    assert node.children == [a, b]


def test_integer_value_action(registry):
    base = registry.build(Action.INTEGER_BASE, "0x10", [])
    suffix = registry.build(Action.LITERAL_SUFFIX, "u", [])
    node = registry.build(Action.INTEGER_VALUE, "0x10u", [base, suffix])
    assert node.value == 16
    assert node.is_unsigned
    assert not node.is_long


def test_translation_unit_wraps_function_definitions(registry):
    fn = make_list_node(NodeType.FUNCTION_DEFINITION, [])
    node = registry.build(Action.TRANSLATION_UNIT, "", [fn])
    assert node.type == NodeType.TRANSLATION_UNIT
    assert node.children == [fn]