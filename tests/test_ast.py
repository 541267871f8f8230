import pytest

from ncc.ast import (
    AssignmentOperator,
    FloatLiteralType,
    Keyword,
    NodeType,
    UnaryOperator,
    make_list_node,
    make_terminal_node,
    node_name,
    node_type_name,
)


def test_every_node_type_has_a_name():
    names = [node_type_name(node_type) for node_type in NodeType]
    assert "Unknown" not in names
    # Integer and float bases share their names with the literal nodes.
    assert names.count("IntegerLiteral") == 2
    assert names.count("FloatLiteral") == 2
    assert len(set(names)) == len(NodeType) - 2


@pytest.mark.parametrize(
    "node_type, expected",
    [
        (NodeType.TRANSLATION_UNIT, "TranslationUnit"),
        (NodeType.INTEGER_BASE, "IntegerLiteral"),
        (NodeType.FLOAT_BASE, "FloatLiteral"),
        (NodeType.DECL_SPECIFIERS, "DeclarationSpecifiers"),
        (NodeType.FUNCTION_POINTER_DECLARATOR, "FunctionPointerDeclarator"),
        (NodeType.COMMA_EXPRESSION, "CommaExpression"),
    ],
)
def test_node_type_names(node_type, expected):
    assert node_type_name(node_type) == expected


def test_integer_values_accepted():
    assert node_type_name(int(NodeType.IDENTIFIER)) == "Identifier"


@pytest.mark.parametrize("bad", [-1, len(NodeType), 10_000])
def test_out_of_range_is_unknown(bad):
    assert node_type_name(bad) == "Unknown"


def test_node_name_of_none():
    assert node_name(None) == "NULL"


def test_node_name_of_node():
    node = make_terminal_node(NodeType.STRING_LITERAL, '"hi"')
    assert node_name(node) == "StringLiteral"


def test_node_type_order():
    assert node_type_name(0) == "TranslationUnit"
    assert node_type_name(len(NodeType) - 1) == "CommaExpression"
    assert node_type_name(int(NodeType.POINTER) + 1) == "FunctionPointerDeclarator"


def test_make_list_node_copies_children():
    a = make_terminal_node(NodeType.IDENTIFIER, "a")
    b = make_terminal_node(NodeType.IDENTIFIER, "b")
    source = [a, b]
    node = make_list_node(NodeType.COMPOUND_STATEMENT, source)
    source.append(None)
    assert node.children == [a, b]
    assert node.is_terminal is False
    assert node.type is NodeType.COMPOUND_STATEMENT


def test_make_list_node_from_generator():
    node = make_list_node(NodeType.TYPE_NAME, (c for c in []))
    assert node.children == []


def test_make_terminal_node_defaults():
    node = make_terminal_node(NodeType.IDENTIFIER, "x")
    assert node.is_terminal is True
    assert node.text == "x"
    assert node.children == []
    assert node.lhs is None and node.rhs is None and node.false_expr is None
    assert node.op_text is None
    assert node.keyword is Keyword.UNKNOWN
    assert node.float_type is FloatLiteralType.DOUBLE
    assert node.is_unsigned is False and node.is_long is False


def test_unary_operator_lookup():
    assert UnaryOperator("sizeof") is UnaryOperator.SIZEOF
    assert UnaryOperator("__alignof__") is UnaryOperator.ALIGNOF
    assert UnaryOperator("_Alignof") is UnaryOperator.ALIGNOF


def test_assignment_operator_lookup():
    assert AssignmentOperator("<<=") is AssignmentOperator.SHL
    assert AssignmentOperator("|=") is AssignmentOperator.OR


def test_unknown_operator_text_raises():
    with pytest.raises(ValueError):
        UnaryOperator("@@")