import io

from ncc.ast import NodeType, make_list_node, make_terminal_node, node_type_name
from ncc.printer import format_ast, print_ast


def _head(node_type, rest):
    return f"{node_type_name(node_type)} ({int(node_type)}): {rest}"


def test_none_node():
    assert format_ast(None) == "NULL node\n"


def test_single_terminal():
    node = make_terminal_node(NodeType.IDENTIFIER, "x")
    assert format_ast(node) == _head(NodeType.IDENTIFIER, "x") + "\n"


def test_child_count_wording():
    leaf = make_terminal_node(NodeType.IDENTIFIER, "a")
    one = make_list_node(NodeType.COMPOUND_STATEMENT, [leaf])
    two = make_list_node(NodeType.COMPOUND_STATEMENT, [leaf, leaf])
    zero = make_list_node(NodeType.COMPOUND_STATEMENT, [])
    assert format_ast(one).splitlines()[0].endswith("(1 child)")
    assert format_ast(two).splitlines()[0].endswith("(2 children)")
    assert format_ast(zero).splitlines()[0].endswith("(0 children)")


def test_children_are_indented():
    leaf = make_terminal_node(NodeType.IDENTIFIER, "a")
    inner = make_list_node(NodeType.DECLARATOR, [leaf])
    root = make_list_node(NodeType.TRANSLATION_UNIT, [inner])
    lines = format_ast(root).splitlines()
    assert lines[1].startswith("  " + node_type_name(NodeType.DECLARATOR))
    assert lines[2] == "    " + _head(NodeType.IDENTIFIER, "a")


def test_none_child_has_no_indent():
    root = make_list_node(NodeType.TRANSLATION_UNIT, [None])
    assert format_ast(root).splitlines()[1] == "NULL node"


def test_expression_parts():
    cond = make_terminal_node(NodeType.IDENTIFIER, "c")
    yes = make_terminal_node(NodeType.IDENTIFIER, "y")
    no = make_terminal_node(NodeType.IDENTIFIER, "n")
    node = make_terminal_node(NodeType.CONDITIONAL_EXPRESSION, "c ? y : n")
    node.lhs = cond
    node.rhs = yes
    node.false_expr = no
    node.op_text = "?"
    lines = format_ast(node).splitlines()
    assert lines == [
        _head(NodeType.CONDITIONAL_EXPRESSION, "c ? y : n"),
        "  LHS: ",
        "    " + _head(NodeType.IDENTIFIER, "c"),
        "  Operator: ?",
        "  RHS: ",
        "    " + _head(NodeType.IDENTIFIER, "y"),
        "  Ternary False Expression: ",
        "    " + _head(NodeType.IDENTIFIER, "n"),
    ]


def test_print_ast_to_stream_matches_format():
    leaf = make_terminal_node(NodeType.IDENTIFIER, "v")
    root = make_list_node(NodeType.TRANSLATION_UNIT, [leaf])
    out = io.StringIO()
    print_ast(root, out)
    assert out.getvalue() == format_ast(root)


def test_print_ast_defaults_to_stdout(capsys):
    node = make_terminal_node(NodeType.POINTER, "*")
    print_ast(node)
    assert capsys.readouterr().out == format_ast(node)