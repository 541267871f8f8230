"""Abstract syntax tree nodes for the C grammar, with operator enums and node names."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union


class NodeType(enum.IntEnum):
    """Kinds of AST node, numbered in declaration order."""

    TRANSLATION_UNIT = 0
    FUNCTION_DEFINITION = enum.auto()
    COMPOUND_STATEMENT = enum.auto()
    OPTIONAL_KW_EXTENSION = enum.auto()
    OPTIONAL_INIT_DECLARATOR_LIST = enum.auto()
    DECLARATION = enum.auto()
    INTEGER_BASE = enum.auto()
    FLOAT_BASE = enum.auto()
    INTEGER_LITERAL = enum.auto()
    FLOAT_LITERAL = enum.auto()
    STRING_LITERAL = enum.auto()
    LITERAL_SUFFIX = enum.auto()
    IDENTIFIER = enum.auto()
    DECL_SPECIFIERS = enum.auto()
    ASSIGNMENT = enum.auto()
    TYPE_SPECIFIER = enum.auto()
    UNARY_OPERATOR = enum.auto()
    UNARY_EXPRESSION = enum.auto()
    DECLARATOR = enum.auto()
    DIRECT_DECLARATOR = enum.auto()
    DECLARATOR_SUFFIX = enum.auto()
    POINTER = enum.auto()
    FUNCTION_POINTER_DECLARATOR = enum.auto()
    RELATIONAL_OPERATOR = enum.auto()
    RELATIONAL_EXPRESSION = enum.auto()
    EQUALITY_OPERATOR = enum.auto()
    EQUALITY_EXPRESSION = enum.auto()
    BITWISE_EXPRESSION = enum.auto()
    LOGICAL_EXPRESSION = enum.auto()
    SHIFT_OPERATOR = enum.auto()
    SHIFT_EXPRESSION = enum.auto()
    ARITHMETIC_OPERATOR = enum.auto()
    ARITHMETIC_EXPRESSION = enum.auto()
    FUNCTION_CALL = enum.auto()
    POSTFIX_PARTS = enum.auto()
    POSTFIX_EXPRESSION = enum.auto()
    POSTFIX_OPERATOR = enum.auto()
    ARRAY_SUBSCRIPT = enum.auto()
    MEMBER_ACCESS_DOT = enum.auto()
    MEMBER_ACCESS_ARROW = enum.auto()
    CAST_EXPRESSION = enum.auto()
    INIT_DECLARATOR = enum.auto()
    IF_STATEMENT = enum.auto()
    SWITCH_STATEMENT = enum.auto()
    WHILE_STATEMENT = enum.auto()
    DO_WHILE_STATEMENT = enum.auto()
    FOR_STATEMENT = enum.auto()
    GOTO_STATEMENT = enum.auto()
    CONTINUE_STATEMENT = enum.auto()
    BREAK_STATEMENT = enum.auto()
    RETURN_STATEMENT = enum.auto()
    TYPE_NAME = enum.auto()
    EXPRESSION_STATEMENT = enum.auto()
    STRUCT_DEFINITION = enum.auto()
    ENUMERATOR = enum.auto()
    ENUM_SPECIFIER = enum.auto()
    TYPEDEF_DECLARATION = enum.auto()
    INITIALIZER_LIST = enum.auto()
    LABELED_STATEMENT = enum.auto()
    CHARACTER_LITERAL = enum.auto()
    CASE_LABEL = enum.auto()
    SWITCH_CASE = enum.auto()
    DEFAULT_STATEMENT = enum.auto()
    LABELED_IDENTIFIER = enum.auto()
    ASSIGNMENT_OPERATOR = enum.auto()
    KEYWORD = enum.auto()
    TERNARY_OPERATION = enum.auto()
    CONDITIONAL_EXPRESSION = enum.auto()
    COMMA_EXPRESSION = enum.auto()


class BitwiseOperator(enum.Enum):
    AND = "&"
    XOR = "^"
    OR = "|"


class ShiftOperator(enum.Enum):
    LL = "<<"
    AR = ">>"


class ArithmeticOperator(enum.Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"


class RelationalOperator(enum.Enum):
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="


class EqualityOperator(enum.Enum):
    EQ = "=="
    NE = "!="


class LogicalOperator(enum.Enum):
    AND = "&&"
    OR = "||"


class UnaryOperator(enum.Enum):
    PLUS = "+"
    MINUS = "-"
    NOT = "!"
    BITNOT = "~"
    ADDR = "&"
    DEREF = "*"
    INC = "++"
    DEC = "--"
    SIZEOF = "sizeof"
    ALIGNOF = "__alignof__"

    @classmethod
    def _missing_(cls, value):
        if value == "_Alignof":
            return cls.ALIGNOF
        return None


class PostfixOperator(enum.Enum):
    INC = "++"
    DEC = "--"


class AssignmentOperator(enum.Enum):
    SIMPLE = "="
    SHL = "<<="
    SHR = ">>="
    ADD = "+="
    SUB = "-="
    MUL = "*="
    DIV = "/="
    MOD = "%="
    AND = "&="
    XOR = "^="
    OR = "|="


class FloatLiteralType(enum.IntEnum):
    DOUBLE = 0
    FLOAT = 1
    LONG_DOUBLE = 2


class Keyword(enum.IntEnum):
    UNKNOWN = 0
    STRUCT = 1
    UNION = 2


Operator = Union[
    BitwiseOperator,
    ShiftOperator,
    ArithmeticOperator,
    RelationalOperator,
    EqualityOperator,
    LogicalOperator,
    UnaryOperator,
    PostfixOperator,
    AssignmentOperator,
]


class AstBuildError(Exception):
    """Raised when a grammar node cannot be turned into an AST node."""


@dataclass
class Node:
    """An AST node: either a terminal holding text or a list of children."""

    type: NodeType
    is_terminal: bool = False
    text: Optional[str] = None
    children: list[Optional[Node]] = field(default_factory=list)
    lhs: Optional[Node] = None
    rhs: Optional[Node] = None
    false_expr: Optional[Node] = None
    keyword: Keyword = Keyword.UNKNOWN
    op_text: Optional[str] = None
    op: Optional[Operator] = None
    value: Union[int, float, None] = None
    is_unsigned: bool = False
    is_long: bool = False
    float_type: FloatLiteralType = FloatLiteralType.DOUBLE


_NODE_NAMES: dict[NodeType, str] = {
    NodeType.TRANSLATION_UNIT: "TranslationUnit",
    NodeType.FUNCTION_DEFINITION: "FunctionDefinition",
    NodeType.COMPOUND_STATEMENT: "CompoundStatement",
    NodeType.DECLARATION: "Declaration",
    NodeType.INTEGER_BASE: "IntegerLiteral",
    NodeType.FLOAT_BASE: "FloatLiteral",
    NodeType.INTEGER_LITERAL: "IntegerLiteral",
    NodeType.FLOAT_LITERAL: "FloatLiteral",
    NodeType.STRING_LITERAL: "StringLiteral",
    NodeType.LITERAL_SUFFIX: "LiteralSuffix",
    NodeType.IDENTIFIER: "Identifier",
    NodeType.DECL_SPECIFIERS: "DeclarationSpecifiers",
    NodeType.ASSIGNMENT: "Assignment",
    NodeType.TYPE_SPECIFIER: "TypeSpecifier",
    NodeType.UNARY_OPERATOR: "UnaryOperator",
    NodeType.UNARY_EXPRESSION: "UnaryExpression",
    NodeType.DECLARATOR: "Declarator",
    NodeType.DIRECT_DECLARATOR: "DirectDeclarator",
    NodeType.DECLARATOR_SUFFIX: "DeclaratorSuffix",
    NodeType.POINTER: "Pointer",
    NodeType.RELATIONAL_OPERATOR: "RelationalOperator",
    NodeType.RELATIONAL_EXPRESSION: "RelationalExpression",
    NodeType.EQUALITY_OPERATOR: "EqualityOperator",
    NodeType.EQUALITY_EXPRESSION: "EqualityExpression",
    NodeType.BITWISE_EXPRESSION: "BitwiseExpression",
    NodeType.LOGICAL_EXPRESSION: "LogicalExpression",
    NodeType.SHIFT_OPERATOR: "ShiftOperator",
    NodeType.SHIFT_EXPRESSION: "ShiftExpression",
    NodeType.ARITHMETIC_OPERATOR: "ArithmeticOperator",
    NodeType.ARITHMETIC_EXPRESSION: "ArithmeticExpression",
    NodeType.FUNCTION_CALL: "FunctionCall",
    NodeType.POSTFIX_PARTS: "PostfixParts",
    NodeType.POSTFIX_EXPRESSION: "PostfixExpression",
    NodeType.POSTFIX_OPERATOR: "PostfixOperator",
    NodeType.ARRAY_SUBSCRIPT: "ArraySubscript",
    NodeType.MEMBER_ACCESS_DOT: "MemberAccessDot",
    NodeType.MEMBER_ACCESS_ARROW: "MemberAccessArrow",
    NodeType.CAST_EXPRESSION: "CastExpression",
    NodeType.INIT_DECLARATOR: "InitDeclarator",
    NodeType.IF_STATEMENT: "IfStatement",
    NodeType.SWITCH_STATEMENT: "SwitchStatement",
    NodeType.WHILE_STATEMENT: "WhileStatement",
    NodeType.DO_WHILE_STATEMENT: "DoWhileStatement",
    NodeType.FOR_STATEMENT: "ForStatement",
    NodeType.GOTO_STATEMENT: "GotoStatement",
    NodeType.CONTINUE_STATEMENT: "ContinueStatement",
    NodeType.BREAK_STATEMENT: "BreakStatement",
    NodeType.RETURN_STATEMENT: "ReturnStatement",
    NodeType.TYPE_NAME: "TypeName",
    NodeType.EXPRESSION_STATEMENT: "ExpressionStatement",
    NodeType.STRUCT_DEFINITION: "StructDefinition",
    NodeType.TYPEDEF_DECLARATION: "TypedefDeclaration",
    NodeType.INITIALIZER_LIST: "InitializerList",
    NodeType.LABELED_STATEMENT: "LabeledStatement",
    NodeType.CHARACTER_LITERAL: "CharacterLiteral",
    NodeType.CASE_LABEL: "CaseLabel",
    NodeType.SWITCH_CASE: "SwitchCase",
    NodeType.DEFAULT_STATEMENT: "DefaultStatement",
    NodeType.LABELED_IDENTIFIER: "LabeledIdentifier",
    NodeType.ASSIGNMENT_OPERATOR: "AssignmentOperator",
    NodeType.OPTIONAL_KW_EXTENSION: "OptionalKwExtension",
    NodeType.OPTIONAL_INIT_DECLARATOR_LIST: "OptionalInitDeclaratorList",
    NodeType.KEYWORD: "Keyword",
    NodeType.TERNARY_OPERATION: "TernaryOperation",
    NodeType.CONDITIONAL_EXPRESSION: "ConditionalExpression",
    NodeType.COMMA_EXPRESSION: "CommaExpression",
    NodeType.ENUM_SPECIFIER: "EnumSpecifier",
    NodeType.ENUMERATOR: "Enumerator",
    NodeType.FUNCTION_POINTER_DECLARATOR: "FunctionPointerDeclarator",
}


def node_type_name(node_type: Union[NodeType, int]) -> str:
    """Return the display name of a node type, or "Unknown"."""
    try:
        return _NODE_NAMES.get(NodeType(node_type), "Unknown")
    except ValueError:
        return "Unknown"


def node_name(node: Optional[Node]) -> str:
    """Return the display name of a node's type, or "NULL" for no node."""
    if node is None:
        return "NULL"
    return node_type_name(node.type)


def make_list_node(node_type: NodeType, children: Iterable[Optional[Node]]) -> Node:
    """Create a non-terminal node holding the given children."""
    return Node(type=node_type, is_terminal=False, children=list(children))


def make_terminal_node(node_type: NodeType, text: Optional[str]) -> Node:
    """Create a terminal node holding the given text."""
    return Node(type=node_type, is_terminal=True, text=text)