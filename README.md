# ncc

Typed abstract syntax tree (AST) nodes for C, and the builders that make them.

A parser that has matched a grammar rule passes `ncc` the text it matched and
the nodes it has already built for that rule's children. `ncc` returns the AST
node for the rule. While doing so it checks the shape of the input: the number
of children, the kind of operator node, and the operator text. When the shape
is wrong it raises `ncc.ast.AstBuildError`.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `ncc.ast`

- `NodeType`: an integer enum with one member for each kind of node, such as
  `TRANSLATION_UNIT`, `IDENTIFIER` and `ARITHMETIC_EXPRESSION`.
- Operator enums whose values are the operator's text: `BitwiseOperator`,
  `ShiftOperator`, `ArithmeticOperator`, `RelationalOperator`,
  `EqualityOperator`, `LogicalOperator`, `UnaryOperator`, `PostfixOperator` and
  `AssignmentOperator`. `UnaryOperator("_Alignof")` gives `UnaryOperator.ALIGNOF`,
  the same as `"__alignof__"` does.
- `FloatLiteralType` (`DOUBLE`, `FLOAT`, `LONG_DOUBLE`) and `Keyword`
  (`UNKNOWN`, `STRUCT`, `UNION`).
- `Node`: a dataclass. A node is either a terminal (`is_terminal=True`) that
  holds `text`, or a list node that holds `children`. An expression node keeps
  its operands in `lhs`, `rhs` and `false_expr`, and its operator in `op` and
  `op_text`. A literal node keeps `value`, `is_unsigned`, `is_long` and
  `float_type`.
- `make_list_node(node_type, children)` and `make_terminal_node(node_type, text)`
  create nodes.
- `node_type_name(node_type)` returns a display name such as
  `"ArithmeticExpression"`, or `"Unknown"` for a value with no name.
  `node_name(node)` does the same for a node, and returns `"NULL"` for `None`.

### `ncc.terminals`

These builders make leaf nodes. Each one is called as `build_*(text, children)`.

- `build_identifier`, `build_string_literal`, `build_character_literal`,
  `build_literal_suffix`, `build_integer_base`, `build_float_base`,
  `build_pointer`, `build_continue_statement` and `build_break_statement` take
  no children.
- `build_integer_literal` takes one or two children: the base, and an optional
  suffix. It reads the value the way C's `strtoull` does with base 0, so it
  accepts hex, octal and decimal, and stores the value as a signed 64-bit
  number. A `u`/`U` in the suffix sets `is_unsigned` and an `l`/`L` sets
  `is_long`.
- `build_float_literal` takes one or two children. It reads decimal, hex,
  `inf` and `nan` values. The default type is `DOUBLE`. An `f`/`F` suffix makes
  it `FLOAT`, and otherwise an `l`/`L` suffix makes it `LONG_DOUBLE`.
- `build_unary_operator`, `build_relational_operator`, `build_equality_operator`,
  `build_shift_operator`, `build_arithmetic_operator` and
  `build_postfix_operator` raise `AstBuildError` when they do not know the
  operator text. `build_assignment_operator` treats text it does not know as
  `=`.
- `build_keyword` accepts only `struct` and `union`.
- `build_type_specifier` makes a terminal node when it has no children and a
  list node when it has some.

### `ncc.expressions`

These builders fold their children into expression and statement nodes.

- `build_arithmetic_expression`, `build_shift_expression`,
  `build_relational_expression`, `build_equality_expression` and
  `build_assignment` expect `[lhs, operator node, rhs]`. The new node takes its
  operator from the operator node.
- `build_bitwise_and_expression`, `build_bitwise_xor_expression`,
  `build_bitwise_or_expression`, `build_logical_and_expression` and
  `build_logical_or_expression` expect `[lhs, rhs]`. The operator comes from
  the builder itself.
- `build_unary_expression` expects `[unary operator node, operand]`. The
  operand is stored in `lhs`.
- `build_postfix_expression` expects `[primary, postfix parts]`. When the
  postfix parts are empty it returns the primary expression unchanged.
- `build_conditional_expression` returns a lone condition unchanged. Given
  `[condition, ternary operation]`, it stores the condition in `lhs`, the true
  branch in `rhs` and the false branch in `false_expr`.
- `build_comma_expression` returns a single expression unchanged. Given more
  than one, it returns a `COMMA_EXPRESSION` list node.
- `build_return_statement` takes at most one child, which it stores in `lhs`.
- `build_declaration` expects exactly three children.

### `ncc.registry`

- `Action`: the semantic actions of the C grammar.
- `ActionRegistry`: maps each action to a handler. It has `register(action,
  handler)`, `handler(action)` (which returns `None` when nothing is
  registered) and `build(action, text, children)`, which raises
  `AstBuildError` when no handler is registered. It also supports `in` and
  `len()`.
- `list_node_builder(node_type)` returns a handler that wraps its children in a
  list node of the given type.
- `default_registry()` returns a registry that has a handler for every
  `Action`.

### `ncc.printer`

- `format_ast(node)` renders a tree as indented text, one node per line. Each
  line shows the node's name and its numeric type. A terminal line also shows
  the node's text. Its `LHS`, `Operator`, `RHS` and `Ternary False Expression`
  follow on their own lines. A list line shows the number of children.
- `print_ast(node, file=None)` writes the same text to `file`, or to standard
  output when `file` is `None`.

## Example

```python
from ncc.registry import Action, default_registry
from ncc.printer import print_ast

registry = default_registry()
lhs = registry.build(Action.IDENTIFIER, "a", [])
op = registry.build(Action.ARITHMETIC_OPERATOR, "+", [])
rhs = registry.build(Action.IDENTIFIER, "b", [])
expr = registry.build(Action.ARITHMETIC_EXPRESSION, "a + b", [lhs, op, rhs])
print_ast(expr)
```

## What it does not do

`ncc` does not read C source text. It has no grammar and no parser, so
something else has to match the source and call the builders. It does not
check types, generate code or write output files. It has no command-line
program.