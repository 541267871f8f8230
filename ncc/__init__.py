"""Typed AST nodes, node builders, an action registry and a tree printer for C."""

__version__ = "0.1.0"
__all__ = ["ast", "printer", "terminals", "expressions", "registry"]