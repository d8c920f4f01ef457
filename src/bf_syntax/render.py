"""Conversions from parsed programs back to text and plain data."""

from __future__ import annotations

from .ast import Expression, Loop, Operator, Program


def _render_expression(expr: Expression) -> str:
    if isinstance(expr, Operator):
        return expr.symbol.value
    if isinstance(expr, Loop):
        return "[" + "".join(_render_expression(item) for item in expr.body) + "]"
    raise TypeError(f"Unsupported expression node: {type(expr).__name__}")


def render(program: Program) -> str:
    """Canonical source text for ``program``, comments and whitespace dropped."""
    return "".join(_render_expression(stmt) for stmt in program.statements)


def _expression_data(expr: Expression) -> object:
    if isinstance(expr, Operator):
        return expr.symbol.name
    if isinstance(expr, Loop):
        return {"loop": [_expression_data(item) for item in expr.body]}
    raise TypeError(f"Unsupported expression node: {type(expr).__name__}")


def to_data(program: Program) -> list[object]:
    """JSON-ready nesting: symbol names for operators, ``{"loop": [...]}`` for loops."""
    return [_expression_data(stmt) for stmt in program.statements]
