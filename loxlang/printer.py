"""AST printer.

Renders expression and statement nodes as parenthesized prefix notation, e.g.
``-123 * (45.67)`` becomes ``(* (- 123) (group 45.67))``. Used for debug
output and for checking parse trees in tests.


File: printer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from loxlang.nodes import (
    Assign,
    Binary,
    Block,
    Expr,
    Expression,
    Grouping,
    If,
    Literal,
    Logical,
    Print,
    Stmt,
    Unary,
    Var,
    Variable,
    While,
)


def _parenthesize(name: str, *parts) -> str:
    return "(" + " ".join([name, *parts]) + ")"


def _format_literal(value) -> str:
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        text = repr(value)
        return text[:-2] if text.endswith(".0") else text
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def format_expr(expr: Expr) -> str:
    """
    Convert an expression node to a readable string.

    Parameters:
        expr (Expr): An expression node.

    Returns:
        str: A string representation of the expression.
    """
    match expr:
        case Literal(value=value):
            return _format_literal(value)
        case Grouping(expression=expression):
            return _parenthesize("group", format_expr(expression))
        case Unary(operator=operator, right=right):
            return _parenthesize(operator.lexeme, format_expr(right))
        case Binary(left=left, operator=operator, right=right) | Logical(
            left=left, operator=operator, right=right
        ):
            return _parenthesize(operator.lexeme, format_expr(left), format_expr(right))
        case Variable(name=name):
            return name.lexeme
        case Assign(name=name, value=value):
            return _parenthesize("=", name.lexeme, format_expr(value))
        case _:
            return f"<expr {type(expr).__name__}>"


def format_stmt(stmt: Stmt) -> str:
    """
    Convert a statement node to a readable string.
    """
    match stmt:
        case Expression(expression=expression):
            return _parenthesize(";", format_expr(expression))
        case Print(expression=expression):
            return _parenthesize("print", format_expr(expression))
        case Var(name=name, initializer=None):
            return _parenthesize("var", name.lexeme)
        case Var(name=name, initializer=initializer):
            return _parenthesize("var", name.lexeme, "=", format_expr(initializer))
        case Block(statements=statements):
            return _parenthesize("block", *(format_stmt(s) for s in statements))
        case If(condition=condition, then_branch=then_branch, else_branch=None):
            return _parenthesize("if", format_expr(condition), format_stmt(then_branch))
        case If(condition=condition, then_branch=then_branch, else_branch=else_branch):
            return _parenthesize(
                "if-else",
                format_expr(condition),
                format_stmt(then_branch),
                format_stmt(else_branch),
            )
        case While(condition=condition, body=body):
            return _parenthesize("while", format_expr(condition), format_stmt(body))
        case _:
            return f"<stmt {type(stmt).__name__}>"
