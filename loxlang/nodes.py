"""Abstract syntax tree nodes for Lox.

Expressions and statements are closed families of frozen dataclasses. The
``Expr`` and ``Stmt`` unions list every variant, so the interpreter and the
printer dispatch with ``match`` over the node class. Optional children (an
``else`` branch, a ``var`` initializer) are ``None`` when absent.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from loxlang.tokens import Token


# ---- Expressions ----

@dataclass(frozen=True)
class Literal:
    """A number, string, boolean or nil literal."""
    value: float | str | bool | None


@dataclass(frozen=True)
class Grouping:
    """A parenthesized expression."""
    expression: Expr


@dataclass(frozen=True)
class Unary:
    """A prefix ``!`` or ``-`` applied to an operand."""
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Binary:
    """An arithmetic, comparison or equality operator applied to two operands."""
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Logical:
    """A short-circuiting ``and`` / ``or``."""
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Variable:
    """A reference to a variable by name."""
    name: Token


@dataclass(frozen=True)
class Assign:
    """Assignment to an existing variable, itself an expression."""
    name: Token
    value: Expr


Expr = Union[Literal, Grouping, Unary, Binary, Logical, Variable, Assign]


# ---- Statements ----

@dataclass(frozen=True)
class Expression:
    """An expression evaluated for its side effects."""
    expression: Expr


@dataclass(frozen=True)
class Print:
    """Prints the stringified value of an expression."""
    expression: Expr


@dataclass(frozen=True)
class Var:
    """A variable declaration with an optional initializer."""
    name: Token
    initializer: Expr | None


@dataclass(frozen=True)
class Block:
    """A braced sequence of statements with its own scope."""
    statements: tuple[Stmt, ...]


@dataclass(frozen=True)
class If:
    """A conditional with an optional else branch."""
    condition: Expr
    then_branch: Stmt
    else_branch: Stmt | None


@dataclass(frozen=True)
class While:
    """A loop that runs while its condition is truthy."""
    condition: Expr
    body: Stmt


Stmt = Union[Expression, Print, Var, Block, If, While]


__all__ = [
    "Literal", "Grouping", "Unary", "Binary", "Logical", "Variable", "Assign", "Expr",
    "Expression", "Print", "Var", "Block", "If", "While", "Stmt",
]
