"""Expression parsing utilities for Lox.

These functions operate on a `loxlang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions. Precedence is encoded
by the call chain, from loosest to tightest binding:

    assignment -> or -> and -> equality -> comparison -> term -> factor -> unary -> primary

Every binary level is left-associative; assignment is right-associative.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from loxlang.nodes import Assign, Binary, Expr, Grouping, Literal, Logical, Unary, Variable
from loxlang.tokens import TokenType

if TYPE_CHECKING:
    from loxlang.parser import Parser


# ---- Entry point ----

def parse_expression(parser: 'Parser') -> Expr:
    """Parse an expression starting from the lowest-precedence rule."""
    return parse_assignment(parser)


def parse_assignment(parser: 'Parser') -> Expr:
    """
    Parse an assignment.

    The left-hand side is parsed as an ordinary expression first; it is only
    a valid target if that turns out to be a bare variable reference. Any
    other shape is reported at the '=' token, without unwinding the parser.

    Syntax:
        <identifier> = <assignment> | <or>
    """
    expr = parse_or(parser)

    if parser.match(TokenType.EQUAL):
        equals = parser.previous()
        value = parse_assignment(parser)

        if isinstance(expr, Variable):
            return Assign(expr.name, value)

        parser.error(equals, "Invalid assignment target.")

    return expr


def parse_or(parser: 'Parser') -> Expr:
    """Parse logical OR expressions using the 'or' keyword."""
    expr = parse_and(parser)
    while parser.match(TokenType.OR):
        operator = parser.previous()
        expr = Logical(expr, operator, parse_and(parser))
    return expr


def parse_and(parser: 'Parser') -> Expr:
    """Parse logical AND expressions using the 'and' keyword."""
    expr = parse_equality(parser)
    while parser.match(TokenType.AND):
        operator = parser.previous()
        expr = Logical(expr, operator, parse_equality(parser))
    return expr


def parse_equality(parser: 'Parser') -> Expr:
    """Parse equality expressions (==, !=)."""
    expr = parse_comparison(parser)
    while parser.match(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL):
        operator = parser.previous()
        expr = Binary(expr, operator, parse_comparison(parser))
    return expr


def parse_comparison(parser: 'Parser') -> Expr:
    """Parse comparison expressions (<, <=, >, >=)."""
    expr = parse_term(parser)
    while parser.match(
        TokenType.LESS,
        TokenType.LESS_EQUAL,
        TokenType.GREATER,
        TokenType.GREATER_EQUAL,
    ):
        operator = parser.previous()
        expr = Binary(expr, operator, parse_term(parser))
    return expr


def parse_term(parser: 'Parser') -> Expr:
    """Parse addition and subtraction expressions."""
    expr = parse_factor(parser)
    while parser.match(TokenType.PLUS, TokenType.MINUS):
        operator = parser.previous()
        expr = Binary(expr, operator, parse_factor(parser))
    return expr


def parse_factor(parser: 'Parser') -> Expr:
    """Parse multiplication and division expressions."""
    expr = parse_unary(parser)
    while parser.match(TokenType.STAR, TokenType.SLASH):
        operator = parser.previous()
        expr = Binary(expr, operator, parse_unary(parser))
    return expr


def parse_unary(parser: 'Parser') -> Expr:
    """Parse prefix '!' and '-'."""
    if parser.match(TokenType.BANG, TokenType.MINUS):
        operator = parser.previous()
        return Unary(operator, parse_unary(parser))
    return parse_primary(parser)


# ---- Highest precedence ----

def parse_primary(parser: 'Parser') -> Expr:
    """Parse a literal, a variable, or a parenthesized expression."""
    if parser.match(TokenType.FALSE):
        return Literal(False)
    if parser.match(TokenType.TRUE):
        return Literal(True)
    if parser.match(TokenType.NIL):
        return Literal(None)

    if parser.match(TokenType.NUMBER, TokenType.STRING):
        return Literal(parser.previous().literal)

    if parser.match(TokenType.IDENTIFIER):
        return Variable(parser.previous())

    if parser.match(TokenType.LEFT_PAREN):
        expr = parse_expression(parser)
        parser.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
        return Grouping(expr)

    raise parser.error(parser.peek(), "Expect expression.")
