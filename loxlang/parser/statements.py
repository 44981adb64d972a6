"""Statement parsing utilities for Lox.

These functions operate on a `loxlang.parser.parser.Parser` instance and
handle declarations and the statement forms of the language: print, blocks,
conditionals and loops. A ``for`` loop has no node of its own; it is
desugared here into a ``while`` wrapped in blocks.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from loxlang.exceptions import ParseError
from loxlang.nodes import Block, Expression, If, Literal, Print, Stmt, Var, While
from loxlang.tokens import TokenType

from .expressions import parse_expression

if TYPE_CHECKING:
    from loxlang.parser import Parser


def parse_declaration(parser: 'Parser') -> Stmt | None:
    """
    Parse a declaration or statement.

    This is the recovery point for syntax errors: the error has already been
    reported, so the parser skips ahead to the next statement boundary.
    Running out of Python stack on deeply nested input is reported the same
    way rather than escaping as a RecursionError.

    Syntax:
        <var_declaration> | <statement>

    Returns:
        Stmt | None: The parsed node, or None if it could not be parsed.
    """
    try:
        if parser.match(TokenType.VAR):
            return parse_var_declaration(parser)
        return parse_statement(parser)
    except ParseError:
        parser.synchronize()
        return None
    except RecursionError:
        parser.error(parser.peek(), "Expression nesting too deep.")
        parser.synchronize()
        return None


def parse_var_declaration(parser: 'Parser') -> Stmt:
    """
    Parse a `var` declaration; the `var` keyword is already consumed.

    Syntax:
        var <identifier> ( = <expression> )? ;
    """
    name = parser.consume(TokenType.IDENTIFIER, "Expect variable name.")
    initializer = None
    if parser.match(TokenType.EQUAL):
        initializer = parse_expression(parser)
    parser.consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
    return Var(name, initializer)


def parse_statement(parser: 'Parser') -> Stmt:
    """
    Parse a single statement.

    Syntax:
        <print> | <if> | <while> | <for> | <block> | <expression_statement>
    """
    if parser.match(TokenType.PRINT):
        return parse_print(parser)
    if parser.match(TokenType.IF):
        return parse_if(parser)
    if parser.match(TokenType.WHILE):
        return parse_while(parser)
    if parser.match(TokenType.FOR):
        return parse_for(parser)
    if parser.match(TokenType.LEFT_BRACE):
        return Block(tuple(parse_block(parser)))
    return parse_expression_statement(parser)


def parse_print(parser: 'Parser') -> Stmt:
    """
    Parse a `print` statement.

    Syntax:
        print <expression> ;
    """
    value = parse_expression(parser)
    parser.consume(TokenType.SEMICOLON, "Expect ';' after value.")
    return Print(value)


def parse_if(parser: 'Parser') -> Stmt:
    """
    Parse a conditional with an optional else branch.

    A dangling else binds to the nearest preceding if.

    Syntax:
        if ( <expression> ) <statement> ( else <statement> )?
    """
    parser.consume(TokenType.LEFT_PAREN, "Expect '(' after 'if'.")
    condition = parse_expression(parser)
    parser.consume(TokenType.RIGHT_PAREN, "Expect ')' after if condition.")

    then_branch = parse_statement(parser)
    else_branch = None
    if parser.match(TokenType.ELSE):
        else_branch = parse_statement(parser)

    return If(condition, then_branch, else_branch)


def parse_while(parser: 'Parser') -> Stmt:
    """
    Parse a `while` loop.

    Syntax:
        while ( <expression> ) <statement>
    """
    parser.consume(TokenType.LEFT_PAREN, "Expect '(' after 'while'.")
    condition = parse_expression(parser)
    parser.consume(TokenType.RIGHT_PAREN, "Expect ')' after condition.")
    body = parse_statement(parser)
    return While(condition, body)


def parse_for(parser: 'Parser') -> Stmt:
    """
    Parse a `for` loop and desugar it into a `while` loop.

    Syntax:
        for ( <var_declaration> | <expression_statement> | ; <expression>? ; <expression>? ) <statement>

    Returns:
        Stmt: `{ initializer; while (condition) { body; increment; } }`
    """
    parser.consume(TokenType.LEFT_PAREN, "Expect '(' after 'for'.")

    if parser.match(TokenType.SEMICOLON):
        initializer = None
    elif parser.match(TokenType.VAR):
        initializer = parse_var_declaration(parser)
    else:
        initializer = parse_expression_statement(parser)

    condition = None
    if not parser.check(TokenType.SEMICOLON):
        condition = parse_expression(parser)
    parser.consume(TokenType.SEMICOLON, "Expect ';' after loop condition.")

    increment = None
    if not parser.check(TokenType.RIGHT_PAREN):
        increment = parse_expression(parser)
    parser.consume(TokenType.RIGHT_PAREN, "Expect ')' after for clauses.")

    body = parse_statement(parser)

    if increment is not None:
        body = Block((body, Expression(increment)))
    if condition is None:
        condition = Literal(True)
    body = While(condition, body)
    if initializer is not None:
        body = Block((initializer, body))

    return body


def parse_block(parser: 'Parser') -> list[Stmt]:
    """
    Parse the declarations of a block; the opening brace is already consumed.

    Syntax:
        { <declaration>* }
    """
    statements = []
    while not parser.check(TokenType.RIGHT_BRACE) and not parser.is_at_end():
        stmt = parse_declaration(parser)
        if stmt is not None:
            statements.append(stmt)
    parser.consume(TokenType.RIGHT_BRACE, "Expect '}' after block.")
    return statements


def parse_expression_statement(parser: 'Parser') -> Stmt:
    """
    Parse an expression evaluated for its side effects.

    Syntax:
        <expression> ;
    """
    expr = parse_expression(parser)
    parser.consume(TokenType.SEMICOLON, "Expect ';' after expression.")
    return Expression(expr)
