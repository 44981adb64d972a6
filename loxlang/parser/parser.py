"""Main parser entry point for Lox.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. It owns the token cursor and the error recovery
machinery; the grammar routines themselves are split across
`loxlang.parser.expressions` and `loxlang.parser.statements` and call each
other directly, keeping the Python stack shallow for nested input.

Syntax errors are reported to the :class:`ErrorReporter` and unwind to the
nearest declaration as a :class:`ParseError`. The parser then synchronizes
on the next statement boundary and keeps going, so a single pass collects
every independent mistake in a file.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from loxlang.errors import ErrorReporter
from loxlang.exceptions import ParseError
from loxlang.nodes import Stmt
from loxlang.tokens import Token, TokenType

from .statements import parse_declaration


# Tokens that start a new declaration, used to resynchronize after an error.
SYNC_KEYWORDS = frozenset({
    TokenType.CLASS,
    TokenType.FUNCTION,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
})


class Parser:
    """Lox parser."""

    def __init__(self, tokens: list[Token], reporter: ErrorReporter | None = None):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances, normally ending in EOF.
            reporter (ErrorReporter | None): Sink for syntax errors.
        """
        if not tokens:
            tokens = [Token(TokenType.EOF, "", None, 1)]
        self.tokens = tokens
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.current = 0

    # Token cursor
    def peek(self) -> Token:
        return self.tokens[self.current]

    def previous(self) -> Token:
        return self.tokens[self.current - 1]

    def is_at_end(self) -> bool:
        return self.peek().type == TokenType.EOF

    def check(self, token_type: TokenType) -> bool:
        """
        Return whether the current token is of the given type without consuming it.
        """
        if self.is_at_end():
            return False
        return self.peek().type == token_type

    def advance(self) -> Token:
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def match(self, *token_types: TokenType) -> bool:
        """
        Consume the current token if it is any of the given types.
        """
        for token_type in token_types:
            if self.check(token_type):
                self.advance()
                return True
        return False

    def consume(self, token_type: TokenType, message: str) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (TokenType): The expected token type.
            message (str): The error message when it does not match.

        Raises:
            ParseError: If the token does not match the expected type.
        """
        if self.check(token_type):
            return self.advance()
        raise self.error(self.peek(), message)

    # Error handling
    def error(self, token: Token, message: str) -> ParseError:
        """
        Report a syntax error at a token and return the signal to unwind with.
        """
        self.reporter.token_error(token, message)
        return ParseError(message)

    def synchronize(self) -> None:
        """
        Discard tokens until the start of the next statement.
        """
        self.advance()
        while not self.is_at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return
            if self.peek().type in SYNC_KEYWORDS:
                return
            self.advance()

    def parse(self) -> list[Stmt]:
        """
        Parse the full input into a list of statements.

        Declarations that failed to parse are left out; check the reporter's
        ``had_error`` before executing the result.
        """
        statements = []
        while not self.is_at_end():
            stmt = parse_declaration(self)
            if stmt is not None:
                statements.append(stmt)
        return statements
