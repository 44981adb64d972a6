"""Lexer for Lox.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match is one maximal lexeme and
yields a :class:`Token` containing its type, the lexeme, the literal value
(numbers and strings only) and the source line.

Whitespace and ``//`` comments are skipped, newlines only advance the line
counter. Lexical errors (an unexpected character or an unterminated string)
are reported to the :class:`ErrorReporter` and scanning carries on, so one run
surfaces as many problems as possible. The token list always ends with a
single ``EOF`` token carrying the final line number.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re

from loxlang.errors import ErrorReporter
from loxlang.tokens import KEYWORDS, Token, TokenType


TOKEN_SPECIFICATION: list[tuple[str, str]] = [
    # Layout
    ('NEWLINE',       r'\n'),
    ('SKIP',          r'[ \r\t]+'),
    ('COMMENT',       r'//[^\n]*'),

    # Literals
    ('STRING',        r'"[^"]*"'),
    ('UNTERMINATED',  r'"[^"]*'),
    ('NUMBER',        r'[0-9]+(?:\.[0-9]+)?'),
    ('IDENTIFIER',    r'[A-Za-z_][A-Za-z0-9_]*'),

    # Two character operators
    ('BANG_EQUAL',    r'!='),
    ('EQUAL_EQUAL',   r'=='),
    ('GREATER_EQUAL', r'>='),
    ('LESS_EQUAL',    r'<='),

    # One character operators
    ('BANG',          r'!'),
    ('EQUAL',         r'='),
    ('GREATER',       r'>'),
    ('LESS',          r'<'),

    # Delimiters
    ('LEFT_PAREN',    r'\('),
    ('RIGHT_PAREN',   r'\)'),
    ('LEFT_BRACE',    r'\{'),
    ('RIGHT_BRACE',   r'\}'),
    ('COMMA',         r','),
    ('DOT',           r'\.'),
    ('SEMICOLON',     r';'),

    # Arithmetic operators
    ('MINUS',         r'-'),
    ('PLUS',          r'\+'),
    ('STAR',          r'\*'),
    ('SLASH',         r'/'),

    ('MISMATCH',      r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION)
)


class Scanner:
    """
    Converts source text into a list of tokens.
    """
    def __init__(self, source: str, reporter: ErrorReporter | None = None):
        """
        Initialize the scanner.

        Parameters:
            source (str): The source code to scan.
            reporter (ErrorReporter | None): Sink for lexical errors.
        """
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.tokens: list[Token] = []
        self.line = 1

    def scan_tokens(self) -> list[Token]:
        """
        Scan the whole source.

        Returns:
            list[Token]: The tokens, terminated by exactly one EOF token.
        """
        for match_obj in TOKEN_REGEX.finditer(self.source):
            kind = match_obj.lastgroup
            lexeme = match_obj.group()

            if kind == 'NEWLINE':
                self.line += 1
            elif kind in ('SKIP', 'COMMENT'):
                continue
            elif kind == 'STRING':
                self.line += lexeme.count('\n')
                self._add_token(TokenType.STRING, lexeme, lexeme[1:-1])
            elif kind == 'UNTERMINATED':
                self.line += lexeme.count('\n')
                self.reporter.error(self.line, "Unterminated string.")
            elif kind == 'NUMBER':
                self._add_token(TokenType.NUMBER, lexeme, float(lexeme))
            elif kind == 'IDENTIFIER':
                self._add_token(KEYWORDS.get(lexeme, TokenType.IDENTIFIER), lexeme)
            elif kind == 'MISMATCH':
                self.reporter.error(self.line, f"Unexpected character '{lexeme}'.")
            else:
                self._add_token(TokenType[kind], lexeme)

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        return self.tokens

    def _add_token(self, type_: TokenType, lexeme: str, literal=None) -> None:
        self.tokens.append(Token(type_, lexeme, literal, self.line))


def tokenize(source: str, reporter: ErrorReporter | None = None) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        source (str): The source code to tokenize.
        reporter (ErrorReporter | None): Sink for lexical errors.

    Returns:
        list[Token]: A list of Token instances ending with EOF.
    """
    return Scanner(source, reporter).scan_tokens()
