"""Errors.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from loxlang.tokens import Token


class LoxRuntimeException(Exception):
    """
    Error raised while evaluating a program.

    Carries the token closest to the failure so the line can be reported.
    The token is None when the failure has no single source location, such
    as running out of stack.
    """
    def __init__(self, token: Token | None, message: str):
        self.token = token
        self.message = message
        super().__init__(message)


class UndefinedVariableException(LoxRuntimeException):
    """
    Error for undefined variables.
    """
    def __init__(self, token: Token):
        self.varname = token.lexeme
        super().__init__(token, f"Undefined variable '{token.lexeme}'.")


class OperandTypeException(LoxRuntimeException):
    """
    Error for operands of the wrong runtime type.
    """
    pass


class ParseError(Exception):
    """
    Control flow handling for syntax error recovery.
    """
    pass
