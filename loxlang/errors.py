"""Error reporting.

The :class:`ErrorReporter` is the sink every stage reports into. It formats
messages for the user, writes them to stderr and remembers whether a static or
runtime error happened so the driver can choose an exit status.


File: errors.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import sys

from loxlang.exceptions import LoxRuntimeException
from loxlang.tokens import Token, TokenType


class ErrorReporter:
    """Collects and prints lexical, syntax and runtime errors."""

    def __init__(self, stream=None):
        """
        Initialize the reporter.

        Parameters:
            stream (TextIO | None): Where messages are written, stderr when omitted.
        """
        self.stream = stream
        self.errors: list[str] = []
        self.had_error = False
        self.had_runtime_error = False

    def error(self, line: int, message: str) -> None:
        """
        Report a lexical error at a source line.
        """
        self.report(line, "", message)

    def token_error(self, token: Token, message: str) -> None:
        """
        Report a syntax error at a token.
        """
        if token.type == TokenType.EOF:
            self.report(token.line, " at end", message)
        else:
            self.report(token.line, f" at '{token.lexeme}'", message)

    def runtime_error(self, error: LoxRuntimeException) -> None:
        """
        Report an error raised during evaluation.
        """
        text = error.message
        if error.token is not None:
            text += f"\n[line {error.token.line}]"
        self.errors.append(text)
        self._write(text)
        self.had_runtime_error = True

    def report(self, line: int, where: str, message: str) -> None:
        text = f"[line {line}] Error{where}: {message}"
        self.errors.append(text)
        self._write(text)
        self.had_error = True

    def reset(self) -> None:
        """
        Forget static errors and collected messages, used between REPL inputs.
        """
        self.had_error = False
        self.errors.clear()

    def _write(self, text: str) -> None:
        print(text, file=self.stream if self.stream is not None else sys.stderr)
