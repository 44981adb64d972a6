"""Variable environments.

An :class:`Environment` maps names to runtime values and optionally points at
the enclosing environment. Lookup and assignment walk outward through that
chain; definition only ever touches the innermost map, which is what lets an
inner block shadow an outer variable.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from loxlang.exceptions import UndefinedVariableException
from loxlang.tokens import Token


class Environment:
    """A scope of variable bindings."""

    def __init__(self, enclosing: Environment | None = None):
        self.values: dict[str, object] = {}
        self.enclosing = enclosing

    def define(self, name: str, value) -> None:
        """
        Bind a name in this scope, overwriting any existing binding here.
        """
        self.values[name] = value

    def get(self, name: Token):
        """
        Look a variable up in this scope or the nearest enclosing one.

        Raises:
            UndefinedVariableException: If no scope in the chain binds the name.
        """
        if name.lexeme in self.values:
            return self.values[name.lexeme]
        if self.enclosing is not None:
            return self.enclosing.get(name)
        raise UndefinedVariableException(name)

    def assign(self, name: Token, value) -> None:
        """
        Rebind an existing variable in the nearest scope that defines it.

        Raises:
            UndefinedVariableException: If no scope in the chain binds the name.
        """
        if name.lexeme in self.values:
            self.values[name.lexeme] = value
            return
        if self.enclosing is not None:
            self.enclosing.assign(name, value)
            return
        raise UndefinedVariableException(name)
