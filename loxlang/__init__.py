"""Lox language interpreter.

A tree-walk interpreter for a small dynamically typed scripting language.
Source text goes through the :mod:`loxlang.lexer`, the :mod:`loxlang.parser`
and finally the :mod:`loxlang.interpreter`.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

__version__ = "0.1.0"
