"""
Tests for variable environments.
"""
import pytest

from loxlang.environment import Environment
from loxlang.exceptions import UndefinedVariableException
from loxlang.tokens import Token, TokenType


def name(text: str, line: int = 1) -> Token:
    return Token(TokenType.IDENTIFIER, text, None, line)


def test_define_and_get():
    env = Environment()
    env.define("a", 1.0)
    assert env.get(name("a")) == 1.0


def test_get_delegates_to_enclosing():
    outer = Environment()
    outer.define("a", "outer")
    inner = Environment(outer)
    assert inner.get(name("a")) == "outer"
    assert "a" not in inner.values


def test_define_shadows_without_touching_enclosing():
    outer = Environment()
    outer.define("a", 1.0)
    inner = Environment(outer)
    inner.define("a", 2.0)
    assert inner.get(name("a")) == 2.0
    assert outer.get(name("a")) == 1.0


def test_assign_updates_nearest_binding():
    outer = Environment()
    outer.define("a", 1.0)
    inner = Environment(outer)
    inner.assign(name("a"), 5.0)
    assert outer.get(name("a")) == 5.0
    assert "a" not in inner.values


def test_nil_binding_is_still_defined():
    env = Environment()
    env.define("a", None)
    assert env.get(name("a")) is None


def test_get_undefined_raises_with_token():
    env = Environment(Environment())
    token = name("missing", line=7)
    with pytest.raises(UndefinedVariableException) as excinfo:
        env.get(token)
    assert excinfo.value.token is token
    assert excinfo.value.varname == "missing"
    assert str(excinfo.value) == "Undefined variable 'missing'."


def test_assign_undefined_raises():
    outer = Environment()
    inner = Environment(outer)
    with pytest.raises(UndefinedVariableException):
        inner.assign(name("missing"), 1.0)
    assert "missing" not in inner.values
    assert "missing" not in outer.values
