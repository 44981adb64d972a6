"""
Tests for the AST printer.
"""
from loxlang.nodes import Binary, Grouping, Literal, Unary
from loxlang.printer import format_stmt, format_expr
from loxlang.tokens import Token, TokenType

from loxlang.tests.utils import parse_source


def test_book_sample_prints():
    expression = Binary(
        Unary(Token(TokenType.MINUS, "-", None, 1), Literal(123)),
        Token(TokenType.STAR, "*", None, 1),
        Grouping(Literal(45.67)),
    )
    assert format_expr(expression) == "(* (- 123) (group 45.67))"


def test_statements_print():
    source = (
        "var a = 1;\n"
        "var b;\n"
        "{ print a; }\n"
        "if (a) print a; else print nil;\n"
        "if (b) {}\n"
        "while (false) a = 2;\n"
    )
    printed = [format_stmt(stmt) for stmt in parse_source(source)]
    assert printed == [
        "(var a = 1)",
        "(var b)",
        "(block (print a))",
        "(if-else a (print a) (print nil))",
        "(if b (block))",
        "(while false (; (= a 2)))",
    ]
