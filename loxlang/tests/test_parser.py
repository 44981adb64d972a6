"""
Tests for the Lox parser: precedence, associativity and error recovery.
"""
import pytest

from loxlang.nodes import (
    Assign,
    Binary,
    Block,
    Expression,
    Grouping,
    If,
    Literal,
    Print,
    Unary,
    Var,
    Variable,
    While,
)
from loxlang.parser import Parser
from loxlang.printer import format_expr

from loxlang.tests.utils import make_reporter, parse_source


def parse_expr(source: str):
    """
    Parse a single expression statement and return its expression.
    """
    reporter = make_reporter()
    ast = parse_source(source, reporter)
    assert not reporter.had_error, reporter.errors
    assert len(ast) == 1
    assert isinstance(ast[0], Expression)
    return ast[0].expression


def test_book_sample_shape():
    expr = parse_expr("-123 * (45.67);")
    assert isinstance(expr, Binary)
    assert isinstance(expr.left, Unary)
    assert expr.left.right == Literal(123.0)
    assert isinstance(expr.right, Grouping)
    assert format_expr(expr) == "(* (- 123) (group 45.67))"


@pytest.mark.parametrize(
    "source, expected",
    [
        ("1 + 2 * 3 - 4;", "(- (+ 1 (* 2 3)) 4)"),
        ("1 - 2 - 3;", "(- (- 1 2) 3)"),
        ("8 / 4 / 2;", "(/ (/ 8 4) 2)"),
        ("1 < 2 == 3 >= 4;", "(== (< 1 2) (>= 3 4))"),
        ("!!true;", "(! (! true))"),
        ("-(1 + 2);", "(- (group (+ 1 2)))"),
        ("a or b and c;", "(or a (and b c))"),
        ('"s" != nil;', '(!= "s" nil)'),
    ],
)
def test_precedence_and_associativity(source, expected):
    assert format_expr(parse_expr(source)) == expected


def test_assignment_is_right_associative():
    expr = parse_expr("a = b = 1;")
    assert isinstance(expr, Assign)
    assert expr.name.lexeme == "a"
    assert isinstance(expr.value, Assign)
    assert expr.value.name.lexeme == "b"
    assert format_expr(expr) == "(= a (= b 1))"


def test_invalid_assignment_target_reported_at_equals():
    reporter = make_reporter()
    ast = parse_source("1 + a = 2;\nprint 3;", reporter)
    assert reporter.errors == ["[line 1] Error at '=': Invalid assignment target."]
    # The parser is not left confused, so both statements are still produced.
    assert len(ast) == 2


def test_grouped_variable_is_not_assignable():
    reporter = make_reporter()
    parse_source("(a) = 1;", reporter)
    assert reporter.errors == ["[line 1] Error at '=': Invalid assignment target."]


def test_two_missing_semicolons_report_two_errors():
    """
    Test that the parser recovers after the first error and reports the second.
    """
    reporter = make_reporter()
    ast = parse_source("print 1 2;\nprint 3 4;\n", reporter)
    assert ast == []
    assert reporter.errors == [
        "[line 1] Error at '2': Expect ';' after value.",
        "[line 2] Error at '4': Expect ';' after value.",
    ]


def test_recovery_keeps_following_statements():
    reporter = make_reporter()
    ast = parse_source("var = 1;\nprint 2;\n", reporter)
    assert reporter.errors == ["[line 1] Error at '=': Expect variable name."]
    assert len(ast) == 1
    assert isinstance(ast[0], Print)


def test_missing_tokens_messages():
    reporter = make_reporter()
    parse_source("print (1 + 2;\nprint 1", reporter)
    assert reporter.errors == [
        "[line 1] Error at ';': Expect ')' after expression.",
        "[line 2] Error at end: Expect ';' after value.",
    ]


def test_expect_expression():
    reporter = make_reporter()
    parse_source("print ;", reporter)
    assert reporter.errors == ["[line 1] Error at ';': Expect expression."]


def test_var_declaration_with_and_without_initializer():
    ast = parse_source("var a; var b = 2;")
    assert ast[0] == Var(ast[0].name, None)
    assert ast[0].name.lexeme == "a"
    assert ast[1].initializer == Literal(2.0)


def test_if_else_binds_to_nearest_if():
    ast = parse_source("if (a) if (b) print 1; else print 2;")
    outer = ast[0]
    assert isinstance(outer, If)
    assert outer.else_branch is None
    inner = outer.then_branch
    assert isinstance(inner, If)
    assert isinstance(inner.else_branch, Print)


def test_block_and_while():
    ast = parse_source("while (x < 3) { x = x + 1; print x; }")
    loop = ast[0]
    assert isinstance(loop, While)
    assert isinstance(loop.body, Block)
    assert len(loop.body.statements) == 2


def test_for_loop_desugars_to_while():
    ast = parse_source("for (var i = 0; i < 3; i = i + 1) print i;")
    assert len(ast) == 1
    outer = ast[0]
    assert isinstance(outer, Block)
    init, loop = outer.statements
    assert isinstance(init, Var)
    assert isinstance(loop, While)
    assert format_expr(loop.condition) == "(< i 3)"
    body, increment = loop.body.statements
    assert isinstance(body, Print)
    assert isinstance(increment, Expression)
    assert isinstance(increment.expression, Assign)


def test_for_loop_without_clauses_loops_on_true():
    ast = parse_source("for (;;) print 1;")
    loop = ast[0]
    assert isinstance(loop, While)
    assert loop.condition == Literal(True)
    assert isinstance(loop.body, Print)


def test_block_missing_closing_brace():
    reporter = make_reporter()
    parse_source("{ print 1;", reporter)
    assert reporter.errors == ["[line 1] Error at end: Expect '}' after block."]


def test_variable_reference():
    expr = parse_expr("foo;")
    assert isinstance(expr, Variable)
    assert expr.name.lexeme == "foo"


def test_empty_token_list():
    assert Parser([]).parse() == []
