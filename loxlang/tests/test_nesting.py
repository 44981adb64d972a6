"""
Tests for deeply nested programs.
"""
import lox

from loxlang.tests.utils import make_reporter, parse_source, run_source


def test_fifty_nested_groupings_run():
    lines, _ = run_source("print " + "(" * 50 + "1" + ")" * 50 + ";")
    assert lines == ["1"]


def test_two_hundred_nested_blocks_run():
    """
    Test that blocks nested 200 deep parse, execute and still see globals.
    """
    source = "var x = 1;\n" + "{" * 200 + "print x;" + "}" * 200 + "\nprint x + 1;"
    lines, reporter = run_source(source)
    assert lines == ["1", "2"]
    assert not reporter.had_runtime_error


def test_too_deep_grouping_is_reported_not_raised():
    """
    Test that running out of stack while parsing becomes one syntax error.
    """
    reporter = make_reporter()
    ast = parse_source("print " + "(" * 200 + "1" + ")" * 200 + ";\nprint 2;", reporter)
    assert len(reporter.errors) == 1
    assert reporter.errors[0].startswith("[line 1] Error")
    assert reporter.errors[0].endswith("Expression nesting too deep.")
    assert len(ast) == 1


def test_too_deep_grouping_through_cli(tmp_path, capsys):
    path = tmp_path / "deep.lox"
    path.write_text("print " + "(" * 200 + "1" + ")" * 200 + ";\n", encoding="utf-8")
    assert lox.main(["lox", str(path)]) == lox.EX_DATAERR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Expression nesting too deep." in captured.err


def test_too_deep_evaluation_is_reported_not_raised():
    """
    Test that a long operator chain that exhausts the stack at runtime is reported.
    """
    source = "print 1;\nprint " + " + ".join(["1"] * 3000) + ";\nprint 3;"
    lines, reporter = run_source(source)
    assert lines == ["1"]
    assert reporter.had_runtime_error
    assert reporter.errors == ["Expression nesting too deep."]
