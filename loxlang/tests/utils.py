"""
Utility functions shared across Lox Language tests.
"""
import io

from loxlang.errors import ErrorReporter
from loxlang.interpreter import Interpreter
from loxlang.lexer import tokenize
from loxlang.parser import Parser


def make_reporter() -> ErrorReporter:
    """
    Create a reporter that writes into a buffer instead of stderr.
    """
    return ErrorReporter(io.StringIO())


def parse_source(source: str, reporter: ErrorReporter | None = None):
    """
    Parse source code and return the AST.
    """
    reporter = reporter if reporter is not None else make_reporter()
    tokens = tokenize(source, reporter)
    parser = Parser(tokens, reporter)
    return parser.parse()


def run_source(source: str, interpreter: Interpreter | None = None):
    """
    Run source code and return the printed lines and the reporter used.
    """
    reporter = interpreter.reporter if interpreter is not None else make_reporter()
    lines: list[str] = []
    if interpreter is None:
        interpreter = Interpreter(reporter, output=lines.append)
    else:
        interpreter.output = lines.append
    ast = parse_source(source, reporter)
    assert not reporter.had_error, reporter.errors
    interpreter.run(ast)
    return lines, reporter
