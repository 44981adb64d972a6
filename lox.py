"""
Lox Language Interpreter

This is the main entry point for the Lox language interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. If no lexical or syntax error was reported, the Interpreter walks the AST,
   evaluating expressions and executing statements.

Set the LOXDEBUG environment variable to print the tokens and the AST
before execution.
"""
import os
import sys

from loxlang.errors import ErrorReporter
from loxlang.interpreter import Interpreter
from loxlang.lexer import tokenize
from loxlang.parser import Parser
from loxlang.printer import format_stmt

EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_SOFTWARE = 70


def print_usage():
    """
    Print usage.
    """
    print()
    print("Lox Language Interpreter")
    print()
    print("Usage:")
    print("    lox [script.lox]")
    print()
    print("Arguments:")
    print("    <script.lox>")
    print("        Path to a Lox source file to execute.")
    print()
    print("Example:")
    print("    lox hello.lox")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    for token in tokens:
        print(token)
    print("\nAST:\n")
    for stmt in ast:
        print(format_stmt(stmt))
    print(" ")


def run(source: str, interpreter: Interpreter, reporter: ErrorReporter) -> None:
    """
    Scan, parse and, if that succeeded, execute a piece of source.
    """
    tokens = tokenize(source, reporter)
    parser = Parser(tokens, reporter)
    ast = parser.parse()

    if os.environ.get('LOXDEBUG'):
        debug_print_tokens_ast(tokens, ast)

    if reporter.had_error:
        return

    interpreter.run(ast)


def run_script(script_name: str) -> int:
    """
    Run a Lox script and return the process exit status.
    """
    with open(script_name, "r", encoding="utf-8") as f:
        code = f.read()

    reporter = ErrorReporter()
    interpreter = Interpreter(reporter)
    run(code, interpreter, reporter)

    if reporter.had_error:
        return EX_DATAERR
    if reporter.had_runtime_error:
        return EX_SOFTWARE
    return EX_OK


def run_repl():
    """
    Run the interactive REPL
    """
    print("Lox Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    reporter = ErrorReporter()
    interpreter = Interpreter(reporter)
    while True:
        try:
            line = input("> ")
            if line.strip() in {"exit", "quit"}:
                break
            run(line, interpreter, reporter)
            reporter.reset()
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a usage exit code.
    """
    args = argv[1:]
    if not args:
        run_repl()
        return EX_OK
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return EX_OK
    if len(args) == 1 and not args[0].startswith('-'):
        return run_script(args[0])
    print_usage()
    return EX_USAGE


def cli() -> None:
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
