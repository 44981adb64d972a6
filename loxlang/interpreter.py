"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
literals, arithmetic, comparison, equality and logical operators, variables, blocks,
conditionals, loops and print statements.

1. Execution Model
The interpreter evaluates the AST in a top-down, recursive manner. Statements are executed
via `execute()` and expressions are evaluated using `evaluate()`. Both dispatch with a
`match` over the node classes defined in `loxlang.nodes`.

2. Environment
Every call receives the `Environment` it should run against. A block builds a child of the
environment it was given and passes it down; when the block finishes, by completing or by an
error unwinding through it, the child simply goes out of scope. The global environment lives
as long as the interpreter, so state persists across `run()` calls (e.g. REPL lines).

3. Runtime Values
Values are `None` (nil), `bool`, `float` and `str`. Numbers are always floats. Truthiness:
nil and false are falsey, everything else (including 0 and "") is truthy.

4. Error Handling
Type mismatches and undefined variables raise `LoxRuntimeException` subclasses carrying the
offending token. `run()` reports the first one to the error sink and abandons the rest of the
program.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math

from loxlang.environment import Environment
from loxlang.errors import ErrorReporter
from loxlang.exceptions import LoxRuntimeException, OperandTypeException
from loxlang.nodes import (
    Assign,
    Binary,
    Block,
    Expr,
    Expression,
    Grouping,
    If,
    Literal,
    Logical,
    Print,
    Stmt,
    Unary,
    Var,
    Variable,
    While,
)
from loxlang.tokens import Token, TokenType


class Interpreter:
    """Tree-walk interpreter for Lox."""

    def __init__(self, reporter: ErrorReporter | None = None, output=print):
        """
        Initialize the interpreter.

        Parameters:
            reporter (ErrorReporter | None): Sink for runtime errors.
            output (Callable[[str], Any]): Receives one line per executed print statement.
        """
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.output = output
        self.globals = Environment()

    def run(self, statements: list[Stmt]) -> None:
        """
        Execute a program against the global environment.

        A runtime error stops the program; it is reported once and the
        remaining statements are skipped.
        """
        try:
            for stmt in statements:
                self.execute(stmt, self.globals)
        except LoxRuntimeException as error:
            self.reporter.runtime_error(error)
        except RecursionError:
            self.reporter.runtime_error(LoxRuntimeException(None, "Expression nesting too deep."))

    def interpret_expression(self, expr: Expr) -> str | None:
        """
        Evaluate a single expression in the global environment.

        Returns:
            str | None: The stringified value, or None if evaluation failed.
        """
        try:
            return self.stringify(self.evaluate(expr))
        except LoxRuntimeException as error:
            self.reporter.runtime_error(error)
            return None
        except RecursionError:
            self.reporter.runtime_error(LoxRuntimeException(None, "Expression nesting too deep."))
            return None

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def execute(self, stmt: Stmt, env: Environment) -> None:
        """
        Execute one statement for its effect.

        Parameters:
            stmt (Stmt): The statement node.
            env (Environment): The environment the statement runs in.
        """
        match stmt:
            case Expression(expression=expression):
                self.evaluate(expression, env)
            case Print(expression=expression):
                self.output(self.stringify(self.evaluate(expression, env)))
            case Var(name=name, initializer=initializer):
                value = None
                if initializer is not None:
                    value = self.evaluate(initializer, env)
                env.define(name.lexeme, value)
            case Block(statements=statements):
                self.execute_block(statements, Environment(env))
            case If(condition=condition, then_branch=then_branch, else_branch=else_branch):
                if self.is_truthy(self.evaluate(condition, env)):
                    self.execute(then_branch, env)
                elif else_branch is not None:
                    self.execute(else_branch, env)
            case While(condition=condition, body=body):
                while self.is_truthy(self.evaluate(condition, env)):
                    self.execute(body, env)
            case _:
                raise TypeError(f"Unknown statement type: {type(stmt).__name__}")

    def execute_block(self, statements, env: Environment) -> None:
        """
        Execute a sequence of statements in the given (fresh) environment.
        """
        for stmt in statements:
            self.execute(stmt, env)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def evaluate(self, expr: Expr, env: Environment | None = None):
        """
        Recursively evaluate an expression node and return its value.

        Parameters:
            expr (Expr): The expression node.
            env (Environment | None): The environment to resolve variables in,
                the global environment when omitted.

        Raises:
            UndefinedVariableException: If a variable is read or assigned before it is defined.
            OperandTypeException: If an operator is applied to values of the wrong type.
        """
        if env is None:
            env = self.globals

        match expr:
            case Literal(value=value):
                return value
            case Grouping(expression=expression):
                return self.evaluate(expression, env)
            case Variable(name=name):
                return env.get(name)
            case Assign(name=name, value=value_expr):
                value = self.evaluate(value_expr, env)
                env.assign(name, value)
                return value
            case Unary(operator=operator, right=right):
                return self._unary(operator, self.evaluate(right, env))
            case Logical(left=left, operator=operator, right=right):
                lhs = self.evaluate(left, env)
                if operator.type == TokenType.OR:
                    if self.is_truthy(lhs):
                        return lhs
                elif not self.is_truthy(lhs):
                    return lhs
                return self.evaluate(right, env)
            case Binary(left=left, operator=operator, right=right):
                lhs = self.evaluate(left, env)
                rhs = self.evaluate(right, env)
                return self._binary(operator, lhs, rhs)
            case _:
                raise TypeError(f"Invalid expression node: {expr!r}")

    def _unary(self, operator: Token, operand):
        match operator.type:
            case TokenType.MINUS:
                self.check_number_operand(operator, operand)
                return -operand
            case TokenType.BANG:
                return not self.is_truthy(operand)
        raise LoxRuntimeException(operator, f"Unknown unary operator '{operator.lexeme}'.")

    def _binary(self, operator: Token, lhs, rhs):
        match operator.type:
            # Arithmetic
            case TokenType.PLUS:
                if isinstance(lhs, float) and isinstance(rhs, float):
                    return lhs + rhs
                if isinstance(lhs, str) and isinstance(rhs, str):
                    return lhs + rhs
                raise OperandTypeException(operator, "Operands must be of same type.")
            case TokenType.MINUS:
                self.check_number_operands(operator, lhs, rhs)
                return lhs - rhs
            case TokenType.STAR:
                self.check_number_operands(operator, lhs, rhs)
                return lhs * rhs
            case TokenType.SLASH:
                self.check_number_operands(operator, lhs, rhs)
                return self._divide(lhs, rhs)
            # Comparison
            case TokenType.GREATER:
                self.check_number_operands(operator, lhs, rhs)
                return lhs > rhs
            case TokenType.GREATER_EQUAL:
                self.check_number_operands(operator, lhs, rhs)
                return lhs >= rhs
            case TokenType.LESS:
                self.check_number_operands(operator, lhs, rhs)
                return lhs < rhs
            case TokenType.LESS_EQUAL:
                self.check_number_operands(operator, lhs, rhs)
                return lhs <= rhs
            # Equality
            case TokenType.EQUAL_EQUAL:
                return self.is_equal(lhs, rhs)
            case TokenType.BANG_EQUAL:
                return not self.is_equal(lhs, rhs)
        raise LoxRuntimeException(operator, f"Unknown binary operator '{operator.lexeme}'.")

    @staticmethod
    def _divide(lhs: float, rhs: float) -> float:
        # IEEE-754 results instead of ZeroDivisionError
        if rhs == 0.0:
            if lhs == 0.0 or math.isnan(lhs):
                return math.nan
            return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
        return lhs / rhs

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def check_number_operand(operator: Token, operand) -> None:
        if not isinstance(operand, float):
            raise OperandTypeException(operator, "Operand must be a number.")

    @staticmethod
    def check_number_operands(operator: Token, lhs, rhs) -> None:
        if not (isinstance(lhs, float) and isinstance(rhs, float)):
            raise OperandTypeException(operator, "Operands must be numbers.")

    @staticmethod
    def is_truthy(value) -> bool:
        """
        Map a runtime value to a boolean: only nil and false are falsey.
        """
        if value is None:
            return False
        if isinstance(value, bool):
            return value
        return True

    @staticmethod
    def is_equal(lhs, rhs) -> bool:
        """
        Structural equality; values of different runtime types are never equal.

        For numbers, NaN equals NaN and 0 does not equal -0.
        """
        if lhs is None and rhs is None:
            return True
        if lhs is None or rhs is None:
            return False
        if type(lhs) is not type(rhs):
            return False
        if isinstance(lhs, float):
            if math.isnan(lhs) or math.isnan(rhs):
                return math.isnan(lhs) and math.isnan(rhs)
            return lhs == rhs and math.copysign(1.0, lhs) == math.copysign(1.0, rhs)
        return lhs == rhs

    @staticmethod
    def stringify(value) -> str:
        """
        Render a runtime value the way `print` shows it.
        """
        if value is None:
            return "nil"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float):
            if math.isnan(value):
                return "NaN"
            if math.isinf(value):
                return "Infinity" if value > 0 else "-Infinity"
            text = repr(value)
            if text.endswith(".0"):
                text = text[:-2]
            return text
        return str(value)
