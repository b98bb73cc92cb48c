"""Tree-walking interpreter for the Lox language.

The interpreter executes the statements produced by `lox.parser` against
a chain of `Environment` scopes. Values are plain Python objects (see
`lox.types`). Type mismatches are only detected here, at evaluation time,
and raise `LoxRuntimeError`; `interpret` reports the first one to the
`Diagnostics` collector and stops the run.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, List, Optional

from .ast import (
    Expr, Stmt, Unary, Grouping, Literal, Binary, Ternary, Variable, Assign,
    Expression, Print, Var, Block,
)
from .diagnostics import Diagnostics
from .environment import Environment
from .errors import LoxRuntimeError
from .parser import ensure_recursion_limit, parse_program
from .tokens import Token, TokenType
from .types import divide, is_equal, is_number, is_truthy, to_string, type_name


class Interpreter:
    """Core interpreter that executes Lox statements."""
    def __init__(self, diagnostics: Optional[Diagnostics] = None, debug_level: int = 0,
                 debug_file: str = 'debug.txt'):
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.globals = Environment()
        self.environment = self.globals
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w') if debug_level > 0 else None

    def debug(self, msg: str, level: int = 1):
        if self.debug_level >= level:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    def interpret(self, statements: List[Optional[Stmt]]):
        """Run statements in order; the first runtime error ends the run."""
        ensure_recursion_limit()
        current: Optional[Stmt] = None
        try:
            for stmt in statements:
                if stmt is not None:
                    current = stmt
                    self.execute(stmt)
        except LoxRuntimeError as ex:
            self.report_runtime_error(ex)
        except RecursionError:
            token = first_token(current) or Token(TokenType.EOF, '', None, 0)
            self.report_runtime_error(LoxRuntimeError(token, 'Expression nesting too deep.'))

    def report_runtime_error(self, ex: LoxRuntimeError):
        self.debug(f"runtime error at line {ex.token.line}: {ex.message}")
        self.diagnostics.runtime_error(ex)

    def execute(self, node: Stmt):
        self.debug(f"execute {type(node).__name__}", level=2)
        if isinstance(node, Expression):
            self.evaluate(node.expression)
            return
        if isinstance(node, Print):
            value = self.evaluate(node.expression)
            print(to_string(value))
            return
        if isinstance(node, Var):
            value = None
            if node.initializer is not None:
                value = self.evaluate(node.initializer)
            self.environment.define(node.name.lexeme, value)
            self.debug(f"define {node.name.lexeme}: {type_name(value)} = {to_string(value)}")
            return
        if isinstance(node, Block):
            self.execute_block(node.statements, Environment(self.environment))
            return
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")

    def execute_block(self, statements, env: Environment):
        previous = self.environment
        self.debug(f"enter block (depth {env.depth()})")
        try:
            self.environment = env
            for stmt in statements:
                if stmt is not None:
                    self.execute(stmt)
        finally:
            self.environment = previous
            self.debug(f"leave block (depth {env.depth()})")

    def evaluate(self, node: Expr) -> Any:
        if isinstance(node, Literal):
            return node.value
        if isinstance(node, Grouping):
            return self.evaluate(node.expression)
        if isinstance(node, Variable):
            return self.environment.get(node.name)
        if isinstance(node, Assign):
            value = self.evaluate(node.value)
            self.environment.assign(node.name, value)
            self.debug(f"assign {node.name.lexeme} = {to_string(value)}")
            return value
        if isinstance(node, Unary):
            operand = self.evaluate(node.right)
            if node.operator.type == TokenType.BANG:
                return not is_truthy(operand)
            if node.operator.type == TokenType.MINUS:
                check_number_operand(node.operator, operand)
                return -operand
            raise NotImplementedError(f"unsupported unary operator {node.operator.lexeme}")
        if isinstance(node, Binary):
            left = self.evaluate(node.left)
            right = self.evaluate(node.right)
            return self.apply_binary_op(node.operator, left, right)
        if isinstance(node, Ternary):
            # both arms are evaluated before one is picked
            condition = self.evaluate(node.condition)
            then_value = self.evaluate(node.then_branch)
            else_value = self.evaluate(node.else_branch)
            return then_value if is_truthy(condition) else else_value
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def apply_binary_op(self, operator: Token, a: Any, b: Any) -> Any:
        op = operator.type
        if op == TokenType.PLUS:
            if is_number(a) and is_number(b):
                return a + b
            if isinstance(a, str) and isinstance(b, str):
                return a + b
            return None
        if op == TokenType.MINUS:
            check_number_operands(operator, a, b)
            return a - b
        if op == TokenType.STAR:
            check_number_operands(operator, a, b)
            return a * b
        if op == TokenType.SLASH:
            check_number_operands(operator, a, b)
            return divide(a, b)
        if op == TokenType.GREATER:
            check_number_operands(operator, a, b)
            return a > b
        if op == TokenType.GREATER_EQUAL:
            check_number_operands(operator, a, b)
            return a >= b
        if op == TokenType.LESS:
            check_number_operands(operator, a, b)
            return a < b
        if op == TokenType.LESS_EQUAL:
            check_number_operands(operator, a, b)
            return a <= b
        if op == TokenType.EQUAL_EQUAL:
            return is_equal(a, b)
        if op == TokenType.BANG_EQUAL:
            return not is_equal(a, b)
        if op == TokenType.COMMA:
            return b
        # and/or fall through here: both sides were evaluated, result is nil
        return None


def first_token(node: Any) -> Optional[Token]:
    """Leftmost token under `node`, found without recursion."""
    pending = [node]
    while pending:
        current = pending.pop()
        if isinstance(current, Token):
            return current
        if isinstance(current, (Expr, Stmt)):
            pending.extend(reversed([getattr(current, f.name) for f in fields(current)]))
        elif isinstance(current, tuple):
            pending.extend(reversed(current))
    return None


def check_number_operand(operator: Token, operand: Any):
    if is_number(operand):
        return
    raise LoxRuntimeError(operator, 'Operand must be a number.')


def check_number_operands(operator: Token, left: Any, right: Any):
    if is_number(left) and is_number(right):
        return
    raise LoxRuntimeError(operator, 'Operands must be numbers.')


def run_program(source: str, interpreter: Optional[Interpreter] = None) -> Diagnostics:
    """Scan, parse and, if there were no static errors, interpret `source`.

    Returns the diagnostics collector so the caller can inspect
    `had_error` and `had_runtime_error`.
    """
    if interpreter is None:
        interpreter = Interpreter()
    diagnostics = interpreter.diagnostics
    statements = parse_program(source, diagnostics)
    if diagnostics.had_error:
        return diagnostics
    interpreter.interpret(statements)
    return diagnostics
