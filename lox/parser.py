"""Recursive-descent parser for the Lox language.

Each grammar rule is a method; precedence is encoded by which rule calls
which, from loosest (`expression`) to tightest (`primary`):

```
declaration  -> "var" IDENTIFIER ("=" expression)? ";" | statement
statement    -> "print" expression ";" | "{" block "}" | expression ";"
expression   -> assignment
assignment   -> comma ( "=" assignment )?
comma        -> ternary ( "," ternary )*
ternary      -> logical ( "?" expression ":" ternary )*
logical      -> equality ( ("and" | "or") equality )*
equality     -> comparison ( ("==" | "!=") comparison )*
comparison   -> term ( (">" | ">=" | "<" | "<=") term )*
term         -> factor ( ("+" | "-") factor )*
factor       -> unary ( ("*" | "/") unary )*
unary        -> ("!" | "-") unary | primary
primary      -> NUMBER | STRING | "true" | "false" | "nil" | IDENTIFIER
              | "(" expression ")"
```

Syntax errors are reported to the `Diagnostics` collector and unwind (via
`ParseError`) only as far as the enclosing `declaration`, which skips
ahead to the next statement boundary and yields `None` in place of the
broken statement.
"""

from __future__ import annotations

import sys
from typing import List, Optional

from .ast import (
    Expr, Stmt, Unary, Grouping, Literal, Binary, Ternary, Variable, Assign,
    Expression, Print, Var, Block,
)
from .diagnostics import Diagnostics
from .errors import ParseError
from .scanner import tokenize
from .tokens import Token, TokenType


# Tokens that start a statement; synchronize() stops in front of them.
STATEMENT_KEYWORDS = {
    TokenType.CLASS,
    TokenType.FUN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
}

# Every nesting level of a grouping costs about a dozen parser frames.
RECURSION_LIMIT = 10000


def ensure_recursion_limit(limit: int = RECURSION_LIMIT):
    if sys.getrecursionlimit() < limit:
        sys.setrecursionlimit(limit)


class Parser:
    def __init__(self, tokens: List[Token], diagnostics: Optional[Diagnostics] = None):
        self.tokens = tokens
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.pos = 0

    # Token stream helpers

    def peek(self) -> Token:
        return self.tokens[self.pos]

    def previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def is_at_end(self) -> bool:
        return self.peek().type == TokenType.EOF

    def advance(self) -> Token:
        if not self.is_at_end():
            self.pos += 1
        return self.previous()

    def check(self, token_type: TokenType) -> bool:
        if self.is_at_end():
            return False
        return self.peek().type == token_type

    def match(self, *types: TokenType) -> bool:
        for token_type in types:
            if self.check(token_type):
                self.advance()
                return True
        return False

    def consume(self, token_type: TokenType, message: str) -> Token:
        if self.check(token_type):
            return self.advance()
        raise self.error(self.peek(), message)

    def error(self, token: Token, message: str) -> ParseError:
        self.diagnostics.token_error(token, message)
        return ParseError(message)

    def synchronize(self):
        """Discard tokens until the start of what is likely the next statement."""
        self.advance()
        while not self.is_at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return
            if self.peek().type in STATEMENT_KEYWORDS:
                return
            self.advance()

    # Statements

    def parse(self) -> List[Optional[Stmt]]:
        ensure_recursion_limit()
        statements: List[Optional[Stmt]] = []
        while not self.is_at_end():
            statements.append(self.declaration())
        return statements

    def declaration(self) -> Optional[Stmt]:
        try:
            if self.match(TokenType.VAR):
                return self.var_declaration()
            return self.statement()
        except ParseError:
            self.synchronize()
            return None
        except RecursionError:
            self.diagnostics.token_error(self.peek(), "Expression nesting too deep.")
            self.synchronize()
            return None

    def var_declaration(self) -> Stmt:
        name = self.consume(TokenType.IDENTIFIER, 'Expect variable name.')
        initializer: Optional[Expr] = None
        if self.match(TokenType.EQUAL):
            initializer = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
        return Var(name, initializer)

    def statement(self) -> Stmt:
        if self.match(TokenType.PRINT):
            return self.print_statement()
        if self.match(TokenType.LEFT_BRACE):
            return Block(tuple(self.block()))
        return self.expression_statement()

    def print_statement(self) -> Stmt:
        value = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after value.")
        return Print(value)

    def expression_statement(self) -> Stmt:
        expr = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after expression.")
        return Expression(expr)

    def block(self) -> List[Optional[Stmt]]:
        statements: List[Optional[Stmt]] = []
        while not self.check(TokenType.RIGHT_BRACE) and not self.is_at_end():
            statements.append(self.declaration())
        self.consume(TokenType.RIGHT_BRACE, "Expect '}' after block.")
        return statements

    # Expressions

    def expression(self) -> Expr:
        return self.assignment()

    def assignment(self) -> Expr:
        expr = self.comma()
        if self.match(TokenType.EQUAL):
            equals = self.previous()
            value = self.assignment()
            if isinstance(expr, Variable):
                return Assign(expr.name, value)
            # reported but not raised: parsing carries on with the left side
            self.error(equals, 'Invalid assignment target.')
        return expr

    def comma(self) -> Expr:
        expr = self.ternary()
        while self.match(TokenType.COMMA):
            operator = self.previous()
            right = self.ternary()
            expr = Binary(expr, operator, right)
        return expr

    def ternary(self) -> Expr:
        expr = self.logical()
        while self.match(TokenType.QUESTION_MARK):
            then_branch = self.expression()
            self.consume(TokenType.COLON, "Expect ':' after then branch of conditional expression.")
            else_branch = self.ternary()
            expr = Ternary(expr, then_branch, else_branch)
        return expr

    def binary_level(self, operand, *operators: TokenType) -> Expr:
        """Left-fold `operand (op operand)*` for the given operator kinds."""
        expr = operand()
        while self.match(*operators):
            operator = self.previous()
            right = operand()
            expr = Binary(expr, operator, right)
        return expr

    def logical(self) -> Expr:
        # and/or are plain binary operators here, no short-circuit node
        return self.binary_level(self.equality, TokenType.AND, TokenType.OR)

    def equality(self) -> Expr:
        return self.binary_level(self.comparison, TokenType.EQUAL_EQUAL, TokenType.BANG_EQUAL)

    def comparison(self) -> Expr:
        return self.binary_level(
            self.term,
            TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL,
        )

    def term(self) -> Expr:
        return self.binary_level(self.factor, TokenType.MINUS, TokenType.PLUS)

    def factor(self) -> Expr:
        return self.binary_level(self.unary, TokenType.SLASH, TokenType.STAR)

    def unary(self) -> Expr:
        if self.match(TokenType.BANG, TokenType.MINUS):
            operator = self.previous()
            return Unary(operator, self.unary())
        return self.primary()

    def primary(self) -> Expr:
        if self.match(TokenType.IDENTIFIER):
            return Variable(self.previous())
        if self.match(TokenType.TRUE):
            return Literal(True)
        if self.match(TokenType.FALSE):
            return Literal(False)
        if self.match(TokenType.NIL):
            return Literal(None)
        if self.match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self.previous().literal)
        if self.match(TokenType.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)
        raise self.error(self.peek(), 'Expect expression.')


def parse(tokens: List[Token], diagnostics: Optional[Diagnostics] = None) -> List[Optional[Stmt]]:
    return Parser(tokens, diagnostics).parse()


def parse_program(source: str, diagnostics: Optional[Diagnostics] = None) -> List[Optional[Stmt]]:
    """Scan and parse Lox source code into a list of statements.

    Scan and parse errors are reported to `diagnostics` (a fresh collector
    when omitted); a statement that failed to parse appears as `None`.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()
    tokens = tokenize(source, diagnostics)
    return Parser(tokens, diagnostics).parse()
