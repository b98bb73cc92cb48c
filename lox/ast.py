"""Abstract Syntax Tree (AST) definitions for the Lox language.

The AST classes defined in this module represent the syntactic structure
of parsed Lox programs. There are two closed families: expressions
(`Expr`) and statements (`Stmt`). Nodes are immutable and hold no
behaviour; consumers such as the interpreter dispatch on the node class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .tokens import Token


@dataclass(frozen=True)
class Expr:
    """Base class for all expression nodes."""
    pass


@dataclass(frozen=True)
class Unary(Expr):
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Grouping(Expr):
    expression: Expr


@dataclass(frozen=True)
class Literal(Expr):
    value: Any  # float, str, bool or None


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: Token  # includes COMMA for the comma operator
    right: Expr


@dataclass(frozen=True)
class Ternary(Expr):
    condition: Expr
    then_branch: Expr
    else_branch: Expr


@dataclass(frozen=True)
class Variable(Expr):
    name: Token


@dataclass(frozen=True)
class Assign(Expr):
    name: Token
    value: Expr


@dataclass(frozen=True)
class Stmt:
    """Base class for all statement nodes."""
    pass


@dataclass(frozen=True)
class Expression(Stmt):
    expression: Expr


@dataclass(frozen=True)
class Print(Stmt):
    expression: Expr


@dataclass(frozen=True)
class Var(Stmt):
    name: Token
    initializer: Optional[Expr]


@dataclass(frozen=True)
class Block(Stmt):
    # None marks a declaration that failed to parse
    statements: Tuple[Optional[Stmt], ...]
