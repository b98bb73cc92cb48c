# Lox language package
# This package provides a scanner, parser and tree-walking interpreter for Lox.
from .diagnostics import Diagnostics
from .errors import LoxRuntimeError
from .interpreter import run_program, Interpreter
from .parser import parse_program
from .scanner import scan

__all__ = [
    'run_program',
    'parse_program',
    'scan',
    'Interpreter',
    'Diagnostics',
    'LoxRuntimeError',
]
