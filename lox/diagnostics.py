"""Error reporting for the Lox front-end and interpreter.

A `Diagnostics` object is passed to the scanner, the parser and the
interpreter. It formats every error, writes it to a stream and keeps two
flags the caller inspects after a run: `had_error` for scan and parse
errors, and `had_runtime_error` for evaluation errors.
"""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from .errors import LoxRuntimeError
from .tokens import Token, TokenType


class Diagnostics:
    def __init__(self, stream: Optional[TextIO] = None):
        # None means "whatever sys.stderr is at report time"
        self.stream = stream
        self.messages: List[str] = []
        self.had_error = False
        self.had_runtime_error = False

    def error(self, line: int, message: str):
        """Report a scan error, which has a line but no token."""
        self.report(line, '', message)

    def token_error(self, token: Token, message: str):
        if token.type == TokenType.EOF:
            self.report(token.line, ' at end', message)
        else:
            self.report(token.line, f" at '{token.lexeme}'", message)

    def report(self, line: int, where: str, message: str):
        self.write(f"[line {line}] Error{where}: {message}")
        self.had_error = True

    def runtime_error(self, error: LoxRuntimeError):
        self.write(f"{error.message}\n[line {error.token.line}]")
        self.had_runtime_error = True

    def write(self, text: str):
        self.messages.append(text)
        stream = self.stream if self.stream is not None else sys.stderr
        print(text, file=stream)

    def reset(self, runtime: bool = False):
        """Clear the compile-error flag and the stored messages; also the runtime flag if asked."""
        self.had_error = False
        self.messages.clear()
        if runtime:
            self.had_runtime_error = False
