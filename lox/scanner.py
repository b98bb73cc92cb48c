"""Scanner for the Lox language.

Turns raw source text into a list of `Token` objects in a single left to
right pass. Errors (unexpected characters, unterminated strings) are
reported to a `Diagnostics` collector and scanning carries on, so one
bad character never hides the rest of the program from the parser.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .diagnostics import Diagnostics
from .tokens import KEYWORDS, Token, TokenType


SINGLE_CHAR_TOKENS = {
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
    '{': TokenType.LEFT_BRACE,
    '}': TokenType.RIGHT_BRACE,
    ',': TokenType.COMMA,
    '.': TokenType.DOT,
    '-': TokenType.MINUS,
    '+': TokenType.PLUS,
    ';': TokenType.SEMICOLON,
    '*': TokenType.STAR,
    '?': TokenType.QUESTION_MARK,
    ':': TokenType.COLON,
}

# first char -> (kind when followed by '=', kind otherwise)
EQUAL_SUFFIX_TOKENS = {
    '!': (TokenType.BANG_EQUAL, TokenType.BANG),
    '=': (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    '<': (TokenType.LESS_EQUAL, TokenType.LESS),
    '>': (TokenType.GREATER_EQUAL, TokenType.GREATER),
}


def is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def is_alpha(c: str) -> bool:
    return 'a' <= c <= 'z' or 'A' <= c <= 'Z' or c == '_'


def is_alphanumeric(c: str) -> bool:
    return is_alpha(c) or is_digit(c)


def tokenize(source: str, diagnostics: Diagnostics) -> List[Token]:
    """Convert source code into a list of tokens ending with EOF.

    Whitespace and `//` comments produce no tokens. Newlines only advance
    the line counter. Numbers always carry a float literal; strings carry
    their text without the surrounding quotes.
    """
    tokens: List[Token] = []
    i = 0
    line = 1
    length = len(source)

    def peek(offset: int = 0) -> str:
        pos = i + offset
        return source[pos] if pos < length else '\0'

    while i < length:
        start = i
        c = source[i]
        i += 1
        if c in (' ', '\r', '\t'):
            continue
        if c == '\n':
            line += 1
            continue
        if c in SINGLE_CHAR_TOKENS:
            tokens.append(Token(SINGLE_CHAR_TOKENS[c], c, None, line))
            continue
        if c in EQUAL_SUFFIX_TOKENS:
            with_equal, alone = EQUAL_SUFFIX_TOKENS[c]
            if peek() == '=':
                i += 1
                tokens.append(Token(with_equal, source[start:i], None, line))
            else:
                tokens.append(Token(alone, c, None, line))
            continue
        if c == '/':
            if peek() == '/':
                # comment runs to end of line; the newline itself is kept
                while i < length and source[i] != '\n':
                    i += 1
            else:
                tokens.append(Token(TokenType.SLASH, c, None, line))
            continue
        # String literal
        if c == '"':
            while i < length and source[i] != '"':
                if source[i] == '\n':
                    line += 1
                i += 1
            if i >= length:
                diagnostics.error(line, 'Unterminated string.')
                continue
            i += 1  # closing quote
            lexeme = source[start:i]
            tokens.append(Token(TokenType.STRING, lexeme, lexeme[1:-1], line))
            continue
        # Numbers: a trailing '.' without a digit after it is left alone
        if is_digit(c):
            while is_digit(peek()):
                i += 1
            if peek() == '.' and is_digit(peek(1)):
                i += 1
                while is_digit(peek()):
                    i += 1
            lexeme = source[start:i]
            tokens.append(Token(TokenType.NUMBER, lexeme, float(lexeme), line))
            continue
        # Identifiers or keywords
        if is_alpha(c):
            while is_alphanumeric(peek()):
                i += 1
            text = source[start:i]
            tokens.append(Token(KEYWORDS.get(text, TokenType.IDENTIFIER), text, None, line))
            continue
        diagnostics.error(line, 'Unexpected character.')
    tokens.append(Token(TokenType.EOF, '', None, line))
    return tokens


def scan(source: str, diagnostics: Optional[Diagnostics] = None) -> Tuple[List[Token], bool]:
    """Scan `source` and return the tokens plus whether any error occurred."""
    if diagnostics is None:
        diagnostics = Diagnostics()
    before = len(diagnostics.messages)
    tokens = tokenize(source, diagnostics)
    return tokens, len(diagnostics.messages) > before
