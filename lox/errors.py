from lox.tokens import Token


class LoxRuntimeError(Exception):
    """Exception type used to propagate Lox runtime errors."""
    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message


class ParseError(Exception):
    """Internal exception used to unwind the parser to a recovery point."""
