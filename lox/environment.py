from typing import Any, Dict, Optional
from lox.errors import LoxRuntimeError
from lox.tokens import Token


class Environment:
    """Represents a scope environment mapping variable names to values.

    Lookups and assignments walk outwards through `enclosing` scopes only;
    a scope never sees its children or siblings.
    """
    def __init__(self, enclosing: Optional['Environment'] = None):
        self.enclosing = enclosing
        self.values: Dict[str, Any] = {}

    def define(self, name: str, value: Any):
        # redefinition in the same scope replaces the old value
        self.values[name] = value

    def get(self, name: Token) -> Any:
        if name.lexeme in self.values:
            return self.values[name.lexeme]
        if self.enclosing is not None:
            return self.enclosing.get(name)
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    def assign(self, name: Token, value: Any):
        if name.lexeme in self.values:
            self.values[name.lexeme] = value
            return
        if self.enclosing is not None:
            self.enclosing.assign(name, value)
            return
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    def depth(self) -> int:
        """Number of enclosing scopes above this one."""
        env = self.enclosing
        count = 0
        while env is not None:
            count += 1
            env = env.enclosing
        return count
