import pytest

from lox.environment import Environment
from lox.errors import LoxRuntimeError
from lox.tokens import Token, TokenType


def name(text, line=1):
    return Token(TokenType.IDENTIFIER, text, None, line)


def test_define_overwrites_in_same_scope():
    env = Environment()
    env.define('x', 1.0)
    env.define('x', 2.0)
    assert env.get(name('x')) == 2.0


def test_get_walks_enclosing_chain():
    outer = Environment()
    outer.define('x', 'outer')
    inner = Environment(Environment(outer))
    assert inner.get(name('x')) == 'outer'
    assert inner.depth() == 2


def test_inner_definition_shadows_outer():
    outer = Environment()
    outer.define('x', 1.0)
    inner = Environment(outer)
    inner.define('x', 2.0)
    assert inner.get(name('x')) == 2.0
    assert outer.get(name('x')) == 1.0


def test_assign_updates_nearest_defining_scope():
    outer = Environment()
    outer.define('x', 1.0)
    inner = Environment(outer)
    inner.assign(name('x'), 5.0)
    assert outer.values['x'] == 5.0
    assert 'x' not in inner.values


def test_parent_never_sees_child_bindings():
    outer = Environment()
    inner = Environment(outer)
    inner.define('y', True)
    with pytest.raises(LoxRuntimeError) as exc:
        outer.get(name('y', line=7))
    assert exc.value.message == "Undefined variable 'y'."
    assert exc.value.token.line == 7


def test_assign_to_undefined_fails():
    env = Environment(Environment())
    with pytest.raises(LoxRuntimeError) as exc:
        env.assign(name('z', line=3), None)
    assert exc.value.message == "Undefined variable 'z'."
    assert exc.value.token.line == 3
