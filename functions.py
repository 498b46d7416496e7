"""Function combinators: composition and predicate adapters."""

import functools
from typing import Any, Callable, Mapping

from views import InvalidArgumentError

Transform = Callable[[Any], Any]

_NOTHING = object()


def identity(value):
    return value


def to_string(value) -> str:
    return str(value)


def constant(result) -> Transform:
    def _constant(value):
        return result
    return _constant


def compose(*functions: Transform) -> Transform:
    """
    Compose right to left: compose(f, g)(x) == f(g(x)).

    compose() with no arguments is the identity.
    """
    if not functions:
        return identity
    if len(functions) == 1:
        return functions[0]

    def _composed(value):
        return functools.reduce(lambda acc, function: function(acc), reversed(functions), value)
    return _composed


def for_predicate(predicate: Callable[[Any], bool]) -> Callable[[Any], bool]:
    """Adapt a predicate into a boolean-valued transform"""
    @functools.wraps(predicate)
    def _for_predicate(value) -> bool:
        return bool(predicate(value))
    return _for_predicate


def for_map(mapping: Mapping, default=_NOTHING) -> Transform:
    """
    Look values up in mapping. Without a default, a missing key raises
    InvalidArgumentError.
    """
    def _for_map(key):
        if key in mapping:
            return mapping[key]
        if default is _NOTHING:
            raise InvalidArgumentError(f"key {key!r} not present in map")
        return default
    return _for_map
