"""
Predicate combinators.

Every function here returns a new stateless predicate; nothing is
evaluated until the predicate is called. and_/or_ short-circuit left to
right.
"""

import re
from typing import Any, Callable, Iterable, Union

from views import InvalidArgumentError

Predicate = Callable[[Any], bool]


def _label(function) -> str:
    return getattr(function, '__name__', repr(function))


def _named(predicate: Predicate, name: str) -> Predicate:
    predicate.__name__ = name
    predicate.__qualname__ = name
    return predicate


def always_true(value) -> bool:
    return True


def always_false(value) -> bool:
    return False


def is_none(value) -> bool:
    return value is None


def not_none(value) -> bool:
    return value is not None


def and_(*predicates: Predicate) -> Predicate:
    """True when every predicate holds; and_() with no arguments is always true"""
    def _and(value) -> bool:
        return all(predicate(value) for predicate in predicates)
    return _named(_and, f"and_({', '.join(_label(p) for p in predicates)})")


def or_(*predicates: Predicate) -> Predicate:
    """True when any predicate holds; or_() with no arguments is always false"""
    def _or(value) -> bool:
        return any(predicate(value) for predicate in predicates)
    return _named(_or, f"or_({', '.join(_label(p) for p in predicates)})")


def not_(predicate: Predicate) -> Predicate:
    def _not(value) -> bool:
        return not predicate(value)
    return _named(_not, f"not_({_label(predicate)})")


def equal_to(target) -> Predicate:
    def _equal_to(value) -> bool:
        return value == target
    return _named(_equal_to, f"equal_to({target!r})")


def is_in(values: Iterable) -> Predicate:
    """Membership test; iterables that are not containers are copied into a tuple"""
    if not hasattr(values, '__contains__'):
        values = tuple(values)

    def _is_in(value) -> bool:
        return value in values
    return _named(_is_in, f"is_in({values!r})")


def instance_of(cls: type) -> Predicate:
    def _instance_of(value) -> bool:
        return isinstance(value, cls)
    return _named(_instance_of, f"instance_of({cls.__name__})")


def contains_pattern(pattern: Union[str, re.Pattern], flags: int = 0) -> Predicate:
    """
    True when the regular expression matches anywhere in the value (re.search).

    flags only apply to string patterns; a compiled pattern keeps its own.
    """
    if isinstance(pattern, str):
        compiled = re.compile(pattern, flags)
    elif flags:
        raise InvalidArgumentError("flags cannot be combined with a compiled pattern")
    else:
        compiled = pattern

    def _contains_pattern(value) -> bool:
        return compiled.search(value) is not None
    return _named(_contains_pattern, f"contains_pattern({compiled.pattern!r})")


def starts_with(*prefixes: str) -> Predicate:
    """True for strings beginning with any of prefixes; None never matches"""
    def _starts_with(value) -> bool:
        return value is not None and value.startswith(prefixes)
    return _named(_starts_with, f"starts_with({', '.join(map(repr, prefixes))})")


def compose_predicate(predicate: Predicate, function: Callable[[Any], Any]) -> Predicate:
    """predicate(function(value))"""
    def _composed(value) -> bool:
        return predicate(function(value))
    return _named(_composed, f"compose_predicate({_label(predicate)}, {_label(function)})")
