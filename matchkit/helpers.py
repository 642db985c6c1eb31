"""
Helper facade: short constructor functions for every matcher.

    from matchkit.helpers import eq, change, be_within
    eq(42).match(lambda: 42)

Test classes that want predicate helpers (be_empty, have_key, ...) on top
of the named ones mix in Helper:

    class TestCart(Helper):
        def test_empty(self):
            assert self.be_empty().match(lambda: Cart())

Helper only synthesizes be_*/have_* attributes that do not exist otherwise,
so it never shadows members of the class it is mixed into.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Callable

from .matchers.base import Matcher
from .matchers.change import Change
from .matchers.equality import Be, BeFalse, BeNil, BeTrue, Eq
from .matchers.kinds import BeAKindOf, BeAnInstanceOf
from .matchers.pattern import Match
from .matchers.predicate import Predicate
from .matchers.raise_exception import RaiseException
from .matchers.registry import build_matcher, is_predicate_name
from .matchers.satisfy import Satisfy
from .matchers.tolerance import BeWithin


def eq(expected: Any) -> Eq:
    return Eq(expected)


def be(expected: Any) -> Be:
    return Be(expected)


def be_within(delta: Any) -> BeWithin:
    """Tolerance builder: be_within(0.5).of(3.0)."""
    return BeWithin(delta)


def match(expected: Any) -> Match:
    return Match(expected)


def be_an_instance_of(expected: Any, namespace=None) -> BeAnInstanceOf:
    return BeAnInstanceOf(expected, namespace)


def be_a_kind_of(expected: Any, namespace=None) -> BeAKindOf:
    return BeAKindOf(expected, namespace)


def raise_exception(expected: Any, namespace=None) -> RaiseException:
    return RaiseException(expected, namespace)


def satisfy(predicate: Callable[[Any], bool]) -> Satisfy:
    return Satisfy(predicate)


def change(obj: Any, name: str, /, *args: Any, **kwargs: Any) -> Change:
    """Track obj.name across an action; qualify with .by(), .to(), .from_() ..."""
    return Change(obj, name, *args, **kwargs)


def be_true() -> BeTrue:
    return BeTrue()


def be_false() -> BeFalse:
    return BeFalse()


def be_nil() -> BeNil:
    return BeNil()


# Historical names
eql = eq
equal = be
be_none = be_nil


def matcher(name: str, *args: Any, **kwargs: Any) -> Matcher:
    """Build any matcher by helper name, including be_*/have_* predicates."""
    return build_matcher(name, *args, **kwargs)


class Helper:
    """
    Mixin exposing the helpers as methods, plus be_*/have_* predicates.

    Unknown names that are not predicates raise AttributeError as usual.
    """

    eq = staticmethod(eq)
    eql = staticmethod(eql)
    be = staticmethod(be)
    equal = staticmethod(equal)
    be_within = staticmethod(be_within)
    match = staticmethod(match)
    be_an_instance_of = staticmethod(be_an_instance_of)
    be_a_kind_of = staticmethod(be_a_kind_of)
    raise_exception = staticmethod(raise_exception)
    satisfy = staticmethod(satisfy)
    change = staticmethod(change)
    be_true = staticmethod(be_true)
    be_false = staticmethod(be_false)
    be_nil = staticmethod(be_nil)
    be_none = staticmethod(be_none)

    def __getattr__(self, name: str) -> Callable[..., Predicate]:
        # Only reached when normal lookup fails
        if is_predicate_name(name):
            return partial(Predicate, name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")


__all__ = [
    "Helper",
    "matcher",
    "eq",
    "eql",
    "be",
    "equal",
    "be_within",
    "match",
    "be_an_instance_of",
    "be_a_kind_of",
    "raise_exception",
    "satisfy",
    "change",
    "be_true",
    "be_false",
    "be_nil",
    "be_none",
]
