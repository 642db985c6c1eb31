"""
Equality and identity matchers.

- Eq: value equality (==)
- Be: identity (is)
- BeTrue / BeFalse / BeNil: identity against True, False and None
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .base import Matcher, Thunk


@dataclass(frozen=True, repr=False)
class Eq(Matcher):
    """
    Value equality.

    Examples:
        Eq("foo").match(lambda: "foo")       # True
        Eq([1, 2]).match(lambda: [1, 2])     # True (different list objects)
    """
    expected: Any

    def _evaluate(self, actual: Thunk) -> bool:
        return bool(self.expected == actual())

    def describe(self) -> str:
        return f"eq {self.expected!r}"


@dataclass(frozen=True, repr=False)
class Be(Matcher):
    """
    Identity: the actual value must be the very same object as expected.

    For interned immutables (small ints, None, True) this coincides with
    value equality; for mutable containers it does not.
    """
    expected: Any

    def _evaluate(self, actual: Thunk) -> bool:
        return self.expected is actual()

    def describe(self) -> str:
        return f"be {self.expected!r}"


@dataclass(frozen=True, repr=False)
class BeTrue(Be):
    """Identity against True."""
    expected: Any = field(default=True, init=False)

    def _params(self) -> list:
        return []


@dataclass(frozen=True, repr=False)
class BeFalse(Be):
    """Identity against False."""
    expected: Any = field(default=False, init=False)

    def _params(self) -> list:
        return []


@dataclass(frozen=True, repr=False)
class BeNil(Be):
    """Identity against None."""
    expected: Any = field(default=None, init=False)

    def _params(self) -> list:
        return []


__all__ = [
    "Eq",
    "Be",
    "BeTrue",
    "BeFalse",
    "BeNil",
]
