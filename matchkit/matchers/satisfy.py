"""
Custom predicate matcher.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .base import Matcher, Thunk
from .errors import ConfigurationError, TypeMismatchError


@dataclass(frozen=True, repr=False)
class Satisfy(Matcher):
    """
    Pass the actual value to a caller-supplied predicate.

    The predicate must return True or False; any other result raises
    TypeMismatchError rather than being coerced.

    Examples:
        Satisfy(lambda x: x > 9000).match(lambda: 9001)   # True
    """
    expected: Callable[[Any], bool]

    def __post_init__(self):
        if not callable(self.expected):
            raise ConfigurationError(
                f"Satisfy: predicate must be callable, got {type(self.expected).__name__}"
            )

    def _evaluate(self, actual: Thunk) -> bool:
        result = self.expected(actual())
        if isinstance(result, bool):
            return result
        raise TypeMismatchError(
            f"Boolean expected, but {type(result).__name__} instance returned."
        )

    def _params(self) -> list:
        return ["&block"]

    def __repr__(self) -> str:
        return "Satisfy(&block)"

    def describe(self) -> str:
        return "satisfy &block"


__all__ = [
    "Satisfy",
]
