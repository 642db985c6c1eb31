"""
Numeric tolerance matchers.

BeWithin(delta) is a builder only; BeWithin(delta).of(expected) produces the
matchable BeWithinOf, which checks abs(expected - actual) <= delta.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .base import Matcher, Thunk
from .errors import ConfigurationError
from .validation import require_non_negative, require_number


@dataclass(frozen=True, repr=False)
class BeWithin(Matcher):
    """
    First stage of the tolerance matcher.

    Attributes:
        delta: Maximum allowed absolute difference (>= 0)

    Matching it directly is a usage error; call .of(expected).
    """
    delta: Any

    def __post_init__(self):
        require_non_negative("BeWithin", "delta", self.delta)

    def of(self, expected: Any) -> "BeWithinOf":
        """Complete the matcher with the value to compare against."""
        return BeWithinOf(self.delta, expected)

    def match(self, actual: Thunk | None = None) -> bool:
        raise ConfigurationError(
            "BeWithin is not a complete matcher. Use BeWithin.of() to create a valid matcher."
        )

    def _evaluate(self, actual: Thunk) -> bool:
        raise ConfigurationError("BeWithin is not a complete matcher")

    def _params(self) -> list:
        return [self.delta]

    def describe(self) -> str:
        return f"be within {self.delta}"


@dataclass(frozen=True, repr=False)
class BeWithinOf(Matcher):
    """
    Absolute tolerance: abs(expected - actual) <= delta.

    Both bounds are inclusive: with delta=1 and expected=41, actual values
    40, 41 and 42 match.
    """
    delta: Any
    expected: Any

    def __post_init__(self):
        require_non_negative("BeWithinOf", "delta", self.delta)
        require_number("BeWithinOf", "expected", self.expected)

    def _evaluate(self, actual: Thunk) -> bool:
        return bool(abs(self.expected - actual()) <= self.delta)

    def _params(self) -> list:
        return [self.delta, self.expected]

    def describe(self) -> str:
        return f"be within {self.delta} of {self.expected}"


__all__ = [
    "BeWithin",
    "BeWithinOf",
]
