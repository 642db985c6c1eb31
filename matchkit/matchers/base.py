"""
Base matcher contract.

Every matcher is an immutable object that captures its expected value at
construction time and exposes:
- match(thunk) -> bool: resolve the actual value lazily and compare
- describe() -> str: stable human-readable description for failure messages
- to_dict() -> dict: serialisable {ClassName: [params]} form

Subclasses implement _evaluate(thunk). The thunk is validated here, once,
before any comparison logic runs.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Callable, Protocol, runtime_checkable

from ..utils.logger import get_logger, trace_enabled
from .errors import InvocationError

logger = get_logger(__name__)

Thunk = Callable[[], Any]


def require_thunk(actual: Any, matcher: "Matcher | None" = None) -> Thunk:
    """
    Validate the deferred actual-value supplier passed to match().

    Raises:
        InvocationError: If no thunk was given or it is not callable
    """
    if actual is None:
        raise InvocationError("a thunk must be provided")
    if not callable(actual):
        name = type(matcher).__name__ if matcher is not None else "matcher"
        raise InvocationError(
            f"{name}: thunk must be callable, got {type(actual).__name__}"
        )
    return actual


@runtime_checkable
class Pattern(Protocol):
    """Capability required by the Match matcher."""

    def matches(self, value: Any) -> bool: ...


class Matcher(ABC):
    """
    Abstract base for all matchers.

    Concrete matchers are frozen dataclasses; none of them hold state that
    changes between match() calls.
    """

    def match(self, actual: Thunk | None = None) -> bool:
        """
        Resolve the actual value through the thunk and apply the comparison.

        Args:
            actual: Zero-argument callable producing the value under test

        Returns:
            True if the expectation is met

        Raises:
            InvocationError: If actual is missing or not callable
        """
        thunk = require_thunk(actual, self)
        result = self._evaluate(thunk)
        if trace_enabled():
            logger.debug("%s -> %s", self.describe(), result)
        return result

    @abstractmethod
    def _evaluate(self, actual: Thunk) -> bool:
        """Run the comparison algorithm against a validated thunk."""

    @abstractmethod
    def describe(self) -> str:
        """Human-readable description of the expectation."""

    def _params(self) -> list:
        """Constructor parameters, used by repr and to_dict."""
        return [self.expected]

    def to_dict(self) -> dict:
        """Convert to dict for logging/serialization."""
        return {type(self).__name__: list(self._params())}

    @classmethod
    def helper_name(cls) -> str:
        """Snake-case helper name derived from the class (BeAKindOf -> be_a_kind_of)."""
        name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", cls.__name__)
        name = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", name)
        return name.lower()

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        args = ", ".join(repr(p) for p in self._params())
        return f"{type(self).__name__}({args})"


__all__ = [
    "Matcher",
    "Pattern",
    "Thunk",
    "require_thunk",
]
