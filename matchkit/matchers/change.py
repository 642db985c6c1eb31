"""
Change matcher family.

Change(obj, name, *args, **kwargs) captures a state accessor that reads
obj.name (calling it with args when it is a method bound to obj; functions or
callbacks stored as attribute values are read, not called). Matching runs:

    1. before = accessor()
    2. thunk()            (the action; its return value is discarded)
    3. after = accessor()
    4. compare

Change on its own checks before != after. The builder methods return new,
independent matchers that share the same accessor:

    .by(n)            n == after - before          (n may be negative or a timedelta)
    .by_at_least(n)   n <= after - before          (n >= 0)
    .by_at_most(n)    n >= after - before          (n >= 0)
    .to(v)            after == v                   (no before read)
    .from_(u).to(v)   before == u and after == v

from_(u).to(v) returns False as soon as before != u, WITHOUT running the
action. to(v) always runs the action.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Tuple

from ..utils.logger import get_logger
from .base import Matcher, Thunk
from .errors import ConfigurationError
from .validation import require_difference, require_non_negative

logger = get_logger(__name__)


def is_bound_method(obj: Any, value: Any) -> bool:
    """
    Check whether value is a method bound to obj.

    Covers Python methods, classmethods read from a class and builtin
    methods ([].append, [].__len__). Functions, classes and callbacks stored
    as attribute values have no binding to obj and are read, not called.
    """
    return callable(value) and getattr(value, "__self__", None) is obj


@dataclass(frozen=True)
class StateAccessor:
    """
    Deferred read of obj.name, evaluated before and after the action.

    Attributes:
        obj: Object holding the tracked state
        name: Attribute or method name
        args: Positional arguments for a method
        kwargs: Keyword arguments for a method
    """
    obj: Any
    name: str
    args: Tuple[Any, ...] = ()
    kwargs: Mapping[str, Any] = field(default_factory=dict)

    def __call__(self) -> Any:
        value = getattr(self.obj, self.name)
        if is_bound_method(self.obj, value):
            return value(*self.args, **self.kwargs)
        return value

    def __str__(self) -> str:
        target = f"{type(self.obj).__name__}.{self.name}"
        if not self.args and not self.kwargs:
            return target
        parts = [repr(a) for a in self.args]
        parts.extend(f"{k}={v!r}" for k, v in self.kwargs.items())
        return f"{target}({', '.join(parts)})"


class Change(Matcher):
    """
    Detect any change in a tracked value, or build a more specific matcher.

    Examples:
        items = []
        Change(items, "__len__").match(lambda: items.append(1))           # True
        Change(items, "__len__").by(2).match(lambda: items.extend("ab"))  # True
        Change(account, "balance").from_(0).to(100).match(deposit)
    """

    __slots__ = ("_state",)

    def __init__(self, obj: Any, name: str, /, *args: Any, **kwargs: Any):
        if not isinstance(name, str):
            raise ConfigurationError(
                f"Change: method name must be a str, got {type(name).__name__}"
            )
        if not hasattr(obj, name):
            logger.debug("Change rejected %s.%s (no such attribute)", type(obj).__name__, name)
            raise ConfigurationError(
                f"Change: {type(obj).__name__} object must respond to {name!r}"
            )
        if (args or kwargs) and not is_bound_method(obj, getattr(obj, name)):
            raise ConfigurationError(
                f"Change: {type(obj).__name__}.{name} is not a method but arguments were given"
            )

        object.__setattr__(self, "_state", StateAccessor(obj, name, tuple(args), dict(kwargs)))

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def state(self) -> StateAccessor:
        return self._state

    def _evaluate(self, actual: Thunk) -> bool:
        value_before = self._state()
        actual()
        value_after = self._state()

        return bool(value_before != value_after)

    def by(self, delta: Any) -> "ChangeBy":
        """Expect the value to change by exactly delta."""
        return ChangeBy(delta, self._state)

    def by_at_least(self, minimum_delta: Any) -> "ChangeByAtLeast":
        """Expect the value to grow by at least minimum_delta."""
        return ChangeByAtLeast(minimum_delta, self._state)

    def by_at_most(self, maximum_delta: Any) -> "ChangeByAtMost":
        """Expect the value to grow by at most maximum_delta."""
        return ChangeByAtMost(maximum_delta, self._state)

    def from_(self, old_value: Any) -> "ChangeFrom":
        """Fix the initial value; complete with .to()."""
        return ChangeFrom(old_value, self._state)

    def to(self, new_value: Any) -> "ChangeTo":
        """Expect the value to end up equal to new_value."""
        return ChangeTo(new_value, self._state)

    def _params(self) -> list:
        return [str(self._state)]

    def __eq__(self, other):
        if not isinstance(other, Change):
            return NotImplemented
        return self._state == other._state

    __hash__ = None

    def __repr__(self) -> str:
        return f"Change({self._state})"

    def describe(self) -> str:
        return f"change {self._state}"


@dataclass(frozen=True, repr=False)
class _DeltaMatcher(Matcher):
    expected: Any
    state: StateAccessor

    def _delta(self, actual: Thunk) -> Any:
        value_before = self.state()
        actual()
        value_after = self.state()
        return value_after - value_before


@dataclass(frozen=True, repr=False)
class ChangeBy(_DeltaMatcher):
    """Exact delta: expected == after - before. Decreases use a negative delta."""

    def __post_init__(self):
        require_difference("ChangeBy", "delta", self.expected)

    def _evaluate(self, actual: Thunk) -> bool:
        return bool(self.expected == self._delta(actual))

    def describe(self) -> str:
        return f"change by {self.expected!r}"


@dataclass(frozen=True, repr=False)
class ChangeByAtLeast(_DeltaMatcher):
    """Minimum growth: expected <= after - before."""

    def __post_init__(self):
        require_non_negative("ChangeByAtLeast", "minimum delta", self.expected)

    def _evaluate(self, actual: Thunk) -> bool:
        return bool(self.expected <= self._delta(actual))

    def describe(self) -> str:
        return f"change by at least {self.expected!r}"


@dataclass(frozen=True, repr=False)
class ChangeByAtMost(_DeltaMatcher):
    """
    Maximum growth: expected >= after - before.

    Any decrease or no change at all satisfies it.
    """

    def __post_init__(self):
        require_non_negative("ChangeByAtMost", "maximum delta", self.expected)

    def _evaluate(self, actual: Thunk) -> bool:
        return bool(self.expected >= self._delta(actual))

    def describe(self) -> str:
        return f"change by at most {self.expected!r}"


@dataclass(frozen=True, repr=False)
class ChangeTo(Matcher):
    """Final value only: runs the action, then checks after == expected."""
    expected: Any
    state: StateAccessor

    def _evaluate(self, actual: Thunk) -> bool:
        actual()
        value_after = self.state()

        return bool(self.expected == value_after)

    def describe(self) -> str:
        return f"change to {self.expected!r}"


@dataclass(frozen=True, repr=False)
class ChangeFrom(Matcher):
    """Initial value fixed, final value still missing. Not matchable."""
    expected: Any
    state: StateAccessor

    def to(self, new_value: Any) -> "ChangeFromTo":
        """Complete the matcher with the expected final value."""
        return ChangeFromTo(self.expected, new_value, self.state)

    def match(self, actual: Thunk | None = None) -> bool:
        raise ConfigurationError(
            "ChangeFrom is not a complete matcher. Use ChangeFrom.to() to create a valid matcher."
        )

    def _evaluate(self, actual: Thunk) -> bool:
        raise ConfigurationError("ChangeFrom is not a complete matcher")

    def describe(self) -> str:
        return f"change from {self.expected!r}"


@dataclass(frozen=True, repr=False)
class ChangeFromTo(Matcher):
    """
    Initial and final value.

    Reads the state first; if it does not equal expected_init the match
    fails immediately and the action is never run.
    """
    expected_init: Any
    expected: Any
    state: StateAccessor

    def _evaluate(self, actual: Thunk) -> bool:
        value_before = self.state()
        if not self.expected_init == value_before:
            logger.debug(
                "change from %r: initial value was %r, action skipped",
                self.expected_init, value_before,
            )
            return False

        actual()
        value_after = self.state()

        return bool(self.expected == value_after)

    def _params(self) -> list:
        return [self.expected_init, self.expected]

    def describe(self) -> str:
        return f"change from {self.expected_init!r} to {self.expected!r}"


__all__ = [
    "StateAccessor",
    "is_bound_method",
    "Change",
    "ChangeBy",
    "ChangeByAtLeast",
    "ChangeByAtMost",
    "ChangeTo",
    "ChangeFrom",
    "ChangeFromTo",
]
