"""
Predicate matcher: be_X / have_X dispatch to methods of the actual value.

Name translation is an explicit rule table rather than dynamic method
interception. Rules are checked in order; the first whose prefix matches
supplies the attribute names to try on the actual value:

    be_X    ->  is_X, isX, X      (be_valid -> is_valid, be_upper -> isupper)
    have_X  ->  has_X             (have_children -> has_children)

When the actual value has none of those attributes, a small table of
protocol fallbacks covers builtins that express the predicate through a
protocol instead of a method (be_empty -> len(x) == 0, have_key -> k in x).

The dispatched result must be exactly True or False. Truthy/falsy values
raise TypeMismatchError instead of being coerced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Tuple

from ..config.constants import is_valid_predicate_name
from ..utils.logger import get_logger
from .base import Matcher, Thunk
from .errors import ConfigurationError, TypeMismatchError

logger = get_logger(__name__)

_MISSING = object()


@dataclass(frozen=True)
class PredicateRule:
    """
    One name translation rule.

    Attributes:
        prefix: Matcher name prefix ("be_", "have_")
        candidates: Maps the name stem to attribute names, tried in order
    """
    prefix: str
    candidates: Callable[[str], Tuple[str, ...]]


PREDICATE_RULES: Tuple[PredicateRule, ...] = (
    PredicateRule("be_", lambda stem: (f"is_{stem}", f"is{stem}", stem)),
    PredicateRule("have_", lambda stem: (f"has_{stem}",)),
)

PROTOCOL_FALLBACKS: Dict[str, Callable[..., Any]] = {
    "be_empty": lambda obj: len(obj) == 0,
    "have_key": lambda obj, key: key in obj.keys(),
}


def predicate_method_names(name: str) -> Tuple[str, ...]:
    """
    Translate a predicate matcher name into candidate attribute names.

    Raises:
        ConfigurationError: If no rule matches the name's prefix
    """
    for rule in PREDICATE_RULES:
        if name.startswith(rule.prefix):
            return rule.candidates(name[len(rule.prefix):])
    raise ConfigurationError(f"unknown prefix in predicate name: {name}")


class Predicate(Matcher):
    """
    Dynamic predicate dispatch.

    Args:
        name: be_<predicate> or have_<predicate>
        *args, **kwargs: Forwarded to the dispatched method

    Examples:
        Predicate("be_empty").match(lambda: [])                      # True
        Predicate("have_key", "a").match(lambda: {"a": 1})           # True
        Predicate("be_valid").match(lambda: Form(errors=[]))         # Form.is_valid()
    """

    __slots__ = ("_name", "_args", "_kwargs")

    def __init__(self, name: str, /, *args: Any, **kwargs: Any):
        name = str(name)
        if not is_valid_predicate_name(name):
            logger.debug("Predicate rejected name %r", name)
            raise ConfigurationError(f"invalid predicate name format: {name!r}")

        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_args", tuple(args))
        object.__setattr__(self, "_kwargs", dict(kwargs))

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def name(self) -> str:
        return self._name

    @property
    def args(self) -> Tuple[Any, ...]:
        return self._args

    @property
    def kwargs(self) -> Mapping[str, Any]:
        return dict(self._kwargs)

    @property
    def method_names(self) -> Tuple[str, ...]:
        return predicate_method_names(self._name)

    def _dispatch(self, value: Any) -> Any:
        candidates = self.method_names
        for attr in candidates:
            target = getattr(value, attr, _MISSING)
            if target is _MISSING:
                continue
            if callable(target):
                return target(*self._args, **self._kwargs)
            if self._args or self._kwargs:
                raise TypeMismatchError(
                    f"{type(value).__name__}.{attr} is not callable but arguments were given"
                )
            return target

        fallback = PROTOCOL_FALLBACKS.get(self._name)
        if fallback is not None:
            return fallback(value, *self._args, **self._kwargs)

        raise AttributeError(
            f"'{type(value).__name__}' object has no attribute '{candidates[0]}'"
        )

    def _evaluate(self, actual: Thunk) -> bool:
        value = self._dispatch(actual())
        if isinstance(value, bool):
            return value
        raise TypeMismatchError(
            f"Boolean expected, but {type(value).__name__} instance returned."
        )

    def _params(self) -> list:
        return [self._name, *self._args]

    def to_dict(self) -> dict:
        return {"Predicate": [self._name, *self._args, dict(self._kwargs)]}

    def __eq__(self, other):
        if not isinstance(other, Predicate):
            return NotImplemented
        return (self._name, self._args, self._kwargs) == (other._name, other._args, other._kwargs)

    __hash__ = None

    def __repr__(self) -> str:
        parts = [repr(p) for p in self._params()]
        parts.extend(f"{k}={v!r}" for k, v in self._kwargs.items())
        return f"Predicate({', '.join(parts)})"

    def describe(self) -> str:
        segments = [
            ", ".join(repr(a) for a in self._args),
            ", ".join(f"{k}={v!r}" for k, v in self._kwargs.items()),
        ]
        details = ", ".join(s for s in segments if s)
        return f"{self._name.replace('_', ' ')} {details}".strip()


__all__ = [
    "Predicate",
    "PredicateRule",
    "PREDICATE_RULES",
    "PROTOCOL_FALLBACKS",
    "predicate_method_names",
]
