"""
Type matchers and lazy type-name resolution.

BeAnInstanceOf and BeAKindOf (and RaiseException, see raise_exception.py)
accept either a class or a class name. Names are only checked for shape at
construction (must start with an uppercase letter); they are resolved when
the matcher is used, so a matcher may refer to a class that is defined
later. An unknown name raises NameResolutionError at match time.

Resolution order for the first dotted segment:
1. the namespace mapping given to the matcher (e.g., globals())
2. names added with register_type()
3. TYPE_ALIASES (Numeric, Integer, String, Array, Hash, ...)
4. builtins (ValueError, Exception, ...)
Remaining segments are attribute lookups ("Outer.Inner").
"""

from __future__ import annotations

import builtins
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..config.constants import TYPE_ALIASES, is_valid_type_name
from ..utils.logger import get_logger
from .base import Matcher, Thunk
from .errors import ConfigurationError, NameResolutionError

logger = get_logger(__name__)

_MISSING = object()

_REGISTERED_TYPES: Dict[str, type] = {}


def register_type(name: str, cls: type) -> None:
    """
    Make a class resolvable by name from every type matcher.

    Args:
        name: Capitalised name (e.g., "Money")
        cls: The class it refers to

    Raises:
        ConfigurationError: If name is malformed or cls is not a class
    """
    if not isinstance(name, str) or not is_valid_type_name(name):
        raise ConfigurationError(
            f"register_type: name must start with an uppercase letter (got: {name!r})"
        )
    if not isinstance(cls, type):
        raise ConfigurationError(
            f"register_type: {name} must refer to a class, got {type(cls).__name__}"
        )
    _REGISTERED_TYPES[name] = cls
    logger.debug("Registered type name %s -> %s", name, cls.__qualname__)


def unregister_type(name: str) -> None:
    """Remove a name added with register_type(); unknown names are ignored."""
    _REGISTERED_TYPES.pop(name, None)


def _lookup(head: str, namespace: Optional[Mapping[str, Any]]) -> Any:
    if namespace is not None and head in namespace:
        return namespace[head]
    if head in _REGISTERED_TYPES:
        return _REGISTERED_TYPES[head]
    if head in TYPE_ALIASES:
        return TYPE_ALIASES[head]
    return getattr(builtins, head, _MISSING)


def resolve_type(name: str, namespace: Optional[Mapping[str, Any]] = None) -> type:
    """
    Resolve a class name to a class.

    Args:
        name: Class name, optionally dotted ("Outer.Inner")
        namespace: Extra names checked first

    Returns:
        The resolved class

    Raises:
        NameResolutionError: If the name is unknown or does not name a class
    """
    head, *rest = name.split(".")
    obj = _lookup(head, namespace)
    if obj is _MISSING:
        raise NameResolutionError(f"name '{name}' is not defined")

    for part in rest:
        obj = getattr(obj, part, _MISSING)
        if obj is _MISSING:
            raise NameResolutionError(f"name '{name}' is not defined")

    if not isinstance(obj, type):
        raise NameResolutionError(f"{name} does not name a class")
    return obj


@dataclass(frozen=True, repr=False)
class TypeNameMatcher(Matcher):
    """
    Shared construction and resolution for matchers keyed by a class.

    Attributes:
        expected: A class, or a class name starting with an uppercase letter
        namespace: Optional mapping consulted first during name resolution
    """
    expected: Any
    namespace: Optional[Mapping[str, Any]] = field(default=None, compare=False)

    def __post_init__(self):
        owner = type(self).__name__
        if isinstance(self.expected, type):
            return
        if not isinstance(self.expected, str):
            raise ConfigurationError(
                f"{owner}: expected must be a class or a class name, "
                f"got {type(self.expected).__name__}"
            )
        if not is_valid_type_name(self.expected):
            logger.debug("%s rejected type name %r", owner, self.expected)
            raise ConfigurationError(
                f"expected must start with an uppercase letter (got: {self.expected})"
            )

    @property
    def type_name(self) -> str:
        if isinstance(self.expected, type):
            return self.expected.__qualname__
        return self.expected

    def resolve(self) -> type:
        """Resolve the expected class (at match time)."""
        if isinstance(self.expected, type):
            return self.expected
        return resolve_type(self.expected, self.namespace)

    def _params(self) -> list:
        return [self.type_name]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.type_name})"


@dataclass(frozen=True, repr=False)
class BeAnInstanceOf(TypeNameMatcher):
    """
    Exact class check: type(actual) is the expected class. Subclasses do not match.

    Examples:
        BeAnInstanceOf("String").match(lambda: "foo")   # True
        BeAnInstanceOf("Integral").match(lambda: 42)    # False (type is int, not Integral)
        BeAnInstanceOf(int).match(lambda: 42)           # True
    """

    def _evaluate(self, actual: Thunk) -> bool:
        expected_class = self.resolve()
        return type(actual()) is expected_class

    def describe(self) -> str:
        return f"be an instance of {self.type_name}"


@dataclass(frozen=True, repr=False)
class BeAKindOf(TypeNameMatcher):
    """
    Class-or-subclass check: isinstance(actual, expected class).

    Examples:
        BeAKindOf("Numeric").match(lambda: 42)     # True
        BeAKindOf("Numeric").match(lambda: "42")   # False
    """

    def _evaluate(self, actual: Thunk) -> bool:
        expected_class = self.resolve()
        return isinstance(actual(), expected_class)

    def describe(self) -> str:
        return f"be a kind of {self.type_name}"


__all__ = [
    "BeAnInstanceOf",
    "BeAKindOf",
    "TypeNameMatcher",
    "register_type",
    "unregister_type",
    "resolve_type",
]
