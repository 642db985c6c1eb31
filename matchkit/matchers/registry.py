"""
Matcher Registry - Single source of truth for helper names.

Used by:
- The Helper facade (named helper methods)
- build_matcher() (construct a matcher from a name and arguments)

Design:
- Each helper name maps to a MatcherSpec with its factory
- Aliases point at the same factory under a second name
- be_* / have_* names that are not registered fall back to Predicate
- Anything else is an explicit "unknown matcher" error
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, FrozenSet, Optional

from ..config.constants import is_valid_predicate_name
from .base import Matcher
from .change import Change
from .equality import Be, BeFalse, BeNil, BeTrue, Eq
from .errors import ConfigurationError
from .kinds import BeAKindOf, BeAnInstanceOf
from .pattern import Match
from .predicate import Predicate
from .raise_exception import RaiseException
from .satisfy import Satisfy
from .tolerance import BeWithin


@dataclass(frozen=True)
class MatcherSpec:
    """
    Specification for a single helper.

    Attributes:
        name: Canonical helper name (e.g., "eq", "be_a_kind_of")
        factory: Callable building the matcher
        summary: One-line description for listings
        alias_of: Canonical name when this entry is an alias
    """
    name: str
    factory: Callable[..., Matcher]
    summary: str
    alias_of: Optional[str] = None


def _spec(cls: type, summary: str) -> MatcherSpec:
    return MatcherSpec(name=cls.helper_name(), factory=cls, summary=summary)


def _alias(name: str, target: MatcherSpec) -> MatcherSpec:
    return MatcherSpec(name=name, factory=target.factory, summary=target.summary, alias_of=target.name)


# =============================================================================
# MATCHER REGISTRY - Single Source of Truth
# =============================================================================

_EQ = _spec(Eq, "value equality")
_BE = _spec(Be, "identity")
_BE_NIL = _spec(BeNil, "identity with None")

MATCHER_REGISTRY: Dict[str, MatcherSpec] = {
    spec.name: spec for spec in (
        _EQ,
        _BE,
        _spec(BeWithin, "numeric tolerance, complete with .of()"),
        _spec(Match, "regular expression or Pattern match"),
        _spec(BeAnInstanceOf, "exact class"),
        _spec(BeAKindOf, "class or subclass"),
        _spec(RaiseException, "thunk raises the exception class or a subclass"),
        _spec(Satisfy, "custom predicate"),
        _spec(Change, "tracked value changes"),
        _spec(BeTrue, "identity with True"),
        _spec(BeFalse, "identity with False"),
        _BE_NIL,
    )
}

# Aliases (historical names)
MATCHER_REGISTRY["eql"] = _alias("eql", _EQ)
MATCHER_REGISTRY["equal"] = _alias("equal", _BE)
MATCHER_REGISTRY["be_none"] = _alias("be_none", _BE_NIL)

# Canonical names only (excludes aliases)
CANONICAL_MATCHERS: FrozenSet[str] = frozenset(
    spec.name for spec in MATCHER_REGISTRY.values() if spec.alias_of is None
)

# All known helper names (including aliases)
ALL_MATCHERS: FrozenSet[str] = frozenset(MATCHER_REGISTRY.keys())


def get_matcher_spec(name: str) -> Optional[MatcherSpec]:
    """
    Get helper specification from registry.

    Args:
        name: Helper name

    Returns:
        MatcherSpec if known, None if unknown
    """
    return MATCHER_REGISTRY.get(name)


def is_predicate_name(name: str) -> bool:
    """Check if name would be handled by the Predicate fallback."""
    return name not in MATCHER_REGISTRY and is_valid_predicate_name(name)


def validate_matcher_name(name: str) -> Optional[str]:
    """
    Validate a helper name.

    Args:
        name: Helper name

    Returns:
        Error message if invalid, None if valid
    """
    if name in MATCHER_REGISTRY or is_valid_predicate_name(name):
        return None
    return (
        f"Unknown matcher '{name}'. "
        f"Known: {', '.join(sorted(CANONICAL_MATCHERS))}, or be_*/have_* predicates"
    )


def build_matcher(name: str, *args: Any, **kwargs: Any) -> Matcher:
    """
    Construct a matcher by helper name.

    Args:
        name: Registered helper name or a be_*/have_* predicate name
        *args, **kwargs: Constructor arguments

    Returns:
        The constructed matcher

    Raises:
        ConfigurationError: If the name is unknown or the arguments are invalid
    """
    spec = get_matcher_spec(name)
    if spec is not None:
        return spec.factory(*args, **kwargs)

    error = validate_matcher_name(name)
    if error:
        raise ConfigurationError(error)
    return Predicate(name, *args, **kwargs)


__all__ = [
    "MatcherSpec",
    "MATCHER_REGISTRY",
    "CANONICAL_MATCHERS",
    "ALL_MATCHERS",
    "get_matcher_spec",
    "is_predicate_name",
    "validate_matcher_name",
    "build_matcher",
]
