"""
Expectation matchers.

Every matcher captures its expected value at construction and exposes
match(thunk) -> bool, where thunk is a zero-argument callable producing the
actual value. Construction validates parameters eagerly (ConfigurationError);
class names are resolved lazily at match time (NameResolutionError).
"""

from .errors import (
    MatcherError,
    ConfigurationError,
    InvocationError,
    NameResolutionError,
    TypeMismatchError,
)
from .base import (
    Matcher,
    Pattern,
    Thunk,
    require_thunk,
)
from .equality import (
    Eq,
    Be,
    BeTrue,
    BeFalse,
    BeNil,
)
from .tolerance import (
    BeWithin,
    BeWithinOf,
)
from .pattern import (
    Match,
    RegexPattern,
)
from .kinds import (
    BeAnInstanceOf,
    BeAKindOf,
    register_type,
    unregister_type,
    resolve_type,
)
from .raise_exception import RaiseException
from .satisfy import Satisfy
from .predicate import (
    Predicate,
    PredicateRule,
    PREDICATE_RULES,
    predicate_method_names,
)
from .change import (
    StateAccessor,
    Change,
    ChangeBy,
    ChangeByAtLeast,
    ChangeByAtMost,
    ChangeTo,
    ChangeFrom,
    ChangeFromTo,
)
from .registry import (
    MatcherSpec,
    MATCHER_REGISTRY,
    CANONICAL_MATCHERS,
    get_matcher_spec,
    validate_matcher_name,
    build_matcher,
)

__all__ = [
    # Errors
    "MatcherError",
    "ConfigurationError",
    "InvocationError",
    "NameResolutionError",
    "TypeMismatchError",
    # Contract
    "Matcher",
    "Pattern",
    "Thunk",
    "require_thunk",
    # Primitive matchers
    "Eq",
    "Be",
    "BeTrue",
    "BeFalse",
    "BeNil",
    "BeWithin",
    "BeWithinOf",
    "Match",
    "RegexPattern",
    "BeAnInstanceOf",
    "BeAKindOf",
    "register_type",
    "unregister_type",
    "resolve_type",
    "RaiseException",
    "Satisfy",
    "Predicate",
    "PredicateRule",
    "PREDICATE_RULES",
    "predicate_method_names",
    # Change family
    "StateAccessor",
    "Change",
    "ChangeBy",
    "ChangeByAtLeast",
    "ChangeByAtMost",
    "ChangeTo",
    "ChangeFrom",
    "ChangeFromTo",
    # Registry
    "MatcherSpec",
    "MATCHER_REGISTRY",
    "CANONICAL_MATCHERS",
    "get_matcher_spec",
    "validate_matcher_name",
    "build_matcher",
]
