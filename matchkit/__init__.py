"""
matchkit - Expectation Matchers

Small, composable predicates that check whether a lazily-produced actual
value satisfies an expected condition. Test frameworks build their
assertions on top of the match(thunk) -> bool contract.
"""

__version__ = "0.1.0"

from .config import get_config
from .matchers import (
    Matcher,
    Pattern,
    MatcherError,
    ConfigurationError,
    InvocationError,
    NameResolutionError,
    TypeMismatchError,
    Eq,
    Be,
    BeTrue,
    BeFalse,
    BeNil,
    BeWithin,
    BeWithinOf,
    Match,
    BeAnInstanceOf,
    BeAKindOf,
    RaiseException,
    Satisfy,
    Predicate,
    Change,
    register_type,
)
from .helpers import Helper, matcher

__all__ = [
    "__version__",
    "get_config",
    # Contract
    "Matcher",
    "Pattern",
    # Errors
    "MatcherError",
    "ConfigurationError",
    "InvocationError",
    "NameResolutionError",
    "TypeMismatchError",
    # Matchers
    "Eq",
    "Be",
    "BeTrue",
    "BeFalse",
    "BeNil",
    "BeWithin",
    "BeWithinOf",
    "Match",
    "BeAnInstanceOf",
    "BeAKindOf",
    "RaiseException",
    "Satisfy",
    "Predicate",
    "Change",
    "register_type",
    # Facade
    "Helper",
    "matcher",
]
