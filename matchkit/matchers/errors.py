"""
Matcher error taxonomy.

Every error raised by the library derives from MatcherError and from the
standard exception a caller would naturally catch for the same problem:
- ConfigurationError: bad constructor arguments (ValueError)
- InvocationError: match() called without a callable thunk (TypeError)
- NameResolutionError: lazily-resolved type name not found (NameError)
- TypeMismatchError: predicate returned a non-bool (TypeError)
"""


class MatcherError(Exception):
    """Base class for all matcher errors."""


class ConfigurationError(MatcherError, ValueError):
    """Invalid matcher parameters, raised at construction time."""


class InvocationError(MatcherError, TypeError):
    """match() was called without a callable thunk."""


class NameResolutionError(MatcherError, NameError):
    """A type or exception name could not be resolved at match time."""


class TypeMismatchError(MatcherError, TypeError):
    """A predicate method returned something other than True or False."""


__all__ = [
    "MatcherError",
    "ConfigurationError",
    "InvocationError",
    "NameResolutionError",
    "TypeMismatchError",
]
