"""
Exception matcher.

RaiseException(ExpectedError) runs the thunk and reports whether it raised
ExpectedError or a subclass of it. Exceptions of unrelated classes are not
caught; they reach the caller unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..utils.logger import get_logger
from .base import Thunk
from .errors import ConfigurationError
from .kinds import TypeNameMatcher

logger = get_logger(__name__)


@dataclass(frozen=True, repr=False)
class RaiseException(TypeNameMatcher):
    """
    Expect the thunk to raise.

    The class name is resolved lazily like the other type matchers, and the
    resolved class must derive from BaseException. That second check can only
    happen after resolution, so it surfaces at match time as a
    ConfigurationError.

    Examples:
        RaiseException(ZeroDivisionError).match(lambda: 1 / 0)   # True
        RaiseException("LookupError").match(lambda: {}["k"])      # True (KeyError)
        RaiseException("KeyError").match(lambda: None)            # False
    """

    def _evaluate(self, actual: Thunk) -> bool:
        expected_class = self.resolve()
        if not issubclass(expected_class, BaseException):
            raise ConfigurationError(
                f"RaiseException: {self.type_name} is not an exception class"
            )

        try:
            actual()
        except expected_class as e:
            logger.debug("RaiseException caught %s: %s", type(e).__name__, e)
            return True
        return False

    def describe(self) -> str:
        return f"raise exception {self.type_name}"


__all__ = [
    "RaiseException",
]
