"""
Pattern matcher.

Match(pattern) accepts:
- a str, compiled as a regular expression
- a compiled re.Pattern
- any object implementing the Pattern protocol (matches(value) -> bool)

Regular expressions use search semantics (unanchored), so Match("^f")
matches "foo" and Match("oo") matches "foo" as well.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from ..utils.logger import get_logger
from .base import Matcher, Pattern, Thunk
from .errors import ConfigurationError

logger = get_logger(__name__)


@dataclass(frozen=True)
class RegexPattern:
    """Pattern adapter around a compiled regular expression."""
    regex: re.Pattern

    def matches(self, value: Any) -> bool:
        return self.regex.search(value) is not None


def to_pattern(expected: Any) -> Pattern:
    """
    Convert a user-supplied pattern into a Pattern.

    Raises:
        ConfigurationError: If expected is neither a regex nor a Pattern
    """
    if isinstance(expected, re.Pattern):
        return RegexPattern(expected)
    if isinstance(expected, (str, bytes)):
        try:
            return RegexPattern(re.compile(expected))
        except re.error as e:
            raise ConfigurationError(f"Match: invalid regular expression {expected!r}: {e}") from e
    if isinstance(expected, Pattern):
        return expected
    logger.debug("Match rejected pattern of type %s", type(expected).__name__)
    raise ConfigurationError(
        f"Match: pattern must be a regular expression or implement matches(), "
        f"got {type(expected).__name__}"
    )


@dataclass(frozen=True, repr=False)
class Match(Matcher):
    """
    Pattern match against the actual value.

    Examples:
        Match(r"^fo").match(lambda: "foo")    # True
        Match(PrefixPattern("x")).match(...)  # any Pattern implementation
    """
    expected: Any
    pattern: Pattern = field(init=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "pattern", to_pattern(self.expected))

    def _evaluate(self, actual: Thunk) -> bool:
        return bool(self.pattern.matches(actual()))

    def describe(self) -> str:
        return f"match {self.expected!r}"


__all__ = [
    "Match",
    "RegexPattern",
    "to_pattern",
]
