"""
Construction-time parameter checks shared by the matchers.

All checks raise ConfigurationError synchronously so that an invalid matcher
can never be built.
"""

from __future__ import annotations

import numbers
from typing import Any

from ..utils.logger import get_logger
from .errors import ConfigurationError

logger = get_logger(__name__)


def is_number(value: Any) -> bool:
    """Numbers from the numeric tower, excluding bool."""
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def require_number(owner: str, label: str, value: Any) -> None:
    """
    Reject non-numeric parameters.

    Args:
        owner: Matcher class name for the error message
        label: Parameter name (e.g., "delta")
        value: Value to check

    Raises:
        ConfigurationError: If value is not a number
    """
    if not is_number(value):
        logger.debug("%s rejected %s=%r (not a number)", owner, label, value)
        raise ConfigurationError(
            f"{owner}: {label} must be a number, got {type(value).__name__}"
        )


def require_non_negative(owner: str, label: str, value: Any) -> None:
    """Reject non-numeric or negative parameters."""
    require_number(owner, label, value)
    try:
        negative = value < 0
    except TypeError as e:
        raise ConfigurationError(
            f"{owner}: {label} must be a real number, got {type(value).__name__}"
        ) from e
    if negative:
        logger.debug("%s rejected %s=%r (negative)", owner, label, value)
        raise ConfigurationError(
            f"{owner}: {label} must be >= 0, got {value}"
        )


def require_difference(owner: str, label: str, value: Any) -> None:
    """
    Reject parameters that cannot stand for a difference between two values.

    Anything supporting subtraction qualifies (numbers, timedelta, numpy
    scalars), bool excepted.

    Raises:
        ConfigurationError: If value is a bool or does not support subtraction
    """
    if isinstance(value, bool) or not hasattr(type(value), "__sub__"):
        logger.debug("%s rejected %s=%r (no subtraction)", owner, label, value)
        raise ConfigurationError(
            f"{owner}: {label} must be a number or another value supporting subtraction, "
            f"got {type(value).__name__}"
        )
