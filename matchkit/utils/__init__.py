"""
Utility modules for matchkit.
"""

from .logger import (
    ColoredFormatter,
    MatchLogger,
    get_logger,
    setup_logger,
    trace_enabled,
)

__all__ = [
    "ColoredFormatter",
    "MatchLogger",
    "get_logger",
    "setup_logger",
    "trace_enabled",
]
