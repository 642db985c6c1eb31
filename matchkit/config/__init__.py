"""
Configuration management.
"""

from .config import (
    Config,
    get_config,
    LogConfig,
)

from .constants import (
    TYPE_ALIASES,
    TYPE_NAME_PATTERN,
    PREDICATE_PREFIXES,
    FORBIDDEN_PREDICATE_SUFFIXES,
    is_valid_type_name,
    is_valid_predicate_name,
)

__all__ = [
    # Config classes
    "Config",
    "get_config",
    "LogConfig",
    # Type names
    "TYPE_ALIASES",
    "TYPE_NAME_PATTERN",
    "is_valid_type_name",
    # Predicate names
    "PREDICATE_PREFIXES",
    "FORBIDDEN_PREDICATE_SUFFIXES",
    "is_valid_predicate_name",
]
