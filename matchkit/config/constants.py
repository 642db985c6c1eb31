"""
Centralized constants for matchkit.

Type-name aliases and predicate name rules live here so that the matchers,
the helper registry and the tests share a single definition.
"""

import numbers
import re
from typing import Dict, Tuple


# ==================== Type Names ====================

# Type names given as text must look like class names
TYPE_NAME_PATTERN = re.compile(r"\A[A-Z]")

# Capitalised names for builtin types and the numeric tower.
# Resolved after explicit namespaces and registered names, before builtins.
TYPE_ALIASES: Dict[str, type] = {
    "Numeric": numbers.Number,
    "Number": numbers.Number,
    "Complex": numbers.Complex,
    "Real": numbers.Real,
    "Rational": numbers.Rational,
    "Integral": numbers.Integral,
    "Integer": int,
    "Float": float,
    "String": str,
    "Bytes": bytes,
    "Symbol": str,
    "Array": list,
    "List": list,
    "Tuple": tuple,
    "Hash": dict,
    "Dict": dict,
    "Set": set,
    "FrozenSet": frozenset,
    "Boolean": bool,
    "Bool": bool,
    "NilClass": type(None),
    "NoneType": type(None),
    "Object": object,
}


def is_valid_type_name(name: str) -> bool:
    """Check that a textual type name starts with an uppercase letter."""
    return bool(TYPE_NAME_PATTERN.match(name))


# ==================== Predicate Names ====================

PREDICATE_PREFIXES: Tuple[str, ...] = ("be_", "have_")

# Trailing ? and ! are never part of a predicate name
FORBIDDEN_PREDICATE_SUFFIXES: Tuple[str, ...] = ("?", "!")


def is_valid_predicate_name(name: str) -> bool:
    """
    Validate a predicate matcher name.

    Args:
        name: Candidate name (e.g., "be_empty", "have_key")

    Returns:
        True if the name has a known prefix and no forbidden suffix
    """
    if name.endswith(FORBIDDEN_PREDICATE_SUFFIXES):
        return False
    return name.startswith(PREDICATE_PREFIXES)
