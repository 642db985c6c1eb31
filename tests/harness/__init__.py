"""
Test harness for matcher tests.
"""

from .doubles import (
    ActionSpy,
    ChildError,
    Counter,
    Event,
    Form,
    Hook,
    LooseForm,
    ParentError,
    PrefixPattern,
    Registry,
    TextBox,
    UnrelatedError,
)

__all__ = [
    "ActionSpy",
    "ChildError",
    "Counter",
    "Event",
    "Form",
    "Hook",
    "LooseForm",
    "ParentError",
    "PrefixPattern",
    "Registry",
    "TextBox",
    "UnrelatedError",
]
