"""
Predicate matchers for composing containment checks.

Any object can act as an expected item. Objects whose class is tagged as a
matcher (``Matcher`` subclasses, or classes passed to ``register_matcher``)
are applied as predicates; everything else is compared by value.
"""

from .base import MATCHER_TAG, Matcher, describe, is_matcher, register_matcher
from .values import (
    Anything,
    StringContaining,
    StringMatching,
    ValueComparison,
    ValueWithin,
    a_string_containing,
    a_string_matching,
    a_value,
    a_value_within,
    anything,
)

__all__ = [
    # Protocol
    "MATCHER_TAG",
    "Matcher",
    "describe",
    "is_matcher",
    "register_matcher",
    # Value matchers
    "Anything",
    "StringContaining",
    "StringMatching",
    "ValueComparison",
    "ValueWithin",
    "a_string_containing",
    "a_string_matching",
    "a_value",
    "a_value_within",
    "anything",
]
