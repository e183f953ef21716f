"""
Value equality for containment checks.

``values_match(expected, candidate)`` decides whether one element of the
actual container satisfies one expected item:

- tagged matchers are applied to the candidate;
- null-object placeholders of the same class are equal to each other;
- mappings and lists/tuples are compared structurally, so matchers nested
  inside literal containers are still applied;
- everything else falls back to ``==``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..matchers.base import is_matcher

NULL_OBJECT_TAG = "__null_object__"


def is_null_object(value: Any) -> bool:
    """Null objects declare themselves with a class-level tag."""
    return getattr(type(value), NULL_OBJECT_TAG, False) is True


def null_objects_equal(expected: Any, candidate: Any) -> bool:
    """Two placeholders are equal when they are of the same class."""
    return type(expected) is type(candidate)


def values_match(expected: Any, candidate: Any) -> bool:
    """Return True when ``candidate`` satisfies the expected item."""
    if is_matcher(expected):
        return bool(expected.matches(candidate))

    if is_null_object(expected) or is_null_object(candidate):
        if is_null_object(expected) and is_null_object(candidate):
            return null_objects_equal(expected, candidate)
        return False

    if isinstance(expected, Mapping):
        if not isinstance(candidate, Mapping) or len(expected) != len(candidate):
            return False
        for key, value in expected.items():
            if key not in candidate:
                return False
            if not values_match(value, candidate[key]):
                return False
        return True

    if isinstance(expected, (list, tuple)):
        family = list if isinstance(expected, list) else tuple
        if not isinstance(candidate, family) or len(expected) != len(candidate):
            return False
        return all(values_match(e, c) for e, c in zip(expected, candidate))

    return bool(expected == candidate)
