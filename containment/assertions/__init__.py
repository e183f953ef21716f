"""
Containment Assertions

This package decides whether an actual value contains expected items and
explains failures.

Supported actual values:
    - text: substring containment
    - sequences: some element equals (or satisfies) each item
    - mappings: keys, or partial key/value subsets

Usage:
    from containment.assertions import ContainmentEngine, include

    matcher = include(1, 2, 4)
    matcher.evaluate([1, 2, 3]).passed     # False
    matcher.failure_message([1, 2, 3])     # expected [1, 2, 3] to include 1, 2, and 4

    engine = ContainmentEngine()
    result = engine.includes({"a": 1, "b": 2}, {"a": 1})
    if not result.passed:
        print(result)  # Detailed failure message, with a diff when useful
"""

# Models
from .models import AssertionResult, AssertionStatus, ContainerKind, EvaluationResult

# Adapters
from .adapters import Container, MappingContainer, SequenceContainer, TextContainer, adapt, classify

# Equality
from .equality import null_objects_equal, values_match

# Messages
from .messages import describe_expected, failure_message, to_sentence

# Engine
from .engine import (
    ContainmentEngine,
    ContainmentEvaluator,
    IncludeMatcher,
    include,
    # Convenience functions
    assert_excludes,
    assert_includes,
    assert_includes_at,
)

__all__ = [
    # Models
    "AssertionResult",
    "AssertionStatus",
    "ContainerKind",
    "EvaluationResult",
    # Adapters
    "Container",
    "MappingContainer",
    "SequenceContainer",
    "TextContainer",
    "adapt",
    "classify",
    # Equality
    "null_objects_equal",
    "values_match",
    # Messages
    "describe_expected",
    "failure_message",
    "to_sentence",
    # Engine
    "ContainmentEngine",
    "ContainmentEvaluator",
    "IncludeMatcher",
    "include",
    # Convenience functions
    "assert_excludes",
    "assert_includes",
    "assert_includes_at",
]
