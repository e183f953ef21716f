"""
containment - Containment Assertions for Strings, Sequences and Mappings

This package decides whether an actual value includes expected items and
explains failures precisely.

Subpackages:
    - assertions: Containment engine, include matcher and results
    - matchers: Predicate matchers that compose with include
    - rendering: Value rendering and diffs for failure output
    - suite: Parse and validate declarative check suites
    - reporting: Run reports and result tracking

Usage:
    from containment import include, a_value_within, ContainmentEngine

    include(1, 2, 4).failure_message([1, 2, 3])
    # 'expected [1, 2, 3] to include 1, 2, and 4'

    include(a_value_within(5).of(24)).matches([10, 20, 30])   # True

    engine = ContainmentEngine()
    result = engine.includes({"a": 1, "b": 2}, {"a": 2})
    print(result)  # failure message and diff
"""

__version__ = "0.1.0"

from .errors import ContainmentFailure, ContainmentTypeError

# Re-export matchers for convenience
from .matchers import (
    Matcher,
    a_string_containing,
    a_string_matching,
    a_value,
    a_value_within,
    anything,
    is_matcher,
    register_matcher,
)

# Re-export assertions for convenience
from .assertions import (
    # Models
    AssertionResult,
    AssertionStatus,
    ContainerKind,
    EvaluationResult,
    # Engine
    ContainmentEngine,
    ContainmentEvaluator,
    IncludeMatcher,
    include,
    # Convenience functions
    assert_excludes,
    assert_includes,
    assert_includes_at,
)

# Re-export rendering for convenience
from .rendering import inspect_value, render_diff

# Re-export suites for convenience
from .suite import (
    Check,
    CheckMode,
    Suite,
    ValidationError,
    ValidationResult,
    load_suite,
    validate_suite_yaml,
)

# Re-export reporting for convenience
from .reporting import (
    CheckRecord,
    CheckStatus,
    Reporter,
    RunReport,
    RunStatus,
)

__all__ = [
    # Package info
    "__version__",
    # Errors
    "ContainmentFailure",
    "ContainmentTypeError",
    # Matchers
    "Matcher",
    "a_string_containing",
    "a_string_matching",
    "a_value",
    "a_value_within",
    "anything",
    "is_matcher",
    "register_matcher",
    # Assertions - Models
    "AssertionResult",
    "AssertionStatus",
    "ContainerKind",
    "EvaluationResult",
    # Assertions - Engine
    "ContainmentEngine",
    "ContainmentEvaluator",
    "IncludeMatcher",
    "include",
    "assert_excludes",
    "assert_includes",
    "assert_includes_at",
    # Rendering
    "inspect_value",
    "render_diff",
    # Suites
    "Check",
    "CheckMode",
    "Suite",
    "ValidationError",
    "ValidationResult",
    "load_suite",
    "validate_suite_yaml",
    # Reporting
    "CheckRecord",
    "CheckStatus",
    "Reporter",
    "RunReport",
    "RunStatus",
]
