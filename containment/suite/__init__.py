"""
Check Suites

This package provides tools for parsing, validating, and working with
declarative containment check suites.

Usage:
    from containment.suite import load_suite, validate_suite_yaml

    # Load from file
    suite, result = load_suite("checks/users.yaml")
    if not result.is_valid:
        print(result)

    # Or validate from string
    suite, result = validate_suite_yaml(yaml_string)
"""

# Public API
from .loader import load_data_file, load_suite, validate_suite_yaml

# Models (for type hints and isinstance checks)
from .models import Check, CheckMode, Defaults, MatcherOp, Suite

# Parser and validation (for custom loading if needed)
from .parser import SchemaParser
from .validation import SchemaValidator, ValidationError, ValidationResult

__all__ = [
    # Loader functions
    "load_data_file",
    "load_suite",
    "validate_suite_yaml",
    # Models
    "Check",
    "CheckMode",
    "Defaults",
    "MatcherOp",
    "Suite",
    # Parsing and validation
    "SchemaParser",
    "ValidationResult",
    "ValidationError",
    "SchemaValidator",
]
