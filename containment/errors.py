"""
Exceptions raised by the containment engine.

A failed containment check is not an exception; it is reported through
``EvaluationResult`` and ``AssertionResult``. These exceptions cover
inputs the engine cannot evaluate at all.
"""

from __future__ import annotations

from typing import Any


class ContainmentTypeError(TypeError):
    """The actual value or an expected item cannot take part in containment."""

    def __init__(self, message: str, actual: Any = None, expected: Any = None):
        super().__init__(message)
        self.actual = actual
        self.expected = expected


class ContainmentFailure(AssertionError):
    """Raised by ``AssertionResult.raise_if_failed`` for failed checks."""

    def __init__(self, message: str, diff: str | None = None):
        super().__init__(f"{message}\n{diff}" if diff else message)
        self.message = message
        self.diff = diff
