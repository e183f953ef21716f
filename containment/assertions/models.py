"""
Containment result models.

This module defines the outcome of a single evaluation and the
assertion-level result wrapped around it, including failure details.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..errors import ContainmentFailure
from ..rendering import inspect_value


class ContainerKind(str, Enum):
    """Shape of the actual value."""
    TEXT = "text"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


class AssertionStatus(str, Enum):
    """Status of an assertion check."""
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"  # e.g., matcher against text, non-container actual


@dataclass(frozen=True)
class EvaluationResult:
    """
    Outcome of evaluating expected items against one actual value.

    ``passed`` already accounts for negation. ``failing_items`` lists the
    expected items that were not present, in the order given; it explains
    the result but never changes it.
    """
    passed: bool
    negated: bool
    kind: ContainerKind
    expected: tuple[Any, ...]
    failing_items: tuple[Any, ...] = ()
    present_items: tuple[Any, ...] = ()


@dataclass
class AssertionResult:
    """
    Result of a single containment assertion.

    Attributes:
        status: Whether the assertion passed, failed, or errored
        message: Human-readable description of the result
        path: The JSONPath that selected the actual value, if any
        expected: The expected items
        actual: The actual value
        details: Additional context (``diff``, ``error``, ``missing``)
    """
    status: AssertionStatus
    message: str
    path: str | None = None
    expected: Any = None
    actual: Any = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return self.status == AssertionStatus.PASSED

    @property
    def failed(self) -> bool:
        return self.status == AssertionStatus.FAILED

    @property
    def diff(self) -> str | None:
        return self.details.get("diff")

    def raise_if_failed(self) -> None:
        """Raise ``ContainmentFailure`` unless the assertion passed."""
        if not self.passed:
            raise ContainmentFailure(self.message, diff=self.diff)

    def __str__(self) -> str:
        """Format as a human-readable string."""
        if self.status == AssertionStatus.PASSED:
            return f"✅ PASS: {self.message}"

        icon = "❌" if self.status == AssertionStatus.FAILED else "⚠️"
        lines = [f"{icon} {self.status.value.upper()}: {self.message}"]

        if self.path:
            lines.append(f"   Path: {self.path}")

        for key, value in self.details.items():
            if key == "diff":
                continue
            lines.append(f"   {key}: {_format_value(value)}")

        if self.diff:
            lines.append(self.diff)

        return "\n".join(lines)

    @classmethod
    def passed_result(
        cls,
        message: str,
        path: str | None = None,
        expected: Any = None,
        actual: Any = None,
    ) -> AssertionResult:
        """Create a passing result."""
        return cls(
            status=AssertionStatus.PASSED,
            message=message,
            path=path,
            expected=expected,
            actual=actual,
        )

    @classmethod
    def failed_result(
        cls,
        message: str,
        path: str | None = None,
        expected: Any = None,
        actual: Any = None,
        details: dict[str, Any] | None = None,
    ) -> AssertionResult:
        """Create a failing result."""
        return cls(
            status=AssertionStatus.FAILED,
            message=message,
            path=path,
            expected=expected,
            actual=actual,
            details=details or {},
        )

    @classmethod
    def error_result(
        cls,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> AssertionResult:
        """Create an error result (assertion couldn't be evaluated)."""
        return cls(
            status=AssertionStatus.ERROR,
            message=message,
            path=path,
            details=details or {},
        )


def _format_value(value: Any, max_length: int = 100) -> str:
    """Format a value for display, truncating if too long."""
    formatted = value if isinstance(value, str) else inspect_value(value)
    if len(formatted) > max_length:
        return formatted[: max_length - 3] + "..."
    return formatted
