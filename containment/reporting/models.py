"""
Report data models for suite runs.

A ``RunReport`` holds one ``CheckRecord`` per suite check. Records keep
what the check looked for, what it found at its path, and, on failure,
which items were missing and the diff between the two.
"""

from __future__ import annotations

import hashlib
import json
import uuid
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterator


class CheckStatus(str, Enum):
    """Status of an individual check."""
    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"
    SKIPPED = "skipped"


class RunStatus(str, Enum):
    """Overall status of a suite run."""
    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"


STATUS_ICONS = {
    "pending": "⏳",
    "running": "🔄",
    "passed": "✅",
    "failed": "❌",
    "error": "⚠️",
    "skipped": "⏭️",
}


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CheckRecord:
    """Outcome of one include/exclude check."""
    check_id: str
    mode: str  # "include" or "exclude"
    path: str = "$"
    description: str | None = None
    status: CheckStatus = CheckStatus.PENDING

    expected_value: Any = None  # As written in the suite
    actual_value: Any = None  # Value found at ``path``

    failure_message: str | None = None
    missing: str | None = None  # Rendered items not found (include only)
    diff: str | None = None
    error_message: str | None = None
    error_details: dict[str, Any] | None = None

    started_at: datetime | None = None
    duration_ms: float | None = None

    def start(self) -> None:
        self.status = CheckStatus.RUNNING
        self.started_at = _now()

    def complete(self, status: CheckStatus) -> None:
        self.status = status
        if self.started_at:
            self.duration_ms = (_now() - self.started_at).total_seconds() * 1000

    @property
    def headline(self) -> str:
        """``<id>: <mode> at <path>``, plus the description when there is one."""
        line = f"{self.check_id}: {self.mode} at {self.path}"
        if self.description:
            line += f" ({self.description})"
        return line

    def outcome_lines(self) -> Iterator[str]:
        """Explain a check that did not pass: message, missing items, diff."""
        if self.status == CheckStatus.ERROR:
            yield f"error: {self.error_message}"
            return
        if self.failure_message:
            yield self.failure_message
        if self.missing:
            yield f"missing: {self.missing}"
        if self.diff:
            yield from self.diff.splitlines()

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "id": self.check_id,
            "mode": self.mode,
            "path": self.path,
            "description": self.description,
            "status": self.status.value,
            "duration_ms": self.duration_ms,
            "expected": _safe_serialize(self.expected_value),
            "actual": _safe_serialize(self.actual_value),
            "outcome": {
                "message": self.failure_message or self.error_message,
                "missing": self.missing,
                "diff": self.diff,
                "error_details": self.error_details,
            },
        }


@dataclass
class RunReport:
    """All check records of one suite run, with counts and overall status."""
    run_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    suite_name: str = ""
    suite_version: int = 1
    suite_hash: str = ""
    data_file: str | None = None

    status: RunStatus = RunStatus.PENDING
    started_at: datetime = field(default_factory=_now)
    duration_ms: float | None = None

    checks: list[CheckRecord] = field(default_factory=list)

    def start(self) -> None:
        self.status = RunStatus.RUNNING
        self.started_at = _now()

    def complete(self) -> None:
        """Stop the clock and derive the run status; errors outrank failures."""
        self.duration_ms = (_now() - self.started_at).total_seconds() * 1000
        if self.error_checks:
            self.status = RunStatus.ERROR
        elif self.failed_checks:
            self.status = RunStatus.FAILED
        else:
            self.status = RunStatus.PASSED

    def add_check(self, check: CheckRecord) -> None:
        self.checks.append(check)

    def get_check(self, check_id: str) -> CheckRecord | None:
        return next((c for c in self.checks if c.check_id == check_id), None)

    @property
    def counts(self) -> Counter:
        return Counter(c.status for c in self.checks)

    @property
    def total_checks(self) -> int:
        return len(self.checks)

    @property
    def passed_checks(self) -> int:
        return self.counts[CheckStatus.PASSED]

    @property
    def failed_checks(self) -> int:
        return self.counts[CheckStatus.FAILED]

    @property
    def error_checks(self) -> int:
        return self.counts[CheckStatus.ERROR]

    @property
    def skipped_checks(self) -> int:
        return self.counts[CheckStatus.SKIPPED]

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "run_id": self.run_id,
            "suite": {
                "name": self.suite_name,
                "version": self.suite_version,
                "hash": self.suite_hash,
                "data_file": self.data_file,
            },
            "status": self.status.value,
            "started_at": self.started_at.isoformat(),
            "duration_ms": self.duration_ms,
            "counts": {
                "total": self.total_checks,
                "passed": self.passed_checks,
                "failed": self.failed_checks,
                "errors": self.error_checks,
                "skipped": self.skipped_checks,
            },
            "checks": [check.to_dict() for check in self.checks],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, default=str)

    def summary(self) -> str:
        """
        Human-readable summary.

        Checks that did not pass come first, each followed by its failure
        message, the missing items and the diff. Passing and skipped checks
        are listed after them, one line each.
        """
        duration = f"{self.duration_ms:.0f}ms" if self.duration_ms is not None else "N/A"
        lines = [
            f"Suite: {self.suite_name}  {STATUS_ICONS[self.status.value]} {self.status.value.upper()}",
            f"Run {self.run_id}, {self.total_checks} checks in {duration}",
            f"{self.passed_checks} passed, {self.failed_checks} failed, "
            f"{self.error_checks} errors, {self.skipped_checks} skipped",
        ]

        problems = [c for c in self.checks if c.status in (CheckStatus.FAILED, CheckStatus.ERROR)]
        others = [c for c in self.checks if c.status not in (CheckStatus.FAILED, CheckStatus.ERROR)]

        for check in problems:
            lines.append("")
            lines.append(f"{STATUS_ICONS[check.status.value]} {check.headline}")
            lines.extend(f"   {line}" for line in check.outcome_lines())

        if others:
            lines.append("")
        for check in others:
            line = f"{STATUS_ICONS[check.status.value]} {check.headline}"
            if check.status == CheckStatus.SKIPPED and check.failure_message:
                line += f" - {check.failure_message}"
            lines.append(line)

        return "\n".join(lines)


def compute_suite_hash(suite_dict: dict[str, Any]) -> str:
    """First 12 hex chars of the SHA-256 of the canonical suite JSON."""
    serialized = json.dumps(suite_dict, sort_keys=True, default=str)
    return hashlib.sha256(serialized.encode()).hexdigest()[:12]


def _safe_serialize(value: Any) -> Any:
    """Keep JSON-compatible values, stringify the rest."""
    if value is None:
        return None
    try:
        json.dumps(value)
        return value
    except (TypeError, ValueError):
        return str(value)
