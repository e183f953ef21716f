"""
Reporter for building and managing run reports.

This module provides the Reporter class which helps construct
run reports from suite runs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .models import (
    CheckRecord,
    CheckStatus,
    RunReport,
    compute_suite_hash,
)

if TYPE_CHECKING:
    from ..suite import Suite

logger = logging.getLogger(__name__)


class Reporter:
    """
    Builds and manages run reports.

    The Reporter provides a convenient interface for creating reports
    from Suite objects and recording check results.

    Example:
        from containment.suite import load_suite
        from containment.reporting import Reporter

        suite, _ = load_suite("checks/users.yaml")
        reporter = Reporter.from_suite(suite)

        # Start the run
        reporter.start_run()

        # Record checks
        reporter.start_check("admins")
        reporter.complete_check_success("admins", actual_value=["alice", "bob"])

        reporter.start_check("no_root")
        reporter.complete_check_failure("no_root", failure_message='expected ["root"] not to include "root"')

        # Finish and get report
        report = reporter.finish_run()
        print(report.summary())
    """

    def __init__(self, report: RunReport):
        """
        Initialize with a RunReport.

        Use Reporter.from_suite() for the typical case.
        """
        self.report = report

    @classmethod
    def from_suite(
        cls,
        suite: Suite,
        run_id: str | None = None,
    ) -> Reporter:
        """
        Create a Reporter from a parsed Suite.

        Args:
            suite: The parsed suite to create a report for
            run_id: Optional custom run ID (auto-generated if not provided)

        Returns:
            Reporter instance ready to record check results
        """
        suite_hash = compute_suite_hash(_suite_to_dict(suite))

        report = RunReport(
            suite_name=suite.name,
            suite_version=suite.version,
            suite_hash=suite_hash,
            data_file=str(suite.data_file) if suite.data_file else None,
        )

        if run_id:
            report.run_id = run_id

        # Pre-populate check records from suite checks
        for check in suite.checks:
            report.add_check(CheckRecord(
                check_id=check.id,
                mode=check.mode.value,
                path=check.path,
                description=check.description,
                expected_value=check.raw_expected,
            ))

        return cls(report)

    def start_run(self) -> None:
        """Mark the run as started."""
        logger.info(f"Starting run {self.report.run_id} for '{self.report.suite_name}'")
        self.report.start()

    def finish_run(self) -> RunReport:
        """
        Mark the run as completed and return the final report.

        Returns:
            The completed RunReport with summary stats
        """
        self.report.complete()
        logger.info(f"Finished run {self.report.run_id}: {self.report.status.value}")
        return self.report

    def start_check(self, check_id: str) -> CheckRecord | None:
        """
        Mark a check as started.

        Args:
            check_id: The ID of the check to start

        Returns:
            The CheckRecord, or None if check not found
        """
        check = self.report.get_check(check_id)
        if check:
            check.start()
        return check

    def complete_check_success(
        self,
        check_id: str,
        actual_value: Any = None,
    ) -> CheckRecord | None:
        """
        Mark a check as passed.

        Args:
            check_id: The ID of the check
            actual_value: The value the check looked at

        Returns:
            The CheckRecord, or None if check not found
        """
        check = self.report.get_check(check_id)
        if check:
            check.actual_value = actual_value
            check.complete(CheckStatus.PASSED)
        return check

    def complete_check_failure(
        self,
        check_id: str,
        failure_message: str,
        actual_value: Any = None,
        missing: str | None = None,
        diff: str | None = None,
    ) -> CheckRecord | None:
        """
        Mark a check as failed.

        Args:
            check_id: The ID of the check
            failure_message: Human-readable failure description
            actual_value: The value the check looked at
            missing: Rendered items that were not found
            diff: Rendered diff, if any

        Returns:
            The CheckRecord, or None if check not found
        """
        check = self.report.get_check(check_id)
        if check:
            check.actual_value = actual_value
            check.failure_message = failure_message
            check.missing = missing
            check.diff = diff
            check.complete(CheckStatus.FAILED)
        return check

    def complete_check_error(
        self,
        check_id: str,
        error_message: str,
        error_details: dict[str, Any] | None = None,
    ) -> CheckRecord | None:
        """
        Mark a check as errored (the check could not be evaluated).

        Args:
            check_id: The ID of the check
            error_message: Error description
            error_details: Additional error context

        Returns:
            The CheckRecord, or None if check not found
        """
        check = self.report.get_check(check_id)
        if check:
            check.error_message = error_message
            check.error_details = error_details
            check.complete(CheckStatus.ERROR)
        return check

    def skip_check(self, check_id: str, reason: str | None = None) -> CheckRecord | None:
        """
        Mark a check as skipped.

        Args:
            check_id: The ID of the check
            reason: Optional reason for skipping

        Returns:
            The CheckRecord, or None if check not found
        """
        check = self.report.get_check(check_id)
        if check:
            if reason:
                check.failure_message = f"Skipped: {reason}"
            check.complete(CheckStatus.SKIPPED)
        return check

    def save_json(self, path: str | Path) -> None:
        """
        Save the report to a JSON file.

        Args:
            path: Path to save the JSON file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.report.to_json())

    def get_summary(self) -> str:
        """Get a human-readable summary of the run."""
        return self.report.summary()


def _suite_to_dict(suite: Suite) -> dict[str, Any]:
    """Convert a Suite to a dict for hashing."""
    return {
        "version": suite.version,
        "name": suite.name,
        "data": suite.data,
        "env": suite.env,
        "defaults": {
            "diff": suite.defaults.diff,
            "fail_fast": suite.defaults.fail_fast,
        },
        "checks": [
            {
                "id": check.id,
                "mode": check.mode.value,
                "path": check.path,
                "expected": check.raw_expected,
            }
            for check in suite.checks
        ],
    }
