"""
Reporting for Suite Runs

This package provides reporting capabilities for capturing complete
records of suite runs.

Features:
    - Run metadata (ID, timestamp, suite info)
    - Check-by-check records with timing
    - Failure messages and diffs
    - JSON serialization
    - Human-readable summaries

Usage:
    from containment.suite import load_suite
    from containment.reporting import Reporter

    suite, _ = load_suite("checks/users.yaml")
    reporter = Reporter.from_suite(suite)

    reporter.start_run()

    reporter.start_check("admins")
    reporter.complete_check_success("admins", actual_value=["alice"])

    reporter.start_check("no_root")
    reporter.complete_check_failure(
        "no_root",
        failure_message='expected ["root"] not to include "root"',
    )

    report = reporter.finish_run()
    print(report.summary())

    reporter.save_json("reports/run-2024-01-15.json")
"""

# Models
from .models import (
    CheckRecord,
    CheckStatus,
    RunReport,
    RunStatus,
    compute_suite_hash,
)

# Reporter
from .reporter import Reporter

__all__ = [
    # Models
    "CheckRecord",
    "CheckStatus",
    "RunReport",
    "RunStatus",
    "compute_suite_hash",
    # Reporter
    "Reporter",
]
