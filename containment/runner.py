"""
Suite runner.

Evaluates every check of a parsed suite against its data and records
the outcome in a run report.
"""

from __future__ import annotations

import logging
from typing import Callable

from .assertions import AssertionStatus, ContainmentEngine
from .reporting import Reporter
from .suite import Check, Suite

logger = logging.getLogger(__name__)


def run_suite(
    suite: Suite,
    engine: ContainmentEngine | None = None,
    on_check: Callable[[Check, Reporter], None] | None = None,
) -> Reporter:
    """
    Run all checks of a suite and return the reporter with results.

    Args:
        suite: The parsed suite
        engine: Engine to use; by default one honouring the suite's
            ``diff`` setting
        on_check: Called after each check completes (used for live output)

    Returns:
        Reporter holding the finished RunReport
    """
    engine = engine or ContainmentEngine(diff=suite.defaults.diff)
    reporter = Reporter.from_suite(suite)
    reporter.start_run()

    stop_reason: str | None = None
    for check in suite.checks:
        if stop_reason:
            reporter.skip_check(check.id, stop_reason)
            continue

        reporter.start_check(check.id)
        try:
            result = engine.includes_at(suite.data, check.path, *check.expected, negate=check.negate)
        except Exception as e:
            # A matcher raising is a problem with the check, not a failure.
            logger.exception(f"Check '{check.id}' raised")
            reporter.complete_check_error(check.id, f"{type(e).__name__}: {e}")
        else:
            if result.status == AssertionStatus.PASSED:
                reporter.complete_check_success(check.id, actual_value=result.actual)
            elif result.status == AssertionStatus.FAILED:
                reporter.complete_check_failure(
                    check.id,
                    failure_message=result.message,
                    actual_value=result.actual,
                    missing=result.details.get("missing"),
                    diff=result.diff,
                )
            else:
                reporter.complete_check_error(check.id, result.message, error_details=result.details)

        record = reporter.report.get_check(check.id)
        logger.debug(f"Check '{check.id}': {record.status.value}")
        if on_check:
            on_check(check, reporter)

        if suite.defaults.fail_fast and record.status.value in ("failed", "error"):
            stop_reason = f"fail_fast after '{check.id}'"

    reporter.finish_run()
    return reporter
