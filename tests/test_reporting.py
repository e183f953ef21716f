"""Tests for run reports and the Reporter."""

import json

from containment import CheckStatus, Reporter, RunStatus, validate_suite_yaml
from containment.reporting import compute_suite_hash


SUITE = """
version: 1
name: Report
data: {tags: [a, b]}
checks:
  - id: first
    path: $.tags
    include: [a]
    description: tag a is present
  - id: second
    path: $.tags
    include: [c]
  - id: third
    include: [tags]
"""


def _reporter(run_id=None):
    suite, result = validate_suite_yaml(SUITE)
    assert result.is_valid, str(result)
    return Reporter.from_suite(suite, run_id=run_id)


def test_from_suite_prepopulates_checks():
    report = _reporter(run_id="run-1").report

    assert report.run_id == "run-1"
    assert report.suite_name == "Report"
    assert [c.check_id for c in report.checks] == ["first", "second", "third"]
    first = report.get_check("first")
    assert first.status == CheckStatus.PENDING
    assert first.path == "$.tags"
    assert first.mode == "include"
    assert first.description == "tag a is present"
    assert first.expected_value == ["a"]
    assert report.get_check("missing") is None


def test_run_status_and_counts():
    reporter = _reporter()
    reporter.start_run()

    reporter.start_check("first")
    reporter.complete_check_success("first", actual_value=["a", "b"])
    reporter.start_check("second")
    reporter.complete_check_failure(
        "second",
        failure_message='expected ["a", "b"] to include "c"',
        actual_value=["a", "b"],
    )
    reporter.skip_check("third", "fail_fast after 'second'")
    report = reporter.finish_run()

    assert report.status == RunStatus.FAILED
    assert report.total_checks == 3
    assert report.passed_checks == 1
    assert report.failed_checks == 1
    assert report.skipped_checks == 1
    assert report.get_check("first").duration_ms is not None
    assert report.get_check("third").failure_message == "Skipped: fail_fast after 'second'"


def test_errors_win_over_failures():
    reporter = _reporter()
    reporter.start_run()
    reporter.complete_check_failure("first", failure_message="nope")
    reporter.complete_check_error("second", "Invalid JSONPath expression", {"error": "boom"})
    report = reporter.finish_run()

    assert report.status == RunStatus.ERROR
    assert report.get_check("second").error_details == {"error": "boom"}


def test_all_passed():
    reporter = _reporter()
    reporter.start_run()
    for check_id in ("first", "second", "third"):
        reporter.complete_check_success(check_id)
    assert reporter.finish_run().status == RunStatus.PASSED


def test_to_dict_and_save_json(tmp_path):
    reporter = _reporter(run_id="run-2")
    reporter.start_run()
    reporter.complete_check_failure(
        "second",
        failure_message="expected to include c",
        actual_value=("a", object()),
        missing='"c"',
        diff="Diff:\n-c\n+a",
    )
    reporter.finish_run()

    path = tmp_path / "out" / "report.json"
    reporter.save_json(path)
    data = json.loads(path.read_text())

    assert data["run_id"] == "run-2"
    assert data["suite"]["name"] == "Report"
    assert data["counts"]["failed"] == 1
    second = data["checks"][1]
    assert second["status"] == "failed"
    assert second["id"] == "second"
    assert second["expected"] == ["c"]
    assert second["outcome"]["missing"] == '"c"'
    assert second["outcome"]["diff"] == "Diff:\n-c\n+a"
    assert isinstance(second["actual"], str)


def test_summary_puts_failures_first_with_missing_items_and_diff():
    reporter = _reporter()
    reporter.start_run()
    reporter.complete_check_success("first")
    reporter.complete_check_failure(
        "second",
        failure_message='expected ["a", "b"] to include "c"',
        missing='"c"',
        diff="Diff:\n-c",
    )
    reporter.complete_check_error("third", "Invalid JSONPath expression")
    reporter.finish_run()

    lines = reporter.get_summary().splitlines()
    assert lines[0] == "Suite: Report  ⚠️ ERROR"
    assert lines[2] == "1 passed, 1 failed, 1 errors, 0 skipped"
    assert lines[4:9] == [
        "❌ second: include at $.tags",
        '   expected ["a", "b"] to include "c"',
        '   missing: "c"',
        "   Diff:",
        "   -c",
    ]
    assert lines[10:12] == [
        "⚠️ third: include at $",
        "   error: Invalid JSONPath expression",
    ]
    assert lines[-1] == "✅ first: include at $.tags (tag a is present)"


def test_suite_hash_is_stable():
    assert compute_suite_hash({"a": 1, "b": [2]}) == compute_suite_hash({"b": [2], "a": 1})
    assert len(compute_suite_hash({})) == 12
    assert _reporter().report.suite_hash == _reporter().report.suite_hash
