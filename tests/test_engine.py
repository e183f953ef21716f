"""Tests for ContainmentEngine and assertion results."""

import pytest
from jsonpath_ng import parse as parse_jsonpath

from containment import (
    AssertionStatus,
    ContainmentEngine,
    ContainmentFailure,
    a_string_containing,
    a_string_matching,
    assert_excludes,
    assert_includes,
    assert_includes_at,
)
from containment.assertions.engine import selects_many


# --- includes / excludes ---


def test_includes_pass(engine):
    result = engine.includes([1, 2, 3], 1, 3)
    assert result.passed is True
    assert result.message == "include 1 and 3"
    assert result.actual == [1, 2, 3]


def test_includes_fail_lists_missing_items(engine):
    result = engine.includes([1, 2, 3], 1, 2, 4)
    assert result.failed is True
    assert result.message == "expected [1, 2, 3] to include 1, 2, and 4"
    assert result.details["missing"] == "4"
    assert result.expected == (1, 2, 4)
    assert result.diff is None


def test_excludes_pass_when_any_item_is_absent(engine):
    result = engine.excludes([1, 2, 3], 4, 1)
    assert result.passed is True
    assert result.message == "not include 4 and 1"


def test_excludes_fail_when_all_items_are_present(engine):
    result = engine.excludes([1, 2, 3], 3, 1)
    assert result.failed is True
    assert result.message == "expected [1, 2, 3] not to include 3 and 1"


def test_mapping_failure_has_diff(engine):
    result = engine.includes({"a": 1, "b": 2}, {"a": 2})
    assert result.failed is True
    assert result.diff.startswith("Diff:")


def test_multiline_string_failure_has_diff(engine):
    result = engine.includes("abc\ndef", "g")
    assert result.message == 'expected "abc\\ndef" to include "g"'
    assert result.diff is not None
    assert "+abc" in result.diff


def test_single_line_string_failure_has_no_diff(engine):
    assert engine.includes("abc", "d").diff is None


def test_diff_can_be_disabled():
    result = ContainmentEngine(diff=False).includes({"a": 1}, "b")
    assert result.failed is True
    assert result.diff is None


def test_type_mismatch_is_an_error_result(engine):
    result = engine.includes("abc", a_string_containing("b"))
    assert result.status == AssertionStatus.ERROR
    assert "ContainmentTypeError" in result.details["error"]


def test_non_container_is_an_error_result(engine):
    result = engine.includes(None, 1)
    assert result.status == AssertionStatus.ERROR


def test_no_expected_items_is_an_error_result(engine):
    assert engine.includes([1]).status == AssertionStatus.ERROR


# --- includes_at ---


DATA = {
    "users": [
        {"name": "alice", "role": "admin"},
        {"name": "bob", "role": "user"},
    ],
    "settings": {"theme": "dark", "beta": None},
}


def test_includes_at_single_match(engine):
    result = engine.includes_at(DATA, "$.settings", {"theme": "dark"}, "beta")
    assert result.passed is True
    assert result.path == "$.settings"


def test_includes_at_many_matches_become_a_list(engine):
    result = engine.includes_at(DATA, "$.users[*].name", "alice", "bob")
    assert result.passed is True
    assert result.actual == ["alice", "bob"]


ONE_USER = {"users": [{"name": "alice"}]}


def test_includes_at_wildcard_with_one_match_stays_a_list(engine):
    result = engine.includes_at(ONE_USER, "$.users[*].name", a_string_matching("^a"))
    assert result.passed is True
    assert result.actual == ["alice"]


def test_includes_at_wildcard_does_not_fall_back_to_substrings(engine):
    one = engine.includes_at(ONE_USER, "$.users[*].name", "ali")
    two = engine.includes_at(DATA, "$.users[*].name", "ali")
    assert one.failed is True
    assert two.failed is True


def test_includes_at_plain_index_yields_the_value(engine):
    result = engine.includes_at(DATA, "$.users[0].name", "ali")
    assert result.passed is True
    assert result.actual == "alice"


@pytest.mark.parametrize(
    "path, many",
    [
        ("$", False),
        ("$.settings", False),
        ("$.users[0].name", False),
        ("$.users[*].name", True),
        ("$.users[0:1]", True),
        ("$..name", True),
        ("$.settings.*", True),
    ],
)
def test_selects_many(path, many):
    assert selects_many(parse_jsonpath(path)) is many


def test_includes_at_partial_mapping_in_list(engine):
    result = engine.includes_at(DATA, "$.users", {"name": "alice", "role": "admin"})
    assert result.passed is True


def test_includes_at_negated(engine):
    result = engine.includes_at(DATA, "$.users[*].name", "root", negate=True)
    assert result.passed is True


def test_includes_at_missing_path(engine):
    result = engine.includes_at(DATA, "$.missing", "x")
    assert result.failed is True
    assert result.message == "Path does not exist"


def test_includes_at_invalid_path(engine):
    result = engine.includes_at(DATA, "$[", "x")
    assert result.status == AssertionStatus.ERROR


# --- AssertionResult ---


def test_raise_if_failed():
    result = assert_includes({"a": 1}, "b")
    with pytest.raises(ContainmentFailure) as exc_info:
        result.raise_if_failed()
    assert exc_info.value.message == 'expected {"a": 1} to include "b"'
    assert "Diff:" in str(exc_info.value)


def test_raise_if_failed_passes_silently():
    assert_includes([1], 1).raise_if_failed()


def test_str_of_failed_result():
    text = str(assert_includes([1, 2], 3))
    assert text.startswith("❌ FAILED: expected [1, 2] to include 3")
    assert "missing: 3" in text


def test_str_of_passed_result():
    assert str(assert_excludes([1, 2], 3)) == "✅ PASS: not include 3"


def test_assert_includes_at():
    assert assert_includes_at({"a": [1, 2]}, "$.a", 2).passed is True
