"""
Containment engine.

This module evaluates whether an actual value (text, sequence or mapping)
contains every expected item, and wraps the outcome into descriptions,
failure messages and assertion results.
"""

from __future__ import annotations

import logging
from typing import Any

from jsonpath_ng import parse as parse_jsonpath
from jsonpath_ng.jsonpath import Child, Fields, Index, Parent, Root, This
from jsonpath_ng.exceptions import JsonPathParserError

from ..errors import ContainmentTypeError
from ..matchers.base import Matcher
from ..rendering import render_diff, should_diff
from .adapters import adapt
from .messages import describe_expected, describe_items, failure_message
from .models import AssertionResult, EvaluationResult

logger = logging.getLogger(__name__)


class ContainmentEvaluator:
    """
    Decides containment for one actual value and a set of expected items.

    The overall result is the conjunction over all items: every item has
    to be present. Negation inverts that conjunction as a whole, so a
    negated check fails only when every item is present.
    """

    def evaluate(
        self,
        actual: Any,
        expected: tuple[Any, ...] | list[Any],
        negate: bool = False,
    ) -> EvaluationResult:
        """
        Evaluate expected items against the actual value.

        Args:
            actual: The string, sequence or mapping to search
            expected: Expected items, literals or matchers
            negate: Invert the overall result

        Returns:
            EvaluationResult with the final pass/fail

        Raises:
            ContainmentTypeError: If the actual value is not a container, or
                an item cannot be looked up in it
        """
        expected = tuple(expected)
        container = adapt(actual)

        present: list[Any] = []
        missing: list[Any] = []
        for item in expected:
            if container.contains(item):
                present.append(item)
            else:
                missing.append(item)

        all_present = not missing
        passed = not all_present if negate else all_present
        logger.debug(
            f"Containment on {container.kind.value}: "
            f"{len(present)}/{len(expected)} present, negate={negate}, passed={passed}"
        )
        return EvaluationResult(
            passed=passed,
            negated=negate,
            kind=container.kind,
            expected=expected,
            failing_items=tuple(missing),
            present_items=tuple(present),
        )


class IncludeMatcher(Matcher):
    """
    Matcher for "actual includes all of these items".

    Example:
        matcher = include("a", "b")
        matcher.evaluate("abc").passed        # False
        matcher.failure_message("abc")        # 'expected "abc" to include "a" and "b"'

    ``include`` is itself a matcher, so it can be nested inside another
    ``include`` or inside a partial mapping.
    """

    diffable = True

    def __init__(self, *expected: Any):
        if not expected:
            raise ContainmentTypeError("include() needs at least one expected item")
        self.expected_items = tuple(expected)
        self._evaluator = ContainmentEvaluator()

    @property
    def expected(self) -> Any:
        """The single expected item, or all of them when several were given."""
        if len(self.expected_items) == 1:
            return self.expected_items[0]
        return self.expected_items

    def evaluate(self, actual: Any, negate: bool = False) -> EvaluationResult:
        return self._evaluator.evaluate(actual, self.expected_items, negate=negate)

    def matches(self, actual: Any) -> bool:
        """Predicate entry point; a value that cannot hold the items includes nothing."""
        try:
            return self.evaluate(actual).passed
        except ContainmentTypeError:
            return False

    def does_not_match(self, actual: Any) -> bool:
        return self.evaluate(actual, negate=True).passed

    @property
    def description(self) -> str:
        return describe_expected(self.expected_items)

    def failure_message(self, actual: Any) -> str:
        return failure_message(actual, self.expected_items)

    def failure_message_when_negated(self, actual: Any) -> str:
        return failure_message(actual, self.expected_items, negated=True)

    def diff_inputs(self, actual: Any) -> tuple[Any, Any]:
        """Raw values for the diff renderer; no diffing happens here."""
        return actual, self.expected


def include(*expected: Any) -> IncludeMatcher:
    """Build a containment matcher for one or more expected items."""
    return IncludeMatcher(*expected)


def selects_many(expr: Any) -> bool:
    """
    Whether a parsed JSONPath can select more than one node.

    Only chains of plain fields, single indices, ``$``, ``@`` and ``parent``
    name exactly one node. Wildcards, slices, ``..``, unions, ``where``
    clauses and filters count as multi-node selections.
    """
    if isinstance(expr, Child):
        return selects_many(expr.left) or selects_many(expr.right)
    if isinstance(expr, Fields):
        return len(expr.fields) != 1 or "*" in expr.fields
    if isinstance(expr, Index):
        return len(getattr(expr, "indices", (expr,))) != 1
    if isinstance(expr, (Root, This, Parent)):
        return False
    return True


class ContainmentEngine:
    """
    Engine for running containment assertions.

    Supports:
    - includes: every expected item is in the actual value
    - excludes: not every expected item is in the actual value
    - includes_at: the same, on a value selected with JSONPath

    Example:
        engine = ContainmentEngine()
        data = {"users": [{"name": "alice", "role": "admin"}]}

        result = engine.includes(data, "users")
        result = engine.includes_at(data, "$.users", {"role": "admin"})
        result = engine.excludes([1, 2, 3], 4)
    """

    def __init__(self, diff: bool = True):
        self.diff = diff

    def includes(self, actual: Any, *expected: Any) -> AssertionResult:
        """
        Assert that the actual value includes every expected item.

        Args:
            actual: The string, sequence or mapping to search
            *expected: Literal values or matchers

        Returns:
            AssertionResult indicating pass/fail
        """
        return self._check(actual, expected, negate=False)

    def excludes(self, actual: Any, *expected: Any) -> AssertionResult:
        """
        Assert that the actual value does not include all expected items.

        Passes as long as at least one item is absent.
        """
        return self._check(actual, expected, negate=True)

    def includes_at(
        self,
        data: Any,
        path: str,
        *expected: Any,
        negate: bool = False,
    ) -> AssertionResult:
        """
        Assert containment on the value found at a JSONPath.

        A path that names one node (fields and single indices only) yields
        that node's value. A path that can select several nodes (wildcards,
        slices, descendants, unions, filters) always yields a list of the
        matched values in document order, even when only one node matched.

        Args:
            data: The JSON data to search
            path: JSONPath expression
            *expected: Literal values or matchers
            negate: Assert exclusion instead

        Returns:
            AssertionResult indicating pass/fail
        """
        matches, many, error = self._evaluate_path(data, path)
        if error:
            return error

        if not matches:
            return AssertionResult.failed_result(
                message="Path does not exist",
                path=path,
                expected=describe_expected(expected) if expected else None,
                actual="<path not found>",
            )

        if many:
            actual = [m.value for m in matches]
        else:
            actual = matches[0].value

        return self._check(actual, expected, negate=negate, path=path)

    def _check(
        self,
        actual: Any,
        expected: tuple[Any, ...],
        negate: bool,
        path: str | None = None,
    ) -> AssertionResult:
        try:
            matcher = IncludeMatcher(*expected)
            evaluation = matcher.evaluate(actual, negate=negate)
        except ContainmentTypeError as e:
            return AssertionResult.error_result(
                message=str(e),
                path=path,
                details={"error": f"{type(e).__name__}: {e}"},
            )

        if evaluation.passed:
            description = matcher.description
            return AssertionResult.passed_result(
                message=f"not {description}" if negate else description,
                path=path,
                expected=matcher.expected,
                actual=actual,
            )

        if negate:
            message = matcher.failure_message_when_negated(actual)
            details: dict[str, Any] = {}
        else:
            message = matcher.failure_message(actual)
            details = {"missing": describe_items(evaluation.failing_items)}

        if self.diff and should_diff(actual):
            diff = render_diff(*matcher.diff_inputs(actual))
            if diff:
                details["diff"] = diff

        return AssertionResult.failed_result(
            message=message,
            path=path,
            expected=matcher.expected,
            actual=actual,
            details=details,
        )

    def _evaluate_path(self, data: Any, path: str) -> tuple[list, bool, AssertionResult | None]:
        """
        Evaluate a JSONPath expression on data.

        Returns:
            Tuple of (matches, selects_many, error). If error is not None,
            matches is empty.
        """
        try:
            jsonpath_expr = parse_jsonpath(path)
        except JsonPathParserError as e:
            return [], False, AssertionResult.error_result(
                message="Invalid JSONPath expression",
                path=path,
                details={"error": str(e)},
            )
        except Exception as e:
            return [], False, AssertionResult.error_result(
                message="Failed to parse JSONPath",
                path=path,
                details={"error": f"{type(e).__name__}: {e}"},
            )

        try:
            return jsonpath_expr.find(data), selects_many(jsonpath_expr), None
        except Exception as e:
            return [], False, AssertionResult.error_result(
                message="Failed to evaluate JSONPath",
                path=path,
                details={"error": f"{type(e).__name__}: {e}"},
            )


# Convenience functions for quick assertions
def assert_includes(actual: Any, *expected: Any) -> AssertionResult:
    """Check that the actual value includes every expected item."""
    return ContainmentEngine().includes(actual, *expected)


def assert_excludes(actual: Any, *expected: Any) -> AssertionResult:
    """Check that the actual value does not include all expected items."""
    return ContainmentEngine().excludes(actual, *expected)


def assert_includes_at(data: Any, path: str, *expected: Any) -> AssertionResult:
    """Check containment on the value at a JSONPath."""
    return ContainmentEngine().includes_at(data, path, *expected)
