"""
Value matchers that compose with ``include``.

    include(a_value_within(5).of(24))
    include({"name": a_string_matching(r"^a")})
    include(a_value < 90)
"""

from __future__ import annotations

import operator
import re
from typing import Any, Callable

from ..errors import ContainmentTypeError
from .base import Matcher


class ValueWithin(Matcher):
    """Matches numbers within ``delta`` of an expected value."""

    def __init__(self, delta: float, expected: float | None = None):
        self.delta = delta
        self.expected = expected

    def of(self, expected: float) -> ValueWithin:
        """Return a new matcher with the target set; this one is unchanged."""
        return ValueWithin(self.delta, expected)

    def matches(self, actual: Any) -> bool:
        if self.expected is None:
            raise ContainmentTypeError(
                "a_value_within() needs a target, call .of(expected) first"
            )
        try:
            return abs(actual - self.expected) <= self.delta
        except TypeError:
            return False

    @property
    def description(self) -> str:
        return f"a value within {self.delta} of {self.expected}"


class ValueComparison(Matcher):
    """Matches values for which ``actual <op> expected`` holds."""

    def __init__(self, symbol: str, compare: Callable[[Any, Any], bool], expected: Any):
        self.symbol = symbol
        self.compare = compare
        self.expected = expected

    def matches(self, actual: Any) -> bool:
        try:
            return bool(self.compare(actual, self.expected))
        except TypeError:
            return False

    @property
    def description(self) -> str:
        return f"a value {self.symbol} {self.expected!r}"


class _ValueBuilder(Matcher):
    """
    Builds comparison matchers from operators: ``a_value > 150``.

    Used bare as an expected item it has nothing to compare against and
    raises instead of matching.
    """

    def matches(self, actual: Any) -> bool:
        raise ContainmentTypeError(
            "a_value needs a comparison, e.g. a_value > 150"
        )

    @property
    def description(self) -> str:
        return "a_value"

    def __lt__(self, other: Any) -> ValueComparison:
        return ValueComparison("<", operator.lt, other)

    def __le__(self, other: Any) -> ValueComparison:
        return ValueComparison("<=", operator.le, other)

    def __gt__(self, other: Any) -> ValueComparison:
        return ValueComparison(">", operator.gt, other)

    def __ge__(self, other: Any) -> ValueComparison:
        return ValueComparison(">=", operator.ge, other)

    def __eq__(self, other: Any) -> ValueComparison:  # type: ignore[override]
        return ValueComparison("==", operator.eq, other)

    def __ne__(self, other: Any) -> ValueComparison:  # type: ignore[override]
        return ValueComparison("!=", operator.ne, other)

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return "a_value"


class StringContaining(Matcher):
    def __init__(self, expected: str):
        self.expected = expected

    def matches(self, actual: Any) -> bool:
        return isinstance(actual, str) and self.expected in actual

    @property
    def description(self) -> str:
        return f"a string containing {self.expected!r}"


class StringMatching(Matcher):
    def __init__(self, pattern: str | re.Pattern):
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def matches(self, actual: Any) -> bool:
        return isinstance(actual, str) and self.pattern.search(actual) is not None

    @property
    def description(self) -> str:
        return f"a string matching /{self.pattern.pattern}/"


class Anything(Matcher):
    def matches(self, actual: Any) -> bool:
        return True

    @property
    def description(self) -> str:
        return "anything"


a_value = _ValueBuilder()


def a_value_within(delta: float) -> ValueWithin:
    """Start a tolerance matcher; finish it with ``.of(expected)``."""
    return ValueWithin(delta)


def a_string_containing(expected: str) -> StringContaining:
    return StringContaining(expected)


def a_string_matching(pattern: str | re.Pattern) -> StringMatching:
    return StringMatching(pattern)


def anything() -> Anything:
    return Anything()
