"""
Descriptions and failure messages for containment checks.

    describe_expected(("str", "a", "foo"))  -> 'include "str", "a", and "foo"'
    failure_message([1, 2, 3], (1, 2, 4))   -> 'expected [1, 2, 3] to include 1, 2, and 4'
"""

from __future__ import annotations

from typing import Any, Sequence

from ..rendering import inspect_value


def to_sentence(words: Sequence[str]) -> str:
    """Join words as an English conjunction with an Oxford comma."""
    words = list(words)
    if not words:
        return ""
    if len(words) == 1:
        return words[0]
    if len(words) == 2:
        return f"{words[0]} and {words[1]}"
    return f"{', '.join(words[:-1])}, and {words[-1]}"


def render_item(item: Any) -> str:
    """
    Render one expected item.

    Matchers render as their description in parentheses, also when nested
    inside a partial mapping.
    """
    return inspect_value(item)


def describe_items(items: Sequence[Any]) -> str:
    return to_sentence([render_item(item) for item in items])


def describe_expected(items: Sequence[Any]) -> str:
    return f"include {describe_items(items)}"


def failure_message(actual: Any, items: Sequence[Any], negated: bool = False) -> str:
    verb = "not to include" if negated else "to include"
    return f"expected {inspect_value(actual)} {verb} {describe_items(items)}"
