"""
Unified diffs between an actual value and what was expected of it.

The engine only hands over the raw values; this module decides whether a
diff is worth showing and renders it.
"""

from __future__ import annotations

import difflib
from collections.abc import Mapping
from typing import Any

from .pretty import inspect_value

DIFF_INDENT = 2


def should_diff(actual: Any) -> bool:
    """Diff mappings, and anything whose rendering spans several lines."""
    if isinstance(actual, Mapping):
        return True
    if isinstance(actual, str):
        return "\n" in actual
    return "\n" in inspect_value(actual)


def render_diff(actual: Any, expected: Any) -> str:
    """
    Render a unified diff from ``expected`` to ``actual``.

    Two strings are compared line by line as they are. Anything else is
    compared through its indented rendering.

    Returns:
        The diff headed by ``Diff:``, or an empty string when the two
        renderings are identical
    """
    if isinstance(actual, str) and isinstance(expected, str):
        actual_lines = actual.splitlines()
        expected_lines = expected.splitlines()
    else:
        actual_lines = inspect_value(actual, indent=DIFF_INDENT).splitlines()
        expected_lines = inspect_value(expected, indent=DIFF_INDENT).splitlines()

    lines = list(
        difflib.unified_diff(
            expected_lines,
            actual_lines,
            fromfile="expected",
            tofile="actual",
            lineterm="",
        )
    )
    if not lines:
        return ""
    return "Diff:\n" + "\n".join(lines)
