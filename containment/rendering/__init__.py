"""
Rendering helpers for failure output.

    inspect_value(value)              -> one-line canonical rendering
    render_diff(actual, expected)     -> unified diff, "" when identical
"""

from .diff import render_diff, should_diff
from .pretty import inspect_value

__all__ = [
    "inspect_value",
    "render_diff",
    "should_diff",
]
