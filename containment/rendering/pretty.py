"""
Canonical rendering of values for failure messages.

Strings are double-quoted with JSON escapes, ``None`` renders as ``null``
and mappings keep insertion order, so messages read the same on every run.
Matchers render as their description in parentheses.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from ..matchers.base import describe, is_matcher


def inspect_value(value: Any, indent: int | None = None) -> str:
    """
    Render a value on one line, or across lines when ``indent`` is given.

    Args:
        value: Any value, including nested containers and matchers
        indent: Spaces per nesting level for multi-line output

    Returns:
        The rendered text
    """
    return _render(value, indent, 0, set())


def _render(value: Any, indent: int | None, level: int, seen: set[int]) -> str:
    if is_matcher(value):
        return f"({describe(value) or repr(value)})"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, (int, float)):
        return repr(value)

    if isinstance(value, Mapping):
        if id(value) in seen:
            return "{...}"
        seen = seen | {id(value)}
        entries = [
            f"{_render(k, indent, level + 1, seen)}: {_render(v, indent, level + 1, seen)}"
            for k, v in value.items()
        ]
        return _join(entries, "{", "}", indent, level)

    if isinstance(value, (list, tuple)):
        if id(value) in seen:
            return "[...]"
        seen = seen | {id(value)}
        entries = [_render(v, indent, level + 1, seen) for v in value]
        return _join(entries, "[", "]", indent, level)

    if isinstance(value, (set, frozenset)):
        if not value:
            return "set()"
        # Sets have no stable order; sort the rendered members instead.
        entries = sorted(_render(v, indent, level + 1, seen) for v in value)
        return _join(entries, "{", "}", indent, level)

    return repr(value)


def _join(entries: list[str], open_: str, close: str, indent: int | None, level: int) -> str:
    if not entries:
        return open_ + close
    if indent is None:
        return open_ + ", ".join(entries) + close
    pad = " " * (indent * (level + 1))
    body = ",\n".join(pad + entry for entry in entries)
    return f"{open_}\n{body}\n{' ' * (indent * level)}{close}"
