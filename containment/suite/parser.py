"""
Schema parser for containment check suites.

This module converts validated YAML data into typed Suite structures,
building matcher objects from matcher specs along the way.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

from ..assertions import include
from ..matchers import (
    a_string_containing,
    a_string_matching,
    a_value,
    a_value_within,
    anything,
)
from .models import Check, CheckMode, Defaults, MatcherOp, Suite


class SchemaParser:
    """Parses and converts validated YAML to typed Suite structure."""

    # Regex for template interpolation: {{env.KEY}}
    TEMPLATE_PATTERN = re.compile(r"\{\{env\.(\w+)\}\}")

    def __init__(self, data: dict[str, Any], payload: Any = None, data_file: Path | None = None):
        self.data = data
        self.payload = payload
        self.data_file = data_file
        self.env: dict[str, Any] = data.get("env") or {}

    def parse(self) -> Suite:
        """Convert validated data to typed Suite."""
        return Suite(
            version=self.data["version"],
            name=self.data["name"],
            data=self.payload if self.data_file else self.data.get("data"),
            data_file=self.data_file,
            env=self.env,
            defaults=self._parse_defaults(),
            checks=self._parse_checks(),
        )

    def _parse_defaults(self) -> Defaults:
        defaults = self.data.get("defaults") or {}
        return Defaults(
            diff=defaults.get("diff", True),
            fail_fast=defaults.get("fail_fast", False),
        )

    def _parse_checks(self) -> list[Check]:
        return [self._parse_check(check) for check in self.data.get("checks", [])]

    def _parse_check(self, check: dict) -> Check:
        mode = CheckMode.EXCLUDE if "exclude" in check else CheckMode.INCLUDE
        items = check[mode.value]
        if not isinstance(items, list):
            items = [items]

        return Check(
            id=check["id"],
            mode=mode,
            path=check.get("path") or "$",
            expected=[self.build_expected(item) for item in items],
            raw_expected=items,
            description=check.get("description"),
        )

    def build_expected(self, item: Any) -> Any:
        """Turn a YAML expected item into a literal or matcher."""
        if isinstance(item, str):
            return self.interpolate(item)

        if isinstance(item, list):
            return [self.build_expected(value) for value in item]

        if isinstance(item, dict):
            if len(item) == 1:
                (key, arg), = item.items()
                if isinstance(key, str) and key.startswith("$"):
                    return self._build_matcher(MatcherOp(key), arg)
            return {key: self.build_expected(value) for key, value in item.items()}

        return item

    def _build_matcher(self, op: MatcherOp, arg: Any) -> Any:
        if op == MatcherOp.WITHIN:
            return a_value_within(arg["delta"]).of(arg["of"])
        if op == MatcherOp.CONTAINS:
            return a_string_containing(self.interpolate(arg))
        if op == MatcherOp.MATCHES:
            return a_string_matching(arg)
        if op == MatcherOp.LT:
            return a_value < arg
        if op == MatcherOp.LE:
            return a_value <= arg
        if op == MatcherOp.GT:
            return a_value > arg
        if op == MatcherOp.GE:
            return a_value >= arg
        if op == MatcherOp.ANYTHING:
            return anything()
        # $include
        items = arg if isinstance(arg, list) else [arg]
        return include(*[self.build_expected(value) for value in items])

    def interpolate(self, value: str) -> str:
        """Replace ``{{env.KEY}}`` from the suite env, then the process env."""
        def replace_env(match: re.Match) -> str:
            var_name = match.group(1)
            if var_name in self.env:
                return str(self.env[var_name])
            return os.environ.get(var_name, match.group(0))

        return self.TEMPLATE_PATTERN.sub(replace_env, value)
