"""
Schema validation for containment check suites.

This module contains the validation logic that checks raw parsed YAML
against the suite schema and reports errors with helpful messages.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .models import CheckMode, MatcherOp


# ─────────────────────────────────────────────────────────────────────────────
# Validation Result Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ValidationError:
    """Represents a single validation error with context."""
    path: str  # e.g., "checks[0].include[1].$within"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        parts = [f"❌ {self.path}: {self.message}"]
        if self.value is not None:
            parts.append(f"   Got: {repr(self.value)}")
        if self.suggestion:
            parts.append(f"   💡 {self.suggestion}")
        return "\n".join(parts)


@dataclass
class ValidationResult:
    """Result of schema validation."""
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None
    ) -> None:
        self.errors.append(ValidationError(path, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            return "✅ Schema validation passed"
        lines = [f"Schema validation failed with {len(self.errors)} error(s):\n"]
        lines.extend(str(e) for e in self.errors)
        return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────────────────
# Schema Validator
# ─────────────────────────────────────────────────────────────────────────────

class SchemaValidator:
    """Validates raw parsed YAML against the suite schema."""

    REQUIRED_TOP_LEVEL = {"version", "name", "checks"}
    OPTIONAL_TOP_LEVEL = {"env", "defaults", "data", "data_file"}
    CHECK_FIELDS = {"id", "path", "include", "exclude", "description"}
    VALID_MODES = {m.value for m in CheckMode}
    VALID_MATCHER_OPS = {op.value for op in MatcherOp}
    DATA_FILE_SUFFIXES = {".json", ".yaml", ".yml"}

    def __init__(self, data: dict[str, Any], base_dir: Path | None = None):
        self.data = data
        self.base_dir = base_dir
        self.result = ValidationResult()
        self.check_ids: set[str] = set()

    def validate(self) -> ValidationResult:
        """Run all validation checks and return result."""
        self._validate_top_level()
        if not self.result.is_valid:
            return self.result

        self._validate_version()
        self._validate_name()
        self._validate_data()
        self._validate_env()
        self._validate_defaults()
        self._validate_checks()

        return self.result

    def _validate_top_level(self) -> None:
        """Check required and unknown top-level keys."""
        keys = set(self.data.keys())
        missing = self.REQUIRED_TOP_LEVEL - keys
        unknown = keys - self.REQUIRED_TOP_LEVEL - self.OPTIONAL_TOP_LEVEL

        for key in sorted(missing):
            self.result.add_error(
                key,
                f"Required field '{key}' is missing",
                suggestion=f"Add '{key}:' to your suite file"
            )

        for key in sorted(unknown):
            self.result.add_error(
                key,
                f"Unknown top-level field '{key}'",
                suggestion=f"Valid fields are: {', '.join(sorted(self.REQUIRED_TOP_LEVEL | self.OPTIONAL_TOP_LEVEL))}"
            )

    def _validate_version(self) -> None:
        version = self.data.get("version")
        if not isinstance(version, int) or isinstance(version, bool):
            self.result.add_error(
                "version",
                "Must be an integer",
                value=version,
                suggestion="Use 'version: 1'"
            )
        elif version < 1:
            self.result.add_error(
                "version",
                "Must be >= 1",
                value=version
            )

    def _validate_name(self) -> None:
        name = self.data.get("name")
        if not isinstance(name, str):
            self.result.add_error(
                "name",
                "Must be a string",
                value=name
            )
        elif not name.strip():
            self.result.add_error(
                "name",
                "Cannot be empty",
                suggestion="Provide a descriptive name for your suite"
            )

    def _validate_data(self) -> None:
        has_data = "data" in self.data
        has_file = "data_file" in self.data

        if has_data and has_file:
            self.result.add_error(
                "data_file",
                "Cannot be combined with 'data'",
                suggestion="Use either inline 'data:' or 'data_file:', not both"
            )
            return

        if not has_data and not has_file:
            self.result.add_error(
                "data",
                "Suite has no data to check",
                suggestion="Add inline 'data:' or 'data_file: path/to/payload.json'"
            )
            return

        if has_file:
            data_file = self.data["data_file"]
            if not isinstance(data_file, str) or not data_file.strip():
                self.result.add_error(
                    "data_file",
                    "Must be a non-empty string (file path)",
                    value=data_file
                )
                return

            suffix = Path(data_file).suffix.lower()
            if suffix not in self.DATA_FILE_SUFFIXES:
                self.result.add_error(
                    "data_file",
                    "Unsupported file type",
                    value=data_file,
                    suggestion=f"Supported types: {', '.join(sorted(self.DATA_FILE_SUFFIXES))}"
                )
                return

            if self.base_dir is not None and not (self.base_dir / data_file).exists():
                self.result.add_error(
                    "data_file",
                    "File not found",
                    value=data_file,
                    suggestion="Paths are resolved relative to the suite file"
                )

    def _validate_env(self) -> None:
        env = self.data.get("env")
        if env is None:
            return
        if not isinstance(env, dict):
            self.result.add_error(
                "env",
                "Must be an object (key-value pairs)",
                value=env
            )

    def _validate_defaults(self) -> None:
        defaults = self.data.get("defaults")
        if defaults is None:
            return
        if not isinstance(defaults, dict):
            self.result.add_error(
                "defaults",
                "Must be an object",
                value=defaults
            )
            return

        for key in ("diff", "fail_fast"):
            value = defaults.get(key)
            if value is not None and not isinstance(value, bool):
                self.result.add_error(
                    f"defaults.{key}",
                    "Must be a boolean",
                    value=value,
                    suggestion=f"Use '{key}: true' or '{key}: false'"
                )

        unknown = set(defaults.keys()) - {"diff", "fail_fast"}
        for key in sorted(unknown):
            self.result.add_error(
                f"defaults.{key}",
                "Unknown default",
                suggestion="Valid defaults: diff, fail_fast"
            )

    def _validate_checks(self) -> None:
        checks = self.data.get("checks")
        if not isinstance(checks, list):
            self.result.add_error(
                "checks",
                "Must be a list",
                value=checks
            )
            return

        if len(checks) == 0:
            self.result.add_error(
                "checks",
                "Must contain at least one check",
                suggestion="Add at least one check with 'include:' or 'exclude:'"
            )
            return

        for i, check in enumerate(checks):
            self._validate_check(i, check)

    def _validate_check(self, index: int, check: Any) -> None:
        path = f"checks[{index}]"

        if not isinstance(check, dict):
            self.result.add_error(
                path,
                "Check must be an object",
                value=check
            )
            return

        check_id = check.get("id")
        if not check_id:
            self.result.add_error(
                f"{path}.id",
                "Check must have an 'id' field",
                suggestion="Add a unique identifier like 'id: has_admin'"
            )
        elif not isinstance(check_id, str):
            self.result.add_error(
                f"{path}.id",
                "Check id must be a string",
                value=check_id
            )
        elif check_id in self.check_ids:
            self.result.add_error(
                f"{path}.id",
                "Duplicate check id",
                value=check_id,
                suggestion="Each check must have a unique id"
            )
        else:
            self.check_ids.add(check_id)

        for key in sorted(set(check.keys()) - self.CHECK_FIELDS):
            self.result.add_error(
                f"{path}.{key}",
                "Unknown check field",
                suggestion=f"Valid fields: {', '.join(sorted(self.CHECK_FIELDS))}"
            )

        json_path = check.get("path")
        if json_path is not None and not isinstance(json_path, str):
            self.result.add_error(
                f"{path}.path",
                "Path must be a string (JSONPath expression)",
                value=json_path
            )

        description = check.get("description")
        if description is not None and not isinstance(description, str):
            self.result.add_error(
                f"{path}.description",
                "Must be a string",
                value=description
            )

        modes = [mode for mode in sorted(self.VALID_MODES) if mode in check]
        if len(modes) != 1:
            self.result.add_error(
                path,
                "Check requires exactly one of 'include' or 'exclude'",
                value=modes or None,
                suggestion="Use 'include: [...]' to require items or 'exclude: [...]' to forbid them"
            )
            return

        mode = modes[0]
        items = check[mode]
        if isinstance(items, list):
            if not items:
                self.result.add_error(
                    f"{path}.{mode}",
                    "Must list at least one expected item"
                )
            for i, item in enumerate(items):
                self._validate_expected(f"{path}.{mode}[{i}]", item)
        else:
            self._validate_expected(f"{path}.{mode}", items)

    def _validate_expected(self, path: str, item: Any) -> None:
        """Validate an expected item, recursing into literals and matcher specs."""
        if isinstance(item, list):
            for i, value in enumerate(item):
                self._validate_expected(f"{path}[{i}]", value)
            return

        if not isinstance(item, dict):
            return

        op_keys = [k for k in item if isinstance(k, str) and k.startswith("$")]
        if not op_keys:
            for key, value in item.items():
                self._validate_expected(f"{path}.{key}", value)
            return

        if len(item) != 1:
            self.result.add_error(
                path,
                "Matcher spec must have exactly one key",
                value=item,
                suggestion="Write '{$contains: \"ar\"}' on its own, or nest it as a value"
            )
            return

        op = op_keys[0]
        self._validate_matcher(f"{path}.{op}", op, item[op])

    def _validate_matcher(self, path: str, op: str, arg: Any) -> None:
        if op not in self.VALID_MATCHER_OPS:
            self.result.add_error(
                path,
                "Unknown matcher",
                value=op,
                suggestion=f"Valid matchers: {', '.join(sorted(self.VALID_MATCHER_OPS))}"
            )
            return

        if op == MatcherOp.WITHIN.value:
            if not isinstance(arg, dict):
                self.result.add_error(
                    path,
                    "Must be an object with 'delta' and 'of'",
                    value=arg,
                    suggestion="Use '$within: {delta: 5, of: 24}'"
                )
                return
            for key in ("delta", "of"):
                value = arg.get(key)
                if not _is_number(value):
                    self.result.add_error(
                        f"{path}.{key}",
                        "Must be a number",
                        value=value
                    )

        elif op in (MatcherOp.CONTAINS.value, MatcherOp.MATCHES.value):
            if not isinstance(arg, str):
                self.result.add_error(
                    path,
                    "Must be a string",
                    value=arg
                )
            elif op == MatcherOp.MATCHES.value:
                try:
                    re.compile(arg)
                except re.error as e:
                    self.result.add_error(
                        path,
                        f"Invalid regular expression: {e}",
                        value=arg
                    )

        elif op in (MatcherOp.LT.value, MatcherOp.LE.value, MatcherOp.GT.value, MatcherOp.GE.value):
            if not (_is_number(arg) or isinstance(arg, str)):
                self.result.add_error(
                    path,
                    "Must be a number or string",
                    value=arg
                )

        elif op == MatcherOp.INCLUDE.value:
            if isinstance(arg, list):
                if not arg:
                    self.result.add_error(
                        path,
                        "Must list at least one expected item"
                    )
                for i, value in enumerate(arg):
                    self._validate_expected(f"{path}[{i}]", value)
            else:
                self._validate_expected(path, arg)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
