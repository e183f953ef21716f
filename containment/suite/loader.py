"""
Suite loader for containment check suites.

This module provides the public API for loading and validating
suite files from disk or YAML strings.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .models import Suite
from .parser import SchemaParser
from .validation import SchemaValidator, ValidationResult

logger = logging.getLogger(__name__)


def load_suite(path: str | Path) -> tuple[Suite | None, ValidationResult]:
    """
    Load and validate a suite from a YAML file.

    Args:
        path: Path to the YAML suite file

    Returns:
        Tuple of (Suite or None, ValidationResult)
        If validation fails, Suite will be None.

    Example:
        suite, result = load_suite("checks/users.yaml")
        if not result.is_valid:
            print(result)
            sys.exit(1)
        # Use suite...
    """
    path = Path(path)

    # Check file exists
    if not path.exists():
        result = ValidationResult()
        result.add_error(
            str(path),
            "File not found",
            suggestion="Check the file path is correct"
        )
        return None, result

    # Parse YAML
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error(
            str(path),
            f"Invalid YAML syntax: {e}",
            suggestion="Check YAML formatting (indentation, colons, etc.)"
        )
        return None, result

    logger.debug(f"Loaded suite file {path}")
    return _build_suite(data, str(path), path.parent)


def validate_suite_yaml(
    yaml_string: str,
    base_dir: str | Path | None = None,
) -> tuple[Suite | None, ValidationResult]:
    """
    Validate a suite from a YAML string (useful for testing).

    Args:
        yaml_string: YAML content as a string
        base_dir: Directory that 'data_file' is relative to
            (defaults to the current directory)

    Returns:
        Tuple of (Suite or None, ValidationResult)
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error("yaml", f"Invalid YAML syntax: {e}")
        return None, result

    return _build_suite(data, "yaml", Path(base_dir) if base_dir else Path.cwd())


def load_data_file(path: str | Path) -> Any:
    """
    Load the document a suite checks.

    ``.json`` files are parsed as JSON, ``.yaml``/``.yml`` as YAML.

    Raises:
        ValueError: If the file cannot be parsed
    """
    path = Path(path)
    text = path.read_text()
    if path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}") from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML: {e}") from e


def _build_suite(
    data: Any,
    source: str,
    base_dir: Path,
) -> tuple[Suite | None, ValidationResult]:
    if not isinstance(data, dict):
        result = ValidationResult()
        result.add_error(
            source,
            "File must contain a YAML object (not a list or scalar)",
            value=type(data).__name__
        )
        return None, result

    # Validate schema
    validator = SchemaValidator(data, base_dir=base_dir)
    result = validator.validate()

    if not result.is_valid:
        return None, result

    payload = None
    data_file = None
    if "data_file" in data:
        data_file = base_dir / data["data_file"]
        try:
            payload = load_data_file(data_file)
        except (OSError, ValueError) as e:
            result.add_error(
                "data_file",
                str(e),
                value=data["data_file"]
            )
            return None, result

    # Parse to typed structure
    parser = SchemaParser(data, payload=payload, data_file=data_file)
    suite = parser.parse()
    logger.debug(f"Parsed suite '{suite.name}' with {len(suite.checks)} check(s)")

    return suite, result
