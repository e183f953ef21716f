"""
Typed data structures for containment check suites.

This module contains the enums and dataclasses that represent
the internal typed structure of a parsed suite.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


# ─────────────────────────────────────────────────────────────────────────────
# Enums
# ─────────────────────────────────────────────────────────────────────────────

class CheckMode(str, Enum):
    """Whether a check asserts inclusion or exclusion."""
    INCLUDE = "include"
    EXCLUDE = "exclude"


class MatcherOp(str, Enum):
    """Matcher specs usable as expected items: ``{$contains: "ar"}``."""
    WITHIN = "$within"
    CONTAINS = "$contains"
    MATCHES = "$matches"
    LT = "$lt"
    LE = "$le"
    GT = "$gt"
    GE = "$ge"
    ANYTHING = "$anything"
    INCLUDE = "$include"


# ─────────────────────────────────────────────────────────────────────────────
# Defaults
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class Defaults:
    """Default settings for check execution."""
    diff: bool = True
    fail_fast: bool = False


# ─────────────────────────────────────────────────────────────────────────────
# Checks
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class Check:
    """A containment check on the value found at ``path``."""
    id: str
    mode: CheckMode = CheckMode.INCLUDE
    path: str = "$"
    expected: list[Any] = field(default_factory=list)  # Literals and built matchers
    raw_expected: list[Any] = field(default_factory=list)  # As written in YAML
    description: str | None = None

    @property
    def negate(self) -> bool:
        return self.mode == CheckMode.EXCLUDE


# ─────────────────────────────────────────────────────────────────────────────
# Suite
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class Suite:
    """Fully parsed and validated suite."""
    version: int
    name: str
    data: Any
    data_file: Path | None = None
    env: dict[str, Any] = field(default_factory=dict)
    defaults: Defaults = field(default_factory=Defaults)
    checks: list[Check] = field(default_factory=list)
