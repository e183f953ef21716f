"""
Matcher protocol used by the containment engine.

An expected item is treated as a predicate only when its class carries
the explicit matcher tag. Having a ``matches`` method is not enough: plain
domain objects often define one, and null objects answer every attribute
lookup.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TypeVar

MATCHER_TAG = "__containment_matcher__"

T = TypeVar("T", bound=type)


class Matcher(ABC):
    """
    Base class for predicate matchers.

    Subclasses implement ``matches`` and usually ``description``.
    Matchers compare by identity so they can be used as mapping keys.
    """

    __containment_matcher__ = True

    @abstractmethod
    def matches(self, actual: Any) -> bool:
        """Return True when ``actual`` satisfies this matcher."""

    @property
    def description(self) -> str:
        return type(self).__name__

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self.description}>"


def register_matcher(cls: T) -> T:
    """
    Tag a foreign class as a matcher.

    Usable as a class decorator. The class must provide ``matches``.
    """
    if not callable(getattr(cls, "matches", None)):
        raise TypeError(f"{cls.__name__} does not define matches()")
    setattr(cls, MATCHER_TAG, True)
    return cls


def is_matcher(value: Any) -> bool:
    """Check the class-level tag, never the instance."""
    return getattr(type(value), MATCHER_TAG, False) is True


def describe(value: Any) -> str | None:
    """Return a matcher's own description, if it has one."""
    if not is_matcher(value):
        return None
    description = getattr(value, "description", None)
    if callable(description):
        description = description()
    if isinstance(description, str) and description:
        return description
    return None
