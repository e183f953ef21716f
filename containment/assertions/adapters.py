"""
Container adapters.

The actual value is classified once into text, sequence or mapping and
wrapped in an adapter exposing ``contains(item)``. Each adapter owns the
membership rule for its shape.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..errors import ContainmentTypeError
from ..matchers.base import is_matcher
from .equality import values_match
from .models import ContainerKind

logger = logging.getLogger(__name__)

TEXT_TYPES = (str, bytes, bytearray)

_MISSING = object()


class Container:
    """Base adapter: membership testing over one actual value."""

    kind: ContainerKind

    def __init__(self, actual: Any):
        self.actual = actual

    def contains(self, item: Any) -> bool:
        raise NotImplementedError


class TextContainer(Container):
    """Substring containment. Only literal strings can be looked up."""

    kind = ContainerKind.TEXT

    def contains(self, item: Any) -> bool:
        if is_matcher(item):
            raise ContainmentTypeError(
                "Matchers cannot be applied to substrings of a string",
                actual=self.actual,
                expected=item,
            )
        if isinstance(item, Mapping):
            # A mapping is an ordinary literal here, and text holds no mappings.
            return False
        if isinstance(self.actual, str) != isinstance(item, str) or not isinstance(item, TEXT_TYPES):
            raise ContainmentTypeError(
                f"Cannot look for {type(item).__name__} in {type(self.actual).__name__}",
                actual=self.actual,
                expected=item,
            )
        return item in self.actual


class SequenceContainer(Container):
    """Some element equals the item, or satisfies it when it is a matcher."""

    kind = ContainerKind.SEQUENCE

    def __init__(self, actual: Any):
        super().__init__(actual)
        if isinstance(actual, (list, tuple)):
            self.elements = actual
        else:
            # Materialize once so one-shot iterables serve every item.
            self.elements = list(actual)

    def contains(self, item: Any) -> bool:
        return any(values_match(item, element) for element in self.elements)


class MappingContainer(Container):
    """Key membership, or key/value subset membership for mapping items."""

    kind = ContainerKind.MAPPING

    def contains(self, item: Any) -> bool:
        if not is_matcher(item) and isinstance(item, Mapping):
            return all(self._has_entry(key, value) for key, value in item.items())
        return self._has_key(item)

    def _has_key(self, key: Any) -> bool:
        if is_matcher(key):
            return any(key.matches(candidate) for candidate in self.actual)
        try:
            if key in self.actual:
                return True
        except TypeError:
            # Unhashable keys cannot be looked up; compare one by one.
            pass
        return any(values_match(key, candidate) for candidate in self.actual)

    def _has_entry(self, key: Any, expected: Any) -> bool:
        if is_matcher(key):
            return any(
                key.matches(candidate) and values_match(expected, stored)
                for candidate, stored in self.actual.items()
            )
        try:
            stored = self.actual.get(key, _MISSING)
        except TypeError:
            stored = _MISSING
        if stored is _MISSING:
            # Stored None is a present value; only a missing key fails here.
            return False
        return values_match(expected, stored)


def classify(actual: Any) -> ContainerKind:
    """
    Classify the actual value by the capabilities it exposes.

    Raises:
        ContainmentTypeError: If the value is not a container at all
    """
    if isinstance(actual, TEXT_TYPES):
        return ContainerKind.TEXT
    if isinstance(actual, Mapping):
        return ContainerKind.MAPPING
    if isinstance(actual, Iterable):
        return ContainerKind.SEQUENCE
    raise ContainmentTypeError(
        f"Cannot check containment on {type(actual).__name__}",
        actual=actual,
    )


_ADAPTERS: dict[ContainerKind, type[Container]] = {
    ContainerKind.TEXT: TextContainer,
    ContainerKind.SEQUENCE: SequenceContainer,
    ContainerKind.MAPPING: MappingContainer,
}


def adapt(actual: Any) -> Container:
    """Wrap the actual value in the adapter for its kind."""
    kind = classify(actual)
    logger.debug(f"Classified {type(actual).__name__} as {kind.value}")
    return _ADAPTERS[kind](actual)
