"""Base data structures for the comparison engine."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping, Sequence, Set
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ComparisonResult:
    """Outcome of comparing an actual value against an expected one.

    Attributes:
        equal: Whether the two values compared equal.
        expected_lines: Rendered lines for the expected side, empty when equal.
        actual_lines: Rendered lines for the actual side, empty when equal.
    """

    equal: bool
    expected_lines: tuple[str, ...] = ()
    actual_lines: tuple[str, ...] = ()

    @property
    def lines(self) -> list[str]:
        return [*self.expected_lines, *self.actual_lines]

    def __bool__(self) -> bool:
        return self.equal


class Shape(str, enum.Enum):
    STRING = "string"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SET = "set"
    LAZY = "lazy"
    SCALAR = "scalar"


_STRING_TYPES = (str, bytes, bytearray)


def shape_of(value: Any) -> Shape:
    """Classify a value by the comparison rule that applies to it."""
    if isinstance(value, _STRING_TYPES):
        return Shape.STRING
    if isinstance(value, Mapping):
        return Shape.MAPPING
    if isinstance(value, Sequence):
        return Shape.SEQUENCE
    if isinstance(value, Set):
        return Shape.SET
    if isinstance(value, Iterable):
        return Shape.LAZY
    return Shape.SCALAR


def is_sequence(value: Any) -> bool:
    return shape_of(value) in (Shape.SEQUENCE, Shape.LAZY)
