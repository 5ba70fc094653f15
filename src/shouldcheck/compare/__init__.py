"""Comparison engine: equality decisions and failure diff rendering."""

from shouldcheck.compare.base import ComparisonResult, Shape, shape_of
from shouldcheck.compare.equality import is_equal, materialize
from shouldcheck.compare.formatting import (
    EXPECTED_LABEL,
    GOT_LABEL,
    compare,
    format_value,
    render,
    render_diff,
)

__all__ = [
    "ComparisonResult",
    "EXPECTED_LABEL",
    "GOT_LABEL",
    "Shape",
    "compare",
    "format_value",
    "is_equal",
    "materialize",
    "render",
    "render_diff",
    "shape_of",
]
