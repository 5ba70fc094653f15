"""Textual rendering of values for failure diffs."""

from __future__ import annotations

from typing import Any

from shouldcheck.compare.base import ComparisonResult, Shape, shape_of
from shouldcheck.compare.equality import is_equal, materialize
from shouldcheck.config import FormatConfig, get_config

EXPECTED_LABEL = "Expected: "
GOT_LABEL = "Got: ".rjust(len(EXPECTED_LABEL))


def format_value(value: Any) -> str:
    """Single-line textual form of a value. Strings are double-quoted."""
    shape = shape_of(value)
    if shape is Shape.STRING:
        if isinstance(value, str):
            return f'"{value}"'
        return repr(value)
    if shape is Shape.SEQUENCE:
        return "[" + ", ".join(format_value(v) for v in value) + "]"
    if shape is Shape.MAPPING:
        items = (f"{format_value(k)}: {format_value(v)}" for k, v in value.items())
        return "{" + ", ".join(items) + "}"
    if shape is Shape.SET:
        return "{" + ", ".join(format_value(v) for v in _ordered(value)) + "}"
    return str(value)


def _ordered(values: Any) -> list[Any]:
    try:
        return sorted(values)
    except TypeError:
        return list(values)


def _element_size(element: Any) -> int | None:
    if shape_of(element) in (Shape.STRING, Shape.SEQUENCE):
        return len(element)
    return None


def is_too_big(value: Any, config: FormatConfig) -> bool:
    """Whether a sequence of sized elements needs block rendering."""
    sizes = [s for s in (_element_size(e) for e in value) if s is not None]
    if not sizes:
        return False
    largest = max(sizes)
    return (
        len(value) > config.max_inline_elements and largest > config.max_element_size
    ) or largest > config.max_single_element_size


def render(prefix: str, value: Any, config: FormatConfig | None = None) -> list[str]:
    """Render ``value`` after ``prefix`` as one line, or as a bracketed block."""
    cfg = config if config is not None else get_config().format
    if shape_of(value) is Shape.SEQUENCE and is_too_big(value, cfg):
        return _render_block(prefix, value, cfg)
    return [prefix + format_value(value)]


def _render_block(prefix: str, value: Any, config: FormatConfig) -> list[str]:
    gutter = " " * config.element_indent
    lines = [prefix + "["]
    for element in value:
        element_lines = [gutter + line for line in render("", element, config)]
        element_lines[-1] += ","
        lines.extend(element_lines)
    lines.append(" " * config.closing_indent + "]")
    return lines


def render_diff(
    value: Any, expected: Any, config: FormatConfig | None = None
) -> list[str]:
    return render(EXPECTED_LABEL, expected, config) + render(GOT_LABEL, value, config)


def compare(
    value: Any,
    expected: Any,
    *,
    strict: bool = False,
    config: FormatConfig | None = None,
) -> ComparisonResult:
    """Compare ``value`` against ``expected`` and render both sides on mismatch."""
    if strict:
        value = materialize(value)
        expected = materialize(expected)
    if is_equal(value, expected, strict=strict):
        return ComparisonResult(equal=True)
    return ComparisonResult(
        equal=False,
        expected_lines=tuple(render(EXPECTED_LABEL, expected, config)),
        actual_lines=tuple(render(GOT_LABEL, value, config)),
    )
