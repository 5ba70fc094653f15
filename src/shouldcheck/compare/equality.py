"""Recursive equality over scalars, strings, mappings, sequences and records."""

from __future__ import annotations

import dataclasses
from typing import Any

from shouldcheck.compare.base import Shape, shape_of
from shouldcheck.failure import ConfigurationError

_MISSING = object()


def materialize(value: Any) -> Any:
    """Turn lazy iterables (at any depth) into lists so they can be re-read."""
    shape = shape_of(value)
    if shape in (Shape.SEQUENCE, Shape.LAZY):
        return [materialize(v) for v in value]
    if shape is Shape.MAPPING:
        return {k: materialize(v) for k, v in value.items()}
    return value


def is_equal(value: Any, expected: Any, *, strict: bool = False) -> bool:
    """Decide whether ``value`` equals ``expected``.

    Strings compare by content, mappings by key set and recursive values,
    sequences element by element in lock-step. Lazy iterables use their own
    ``==`` unless ``strict`` is set, in which case they are consumed and
    compared as sequences. Anything else falls back to ``==``, or to a
    field-by-field comparison for records that do not define ``__eq__``.
    """
    value_shape = shape_of(value)
    expected_shape = shape_of(expected)

    if value_shape is Shape.STRING and expected_shape is Shape.STRING:
        return value == expected

    if value_shape is Shape.MAPPING or expected_shape is Shape.MAPPING:
        if value_shape is not expected_shape:
            return False
        return _mappings_equal(value, expected, strict)

    if strict:
        if value_shape is Shape.LAZY:
            value_shape = Shape.SEQUENCE
        if expected_shape is Shape.LAZY:
            expected_shape = Shape.SEQUENCE

    if value_shape is Shape.SEQUENCE or expected_shape is Shape.SEQUENCE:
        if value_shape is not expected_shape:
            return False
        return _sequences_equal(value, expected, strict)

    return _scalars_equal(value, expected)


def _mappings_equal(value: Any, expected: Any, strict: bool) -> bool:
    if set(value.keys()) != set(expected.keys()):
        return False
    return all(is_equal(value[k], expected[k], strict=strict) for k in expected)


def _sequences_equal(value: Any, expected: Any, strict: bool) -> bool:
    value_iter = iter(value)
    expected_iter = iter(expected)
    while True:
        v = next(value_iter, _MISSING)
        e = next(expected_iter, _MISSING)
        if v is _MISSING or e is _MISSING:
            # equal only if both ran out together
            return v is e
        if not is_equal(v, e, strict=strict):
            return False


def _scalars_equal(value: Any, expected: Any) -> bool:
    require_textual(value)
    require_textual(expected)
    if value is expected:
        return True
    if _is_record(value) and _is_record(expected) and not (
        _defines_eq(type(value)) or _defines_eq(type(expected))
    ):
        if type(value) is not type(expected):
            return False
        return is_equal(fields_of(value), fields_of(expected))
    return bool(value == expected)


def _is_user_type(cls: type) -> bool:
    return cls.__module__ != "builtins"


def _defines_eq(cls: type) -> bool:
    return cls.__eq__ is not object.__eq__


def _is_record(value: Any) -> bool:
    cls = type(value)
    if not _is_user_type(cls):
        return False
    return dataclasses.is_dataclass(value) or hasattr(value, "__dict__") or any(
        getattr(klass, "__slots__", None) for klass in cls.__mro__
    )


def require_textual(value: Any) -> None:
    """Reject user-defined objects that have no textual representation."""
    cls = type(value)
    if not _is_user_type(cls) or isinstance(value, type):
        return
    if cls.__repr__ is object.__repr__ and cls.__str__ is object.__str__:
        raise ConfigurationError(
            f"Cannot compare instances of class {cls.__qualname__} "
            "unless __repr__ or __str__ is overridden"
        )


def fields_of(value: Any) -> dict[str, Any]:
    """Return the comparable fields of a record."""
    if dataclasses.is_dataclass(value):
        return {
            f.name: getattr(value, f.name)
            for f in dataclasses.fields(value)
            if f.compare
        }
    fields: dict[str, Any] = dict(getattr(value, "__dict__", {}))
    if isinstance(value, BaseException):
        # args live on the C struct, not in __dict__
        fields["args"] = value.args
    for klass in type(value).__mro__:
        slots = getattr(klass, "__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in ("__dict__", "__weakref__"):
                continue
            if hasattr(value, slot):
                fields[slot] = getattr(value, slot)
    return fields
