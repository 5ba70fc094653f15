"""Named assertion predicates.

Every predicate returns normally on success and raises ``UnitTestFailure`` on
failure. Values may be passed directly or deferred with ``lazy(...)``; a
deferred value is evaluated exactly once, at check time. The failure location
defaults to the caller's file and line; pass ``file=``/``line=`` to override.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sized
from typing import Any, NoReturn

from shouldcheck.compare import (
    Shape,
    compare,
    format_value,
    is_equal,
    render_diff,
    shape_of,
)
from shouldcheck.failure import ConfigurationError, UnitTestFailure
from shouldcheck.lazy import Lazy, Outcome, as_lazy, force

logger = logging.getLogger(__name__)

_MISSING = object()


def _locate(file: str | None, line: int | None) -> tuple[str, int]:
    # frame 0 is _locate, 1 the public predicate, 2 its caller
    if file is None or line is None:
        frame = sys._getframe(2)
        file = frame.f_code.co_filename if file is None else file
        line = frame.f_lineno if line is None else line
    return file, line


def _fail(
    lines: list[str], file: str, line: int, cause: BaseException | None = None
) -> NoReturn:
    failure = UnitTestFailure(lines, file, line, cause)
    logger.debug(f"Check failed at {file}:{line}: {failure.message}")
    raise failure


def _replayable(value: Any) -> Any:
    # iterating a deferred generator must not drain it for later checks
    if isinstance(value, Lazy):
        return value.materialized()
    return value


def fail(*lines: str, file: str | None = None, line: int | None = None) -> NoReturn:
    """Unconditionally fail with the given message lines."""
    file, line = _locate(file, line)
    _fail(list(lines), file, line)


# --- truth ---


def should_be_true(condition: Any, *, file: str | None = None, line: int | None = None) -> None:
    file, line = _locate(file, line)
    value = force(condition)
    if not value:
        _fail(render_diff(value, True), file, line)


def should_be_false(condition: Any, *, file: str | None = None, line: int | None = None) -> None:
    file, line = _locate(file, line)
    value = force(condition)
    if value:
        _fail(render_diff(value, False), file, line)


# --- equality ---


def should_equal(
    value: Any,
    expected: Any,
    *,
    strict: bool = False,
    file: str | None = None,
    line: int | None = None,
) -> None:
    """Verify that two values are the same.

    ``strict`` consumes lazy iterables (generators, iterators, views) and
    compares them element by element instead of using their own ``==``.
    """
    file, line = _locate(file, line)
    result = compare(
        force(value, strict=strict), force(expected, strict=strict), strict=strict
    )
    if not result.equal:
        _fail(result.lines, file, line)


def should_not_equal(
    value: Any,
    expected: Any,
    *,
    strict: bool = False,
    file: str | None = None,
    line: int | None = None,
) -> None:
    file, line = _locate(file, line)
    value = force(value, strict=strict)
    expected = force(expected, strict=strict)
    if is_equal(value, expected, strict=strict):
        header = (
            f"Value {format_value(value)} is not supposed to be equal to "
            f"{format_value(expected)}"
        )
        _fail([header, *render_diff(value, expected)], file, line)


# --- None ---


def should_be_none(value: Any, *, file: str | None = None, line: int | None = None) -> None:
    file, line = _locate(file, line)
    value = force(value)
    if value is not None:
        _fail([f"Value {format_value(value)} is not None"], file, line)


def should_not_be_none(value: Any, *, file: str | None = None, line: int | None = None) -> None:
    file, line = _locate(file, line)
    if force(value) is None:
        _fail(["Value is None"], file, line)


# --- membership ---


def _contains(container: Any, value: Any) -> tuple[bool, Any]:
    shape = shape_of(container)
    if shape is Shape.STRING and isinstance(container, str) != isinstance(value, str):
        return False, container
    if shape in (Shape.MAPPING, Shape.STRING, Shape.SET):
        return value in container, container
    if shape is Shape.LAZY:
        container = list(container)
    return any(is_equal(item, value) for item in container), container


def should_be_in(
    value: Any, container: Any, *, file: str | None = None, line: int | None = None
) -> None:
    """Verify that the value is in the container (key lookup for mappings)."""
    file, line = _locate(file, line)
    value = force(value)
    found, container = _contains(_replayable(container), value)
    if not found:
        _fail([f"Value {format_value(value)} not in {format_value(container)}"], file, line)


def should_not_be_in(
    value: Any, container: Any, *, file: str | None = None, line: int | None = None
) -> None:
    file, line = _locate(file, line)
    value = force(value)
    found, container = _contains(_replayable(container), value)
    if found:
        _fail([f"Value {format_value(value)} is in {format_value(container)}"], file, line)


# --- exceptions ---


def _check_error_kind(error: Any) -> None:
    if not (isinstance(error, type) and issubclass(error, BaseException)):
        raise ConfigurationError(f"{error!r} is not an exception type")


def _guarded(expr: Any, error: type[BaseException]) -> Outcome:
    """Evaluate ``expr`` once; errors outside ``error`` propagate unchanged."""
    _check_error_kind(error)
    outcome = as_lazy(expr).outcome()
    if outcome.raised and not isinstance(outcome.error, error):
        raise outcome.error
    return outcome


def should_raise(
    expr: Any,
    error: type[BaseException] = Exception,
    *,
    file: str | None = None,
    line: int | None = None,
) -> BaseException:
    """Verify that ``expr`` raises ``error`` or one of its subclasses.

    Returns the caught exception.
    """
    file, line = _locate(file, line)
    outcome = _guarded(expr, error)
    if not outcome.raised:
        _fail(["Expression did not throw"], file, line)
    return outcome.error


def should_raise_exactly(
    expr: Any,
    error: type[BaseException] = Exception,
    *,
    file: str | None = None,
    line: int | None = None,
) -> BaseException:
    """Verify that ``expr`` raises exactly ``error``; subclasses fail."""
    file, line = _locate(file, line)
    outcome = _guarded(expr, error)
    if not outcome.raised:
        _fail(["Expression did not throw"], file, line)
    thrown = type(outcome.error)
    if thrown is not error:
        _fail(
            [
                f"Expression threw wrong type {thrown.__qualname__} "
                f"instead of expected type {error.__qualname__}"
            ],
            file,
            line,
            cause=outcome.error,
        )
    return outcome.error


def should_not_raise(
    expr: Any,
    error: type[BaseException] = Exception,
    *,
    file: str | None = None,
    line: int | None = None,
) -> Any:
    """Verify that ``expr`` raises nothing of kind ``error``. Returns its value."""
    file, line = _locate(file, line)
    outcome = _guarded(expr, error)
    if outcome.raised:
        _fail(["Expression threw"], file, line, cause=outcome.error)
    return outcome.value


# --- ordering ---


def should_be_greater_than(
    t: Any, u: Any, *, file: str | None = None, line: int | None = None
) -> None:
    file, line = _locate(file, line)
    t, u = force(t), force(u)
    if not t > u:
        _fail([f"{format_value(t)} is not > {format_value(u)}"], file, line)


def should_be_smaller_than(
    t: Any, u: Any, *, file: str | None = None, line: int | None = None
) -> None:
    file, line = _locate(file, line)
    t, u = force(t), force(u)
    if not t < u:
        _fail([f"{format_value(t)} is not < {format_value(u)}"], file, line)


# --- emptiness ---


def _is_empty(value: Any) -> bool:
    if isinstance(value, Sized):
        return len(value) == 0
    return next(iter(value), _MISSING) is _MISSING


def _kind_name(value: Any) -> str:
    return "Mapping" if shape_of(value) is Shape.MAPPING else "Sequence"


def should_be_empty(rng: Any, *, file: str | None = None, line: int | None = None) -> None:
    file, line = _locate(file, line)
    rng = _replayable(rng)
    if not _is_empty(rng):
        _fail([f"{_kind_name(rng)} not empty"], file, line)


def should_not_be_empty(rng: Any, *, file: str | None = None, line: int | None = None) -> None:
    file, line = _locate(file, line)
    rng = _replayable(rng)
    if _is_empty(rng):
        _fail([f"{_kind_name(rng)} empty"], file, line)


# --- sets ---


def should_be_same_set_as(
    t: Any, u: Any, *, file: str | None = None, line: int | None = None
) -> None:
    """Verify that ``t`` and ``u`` hold the same elements, in any order."""
    file, line = _locate(file, line)
    should_equal(sorted(_replayable(t)), sorted(_replayable(u)), file=file, line=line)


def should_not_be_same_set_as(
    t: Any, u: Any, *, file: str | None = None, line: int | None = None
) -> None:
    file, line = _locate(file, line)
    should_not_equal(sorted(_replayable(t)), sorted(_replayable(u)), file=file, line=line)
