"""Marker kinds and the decorators that attach them to test routines.

A marker is either a bare tag (the marker class itself) or an instance that
carries a payload. Markers are recorded on the routine when it is defined, so
a duplicate marker of one kind is rejected immediately.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from shouldcheck.failure import MarkerConfigurationError

logger = logging.getLogger(__name__)

MARKERS_ATTR = "__test_markers__"
DECLARED_ATTR = "__declared_test_markers__"

F = TypeVar("F", bound=Callable[..., Any])


class Marker:
    """Base class for the built-in marker kinds."""


class DontTest(Marker):
    """The routine must not be run as a test."""


class SingleThreaded(Marker):
    """The routine must run in isolation, never alongside other tests."""


@dataclass(frozen=True)
class ShouldFail(Marker):
    """The routine is expected to fail."""

    reason: str = ""


@dataclass(frozen=True)
class HiddenTest(Marker):
    """The routine is skipped unless explicitly requested."""

    reason: str = ""


@dataclass(frozen=True)
class Name(Marker):
    """Custom display name for the routine."""

    value: str


@dataclass(frozen=True)
class Tags(Marker):
    """Free-form labels used to select groups of routines."""

    values: tuple[str, ...] = ()


def kind_of(marker: Any) -> type:
    """The kind of a marker: the marker itself for bare tags, else its type."""
    return marker if isinstance(marker, type) else type(marker)


def get_markers(obj: Any) -> tuple[Any, ...]:
    """All markers attached to ``obj``, in the order they were attached."""
    return tuple(getattr(obj, MARKERS_ATTR, ()))


def _inherited_markers(obj: Any) -> tuple[Any, ...]:
    if not isinstance(obj, type):
        return ()
    for base in obj.__mro__[1:]:
        if MARKERS_ATTR in vars(base):
            return tuple(vars(base)[MARKERS_ATTR])
    return ()


def attach(*markers: Any) -> Callable[[F], F]:
    """Decorator attaching ``markers`` to a routine or class.

    A class keeps the markers of its bases except for the kinds it declares
    itself. Raises MarkerConfigurationError if a kind is declared twice.
    """

    def decorator(obj: F) -> F:
        declared = list(getattr(obj, "__dict__", {}).get(DECLARED_ATTR, ()))
        for marker in markers:
            kind = kind_of(marker)
            if any(kind_of(m) is kind for m in declared):
                raise MarkerConfigurationError(
                    f"Maximum number of markers is 1 for {kind.__qualname__} "
                    f"on {getattr(obj, '__qualname__', obj)!r}"
                )
            declared.append(marker)
        kinds = {kind_of(m) for m in declared}
        inherited = [m for m in _inherited_markers(obj) if kind_of(m) not in kinds]
        setattr(obj, DECLARED_ATTR, tuple(declared))
        setattr(obj, MARKERS_ATTR, tuple(inherited + declared))
        logger.debug(
            f"Attached {[kind_of(m).__name__ for m in markers]} "
            f"to {getattr(obj, '__qualname__', obj)!r}"
        )
        return obj

    return decorator


dont_test = attach(DontTest)
single_threaded = attach(SingleThreaded)


def should_fail(reason: str = "") -> Callable[[F], F]:
    return attach(ShouldFail(reason))


def hidden_test(reason: str = "") -> Callable[[F], F]:
    return attach(HiddenTest(reason))


def name(value: str) -> Callable[[F], F]:
    return attach(Name(value))


def tags(*values: str) -> Callable[[F], F]:
    return attach(Tags(tuple(values)))


_MARKER_KINDS: dict[str, type] = {
    "dont-test": DontTest,
    "hidden": HiddenTest,
    "name": Name,
    "should-fail": ShouldFail,
    "single-threaded": SingleThreaded,
    "tags": Tags,
}


def get_marker_kind(marker_name: str) -> type:
    kind = _MARKER_KINDS.get(marker_name)
    if kind is None:
        raise ValueError(
            f"Unknown marker: {marker_name!r}. "
            f"Available: {', '.join(sorted(_MARKER_KINDS))}"
        )
    return kind


def marker_names() -> list[str]:
    return sorted(_MARKER_KINDS)
