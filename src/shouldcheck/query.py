"""Marker queries used by test collectors to plan which routines to run."""

from __future__ import annotations

import importlib
import logging
from types import ModuleType
from typing import Any

from shouldcheck.failure import ConfigurationError, MarkerConfigurationError
from shouldcheck.markers import get_markers, kind_of

logger = logging.getLogger(__name__)


def resolve_scope(scope: ModuleType | type | str) -> Any:
    """Return the module or class named by ``scope``, importing it if needed."""
    if isinstance(scope, str):
        try:
            return importlib.import_module(scope)
        except ImportError as e:
            raise ConfigurationError(f"Cannot import module {scope!r}: {e}") from e
    return scope


def resolve_member(scope: ModuleType | type | str, member: str) -> Any:
    """Look up a (possibly dotted) member such as ``"TestCase.test_x"``."""
    obj = resolve_scope(scope)
    for part in member.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ConfigurationError(
                f"{_scope_name(scope)} has no member {member!r}"
            ) from e
    return obj


def _scope_name(scope: Any) -> str:
    if isinstance(scope, str):
        return scope
    return getattr(scope, "__name__", repr(scope))


def find_markers(scope: ModuleType | type | str, member: str, kind: type) -> list[Any]:
    """All markers of ``kind`` attached to ``member``.

    Raises MarkerConfigurationError if more than one is attached.
    """
    target = resolve_member(scope, member)
    matches = [m for m in get_markers(target) if kind_of(m) is kind]
    if len(matches) > 1:
        raise MarkerConfigurationError(
            f"Maximum number of markers is 1 for {kind.__qualname__}, "
            f"found {len(matches)} on {_scope_name(scope)}.{member}"
        )
    logger.debug(
        f"{_scope_name(scope)}.{member}: {len(matches)} marker(s) of {kind.__qualname__}"
    )
    return matches


def has_marker(scope: ModuleType | type | str, member: str, kind: type) -> bool:
    """Whether exactly one marker of ``kind`` is attached to ``member``."""
    return len(find_markers(scope, member, kind)) == 1


def get_marker(scope: ModuleType | type | str, member: str, kind: type) -> Any | None:
    """The marker of ``kind`` attached to ``member`` (instance or bare class), or None."""
    matches = find_markers(scope, member, kind)
    return matches[0] if matches else None
