"""Deferred, exactly-once evaluation of guarded expressions."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable

from shouldcheck.compare.equality import materialize


@dataclass(frozen=True)
class Outcome:
    """Result of evaluating a deferred expression: a value or an error."""

    value: Any = None
    error: BaseException | None = None

    @property
    def raised(self) -> bool:
        return self.error is not None

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.value


class Lazy:
    """Wraps a zero-argument callable and evaluates it at most once.

    The first call to ``outcome()`` runs the callable and memoises either its
    return value or the exception it raised. Later calls replay the memoised
    outcome without running the callable again.
    """

    def __init__(self, fn: Callable[[], Any]) -> None:
        if not callable(fn):
            raise TypeError(f"Lazy expects a callable, got {type(fn).__name__}")
        self._fn = fn
        self._outcome: Outcome | None = None
        self._materialized: Outcome | None = None
        self._lock = threading.Lock()

    @property
    def evaluated(self) -> bool:
        return self._outcome is not None

    def outcome(self) -> Outcome:
        with self._lock:
            if self._outcome is None:
                try:
                    self._outcome = Outcome(value=self._fn())
                except BaseException as e:
                    self._outcome = Outcome(error=e)
            return self._outcome

    def get(self) -> Any:
        """Return the value, re-raising the memoised error if evaluation failed."""
        return self.outcome().unwrap()

    def materialized(self) -> Any:
        """Return the value with lazy iterables turned into lists, computed once.

        Repeated calls return the same materialised value.
        """
        outcome = self.outcome()
        with self._lock:
            if self._materialized is None:
                self._materialized = Outcome(
                    value=materialize(outcome.value), error=outcome.error
                )
            return self._materialized.unwrap()

    def __repr__(self) -> str:
        state = "evaluated" if self.evaluated else "pending"
        return f"Lazy({getattr(self._fn, '__name__', 'expr')}, {state})"


def lazy(fn: Callable[[], Any]) -> Lazy:
    """Defer ``fn`` so a predicate evaluates it exactly once, at check time."""
    return Lazy(fn)


def force(value: Any, *, strict: bool = False) -> Any:
    """Resolve ``value`` if it is a Lazy, otherwise return it unchanged.

    With ``strict`` the result has its lazy iterables turned into lists.
    """
    if isinstance(value, Lazy):
        return value.materialized() if strict else value.get()
    return materialize(value) if strict else value


def as_lazy(expr: Any) -> Lazy:
    if isinstance(expr, Lazy):
        return expr
    if callable(expr):
        return Lazy(expr)
    raise TypeError(
        f"Expected a callable or Lazy expression, got {type(expr).__name__}"
    )
