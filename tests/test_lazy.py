"""Tests for deferred, exactly-once evaluation."""

import threading

import pytest

from shouldcheck.lazy import Lazy, as_lazy, force, lazy


def _counting(result=None, error=None):
    calls = []

    def fn():
        calls.append(1)
        if error is not None:
            raise error
        return result

    return fn, calls


def test_lazy_is_not_evaluated_on_construction():
    fn, calls = _counting(result=1)
    wrapped = lazy(fn)
    assert calls == []
    assert wrapped.evaluated is False


def test_lazy_evaluates_once():
    fn, calls = _counting(result=42)
    wrapped = lazy(fn)
    assert wrapped.get() == 42
    assert wrapped.get() == 42
    assert len(calls) == 1
    assert wrapped.evaluated is True


def test_lazy_memoises_errors():
    err = ValueError("nope")
    fn, calls = _counting(error=err)
    wrapped = lazy(fn)
    outcome = wrapped.outcome()
    assert outcome.raised is True
    assert outcome.error is err
    with pytest.raises(ValueError):
        wrapped.get()
    assert len(calls) == 1


def test_lazy_rejects_non_callables():
    with pytest.raises(TypeError):
        Lazy(3)


def test_force_passes_plain_values_through():
    assert force(5) == 5
    assert force(lazy(lambda: 6)) == 6


def test_as_lazy_wraps_callables_and_keeps_lazies():
    wrapped = lazy(lambda: 1)
    assert as_lazy(wrapped) is wrapped
    assert isinstance(as_lazy(lambda: 1), Lazy)
    with pytest.raises(TypeError):
        as_lazy(1)


def test_shared_lazy_runs_once_across_threads():
    fn, calls = _counting(result="x")
    wrapped = lazy(fn)
    threads = [threading.Thread(target=wrapped.get) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(calls) == 1


def test_materialized_lists_generators_once():
    fn, calls = _counting(result=None)
    wrapped = lazy(lambda: (fn(), (i for i in range(3)))[1])
    assert wrapped.materialized() == [0, 1, 2]
    assert wrapped.materialized() == [0, 1, 2]
    assert len(calls) == 1


def test_force_strict_materializes():
    assert force(lazy(lambda: iter("ab")), strict=True) == ["a", "b"]
    assert force(iter([1, 2]), strict=True) == [1, 2]
    with pytest.raises(KeyError):
        force(lazy(lambda: {}["k"]), strict=True)
