"""Tests for attaching markers to routines."""

import functools

import pytest

from shouldcheck.failure import MarkerConfigurationError
from shouldcheck.markers import (
    DontTest,
    HiddenTest,
    Name,
    ShouldFail,
    SingleThreaded,
    Tags,
    attach,
    dont_test,
    get_marker_kind,
    get_markers,
    hidden_test,
    kind_of,
    marker_names,
    name,
    should_fail,
    single_threaded,
    tags,
)


def test_kind_of_bare_tag_is_the_tag():
    assert kind_of(SingleThreaded) is SingleThreaded


def test_kind_of_payload_marker_is_its_type():
    assert kind_of(ShouldFail("x")) is ShouldFail
    assert kind_of("slow") is str


def test_decorators_record_markers_in_order():
    @should_fail("flaky")
    @single_threaded
    def test_x():
        pass

    assert get_markers(test_x) == (SingleThreaded, ShouldFail("flaky"))


def test_convenience_decorators():
    @dont_test
    @hidden_test("later")
    @name("nice")
    @tags("a", "b")
    def test_x():
        pass

    assert get_markers(test_x) == (
        Tags(("a", "b")),
        Name("nice"),
        HiddenTest("later"),
        DontTest,
    )


def test_unmarked_routine_has_no_markers():
    def test_x():
        pass

    assert get_markers(test_x) == ()


def test_duplicate_kind_rejected_at_definition():
    with pytest.raises(MarkerConfigurationError, match="ShouldFail"):

        @should_fail("a")
        @should_fail("b")
        def test_x():
            pass


def test_duplicate_bare_tag_rejected_in_one_attach():
    with pytest.raises(MarkerConfigurationError):
        attach(SingleThreaded, SingleThreaded)(lambda: None)


def test_bare_and_payload_forms_of_one_kind_conflict():
    with pytest.raises(MarkerConfigurationError):
        attach(ShouldFail, ShouldFail("why"))(lambda: None)


def test_markers_survive_functools_wraps():
    @single_threaded
    def test_x():
        pass

    @functools.wraps(test_x)
    def wrapper():
        return test_x()

    assert get_markers(wrapper) == (SingleThreaded,)


def test_subclass_may_redeclare_parent_marker():
    @should_fail("base")
    class Base:
        pass

    @should_fail("child")
    class Child(Base):
        pass

    assert get_markers(Child) == (ShouldFail("child"),)
    assert get_markers(Base) == (ShouldFail("base"),)


def test_subclass_keeps_parent_markers_it_does_not_redeclare():
    @dont_test
    @should_fail("base")
    class Base:
        pass

    @single_threaded
    @should_fail("child")
    class Child(Base):
        pass

    assert get_markers(Child) == (DontTest, ShouldFail("child"), SingleThreaded)
    assert get_markers(Base) == (ShouldFail("base"), DontTest)


def test_undecorated_subclass_sees_parent_markers():
    @dont_test
    class Base:
        pass

    class Child(Base):
        pass

    assert get_markers(Child) == (DontTest,)


def test_get_marker_kind():
    assert get_marker_kind("should-fail") is ShouldFail
    assert get_marker_kind("single-threaded") is SingleThreaded
    assert "hidden" in marker_names()
    with pytest.raises(ValueError, match="Unknown marker"):
        get_marker_kind("bogus")
