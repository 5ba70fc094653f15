"""Tests for marker queries."""

import sys

import pytest

import module_with_markers
from shouldcheck.failure import ConfigurationError, MarkerConfigurationError
from shouldcheck.markers import (
    DontTest,
    HiddenTest,
    Name,
    ShouldFail,
    SingleThreaded,
    Tags,
    single_threaded,
)
from shouldcheck.query import find_markers, get_marker, has_marker, resolve_member


# --- has_marker ---


def test_value_markers():
    assert has_marker(module_with_markers, "test_attrs", HiddenTest)
    assert has_marker(module_with_markers, "test_attrs", ShouldFail)
    assert not has_marker(module_with_markers, "test_attrs", Name)


def test_bare_tag_markers():
    assert has_marker(module_with_markers, "test_attrs", SingleThreaded)
    assert not has_marker(module_with_markers, "test_attrs", DontTest)


def test_scope_by_dotted_module_name():
    assert has_marker("module_with_markers", "test_named", Name)
    assert has_marker("module_with_markers", "test_named", Tags)


def test_plain_routine_has_no_markers():
    for kind in (DontTest, HiddenTest, Name, ShouldFail, SingleThreaded, Tags):
        assert not has_marker(module_with_markers, "test_plain", kind)


def test_arbitrary_values_match_by_type():
    assert has_marker(module_with_markers, "test_with_string_marker", str)
    assert not has_marker(module_with_markers, "test_with_string_marker", int)


def test_dotted_members_and_class_markers():
    assert has_marker(module_with_markers, "TestCase", DontTest)
    assert has_marker(module_with_markers, "TestCase.test_method", SingleThreaded)
    assert not has_marker(module_with_markers, "TestCase.test_unmarked", SingleThreaded)


def test_class_scope():
    assert has_marker(module_with_markers.TestCase, "test_method", SingleThreaded)


def test_local_module_scope():
    assert has_marker(sys.modules[__name__], "_locally_marked", SingleThreaded)


def test_ambiguous_markers_are_a_configuration_error():
    with pytest.raises(MarkerConfigurationError, match="Maximum number of markers is 1"):
        has_marker(module_with_markers, "test_doubled", ShouldFail)


def test_query_is_repeatable():
    results = {has_marker(module_with_markers, "test_attrs", ShouldFail) for _ in range(3)}
    assert results == {True}


# --- get_marker ---


def test_get_marker_returns_payload():
    marker = get_marker(module_with_markers, "test_attrs", ShouldFail)
    assert marker == ShouldFail("known bug")
    assert marker.reason == "known bug"
    assert get_marker(module_with_markers, "test_named", Name).value == "pretty name"
    assert get_marker(module_with_markers, "test_named", Tags).values == ("slow", "db")


def test_get_marker_returns_bare_tag():
    assert get_marker(module_with_markers, "test_attrs", SingleThreaded) is SingleThreaded


def test_get_marker_missing_is_none():
    assert get_marker(module_with_markers, "test_plain", ShouldFail) is None


def test_find_markers_lists_matches():
    assert find_markers(module_with_markers, "test_attrs", HiddenTest) == [
        HiddenTest("not ready")
    ]


# --- resolution errors ---


def test_missing_member_is_a_configuration_error():
    with pytest.raises(ConfigurationError, match="no member"):
        has_marker(module_with_markers, "test_nope", ShouldFail)


def test_missing_module_is_a_configuration_error():
    with pytest.raises(ConfigurationError, match="Cannot import"):
        resolve_member("no_such_module_here", "x")


@single_threaded
def _locally_marked():
    pass
