"""Assertion predicates with readable diffs, and test marker queries."""

from shouldcheck.compare import ComparisonResult, compare, format_value, is_equal, render
from shouldcheck.failure import (
    ConfigurationError,
    MarkerConfigurationError,
    UnitTestFailure,
)
from shouldcheck.lazy import Lazy, lazy
from shouldcheck.markers import (
    DontTest,
    HiddenTest,
    Marker,
    Name,
    ShouldFail,
    SingleThreaded,
    Tags,
    attach,
    dont_test,
    get_markers,
    hidden_test,
    name,
    should_fail,
    single_threaded,
    tags,
)
from shouldcheck.query import get_marker, has_marker
from shouldcheck.should import (
    fail,
    should_be_empty,
    should_be_false,
    should_be_greater_than,
    should_be_in,
    should_be_none,
    should_be_same_set_as,
    should_be_smaller_than,
    should_be_true,
    should_equal,
    should_not_be_empty,
    should_not_be_in,
    should_not_be_none,
    should_not_be_same_set_as,
    should_not_equal,
    should_not_raise,
    should_raise,
    should_raise_exactly,
)

__all__ = [
    "ComparisonResult",
    "ConfigurationError",
    "DontTest",
    "HiddenTest",
    "Lazy",
    "Marker",
    "MarkerConfigurationError",
    "Name",
    "ShouldFail",
    "SingleThreaded",
    "Tags",
    "UnitTestFailure",
    "attach",
    "compare",
    "dont_test",
    "fail",
    "format_value",
    "get_marker",
    "get_markers",
    "has_marker",
    "hidden_test",
    "is_equal",
    "lazy",
    "name",
    "render",
    "should_be_empty",
    "should_be_false",
    "should_be_greater_than",
    "should_be_in",
    "should_be_none",
    "should_be_same_set_as",
    "should_be_smaller_than",
    "should_be_true",
    "should_equal",
    "should_fail",
    "should_not_be_empty",
    "should_not_be_in",
    "should_not_be_none",
    "should_not_be_same_set_as",
    "should_not_equal",
    "should_not_raise",
    "should_raise",
    "should_raise_exactly",
    "single_threaded",
    "tags",
]
