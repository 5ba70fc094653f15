"""Routines decorated with markers, queried by the marker tests."""

from shouldcheck.markers import (
    HiddenTest,
    ShouldFail,
    attach,
    dont_test,
    name,
    single_threaded,
    tags,
)


@attach(HiddenTest("not ready"), ShouldFail("known bug"))
@single_threaded
def test_attrs():
    pass


@name("pretty name")
@tags("slow", "db")
def test_named():
    pass


def test_plain():
    pass


@attach("slow")
def test_with_string_marker():
    pass


@dont_test
class TestCase:
    @single_threaded
    def test_method(self):
        pass

    def test_unmarked(self):
        pass


def test_doubled():
    pass


# bypasses attach() to simulate a table populated by other tooling
test_doubled.__test_markers__ = (ShouldFail("one"), ShouldFail("two"))
