import pytest

from godocgen.pathx import descends


@pytest.mark.parametrize(
    "a, b, want",
    [
        ("foo", "bar", False),
        ("foo", "foobar", False),
        ("foo", "foo/bar", True),
        ("foo/", "foo/bar", True),
        ("foo/", "foobar", False),
    ],
)
def test_descends(a, b, want):
    assert descends(a, b) is want


def test_descends_examples():
    assert descends("a", "a") is True
    assert descends("a", "a/b/c") is True
    assert descends("a/d", "a/b") is False