import os

import pytest

from godocgen.relative import relative_filepath, relative_path


@pytest.mark.parametrize(
    "src, dst, want",
    [
        ("foo/bar", "foo/bar/baz/qux", "baz/qux"),
        ("foo/bar/baz/qux", "foo/bar/baz/quux", "../quux"),
        ("foo/bar/baz/qux", "foo/bar", "../.."),
        ("foo/bar/baz/qux/quux", "foo/a/b/c/d/e", "../../../../a/b/c/d/e"),
        ("/foo/bar/baz", "/a/b/c", "../../../a/b/c"),
        ("foo/bar/", "foo/baz/qux", "../baz/qux"),
        ("foo/bar/", "foo/baz/qux/", "../baz/qux/"),
        ("foo/bar/baz", "", "../../.."),
    ],
    ids=[
        "child",
        "sibling",
        "parent",
        "cousin",
        "absolute",
        "trailing slash src",
        "trailing slash both",
        "root",
    ],
)
def test_relative_path(src, dst, want):
    assert relative_path(src, dst) == want


@pytest.mark.parametrize(
    "src, dst, want",
    [
        (
            os.path.join("foo", "bar"),
            os.path.join("foo", "bar", "baz", "qux"),
            os.path.join("baz", "qux"),
        ),
        (
            os.path.join("foo", "bar", "baz", "qux", "quux"),
            os.path.join("foo", "a", "b", "c", "d", "e"),
            os.path.join("..", "..", "..", "..", "a", "b", "c", "d", "e"),
        ),
    ],
    ids=["child", "cousin"],
)
def test_relative_filepath(src, dst, want):
    assert relative_filepath(src, dst) == want


def test_absolute_relative_mismatch():
    with pytest.raises(ValueError, match="both must be absolute"):
        relative_path("/foo", "bar")
    with pytest.raises(ValueError, match="both must be absolute"):
        relative_path("foo", "/bar")