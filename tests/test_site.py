import pytest

from godocgen.site import (
    Breadcrumb,
    FrontmatterData,
    PackageIndex,
    RenderContext,
    Subpackage,
    is_internal,
    make_dict,
)


@pytest.mark.parametrize(
    "give, want",
    [
        (PackageIndex(path="example.com/foo/bar"), "bar"),
        (PackageIndex(), ""),
    ],
)
def test_basename(give, want):
    assert give.basename() == want


@pytest.mark.parametrize(
    "data, want",
    [
        (FrontmatterData(), ""),
        (FrontmatterData(package_name="foo"), "foo"),
        (FrontmatterData(package_name="main", basename="bar"), "bar"),
        (FrontmatterData(basename="baz"), "baz"),
    ],
)
def test_frontmatter_data_name(data, want):
    assert data.name() == want


def test_package_index_frontmatter():
    idx = PackageIndex(path="example.com/foo/bar", num_children=6)
    fm = idx.frontmatter()
    assert (fm.path, fm.basename, fm.num_children) == ("example.com/foo/bar", "bar", 6)


@pytest.mark.parametrize(
    "give, want",
    [
        ((), {}),
        (("foo", "bar"), {"foo": "bar"}),
        (("foo", "bar", "baz", "qux"), {"foo": "bar", "baz": "qux"}),
    ],
)
def test_make_dict(give, want):
    assert make_dict(*give) == want


def test_make_dict_odd():
    with pytest.raises(ValueError, match="odd number of arguments"):
        make_dict("foo", "bar", "baz")


def test_make_dict_bad_key():
    with pytest.raises(TypeError, match=r"\[0\] should be string"):
        make_dict(42, "foo")


@pytest.mark.parametrize(
    "give, want",
    [
        ("internal", True),
        ("internal/foo", True),
        ("foo/internal", True),
        ("foo/internal/bar", True),
        ("internalfoo", False),
        ("foo/internalfoo", False),
        ("internalfoo/bar", False),
    ],
)
def test_is_internal(give, want):
    assert is_internal(give) is want


def test_package_index_is_internal():
    assert PackageIndex(path="foo/internal/bar").is_internal() is True
    assert PackageIndex(path="foo/bar").is_internal() is False


SUBPKGS = [
    Subpackage("internal/foo", "Does things with foo"),
    Subpackage("bar", "Public package bar"),
]


def test_filter_subpackages_internal():
    ctx = RenderContext(internal=True)
    assert ctx.filter_subpackages(SUBPKGS) == SUBPKGS


def test_filter_subpackages_no_internal():
    ctx = RenderContext(internal=False)
    assert ctx.filter_subpackages(SUBPKGS) == [Subpackage("bar", "Public package bar")]


def test_filter_subpackages_all_internal():
    ctx = RenderContext()
    pkgs = [Subpackage("internal/foo"), Subpackage("internal/bar"), Subpackage("internal/baz")]
    assert ctx.filter_subpackages(pkgs) == []


def test_breadcrumb_paths():
    crumbs = [
        Breadcrumb("example.com", "example.com"),
        Breadcrumb("foo", "example.com/foo"),
        Breadcrumb("bar", "example.com/foo/bar"),
    ]
    ctx = RenderContext(path="example.com/foo/bar/baz")
    assert [ctx.relative_path(c.path) for c in crumbs] == ["../../..", "../..", ".."]


@pytest.mark.parametrize(
    "home, depth, want",
    [
        ("", 0, "../../../.."),
        ("example.com/foo/bar", 0, ".."),
        ("", 2, "../../../../../.."),
        ("example.com/foo/bar", 2, "../../.."),
    ],
)
def test_output_root_relative(home, depth, want):
    ctx = RenderContext(home=home, path="example.com/foo/bar/baz", sub_dir_depth=depth)
    assert ctx.output_root_relative() == want


def test_site_root_relative_ignores_depth():
    ctx = RenderContext(home="example.com/foo/bar", path="example.com/foo/bar/baz", sub_dir_depth=2)
    assert ctx.site_root_relative() == ".."


def test_static_at_root():
    ctx = RenderContext()
    assert ctx.static("css/main.css") == "_/css/main.css"
    assert ctx.site_static("css/main.css") == "_/css/main.css"


def test_static_with_depth_is_shared():
    ctx = RenderContext(sub_dir_depth=2)
    assert ctx.site_static("css/main.css") == "_/css/main.css"
    assert ctx.static("css/main.css").endswith("/_/css/main.css")
    assert ctx.static("css/main.css") != ctx.site_static("css/main.css")


def test_static_is_not_normalized():
    ctx = RenderContext(normalize_relative_path=lambda s: s.rstrip("/") + "/")
    assert ctx.static("css/main.css") == "_/css/main.css"
    assert ctx.relative_path("bar") == "bar/"


def test_pagefind_ignore():
    assert RenderContext(pagefind=True).pagefind_ignore == " data-pagefind-ignore"
    assert RenderContext().pagefind_ignore == ""


def test_relative_path_mismatch_raises():
    ctx = RenderContext(path="foo")
    with pytest.raises(ValueError):
        ctx.relative_path("/bar")