"""Page data and path helpers for rendering documentation sites."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

from .relative import relative_path as _rel_path

#: Directory in the output that holds static files.
STATIC_DIR = "_"


def is_internal(relpath: str) -> bool:
    """Report whether ``relpath`` names, or lies inside, an internal package."""
    return (
        relpath == "internal"
        or relpath.startswith("internal/")
        or relpath.endswith("/internal")
        or "/internal/" in relpath
    )


def make_dict(*args: Any) -> Dict[str, Any]:
    """Turn alternating keys and values into a dictionary."""
    if len(args) % 2:
        raise ValueError("dict: odd number of arguments")
    result: Dict[str, Any] = {}
    for index in range(0, len(args), 2):
        key = args[index]
        if not isinstance(key, str):
            raise TypeError(
                f"dict: [{index}] should be string, got {type(key).__name__}"
            )
        result[key] = args[index + 1]
    return result


def _join(*elems: str) -> str:
    parts = [e for e in elems if e]
    if not parts:
        return ""
    cleaned = posixpath.normpath("/".join(parts))
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _basename(path: str) -> str:
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


@dataclass(frozen=True)
class Breadcrumb:
    """A parent of a page, for navigating back up."""

    text: str
    # Path to the crumb from the root of the output.
    path: str


@dataclass(frozen=True)
class Subpackage:
    """A descendant package, relative to the package it descends from."""

    relative_path: str
    synopsis: str = ""


@dataclass
class FrontmatterData:
    """Values available to front matter templates."""

    path: str = ""
    basename: str = ""
    num_children: int = 0
    package_name: str = ""
    package_synopsis: str = ""

    def name(self) -> str:
        """The package name, or the base name for commands and directories."""
        if self.package_name and self.package_name != "main":
            return self.package_name
        return self.basename


@dataclass
class PackageIndex:
    """A listing of the packages under a directory."""

    path: str = ""
    # Number of levels below the output directory this index is written to.
    sub_dir_depth: int = 0
    num_children: int = 0
    subpackages: List[Subpackage] = field(default_factory=list)
    breadcrumbs: List[Breadcrumb] = field(default_factory=list)

    def basename(self) -> str:
        """The last component of the path, or "" for the top level."""
        if not self.path:
            return ""
        return _basename(self.path)

    def is_internal(self) -> bool:
        """Report whether packages here are internal to some other package."""
        return is_internal(self.path)

    def frontmatter(self) -> FrontmatterData:
        """Front matter values for this listing."""
        return FrontmatterData(
            path=self.path,
            basename=self.basename(),
            num_children=self.num_children,
        )


@dataclass
class RenderContext:
    """Path computations for a page being rendered at ``path``."""

    home: str = ""
    path: str = ""
    sub_dir_depth: int = 0
    internal: bool = False
    pagefind: bool = False
    normalize_relative_path: Optional[Callable[[str], str]] = None

    def normalize(self, p: str) -> str:
        """Apply the configured relative path style to ``p``."""
        if self.normalize_relative_path is not None:
            return self.normalize_relative_path(p)
        return p

    def relative_path(self, p: str) -> str:
        """The path to the package or directory ``p``, in the configured style."""
        return self.normalize(_rel_path(self.path, p))

    def _relative_path_file(self, p: str) -> str:
        return _rel_path(self.path, p)

    def static(self, p: str) -> str:
        """The path to a static asset shared across the whole output."""
        return self._relative_path_file(
            _join(self.home, *[".."] * self.sub_dir_depth, STATIC_DIR, p)
        )

    def site_static(self, p: str) -> str:
        """The path to a static asset of this site."""
        return self._relative_path_file(_join(self.home, STATIC_DIR, p))

    def output_root_relative(self) -> str:
        """The path to the root of the output directory."""
        root = self.home
        if self.sub_dir_depth > 0:
            root = _join(root, "../" * self.sub_dir_depth)
        return self.relative_path(root)

    def site_root_relative(self) -> str:
        """The path to the root of this site."""
        return self.relative_path(self.home)

    @property
    def pagefind_ignore(self) -> str:
        """Attribute text that hides an element from search, if search is on."""
        return " data-pagefind-ignore" if self.pagefind else ""

    def filter_subpackages(self, pkgs: Iterable[Subpackage]) -> List[Subpackage]:
        """Drop internal packages unless internal packages are listed."""
        if self.internal:
            return list(pkgs)
        return [pkg for pkg in pkgs if not is_internal(pkg.relative_path)]