"""Links from documentation comments to the pages that document their targets."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from .pathtree import PathTree
from .relative import relative_path

DEFAULT_DOC_SITE = "https://pkg.go.dev/"

_log = logging.getLogger(__name__)

_FIELD = re.compile(r"\.([A-Za-z_][A-Za-z0-9_]*)")
_TRIM_LEFT = re.compile(r"-\s")
_TRIM_RIGHT = re.compile(r"\s-$")


class TemplateError(ValueError):
    """A link template could not be parsed or executed."""


@dataclass(frozen=True)
class _Field:
    name: str


def _parse(source: str, name: str) -> List[Union[str, _Field]]:
    parts: List[Union[str, _Field]] = []
    pos = 0
    trim_next = False
    while True:
        start = source.find("{{", pos)
        text = source[pos:] if start < 0 else source[pos:start]
        if trim_next:
            text = text.lstrip()
        if start < 0:
            if text:
                parts.append(text)
            return parts

        end = source.find("}}", start + 2)
        if end < 0:
            raise TemplateError(f"template: {name}: unclosed action")
        inner = source[start + 2 : end]
        if _TRIM_LEFT.match(inner):
            text = text.rstrip()
            inner = inner[1:]
        trim_next = bool(_TRIM_RIGHT.search(inner))
        if trim_next:
            inner = inner[:-1]
        if text:
            parts.append(text)

        inner = inner.strip()
        if inner.startswith("/*"):
            if not inner.endswith("*/") or len(inner) < 4:
                raise TemplateError(f"template: {name}: unclosed comment")
        elif not inner:
            raise TemplateError(f"template: {name}: missing value for command")
        else:
            match = _FIELD.fullmatch(inner)
            if match is None:
                raise TemplateError(f"template: {name}: unexpected {inner!r} in command")
            parts.append(_Field(match.group(1)))
        pos = end + 2


class LinkTemplate:
    """A URL template for package documentation.

    Actions of the form ``{{.ImportPath}}`` are replaced with the import
    path of the package; ``{{- ... -}}`` trims surrounding whitespace and
    ``{{/* ... */}}`` is a comment.
    """

    def __init__(self, source: str, name: str = "") -> None:
        self.source = source
        self.name = name
        self._parts = _parse(source, name)

    def render(self, import_path: str) -> str:
        """Execute the template for the package at ``import_path``."""
        data = {"ImportPath": import_path}
        out = []
        for part in self._parts:
            if isinstance(part, _Field):
                if part.name not in data:
                    raise TemplateError(
                        f"template: {self.name}: can't evaluate field {part.name}"
                    )
                out.append(data[part.name])
            else:
                out.append(part)
        return "".join(out)


@dataclass(frozen=True)
class DocLink:
    """A link in a doc comment to a package, or to an entity inside one."""

    import_path: str = ""
    recv: str = ""
    name: str = ""


class DocLinker:
    """Resolves doc links into URLs.

    Links to packages marked local become relative paths, optionally
    passed through ``normalize``. Other packages use the closest matching
    template, falling back to the public documentation site.
    """

    def __init__(self, normalize: Optional[Callable[[str], str]] = None) -> None:
        self.normalize = normalize
        self._known: set = set()
        self._templates: PathTree[LinkTemplate] = PathTree()

    def local_package(self, import_path: str) -> None:
        """Mark ``import_path`` as part of the documentation being generated."""
        self._known.add(import_path)

    def template(self, path: str, tmpl: Union[LinkTemplate, str]) -> None:
        """Use ``tmpl`` for packages at ``path`` and its descendants."""
        if isinstance(tmpl, str):
            tmpl = LinkTemplate(tmpl, name=path)
        self._templates.set(path, tmpl)

    def package_doc_url(self, from_pkg: str, pkg: str) -> str:
        """Return the URL of the documentation for ``pkg`` as seen from ``from_pkg``."""
        if pkg in self._known:
            rel = relative_path(from_pkg, pkg)
            return self.normalize(rel) if self.normalize else rel

        tmpl = self._templates.get(pkg)
        if tmpl is not None:
            try:
                return tmpl.render(pkg).strip()
            except TemplateError as exc:
                _log.warning("%s: %s", pkg, exc)

        return DEFAULT_DOC_SITE + pkg

    def doc_link_url(self, from_pkg: str, link: DocLink) -> str:
        """Return the URL that ``link`` points to, as seen from ``from_pkg``."""
        url = self.package_doc_url(from_pkg, link.import_path) if link.import_path else ""
        if link.recv:
            url += f"#{link.recv}."
        if link.name:
            if not link.recv:
                url += "#"
            url += link.name
        return url