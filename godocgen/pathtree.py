"""A tree of values keyed by slash-separated paths.

Values set for a path cascade down to all of its descendants
unless a descendant sets a value of its own::

    tree.set("foo/bar", x)
    tree.get("foo/bar/baz")      # x
    tree.set("foo/bar/baz", y)
    tree.get("foo/bar/baz/qux")  # y
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_SEP = "/"
_MISSING: Any = object()


@dataclass
class Snapshot(Generic[T]):
    """A node of the tree; ``value`` is None where the node has no value of its own."""

    path: str
    value: T | None = None
    children: list[Snapshot[T]] = field(default_factory=list)


class _Node:
    __slots__ = ("value", "children")

    def __init__(self) -> None:
        self.value: Any = _MISSING
        self.children: dict[str, _Node] = {}

    def snapshot(self, parts: list[str]) -> Snapshot:
        return Snapshot(
            path=_SEP.join(parts),
            value=None if self.value is _MISSING else self.value,
            children=[
                self.children[name].snapshot(parts + [name])
                for name in sorted(self.children)
            ],
        )


def _split(path: str) -> tuple[str, str]:
    head, _, tail = path.partition(_SEP)
    return head, tail.lstrip(_SEP)


class PathTree(Generic[T]):
    """Values organised by path, inherited by descendants."""

    def __init__(self) -> None:
        self._root = _Node()

    def set(self, path: str, value: T) -> None:
        """Set the value for ``path``, replacing any previous one."""
        node = self._root
        while path:
            head, path = _split(path)
            node = node.children.setdefault(head, _Node())
        node.value = value

    def _find(self, path: str) -> Any:
        current = _MISSING
        node: _Node | None = self._root
        while node is not None:
            if node.value is not _MISSING:
                current = node.value
            head, path = _split(path)
            node = node.children.get(head)
        return current

    def lookup(self, path: str) -> T:
        """Return the value for ``path``, inherited if needed; raise KeyError if none."""
        found = self._find(path)
        if found is _MISSING:
            raise KeyError(path)
        return found

    def get(self, path: str, default: T | None = None) -> T | None:
        """Return the value for ``path``, inherited if needed, or ``default``."""
        found = self._find(path)
        return default if found is _MISSING else found

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self._find(path) is not _MISSING

    def snapshot(self) -> list[Snapshot[T]]:
        """Return the nodes closest to the root, each with its descendants."""
        return self._root.snapshot([]).children