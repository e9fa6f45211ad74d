"""Small helpers for working with sequences."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence, TypeVar

T = TypeVar("T")
U = TypeVar("U")


def remove_common_prefix(a: Sequence[T], b: Sequence[T]) -> tuple[list[T], list[T]]:
    """Drop the shared leading elements of two sequences and return the rests."""
    shared = 0
    for left, right in zip(a, b):
        if left != right:
            break
        shared += 1
    return list(a[shared:]), list(b[shared:])


def remove_func(items: Iterable[T], skip: Callable[[T], bool]) -> list[T]:
    """Return the items for which ``skip`` is false, in their original order."""
    return [item for item in items if not skip(item)]


def transform(items: Iterable[T], fn: Callable[[T], U]) -> list[U]:
    """Apply ``fn`` to every item and return the results as a list."""
    return [fn(item) for item in items]