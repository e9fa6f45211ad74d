"""Lookup of tokens by byte range in the source they were lexed from."""

from __future__ import annotations

from bisect import bisect_left
from typing import List, Sequence, Tuple, Union

from .spans import Token


class TokenIndex:
    """A searchable collection of tokens over their source."""

    def __init__(self, src: Union[str, bytes], tokens: Sequence[Token]) -> None:
        self._src = src.encode("utf-8") if isinstance(src, str) else bytes(src)
        self._tokens = list(tokens)
        self._starts: List[int] = []
        self._ends: List[int] = []
        offset = 0
        for _, value in self._tokens:
            self._starts.append(offset)
            offset += len(value.encode("utf-8"))
            self._ends.append(offset)

    def interval(self, start: int, end: int) -> Tuple[List[Token], bytes, bytes]:
        """Return the tokens within byte range [start, end).

        Also returns the leading and trailing source text that falls inside
        the range but only covers part of a token.
        """
        first = bisect_left(self._starts, start)
        if first >= len(self._starts):
            return [], b"", b""

        lead = b""
        if start < self._starts[first]:
            lead = self._src[start : self._starts[first]]

        last = bisect_left(self._ends, end, lo=first)
        if last >= len(self._ends):
            return self._tokens[first:], lead, b""

        trail = b""
        if end < self._ends[last]:
            trail = self._src[self._starts[last] : end]
        else:
            last += 1
        return self._tokens[first:last], lead, trail