"""Preparation of example code for display in documentation."""

from __future__ import annotations

import re
from typing import Callable, List, Optional, Union

from .goscan import TokenKind, scan

_OUTPUT_RX = re.compile(r"//\s*(unordered )?output:", re.IGNORECASE)


def format_example(src: Union[str, bytes]) -> Union[str, bytes]:
    """Prepare an example's source code for presentation.

    A block example (wrapped in ``{`` and ``}``) loses its braces and is
    unindented. A trailing expected-output comment, and the blank space
    before it, is removed since the output is shown separately.
    Bytes in give bytes out.
    """
    if isinstance(src, (bytes, bytearray)):
        return _format(bytes(src).decode("utf-8")).encode("utf-8")
    return _format(src)


def _first_indent(indent: str) -> str:
    """Keep only the last of the leading newlines of ``indent``."""
    first = next((i for i, ch in enumerate(indent) if i > 0 and ch != "\n"), None)
    return indent if first is None else indent[first - 1 :]


def _trim_trailing_space(out: List[str]) -> List[str]:
    text = "".join(out)
    stripped = text.rstrip("\n\t ")
    return [stripped] if stripped else [text]


def _format(src: str) -> str:
    tokens = scan(src)
    tok = next(tokens)
    unindent: Callable[[str], str] = lambda text: text
    last = 0

    if tok.kind is TokenKind.LBRACE:
        indent_start = tok.offset + 1
        tok = next(tokens)
        last = tok.offset
        indent = _first_indent(src[indent_start:last])
        if indent.startswith("\n"):
            unindent = lambda text: text.replace(indent, "\n")

    depth = 1
    out: List[str] = []
    while tok.kind is not TokenKind.EOF:
        if tok.kind is TokenKind.LBRACE:
            depth += 1
        elif tok.kind is TokenKind.RBRACE:
            depth -= 1
            if depth == 0:
                out.append(unindent(src[last : tok.offset]))
                break
        elif tok.kind is TokenKind.COMMENT:
            if _OUTPUT_RX.search(tok.text):
                comment_end: Optional[int] = None
                while tok.kind is TokenKind.COMMENT:
                    comment_end = tok.offset + len(tok.text)
                    tok = next(tokens)
                last = comment_end if comment_end is not None else last
                out = _trim_trailing_space(out)
                continue
            last = tok.offset + len(tok.text)
            out.append(unindent(tok.text))
        elif tok.kind in (TokenKind.STRING, TokenKind.CHAR):
            last = tok.offset + len(tok.text)
            out.append(tok.text)

        tok = next(tokens)
        out.append(unindent(src[last : tok.offset]))
        last = tok.offset

    return "".join(out).rstrip("\n")