"""A lexical scanner for Go source code.

It splits source into tokens, keeping comments, and reports the offset
of each token in the source. Statement-ending semicolons that Go inserts
automatically are not reported.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator


class TokenKind(enum.Enum):
    IDENT = "IDENT"
    INT = "INT"
    FLOAT = "FLOAT"
    IMAG = "IMAG"
    CHAR = "CHAR"
    STRING = "STRING"
    COMMENT = "COMMENT"
    LBRACE = "{"
    RBRACE = "}"
    OPERATOR = "OPERATOR"
    ILLEGAL = "ILLEGAL"
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """A token, its offset in the source and its exact source text."""

    kind: TokenKind
    offset: int
    text: str


_OPERATORS = sorted(
    """
    + - * / % & | ^ << >> &^ += -= *= /= %= &= |= ^= <<= >>= &^=
    && || <- ++ -- == < > = ! ~ != <= >= := ... ( [ ) ] , ; . :
    """.split(),
    key=len,
    reverse=True,
)
_SPACE = " \t\r\n"
_DIGITS = "0123456789"


def _line_comment_end(src: str, pos: int) -> int:
    end = src.find("\n", pos)
    if end < 0:
        end = len(src)
    if end > pos and src[end - 1] == "\r":
        end -= 1
    return end


def _block_comment_end(src: str, pos: int) -> int:
    end = src.find("*/", pos + 2)
    return len(src) if end < 0 else end + 2


def _ident_end(src: str, pos: int) -> int:
    end = pos + 1
    while end < len(src) and (src[end].isalnum() or src[end] == "_"):
        end += 1
    return end


def _number_end(src: str, pos: int, hexa: bool) -> int:
    exponents = "pP" if hexa else "eE"
    end = pos
    while end < len(src):
        ch = src[end]
        if (ch.isascii() and ch.isalnum()) or ch in "_.":
            end += 1
        elif ch in "+-" and end > pos and src[end - 1] in exponents:
            end += 1
        else:
            break
    return end


def _number_kind(text: str, hexa: bool) -> TokenKind:
    lower = text.lower()
    if lower.endswith("i"):
        return TokenKind.IMAG
    if hexa:
        return TokenKind.FLOAT if "p" in lower else TokenKind.INT
    if "." in lower or "e" in lower:
        return TokenKind.FLOAT
    return TokenKind.INT


def _quoted_end(src: str, pos: int, quote: str) -> int:
    end = pos + 1
    while end < len(src):
        ch = src[end]
        if ch == "\\":
            end += 2
            continue
        if ch == "\n":
            return end
        end += 1
        if ch == quote:
            return end
    return min(end, len(src))


def _raw_end(src: str, pos: int) -> int:
    end = src.find("`", pos + 1)
    return len(src) if end < 0 else end + 1


def scan(src: str) -> Iterator[Token]:
    """Yield the tokens of ``src``, ending with a single EOF token."""
    pos = 0
    n = len(src)
    while True:
        while pos < n and src[pos] in _SPACE:
            pos += 1
        if pos >= n:
            yield Token(TokenKind.EOF, n, "")
            return

        ch = src[pos]
        if src.startswith("//", pos):
            kind, end = TokenKind.COMMENT, _line_comment_end(src, pos)
        elif src.startswith("/*", pos):
            kind, end = TokenKind.COMMENT, _block_comment_end(src, pos)
        elif ch == "_" or ch.isalpha():
            kind, end = TokenKind.IDENT, _ident_end(src, pos)
        elif ch in _DIGITS or (ch == "." and src[pos + 1 : pos + 2] in tuple(_DIGITS)):
            hexa = src.startswith(("0x", "0X"), pos)
            end = _number_end(src, pos, hexa)
            kind = _number_kind(src[pos:end], hexa)
        elif ch == '"':
            kind, end = TokenKind.STRING, _quoted_end(src, pos, '"')
        elif ch == "'":
            kind, end = TokenKind.CHAR, _quoted_end(src, pos, "'")
        elif ch == "`":
            kind, end = TokenKind.STRING, _raw_end(src, pos)
        elif ch == "{":
            kind, end = TokenKind.LBRACE, pos + 1
        elif ch == "}":
            kind, end = TokenKind.RBRACE, pos + 1
        else:
            op = next((op for op in _OPERATORS if src.startswith(op, pos)), None)
            if op is None:
                kind, end = TokenKind.ILLEGAL, pos + 1
            else:
                kind, end = TokenKind.OPERATOR, pos + len(op)

        yield Token(kind, pos, src[pos:end])
        pos = end