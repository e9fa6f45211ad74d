"""Building blocks of renderable code blocks.

A :class:`Code` block is a sequence of spans. Spans carry rendering
instructions: plain text, highlighted tokens, anchors, links, or a
visible error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Tuple, Union

#: A lexed token: its token type and its text.
Token = Tuple[Any, str]


@dataclass
class TextSpan:
    """Text rendered as-is, with HTML escaping."""

    text: str


@dataclass
class TokenSpan:
    """Tokens rendered with syntax highlighting."""

    tokens: List[Token] = field(default_factory=list)


@dataclass
class AnchorSpan:
    """Spans wrapped in an addressable anchor point."""

    spans: List["Span"] = field(default_factory=list)
    id: str = ""


@dataclass
class LinkSpan:
    """Spans wrapped in a link to ``dest``."""

    spans: List["Span"] = field(default_factory=list)
    dest: str = ""


@dataclass
class ErrorSpan:
    """A failed operation, rendered visibly rather than failing silently."""

    msg: str
    err: BaseException


Span = Union[TextSpan, TokenSpan, AnchorSpan, LinkSpan, ErrorSpan]


@dataclass
class Code:
    """A code block made of spans."""

    spans: List[Span] = field(default_factory=list)