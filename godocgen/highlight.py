"""Rendering of code blocks into HTML with syntax highlighting.

Code blocks are :class:`~godocgen.spans.Code` values made of spans.
Token spans are coloured according to a Pygments style, either with
CSS classes (paired with :meth:`Highlighter.write_css`) or inline styles.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import List, Optional, Type, Union

from pygments.lexers.go import GoLexer as _PygmentsGoLexer
from pygments.style import Style
from pygments.styles import get_all_styles, get_style_by_name
from pygments.token import STANDARD_TYPES, Comment, Token
from pygments.util import ClassNotFound

from .spans import AnchorSpan, Code, ErrorSpan, LinkSpan, TextSpan, TokenSpan

PRE_CLASS = "chroma"

_HEX_SHORTEN = re.compile(
    r"#([0-9a-fA-F])\1([0-9a-fA-F])\2([0-9a-fA-F])\3(?![0-9a-fA-F])"
)


class PlainStyle(Style):
    """Minimal style: leaves most text as-is and fades comments slightly."""

    name = "plain"
    background_color = "#eeeeee"
    styles = {Comment: "#666666"}


def get_style(name: str) -> Optional[Type[Style]]:
    """Return the style with the given name, or None if there is none."""
    if name == PlainStyle.name:
        return PlainStyle
    try:
        return get_style_by_name(name)
    except ClassNotFound:
        return None


def style_names() -> List[str]:
    """Return the names of all known styles, sorted."""
    return sorted(set(get_all_styles()) | {PlainStyle.name})


class GoLexer:
    """Lexer for Go source code; adjacent tokens of one type are merged."""

    def __init__(self) -> None:
        self._lexer = _PygmentsGoLexer(stripnl=False, ensurenl=False)

    def lex(self, src: Union[str, bytes]) -> list:
        """Split ``src`` into ``(token_type, text)`` pairs."""
        if isinstance(src, bytes):
            src = src.decode("utf-8")
        tokens: list = []
        for ttype, value in self._lexer.get_tokens(src):
            if not value:
                continue
            if tokens and tokens[-1][0] is ttype:
                tokens[-1] = (ttype, tokens[-1][1] + value)
            else:
                tokens.append((ttype, value))
        return tokens


def _escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace("'", "&#39;")
        .replace('"', "&#34;")
    )


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _styled_type(style: Type[Style], ttype):
    """Return the nearest ancestor of ``ttype`` that the style sets, if any."""
    while ttype is not None and ttype is not Token:
        if style.styles.get(ttype):
            return ttype
        ttype = ttype.parent
    return None


def _class_name(ttype) -> str:
    while ttype not in STANDARD_TYPES:
        ttype = ttype.parent
    return STANDARD_TYPES[ttype]


def _entry_css(style: Type[Style], ttype) -> str:
    info = style.style_for_token(ttype)
    parts = []
    if info.get("color"):
        parts.append(f"color: #{info['color']}")
    if info.get("bgcolor"):
        parts.append(f"background-color: #{info['bgcolor']}")
    if info.get("bold"):
        parts.append("font-weight: bold")
    if info.get("italic"):
        parts.append("font-style: italic")
    if info.get("underline"):
        parts.append("text-decoration: underline")
    return "; ".join(parts)


def _pre_css(style: Type[Style]) -> str:
    parts = []
    color = style.style_for_token(Token).get("color")
    if color:
        parts.append(f"color: #{color}")
    if style.background_color:
        parts.append(f"background-color: {style.background_color}")
    return "; ".join(parts)


def _compress(css: str) -> str:
    parts = (part.replace(" ", "") for part in css.split(";"))
    return ";".join(_HEX_SHORTEN.sub(r"#\1\2\3", part) for part in parts if part)


@dataclass
class Highlighter:
    """Turns code blocks into HTML."""

    style: Type[Style] = PlainStyle
    use_classes: bool = False

    def write_css(self) -> str:
        """Return the style sheet for class-based output, or "" for inline output."""
        if not self.use_classes:
            return ""
        lines = [f".{PRE_CLASS} {{ {_pre_css(self.style)} }}"]
        rules = {}
        for ttype, value in self.style.styles.items():
            if not value or ttype is Token:
                continue
            css = _entry_css(self.style, ttype)
            if css:
                rules[_class_name(ttype)] = css
        for name in sorted(rules):
            lines.append(f".{PRE_CLASS} .{name} {{ {rules[name]} }}")
        return "\n".join(lines) + "\n"

    def highlight(self, code: Optional[Code]) -> str:
        """Render ``code`` as an HTML ``pre`` block."""
        if code is None:
            return ""
        out: List[str] = []
        if self.use_classes:
            out.append(f"<pre class={_quote(PRE_CLASS)}>")
        else:
            out.append(f"<pre style={_quote(_pre_css(self.style))}>")
        self._render_spans(code.spans, out)
        out.append("</pre>")
        return "".join(out)

    def _render_spans(self, spans, out: List[str]) -> None:
        for span in spans:
            self._render_span(span, out)

    def _render_span(self, span, out: List[str]) -> None:
        if isinstance(span, TokenSpan):
            self._render_tokens(span.tokens, out)
        elif isinstance(span, TextSpan):
            out.append(_escape(span.text))
        elif isinstance(span, AnchorSpan):
            out.append(f"<span id={_quote(span.id)}>")
            self._render_spans(span.spans, out)
            out.append("</span>")
        elif isinstance(span, LinkSpan):
            out.append(f"<a href={_quote(span.dest)}>")
            self._render_spans(span.spans, out)
            out.append("</a>")
        elif isinstance(span, ErrorSpan):
            out.append(f"<strong>{_escape(span.msg)}</strong>")
            out.append(f"<pre><code>{_escape(str(span.err))}</code></pre>")
        else:
            raise TypeError(f"unrecognized node type {type(span).__name__}")

    def _render_tokens(self, tokens, out: List[str]) -> None:
        for ttype, value in tokens:
            text = _escape(value)
            styled = _styled_type(self.style, ttype)
            if styled is None:
                out.append(text)
            elif self.use_classes:
                out.append(f'<span class="{_class_name(styled)}">{text}</span>')
            else:
                css = _compress(_entry_css(self.style, styled))
                if css:
                    out.append(f'<span style="{css}">{text}</span>')
                else:
                    out.append(text)