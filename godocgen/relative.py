"""Relative paths computed by string manipulation alone."""

from __future__ import annotations

import os

from .sliceutil import remove_common_prefix


def relative_path(src: str, dst: str) -> str:
    """Return a /-separated path to ``dst`` relative to the directory ``src``.

    Both paths must be absolute or both relative.
    """
    return _rel("/", src, dst)


def relative_filepath(src: str, dst: str) -> str:
    """Return a file path to ``dst`` relative to the directory ``src``.

    Both paths must be absolute or both relative, using the system separator.
    """
    return _rel(os.sep, src, dst)


def _rel(delim: str, src: str, dst: str) -> str:
    if src.startswith("/") != dst.startswith("/"):
        raise ValueError(
            f"relative({src!r}, {dst!r}): both must be absolute, or both must be relative"
        )
    if src.endswith(delim):
        src = src[: -len(delim)]

    src_parts = src.split(delim) if src else []
    dst_parts = dst.split(delim) if dst else []
    src_parts, dst_parts = remove_common_prefix(src_parts, dst_parts)

    out = ""
    for part in [".."] * len(src_parts) + dst_parts:
        if out:
            out += delim
        out += part
    return out