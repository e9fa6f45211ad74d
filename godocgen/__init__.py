"""Building blocks for generating static HTML documentation for Go packages."""

__version__ = "0.1.0"

__all__ = [
    "example",
    "goscan",
    "highlight",
    "linebuf",
    "link",
    "pagefind",
    "pathtree",
    "pathx",
    "relative",
    "site",
    "sliceutil",
    "spans",
    "tokenindex",
]