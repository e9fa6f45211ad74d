# godocgen

Building blocks for generating static HTML documentation for Go packages.

## Modules

- `godocgen.relative`: relative links between import paths
  (`relative_path("foo/bar", "foo/baz/qux") == "../baz/qux"`), with
  `relative_filepath` doing the same for file system paths. Mixing an
  absolute and a relative path raises `ValueError`.
- `godocgen.pathx`: `descends(a, b)` reports whether import path `b` is `a` or
  lies below it.
- `godocgen.pathtree`: `PathTree`, values keyed by path where a value set on
  `foo/bar` also applies to `foo/bar/baz` unless that path sets its own.
  `lookup` raises `KeyError` when nothing applies, `get` returns a default, and
  `snapshot` returns the tree as nested `Snapshot` objects.
- `godocgen.link`: `DocLinker` turns doc links (`DocLink` with an import path,
  receiver and name) into URLs. Packages marked with `local_package` get
  relative links. Packages under a path given to `template` get a URL built
  from that `LinkTemplate` (`{{.ImportPath}}` is replaced by the import path).
  Everything else links to `DEFAULT_DOC_SITE` followed by the import path.
- `godocgen.example`: `format_example` cleans up example source for display. It
  drops the surrounding braces, removes the indentation and strips a trailing
  `// Output:` or `// Unordered output:` comment. `godocgen.goscan` provides the
  small Go scanner it uses (`scan`, `Token`, `TokenKind`).
- `godocgen.spans` and `godocgen.highlight`: code blocks (`Code`) are made of
  `TextSpan`, `TokenSpan`, `AnchorSpan`, `LinkSpan` and `ErrorSpan` values.
  `Highlighter` renders them to HTML with Pygments, using either CSS classes or
  inline styles; `write_css` returns the matching style sheet as a string.
  `GoLexer` lexes Go source into tokens, `get_style` and `style_names` look up
  themes, and the minimal `PlainStyle` is among them.
- `godocgen.tokenindex`: `TokenIndex.interval` finds the tokens that cover a byte
  range of lexed source, along with any partial leading and trailing text.
- `godocgen.site`: data and path helpers for rendering pages: `Breadcrumb`,
  `Subpackage`, `PackageIndex`, `FrontmatterData`, and `RenderContext`, which
  computes relative paths to packages, static assets and the output root, and
  filters internal packages out of subpackage lists. `is_internal` and
  `make_dict` are available on their own.
- `godocgen.linebuf`: `LineWriter` splits a stream of writes into whole lines.
- `godocgen.pagefind`: `CLI.index` runs the `pagefind` command to build a
  client-side search index for a finished site, raising `PagefindError` if it
  fails.

## Example

```python
from godocgen.link import DocLink, DocLinker, LinkTemplate

linker = DocLinker()
linker.local_package("example.com/foo")
linker.local_package("example.com/bar")
linker.template("foo.example.com/baz", LinkTemplate("https://docs.example.com/{{.ImportPath}}"))

linker.doc_link_url("example.com/foo", DocLink(import_path="example.com/bar"))
# '../bar'
linker.doc_link_url("", DocLink(import_path="foo.example.com/baz/qux", name="Client"))
# 'https://docs.example.com/foo.example.com/baz/qux#Client'
linker.doc_link_url("", DocLink(recv="Foo", name="Bar"))
# '#Foo.Bar'
```

## What it does not do

This package has no command-line program. It does not find Go packages on
disk, parse Go source or doc comments, or ship page templates and static
assets; `godocgen.site` supplies the data and paths a page renderer needs, but
writing the HTML pages is left to the caller.

## Installing

```
pip install .
```

Search indexing needs the `pagefind` executable on `PATH`, or its location
passed to `pagefind.CLI`.

## Running the tests

```
pip install ".[test]"
pytest
```