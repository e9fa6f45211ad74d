import json
import logging
import os
import sys

import pytest

from godocgen.pagefind import CLI, IndexRequest, PagefindError

_FAKE_BODY = """
import argparse
import json
import os
import sys

parser = argparse.ArgumentParser()
parser.add_argument("--site", default="")
parser.add_argument("--output-subdir", default="")
parser.add_argument("--verbose", action="store_true")
args = parser.parse_args()

behavior = os.environ.get("TEST_PAGEFIND_BEHAVIOR", "")
if behavior == "dump-args":
    path = os.environ["TEST_PAGEFIND_ARGS_PATH"]
    with open(path, "w") as f:
        json.dump(
            {
                "site": args.site,
                "output_subdir": args.output_subdir,
                "verbose": args.verbose,
            },
            f,
        )
    print("wrote args to " + path)
    sys.exit(0)

print("fake pagefind failed", file=sys.stderr)
sys.exit(1)
"""


@pytest.fixture
def fake_bin(tmp_path, monkeypatch):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    exe = bin_dir / "pagefind"
    exe.write_text("#!" + sys.executable + "\n" + _FAKE_BODY)
    exe.chmod(0o755)
    monkeypatch.setenv("PATH", str(bin_dir))
    return exe


@pytest.mark.parametrize(
    "subdir, want_subdir",
    [("", ""), ("assets", "assets")],
    ids=["basic", "output subdir"],
)
def test_cli_success(fake_bin, tmp_path, monkeypatch, caplog, subdir, want_subdir):
    site = tmp_path / "site"
    site.mkdir()
    args_path = tmp_path / "args.json"
    monkeypatch.setenv("TEST_PAGEFIND_BEHAVIOR", "dump-args")
    monkeypatch.setenv("TEST_PAGEFIND_ARGS_PATH", str(args_path))

    logger = logging.getLogger("tests.pagefind")
    caplog.set_level(logging.INFO, logger="tests.pagefind")

    CLI(log=logger).index(IndexRequest(site_dir=str(site), asset_subdir=subdir))

    got = json.loads(args_path.read_text())
    assert got == {"site": str(site), "output_subdir": want_subdir, "verbose": True}
    assert any("wrote args to" in r.getMessage() for r in caplog.records)


def test_cli_failure(fake_bin, tmp_path, monkeypatch):
    monkeypatch.setenv("TEST_PAGEFIND_BEHAVIOR", "fail")
    with pytest.raises(PagefindError, match="pagefind:"):
        CLI(pagefind=str(fake_bin)).index(IndexRequest(site_dir=str(tmp_path)))


def test_cli_missing_executable(tmp_path):
    missing = os.path.join(str(tmp_path), "does-not-exist")
    with pytest.raises(PagefindError, match="pagefind:"):
        CLI(pagefind=missing).index(IndexRequest(site_dir=str(tmp_path)))