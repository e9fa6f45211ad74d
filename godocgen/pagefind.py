"""Running the pagefind command to build a search index."""

from __future__ import annotations

import functools
import logging
import subprocess
from dataclasses import dataclass
from typing import Optional

from .linebuf import LineWriter


class PagefindError(RuntimeError):
    """The pagefind command could not be run or reported failure."""


@dataclass(frozen=True)
class IndexRequest:
    """A request to build a search index for a static website."""

    site_dir: str
    # Directory for pagefind's assets, relative to site_dir.
    asset_subdir: str = ""


@dataclass
class CLI:
    """Handle to the pagefind executable.

    ``pagefind`` is the path of the executable; if empty, it is looked up
    on PATH. The command's output is sent line by line to ``log``.
    """

    pagefind: str = ""
    log: Optional[logging.Logger] = None

    def index(self, request: IndexRequest) -> None:
        """Generate a search index for the website in ``request.site_dir``."""
        exe = self.pagefind or "pagefind"
        args = [exe, "--site", str(request.site_dir), "--verbose"]
        if request.asset_subdir:
            args += ["--output-subdir", request.asset_subdir]

        logger = self.log

        def log_line(line: bytes) -> None:
            if logger is not None:
                text = line[:-1] if line.endswith(b"\n") else line
                logger.info("%s", text.decode("utf-8", "replace"))

        with LineWriter(log_line) as out:
            try:
                proc = subprocess.Popen(
                    args, stdout=subprocess.PIPE, stderr=subprocess.STDOUT
                )
            except OSError as exc:
                raise PagefindError(f"pagefind: {exc}") from exc
            with proc:
                assert proc.stdout is not None
                for chunk in iter(functools.partial(proc.stdout.read1, 65536), b""):
                    out.write(chunk)
                code = proc.wait()

        if code != 0:
            raise PagefindError(f"pagefind: exit status {code}")