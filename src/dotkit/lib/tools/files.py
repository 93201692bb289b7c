# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""File helpers: sizes, data URLs, gzip ratio and directory trees."""

import base64
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .._util.fs import require_existing
from .._util.process import Runner, run_tool

TREE_IGNORE = ".git|node_modules|bower_components"


def _du_flags(runner: Runner) -> list[str]:
    """GNU du understands ``-b`` (apparent size in bytes); BSD du does not."""
    probe = runner(["du", "-b", "/dev/null"], capture=True, check=False)
    return ["-sbh"] if probe.returncode == 0 else ["-sh"]


def disk_usage(paths: Sequence[str] = (), cwd: Path | None = None, runner: Runner = run_tool) -> None:
    """Print the total size of each path (default: every entry in *cwd*)."""
    if not paths:
        base = cwd or Path.cwd()
        paths = sorted(child.name for child in base.iterdir())
        if not paths:
            return
    runner(["du", *_du_flags(runner), "--", *paths], cwd=cwd)


def data_url(path: str | Path, runner: Runner = run_tool) -> str:
    """Return a ``data:`` URL embedding the file at *path*."""
    file_path = require_existing(Path(path))
    if file_path.is_dir():
        raise SystemExit(f"ERROR: Not a file: {file_path}")
    mime = runner(["file", "-b", "--mime-type", str(file_path)], capture=True).stdout.strip()
    if mime.startswith("text/"):
        mime = f"{mime};charset=utf-8"
    payload = base64.b64encode(file_path.read_bytes()).decode("ascii")
    return f"data:{mime};base64,{payload}"


@dataclass(frozen=True)
class GzipRatio:
    original: int
    compressed: int

    @property
    def percent(self) -> float | None:
        if self.original == 0:
            return None
        return self.compressed * 100 / self.original

    def format(self) -> str:
        pct = self.percent
        gz_line = f"gzip: {self.compressed} bytes"
        if pct is not None:
            gz_line += f" ({pct:.2f}%)"
        return f"orig: {self.original} bytes\n{gz_line}"


def gzip_ratio(path: str | Path, runner: Runner = run_tool) -> GzipRatio:
    """Compare the size of *path* with its ``gzip -c`` output."""
    file_path = require_existing(Path(path))
    if file_path.is_dir():
        raise SystemExit(f"ERROR: Not a file: {file_path}")
    compressed = runner(["gzip", "-c", str(file_path)], capture=True, text=False).stdout
    return GzipRatio(file_path.stat().st_size, len(compressed))


def show_tree(directory: str | None = None, runner: Runner = run_tool) -> None:
    """Print a directory tree, hidden files included, noisy dirs skipped."""
    cmd = ["tree", "-aC", "-I", TREE_IGNORE, "--dirsfirst"]
    if directory:
        cmd.append(directory)
    runner(cmd)
