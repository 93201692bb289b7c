# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Create a ``.tar.gz`` from one or more paths, picking the best compressor.

The tar is built in-process with :mod:`tarfile` and then compressed by an
external gzip-compatible tool:

- below ``HIGH_RATIO_THRESHOLD`` bytes and with ``zopfli`` installed, zopfli
  (best ratio, slow);
- otherwise ``pigz`` (parallel) when installed;
- otherwise plain ``gzip``.

The intermediate ``.tar`` is removed whether compression succeeds or fails.
"""

import fnmatch
import tarfile
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from .._util.process import Runner, run_tool, tool_available

HIGH_RATIO_THRESHOLD = 50 * 1024 * 1024
HIGH_RATIO_COMPRESSOR = "zopfli"
PARALLEL_COMPRESSOR = "pigz"
FALLBACK_COMPRESSOR = "gzip"

ARCHIVE_EXCLUDES = (".DS_Store", "._*", ".Spotlight-V100", ".Trashes", "Thumbs.db")


@dataclass(frozen=True)
class ArchiveResult:
    archive: Path
    compressor: str
    original_size: int
    compressed_size: int


def choose_compressor(size: int, available: Callable[[str], bool] = tool_available) -> str:
    """Return the compressor for a tar of *size* bytes."""
    if size < HIGH_RATIO_THRESHOLD and available(HIGH_RATIO_COMPRESSOR):
        return HIGH_RATIO_COMPRESSOR
    if available(PARALLEL_COMPRESSOR):
        return PARALLEL_COMPRESSOR
    return FALLBACK_COMPRESSOR


def is_excluded(name: str) -> bool:
    base = Path(name).name
    return any(fnmatch.fnmatch(base, pattern) for pattern in ARCHIVE_EXCLUDES)


def _exclude_filter(info: tarfile.TarInfo) -> tarfile.TarInfo | None:
    return None if is_excluded(info.name) else info


def tar_path_for(paths: Sequence[str | Path]) -> Path:
    """``foo/`` → ``foo.tar`` (next to the first input)."""
    first = str(paths[0]).rstrip("/") or "/"
    return Path(f"{first}.tar")


def create_tar(paths: Sequence[str | Path], tar_path: Path) -> int:
    """Write an uncompressed tar of *paths* to *tar_path* and return its size."""
    for p in paths:
        if not Path(p).exists():
            raise SystemExit(f"ERROR: Path not found: {p}")
    try:
        with tarfile.open(tar_path, "w") as tar:
            for p in paths:
                print(f"a {p}")
                tar.add(str(p), filter=_exclude_filter)
    except (OSError, tarfile.TarError) as e:
        tar_path.unlink(missing_ok=True)
        raise SystemExit(f"ERROR: Could not create {tar_path}: {e}")
    return tar_path.stat().st_size


def targz(
    paths: Sequence[str | Path],
    available: Callable[[str], bool] = tool_available,
    runner: Runner = run_tool,
) -> ArchiveResult:
    if not paths:
        raise SystemExit("Usage: dotkit targz PATH [PATH...]")

    tar_path = tar_path_for(paths)
    size = create_tar(paths, tar_path)

    compressor = choose_compressor(size, available)
    print(f"Compressing .tar ({size // 1000} kB) using `{compressor}`…")
    try:
        runner([compressor, "-v", str(tar_path)])
    finally:
        # zopfli keeps its input, gzip/pigz remove it; a failed run may leave it either way
        tar_path.unlink(missing_ok=True)

    archive = tar_path.with_name(f"{tar_path.name}.gz")
    compressed = archive.stat().st_size
    print(f"{archive} ({compressed // 1000} kB) created successfully.")
    return ArchiveResult(archive, compressor, size, compressed)
