# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Small helpers around git, dig, the desktop opener and random strings."""

import secrets
import string
import sys
from collections.abc import Sequence
from pathlib import Path

from .._util.process import Runner, run_tool

RANDOM_ALPHABET = string.ascii_letters + string.digits
DEFAULT_RANDOM_LENGTH = 32


def git_root(cwd: Path | None = None, runner: Runner = run_tool) -> Path:
    """Return the top-level directory of the git work tree containing *cwd*."""
    result = runner(["git", "rev-parse", "--show-toplevel"], capture=True, check=False, cwd=cwd)
    top = result.stdout.strip() if result.returncode == 0 else ""
    if not top:
        raise SystemExit("ERROR: Not a git repository")
    return Path(top)


def dig_answer(domain: str, runner: Runner = run_tool) -> None:
    """Print all DNS records for *domain* in dig's multi-line answer format."""
    if not domain:
        raise SystemExit("Usage: dotkit digga DOMAIN")
    runner(["dig", "+nocmd", domain, "any", "+multiline", "+noall", "+answer"])


def opener_command(platform: str = sys.platform) -> str:
    return "open" if platform == "darwin" else "xdg-open"


def open_paths(
    paths: Sequence[str] = (), platform: str = sys.platform, runner: Runner = run_tool
) -> None:
    """Open *paths* (default: the current directory) with the desktop handler."""
    targets = list(paths) or ["."]
    opener = opener_command(platform)
    if opener == "open":
        runner([opener, *targets])
        return
    # xdg-open accepts a single argument
    for target in targets:
        runner([opener, target])


def random_string(length: int = DEFAULT_RANDOM_LENGTH, alphabet: str = RANDOM_ALPHABET) -> str:
    if length <= 0:
        raise SystemExit("Usage: dotkit randstr [LENGTH]  (LENGTH must be a positive integer)")
    return "".join(secrets.choice(alphabet) for _ in range(length))
