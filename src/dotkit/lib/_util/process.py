# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Single entry point for running external tools."""

import shlex
import shutil
import subprocess
from pathlib import Path
from typing import Protocol

from .logging_utils import _log_debug


class Runner(Protocol):
    def __call__(
        self,
        cmd: list[str],
        *,
        capture: bool = False,
        check: bool = True,
        input: str | bytes | None = None,
        text: bool = True,
        timeout: float | None = None,
        cwd: Path | None = None,
    ) -> subprocess.CompletedProcess: ...


def run_tool(
    cmd: list[str],
    *,
    capture: bool = False,
    check: bool = True,
    input: str | bytes | None = None,
    text: bool = True,
    timeout: float | None = None,
    cwd: Path | None = None,
) -> subprocess.CompletedProcess:
    """Run *cmd* in the foreground and return the completed process.

    A missing executable and (with *check*) a non-zero exit status are
    turned into ``SystemExit`` so the CLI exits with status 1 and a short
    message. ``subprocess.TimeoutExpired`` is left to the caller.
    """
    _log_debug(f"run: {shlex.join(cmd)}")
    try:
        result = subprocess.run(
            cmd,
            capture_output=capture,
            check=check,
            input=input,
            text=text,
            timeout=timeout,
            cwd=str(cwd) if cwd else None,
        )
    except FileNotFoundError:
        raise SystemExit(f"{cmd[0]} not found. Please install it first.")
    except subprocess.CalledProcessError as e:
        _log_debug(f"failed ({e.returncode}): {shlex.join(cmd)}")
        raise SystemExit(f"{cmd[0]} failed (exit status {e.returncode})")
    return result


def tool_available(name: str) -> bool:
    """Return True if *name* resolves to an executable on ``PATH``."""
    return shutil.which(name) is not None
