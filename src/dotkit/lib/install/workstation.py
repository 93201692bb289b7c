# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""First-run workstation setup: sudo credentials, Xcode CLI tools, Homebrew."""

import shlex
import sys
from collections.abc import Callable

from .._util.process import Runner, run_tool, tool_available
from ..core.config import get_homebrew_install_url


def _xcode_tools_installed(runner: Runner) -> bool:
    return runner(["xcode-select", "-p"], capture=True, check=False).returncode == 0


def run_setup(
    dry_run: bool = False,
    platform: str = sys.platform,
    runner: Runner = run_tool,
    available: Callable[[str], bool] = tool_available,
) -> list[str]:
    """Prepare a fresh machine for ``dotkit brew``. Returns the steps that ran."""
    steps: list[str] = []

    def step(label: str, cmd: list[str]) -> None:
        print(f"==> {label}")
        if dry_run:
            print(f"    {shlex.join(cmd)}")
        else:
            runner(cmd)
        steps.append(label)

    # Ask for the administrator password upfront
    step("Caching sudo credentials", ["sudo", "-v"])

    if platform == "darwin":
        if not dry_run and _xcode_tools_installed(runner):
            print("==> Xcode command line tools already installed")
        else:
            step("Installing Xcode command line tools", ["xcode-select", "--install"])

    if available("brew"):
        print("==> Homebrew already installed")
        return steps

    url = get_homebrew_install_url()
    if dry_run:
        step("Installing Homebrew", ["/bin/bash", "-c", f"$(curl -fsSL {url})"])
        return steps
    print("==> Downloading Homebrew installer")
    script = runner(["curl", "-fsSL", url], capture=True).stdout
    step("Installing Homebrew", ["/bin/bash", "-c", script])
    return steps
