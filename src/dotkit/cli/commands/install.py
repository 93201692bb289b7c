# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Installation commands: bootstrap, brew, setup."""

from __future__ import annotations

import argparse

from ...lib.install.bootstrap import bootstrap
from ...lib.install.brew import install_toolset
from ...lib.install.workstation import run_setup


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register workstation installation subcommands."""
    p_boot = subparsers.add_parser(
        "bootstrap", help="Link dotfiles into $HOME and install fonts"
    )
    p_boot.add_argument(
        "-f", "--force", action="store_true", help="Do not ask before overwriting files"
    )
    p_boot.add_argument(
        "--no-pull",
        dest="pull",
        action="store_false",
        help="Do not git pull the dotfiles checkout first",
    )

    subparsers.add_parser("brew", help="Install the command-line toolset with Homebrew")

    p_setup = subparsers.add_parser(
        "setup", help="First-run setup: sudo, Xcode command line tools, Homebrew"
    )
    p_setup.add_argument(
        "--dry-run", action="store_true", help="Print the commands instead of running them"
    )


def dispatch(args: argparse.Namespace) -> bool:
    """Handle installation commands.  Returns True if handled."""
    if args.cmd == "bootstrap":
        bootstrap(force=args.force, pull=args.pull)
        return True
    if args.cmd == "brew":
        install_toolset()
        return True
    if args.cmd == "setup":
        run_setup(dry_run=args.dry_run)
        return True
    return False
