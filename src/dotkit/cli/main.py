#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import argparse
import sys

import argcomplete

from ..lib._util.logging_utils import _log_debug
from ..lib.core.version import format_version_string, get_version_info
from .commands import files, info, install, mongo, shell

COMMAND_MODULES = (files, shell, mongo, install, info)


class DotkitArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1."""

    def error(self, message: str):  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> DotkitArgumentParser:
    version, branch = get_version_info()
    parser = DotkitArgumentParser(
        prog="dotkit",
        description="dotkit – shell helpers and workstation bootstrap",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "New machine:\n"
            "  1. dotkit setup        (sudo, Xcode CLI tools, Homebrew)\n"
            "  2. dotkit brew         (command-line toolset)\n"
            "  3. dotkit bootstrap    (link dotfiles, install fonts)\n"
            "\n"
            "Shell completion:\n"
            '  eval "$(register-python-argcomplete dotkit)"\n'
        ),
    )
    parser.add_argument(
        "--version", action="version", version=f"dotkit {format_version_string(version, branch)}"
    )
    sub = parser.add_subparsers(dest="cmd", required=True)
    for module in COMMAND_MODULES:
        module.register(sub)
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    argcomplete.autocomplete(parser)  # pragma: no cover - shell integration

    args = parser.parse_args(argv)
    _log_debug(f"command: {args.cmd}")
    for module in COMMAND_MODULES:
        if module.dispatch(args):
            return
    parser.error(f"unknown command: {args.cmd}")


if __name__ == "__main__":
    main()
