# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Network and shell commands: certnames, digga, git-root, randstr."""

from __future__ import annotations

import argparse

from ...lib.tools.certs import certificate_names, format_certificate_names
from ...lib.tools.shell import DEFAULT_RANDOM_LENGTH, dig_answer, git_root, random_string


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register network and shell subcommands."""
    p_cert = subparsers.add_parser(
        "certnames", help="Show the CN and SANs of the certificate served by DOMAIN:443"
    )
    p_cert.add_argument("domain")

    p_dig = subparsers.add_parser("digga", help="Show all DNS records for a domain")
    p_dig.add_argument("domain")

    subparsers.add_parser(
        "git-root",
        help='Print the top-level directory of the current git repo (cd "$(dotkit git-root)")',
    )

    p_rand = subparsers.add_parser("randstr", help="Print a random alphanumeric string")
    p_rand.add_argument(
        "length",
        nargs="?",
        type=int,
        default=DEFAULT_RANDOM_LENGTH,
        help=f"Number of characters (default: {DEFAULT_RANDOM_LENGTH})",
    )


def dispatch(args: argparse.Namespace) -> bool:
    """Handle network and shell commands.  Returns True if handled."""
    if args.cmd == "certnames":
        print(format_certificate_names(certificate_names(args.domain)))
        return True
    if args.cmd == "digga":
        dig_answer(args.domain)
        return True
    if args.cmd == "git-root":
        print(git_root())
        return True
    if args.cmd == "randstr":
        print(random_string(args.length))
        return True
    return False
