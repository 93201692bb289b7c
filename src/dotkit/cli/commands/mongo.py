# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Database commands: mongo-dump, mongo-restore."""

from __future__ import annotations

import argparse

from ...lib.mongo.backup import dump_database, restore_database
from ._completers import complete_database_names, complete_directories, set_completer


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register database backup subcommands."""
    p_dump = subparsers.add_parser("mongo-dump", help="Dump a MongoDB database to a directory")
    set_completer(p_dump.add_argument("name", help="Database name"), complete_database_names)
    set_completer(
        p_dump.add_argument("output_path", help="Directory to write the dump into"),
        complete_directories,
    )

    p_restore = subparsers.add_parser(
        "mongo-restore",
        help="Restore a MongoDB database from a dump (DROPS the existing database)",
    )
    set_completer(p_restore.add_argument("name", help="Database name"), complete_database_names)
    set_completer(
        p_restore.add_argument("backup_path", help="Directory containing the dump"),
        complete_directories,
    )


def dispatch(args: argparse.Namespace) -> bool:
    """Handle mongo-dump and mongo-restore.  Returns True if handled."""
    if args.cmd == "mongo-dump":
        dump_database(args.name, args.output_path)
        return True
    if args.cmd == "mongo-restore":
        restore_database(args.name, args.backup_path)
        return True
    return False
