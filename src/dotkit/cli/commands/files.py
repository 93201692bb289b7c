# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""File commands: targz, fs, dataurl, gz, tre, o."""

from __future__ import annotations

import argparse

from ...lib.tools.archive import targz
from ...lib.tools.files import data_url, disk_usage, gzip_ratio, show_tree
from ...lib.tools.shell import open_paths
from ._completers import complete_directories, complete_files, set_completer


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register file and archive subcommands."""
    p_targz = subparsers.add_parser(
        "targz", help="Create a .tar.gz archive using zopfli, pigz or gzip"
    )
    set_completer(p_targz.add_argument("paths", nargs="+", metavar="PATH"), complete_files)

    p_fs = subparsers.add_parser("fs", help="Show the size of files or directories")
    set_completer(p_fs.add_argument("paths", nargs="*", metavar="PATH"), complete_files)

    p_dataurl = subparsers.add_parser("dataurl", help="Print a data: URL for a file")
    set_completer(p_dataurl.add_argument("file"), complete_files)

    p_gz = subparsers.add_parser("gz", help="Compare original and gzipped file size")
    set_completer(p_gz.add_argument("file"), complete_files)

    p_tre = subparsers.add_parser(
        "tre", help="Print a directory tree (hidden files, without .git/node_modules)"
    )
    set_completer(p_tre.add_argument("directory", nargs="?"), complete_directories)

    p_open = subparsers.add_parser(
        "o", help="Open files or the current directory with the desktop handler"
    )
    set_completer(p_open.add_argument("paths", nargs="*", metavar="PATH"), complete_files)


def dispatch(args: argparse.Namespace) -> bool:
    """Handle file commands.  Returns True if handled."""
    if args.cmd == "targz":
        targz(args.paths)
        return True
    if args.cmd == "fs":
        disk_usage(args.paths)
        return True
    if args.cmd == "dataurl":
        print(data_url(args.file))
        return True
    if args.cmd == "gz":
        print(gzip_ratio(args.file).format())
        return True
    if args.cmd == "tre":
        show_tree(args.directory)
        return True
    if args.cmd == "o":
        open_paths(args.paths)
        return True
    return False
