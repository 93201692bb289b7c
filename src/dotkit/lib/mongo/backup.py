# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Dump and restore a named MongoDB database."""

from collections.abc import Callable
from pathlib import Path

from .._util.ansi import ask_yes_no, red, supports_color
from .._util.fs import require_existing
from .._util.logging_utils import _log_debug
from .tools import MongoTools


def dump_database(name: str, output_path: str | Path, tools: MongoTools | None = None) -> None:
    """Export database *name* into *output_path* with ``mongodump``."""
    tools = tools or MongoTools.from_config()
    print(f"Dumping database '{name}' to {output_path}...")
    tools.export(name, Path(output_path))
    print(f"Database '{name}' dumped to {output_path}")


def restore_database(
    name: str,
    backup_path: str | Path,
    tools: MongoTools | None = None,
    confirm: Callable[[str], bool] = ask_yes_no,
) -> bool:
    """Restore *backup_path* into database *name* after an explicit confirmation.

    The restore drops the existing database first. Returns True if the
    restore ran, False if the user declined.
    """
    path = require_existing(Path(backup_path), directory=True)

    color_enabled = supports_color()
    print(
        red(
            f"WARNING: this drops database '{name}' and replaces it with the backup in {path}.",
            color_enabled,
        )
    )
    print("This cannot be undone.")
    if not confirm("Continue? [y/N]: "):
        print("Aborted.")
        _log_debug(f"restore of '{name}' from {path} declined")
        return False

    tools = tools or MongoTools.from_config()
    tools.restore(name, path)
    print(f"Database '{name}' restored from {path}")
    return True
