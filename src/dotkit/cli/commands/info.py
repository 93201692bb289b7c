# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Informational CLI command: config overview."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from ...lib._util.ansi import gray, supports_color, yes_no
from ...lib.core.config import (
    get_dotfiles_settings,
    get_mongo_settings,
    global_config_path,
    global_config_search_paths,
    runtime_root,
    state_root,
)
from ...lib.mongo.cache import CACHE_TTL_SECONDS, database_name_cache_path


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the config overview subcommand."""
    subparsers.add_parser("config", help="Show configuration, dotfiles and cache paths")


def dispatch(args: argparse.Namespace) -> bool:
    if args.cmd == "config":
        _print_config()
        return True
    return False


def _path_line(label: str, path: Path, enabled: bool, *, directory: bool = False) -> str:
    exists = path.is_dir() if directory else path.is_file()
    return f"- {label}: {gray(str(path), enabled)} (exists: {yes_no(exists, enabled)})"


def _print_config() -> None:
    """Display configuration, dotfiles and writable paths."""
    color_enabled = supports_color()

    print("Configuration (read):")
    print(_path_line("Global config file", global_config_path(), color_enabled))
    print("- Global config search order:")
    for p in global_config_search_paths():
        print(f"  • {gray(str(p), color_enabled)} (exists: {yes_no(p.is_file(), color_enabled)})")

    dotfiles = get_dotfiles_settings()
    print("Dotfiles:")
    print(_path_line("Source dir", dotfiles.source_dir, color_enabled, directory=True))
    for name in dotfiles.files:
        print(
            f"  • {name} "
            f"(exists: {yes_no((dotfiles.source_dir / name).exists(), color_enabled)})"
        )
    print(_path_line("Fonts dir", dotfiles.fonts_dir, color_enabled, directory=True))
    print(f"- Fonts target: {gray(str(dotfiles.fonts_target), color_enabled)}")

    mongo = get_mongo_settings()
    print("MongoDB:")
    print(f"- URI: {gray(mongo.uri or '(tool default)', color_enabled)}")
    print(f"- Shell: {gray(mongo.shell, color_enabled)}")

    print("Writable locations (write):")
    print(_path_line("State root", state_root(), color_enabled, directory=True))
    print(_path_line("Debug log", state_root() / "dotkit.log", color_enabled))
    print(_path_line("Runtime root", runtime_root(), color_enabled, directory=True))
    print(
        _path_line("Database name cache", database_name_cache_path(), color_enabled)
        + f" (ttl: {CACHE_TTL_SECONDS:g}s)"
    )

    print("Environment overrides (if set):")
    for var in (
        "DOTKIT_CONFIG_FILE",
        "DOTKIT_CONFIG_DIR",
        "DOTKIT_STATE_DIR",
        "DOTKIT_RUNTIME_DIR",
        "XDG_DATA_HOME",
        "XDG_CONFIG_HOME",
    ):
        val = os.environ.get(var)
        if val is not None:
            print(f"- {var}={gray(val, color_enabled)}")
