# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Shared argcomplete completers and helpers for CLI commands."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from typing import Any

from argcomplete.completers import DirectoriesCompleter, FilesCompleter

from ...lib.mongo.cache import default_database_name_cache

complete_directories = DirectoriesCompleter()
complete_files = FilesCompleter()


def complete_database_names(
    prefix: str, parsed_args: argparse.Namespace, **kwargs: object
) -> list[str]:  # pragma: no cover - shell integration
    """Return database names matching *prefix*, served from the short-lived cache."""
    try:
        names = default_database_name_cache().names()
    except (OSError, SystemExit):
        return []
    if prefix:
        names = [n for n in names if n.startswith(prefix)]
    return names


def set_completer(action: argparse.Action, fn: Callable[..., Any]) -> None:
    """Attach an argcomplete completer to *action*."""
    action.completer = fn  # type: ignore[attr-defined]
