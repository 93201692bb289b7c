# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Adapter around the MongoDB command-line tools."""

from pathlib import Path

from .._util.process import Runner, run_tool
from ..core.config import get_mongo_settings

LIST_DATABASES_JS = "db.getMongo().getDBNames().join('\\n')"


class MongoTools:
    """``mongodump`` / ``mongorestore`` / shell invocations for one server."""

    def __init__(self, uri: str | None = None, shell: str = "mongosh", runner: Runner = run_tool):
        self.uri = uri
        self.shell = shell
        self._run = runner

    @classmethod
    def from_config(cls) -> "MongoTools":
        settings = get_mongo_settings()
        return cls(uri=settings.uri, shell=settings.shell)

    def _uri_args(self) -> list[str]:
        return [f"--uri={self.uri}"] if self.uri else []

    def export(self, name: str, output_path: Path) -> None:
        self._run(["mongodump", *self._uri_args(), "--db", name, "--out", str(output_path)])

    def restore(self, name: str, backup_path: Path) -> None:
        """Restore *backup_path* into *name*, dropping existing collections first."""
        self._run(
            ["mongorestore", *self._uri_args(), "--drop", "--db", name, str(backup_path)]
        )

    def list_databases(self) -> list[str]:
        cmd = [self.shell]
        if self.uri:
            cmd.append(self.uri)
        cmd += ["--quiet", "--eval", LIST_DATABASES_JS]
        result = self._run(cmd, capture=True)
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]
