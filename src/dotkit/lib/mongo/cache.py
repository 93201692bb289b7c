# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Short-lived on-disk cache of database names for shell completion.

Completion runs once per <TAB>, so asking the server every time makes the
shell sluggish. Names are kept in a newline-separated file whose mtime
marks when it was written; within ``CACHE_TTL_SECONDS`` of that write the
file answers completion requests, afterwards the next request queries the
server once and rewrites the file.
"""

import os
import time
from collections.abc import Callable, Iterable
from pathlib import Path

from .._util.fs import atomic_write_text
from .._util.logging_utils import _log_debug
from ..core.config import runtime_root

CACHE_TTL_SECONDS = 10.0
CACHE_FILENAME = "mongo-databases"


class DatabaseNameCache:
    def __init__(
        self,
        path: Path,
        fetch: Callable[[], Iterable[str]],
        *,
        ttl: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.path = path
        self.ttl = ttl
        self._fetch = fetch
        self._clock = clock

    def age(self) -> float | None:
        """Seconds since the cache was last written, or None if it cannot be read."""
        try:
            written = self.path.stat().st_mtime
        except OSError:
            return None
        return self._clock() - written

    def is_fresh(self) -> bool:
        age = self.age()
        return age is not None and age < self.ttl

    def read(self) -> list[str]:
        text = self.path.read_text(encoding="utf-8")
        return [line for line in text.splitlines() if line]

    def write(self, names: Iterable[str]) -> None:
        names = list(names)
        atomic_write_text(self.path, "".join(f"{n}\n" for n in names))
        now = self._clock()
        # mtime is stamped from the injected clock so age() uses a single time source
        os.utime(self.path, (now, now))

    def names(self) -> list[str]:
        """Return cached names while fresh, otherwise fetch, store and return them."""
        if self.is_fresh():
            try:
                names = self.read()
            except FileNotFoundError:
                pass  # removed between stat() and read()
            else:
                _log_debug(f"database name cache hit: {self.path}")
                return names

        _log_debug(f"database name cache miss: {self.path}")
        names = [n for n in self._fetch() if n]
        try:
            self.write(names)
        except OSError as e:
            _log_debug(f"could not write database name cache {self.path}: {e}")
        return names


def database_name_cache_path() -> Path:
    return runtime_root() / CACHE_FILENAME


def default_database_name_cache() -> DatabaseNameCache:
    from .tools import MongoTools

    return DatabaseNameCache(database_name_cache_path(), MongoTools.from_config().list_databases)
