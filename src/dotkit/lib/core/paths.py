# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Platform-aware path resolution for config, state, and runtime directories."""

import os
from pathlib import Path

from platformdirs import user_cache_dir, user_config_dir, user_data_dir

APP_NAME = "dotkit"


def config_root() -> Path:
    """
    Base directory for configuration (config.yml).

    Priority:
      1. DOTKIT_CONFIG_DIR
      2. platformdirs user config dir (~/.config/dotkit on Linux)
    """
    env = os.getenv("DOTKIT_CONFIG_DIR")
    if env:
        return Path(env).expanduser()
    return Path(user_config_dir(APP_NAME))


def state_root() -> Path:
    """
    Writable state (debug log).

    Priority:
      1. DOTKIT_STATE_DIR
      2. platformdirs user data dir (${XDG_DATA_HOME:-~/.local/share}/dotkit)
    """
    env = os.getenv("DOTKIT_STATE_DIR")
    if env:
        return Path(env).expanduser()
    return Path(user_data_dir(APP_NAME))


def runtime_root() -> Path:
    """
    Transient runtime bits (completion caches).

    Priority:
      1. DOTKIT_RUNTIME_DIR
      2. platformdirs user cache dir (~/.cache/dotkit on Linux)
    """
    env = os.getenv("DOTKIT_RUNTIME_DIR")
    if env:
        return Path(env).expanduser()
    return Path(user_cache_dir(APP_NAME))
