# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import os
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml  # pip install pyyaml

from .paths import (
    config_root as _config_root_base,
    runtime_root as _runtime_root_base,
    state_root as _state_root_base,
)

DEFAULT_DOTFILES = (".aliases", ".exports", ".functions", ".zshrc")

# ---------- Global config ----------


def global_config_search_paths() -> list[Path]:
    """Return the ordered list of paths that will be checked for global config.

    Behavior matches global_config_path():
    - If DOTKIT_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, check in order:
        1) <config_root>/config.yml (DOTKIT_CONFIG_DIR or ~/.config/dotkit)
        2) sys.prefix/etc/dotkit/config.yml
        3) /etc/dotkit/config.yml
    """
    env_file = os.environ.get("DOTKIT_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    user_cfg = _config_root_base() / "config.yml"
    sp_cfg = Path(sys.prefix) / "etc" / "dotkit" / "config.yml"
    etc_cfg = Path("/etc/dotkit/config.yml")
    return [user_cfg, sp_cfg, etc_cfg]


def global_config_path() -> Path:
    """Global config file path (first existing search path wins).

    An explicit DOTKIT_CONFIG_FILE is returned even if missing so the user
    sees where dotkit is looking. If nothing exists, the last candidate
    (/etc/dotkit/config.yml) is returned.
    """
    candidates = global_config_search_paths()
    if len(candidates) == 1:
        return candidates[0]

    for c in candidates:
        if c.is_file():
            return c.resolve()
    return candidates[-1]


def load_global_config() -> dict[str, Any]:
    cfg_path = global_config_path()
    if not cfg_path.is_file():
        return {}
    try:
        data = yaml.safe_load(cfg_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise SystemExit(f"Invalid config file {cfg_path}: {e}")
    if not isinstance(data, dict):
        return {}
    return data


def get_global_section(key: str) -> dict[str, Any]:
    """Return a top-level section from the global config, defaulting to ``{}``.

    If the value under *key* is not a dict (e.g. the user wrote ``mongo: "oops"``),
    returns ``{}`` so callers can keep using ``.get()``.
    """
    value = load_global_config().get(key, {})
    if not isinstance(value, dict):
        return {}
    return value


# ---------- Path resolution ----------


def _resolve_path(
    env_var: str | None,
    config_key: tuple[str, str] | None,
    default: Callable[[], Path],
) -> Path:
    """Resolve a path: env var → global config → computed default."""
    if env_var:
        env = os.environ.get(env_var)
        if env:
            return Path(env).expanduser().resolve()

    if config_key:
        val = get_global_section(config_key[0]).get(config_key[1])
        if val:
            return Path(str(val)).expanduser().resolve()

    return default().resolve()


def state_root() -> Path:
    """Writable state directory (debug log).

    Precedence: DOTKIT_STATE_DIR, then ``paths.state_root`` in the global
    config, then the platformdirs default.
    """
    return _resolve_path("DOTKIT_STATE_DIR", ("paths", "state_root"), _state_root_base)


def runtime_root() -> Path:
    """Directory for short-lived caches such as the database-name cache."""
    return _resolve_path("DOTKIT_RUNTIME_DIR", ("paths", "runtime_root"), _runtime_root_base)


# ---------- Sections ----------


@dataclass(frozen=True)
class DotfilesSettings:
    source_dir: Path
    files: tuple[str, ...]
    fonts_dir: Path
    fonts_target: Path
    branch: str
    # True only when dotfiles.source_dir is set in the config file
    source_configured: bool = False


def _default_fonts_target() -> Path:
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Fonts"
    return Path.home() / ".local" / "share" / "fonts"


def get_dotfiles_settings() -> DotfilesSettings:
    section = get_global_section("dotfiles")
    configured_source = section.get("source_dir")
    source_dir = Path(str(configured_source or Path.cwd())).expanduser().resolve()

    files = section.get("files")
    if not isinstance(files, list) or not files:
        files = list(DEFAULT_DOTFILES)

    fonts_dir = Path(str(section.get("fonts_dir") or "fonts")).expanduser()
    if not fonts_dir.is_absolute():
        fonts_dir = source_dir / fonts_dir

    target = section.get("fonts_target")
    fonts_target = Path(str(target)).expanduser() if target else _default_fonts_target()

    return DotfilesSettings(
        source_dir=source_dir,
        files=tuple(str(f) for f in files),
        fonts_dir=fonts_dir,
        fonts_target=fonts_target,
        branch=str(section.get("branch") or "master"),
        source_configured=bool(configured_source),
    )


@dataclass(frozen=True)
class MongoSettings:
    uri: str | None
    shell: str


def get_mongo_settings() -> MongoSettings:
    section = get_global_section("mongo")
    uri = section.get("uri")
    return MongoSettings(
        uri=str(uri) if uri else None,
        shell=str(section.get("shell") or "mongosh"),
    )


def get_brew_overrides() -> dict[str, Any]:
    """Return the ``brew`` config section (``taps``/``formulae`` overrides)."""
    return get_global_section("brew")


def get_homebrew_install_url() -> str:
    url = get_global_section("setup").get("homebrew_install_url")
    return str(url) if url else "https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh"
