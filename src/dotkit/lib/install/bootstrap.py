# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Link dotfiles into ``$HOME`` and install bundled fonts."""

import shutil
from collections.abc import Callable, Iterable
from functools import partial
from pathlib import Path

from .._util.ansi import ask_yes_no, supports_color, yellow
from .._util.fs import ensure_dir_writable
from .._util.logging_utils import _log_debug
from .._util.process import Runner, run_tool
from ..core.config import DotfilesSettings, get_dotfiles_settings

OVERWRITE_PROMPT = (
    "This may overwrite existing files in your home directory. Are you sure? (y/n) "
)


def link_dotfiles(source_dir: Path, home: Path, names: Iterable[str]) -> list[Path]:
    """Symlink each of *names* from *source_dir* into *home* (``ln -sf`` semantics).

    Existing files and links are replaced. Missing sources and real
    directories in the way are reported and skipped. Returns the links made.
    """
    color_enabled = supports_color()
    linked: list[Path] = []
    for name in names:
        src = source_dir / name
        dst = home / name
        if not src.exists():
            print(yellow(f"Skipping {name}: {src} does not exist", color_enabled))
            continue
        if dst.is_dir() and not dst.is_symlink():
            print(yellow(f"Skipping {name}: {dst} is a directory", color_enabled))
            continue
        if dst.is_symlink() or dst.exists():
            dst.unlink()
        dst.symlink_to(src)
        _log_debug(f"linked {dst} -> {src}")
        linked.append(dst)
    return linked


def install_fonts(fonts_dir: Path, target: Path) -> list[Path]:
    """Copy every file in *fonts_dir* into *target*."""
    if not fonts_dir.is_dir():
        print(f"No fonts directory at {fonts_dir}, skipping fonts")
        return []
    ensure_dir_writable(target, "Fonts")
    copied = []
    for font in sorted(fonts_dir.iterdir()):
        if font.is_file():
            copied.append(Path(shutil.copy2(font, target / font.name)))
    return copied


def pull_dotfiles(settings: DotfilesSettings, runner: Runner = run_tool) -> bool:
    """``git pull`` the dotfiles checkout; a failed pull only warns.

    Only a checkout configured as ``dotfiles.source_dir`` is pulled, never
    whatever repository happens to be the current directory.
    """
    if not settings.source_configured or not (settings.source_dir / ".git").exists():
        return False
    cmd = ["git", "-C", str(settings.source_dir), "pull", "origin", settings.branch]
    result = runner(cmd, check=False)
    if result.returncode != 0:
        _log_debug(f"dotfiles pull failed ({result.returncode}): {settings.source_dir}")
        print(
            yellow(
                f"git pull failed (exit status {result.returncode}), "
                "continuing with the current checkout",
                supports_color(),
            )
        )
        return False
    return True


def bootstrap(
    force: bool = False,
    pull: bool = True,
    home: Path | None = None,
    settings: DotfilesSettings | None = None,
    confirm: Callable[[str], bool] = partial(ask_yes_no, accepted=("y",)),
    runner: Runner = run_tool,
) -> bool:
    """Update the dotfiles checkout, link dotfiles and install fonts.

    Without *force* the user must answer ``y`` first; nothing runs before
    that. Returns False if the user declined.
    """
    settings = settings or get_dotfiles_settings()
    home = home or Path.home()

    if not force and not confirm(OVERWRITE_PROMPT):
        return False

    if pull:
        pull_dotfiles(settings, runner)

    linked = link_dotfiles(settings.source_dir, home, settings.files)
    fonts = install_fonts(settings.fonts_dir, settings.fonts_target)
    print(f"Linked {len(linked)} dotfile(s), installed {len(fonts)} font(s).")
    print("Open a new shell (or run `source ~/.zshrc`) to pick up the changes.")
    return True
