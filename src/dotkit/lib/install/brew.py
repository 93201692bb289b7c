# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Install the command-line toolset with Homebrew."""

from collections.abc import Callable
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from .._util.ansi import green, red, supports_color
from .._util.process import Runner, run_tool, tool_available
from ..core.config import get_brew_overrides


@dataclass(frozen=True)
class Formula:
    name: str
    options: tuple[str, ...] = ()


@dataclass
class BrewPlan:
    taps: list[str] = field(default_factory=list)
    formulae: list[Formula] = field(default_factory=list)
    links: dict[str, str] = field(default_factory=dict)


def _parse_formula(entry: Any) -> Formula:
    if isinstance(entry, str):
        return Formula(entry)
    if isinstance(entry, dict) and entry.get("name"):
        options = entry.get("options") or []
        return Formula(str(entry["name"]), tuple(str(o) for o in options))
    raise SystemExit(f"Invalid formula entry: {entry!r}")


def parse_plan(data: dict[str, Any]) -> BrewPlan:
    links = data.get("links") or {}
    return BrewPlan(
        taps=[str(t) for t in data.get("taps") or []],
        formulae=[_parse_formula(f) for f in data.get("formulae") or []],
        links={str(k): str(v) for k, v in links.items()},
    )


def load_plan() -> BrewPlan:
    """Bundled ``resources/brew.yml`` with ``taps``/``formulae``/``links`` from config on top."""
    text = (resources.files("dotkit") / "resources" / "brew.yml").read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    for key, value in get_brew_overrides().items():
        if key in ("taps", "formulae", "links"):
            data[key] = value
    return parse_plan(data)


def _link_into_prefix(prefix: Path, links: dict[str, str]) -> None:
    bin_dir = prefix / "bin"
    for name, target in links.items():
        link = bin_dir / name
        if link.exists() or link.is_symlink():
            continue
        if not (bin_dir / target).exists():
            print(f"Skipping {name} link: {bin_dir / target} not found")
            continue
        link.symlink_to(bin_dir / target)


def install_toolset(
    plan: BrewPlan | None = None,
    runner: Runner = run_tool,
    available: Callable[[str], bool] = tool_available,
) -> list[str]:
    """Update Homebrew, install every tap and formula, then clean up.

    A failing formula does not stop the run; failures are reported at the
    end and make the command exit with status 1. Returns installed names.
    """
    if not available("brew"):
        raise SystemExit("brew not found. Run 'dotkit setup' first.")
    plan = plan or load_plan()

    runner(["brew", "update"])
    runner(["brew", "upgrade"])
    prefix = Path(runner(["brew", "--prefix"], capture=True).stdout.strip())

    failed: list[str] = []
    for tap in plan.taps:
        if runner(["brew", "tap", tap], check=False).returncode != 0:
            failed.append(f"tap {tap}")

    installed: list[str] = []
    for formula in plan.formulae:
        result = runner(["brew", "install", formula.name, *formula.options], check=False)
        if result.returncode == 0:
            installed.append(formula.name)
        else:
            failed.append(formula.name)

    _link_into_prefix(prefix, plan.links)
    runner(["brew", "cleanup"])

    color_enabled = supports_color()
    print(green(f"Installed {len(installed)} formula(e).", color_enabled))
    if failed:
        print(red(f"Failed: {', '.join(failed)}", color_enabled))
        raise SystemExit(1)
    return installed
