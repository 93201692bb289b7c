# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Version and branch information for dotkit (used by ``dotkit --version``)."""

import json
import subprocess
from importlib import metadata
from pathlib import Path


def get_version_info() -> tuple[str, str | None]:
    """Return ``(version, branch)``.

    The branch is reported for VCS installs (PEP 610 ``direct_url.json``) and
    for source checkouts, where it is read from git. Installs from PyPI or a
    tarball report the version only.
    """
    # version.py -> core -> lib -> dotkit -> src -> repo
    repo_root = Path(__file__).parent.parent.parent.parent.parent

    from dotkit import __version__ as version

    revision = _get_pep610_revision()
    if revision:
        return version, revision

    if not (repo_root / "pyproject.toml").exists():
        return version, None

    try:
        result = subprocess.run(
            ["git", "branch", "--show-current"],
            capture_output=True,
            text=True,
            timeout=1,
            cwd=str(repo_root),
        )
    except (OSError, subprocess.TimeoutExpired):
        return version, None
    branch = result.stdout.strip() if result.returncode == 0 else ""
    return version, branch or None


def _get_pep610_revision(dist_name: str = "dotkit") -> str | None:
    """Return VCS revision from PEP 610 metadata, if available."""
    try:
        direct_url = metadata.distribution(dist_name).read_text("direct_url.json")
    except (metadata.PackageNotFoundError, OSError, UnicodeDecodeError):
        return None
    if not direct_url:
        return None

    try:
        data = json.loads(direct_url)
    except json.JSONDecodeError:
        return None

    vcs_info = data.get("vcs_info")
    if not isinstance(vcs_info, dict):
        return None

    for key in ("requested_revision", "commit_id"):
        value = vcs_info.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def format_version_string(version: str, branch: str | None) -> str:
    """Format as ``"0.1.0"`` or ``"0.1.0 [feature-branch]"``."""
    if branch:
        return f"{version} [{branch}]"
    return version
