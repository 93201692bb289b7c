"""dotkit package.

Modules:
- dotkit.cli: CLI entry point package (dotkit)
- dotkit.lib.core: Configuration, paths, version
- dotkit.lib.tools: Shell helpers (archives, certificates, sizes, DNS, ...)
- dotkit.lib.mongo: Database dump/restore and the name completion cache
- dotkit.lib.install: Dotfile bootstrap, Homebrew formulae, first-run setup
- dotkit.lib._util: Internal helpers (processes, fs, colors, logging)
"""

__all__ = ["cli", "lib"]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import version

    __version__ = version("dotkit")
except Exception:
    # Fallback for development mode when package is not installed
    try:
        import tomllib
        from pathlib import Path

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                pyproject_data = tomllib.load(f)
                __version__ = pyproject_data["tool"]["poetry"]["version"]
        else:
            __version__ = "unknown"
    except Exception:
        __version__ = "unknown"
