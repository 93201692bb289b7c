"""ANSI color and prompt helpers shared by the library and the CLI."""

import os
import sys
from collections.abc import Callable, Iterable

AFFIRMATIVE = ("y", "yes")


def supports_color() -> bool:
    """Check if stdout supports color output.

    NO_COLOR always wins. FORCE_COLOR (when set and not ``"0"``) forces color
    on even when stdout is not a TTY. Otherwise falls back to ``isatty()``.
    """
    if "NO_COLOR" in os.environ:
        return False
    force = os.environ.get("FORCE_COLOR")
    if force is not None and force != "0":
        return True
    return sys.stdout.isatty()


def color(text: str, code: str, enabled: bool) -> str:
    """Wrap *text* in the ANSI SGR *code* when *enabled* is True."""
    if not enabled:
        return text
    return f"\x1b[{code}m{text}\x1b[0m"


def red(text: str, enabled: bool) -> str:
    return color(text, "31", enabled)


def green(text: str, enabled: bool) -> str:
    return color(text, "32", enabled)


def yellow(text: str, enabled: bool) -> str:
    return color(text, "33", enabled)


def gray(text: str, enabled: bool) -> str:
    return color(text, "90", enabled)


def yes_no(value: bool, enabled: bool) -> str:
    """Return green ``"yes"`` or red ``"no"`` based on *value* when *enabled*."""
    return color("yes" if value else "no", "32" if value else "31", enabled)


def ask_yes_no(
    prompt: str,
    accepted: Iterable[str] = AFFIRMATIVE,
    read: Callable[[str], str] | None = None,
) -> bool:
    """Prompt once and return True only for an answer in *accepted*.

    Matching is case-insensitive and ignores surrounding whitespace. EOF
    (e.g. stdin closed) counts as a refusal.
    """
    try:
        answer = (read or input)(prompt)
    except EOFError:
        print()
        return False
    return answer.strip().lower() in {a.lower() for a in accepted}
