"""Utility functions for logging."""


def _log_debug(message: str) -> None:
    """Append a timestamped debug line to ``state_root()/dotkit.log``.

    Best-effort: IO errors are ignored so logging never changes the outcome
    of a command.
    """
    try:
        import time

        from ..core.config import state_root

        log_path = state_root() / "dotkit.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")
    except (OSError, SystemExit):
        pass
