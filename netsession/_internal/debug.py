"""Debug logging to stderr."""

import sys

PREFIX = "[netsession]"


def log_debug(message: str, *, enabled: bool) -> None:
    """Log a debug message to stderr if debug mode is enabled."""
    if enabled:
        print(f"{PREFIX} {message}", file=sys.stderr)
