"""Environment variable operations for argkit."""

import os
import sys

TRUTHY_VALUES = ("1", "true", "yes", "on")


def debug_log(message: str) -> None:
    """Log debug message when ARGKIT_DEBUG=1 is set."""
    if EnvironmentHelper.is_debug_enabled():
        print(f"[DEBUG] {message}", file=sys.stderr, flush=True)


class EnvironmentHelper:
    """Utility class for environment variable operations."""

    @staticmethod
    def is_debug_enabled() -> bool:
        """Check if debug output was requested through ARGKIT_DEBUG."""
        return os.environ.get("ARGKIT_DEBUG", "").strip().lower() in TRUTHY_VALUES
