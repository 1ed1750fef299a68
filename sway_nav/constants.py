"""Centralized constants for sway-nav.

Single source of truth for the socket environment variable and the command
vocabulary sent to sway.
"""

from typing import Final, FrozenSet


class NavDefaults:
    """Navigation defaults.

    Example:
        from .constants import NavDefaults

        batch = NavDefaults.COMMAND_SEPARATOR.join(commands)
    """

    # Environment variable sway exports with its IPC socket path
    SOCKET_ENV_VAR: Final[str] = "SWAYSOCK"

    # Command vocabulary
    ESCAPE_COMMAND: Final[str] = "focus parent"
    FOCUS_COMMAND_PREFIX: Final[str] = "focus"
    COMMAND_SEPARATOR: Final[str] = "; "

    # Layout values whose children are arranged side by side on screen
    SPATIAL_LAYOUTS: Final[FrozenSet[str]] = frozenset({"splith", "splitv", "output"})
