"""Navigation planner.

Tabbed and stacked containers show one child at a time, so `focus left`
inside them only cycles through the tabs. To reach the container that is
physically to the left, focus first has to leave every enclosing tabbed or
stacked container:

    focus parent; focus parent; focus left

The planner walks the ancestors of the focused node and emits one
`focus parent` per ancestor until it reaches a split or output ancestor,
whose children are already laid out side by side.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .constants import NavDefaults
from .cursor import Cursor
from .models import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FocusPlan:
    """Ordered commands for one focus change.

    Attributes:
        direction: Requested direction
        focused: Cursor at the focused node, None if nothing is focused
        commands: Escape commands first, the directional command last
    """
    direction: Direction
    focused: Optional[Cursor] = None
    commands: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.commands

    @property
    def escape_count(self) -> int:
        return sum(1 for cmd in self.commands if cmd == NavDefaults.ESCAPE_COMMAND)

    @property
    def batch(self) -> str:
        """Commands joined into a single RUN_COMMAND payload."""
        return join_commands(self.commands)


def escape_commands(focused: Cursor) -> List[str]:
    """Return one escape command per non-spatial ancestor, nearest first.

    The walk stops at the first ancestor whose layout is split or output.
    """
    commands: List[str] = []
    for ancestor in focused.ancestors():
        if ancestor.node.layout.is_spatial:
            logger.debug(
                f"Stopping at {ancestor.node.label()} (layout: {ancestor.node.layout.value})"
            )
            break
        commands.append(NavDefaults.ESCAPE_COMMAND)
    return commands


def plan_focus(focused: Optional[Cursor], direction: Direction) -> FocusPlan:
    """Plan the commands moving focus in `direction`.

    Args:
        focused: Cursor at the focused node, or None
        direction: Requested direction

    Returns:
        FocusPlan; empty when there is no focused node
    """
    if focused is None:
        return FocusPlan(direction=direction)

    commands = escape_commands(focused)
    commands.append(direction.command)
    logger.debug(f"Planned {len(commands) - 1} escape(s) before '{direction.command}'")
    return FocusPlan(direction=direction, focused=focused, commands=commands)


def join_commands(commands: List[str]) -> str:
    """Join commands with the sway command separator, preserving order."""
    return NavDefaults.COMMAND_SEPARATOR.join(commands)
