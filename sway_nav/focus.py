"""Focus change service.

Ties the pieces together: fetch the tree, locate focus, plan the batch,
submit it once and check every reply.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .connection import SwayConnection
from .cursor import find_focused
from .errors import CommandRejected
from .models import CommandResult, Direction
from .planner import FocusPlan, plan_focus

logger = logging.getLogger(__name__)


@dataclass
class FocusOutcome:
    """Result of one focus change.

    Attributes:
        plan: The planned commands
        results: Replies from sway, empty if nothing was submitted
        submitted: Whether the batch was sent to sway
    """
    plan: FocusPlan
    results: List[CommandResult] = field(default_factory=list)
    submitted: bool = False

    @property
    def no_focus(self) -> bool:
        return self.plan.focused is None

    def to_dict(self) -> Dict[str, Any]:
        focused = self.plan.focused
        return {
            "direction": self.plan.direction.value,
            "focused": None if focused is None else {
                "id": focused.node.id,
                "name": focused.node.name,
                "floating": focused.is_floating(),
                "depth": focused.depth,
            },
            "commands": list(self.plan.commands),
            "batch": self.plan.batch,
            "submitted": self.submitted,
            "results": [r.model_dump() for r in self.results],
        }


def check_results(commands: Sequence[str], results: Sequence[CommandResult]) -> None:
    """Fail on the first unsuccessful reply.

    Commands before the failing one stay applied; sway does not roll back.

    Raises:
        CommandRejected: For the first result with success=False
    """
    for index, result in enumerate(results):
        if not result.success:
            command: Optional[str] = commands[index] if index < len(commands) else None
            logger.warning(f"Command {index} ({command}) failed: {result.error}")
            raise CommandRejected(index, command, result.error, result.parse_error)


def change_focus(connection: SwayConnection, direction: Direction, dry_run: bool = False) -> FocusOutcome:
    """Move focus in `direction`, skipping tabbed and stacked siblings.

    Args:
        connection: Sway connection
        direction: Requested direction
        dry_run: Plan only, do not submit

    Returns:
        FocusOutcome; `no_focus` is set when the tree has no focused node

    Raises:
        TransportError: If talking to sway fails
        CommandRejected: If sway reports a command as unsuccessful
    """
    tree = connection.fetch_tree()
    plan = plan_focus(find_focused(tree), direction)

    if plan.is_empty:
        logger.info("No focused node, nothing to do")
        return FocusOutcome(plan=plan)

    if dry_run:
        logger.info(f"Dry run, not submitting: {plan.batch}")
        return FocusOutcome(plan=plan)

    results = connection.submit_commands(plan.batch)
    check_results(plan.commands, results)
    logger.info(f"Focus moved {direction.value} with {plan.escape_count} escape(s)")
    return FocusOutcome(plan=plan, results=results, submitted=True)
