"""Cursor navigation over a sway layout tree.

A `Cursor` is a position in the tree: the node, its index among its parent's
children and the cursor of the parent. Tree nodes carry no parent pointers, so
the chain of parent cursors is what makes `ascend()` and `ancestors()` cheap.

Children are addressed with one combined index, tiling children first and
floating children after them. Sibling navigation therefore moves from the last
tiling child straight to the first floating child.

Navigation never raises. Every move returns either `Moved` with the new cursor
or `Blocked` with the unchanged one:

    >>> outcome = Cursor(root).descend().then(Cursor.next_sibling)
    >>> match outcome:
    ...     case Moved(cursor):
    ...         print(cursor.node.name)
    ...     case Blocked(cursor):
    ...         print("stuck at", cursor.node.name)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from .models import LayoutNode

logger = logging.getLogger(__name__)


# =============================================================================
# Navigation outcomes
# =============================================================================

@dataclass(frozen=True)
class Moved:
    """The move succeeded; `cursor` is the new position."""
    cursor: Cursor

    @property
    def ok(self) -> bool:
        return True

    def then(self, step: Callable[[Cursor], Outcome]) -> Outcome:
        """Apply the next move to the new position."""
        return step(self.cursor)


@dataclass(frozen=True)
class Blocked:
    """The move was not possible; `cursor` is the unchanged position."""
    cursor: Cursor

    @property
    def ok(self) -> bool:
        return False

    def then(self, step: Callable[[Cursor], Outcome]) -> Outcome:
        return self


Outcome = Union[Moved, Blocked]


# =============================================================================
# Cursor
# =============================================================================

@dataclass(frozen=True, eq=False, repr=False)
class Cursor:
    """Position in a layout tree.

    Attributes:
        node: Node under the cursor
        index: Index of `node` in the parent's combined child sequence
        parent: Cursor of the parent, None at the root
    """
    node: LayoutNode
    index: int = 0
    parent: Optional[Cursor] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.node is other.node and self.path == other.path

    def __hash__(self) -> int:
        return hash((id(self.node), self.path))

    def __repr__(self) -> str:
        return f"Cursor({self.node.label()}, path={self.path})"

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def path(self) -> Tuple[int, ...]:
        """Child indices leading from the root to this position."""
        indices: List[int] = []
        cursor: Optional[Cursor] = self
        while cursor is not None and cursor.parent is not None:
            indices.append(cursor.index)
            cursor = cursor.parent
        return tuple(reversed(indices))

    @property
    def depth(self) -> int:
        return len(self.path)

    def is_floating(self) -> bool:
        """True if the node is a floating child of its parent."""
        if self.parent is None:
            return False
        return self.index >= len(self.parent.node.nodes)

    def ancestors(self) -> List[Cursor]:
        """Cursors of all ancestors, the immediate parent first and the root last."""
        result: List[Cursor] = []
        cursor = self.parent
        while cursor is not None:
            result.append(cursor)
            cursor = cursor.parent
        return result

    def descend(self) -> Outcome:
        """Move to the first child, or stay put at a leaf."""
        child = self.node.child_at(0)
        if child is None:
            return Blocked(self)
        return Moved(Cursor(child, 0, self))

    def ascend(self) -> Outcome:
        """Move to the parent, or stay put at the root."""
        if self.parent is None:
            return Blocked(self)
        return Moved(self.parent)

    def next_sibling(self) -> Outcome:
        """Move to the next sibling, or stay put at the last one."""
        return self._sibling(self.index + 1)

    def prev_sibling(self) -> Outcome:
        """Move to the previous sibling, or stay put at the first one."""
        if self.index == 0:
            return Blocked(self)
        return self._sibling(self.index - 1)

    def _sibling(self, index: int) -> Outcome:
        if self.parent is None:
            return Blocked(self)
        sibling = self.parent.node.child_at(index)
        if sibling is None:
            return Blocked(self)
        return Moved(Cursor(sibling, index, self.parent))

    def left_most_descendant(self) -> Cursor:
        """Follow first children down until reaching a leaf."""
        cursor = self
        while True:
            outcome = cursor.descend()
            if not outcome.ok:
                return outcome.cursor
            cursor = outcome.cursor

    def walk(self) -> CursorIterator:
        """Depth first, left to right iterator starting at this cursor."""
        return CursorIterator(self)


# =============================================================================
# Depth first traversal
# =============================================================================

class CursorIterator:
    """Depth first, left to right iterator over cursors.

    Children are yielded before their parent and tiling children before
    floating ones. The iterator is single use; create a new one to walk again.
    """

    def __init__(self, start: Cursor):
        self._pending: Outcome = Moved(start.left_most_descendant())

    def __iter__(self) -> CursorIterator:
        return self

    def __next__(self) -> Cursor:
        if not self._pending.ok:
            raise StopIteration
        current = self._pending.cursor
        match current.next_sibling():
            case Moved(sibling):
                self._pending = Moved(sibling.left_most_descendant())
            case Blocked(_):
                # Blocked at the root ends the walk
                self._pending = current.ascend()
        return current


def walk(root: LayoutNode) -> CursorIterator:
    """Iterate over every node of the tree rooted at `root`."""
    return Cursor(root).walk()


def find_focused(root: LayoutNode) -> Optional[Cursor]:
    """Find the focused node in the layout tree.

    Returns:
        Cursor positioned at the focused node, or None if no node is focused
    """
    for cursor in walk(root):
        if cursor.node.focused:
            logger.debug(f"Focused node: {cursor.node.label()} at path {cursor.path}")
            return cursor
    logger.debug("No focused node in layout tree")
    return None
