"""Data models for sway-nav

Pydantic models for the replies of the sway IPC `GET_TREE` and `RUN_COMMAND`
messages (see `man sway-ipc`), plus the navigation direction enum.

All tree models are frozen: a decoded layout tree is never modified.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .constants import NavDefaults


# =============================================================================
# Enumerations
# =============================================================================

class NodeType(str, Enum):
    """Node type as reported in the `type` field"""
    ROOT = "root"
    OUTPUT = "output"
    WORKSPACE = "workspace"
    CON = "con"
    FLOATING_CON = "floating_con"


class Border(str, Enum):
    """Border style of a node"""
    NONE = "none"
    NORMAL = "normal"
    PIXEL = "pixel"
    CSD = "csd"


class Layout(str, Enum):
    """Layout of a node's children.

    Views report `none`; outputs report `output`.
    """
    NONE = "none"
    SPLITH = "splith"
    SPLITV = "splitv"
    STACKED = "stacked"
    TABBED = "tabbed"
    OUTPUT = "output"

    @property
    def is_spatial(self) -> bool:
        """True when all children are visible side by side."""
        return self.value in NavDefaults.SPATIAL_LAYOUTS


class Orientation(str, Enum):
    NONE = "none"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class FullScreenMode(IntEnum):
    """0 means none, 1 means full workspace, 2 means global fullscreen"""
    NONE = 0
    FULL_WORKSPACE = 1
    GLOBAL_FULLSCREEN = 2


class ApplicationInhibitor(str, Enum):
    NONE = "none"
    ENABLED = "enabled"


class UserInhibitor(str, Enum):
    NONE = "none"
    FOCUS = "focus"
    FULLSCREEN = "fullscreen"
    OPEN = "open"
    VISIBLE = "visible"


class Direction(str, Enum):
    """Direction accepted by the focus command"""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def command(self) -> str:
        """Sway command moving focus in this direction, e.g. `focus left`."""
        return f"{NavDefaults.FOCUS_COMMAND_PREFIX} {self.value}"


# =============================================================================
# Tree
# =============================================================================

class Rect(BaseModel):
    """Geometry reported by sway"""
    model_config = ConfigDict(frozen=True)

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


class InhibitorState(BaseModel):
    """State of the application and user idle inhibitors of a view"""
    model_config = ConfigDict(frozen=True)

    application: ApplicationInhibitor
    user: UserInhibitor


class LayoutNode(BaseModel):
    """
    One node of the layout tree returned by `GET_TREE`.

    Only `nodes`, `floating_nodes`, `layout` and `focused` drive navigation;
    the remaining fields are decoded so the model mirrors the full reply.
    Every field has a default so partial payloads decode.

    Children are addressed with a single combined index: tiling children
    first, then floating children.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = 0
    """Internal unique ID for this node"""

    name: Optional[str] = None
    """Output name, workspace name or window title"""

    node_type: NodeType = Field(default=NodeType.ROOT, alias="type")
    border: Border = Border.NONE
    current_border_width: int = 0

    layout: Layout = Layout.NONE
    """Layout of this node's children"""

    orientation: Orientation = Orientation.NONE
    percent: Optional[float] = None
    rect: Rect = Field(default_factory=Rect)
    window_rect: Rect = Field(default_factory=Rect)
    deco_rect: Rect = Field(default_factory=Rect)
    geometry: Rect = Field(default_factory=Rect)
    urgent: bool = False
    sticky: bool = False
    marks: Tuple[str, ...] = ()

    focused: bool = False
    """Whether this node is focused by the default seat"""

    focus: Tuple[int, ...] = ()
    """Child node IDs in focus order"""

    nodes: Tuple[LayoutNode, ...] = ()
    """Tiling children"""

    floating_nodes: Tuple[LayoutNode, ...] = ()
    """Floating children"""

    representation: Optional[str] = None
    fullscreen_mode: FullScreenMode = FullScreenMode.NONE

    # Views only
    app_id: Optional[str] = None
    pid: Optional[int] = None
    visible: Optional[bool] = None
    shell: Optional[str] = None
    inhibit_idle: Optional[bool] = None
    idle_inhibitors: Optional[InhibitorState] = None

    @property
    def all_children(self) -> Tuple[LayoutNode, ...]:
        """Tiling children followed by floating children."""
        return self.nodes + self.floating_nodes

    @property
    def is_leaf(self) -> bool:
        return not self.nodes and not self.floating_nodes

    def child_at(self, index: int) -> Optional[LayoutNode]:
        """Return the child at `index` in the combined child sequence.

        Args:
            index: Position counting tiling children first, then floating

        Returns:
            The child node, or None when `index` is out of range
        """
        if index < 0:
            return None
        if index < len(self.nodes):
            return self.nodes[index]
        index -= len(self.nodes)
        if index < len(self.floating_nodes):
            return self.floating_nodes[index]
        return None

    def label(self) -> str:
        """Short human readable description used in logs and displays."""
        name = self.name if self.name is not None else ""
        return f"{self.node_type.value}#{self.id} {name!r}"


# =============================================================================
# Command replies
# =============================================================================

class CommandResult(BaseModel):
    """One entry of the `RUN_COMMAND` reply.

    Sway answers with one entry per `;`-separated command, in order.
    """
    model_config = ConfigDict(frozen=True)

    success: bool
    parse_error: Optional[bool] = None
    """True when the command was unknown or could not be parsed"""

    error: Optional[str] = None
    """Human readable error message in case of failure"""
