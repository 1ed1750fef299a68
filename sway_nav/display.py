"""Layout tree display.

Renders the layout tree with Rich, marking the focused node, the path to it
and floating nodes. Useful to see which ancestors `focus` will escape.
"""

from typing import Optional, Set

from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.tree import Tree as RichTree

from .cursor import Cursor, find_focused
from .models import LayoutNode


def display_tree(root: LayoutNode, console: Optional[Console] = None) -> None:
    """Print the layout tree.

    Args:
        root: Layout tree root
        console: Optional Rich Console instance
    """
    console = console or Console()

    focused = find_focused(root)
    focus_path: Set[Cursor] = set()
    if focused is not None:
        focus_path = {focused, *focused.ancestors()}

    rich_tree = RichTree("[bold cyan]Sway Layout Tree[/bold cyan]", guide_style="dim")
    _build_tree(Cursor(root), rich_tree, focus_path)

    title = "[bold green]sway-nav[/bold green]"
    if focused is None:
        title += " (no focused node)"
    console.print(Panel(rich_tree, title=title, border_style="green", padding=(0, 1)))


def _build_tree(cursor: Cursor, parent_node: RichTree, focus_path: Set[Cursor]) -> None:
    """Add `cursor` and its subtree below `parent_node`."""
    node = parent_node.add(_format_node_label(cursor, cursor in focus_path))

    child = cursor.descend()
    while child.ok:
        _build_tree(child.cursor, node, focus_path)
        child = child.cursor.next_sibling()


def _format_node_label(cursor: Cursor, on_focus_path: bool) -> Text:
    """Format node label for display.

    Format: type #id "name" [layout] (floating) ◀ focused
    """
    node = cursor.node
    label = Text()
    label.append(node.node_type.value, style="blue")
    label.append(f" #{node.id}", style="dim")
    if node.name:
        label.append(f" \"{node.name}\"", style="bold" if on_focus_path else "")
    if not node.is_leaf:
        layout_style = "green" if node.layout.is_spatial else "yellow"
        label.append(f" [{node.layout.value}]", style=layout_style)
    if cursor.is_floating():
        label.append(" (floating)", style="magenta")
    if node.focused:
        label.append(" ◀ focused", style="bold red")
    return label
