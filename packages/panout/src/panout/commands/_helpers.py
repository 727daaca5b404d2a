"""Shared helper functions for commands.

PUBLIC API:
  - layout_from_flags: Layout chosen by --vertical / --horizontal, if any
  - pick_layout: Apply layout precedence
  - build_summary: Build "what was sent where" list element
"""

from typing import Any, Optional

from replkit2.textkit.icons import ICONS

from ..types import DEFAULT_LAYOUT, LayoutName

__all__ = ["layout_from_flags", "pick_layout", "build_summary"]


def layout_from_flags(vertical: bool, horizontal: bool) -> Optional[LayoutName]:
    """Layout from command line flags, None when neither flag is set."""
    if vertical:
        return "vertical"
    if horizontal:
        return "horizontal"
    return None


def pick_layout(*candidates: Optional[LayoutName]) -> LayoutName:
    """First layout that is set, in precedence order, else tiled.

    Args:
        *candidates: Layouts from most to least specific (flag, bundle, defaults)
    """
    for layout in candidates:
        if layout:
            return layout
    return DEFAULT_LAYOUT


def build_summary(dispatched: list[tuple[int, list[str]]]) -> dict[str, Any]:
    """Build list element showing commands per tmux pane.

    Args:
        dispatched: (tmux pane index, commands) pairs that were sent
    """
    items = []
    for pane, commands in dispatched:
        joined = "; ".join(commands)
        items.append(f"pane {pane} {ICONS['arrow']} `{joined}`")
    return {"type": "list", "items": items, "ordered": False}
