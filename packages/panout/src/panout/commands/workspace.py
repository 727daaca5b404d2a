"""Workspace command - build multi-window layouts, optionally over SSH."""

import logging
from typing import Any

from replkit2.textkit.icons import ICONS

from ..app import app
from ..config import get_config
from ..errors import PanoutError, WorkspaceNotFoundError, markdown_error_response
from ..ssh import bootstrap_command
from ..types import Workspace
from .. import tmux
from ._helpers import pick_layout

logger = logging.getLogger(__name__)


def _run_windows(workspace: Workspace) -> list[str]:
    """Create every window of a workspace and start its panes.

    The first window reuses the current one; each later window is created
    and becomes active before its panes are split.

    Returns:
        One summary line per window
    """
    bootstrap = bootstrap_command(workspace.host, workspace.dir)
    lines = []

    for i, win in enumerate(workspace.windows):
        if i > 0:
            tmux.create_window(win.name)

        layout = pick_layout(win.layout)
        panes = tmux.create_panes(win.panes, layout)

        for pane in panes:
            if bootstrap:
                tmux.send_keys(pane, bootstrap)
            for cmd in win.commands:
                tmux.send_keys(pane, cmd)

        label = win.name or f"window {i + 1}"
        lines.append(f"{label} {ICONS['arrow']} {len(panes)} panes, {layout}")
        logger.debug(f"Workspace window {label}: panes {panes}")

    return lines


@app.command(
    display="markdown",
    typer={"help": "Create the windows of a workspace"},
    fastmcp={"type": "tool", "description": "Create tmux windows and panes for a workspace"},
)
def workspace(state, name: str) -> dict[str, Any]:
    """Run a workspace: one tmux window per entry in ``windows``.

    When the workspace has a ``host``, every pane SSHes to it (and cds to
    ``dir`` when set). Focus returns to the starting window afterwards.

    Args:
        name: Workspace name
    """
    try:
        config = get_config()
        ws = config.get_workspace(name)
        if ws is None:
            available = ", ".join(config.list_workspaces()) or "none"
            return markdown_error_response(f"{WorkspaceNotFoundError(name)}\nAvailable workspaces: {available}")
    except PanoutError as e:
        return markdown_error_response(str(e))

    try:
        start_window = tmux.current_window()
        lines = _run_windows(ws)
        tmux.select_window(start_window)
    except PanoutError as e:
        return markdown_error_response(f"Workspace '{name}' failed: {e}")

    elements = [
        {"type": "heading", "content": f"Workspace {name}", "level": 2},
        {"type": "list", "items": lines, "ordered": False},
    ]
    if ws.host:
        elements.append({"type": "text", "content": f"{ICONS['info']} Connected to {ws.host}"})

    return {
        "elements": elements,
        "frontmatter": {"status": "success", "workspace": name, "windows": len(ws.windows)},
    }
