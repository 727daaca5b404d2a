"""Bundle command - create panes and run a bundle's commands in them."""

import logging
from typing import Any

from replkit2.textkit.icons import ICONS

from ..app import app
from ..config import get_config
from ..errors import PanoutError, markdown_error_response
from ..resolver import resolve_with_panes
from .. import tmux
from ._helpers import build_summary, layout_from_flags, pick_layout

logger = logging.getLogger(__name__)


@app.command(
    display="markdown",
    typer={"help": "Create panes and run a bundle (group.name)"},
    fastmcp={"type": "tool", "description": "Create tmux panes and run a bundle's commands"},
)
def bundle(
    state,
    path: str,
    num: int = None,
    vertical: bool = False,
    horizontal: bool = False,
) -> dict[str, Any]:
    """Run a bundle in the current tmux window.

    References inside the bundle are expanded first, then every pane gets
    its commands in order.

    Args:
        path: Bundle to run (group.name)
        num: Number of panes. Defaults to the highest pane the bundle uses + 1.
        vertical: Side-by-side panes
        horizontal: Stacked panes
    """
    if num is not None and num < 1:
        return markdown_error_response(f"Pane count must be at least 1 (got {num})")

    try:
        config = get_config()
        pane_commands = resolve_with_panes(config, path)
    except PanoutError as e:
        return markdown_error_response(str(e))

    # Layout precedence: flag > bundle > defaults > tiled
    entry = config.get_bundle(path)
    layout = pick_layout(
        layout_from_flags(vertical, horizontal),
        entry.layout if entry else None,
        config.defaults.layout,
    )

    if num is None:
        num = max((pane for pane, _ in pane_commands), default=0) + 1

    try:
        indices = tmux.create_panes(num, layout)
    except PanoutError as e:
        return markdown_error_response(f"Failed to create panes: {e}")

    elements = [{"type": "heading", "content": f"Running {path}", "level": 2}]
    elements.append({"type": "text", "content": f"{ICONS['success']} {len(indices)} panes, {layout} layout"})

    dispatched = []
    skipped = []
    for pane, commands in pane_commands:
        if pane >= len(indices):
            logger.warning(f"{path}: pane {pane} does not exist ({len(indices)} panes), skipping")
            skipped.append(pane)
            continue

        actual_pane = indices[pane]
        try:
            for cmd in commands:
                tmux.send_keys(actual_pane, cmd)
        except PanoutError as e:
            return markdown_error_response(str(e))
        dispatched.append((actual_pane, commands))

    if dispatched:
        elements.append(build_summary(dispatched))
    for pane in skipped:
        elements.append({"type": "text", "content": f"{ICONS['error']} pane {pane} skipped, only {len(indices)} panes"})

    return {
        "elements": elements,
        "frontmatter": {
            "status": "success" if not skipped else "partial",
            "bundle": path,
            "panes": len(indices),
            "layout": layout,
        },
    }
