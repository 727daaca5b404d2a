"""Resolve command - show what a bundle expands to without touching tmux."""

from typing import Any

from ..app import app
from ..config import get_config
from ..errors import PanoutError, markdown_error_response
from ..resolver import resolve_bundle, resolve_with_panes


@app.command(
    display="markdown",
    typer={"help": "Show the commands a bundle expands to"},
    fastmcp={"type": "tool", "description": "Expand a bundle's @references without running anything"},
)
def resolve(state, path: str, by_pane: bool = False) -> dict[str, Any]:
    """Expand a bundle's references and show the resulting commands.

    Args:
        path: Bundle to expand (group.name)
        by_pane: Group commands by target pane
    """
    try:
        config = get_config()
        if by_pane:
            pane_commands = resolve_with_panes(config, path)
        else:
            commands = resolve_bundle(config, path)
    except PanoutError as e:
        return markdown_error_response(str(e))

    elements: list[dict[str, Any]] = [{"type": "heading", "content": path, "level": 2}]

    if by_pane:
        for pane, cmds in pane_commands:
            elements.append({"type": "heading", "content": f"Pane {pane}", "level": 3})
            elements.append({"type": "code_block", "content": "\n".join(cmds), "language": "bash"})
        count = sum(len(cmds) for _, cmds in pane_commands)
    else:
        elements.append({"type": "code_block", "content": "\n".join(commands), "language": "bash"})
        count = len(commands)

    return {
        "elements": elements,
        "frontmatter": {"status": "success", "bundle": path, "commands": count},
    }
