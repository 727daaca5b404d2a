"""Server command - open SSH sessions to a configured server."""

from typing import Any

from replkit2.textkit.icons import ICONS

from ..app import app
from ..config import get_config
from ..errors import PanoutError, ServerNotFoundError, markdown_error_response
from ..interpolate import interpolate, parse_host
from ..types import ServerConfig
from .. import ssh, tmux
from ._helpers import layout_from_flags, pick_layout


def server_commands(server: ServerConfig) -> list[str]:
    """Server commands with ``{user}`` and ``{ip}`` filled in from the host.

    Hosts without a user part are left uninterpolated.
    """
    parts = parse_host(server.host)
    if parts is None:
        return list(server.commands)

    user, ip = parts
    return [interpolate(cmd, user, ip) for cmd in server.commands]


@app.command(
    display="markdown",
    typer={"help": "SSH to a configured server in new panes"},
    fastmcp={"type": "tool", "description": "Open SSH sessions to a configured server"},
)
def server(state, name: str, num: int = 1, vertical: bool = False, horizontal: bool = False) -> dict[str, Any]:
    """Connect panes to a server from the ``[servers]`` table.

    Each pane runs ``ssh host``, then the server's commands, then ``exit``
    when ``disconnect = true``.

    Args:
        name: Server name
        num: Number of panes
        vertical: Side-by-side panes
        horizontal: Stacked panes
    """
    if num < 1:
        return markdown_error_response(f"Pane count must be at least 1 (got {num})")

    try:
        config = get_config()
        srv = config.get_server(name)
        if srv is None:
            available = ", ".join(config.list_servers()) or "none"
            return markdown_error_response(f"{ServerNotFoundError(name)}\nAvailable servers: {available}")
    except PanoutError as e:
        return markdown_error_response(str(e))

    layout = pick_layout(layout_from_flags(vertical, horizontal), config.defaults.layout)
    commands = server_commands(srv)

    try:
        panes = tmux.create_panes(num, layout)
        for pane in panes:
            ssh.connect(pane, srv.host)
            for cmd in commands:
                tmux.send_keys(pane, cmd)
            if srv.disconnect:
                ssh.disconnect(pane)
    except PanoutError as e:
        return markdown_error_response(f"Server '{name}' failed: {e}")

    elements = [
        {"type": "heading", "content": f"Server {name}", "level": 2},
        {"type": "text", "content": f"{ICONS['success']} {len(panes)} panes connected to {srv.host}"},
    ]
    if srv.disconnect:
        elements.append({"type": "text", "content": f"{ICONS['info']} Disconnected after {len(commands)} commands"})

    return {
        "elements": elements,
        "frontmatter": {"status": "success", "server": name, "host": srv.host, "panes": len(panes)},
    }
