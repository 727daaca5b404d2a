"""List command - show everything the config defines."""

from ..app import app
from ..config import get_config
from ..errors import PanoutError, table_error_response


@app.command(
    display="table",
    headers=["Type", "Name", "Detail"],
    fastmcp={"type": "tool", "description": "List bundles, workspaces and servers"},
)
def ls(state, filter: str = None):
    """List all bundles, workspaces and servers."""
    try:
        config = get_config()
    except PanoutError as e:
        return table_error_response(f"Failed to load configuration: {e}")

    rows = []

    for path in config.list_bundles():
        entry = config.get_bundle(path)
        detail = f"pane {entry.pane}" if entry and entry.pane is not None else "-"
        rows.append({"Type": "bundle", "Name": path, "Detail": detail})

    for name in config.list_workspaces():
        ws = config.workspaces[name]
        detail = f"{len(ws.windows)} windows"
        if ws.host:
            detail += f" @ {ws.host}"
        rows.append({"Type": "workspace", "Name": name, "Detail": detail})

    for name in config.list_servers():
        rows.append({"Type": "server", "Name": name, "Detail": config.servers[name].host})

    if filter:
        rows = [row for row in rows if filter.lower() in f"{row['Name']} {row['Detail']}".lower()]

    return rows
