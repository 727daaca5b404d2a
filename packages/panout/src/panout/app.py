"""panout ReplKit2 application - bundle-first architecture.

Main application entry point providing REPL, CLI and MCP access to panout
commands. Configuration is loaded lazily by the commands themselves, so the
app can start without a config file.
"""

from dataclasses import dataclass

from replkit2 import App


@dataclass
class PanoutState:
    """Application state for panout.

    Minimal state container. Configuration lives in the cached config
    module and tmux is the source of truth for panes.
    """

    pass


# Must be created before command imports for decorator registration
app = App(
    "panout",
    PanoutState,
    uri_scheme="panout",
    fastmcp={
        "description": "Tmux pane orchestrator driven by TOML bundles",
        "tags": {"terminal", "tmux", "layout"},
    },
)


# Command imports trigger @app.command decorator registration
from .commands import bundle  # noqa: E402, F401
from .commands import workspace  # noqa: E402, F401
from .commands import server  # noqa: E402, F401
from .commands import resolve  # noqa: E402, F401
from .commands import ls  # noqa: E402, F401
from .commands import reload  # noqa: E402, F401
