"""Utility commands."""

from ..app import app


@app.command(fastmcp={"enabled": False})
def reload(state) -> str:
    """Reload configuration from disk on next use."""
    from .. import config

    config.reset_config()
    return "Configuration reloaded"
