"""Tmux pane orchestrator driven by TOML bundles.

Bundles are named command lists that can reference each other with
``@group.name`` and ``@group.*``. panout expands the references, creates
panes and windows, and sends each pane its commands. Built on ReplKit2 for
CLI/REPL/MCP access.

PUBLIC API:
  - app: ReplKit2 application instance with panout commands
  - resolve_bundle: Flat command list for a bundle
  - resolve_with_panes: Commands grouped by target pane
  - load_config: Load a config file
  - Config: Parsed configuration
"""

from .app import app
from .config import load_config
from .resolver import resolve_bundle, resolve_with_panes
from .types import Config

__version__ = "0.1.0"
__all__ = ["app", "resolve_bundle", "resolve_with_panes", "load_config", "Config"]
