"""Tmux pane orchestrator entry point.

Runs panout as a one-shot CLI command, an interactive REPL or an MCP server
depending on command line arguments.
"""

import sys
import logging
from .app import app

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
)


def main():
    """Run panout based on command line arguments.

    - With --mcp: Runs as MCP server
    - With a command (e.g. ``panout bundle dev.all``): Runs it once
    - Without arguments: Runs as interactive REPL
    """
    if "--mcp" in sys.argv:
        app.mcp.run()
    elif len(sys.argv) > 1:
        app.cli()
    else:
        app.run(title="panout - Tmux Pane Orchestrator")


if __name__ == "__main__":
    main()
