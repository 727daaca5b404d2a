"""Pure tmux operations - everything panout sends to tmux goes through here.

PUBLIC API:
  - run_tmux: Run tmux command and return result
  - in_tmux: Check if running inside tmux
  - create_panes: Create panes in the current window with a layout
  - send_keys: Send a command to a pane
  - set_layout: Apply a layout to the current window
  - select_pane: Focus a pane
  - pane_indices: Actual pane indices of the current window
  - pane_count: Number of panes in the current window
  - create_window: Create a new window
  - select_window: Switch to a window
  - current_window: Index of the active window
  - TmuxError: Base exception for tmux failures
  - NotInTmuxError: Raised outside of a tmux session
"""

# Core tmux operations
from .core import run_tmux, in_tmux

from .pane import (
    create_panes,
    send_keys,
    set_layout,
    select_pane,
    pane_indices,
    pane_count,
)

from .window import (
    create_window,
    select_window,
    current_window,
)

from .exceptions import TmuxError, NotInTmuxError

__all__ = [
    "run_tmux",
    "in_tmux",
    "create_panes",
    "send_keys",
    "set_layout",
    "select_pane",
    "pane_indices",
    "pane_count",
    "create_window",
    "select_window",
    "current_window",
    "TmuxError",
    "NotInTmuxError",
]
