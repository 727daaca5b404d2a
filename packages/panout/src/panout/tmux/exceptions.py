"""Tmux-specific exceptions.

PUBLIC API:
  - TmuxError: Base exception for all tmux operations
  - NotInTmuxError: Command was run outside of a tmux session
"""

from ..errors import PanoutError


class TmuxError(PanoutError):
    """Base exception for all tmux operations."""

    pass


class NotInTmuxError(TmuxError):
    """Raised when a pane operation needs a tmux session and there is none."""

    def __init__(self):
        super().__init__("Not running inside tmux")
