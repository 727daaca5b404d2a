"""Window operations for the current tmux session."""

from typing import Optional

from .core import check_tmux
from .exceptions import TmuxError


def create_window(name: Optional[str] = None) -> None:
    """Create a new window and make it active.

    Args:
        name: Optional window name.
    """
    args = ["new-window"]
    if name:
        args.extend(["-n", name])
    check_tmux(args, "new-window")


def select_window(index: int) -> None:
    """Switch to a window by index."""
    check_tmux(["select-window", "-t", str(index)], f"select-window {index}")


def current_window() -> int:
    """Get the index of the active window."""
    stdout = check_tmux(["display-message", "-p", "#{window_index}"], "display-message")
    try:
        return int(stdout.strip())
    except ValueError:
        raise TmuxError(f"Failed to parse window index: invalid format '{stdout.strip()}'")
