"""Pane operations in the current tmux window.

Pane indices are whatever tmux reports, so a ``pane-base-index`` of 1 is
handled by asking tmux instead of assuming 0.
"""

import logging
from typing import List

from ..types import LayoutName, to_tmux_layout
from .core import check_tmux, in_tmux
from .exceptions import NotInTmuxError

logger = logging.getLogger(__name__)


def create_panes(num: int, layout: LayoutName) -> List[int]:
    """Create panes in the current window until it has ``num`` of them.

    The existing pane counts as the first one. The layout is re-applied after
    every split so panes stay balanced.

    Args:
        num: Total number of panes wanted
        layout: Layout name

    Returns:
        Actual pane indices, in tmux order

    Raises:
        NotInTmuxError: If not running inside tmux
        TmuxError: If a tmux command fails
    """
    if not in_tmux():
        raise NotInTmuxError()

    for _ in range(1, num):
        check_tmux(["split-window"], "split-window")
        set_layout(layout)

    indices = pane_indices()
    logger.debug(f"Window has panes {indices} ({layout})")
    return indices


def send_keys(pane: int, command: str) -> None:
    """Send a command to a pane followed by Enter.

    Raises:
        TmuxError: If tmux rejects the target or command
    """
    check_tmux(["send-keys", "-t", str(pane), command, "Enter"], f"send-keys to pane {pane}")


def set_layout(layout: LayoutName) -> None:
    """Apply a layout to the current window."""
    tmux_layout = to_tmux_layout(layout)
    check_tmux(["select-layout", tmux_layout], f"select-layout {tmux_layout}")


def select_pane(pane: int) -> None:
    """Focus a pane."""
    check_tmux(["select-pane", "-t", str(pane)], f"select-pane {pane}")


def pane_indices() -> List[int]:
    """Get the actual pane indices in the current window."""
    stdout = check_tmux(["list-panes", "-F", "#{pane_index}"], "list-panes")

    indices = []
    for line in stdout.splitlines():
        try:
            indices.append(int(line.strip()))
        except ValueError:
            continue
    return indices


def pane_count() -> int:
    """Number of panes in the current window."""
    return len(pane_indices())
