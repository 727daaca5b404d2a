"""Core tmux operations - shared utilities for all tmux modules.

PUBLIC API:
  - run_tmux: Execute tmux command and return result
  - check_tmux: Execute tmux command, raise TmuxError on failure
  - in_tmux: Check if running inside a tmux session
"""

import logging
import os
import subprocess
from typing import List, Tuple

from .exceptions import TmuxError

logger = logging.getLogger(__name__)


def run_tmux(args: List[str]) -> Tuple[int, str, str]:
    """Run tmux command, return (returncode, stdout, stderr)."""
    cmd = ["tmux"] + args
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        raise TmuxError(f"Failed to run tmux: {e}") from e
    return result.returncode, result.stdout, result.stderr


def check_tmux(args: List[str], what: str) -> str:
    """Run tmux command and return stdout.

    Args:
        args: tmux arguments
        what: Short description used in the error message (e.g. "split-window")

    Raises:
        TmuxError: If tmux exits non-zero
    """
    code, stdout, stderr = run_tmux(args)
    if code != 0:
        logger.debug(f"tmux {' '.join(args)} exited {code}: {stderr.strip()}")
        detail = f": {stderr.strip()}" if stderr.strip() else ""
        raise TmuxError(f"{what} failed{detail}")
    return stdout


def in_tmux() -> bool:
    """Check if we're inside a tmux session (tmux sets $TMUX)."""
    return bool(os.environ.get("TMUX"))
