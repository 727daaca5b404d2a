"""SSH sessions inside tmux panes.

SSH is just text sent to a pane with tmux send-keys; panout never opens
connections itself.
"""

from typing import Optional

from . import tmux


def connect(pane: int, host: str) -> None:
    """Start an SSH session in a pane (host in ``user@ip`` form)."""
    tmux.send_keys(pane, f"ssh {host}")


def disconnect(pane: int) -> None:
    """Close the SSH session in a pane."""
    tmux.send_keys(pane, "exit")


def bootstrap_command(host: Optional[str], dir: Optional[str]) -> Optional[str]:
    """Build the first command for a workspace pane.

    Args:
        host: SSH host, or None for a local pane
        dir: Directory to start in, or None

    Returns:
        Command string, None when there is nothing to do

    Examples:
        bootstrap_command("u@h", "~/src")  # ssh -t u@h "cd ~/src && exec \\$SHELL -l"
        bootstrap_command("u@h", None)     # ssh u@h
        bootstrap_command(None, "~/src")   # cd ~/src
    """
    if host and dir:
        # Login shell on the remote side, after the cd
        return f'ssh -t {host} "cd {dir} && exec \\$SHELL -l"'
    if host:
        return f"ssh {host}"
    if dir:
        return f"cd {dir}"
    return None
