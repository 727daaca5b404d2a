"""Variable interpolation for commands.

Expands ``{user}`` and ``{ip}`` placeholders from an SSH host string:

    user, ip = parse_host("admin@192.168.1.100")
    interpolate("cd /home/{user}/src", user, ip)  # "cd /home/admin/src"
"""

from typing import Optional


def parse_host(host: str) -> Optional[tuple[str, str]]:
    """Split ``user@ip`` into (user, ip), None if there is no ``@``."""
    if "@" not in host:
        return None

    user, ip = host.split("@", 1)
    return user, ip


def interpolate(command: str, user: str, ip: str) -> str:
    """Replace ``{user}`` and ``{ip}`` placeholders in a command string."""
    return command.replace("{user}", user).replace("{ip}", ip)
