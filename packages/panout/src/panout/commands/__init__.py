"""panout commands."""

from .bundle import bundle
from .workspace import workspace
from .server import server
from .resolve import resolve
from .ls import ls
from .reload import reload

__all__ = ["bundle", "workspace", "server", "resolve", "ls", "reload"]
