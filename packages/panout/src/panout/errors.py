"""Exceptions and shared error responses for panout.

Library code raises the exceptions below. Commands catch them at the command
boundary and turn them into display responses with the helpers at the bottom.

PUBLIC API:
  - PanoutError: Base exception for all panout failures
  - ConfigNotFoundError: Config file does not exist
  - ConfigReadError: Config file could not be read
  - ConfigParseError: Config file is not valid TOML or has the wrong shape
  - BundleNotFoundError: Referenced bundle or group does not exist
  - CircularRefError: Bundle references form a cycle
  - RefDepthError: Bundle references nest too deeply
  - ServerNotFoundError: Requested server does not exist
  - WorkspaceNotFoundError: Requested workspace does not exist
  - markdown_error_response: Create error response for markdown display
  - table_error_response: Create error response for table display
"""

from pathlib import Path
from typing import Any
import logging

logger = logging.getLogger(__name__)


class PanoutError(Exception):
    """Base exception for all panout failures."""

    pass


class ConfigNotFoundError(PanoutError):
    """Raised when the config file does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Config file not found: {path}")


class ConfigReadError(PanoutError):
    """Raised when the config file cannot be read from disk."""

    pass


class ConfigParseError(PanoutError):
    """Raised when the config is not valid TOML or doesn't match the expected structure."""

    pass


class BundleNotFoundError(PanoutError):
    """Raised when a bundle path (or a wildcard group) does not exist.

    For wildcard groups the path reads ``group '<name>'``.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Bundle not found: {path}")


class CircularRefError(PanoutError):
    """Raised when a bundle is re-entered while still being resolved.

    Attributes:
        path: The bundle path that was re-entered.
        chain: Paths from the starting bundle down to the re-entered one.
    """

    def __init__(self, path: str, chain: list[str] | None = None):
        self.path = path
        self.chain = chain or [path]
        super().__init__(f"Circular reference detected: {path}")


class RefDepthError(PanoutError):
    """Raised when references nest deeper than the resolver allows."""

    def __init__(self, path: str, limit: int):
        self.path = path
        self.limit = limit
        super().__init__(f"Reference depth limit ({limit}) exceeded at: {path}")


class ServerNotFoundError(PanoutError):
    """Raised when a server name is not in the config."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Server not found: {name}")


class WorkspaceNotFoundError(PanoutError):
    """Raised when a workspace name is not in the config."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Workspace not found: {name}")


def markdown_error_response(message: str) -> dict[str, Any]:
    """Create error response for markdown display commands.

    Args:
        message: The error message to display

    Returns:
        Markdown display dict with error element
    """
    return {"elements": [{"type": "text", "content": f"Error: {message}"}], "frontmatter": {"status": "error"}}


def table_error_response(message: str) -> list[dict[str, Any]]:
    """Create error response for table display commands.

    Args:
        message: The error message (will be logged)

    Returns:
        Empty list (tables show nothing on error)
    """
    logger.warning(f"Command failed: {message}")
    return []
