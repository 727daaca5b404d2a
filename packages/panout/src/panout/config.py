"""Configuration management for panout.

Handles config discovery, TOML loading and parsing into the bundle model.

Search order for the config file:

1. ``panout.toml`` in the current directory or any parent (project config)
2. ``$XDG_CONFIG_HOME/panout/config.toml``
3. ``~/.config/panout/config.toml``
"""

from pathlib import Path
from typing import Any, Optional
import logging
import os
import tomllib

from .errors import ConfigNotFoundError, ConfigParseError, ConfigReadError
from .types import (
    TMUX_LAYOUTS,
    BundleEntry,
    BundleGroup,
    Config,
    Defaults,
    LayoutName,
    ServerConfig,
    WindowDef,
    Workspace,
)

logger = logging.getLogger(__name__)

PROJECT_CONFIG_NAME = "panout.toml"
RESERVED_KEYS = frozenset(["defaults", "servers", "workspace"])


def _user_config_paths() -> list[Path]:
    """User-level config locations in order of preference."""
    paths = []

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        paths.append(Path(xdg) / "panout" / "config.toml")

    paths.append(Path.home() / ".config" / "panout" / "config.toml")
    return paths


def find_config_file() -> Optional[Path]:
    """Find the config file, project config first.

    Returns:
        Path of the first existing config, None if there is none
    """
    current = Path.cwd()

    for parent in [current] + list(current.parents):
        config_file = parent / PROJECT_CONFIG_NAME
        if config_file.exists():
            return config_file

    for path in _user_config_paths():
        if path.exists():
            return path

    return None


def default_config_path() -> Path:
    """Location where a new user config should be created."""
    return _user_config_paths()[0]


def ensure_config_dir() -> Path:
    """Create the user config directory if needed.

    Returns:
        Path where the config file should be located
    """
    path = default_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def _as_commands(value: Any, where: str) -> tuple[str, ...]:
    """Normalize a ``cmd`` field (string or list of strings) to a tuple."""
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return tuple(value)
    raise ConfigParseError(f"{where}: cmd must be a string or a list of strings")


def _as_layout(value: Any, where: str) -> Optional[LayoutName]:
    if value is None:
        return None
    if not isinstance(value, str) or value not in TMUX_LAYOUTS:
        choices = ", ".join(sorted(TMUX_LAYOUTS))
        raise ConfigParseError(f"{where}: unknown layout '{value}' (expected one of: {choices})")
    return value


def _as_table(value: Any, where: str) -> dict:
    if not isinstance(value, dict):
        raise ConfigParseError(f"{where}: expected a table")
    return value


def _as_optional_str(value: Any, field: str, where: str) -> Optional[str]:
    if value is not None and not isinstance(value, str):
        raise ConfigParseError(f"{where}: {field} must be a string")
    return value


def _parse_bundle(data: Any, where: str) -> BundleEntry:
    data = _as_table(data, where)

    if "cmd" not in data:
        raise ConfigParseError(f"{where}: missing 'cmd'")

    pane = data.get("pane")
    if pane is not None and (isinstance(pane, bool) or not isinstance(pane, int) or pane < 0):
        raise ConfigParseError(f"{where}: pane must be a non-negative integer")

    return BundleEntry(
        commands=_as_commands(data["cmd"], where),
        pane=pane,
        layout=_as_layout(data.get("layout"), where),
        role=_as_optional_str(data.get("role"), "role", where),
    )


def _parse_group(name: str, data: Any) -> BundleGroup:
    data = _as_table(data, name)
    return {entry: _parse_bundle(value, f"{name}.{entry}") for entry, value in data.items()}


def _parse_server(name: str, data: Any) -> ServerConfig:
    where = f"servers.{name}"
    data = _as_table(data, where)

    host = data.get("host")
    if not isinstance(host, str):
        raise ConfigParseError(f"{where}: missing 'host'")

    disconnect = data.get("disconnect", False)
    if not isinstance(disconnect, bool):
        raise ConfigParseError(f"{where}: disconnect must be a boolean")

    cmd = data.get("cmd")
    return ServerConfig(
        host=host,
        disconnect=disconnect,
        commands=_as_commands(cmd, where) if cmd is not None else (),
    )


def _parse_window(data: Any, where: str) -> WindowDef:
    data = _as_table(data, where)

    panes = data.get("panes")
    if isinstance(panes, bool) or not isinstance(panes, int) or panes < 1:
        raise ConfigParseError(f"{where}: panes must be a positive integer")

    cmd = data.get("cmd")
    return WindowDef(
        panes=panes,
        layout=_as_layout(data.get("layout"), where),
        commands=_as_commands(cmd, where) if cmd is not None else (),
        name=_as_optional_str(data.get("name"), "name", where),
    )


def _parse_workspace(name: str, data: Any) -> Workspace:
    where = f"workspace.{name}"
    data = _as_table(data, where)

    windows = data.get("windows")
    if not isinstance(windows, list):
        raise ConfigParseError(f"{where}: missing 'windows' list")

    return Workspace(
        windows=tuple(_parse_window(win, f"{where}.windows[{i}]") for i, win in enumerate(windows)),
        host=_as_optional_str(data.get("host"), "host", where),
        dir=_as_optional_str(data.get("dir"), "dir", where),
    )


def parse_config(data: dict) -> Config:
    """Build a Config from raw TOML data.

    Args:
        data: Table returned by tomllib

    Returns:
        Parsed configuration

    Raises:
        ConfigParseError: If a table doesn't match the expected structure
    """
    config = Config()

    for key, value in data.items():
        if key == "defaults":
            defaults = _as_table(value, key)
            config.defaults = Defaults(layout=_as_layout(defaults.get("layout"), key))
        elif key == "servers":
            config.servers = {name: _parse_server(name, server) for name, server in _as_table(value, key).items()}
        elif key == "workspace":
            config.workspaces = {name: _parse_workspace(name, ws) for name, ws in _as_table(value, key).items()}
        else:
            config.bundles[key] = _parse_group(key, value)

    return config


def parse_config_text(text: str) -> Config:
    """Parse config from a TOML string."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Failed to parse config: {e}") from e
    return parse_config(data)


def load_config(path: Path) -> Config:
    """Load and parse a config file.

    Raises:
        ConfigNotFoundError: If the file doesn't exist
        ConfigReadError: If reading fails
        ConfigParseError: If TOML parsing fails
    """
    if not path.exists():
        raise ConfigNotFoundError(path)

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Failed to parse config {path}: {e}") from e
    except OSError as e:
        raise ConfigReadError(f"Failed to read config {path}: {e}") from e

    config = parse_config(data)
    logger.debug(f"Loaded {len(config.list_bundles())} bundles from {path}")
    return config


# Global instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or load the global configuration."""
    global _config
    if _config is None:
        path = find_config_file()
        if path is None:
            raise ConfigNotFoundError(default_config_path())
        _config = load_config(path)
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next access reloads it."""
    global _config
    _config = None
