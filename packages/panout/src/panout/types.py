"""Type definitions for panout - bundle-first configuration model.

Bundles are the unit of work. Groups are just containers for organizing bundles.
A bundle path ("group.name") identifies exactly one bundle.
"""

from typing import Literal
from dataclasses import dataclass, field


# Bundle identifiers
type BundlePath = str  # e.g., "dev.frontend" - group.name
type PaneIndex = int  # Logical 0-based pane index, mapped to a real tmux pane at dispatch time

# Layout names accepted in config and on the command line
type LayoutName = Literal["tiled", "vertical", "horizontal"]

# Resolver output for pane-grouped mode
type PaneCommands = list[tuple[PaneIndex, list[str]]]

# Layout name -> tmux select-layout argument
TMUX_LAYOUTS: dict[str, str] = {
    "tiled": "tiled",
    "vertical": "even-horizontal",  # side by side
    "horizontal": "even-vertical",  # stacked
}

DEFAULT_LAYOUT: LayoutName = "tiled"


def to_tmux_layout(layout: LayoutName) -> str:
    """Convert a layout name to the tmux layout used by select-layout."""
    return TMUX_LAYOUTS[layout]


@dataclass(frozen=True)
class BundleEntry:
    """A named list of commands, optionally pinned to a pane.

    Commands may reference other bundles with ``@group.name`` or ``@group.*``.
    ``layout`` and ``role`` are carried for the command layer; the resolver
    ignores them.
    """

    commands: tuple[str, ...]
    pane: PaneIndex | None = None
    layout: LayoutName | None = None
    role: str | None = None


type BundleGroup = dict[str, BundleEntry]


@dataclass(frozen=True)
class Defaults:
    """Global defaults applied when nothing more specific is set."""

    layout: LayoutName | None = None


@dataclass(frozen=True)
class ServerConfig:
    """SSH server entry."""

    host: str  # user@ip
    disconnect: bool = False
    commands: tuple[str, ...] = ()


@dataclass(frozen=True)
class WindowDef:
    """One window of a workspace."""

    panes: int
    layout: LayoutName | None = None
    commands: tuple[str, ...] = ()
    name: str | None = None


@dataclass(frozen=True)
class Workspace:
    """Multi-window layout, optionally connected over SSH."""

    windows: tuple[WindowDef, ...]
    host: str | None = None
    dir: str | None = None


@dataclass
class Config:
    """Parsed panout configuration.

    Reserved top-level keys are ``defaults``, ``servers`` and ``workspace``.
    Every other top-level table is a bundle group.
    """

    defaults: Defaults = field(default_factory=Defaults)
    servers: dict[str, ServerConfig] = field(default_factory=dict)
    bundles: dict[str, BundleGroup] = field(default_factory=dict)
    workspaces: dict[str, Workspace] = field(default_factory=dict)

    def get_bundle(self, path: BundlePath) -> BundleEntry | None:
        """Look up a bundle by its group.name path.

        Only the first dot separates group from name, so entry names may
        themselves contain dots.
        """
        if "." not in path:
            return None

        group, name = path.split(".", 1)
        entries = self.bundles.get(group)
        if entries is None:
            return None
        return entries.get(name)

    def get_group(self, group: str) -> BundleGroup | None:
        """Get all bundles in a group."""
        return self.bundles.get(group)

    def list_bundles(self) -> list[BundlePath]:
        """List all bundle paths, sorted."""
        return sorted(f"{group}.{name}" for group, entries in self.bundles.items() for name in entries)

    def get_server(self, name: str) -> ServerConfig | None:
        return self.servers.get(name)

    def list_servers(self) -> list[str]:
        return sorted(self.servers)

    def get_workspace(self, name: str) -> Workspace | None:
        return self.workspaces.get(name)

    def list_workspaces(self) -> list[str]:
        return sorted(self.workspaces)
