"""Bundle reference resolution.

Handles the ``@ref`` syntax that lets bundles reference other bundles:

- ``@group.name`` - expand one bundle in place
- ``@group.*`` - expand every bundle in the group, sorted by name

Anything else, including ``@`` without a dot, is a literal command.

References expand depth-first. A bundle is "visiting" while its own
references are being expanded; meeting a visiting bundle again is a cycle.
The same bundle may still appear several times through sibling references
(A -> [@C, @C] is fine, A -> @B -> @A is not).

PUBLIC API:
  - Command, BundleRef, GroupAll: Parsed command strings
  - parse_ref: Classify a raw command string
  - resolve_bundle: Flat, ordered command list for a bundle
  - resolve_with_panes: Commands grouped by target pane
"""

from dataclasses import dataclass

from .errors import BundleNotFoundError, CircularRefError, RefDepthError
from .types import BundlePath, Config, PaneCommands, PaneIndex

__all__ = [
    "Command",
    "BundleRef",
    "GroupAll",
    "ResolvedRef",
    "parse_ref",
    "resolve_bundle",
    "resolve_with_panes",
    "MAX_REF_DEPTH",
]

REF_SIGIL = "@"
MAX_REF_DEPTH = 64


@dataclass(frozen=True)
class Command:
    """A plain command, sent as-is."""

    text: str


@dataclass(frozen=True)
class BundleRef:
    """Reference to a specific bundle: ``@group.name``."""

    group: str
    name: str

    @property
    def path(self) -> BundlePath:
        return f"{self.group}.{self.name}"


@dataclass(frozen=True)
class GroupAll:
    """Reference to all bundles in a group: ``@group.*``."""

    group: str


type ResolvedRef = Command | BundleRef | GroupAll


def parse_ref(s: str) -> ResolvedRef:
    """Parse a command string.

    Examples:
        parse_ref("npm run dev")   # Command("npm run dev")
        parse_ref("@dev.frontend") # BundleRef("dev", "frontend")
        parse_ref("@dev.*")        # GroupAll("dev")
        parse_ref("@dev")          # Command("@dev")
        parse_ref("@dev.api.v2")   # BundleRef("dev", "api.v2")
    """
    if not s.startswith(REF_SIGIL):
        return Command(s)

    rest = s[len(REF_SIGIL) :]
    if "." not in rest:
        return Command(s)

    group, name = rest.split(".", 1)
    if name == "*":
        return GroupAll(group)
    return BundleRef(group, name)


def _group_members(config: Config, group: str) -> list[BundlePath]:
    """Bundle paths of every entry in a group, sorted by entry name."""
    entries = config.get_group(group)
    if entries is None:
        raise BundleNotFoundError(f"group '{group}'")
    return [f"{group}.{name}" for name in sorted(entries)]


def _enter(bundle_path: BundlePath, stack: list[BundlePath], visiting: set[BundlePath]) -> None:
    """Push a bundle onto the active resolution path."""
    if bundle_path in visiting:
        raise CircularRefError(bundle_path, chain=[*stack, bundle_path])
    if len(stack) >= MAX_REF_DEPTH:
        raise RefDepthError(bundle_path, MAX_REF_DEPTH)

    visiting.add(bundle_path)
    stack.append(bundle_path)


def _leave(bundle_path: BundlePath, stack: list[BundlePath], visiting: set[BundlePath]) -> None:
    stack.pop()
    visiting.discard(bundle_path)


def resolve_bundle(config: Config, bundle_path: BundlePath) -> list[str]:
    """Resolve all commands for a bundle, recursively expanding references.

    Args:
        config: Configuration to resolve against (never modified)
        bundle_path: Starting bundle in group.name form

    Returns:
        Flat list of commands in execution order

    Raises:
        BundleNotFoundError: If a referenced bundle or group doesn't exist
        CircularRefError: If references form a cycle
        RefDepthError: If references nest deeper than MAX_REF_DEPTH
    """
    return _resolve_flat(config, bundle_path, [], set())


def _resolve_flat(
    config: Config, bundle_path: BundlePath, stack: list[BundlePath], visiting: set[BundlePath]
) -> list[str]:
    _enter(bundle_path, stack, visiting)
    try:
        bundle = config.get_bundle(bundle_path)
        if bundle is None:
            raise BundleNotFoundError(bundle_path)

        result = []
        for raw in bundle.commands:
            ref = parse_ref(raw)
            if isinstance(ref, Command):
                result.append(ref.text)
            elif isinstance(ref, BundleRef):
                result.extend(_resolve_flat(config, ref.path, stack, visiting))
            else:
                for member in _group_members(config, ref.group):
                    result.extend(_resolve_flat(config, member, stack, visiting))

        return result
    finally:
        _leave(bundle_path, stack, visiting)


def resolve_with_panes(config: Config, bundle_path: BundlePath) -> PaneCommands:
    """Resolve commands grouped by target pane.

    Like resolve_bundle, but keeps pane assignments. A bundle without its own
    ``pane`` runs in the pane of whatever referenced it; the starting bundle
    defaults to pane 0.

    A bundle's literal commands are added after everything it references.
    Panes are ordered by first appearance; later commands for the same pane
    extend that pane's list.

    Returns:
        List of (pane_index, commands) tuples

    Raises:
        BundleNotFoundError: If a referenced bundle or group doesn't exist
        CircularRefError: If references form a cycle
        RefDepthError: If references nest deeper than MAX_REF_DEPTH
    """
    # dict keeps first-insertion order, which is the pane order we want
    pane_cmds: dict[PaneIndex, list[str]] = {}
    _resolve_panes(config, bundle_path, [], set(), pane_cmds, 0)
    return list(pane_cmds.items())


def _resolve_panes(
    config: Config,
    bundle_path: BundlePath,
    stack: list[BundlePath],
    visiting: set[BundlePath],
    pane_cmds: dict[PaneIndex, list[str]],
    default_pane: PaneIndex,
) -> None:
    _enter(bundle_path, stack, visiting)
    try:
        bundle = config.get_bundle(bundle_path)
        if bundle is None:
            raise BundleNotFoundError(bundle_path)

        target_pane = bundle.pane if bundle.pane is not None else default_pane
        direct_cmds = []

        for raw in bundle.commands:
            ref = parse_ref(raw)
            if isinstance(ref, Command):
                direct_cmds.append(ref.text)
            elif isinstance(ref, BundleRef):
                _resolve_panes(config, ref.path, stack, visiting, pane_cmds, target_pane)
            else:
                for member in _group_members(config, ref.group):
                    _resolve_panes(config, member, stack, visiting, pane_cmds, target_pane)

        if direct_cmds:
            pane_cmds.setdefault(target_pane, []).extend(direct_cmds)
    finally:
        _leave(bundle_path, stack, visiting)
