"""Tests for bundle reference resolution."""

import pytest

from panout.errors import BundleNotFoundError, CircularRefError, RefDepthError
from panout.resolver import (
    MAX_REF_DEPTH,
    BundleRef,
    Command,
    GroupAll,
    parse_ref,
    resolve_bundle,
    resolve_with_panes,
)
from panout.types import BundleEntry, Config


def make_config(groups: dict) -> Config:
    """Build a Config from {group: {name: commands or (commands, pane)}}."""
    bundles = {}
    for group, entries in groups.items():
        bundles[group] = {}
        for name, value in entries.items():
            if isinstance(value, tuple):
                commands, pane = value
            else:
                commands, pane = value, None
            bundles[group][name] = BundleEntry(commands=tuple(commands), pane=pane)
    return Config(bundles=bundles)


class TestParseRef:
    """Tests for parse_ref."""

    @pytest.mark.parametrize("raw", ["echo hello", "", "npm run dev", "a@b.c", " @dev.x", "email@host.com"])
    def test_plain_commands(self, raw):
        """Strings not starting with @ are commands as-is."""
        assert parse_ref(raw) == Command(raw)

    def test_bundle_ref(self):
        assert parse_ref("@dev.frontend") == BundleRef("dev", "frontend")

    def test_group_all(self):
        assert parse_ref("@dev.*") == GroupAll("dev")

    def test_no_separator_is_literal(self):
        """Sigil without a dot stays a literal command, sigil included."""
        assert parse_ref("@noseparator") == Command("@noseparator")
        assert parse_ref("@") == Command("@")

    def test_name_keeps_extra_dots(self):
        """Only the first dot splits group from name."""
        ref = parse_ref("@dev.api.v2")
        assert ref == BundleRef("dev", "api.v2")
        assert ref.path == "dev.api.v2"

    def test_star_only_as_whole_name(self):
        assert parse_ref("@dev.*.x") == BundleRef("dev", "*.x")


class TestResolveBundle:
    """Tests for flat resolution."""

    def test_literal_commands_in_order(self):
        config = make_config({"dev": {"a": ["one", "two", "three"]}})
        assert resolve_bundle(config, "dev.a") == ["one", "two", "three"]

    def test_reference_is_inlined(self):
        """Resolving through a reference equals resolving the inlined bundle."""
        config = make_config(
            {
                "dev": {
                    "a": ["before", "@dev.b", "after"],
                    "b": ["x", "y"],
                    "inlined": ["before", "x", "y", "after"],
                }
            }
        )
        assert resolve_bundle(config, "dev.a") == resolve_bundle(config, "dev.inlined")

    def test_group_all_is_sorted(self):
        """Wildcard expands by entry name, not insertion order."""
        config = make_config({"g": {"b": ["b1"], "a": ["a1", "a2"]}, "top": {"all": ["@g.*"]}})
        assert resolve_bundle(config, "top.all") == ["a1", "a2", "b1"]

    def test_nested_references(self):
        config = make_config(
            {
                "dev": {"leaf": ["leaf"], "mid": ["@dev.leaf", "mid"]},
                "top": {"root": ["@dev.mid", "root"]},
            }
        )
        assert resolve_bundle(config, "top.root") == ["leaf", "mid", "root"]

    def test_malformed_reference_is_sent_literally(self):
        config = make_config({"dev": {"a": ["@oops", "echo ok"]}})
        assert resolve_bundle(config, "dev.a") == ["@oops", "echo ok"]

    def test_dotted_entry_name(self):
        config = make_config({"dev": {"api.v2": ["serve v2"], "a": ["@dev.api.v2"]}})
        assert resolve_bundle(config, "dev.a") == ["serve v2"]

    def test_diamond_is_not_a_cycle(self):
        """A shared bundle reached through two siblings appears twice."""
        config = make_config(
            {
                "d": {
                    "a": ["@d.c", "a"],
                    "b": ["@d.c", "b"],
                    "c": ["c"],
                    "top": ["@d.a", "@d.b"],
                }
            }
        )
        assert resolve_bundle(config, "d.top") == ["c", "a", "c", "b"]

    def test_same_reference_twice(self):
        config = make_config({"d": {"a": ["@d.c", "@d.c"], "c": ["c"]}})
        assert resolve_bundle(config, "d.a") == ["c", "c"]

    def test_repeat_calls_are_independent(self):
        config = make_config({"d": {"a": ["@d.c"], "c": ["c"]}})
        assert resolve_bundle(config, "d.a") == ["c"]
        assert resolve_bundle(config, "d.a") == ["c"]

    def test_self_reference(self):
        config = make_config({"A": {"self": ["echo", "@A.self"]}})
        with pytest.raises(CircularRefError) as exc:
            resolve_bundle(config, "A.self")
        assert exc.value.path == "A.self"
        assert exc.value.chain == ["A.self", "A.self"]

    def test_mutual_cycle(self):
        config = make_config({"g": {"a": ["@g.b"], "b": ["@g.a"]}})
        with pytest.raises(CircularRefError) as exc:
            resolve_bundle(config, "g.a")
        assert exc.value.path == "g.a"
        assert exc.value.chain == ["g.a", "g.b", "g.a"]
        assert str(exc.value) == "Circular reference detected: g.a"

    def test_wildcard_including_itself(self):
        """A bundle expanding its own group hits itself."""
        config = make_config({"g": {"a": ["a"], "all": ["@g.*"]}})
        with pytest.raises(CircularRefError) as exc:
            resolve_bundle(config, "g.all")
        assert exc.value.path == "g.all"

    def test_missing_start_bundle(self):
        with pytest.raises(BundleNotFoundError) as exc:
            resolve_bundle(Config(), "nogroup.noname")
        assert exc.value.path == "nogroup.noname"

    def test_path_without_dot(self):
        config = make_config({"dev": {"a": ["x"]}})
        with pytest.raises(BundleNotFoundError):
            resolve_bundle(config, "dev")

    def test_missing_referenced_bundle(self):
        config = make_config({"dev": {"a": ["x", "@dev.gone"]}})
        with pytest.raises(BundleNotFoundError) as exc:
            resolve_bundle(config, "dev.a")
        assert exc.value.path == "dev.gone"

    def test_missing_group(self):
        config = make_config({"dev": {"a": ["@nope.*"]}})
        with pytest.raises(BundleNotFoundError) as exc:
            resolve_bundle(config, "dev.a")
        assert exc.value.path == "group 'nope'"
        assert str(exc.value) == "Bundle not found: group 'nope'"

    def test_empty_group_expands_to_nothing(self):
        config = Config(bundles={"empty": {}, "dev": {"a": BundleEntry(commands=("@empty.*", "x"))}})
        assert resolve_bundle(config, "dev.a") == ["x"]

    def test_config_is_not_modified(self):
        config = make_config({"d": {"a": ["@d.b"], "b": ["b"]}})
        before = {group: dict(entries) for group, entries in config.bundles.items()}
        resolve_bundle(config, "d.a")
        assert config.bundles == before

    def test_depth_limit(self):
        """Long reference chains fail predictably instead of blowing the stack."""
        entries = {f"b{i}": [f"@chain.b{i + 1}"] for i in range(MAX_REF_DEPTH + 5)}
        entries[f"b{MAX_REF_DEPTH + 5}"] = ["end"]
        config = make_config({"chain": entries})
        with pytest.raises(RefDepthError) as exc:
            resolve_bundle(config, "chain.b0")
        assert exc.value.path == f"chain.b{MAX_REF_DEPTH}"

    def test_chain_within_depth_limit(self):
        entries = {f"b{i}": [f"@chain.b{i + 1}"] for i in range(MAX_REF_DEPTH - 1)}
        entries[f"b{MAX_REF_DEPTH - 1}"] = ["end"]
        config = make_config({"chain": entries})
        assert resolve_bundle(config, "chain.b0") == ["end"]


class TestResolveWithPanes:
    """Tests for pane-grouped resolution."""

    def test_default_pane_is_zero(self):
        config = make_config({"dev": {"a": ["x", "y"]}})
        assert resolve_with_panes(config, "dev.a") == [(0, ["x", "y"])]

    def test_explicit_pane_wins(self):
        config = make_config({"dev": {"x": (["echo hi"], 2), "top": ["@dev.x"]}})
        assert resolve_with_panes(config, "dev.top") == [(2, ["echo hi"])]

    def test_pane_inherited_from_referrer(self):
        config = make_config({"dev": {"child": ["child"], "parent": (["@dev.child", "parent"], 3)}})
        assert resolve_with_panes(config, "dev.parent") == [(3, ["child", "parent"])]

    def test_inherited_pane_flows_through_levels(self):
        config = make_config(
            {
                "d": {
                    "leaf": ["leaf"],
                    "mid": ["@d.leaf"],
                    "root": (["@d.mid"], 4),
                }
            }
        )
        assert resolve_with_panes(config, "d.root") == [(4, ["leaf"])]

    def test_shared_pane_is_merged(self):
        """Two bundles on the same pane share one entry, in visit order."""
        config = make_config(
            {
                "g": {
                    "first": (["cmd1"], 1),
                    "other": (["cmd0"], 0),
                    "second": (["cmd2"], 1),
                    "top": ["@g.first", "@g.other", "@g.second"],
                }
            }
        )
        assert resolve_with_panes(config, "g.top") == [(1, ["cmd1", "cmd2"]), (0, ["cmd0"])]

    def test_direct_commands_after_references(self):
        """A bundle's own commands are added once its references are done."""
        config = make_config({"g": {"ref": (["r"], 1), "top": ["mine", "@g.ref"]}})
        assert resolve_with_panes(config, "g.top") == [(1, ["r"]), (0, ["mine"])]

    def test_wildcard_fans_out_to_panes(self):
        config = make_config(
            {
                "svc": {"web": (["web"], 1), "api": (["api"], 0), "db": (["db"], 2)},
                "top": {"all": ["@svc.*"]},
            }
        )
        assert resolve_with_panes(config, "top.all") == [(0, ["api"]), (2, ["db"]), (1, ["web"])]

    def test_reference_only_bundle_adds_no_entry(self):
        config = make_config({"g": {"a": (["a"], 5), "top": (["@g.a"], 1)}})
        assert resolve_with_panes(config, "g.top") == [(5, ["a"])]

    def test_flat_and_paned_agree_on_commands(self, dev_config):
        flat = resolve_bundle(dev_config, "dev.all")
        paned = resolve_with_panes(dev_config, "dev.all")
        assert flat == [cmd for _, cmds in paned for cmd in cmds]
        assert paned == [(0, ["npm run dev"]), (1, ["cd ~/api", "cargo run"])]

    def test_missing_bundle(self):
        with pytest.raises(BundleNotFoundError) as exc:
            resolve_with_panes(Config(), "nogroup.noname")
        assert exc.value.path == "nogroup.noname"

    def test_missing_group(self):
        config = make_config({"dev": {"a": ["@nope.*"]}})
        with pytest.raises(BundleNotFoundError, match="group 'nope'"):
            resolve_with_panes(config, "dev.a")

    def test_cycle(self):
        config = make_config({"g": {"a": (["@g.b"], 1), "b": ["@g.a"]}})
        with pytest.raises(CircularRefError) as exc:
            resolve_with_panes(config, "g.a")
        assert exc.value.path == "g.a"

    def test_error_after_partial_output(self):
        """Errors abort the whole call, nothing is returned."""
        config = make_config({"g": {"ok": (["ok"], 1), "top": ["@g.ok", "@g.missing"]}})
        with pytest.raises(BundleNotFoundError):
            resolve_with_panes(config, "g.top")

    def test_diamond(self):
        config = make_config(
            {
                "d": {
                    "c": (["c"], 2),
                    "a": ["@d.c"],
                    "b": ["@d.c"],
                    "top": ["@d.a", "@d.b"],
                }
            }
        )
        assert resolve_with_panes(config, "d.top") == [(2, ["c", "c"])]
