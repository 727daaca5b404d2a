"""Shared fixtures for panout tests."""

import pytest

from panout import config as config_module
from panout import tmux
from panout.config import parse_config_text


DEV_CONFIG = """
[defaults]
layout = "horizontal"

[dev.frontend]
cmd = "npm run dev"
pane = 0

[dev.backend]
cmd = ["cd ~/api", "cargo run"]
pane = 1

[dev.all]
cmd = ["@dev.frontend", "@dev.backend"]

[logs.app]
cmd = "tail -f app.log"

[logs.db]
cmd = "tail -f db.log"
pane = 2

[stack.full]
cmd = ["@logs.*", "echo ready"]
layout = "tiled"

[servers.prod]
host = "admin@10.0.0.1"
disconnect = true
cmd = ["cd /home/{user}", "ping -c1 {ip}"]

[workspace.proj]
host = "user@server"
dir = "~/src/proj"
windows = [
    { panes = 2, layout = "vertical", name = "edit" },
    { panes = 1, cmd = "htop" },
]
"""


@pytest.fixture
def dev_config():
    """Parsed config with bundles, servers and a workspace."""
    return parse_config_text(DEV_CONFIG)


@pytest.fixture
def installed_config(monkeypatch, dev_config):
    """Make dev_config the global config commands load."""
    monkeypatch.setattr(config_module, "_config", dev_config)
    return dev_config


class FakeTmux:
    """Records tmux driver calls instead of running tmux."""

    def __init__(self, pane_base: int = 0, window: int = 0):
        self.pane_base = pane_base
        self.window = window
        self.calls: list[tuple] = []
        self.sent: list[tuple[int, str]] = []

    def create_panes(self, num, layout):
        self.calls.append(("create_panes", num, layout))
        return [self.pane_base + i for i in range(num)]

    def send_keys(self, pane, command):
        self.sent.append((pane, command))

    def create_window(self, name=None):
        self.calls.append(("create_window", name))

    def current_window(self):
        return self.window

    def select_window(self, index):
        self.calls.append(("select_window", index))


@pytest.fixture
def fake_tmux(monkeypatch):
    """Replace the tmux driver functions used by commands and ssh helpers."""
    fake = FakeTmux()
    for name in ("create_panes", "send_keys", "create_window", "current_window", "select_window"):
        monkeypatch.setattr(tmux, name, getattr(fake, name))
    return fake
