"""Shared fixtures: a fake `hid` module and a recording device."""

import sys
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from bstick.protocol import BLINKSTICK_VID, BLINKSTICK_PID


def hid_info(vid=BLINKSTICK_VID, pid=BLINKSTICK_PID, path=b"/dev/hidraw0",
             serial="BS000001-3.0"):
    return {
        "path": path,
        "vendor_id": vid,
        "product_id": pid,
        "serial_number": serial,
        "product_string": "BlinkStick",
        "usage_page": 0xFF00,
        "interface_number": 0,
    }


class Recorder:
    """Stands in for an open BlinkStick; logs sleeps and color writes in order."""

    def __init__(self):
        self.events = []

    def sleep(self, seconds):
        self.events.append(("sleep", seconds))

    def set_color(self, color):
        self.events.append(("set", color))

    @property
    def colors(self):
        return [c for kind, c in self.events if kind == "set"]


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def fake_hid():
    """Install a fake `hid` module; tests fill in `fake_hid.devices`."""
    handle = MagicMock(name="hid.device()")
    module = SimpleNamespace(devices=[], handle=handle)
    module.enumerate = lambda *args: list(module.devices)
    module.device = MagicMock(return_value=handle)
    with patch.dict(sys.modules, {"hid": module}):
        yield module
