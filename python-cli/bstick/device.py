"""
BlinkStick - HID device discovery, open/close, and color writes.
"""

import logging

from bstick.colors import COLOR_OFF
from bstick.protocol import (BLINKSTICK_VID, BLINKSTICK_PID, BlinkStickError,
                             _color_report)

logger = logging.getLogger(__name__)


class DeviceOpenError(BlinkStickError):
    """Raised when a BlinkStick is present but cannot be opened."""


class DeviceDescriptor:
    """One entry from hid.enumerate()."""

    def __init__(self, info):
        self.info = info
        self.path = info["path"]
        self.vendor_id = info["vendor_id"]
        self.product_id = info["product_id"]
        self.serial = info.get("serial_number") or ""
        self.product = info.get("product_string") or ""

    def __repr__(self):
        return (f"DeviceDescriptor(0x{self.vendor_id:04X}:0x{self.product_id:04X}"
                f" serial={self.serial!r})")

    def matches_target_kind(self):
        return (self.vendor_id, self.product_id) == (BLINKSTICK_VID, BLINKSTICK_PID)

    def open(self):
        """Open the device.

        Returns:
            BlinkStick handle.

        Raises:
            DeviceOpenError: if the OS refuses access (usually missing udev rules).
        """
        import hid

        dev = hid.device()
        try:
            dev.open_path(self.path)
        except OSError as e:
            raise DeviceOpenError(
                f"Cannot open BlinkStick ({self.serial or self.path!r}): {e}\n"
                "  On Linux, install a udev rule for 20a0:41e5 or run with sudo."
            ) from e
        logger.debug("Opened %r", self)
        return BlinkStick(dev, self)


class BlinkStick:
    """Open BlinkStick handle. Use as a context manager to guarantee close()."""

    def __init__(self, dev, descriptor=None):
        self.dev = dev
        self.descriptor = descriptor
        self.keep_active = False

    def set_keep_active(self, keep):
        """When set, close() leaves the last color on instead of turning it off."""
        self.keep_active = bool(keep)

    def set_color(self, color):
        if self.dev is None:
            raise BlinkStickError("Device is closed")
        logger.debug("set_color r=%d g=%d b=%d", color.r, color.g, color.b)
        self.dev.send_feature_report(_color_report(color.r, color.g, color.b))

    def close(self):
        if self.dev is None:
            return
        try:
            if not self.keep_active:
                self.set_color(COLOR_OFF)
        finally:
            self.dev.close()
            self.dev = None
            logger.debug("Closed %r", self.descriptor)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def enumerate_devices():
    """Return a DeviceDescriptor for every attached HID device."""
    import hid

    return [DeviceDescriptor(d) for d in hid.enumerate()]


def find_first():
    """Open the first attached BlinkStick.

    Returns:
        BlinkStick, or None if no BlinkStick is attached.

    Raises:
        DeviceOpenError: from the first matching device that fails to open;
            later devices are not tried.
    """
    for desc in enumerate_devices():
        if not desc.matches_target_kind():
            continue
        return desc.open()
    logger.debug("No BlinkStick found")
    return None
