"""
BlinkStick HID protocol - constants, report builder, and the error base class.
"""

# ── USB Identifiers ──────────────────────────────────────────────────────
BLINKSTICK_VID = 0x20A0
BLINKSTICK_PID = 0x41E5

# ── Reports ──────────────────────────────────────────────────────────────
REPORT_ID_COLOR = 0x01

# ── Timing ───────────────────────────────────────────────────────────────
# Minimum spacing the firmware needs between two color commands.
SETTLE_DELAY = 0.020  # seconds


class BlinkStickError(Exception):
    """Base class for errors reported to the user by the CLI."""


# ── Report builder ───────────────────────────────────────────────────────
def _color_report(r, g, b):
    """Build the 4-byte feature report that sets the LED color.

    Args:
        r, g, b: channel values (0-255).

    Returns:
        list: [REPORT_ID_COLOR, r, g, b], as expected by send_feature_report.
    """
    for ch in (r, g, b):
        if not 0 <= ch <= 0xFF:
            raise ValueError(f"Channel value out of range: {ch}")
    return [REPORT_ID_COLOR, r, g, b]
