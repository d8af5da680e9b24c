"""
BlinkStick - single-device LED lighting control over USB HID.
"""

__version__ = "0.1.0"
