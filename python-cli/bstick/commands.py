import logging
import time

from bstick.colors import ColorNotFoundError, color_names, resolve
from bstick.device import DeviceOpenError, enumerate_devices, find_first
from bstick.patterns import InvalidPatternError, PatternSpec, apply
from bstick.protocol import BLINKSTICK_VID, BLINKSTICK_PID, SETTLE_DELAY

logger = logging.getLogger(__name__)


def cmd_light(color_name, lighttype, duration_ms, times, steps):
    """Light the first BlinkStick with the given color and pattern.

    Returns 0 on success or when no device is attached, 1 after a printed error.
    """
    try:
        color = resolve(color_name)
    except ColorNotFoundError as e:
        print(e)
        return 1

    spec = PatternSpec(lighttype, color, duration_ms=duration_ms,
                       times=times, steps=steps)
    try:
        spec.validate()
    except InvalidPatternError as e:
        print(e)
        return 1

    try:
        dev = find_first()
    except DeviceOpenError as e:
        print(e)
        return 1
    if dev is None:
        return 0

    with dev:
        dev.set_keep_active(True)
        try:
            apply(dev, spec)
        except InvalidPatternError as e:
            print(e)
            return 1
        time.sleep(SETTLE_DELAY)
    return 0


def cmd_scan():
    print("Scanning for BlinkStick...")
    print("=" * 60)
    devs = [d for d in enumerate_devices() if d.matches_target_kind()]
    if not devs:
        print("  No BlinkStick found.")
        return 1
    print(f"\n  0x{BLINKSTICK_VID:04X}:0x{BLINKSTICK_PID:04X} - {len(devs)} device(s):")
    for d in devs:
        print(f"    serial={d.serial or '?':<12}  product={d.product or '?'}")
    return 0


def cmd_list():
    print("Available Colors")
    print("=" * 60)
    for name in color_names():
        c = resolve(name)
        print(f"  {name:<22} #{c.r:02x}{c.g:02x}{c.b:02x}")
    return 0
