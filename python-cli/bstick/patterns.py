"""
BlinkStick - lighting patterns (static, blink, pulse).

Every color write is preceded by SETTLE_DELAY; the firmware drops commands
that arrive closer together.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from bstick.colors import COLOR_OFF, Color, scale
from bstick.protocol import SETTLE_DELAY, BlinkStickError

logger = logging.getLogger(__name__)

STATIC = "static"
BLINK = "blink"
PULSE = "pulse"


def _sleep(seconds):
    time.sleep(seconds)


class InvalidPatternError(BlinkStickError, ValueError):
    """Raised for an unknown pattern kind or bad pattern parameters."""


@dataclass(frozen=True)
class PatternSpec:
    kind: str
    color: Color
    duration_ms: int = 300
    times: int = 5
    steps: int = 15

    def validate(self) -> None:
        """Check the numeric parameters. The kind is checked by apply()."""
        if self.duration_ms < 0:
            raise InvalidPatternError(f"duration must be >= 0, got {self.duration_ms}")
        if self.times < 0:
            raise InvalidPatternError(f"times must be >= 0, got {self.times}")
        if self.steps < 0:
            raise InvalidPatternError(f"steps must be >= 0, got {self.steps}")
        if self.kind == PULSE and self.steps == 0:
            raise InvalidPatternError("pulse needs at least 1 step")


def static(dev, color: Color, sleep: Callable[[float], None] = _sleep) -> None:
    sleep(SETTLE_DELAY)
    dev.set_color(color)


def blink(dev, color: Color, duration_ms: int, times: int,
          sleep: Callable[[float], None] = _sleep) -> None:
    """Alternate color and off, `times` times, holding each for duration_ms."""
    dur = duration_ms / 1000.0
    for _ in range(times):
        sleep(dur)
        static(dev, color, sleep)
        sleep(dur)
        static(dev, COLOR_OFF, sleep)


def pulse(dev, color: Color, times: int, steps: int,
          sleep: Callable[[float], None] = _sleep) -> None:
    """Fade from off up to color and back down, `times` times.

    Each fade writes steps + 1 samples (both ends included), and every
    repetition finishes with an explicit off.
    """
    if steps <= 0:
        raise InvalidPatternError("pulse needs at least 1 step")
    for _ in range(times):
        for j in range(steps + 1):
            static(dev, scale(color, j, steps), sleep)
        for j in range(steps, -1, -1):
            static(dev, scale(color, j, steps), sleep)
        static(dev, COLOR_OFF, sleep)


def _run_static(dev, spec, sleep):
    static(dev, spec.color, sleep)


def _run_blink(dev, spec, sleep):
    blink(dev, spec.color, spec.duration_ms, spec.times, sleep)


def _run_pulse(dev, spec, sleep):
    pulse(dev, spec.color, spec.times, spec.steps, sleep)


# name -> runner
PATTERNS = {
    STATIC: _run_static,
    BLINK: _run_blink,
    PULSE: _run_pulse,
}


def list_patterns():
    return sorted(PATTERNS.keys())


def apply(dev, spec: PatternSpec, sleep: Callable[[float], None] = _sleep) -> None:
    """Turn the device off, then run the pattern described by spec.

    Raises:
        InvalidPatternError: for an unknown kind; the device is left off.
    """
    static(dev, COLOR_OFF, sleep)
    runner = PATTERNS.get(spec.kind)
    if runner is None:
        raise InvalidPatternError(
            f"Unknown light type {spec.kind!r}. Valid: {', '.join(list_patterns())}")
    logger.debug("Running %s pattern: %r", spec.kind, spec)
    runner(dev, spec, sleep)
