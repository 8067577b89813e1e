"""
Time-based interpolation used to animate a turn.

A Tween is polled once per tick with the current time. It reports completion
through the return value of `update`, which is True on exactly one call.
"""

import math
from typing import Callable, Optional

from rubikview.core.registry import get_easing, register_easing


@register_easing("linear")
def linear(p: float) -> float:
    return p


@register_easing("power2.inOut")
def power2_in_out(p: float) -> float:
    if p < 0.5:
        return 2 * p * p
    return 1 - (-2 * p + 2) ** 2 / 2


@register_easing("power3.inOut")
def power3_in_out(p: float) -> float:
    if p < 0.5:
        return 4 * p ** 3
    return 1 - (-2 * p + 2) ** 3 / 2


@register_easing("sine.inOut")
def sine_in_out(p: float) -> float:
    return -(math.cos(math.pi * p) - 1) / 2


class Tween:
    """Interpolates from `start` to `end` over `duration` seconds of wall-clock time."""

    def __init__(self, start: float, end: float, duration: float, start_time: float,
                 easing: str = "power2.inOut"):
        if duration < 0:
            raise ValueError("duration must be non-negative")
        self.start = start
        self.end = end
        self.duration = duration
        self.start_time = start_time
        self.ease: Callable[[float], float] = get_easing(easing)
        self.value = start
        self.finished = False
        self._last_progress = 0.0

    def progress(self, now: float) -> float:
        """Linear progress in [0, 1]; never moves backwards."""
        if self.duration == 0:
            p = 1.0
        else:
            p = min(max((now - self.start_time) / self.duration, 0.0), 1.0)
        self._last_progress = max(self._last_progress, p)
        return self._last_progress

    def update(self, now: float) -> bool:
        """
        Advance to `now`.

        Returns:
            True on the single call where the tween reaches progress 1.
        """
        if self.finished:
            return False
        p = self.progress(now)
        if p >= 1.0:
            self.value = self.end
            self.finished = True
            return True
        self.value = self.start + (self.end - self.start) * self.ease(p)
        return False

    def remaining(self, now: float) -> Optional[float]:
        if self.finished:
            return None
        return max(self.duration - (now - self.start_time), 0.0)
