"""Summarising sensor temperatures and choosing a state from them."""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence

from .core import State

DEFAULT_GOOD = 20.0
DEFAULT_IDLE = 45.0
DEFAULT_INFO = 60.0
DEFAULT_WARN = 80.0

MIN_VALID = -100.0
MAX_VALID = 150.0


class TemperatureScale(enum.Enum):
    """Temperature unit."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"

    def from_celsius(self, val: float) -> float:
        """Convert a Celsius reading into this scale."""
        if self is TemperatureScale.FAHRENHEIT:
            return val * 1.8 + 32.0
        return val


def in_range(value: float) -> bool:
    """Whether a Celsius reading is plausible, -100 to 150 inclusive."""
    return MIN_VALID <= value <= MAX_VALID


def temperature_thresholds(
    scale: TemperatureScale = TemperatureScale.CELSIUS,
    good: float | None = None,
    idle: float | None = None,
    info: float | None = None,
    warning: float | None = None,
) -> tuple[float, float, float, float]:
    """The (good, idle, info, warning) thresholds, defaults converted to ``scale``."""

    def pick(value: float | None, default: float) -> float:
        return value if value is not None else scale.from_celsius(default)

    return (
        pick(good, DEFAULT_GOOD),
        pick(idle, DEFAULT_IDLE),
        pick(info, DEFAULT_INFO),
        pick(warning, DEFAULT_WARN),
    )


def summarize(temps: Sequence[float]) -> tuple[float, float, float]:
    """(min, average, max) of readings; no readings give 0, NaN, 0."""
    if not temps:
        return 0.0, math.nan, 0.0
    return min(temps), sum(temps) / len(temps), max(temps)


def temperature_state(max_temp: float, thresholds: Sequence[float]) -> State:
    """Block state for the hottest reading, each threshold inclusive."""
    good, idle, info, warning = thresholds
    if max_temp <= good:
        return State.GOOD
    if max_temp <= idle:
        return State.IDLE
    if max_temp <= info:
        return State.INFO
    if max_temp <= warning:
        return State.WARNING
    return State.CRITICAL