"""Shared states and mouse buttons used by the status blocks."""

from __future__ import annotations

import enum


class State(enum.Enum):
    """Visual state of a block."""

    IDLE = "idle"
    INFO = "info"
    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"


class MouseButton(enum.Enum):
    """Mouse buttons a block can react to."""

    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"
    WHEEL_UP = "up"
    WHEEL_DOWN = "down"
    FORWARD = "forward"
    BACK = "back"
    DOUBLE_LEFT = "double_left"


def worst_state(*args: State) -> State:
    """Combine states: critical beats warning, anything else counts as idle."""
    if State.CRITICAL in args:
        return State.CRITICAL
    if State.WARNING in args:
        return State.WARNING
    return State.IDLE