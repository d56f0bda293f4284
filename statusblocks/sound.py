"""Choosing volume icons and names for sound devices."""

from __future__ import annotations

import enum
from collections.abc import Mapping

MAX_STEP = 50

_HEADPHONE_FORM_FACTORS = frozenset({"headset", "headphone", "hands-free", "portable"})


class DeviceKind(enum.Enum):
    """Whether a device plays sound or records it."""

    SINK = "sink"
    SOURCE = "source"


class SoundDriver(enum.Enum):
    """Which sound system to talk to."""

    AUTO = "auto"
    ALSA = "alsa"


def clamp_step(step_width: int) -> int:
    """Keep a scroll step between 0 and 50 percent."""
    return min(max(step_width, 0), MAX_STEP)


def _is_headphones(form_factor: str | None, active_port: str | None) -> bool:
    if form_factor is None:
        return active_port is not None and "headphones" in active_port
    return form_factor in _HEADPHONE_FORM_FACTORS


def volume_icon(
    volume: int,
    device_kind: DeviceKind = DeviceKind.SINK,
    headphones_indicator: bool = False,
    form_factor: str | None = None,
    active_port: str | None = None,
) -> str:
    """Name of the icon for a volume; pass 0 for a muted device."""
    if (
        headphones_indicator
        and device_kind is DeviceKind.SINK
        and _is_headphones(form_factor, active_port)
    ):
        return "headphones"
    prefix = "microphone" if device_kind is DeviceKind.SOURCE else "volume"
    if volume == 0:
        level = "muted"
    elif volume <= 20:
        level = "empty"
    elif volume <= 70:
        level = "half"
    else:
        level = "full"
    return f"{prefix}_{level}"


def map_output_name(name: str, mappings: Mapping[str, str] | None = None) -> str:
    """The configured display name for a device, or the name itself."""
    if mappings is None:
        return name
    return mappings.get(name, name)