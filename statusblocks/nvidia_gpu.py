"""NVidia GPU statistics from nvidia-smi and fan control via nvidia-settings."""

from __future__ import annotations

import dataclasses
import re
import subprocess
from collections.abc import Callable

from .core import State

QUERY = (
    "--query-gpu=name,memory.total,utilization.gpu,memory.used,temperature.gpu,"
    "fan.speed,clocks.current.graphics,power.draw,"
)
FORMAT = "--format=csv,noheader,nounits"

MEM_BTN = 1
FAN_BTN = 2

_UINT_RE = re.compile(r"\+?\d+")
_U32_MAX = 2**32 - 1


@dataclasses.dataclass
class GpuInfo:
    """One sample of GPU statistics."""

    name: str
    mem_total: float  # bytes
    utilization: float  # percents
    mem_used: float  # bytes
    temperature: int  # degrees
    fan_speed: int  # percents
    clocks: float  # hertz
    power_draw: float  # watts


def _parse_float(text: str) -> float:
    if not text or any(c.isspace() or c == "_" for c in text):
        raise ValueError(text)
    return float(text)


def _parse_u32(text: str) -> int:
    if not _UINT_RE.fullmatch(text):
        raise ValueError(text)
    value = int(text)
    if value > _U32_MAX:
        raise ValueError(text)
    return value


_FIELDS: list[tuple[str, Callable[[str], object], float | None]] = [
    ("name", str, None),
    ("mem_total", _parse_float, 1e6),
    ("utilization", _parse_float, None),
    ("mem_used", _parse_float, 1e6),
    ("temperature", _parse_u32, None),
    ("fan_speed", _parse_u32, None),
    ("clocks", _parse_float, 1e6),
    ("power_draw", _parse_float, None),
]


def parse_gpu_info(line: str) -> GpuInfo:
    """Parse one CSV line of nvidia-smi output; memory is in MB and clocks in MHz."""
    parts = iter(line.strip().split(", "))
    values: dict[str, object] = {}
    for field, parse, scale in _FIELDS:
        raw = next(parts, None)
        if raw is None:
            raise ValueError(f"missing property: {field}")
        try:
            value = parse(raw)
        except ValueError:
            raise ValueError(f"bad property: {field}") from None
        values[field] = value * scale if scale is not None else value
    return GpuInfo(**values)


def gpu_state(
    temperature: float,
    idle: float = 50,
    good: float = 70,
    info: float = 75,
    warning: float = 80,
) -> State:
    """Block state for a temperature, each threshold being inclusive."""
    if temperature <= idle:
        return State.IDLE
    if temperature <= good:
        return State.GOOD
    if temperature <= info:
        return State.INFO
    if temperature <= warning:
        return State.WARNING
    return State.CRITICAL


def nvidia_smi_args(interval: int = 1, gpu_id: int = 0) -> list[str]:
    """Command line that makes nvidia-smi print a sample every ``interval`` seconds."""
    return ["nvidia-smi", "-l", str(interval), "-i", str(gpu_id), QUERY, FORMAT]


def fan_speed_args(gpu_id: int, speed: int | None) -> list[str]:
    """Command line that sets a fan speed, or returns control to the driver for None."""
    if speed is None:
        return ["nvidia-settings", "-a", f"[gpu:{gpu_id}]/GPUFanControlState=0"]
    return [
        "nvidia-settings",
        "-a",
        f"[gpu:{gpu_id}]/GPUFanControlState=1",
        "-a",
        f"[fan:{gpu_id}]/GPUTargetFanSpeed={speed}",
    ]


def set_fan_speed(gpu_id: int, speed: int | None) -> None:
    """Run nvidia-settings to set the fan speed; raise RuntimeError on failure."""
    message = "Failed to execute nvidia-settings"
    try:
        completed = subprocess.run(fan_speed_args(gpu_id, speed), check=False)
    except OSError as exc:
        raise RuntimeError(message) from exc
    if completed.returncode != 0:
        raise RuntimeError(message)