"""Ping, download and upload speeds from speedtest-cli."""

from __future__ import annotations

import dataclasses
import json
import subprocess
from collections.abc import Sequence

DEFAULT_COMMAND = ("speedtest-cli", "--json")


@dataclasses.dataclass(frozen=True)
class SpeedtestResult:
    """Speeds in bits per second and ping in milliseconds."""

    download: float
    upload: float
    ping: float


def _number(data: dict, key: str) -> float:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("'speedtest-cli' produced wrong JSON")
    return float(value)


def parse_output(text: str) -> SpeedtestResult:
    """Parse the JSON that ``speedtest-cli --json`` prints."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError("'speedtest-cli' produced wrong JSON") from exc
    if not isinstance(data, dict):
        raise ValueError("'speedtest-cli' produced wrong JSON")
    return SpeedtestResult(
        download=_number(data, "download"),
        upload=_number(data, "upload"),
        ping=_number(data, "ping"),
    )


def speedtest_values(result: SpeedtestResult) -> dict[str, float]:
    """Placeholder values: ping in seconds, speeds in bits per second."""
    return {
        "ping": result.ping * 1e-3,
        "speed_down": result.download,
        "speed_up": result.upload,
    }


def run_speedtest(command: Sequence[str] = DEFAULT_COMMAND) -> SpeedtestResult:
    """Run the speed test command and parse what it prints."""
    try:
        completed = subprocess.run(list(command), stdout=subprocess.PIPE, check=False)
    except OSError as exc:
        raise RuntimeError("failed to run 'speedtest-cli'") from exc
    try:
        output = completed.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError("'speedtest-cli' produced non-UTF8 outupt") from exc
    return parse_output(output)