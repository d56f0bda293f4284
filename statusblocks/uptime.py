"""System uptime shown in its two largest units."""

from __future__ import annotations

import re
from pathlib import Path

UPTIME_PATH = "/proc/uptime"

_UINT_RE = re.compile(r"\+?\d+")


def parse_uptime(text: str) -> int:
    """Whole seconds of uptime from the contents of /proc/uptime."""
    whole = text.split(".", 1)[0]
    if not _UINT_RE.fullmatch(whole):
        raise ValueError("/proc/uptime has invalid content")
    return int(whole)


def format_uptime(seconds: int) -> str:
    """Render uptime as weeks+days, days+hours, hours+minutes or minutes+seconds."""
    weeks, seconds = divmod(seconds, 604_800)
    days, seconds = divmod(seconds, 86_400)
    hours, seconds = divmod(seconds, 3_600)
    minutes, seconds = divmod(seconds, 60)
    if weeks > 0:
        return f"{weeks}w {days}d"
    if days > 0:
        return f"{days}d {hours}h"
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m {seconds}s"


def read_uptime(path: str | Path = UPTIME_PATH) -> int:
    """Read whole seconds of uptime from ``path``."""
    return parse_uptime(Path(path).read_text())