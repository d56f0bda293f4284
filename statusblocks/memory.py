"""Memory and swap usage read from /proc/meminfo."""

from __future__ import annotations

import dataclasses
import math
import re
from pathlib import Path

from .core import State, worst_state

MEMINFO_PATH = "/proc/meminfo"
ARCSTATS_PATH = "/proc/spl/kstat/zfs/arcstats"

_FIELDS = {
    "MemTotal:": "mem_total",
    "MemFree:": "mem_free",
    "Buffers:": "buffers",
    "Cached:": "cached",
    "SReclaimable:": "s_reclaimable",
    "Shmem:": "shmem",
    "SwapTotal:": "swap_total",
    "SwapFree:": "swap_free",
}

_ARC_SIZE_RE = re.compile(r"size\s+\d+\s+(\d+)")
_UINT_RE = re.compile(r"\+?\d+")


@dataclasses.dataclass(frozen=True)
class Memstate:
    """Raw memory counters; all in KiB except ``zfs_arc_cache`` in bytes."""

    mem_total: int = 0
    mem_free: int = 0
    buffers: int = 0
    cached: int = 0
    s_reclaimable: int = 0
    shmem: int = 0
    swap_total: int = 0
    swap_free: int = 0
    zfs_arc_cache: int = 0


def parse_meminfo(text: str) -> Memstate:
    """Parse the contents of /proc/meminfo."""
    found: dict[str, int] = {}
    for line in text.splitlines():
        words = line.split()
        if not words:
            continue
        if len(words) < 2 or not _UINT_RE.fullmatch(words[1]):
            raise ValueError("failed to parse /proc/meminfo")
        field = _FIELDS.get(words[0])
        if field is not None:
            found[field] = int(words[1])
    return Memstate(**found)


def parse_arcstats(text: str) -> int:
    """Return the ZFS ARC cache size in bytes from an arcstats dump."""
    match = _ARC_SIZE_RE.search(text)
    if match is None:
        raise ValueError("failed to find zfs_arc_cache size")
    return int(match.group(1))


def read_memstate(
    meminfo_path: str | Path = MEMINFO_PATH,
    arcstats_path: str | Path = ARCSTATS_PATH,
) -> Memstate:
    """Read memory counters, adding the ZFS ARC size when it is available."""
    state = parse_meminfo(Path(meminfo_path).read_text())
    try:
        arcstats = Path(arcstats_path).read_text()
    except OSError:
        return state
    return dataclasses.replace(state, zfs_arc_cache=parse_arcstats(arcstats))


def _percent(part: float, whole: float) -> float:
    if whole == 0:
        return math.nan if part == 0 else math.copysign(math.inf, part)
    return part / whole * 100.0


def memory_values(memstate: Memstate) -> dict[str, float]:
    """Compute the byte and percentage values the block displays."""
    mem_total = memstate.mem_total * 1024.0
    mem_free = memstate.mem_free * 1024.0
    swap_total = memstate.swap_total * 1024.0
    swap_free = memstate.swap_free * 1024.0
    swap_used = swap_total - swap_free
    mem_total_used = mem_total - mem_free
    buffers = memstate.buffers * 1024.0
    cached = (
        memstate.cached + memstate.s_reclaimable - memstate.shmem
    ) * 1024.0 + memstate.zfs_arc_cache
    mem_used = mem_total_used - (buffers + cached)
    mem_avail = mem_total - mem_used

    return {
        "mem_total": mem_total,
        "mem_free": mem_free,
        "mem_free_percents": _percent(mem_free, mem_total),
        "mem_total_used": mem_total_used,
        "mem_total_used_percents": _percent(mem_total_used, mem_total),
        "mem_used": mem_used,
        "mem_used_percents": _percent(mem_used, mem_total),
        "mem_avail": mem_avail,
        "mem_avail_percents": _percent(mem_avail, mem_total),
        "swap_total": swap_total,
        "swap_free": swap_free,
        "swap_free_percents": _percent(swap_free, swap_total),
        "swap_used": swap_used,
        "swap_used_percents": _percent(swap_used, swap_total),
        "buffers": buffers,
        "buffers_percent": _percent(buffers, mem_total),
        "cached": cached,
        "cached_percent": _percent(cached, mem_total),
    }


def level_state(percent: float, warning: float, critical: float) -> State:
    """State for a usage percentage; thresholds must be strictly exceeded."""
    if percent > critical:
        return State.CRITICAL
    if percent > warning:
        return State.WARNING
    return State.IDLE


def memory_state(
    values: dict[str, float],
    warning_mem: float = 80.0,
    critical_mem: float = 95.0,
    warning_swap: float = 80.0,
    critical_swap: float = 95.0,
) -> State:
    """Overall block state from memory and swap usage."""
    mem = level_state(values["mem_used_percents"], warning_mem, critical_mem)
    swap = level_state(values["swap_used_percents"], warning_swap, critical_swap)
    return worst_state(mem, swap)