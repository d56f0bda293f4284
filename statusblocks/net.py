"""Network transfer speeds and their short history."""

from __future__ import annotations

import dataclasses
import math
import time
from collections.abc import MutableSequence
from typing import TypeVar

HISTORY_LENGTH = 8

T = TypeVar("T")


def push_to_hist(hist: MutableSequence[T], elem: T) -> None:
    """Drop the oldest entry of ``hist`` and append ``elem``, in place."""
    if not hist:
        raise IndexError("history is empty")
    hist[:] = [*hist[1:], elem]


def _rate(amount: float, elapsed: float) -> float:
    if elapsed == 0:
        return math.nan if amount == 0 else math.copysign(math.inf, amount)
    return amount / elapsed


def _zeros() -> list[float]:
    return [0.0] * HISTORY_LENGTH


@dataclasses.dataclass
class SpeedTracker:
    """Turns successive byte counters of an interface into speeds.

    ``stats`` holds the last (rx_bytes, tx_bytes) seen, ``last_time`` the
    moment speeds were last computed.
    """

    rx_hist: list[float] = dataclasses.field(default_factory=_zeros)
    tx_hist: list[float] = dataclasses.field(default_factory=_zeros)
    last_time: float = dataclasses.field(default_factory=time.monotonic)
    stats: tuple[int, int] | None = None

    def update(
        self,
        rx_bytes: int | None,
        tx_bytes: int | None,
        now: float | None = None,
    ) -> tuple[float, float]:
        """Feed new counters (None when unavailable); return (down, up) bytes/s."""
        if now is None:
            now = time.monotonic()
        new = None if rx_bytes is None or tx_bytes is None else (rx_bytes, tx_bytes)

        speed_down = 0.0
        speed_up = 0.0
        if self.stats is None:
            self.stats = new
        elif new is None:
            self.stats = None
        else:
            old_rx, old_tx = self.stats
            elapsed = now - self.last_time
            self.last_time = now
            speed_down = _rate(float(new[0] - old_rx), elapsed)
            speed_up = _rate(float(new[1] - old_tx), elapsed)
            self.stats = new

        push_to_hist(self.rx_hist, speed_down)
        push_to_hist(self.tx_hist, speed_up)
        return speed_down, speed_up