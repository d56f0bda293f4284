"""Watson time tracking state and how it is shown."""

from __future__ import annotations

import dataclasses
import json
import os
from collections.abc import Callable
from datetime import datetime, timedelta
from pathlib import Path

_PARSE_ERROR = "Unable to deserialize state"

_MICROS_PER_SECOND = 1_000_000
_SPANS_PAST = (
    ("week", 7 * 86_400),
    ("day", 86_400),
    ("hour", 3_600),
    ("minute", 60),
)
_SPANS_AFTER = (*_SPANS_PAST, ("second", 1))


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // b
    return -quotient if a < 0 else quotient


def _total_micros(delta: timedelta) -> int:
    return (delta.days * 86_400 + delta.seconds) * _MICROS_PER_SECOND + delta.microseconds


def _first_span(delta: timedelta, spans: tuple[tuple[str, int], ...]) -> tuple[str, int] | None:
    micros = _total_micros(delta)
    for label, seconds in spans:
        count = _trunc_div(micros, seconds * _MICROS_PER_SECOND)
        if count != 0:
            return label, count
    return None


def format_delta_past(delta: timedelta) -> str:
    """Describe how long ago something started, in its largest whole unit."""
    span = _first_span(delta, _SPANS_PAST)
    if span is None:
        return "now"
    label, n = span
    return f"{n} {label}{'s' if n > 1 else ''} ago"


def format_delta_after(delta: timedelta) -> str:
    """Describe how long something lasted, in its largest whole unit."""
    span = _first_span(delta, _SPANS_AFTER)
    if span is None:
        return "now"
    label, n = span
    return f"after {n} {label}{'s' if n > 1 else ''}"


@dataclasses.dataclass(frozen=True)
class WatsonState:
    """Contents of the Watson state file; idle when no project is tracked."""

    project: str | None = None
    start: datetime | None = None
    tags: tuple[str, ...] = ()

    @property
    def active(self) -> bool:
        return self.project is not None

    def format(
        self,
        show_time: bool,
        verb: str,
        formatter: Callable[[timedelta], str],
        now: datetime | None = None,
    ) -> str:
        """Project and tags, optionally followed by the verb and elapsed time."""
        if self.project is None or self.start is None:
            raise ValueError("an idle state has no format")
        text = self.project
        if self.tags:
            text += f" [{' '.join(self.tags)}]"
        if show_time:
            current = now if now is not None else datetime.now().astimezone()
            text += f" {verb} {formatter(current - self.start)}"
        return text


def _local_timestamp(seconds: int) -> datetime:
    try:
        return datetime.fromtimestamp(seconds).astimezone()
    except (OverflowError, OSError, ValueError) as exc:
        raise ValueError(_PARSE_ERROR) from exc


def _active_from(project: object, start: object, tags: object) -> WatsonState | None:
    if not isinstance(project, str):
        return None
    if not isinstance(start, int) or isinstance(start, bool):
        return None
    if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
        return None
    return WatsonState(project=project, start=_local_timestamp(start), tags=tuple(tags))


def parse_state(text: str) -> WatsonState:
    """Parse the JSON of a Watson state file."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(_PARSE_ERROR) from exc

    if isinstance(data, dict):
        active = _active_from(data.get("project"), data.get("start"), data.get("tags"))
        return active if active is not None else WatsonState()
    if isinstance(data, list):
        if len(data) == 3:
            active = _active_from(*data)
            if active is not None:
                return active
        if not data:
            return WatsonState()
    raise ValueError(_PARSE_ERROR)


def default_state_path(config_dir: str | Path | None = None) -> Path:
    """Where Watson keeps its state file under the user's configuration directory."""
    if config_dir is None:
        xdg = os.environ.get("XDG_CONFIG_HOME")
        if xdg and os.path.isabs(xdg):
            config_dir = xdg
        else:
            config_dir = Path.home() / ".config"
    return Path(config_dir) / "watson" / "state"