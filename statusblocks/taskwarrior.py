"""Counting tasks in taskwarrior."""

from __future__ import annotations

import dataclasses
import re
import subprocess

from .core import State

DEFAULT_DATA_LOCATION = "~/.task"

_UINT_RE = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1


@dataclasses.dataclass(frozen=True)
class Filter:
    """A named taskwarrior filter expression."""

    name: str
    filter: str


def default_filters() -> list[Filter]:
    """The filters used when none are configured."""
    return [Filter(name="pending", filter="-COMPLETED -DELETED")]


def parse_task_count(output: bytes) -> int:
    """Parse what ``task ... count`` printed."""
    try:
        text = output.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(
            "failed to get the number of tasks from taskwarrior (invalid UTF-8)"
        ) from exc
    text = text.strip()
    if not _UINT_RE.fullmatch(text) or int(text) > _U32_MAX:
        raise ValueError("could not parse the result of taskwarrior")
    return int(text)


def get_number_of_tasks(filter: str) -> int:
    """Ask taskwarrior how many tasks match ``filter``."""
    try:
        completed = subprocess.run(
            ["task", "rc.gc=off", filter, "count"], stdout=subprocess.PIPE, check=False
        )
    except OSError as exc:
        raise RuntimeError(
            "failed to run taskwarrior for getting the number of tasks"
        ) from exc
    return parse_task_count(completed.stdout)


def task_state(count: int, warning_threshold: int = 10, critical_threshold: int = 20) -> State:
    """Block state for a number of tasks."""
    if count >= critical_threshold:
        return State.CRITICAL
    if count >= warning_threshold:
        return State.WARNING
    return State.IDLE


def task_flags(count: int) -> frozenset[str]:
    """Flag placeholders present for a count: ``done`` at zero, ``single`` at one."""
    if count == 0:
        return frozenset({"done"})
    if count == 1:
        return frozenset({"single"})
    return frozenset()