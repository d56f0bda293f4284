"""Counting mail in maildir inboxes."""

from __future__ import annotations

import enum
import os
import re
from collections.abc import Iterable
from pathlib import Path

from .core import State

_VAR_RE = re.compile(r"\$\{(\w+)\}|\$(\w+)")


class MailType(enum.Enum):
    """Which part of a maildir to count."""

    NEW = "new"
    CUR = "cur"
    ALL = "all"


def expand_inbox(path: str) -> str:
    """Expand ``~`` and environment variables; undefined variables are an error."""

    def substitute(match: re.Match[str]) -> str:
        name = match.group(1) or match.group(2)
        try:
            return os.environ[name]
        except KeyError:
            raise ValueError(f"Failed to expand string: {name} is not set") from None

    return os.path.expanduser(_VAR_RE.sub(substitute, path))


def _count_dir(directory: Path) -> int:
    try:
        return sum(1 for entry in directory.iterdir() if not entry.name.startswith("."))
    except OSError:
        return 0


def count_mails(path: str | Path, mail_type: MailType = MailType.NEW) -> int:
    """Count messages in one maildir."""
    root = Path(path)
    counts = {
        MailType.NEW: ("new",),
        MailType.CUR: ("cur",),
        MailType.ALL: ("new", "cur"),
    }[mail_type]
    return sum(_count_dir(root / sub) for sub in counts)


def count_inboxes(inboxes: Iterable[str | Path], mail_type: MailType = MailType.NEW) -> int:
    """Total messages over several maildirs."""
    return sum(count_mails(inbox, mail_type) for inbox in inboxes)


def mail_state(count: int, threshold_warning: int = 1, threshold_critical: int = 10) -> State:
    """Block state for a number of mails."""
    if count >= threshold_critical:
        return State.CRITICAL
    if count >= threshold_warning:
        return State.WARNING
    return State.IDLE