"""Pending pacman and AUR updates."""

from __future__ import annotations

import dataclasses
import os
import re
import subprocess
from collections.abc import Mapping
from pathlib import Path

from .core import State

DEFAULT_PACMAN_DB = "/var/lib/pacman/"

_MISSING_AUR_COMMAND = "$aur or $both found in format string but no aur_command supplied"


@dataclasses.dataclass(frozen=True)
class Watched:
    """Which update sources a block watches.

    ``aur_command`` is set when AUR updates are watched.
    """

    pacman: bool = False
    aur_command: str | None = None

    @property
    def aur(self) -> bool:
        return self.aur_command is not None

    @property
    def both(self) -> bool:
        return self.pacman and self.aur

    @property
    def nothing(self) -> bool:
        return not self.pacman and not self.aur


def _env(environ: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def updates_db_path(environ: Mapping[str, str] | None = None) -> Path:
    """Directory of the scratch pacman database used to check for updates."""
    env = _env(environ)
    configured = env.get("CHECKUPDATES_DB")
    if configured is not None:
        return Path(configured)
    temp_dir = env.get("TMPDIR") or "/tmp"
    return Path(temp_dir) / f"checkup-db-{env.get('USER', '')}"


def pacman_db_path(environ: Mapping[str, str] | None = None) -> Path:
    """Directory of the system pacman database."""
    return Path(_env(environ).get("DBPath", DEFAULT_PACMAN_DB))


def watched_for(pacman: bool, aur: bool, both: bool, aur_command: str | None = None) -> Watched:
    """Decide what to watch from the placeholders the formats use."""
    if both or (pacman and aur):
        if aur_command is None:
            raise ValueError(_MISSING_AUR_COMMAND)
        return Watched(pacman=True, aur_command=aur_command)
    if pacman:
        return Watched(pacman=True)
    if aur:
        if aur_command is None:
            raise ValueError(_MISSING_AUR_COMMAND)
        return Watched(aur_command=aur_command)
    return Watched()


def _lines(text: str) -> list[str]:
    if not text:
        return []
    if text.endswith("\n"):
        text = text[:-1]
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def get_update_count(updates: str) -> int:
    """Number of update lines that are not marked as ignored."""
    return sum(1 for line in _lines(updates) if "[ignored]" not in line)


def has_matching_update(updates: str, pattern: str | re.Pattern[str]) -> bool:
    """Whether any update line matches ``pattern``."""
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    return any(regex.search(line) for line in _lines(updates))


def update_state(total: int, warning: bool, critical: bool) -> State:
    """Idle with no updates; otherwise critical, warning or info."""
    if total == 0:
        return State.IDLE
    if critical:
        return State.CRITICAL
    if warning:
        return State.WARNING
    return State.INFO


def format_for_count(total: int, format: str, format_singular: str, format_up_to_date: str) -> str:
    """Pick the format matching the number of updates."""
    if total == 0:
        return format_up_to_date
    if total == 1:
        return format_singular
    return format


def get_aur_available_updates(aur_command: str) -> str:
    """Run the AUR helper command through ``sh`` and return what it prints."""
    try:
        completed = subprocess.run(["sh", "-c", aur_command], stdout=subprocess.PIPE, check=False)
    except OSError as exc:
        raise RuntimeError(f"aur command: {aur_command} failed") from exc
    try:
        return completed.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(
            "There was a problem while converting the aur command output to a string"
        ) from exc


def get_pacman_available_updates(
    db_path: str | Path | None = None,
    pacman_db: str | Path | None = None,
) -> str:
    """Sync a scratch copy of the pacman database and list pending updates."""
    db = Path(db_path) if db_path is not None else updates_db_path()
    system_db = Path(pacman_db) if pacman_db is not None else pacman_db_path()

    try:
        db.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise RuntimeError(f"Failed to create checkup-db directory at '{db}'") from exc

    local_cache = db / "local"
    if not local_cache.exists():
        try:
            local_cache.symlink_to(system_db / "local")
        except OSError as exc:
            raise RuntimeError("Failed to created required symlink") from exc

    env = {**os.environ, "LC_ALL": "C"}
    try:
        synced = subprocess.run(
            ["fakeroot", "--", "pacman", "-Sy", "--dbpath", str(db), "--logfile", "/dev/null"],
            stdout=subprocess.DEVNULL,
            env=env,
            check=False,
        )
    except OSError as exc:
        raise RuntimeError("Failed to run command") from exc
    if synced.returncode != 0:
        raise RuntimeError("pacman -Sy exited with non zero exit status")

    try:
        listed = subprocess.run(
            ["fakeroot", "--", "pacman", "-Qu", "--dbpath", str(db)],
            capture_output=True,
            env=env,
            check=False,
        )
    except OSError as exc:
        raise RuntimeError("There was a problem running the pacman commands") from exc
    try:
        return listed.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError("Pacman produced non-UTF8 output") from exc