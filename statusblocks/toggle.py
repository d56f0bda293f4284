"""A toggle driven by shell commands."""

from __future__ import annotations

import dataclasses
import os
import subprocess
from collections.abc import Mapping

from .core import State


@dataclasses.dataclass(frozen=True)
class ToggleConfig:
    """Commands that read and change the toggle, and the icons to show."""

    command_on: str
    command_off: str
    command_state: str
    format: str = " $icon "
    icon_on: str = "toggle_on"
    icon_off: str = "toggle_off"
    interval: int | None = None


def default_shell(environ: Mapping[str, str] | None = None) -> str:
    """The shell from ``SHELL``, falling back to ``sh``."""
    env = os.environ if environ is None else environ
    return env.get("SHELL", "sh")


def is_toggled(output: bytes) -> bool:
    """The toggle is on when the state command printed anything but whitespace."""
    try:
        text = output.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError("The output of command_state is invalid UTF-8") from exc
    return bool(text.strip())


def run_shell(shell: str, command: str) -> subprocess.CompletedProcess[bytes]:
    """Run ``command`` through ``shell -c``, capturing its output."""
    return subprocess.run([shell, "-c", command], capture_output=True, check=False)


def check_state(config: ToggleConfig, shell: str) -> bool:
    """Run the state command and tell whether the toggle is on."""
    try:
        completed = run_shell(shell, config.command_state)
    except OSError as exc:
        raise RuntimeError("Failed to run command_state") from exc
    return is_toggled(completed.stdout)


def toggle(config: ToggleConfig, shell: str, toggled: bool) -> State:
    """Flip the toggle; idle when the command succeeded, critical when it failed."""
    command = config.command_off if toggled else config.command_on
    try:
        completed = run_shell(shell, command)
    except OSError as exc:
        raise RuntimeError("Failed to run command") from exc
    return State.IDLE if completed.returncode == 0 else State.CRITICAL