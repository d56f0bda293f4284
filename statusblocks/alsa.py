"""Volume control of an ALSA mixer through amixer."""

from __future__ import annotations

import re
import subprocess
from collections.abc import Callable, Sequence

_FILTER = "[]%"
_UINT_RE = re.compile(r"\+?\d+")
_U32_MAX = 2**32 - 1

Runner = Callable[[Sequence[str]], bytes]


def parse_amixer_output(output: str) -> tuple[int, bool]:
    """Read (volume, muted) from the last line of ``amixer get`` output."""
    text = output.strip()
    if not text:
        raise ValueError("could not get sound info")
    last_line = text.split("\n")[-1].rstrip("\r")
    fields = [
        word.strip(_FILTER)
        for word in last_line.split()
        if word.startswith("[") and "dB" not in word
    ]
    if not fields:
        raise ValueError("could not get volume")
    raw = fields[0]
    if not _UINT_RE.fullmatch(raw) or int(raw) > _U32_MAX:
        raise ValueError("could not parse volume to u32")
    muted = len(fields) > 1 and fields[1] == "off"
    return int(raw), muted


def amixer_args(device: str, name: str, natural_mapping: bool, *args: str) -> list[str]:
    """Command line for amixer.

    The first of ``args`` is the amixer command (``get`` or ``set``); it is
    followed by the control ``name`` and then by the remaining ``args``.
    """
    if not args:
        raise ValueError("amixer command is missing")
    command, *rest = args
    line = ["amixer"]
    if natural_mapping:
        line.append("-M")
    line.extend(["-D", device, command, name, *rest])
    return line


def new_volume(current: int, step: int, max_vol: int | None = None) -> int:
    """Volume after a step, never below zero and capped at ``max_vol``."""
    volume = max(0, current + step)
    if max_vol is not None:
        volume = min(volume, max_vol)
    return volume


def _run(args: Sequence[str]) -> bytes:
    return subprocess.run(list(args), stdout=subprocess.PIPE, check=False).stdout


class AlsaDevice:
    """An ALSA mixer control, read and changed with amixer.

    ALSA reports no description, port or form factor, so those stay ``None``.
    """

    def __init__(
        self,
        name: str = "Master",
        device: str = "default",
        natural_mapping: bool = False,
        runner: Runner | None = None,
    ) -> None:
        self.name = name
        self.device = device
        self.natural_mapping = natural_mapping
        self.volume = 0
        self.muted = False
        self.output_description: str | None = None
        self.active_port: str | None = None
        self.form_factor: str | None = None
        self._runner: Runner = runner if runner is not None else _run
        self._monitor: subprocess.Popen[bytes] | None = None

    @property
    def output_name(self) -> str:
        return self.name

    def _args(self, *args: str) -> list[str]:
        return amixer_args(self.device, self.name, self.natural_mapping, *args)

    def get_info(self) -> None:
        """Refresh volume and mute state from amixer."""
        try:
            stdout = self._runner(self._args("get"))
        except OSError as exc:
            raise RuntimeError("could not run amixer to get sound info") from exc
        try:
            text = stdout.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError("amixer produced non-UTF8 output") from exc
        self.volume, self.muted = parse_amixer_output(text)

    def set_volume(self, step: int, max_vol: int | None = None) -> None:
        """Change the volume by ``step`` percent, capped at ``max_vol``."""
        capped = new_volume(self.volume, step, max_vol)
        try:
            self._runner(self._args("set", f"{capped}%"))
        except OSError as exc:
            raise RuntimeError("failed to set volume") from exc
        self.volume = capped

    def toggle(self) -> None:
        """Toggle mute."""
        try:
            self._runner(self._args("set", "toggle"))
        except OSError as exc:
            raise RuntimeError("failed to toggle mute") from exc
        self.muted = not self.muted

    def wait_for_update(self) -> None:
        """Block until ``alsactl monitor`` reports a change."""
        if self._monitor is None:
            try:
                self._monitor = subprocess.Popen(["alsactl", "monitor"], stdout=subprocess.PIPE)
            except OSError as exc:
                raise RuntimeError("Failed to start alsactl monitor") from exc
        stdout = self._monitor.stdout
        if stdout is None:
            raise RuntimeError("Failed to pipe alsactl monitor output")
        try:
            stdout.read1(1024)
        except OSError as exc:
            raise RuntimeError("Failed to read stdbuf output") from exc

    def close(self) -> None:
        """Stop the change monitor, if it runs."""
        if self._monitor is not None:
            self._monitor.terminate()
            self._monitor.wait()
            self._monitor = None

    def __enter__(self) -> AlsaDevice:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()