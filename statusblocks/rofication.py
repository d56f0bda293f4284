"""Pending notification counts from the rofication daemon."""

from __future__ import annotations

import re
import socket

from .core import State

DEFAULT_SOCKET_PATH = "/tmp/rofi_notification_daemon"

_SPLIT_RE = re.compile(r"[,\n]")
_UINT_RE = re.compile(r"\+?\d+")


def parse_response(response: str) -> tuple[int, int]:
    """Split a daemon reply into (regular, critical) counts."""
    parts = _SPLIT_RE.split(response, maxsplit=1)
    if len(parts) != 2 or not all(_UINT_RE.fullmatch(p) for p in parts):
        raise ValueError("Incorrect responce")
    return int(parts[0]), int(parts[1])


def rofication_status(socket_path: str = DEFAULT_SOCKET_PATH) -> tuple[int, int]:
    """Ask the daemon for its counts over its Unix socket."""
    with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
        sock.connect(socket_path)
        sock.sendall(b"num")
        chunks = []
        while chunk := sock.recv(4096):
            chunks.append(chunk)
    try:
        response = b"".join(chunks).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError("Failed to read from socket") from exc
    return parse_response(response)


def rofication_state(num: int, crit: int) -> State:
    """Warning with critical notifications, info with any, idle otherwise."""
    if crit > 0:
        return State.WARNING
    if num > 0:
        return State.INFO
    return State.IDLE