"""Selecting and describing MPRIS media players."""

from __future__ import annotations

import dataclasses
import enum
import re
from collections.abc import Iterable, Sequence

NAME_PREFIX = "org.mpris.MediaPlayer2."

PLAY_PAUSE_BTN = 1
NEXT_BTN = 2
PREV_BTN = 3


class PlaybackStatus(enum.Enum):
    """Playback status reported by a player."""

    PLAYING = "Playing"
    PAUSED = "Paused"
    STOPPED = "Stopped"


@dataclasses.dataclass
class Player:
    """A media player on the bus and what it is currently playing."""

    bus_name: str
    owner: str
    status: PlaybackStatus | None = None
    title: str | None = None
    artist: str | None = None
    url: str | None = None


def parse_playback_status(text: str) -> PlaybackStatus | None:
    """Map a status string to a PlaybackStatus, or None if it is unknown."""
    try:
        return PlaybackStatus(text)
    except ValueError:
        return None


def extract_player_name(full_name: str) -> str | None:
    """The part of an MPRIS bus name after the common prefix, if it has it."""
    if full_name.startswith(NAME_PREFIX):
        return full_name[len(NAME_PREFIX):]
    return None


def compile_excludes(patterns: Iterable[str]) -> list[re.Pattern[str]]:
    """Compile exclusion patterns; an invalid one raises ValueError."""
    try:
        return [re.compile(pattern) for pattern in patterns]
    except re.error as exc:
        raise ValueError("Invalid regex") from exc


def player_matches(
    full_name: str,
    preferred_players: Sequence[str],
    exclude_patterns: Iterable[re.Pattern[str]],
) -> bool:
    """Whether a bus name is a player that is not excluded and is preferred."""
    name = extract_player_name(full_name)
    if name is None:
        return False
    if any(pattern.search(name) for pattern in exclude_patterns):
        return False
    return not preferred_players or any(name.startswith(p) for p in preferred_players)


def select_initial(players: Sequence[Player]) -> int | None:
    """Index of the first playing player, else of the last one, else None."""
    current = None
    for index, player in enumerate(players):
        current = index
        if player.status is PlaybackStatus.PLAYING:
            break
    return current


def index_after_removal(current: int | None, removed: int, remaining: int) -> int | None:
    """New current index once the player at ``removed`` has gone."""
    if current is None:
        return None
    if remaining == 0:
        return None
    if removed == current:
        return 0
    if removed < current:
        return current - 1
    return current


def next_index(current: int, count: int) -> int:
    """Cycle to the next player, wrapping to the first."""
    return current + 1 if current + 1 < count else 0


def player_values(player: Player, separator: str, index: int, available: int) -> dict[str, object]:
    """Placeholder values for the current player.

    ``play`` holds the name of the play/pause icon to show.
    """
    values: dict[str, object] = {
        "avail": available,
        "cur": index + 1,
        "player": extract_player_name(player.bus_name),
        "play": "music_pause" if player.status is PlaybackStatus.PLAYING else "music_play",
    }
    if player.url is not None:
        values["url"] = player.url

    title, artist = player.title, player.artist
    if title is not None and artist is None:
        values["combo"] = title
        values["title"] = title
    elif title is None and artist is not None:
        values["combo"] = artist
        values["artist"] = artist
    elif title is not None and artist is not None:
        values["combo"] = f"{title}{separator}{artist}"
        values["title"] = title
        values["artist"] = artist
    elif player.url is not None:
        values["combo"] = player.url
    return values