import pytest

from statusblocks.music import (
    PlaybackStatus,
    Player,
    compile_excludes,
    extract_player_name,
    index_after_removal,
    next_index,
    parse_playback_status,
    player_matches,
    player_values,
    select_initial,
)


def test_extract_player_name():
    assert extract_player_name("org.mpris.MediaPlayer2.firefox.instance852") == "firefox.instance852"
    assert extract_player_name("not.org.mpris.MediaPlayer2.firefox.instance852") is None
    assert extract_player_name("org.mpris.MediaPlayer3.firefox.instance852") is None


def test_player_matches():
    exclude = compile_excludes(["mpd", "firefox.*"])
    assert player_matches("org.mpris.MediaPlayer2.playerctld", [], exclude)
    assert not player_matches("org.mpris.MediaPlayer2.playerctld", ["spotify"], exclude)
    assert not player_matches("org.mpris.MediaPlayer2.firefox.instance852", [], exclude)


def test_player_matches_preferred_prefix():
    assert player_matches("org.mpris.MediaPlayer2.spotify", ["spotify"], [])
    assert not player_matches("other.spotify", ["spotify"], [])


def test_compile_excludes_invalid():
    with pytest.raises(ValueError):
        compile_excludes(["("])


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Playing", PlaybackStatus.PLAYING),
        ("Paused", PlaybackStatus.PAUSED),
        ("Stopped", PlaybackStatus.STOPPED),
        ("playing", None),
    ],
)
def test_parse_playback_status(text, expected):
    assert parse_playback_status(text) is expected


def _player(name, status=None, **kw):
    return Player(bus_name=f"org.mpris.MediaPlayer2.{name}", owner=f":1.{name}", status=status, **kw)


def test_select_initial():
    assert select_initial([]) is None
    players = [_player("a"), _player("b", PlaybackStatus.PLAYING), _player("c")]
    assert select_initial(players) == 1
    assert select_initial([_player("a"), _player("b")]) == 1


def test_index_after_removal():
    assert index_after_removal(None, 0, 3) is None
    assert index_after_removal(2, 0, 0) is None
    assert index_after_removal(2, 2, 3) == 0
    assert index_after_removal(2, 1, 3) == 1
    assert index_after_removal(1, 2, 3) == 1


def test_next_index_wraps():
    assert next_index(0, 3) == 1
    assert next_index(2, 3) == 0


def test_player_values_title_and_artist():
    player = _player("spotify", PlaybackStatus.PLAYING, title="Song", artist="Band")
    values = player_values(player, " - ", 0, 2)
    assert values["combo"] == "Song - Band"
    assert values["title"] == "Song"
    assert values["artist"] == "Band"
    assert values["player"] == "spotify"
    assert values["cur"] == 1
    assert values["avail"] == 2
    assert values["play"] == "music_pause"


def test_player_values_url_only():
    player = _player("vlc", PlaybackStatus.PAUSED, url="file:///a.ogg")
    values = player_values(player, " - ", 1, 2)
    assert values["combo"] == "file:///a.ogg"
    assert values["url"] == "file:///a.ogg"
    assert "title" not in values
    assert values["play"] == "music_play"


def test_player_values_title_only_and_empty():
    values = player_values(_player("x", title="T"), " - ", 0, 1)
    assert values["combo"] == "T"
    assert "artist" not in values
    empty = player_values(_player("x"), " - ", 0, 1)
    assert "combo" not in empty