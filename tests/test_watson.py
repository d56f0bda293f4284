from datetime import timedelta

import pytest

from statusblocks.watson import (
    WatsonState,
    default_state_path,
    format_delta_after,
    format_delta_past,
    parse_state,
)


def test_past_zero_is_now():
    assert format_delta_past(timedelta(0)) == "now"


def test_past_seconds_only_is_now():
    assert format_delta_past(timedelta(seconds=59)) == "now"


def test_past_single_minute():
    assert format_delta_past(timedelta(minutes=1)) == "1 minute ago"


def test_past_uses_largest_unit():
    assert format_delta_past(timedelta(hours=2, minutes=5)) == "2 hours ago"
    assert format_delta_past(timedelta(days=8)) == "1 week ago"


def test_after_zero_is_now():
    assert format_delta_after(timedelta(0)) == "now"


def test_after_seconds():
    assert format_delta_after(timedelta(seconds=1)) == "after 1 second"
    assert format_delta_after(timedelta(seconds=30)) == "after 30 seconds"


def test_after_uses_largest_unit():
    assert format_delta_after(timedelta(days=3, hours=4)) == "after 3 days"


def test_parse_active_state():
    state = parse_state('{"project": "work", "start": 0, "tags": ["a", "b"]}')
    assert state.active
    assert state.project == "work"
    assert state.tags == ("a", "b")
    assert state.start.timestamp() == 0


def test_parse_empty_object_is_idle():
    state = parse_state("{}")
    assert not state.active


def test_parse_incomplete_object_is_idle():
    assert not parse_state('{"project": "work"}').active


def test_parse_invalid_json():
    with pytest.raises(ValueError):
        parse_state("not json")


def test_parse_non_object():
    with pytest.raises(ValueError):
        parse_state('"text"')


def test_format_without_time():
    state = parse_state('{"project": "work", "start": 0, "tags": ["a", "b"]}')
    assert state.format(False, "started", format_delta_past) == "work [a b]"


def test_format_without_tags():
    state = parse_state('{"project": "home", "start": 0, "tags": []}')
    assert state.format(False, "started", format_delta_past) == "home"


def test_format_with_time():
    state = parse_state('{"project": "work", "start": 1000, "tags": ["a"]}')
    now = state.start + timedelta(hours=3)
    assert state.format(True, "started", format_delta_past, now) == "work [a] started 3 hours ago"
    assert state.format(True, "stopped", format_delta_after, now) == "work [a] stopped after 3 hours"


def test_format_idle_raises():
    with pytest.raises(ValueError):
        WatsonState().format(True, "started", format_delta_past)


def test_default_state_path(tmp_path):
    assert default_state_path(tmp_path) == tmp_path / "watson" / "state"


def test_default_state_path_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert default_state_path() == tmp_path / "watson" / "state"