import pytest

from statusblocks.net import HISTORY_LENGTH, SpeedTracker, push_to_hist


def test_push_to_hist():
    hist = [0, 0, 0, 0]
    push_to_hist(hist, 1)
    assert hist == [0, 0, 0, 1]
    push_to_hist(hist, 3)
    assert hist == [0, 0, 1, 3]
    push_to_hist(hist, 0)
    assert hist == [0, 1, 3, 0]
    push_to_hist(hist, 10)
    assert hist == [1, 3, 0, 10]
    push_to_hist(hist, 2)
    assert hist == [3, 0, 10, 2]


def test_push_to_hist_empty_raises():
    with pytest.raises(IndexError):
        push_to_hist([], 1)


def test_first_update_gives_zero_speed():
    tracker = SpeedTracker(last_time=0.0)
    assert tracker.update(100, 50, now=1.0) == (0.0, 0.0)
    assert tracker.stats == (100, 50)
    assert len(tracker.rx_hist) == HISTORY_LENGTH


def test_speed_computed_from_difference():
    tracker = SpeedTracker(last_time=0.0)
    tracker.update(100, 50, now=1.0)
    down, up = tracker.update(1100, 250, now=3.0)
    assert down == pytest.approx(1000 / 3.0)
    assert up == pytest.approx(200 / 3.0)
    assert tracker.last_time == 3.0
    assert tracker.rx_hist[-1] == down
    assert tracker.tx_hist[-1] == up


def test_missing_stats_resets():
    tracker = SpeedTracker(last_time=0.0)
    tracker.update(100, 50, now=1.0)
    tracker.update(200, 60, now=2.0)
    assert tracker.update(None, None, now=3.0) == (0.0, 0.0)
    assert tracker.stats is None
    assert tracker.update(10, 10, now=4.0) == (0.0, 0.0)
    down, up = tracker.update(40, 70, now=5.0)
    # timer was last reset at 2.0
    assert down == pytest.approx(30 / 3.0)
    assert up == pytest.approx(60 / 3.0)


def test_history_keeps_length():
    tracker = SpeedTracker(last_time=0.0)
    for step in range(20):
        tracker.update(step * 10, step * 5, now=float(step + 1))
    assert len(tracker.rx_hist) == HISTORY_LENGTH
    assert len(tracker.tx_hist) == HISTORY_LENGTH
    assert tracker.rx_hist == pytest.approx([10.0] * HISTORY_LENGTH)