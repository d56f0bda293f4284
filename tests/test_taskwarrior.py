import subprocess
from unittest import mock

import pytest

from statusblocks.core import State
from statusblocks.taskwarrior import (
    Filter,
    default_filters,
    get_number_of_tasks,
    parse_task_count,
    task_flags,
    task_state,
)


def test_default_filters():
    assert default_filters() == [Filter(name="pending", filter="-COMPLETED -DELETED")]


def test_parse_task_count_trims():
    assert parse_task_count(b"  42\n") == 42


@pytest.mark.parametrize("output", [b"", b"abc", b"-1", b"1.5", b"4294967296"])
def test_parse_task_count_rejects(output):
    with pytest.raises(ValueError, match="could not parse"):
        parse_task_count(output)


def test_parse_task_count_max_u32():
    assert parse_task_count(b"4294967295") == 2**32 - 1


def test_parse_task_count_invalid_utf8():
    with pytest.raises(ValueError, match="invalid UTF-8"):
        parse_task_count(b"\xff")


def test_get_number_of_tasks_runs_task():
    done = subprocess.CompletedProcess([], 0, stdout=b"7\n", stderr=b"")
    with mock.patch("statusblocks.taskwarrior.subprocess.run", return_value=done) as run:
        assert get_number_of_tasks("+PENDING") == 7
    assert run.call_args.args[0] == ["task", "rc.gc=off", "+PENDING", "count"]


def test_get_number_of_tasks_missing_binary():
    with mock.patch(
        "statusblocks.taskwarrior.subprocess.run", side_effect=FileNotFoundError("task")
    ):
        with pytest.raises(RuntimeError, match="failed to run taskwarrior"):
            get_number_of_tasks("+PENDING")


def test_task_state_defaults():
    assert task_state(0) is State.IDLE
    assert task_state(9) is State.IDLE
    assert task_state(10) is State.WARNING
    assert task_state(19) is State.WARNING
    assert task_state(20) is State.CRITICAL


def test_task_state_custom_thresholds():
    assert task_state(3, warning_threshold=2, critical_threshold=5) is State.WARNING
    assert task_state(5, warning_threshold=2, critical_threshold=5) is State.CRITICAL


def test_task_flags():
    assert task_flags(0) == {"done"}
    assert task_flags(1) == {"single"}
    assert task_flags(2) == frozenset()