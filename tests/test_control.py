import pytest

from eposkit.control import (
    DOWN,
    INITIAL_PRIORITY,
    LEFT,
    MAX_PRIORITY,
    MIN_PRIORITY,
    RIGHT,
    UP,
    PriorityControl,
)


@pytest.fixture
def recorded():
    calls = []
    control = PriorityControl(lambda tid, prio: calls.append((tid, prio)), 2, 3)
    return control, calls


def test_initial_priorities_set(recorded):
    control, calls = recorded
    assert calls == [(2, INITIAL_PRIORITY), (3, INITIAL_PRIORITY)]
    assert (control.p1, control.p2) == (INITIAL_PRIORITY, INITIAL_PRIORITY)


def test_up_and_down_change_first_task(recorded):
    control, calls = recorded
    assert control.handle_key(UP) is True
    assert calls[-1] == (2, INITIAL_PRIORITY + 1)
    assert control.handle_key(DOWN) is True
    assert calls[-1] == (2, INITIAL_PRIORITY)
    assert control.p2 == INITIAL_PRIORITY


def test_left_and_right_change_second_task(recorded):
    control, calls = recorded
    control.handle_key(LEFT)
    assert calls[-1] == (3, INITIAL_PRIORITY + 1)
    control.handle_key(RIGHT)
    control.handle_key(RIGHT)
    assert calls[-1] == (3, INITIAL_PRIORITY - 1)
    assert control.p1 == INITIAL_PRIORITY


def test_upper_limit_holds(recorded):
    control, calls = recorded
    for _ in range(100):
        control.handle_key(UP)
    assert control.p1 == MAX_PRIORITY
    before = len(calls)
    assert control.handle_key(UP) is False
    assert len(calls) == before


def test_lower_limit_holds(recorded):
    control, _ = recorded
    for _ in range(100):
        control.handle_key(RIGHT)
    assert control.p2 == MIN_PRIORITY
    assert control.handle_key(RIGHT) is False


def test_unknown_key_ignored(recorded):
    control, calls = recorded
    assert control.handle_key(ord("q")) is False
    assert len(calls) == 2