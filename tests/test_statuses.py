import pytest

from hexaroni.effects import NoOp
from hexaroni.geometry import ScreenCoord
from hexaroni.status_types import DelayedEffect, Dragged, Falling, Killed, Moving, Selected
from hexaroni.statuses import Status


def test_default_status_is_untimed_selected():
    status = Status()
    assert status.stype == Selected()
    assert (status.start_time, status.duration) == (None, None)


def test_new_move():
    a, b = ScreenCoord(0.0, 0.0), ScreenCoord(1.0, 1.0)
    status = Status.new_move(a, b, 2.0, 0.25, 0.5)
    assert status == Status(Moving(a, b, 0.5), 2.0, 0.25)


def test_new_killed():
    status = Status.new_killed((1.0, 0.0, 0.0), 3.0, 0.4)
    assert status.stype == Killed((1.0, 0.0, 0.0))
    assert (status.start_time, status.duration) == (3.0, 0.4)


def test_new_dragged_is_untimed():
    status = Status.new_dragged()
    assert status.stype == Dragged()
    assert status.is_expired(1e9) is False


def test_delayed_effects():
    plain = Status.new_delayed_effect(3, NoOp())
    assert plain.stype == DelayedEffect(3, NoOp())
    with_indicator = Status.new_delayed_effect_with_indicator(5, NoOp(), 3, NoOp())
    assert with_indicator.stype.indicator_move_nr == 3
    assert with_indicator.stype.indicator == NoOp()


def test_restarted_at():
    status = Status(Falling(), 1.0, 2.0)
    restarted = status.restarted_at(7.0)
    assert restarted == Status(Falling(), 7.0, 2.0)


def test_restart_without_start_time_raises():
    with pytest.raises(ValueError):
        Status(Falling()).restarted_at(1.0)


def test_with_times():
    assert Status(Falling()).with_times(1.0, 2.0) == Status(Falling(), 1.0, 2.0)


def test_is_expired():
    status = Status(Falling(), 1.0, 2.0)
    assert status.is_expired(3.0) is False
    assert status.is_expired(3.5) is True
    assert Status(Falling(), 1.0, None).is_expired(100.0) is False