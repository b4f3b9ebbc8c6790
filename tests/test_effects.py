import pytest

from hexaroni.config import CONF
from hexaroni.effects import Kill, KillAllOn, NoOp, SetStatus
from hexaroni.geometry import HexCoord
from hexaroni.kinds import ObjectType, Player
from hexaroni.objects import Object, ObjectProps
from hexaroni.status_types import Falling, Killed, Wobble
from hexaroni.statuses import Status


def _piece(oid, x, y, player=Player.A):
    return Object(ObjectType.DASHER, HexCoord(x, y, 7), player, ObjectProps(oid=oid))


def test_kill_knockback_points_away_from_killer():
    victim = _piece(1, 3, 3, Player.B)
    killer = _piece(2, 2, 3)
    status = Kill(victim, killer, None).applying_status(1.0)
    assert status.stype.knockback == pytest.approx((2.15, 0.0, 0.0))
    assert status.start_time == 1.0
    assert status.duration == CONF.kill_duration


def test_kill_without_killer_has_no_knockback():
    status = Kill(_piece(1, 3, 3)).applying_status(2.0)
    assert status == Status(Killed((0.0, 0.0, 0.0)), 2.0, CONF.kill_duration)


def test_kill_delay_shifts_start():
    status = Kill(_piece(1, 3, 3), None, 0.5).applying_status(1.0)
    assert status.start_time == pytest.approx(1.0 + 0.5 * CONF.kill_duration)


def test_kill_all_on_with_and_without_status():
    coord = HexCoord(1, 1, 7)
    assert KillAllOn(coord, Falling(), 2.0).applying_status(3.0) == Status(Falling(), 3.0, 2.0)
    assert KillAllOn(coord).applying_status(3.0) is None


def test_set_status():
    effect = SetStatus(_piece(1, 0, 0), Wobble(0.2, 37.1), None)
    assert effect.applying_status(4.0) == Status(Wobble(0.2, 37.1), 4.0, None)


def test_noop_applies_nothing():
    assert NoOp().applying_status(1.0) is None


def test_kill_effects_compare_victims_by_oid():
    a = _piece(1, 3, 3)
    moved = _piece(1, 4, 4)
    assert Kill(a) == Kill(moved)
    assert not (Kill(a) == Kill(_piece(2, 3, 3)))