"""Statuses: a status kind together with its timing."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

from hexaroni.geometry import ScreenCoord
from hexaroni.status_types import (
    DelayedEffect,
    Dragged,
    Killed,
    Moving,
    Selected,
    StatusType,
)

if TYPE_CHECKING:
    from hexaroni.effects import Effect


@dataclass(frozen=True)
class Status:
    stype: StatusType = field(default_factory=Selected)
    start_time: float | None = None
    duration: float | None = None

    @classmethod
    def new_move(
        cls,
        from_: ScreenCoord,
        to: ScreenCoord,
        start_time: float,
        duration: float,
        height: float,
    ) -> Status:
        return cls(Moving(from_, to, height), start_time, duration)

    @classmethod
    def new_killed(
        cls, knockback: Iterable[float], start_time: float, duration: float
    ) -> Status:
        return cls(Killed(tuple(knockback)), start_time, duration)

    @classmethod
    def new_dragged(cls) -> Status:
        return cls(Dragged())

    @classmethod
    def new_delayed_effect(cls, move_nr: int, effect: Effect) -> Status:
        return cls(DelayedEffect(move_nr, effect))

    @classmethod
    def new_delayed_effect_with_indicator(
        cls, move_nr: int, effect: Effect, indicator_move_nr: int, indicator: Effect
    ) -> Status:
        return cls(DelayedEffect(move_nr, effect, indicator_move_nr, indicator))

    def restarted_at(self, time: float) -> Status:
        """The same status started again at ``time``."""
        if self.start_time is None:
            raise ValueError(f"restarted {self!r} which has no start_time")
        return dataclasses.replace(self, start_time=time)

    def with_times(self, start_time: float, duration: float) -> Status:
        return dataclasses.replace(self, start_time=start_time, duration=duration)

    def is_expired(self, time: float) -> bool:
        """True once a timed status has run past its duration."""
        if self.start_time is None or self.duration is None:
            return False
        return time > self.start_time + self.duration