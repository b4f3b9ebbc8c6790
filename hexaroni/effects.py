"""Effects that game entities hand to the controller to apply."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hexaroni.config import CONF
from hexaroni.geometry import HexCoord, ScreenCoord
from hexaroni.status_types import StatusType
from hexaroni.statuses import Status

if TYPE_CHECKING:
    from hexaroni.objects import Object


@dataclass(frozen=True)
class Effect:
    """Base of all effects."""

    def applying_status(self, time: float) -> Status | None:
        """The status to put on whatever the effect applies to, if any."""
        return None


@dataclass(frozen=True)
class Kill(Effect):
    victim: Object
    killer: Object | None = None
    # at what stage of the move animation the kill occurs
    animation_delay_frac: float | None = None

    def applying_status(self, time: float) -> Status | None:
        if self.killer is not None:
            victim_pos = ScreenCoord.from_hexcoord(self.victim.coord).as_vec()
            killer_pos = ScreenCoord.from_hexcoord(self.killer.coord).as_vec()
            knockback = victim_pos - killer_pos
        else:
            knockback = (0.0, 0.0, 0.0)
        duration = CONF.kill_duration
        start_time = time + duration * (self.animation_delay_frac or 0.0)
        return Status.new_killed(knockback, start_time, duration)


@dataclass(frozen=True)
class KillAllOn(Effect):
    coord: HexCoord
    apply: StatusType | None = None
    duration: float | None = None

    def applying_status(self, time: float) -> Status | None:
        if self.apply is None:
            return None
        return Status(self.apply, time, self.duration)


@dataclass(frozen=True)
class SetStatus(Effect):
    obj: Object
    stype: StatusType
    duration: float | None = None

    def applying_status(self, time: float) -> Status | None:
        return Status(self.stype, time, self.duration)


@dataclass(frozen=True)
class NoOp(Effect):
    def applying_status(self, time: float) -> Status | None:
        return None