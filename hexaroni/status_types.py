"""The kinds of status an object can carry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hexaroni.geometry import ScreenCoord

if TYPE_CHECKING:
    from hexaroni.effects import Effect


@dataclass(frozen=True)
class StatusType:
    """Base of all status kinds."""


@dataclass(frozen=True)
class Selected(StatusType):
    pass


@dataclass(frozen=True)
class Dragged(StatusType):
    pass


@dataclass(frozen=True)
class Hovered(StatusType):
    pass


@dataclass(frozen=True)
class Targeted(StatusType):
    pass


@dataclass(frozen=True)
class Killed(StatusType):
    knockback: tuple[float, float, float] = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        knockback = tuple(float(v) for v in self.knockback)
        if len(knockback) != 3:
            raise ValueError("knockback must have three components")
        object.__setattr__(self, "knockback", knockback)


@dataclass(frozen=True)
class Moving(StatusType):
    from_: ScreenCoord
    to: ScreenCoord
    height: float = 0.0


@dataclass(frozen=True)
class Wobble(StatusType):
    amplitude: float
    speed: float


@dataclass(frozen=True)
class Falling(StatusType):
    pass


@dataclass(frozen=True)
class DelayedEffect(StatusType):
    move_nr: int
    effect: Effect
    indicator_move_nr: int | None = None
    indicator: Effect | None = None