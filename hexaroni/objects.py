"""Objects on the board: tiles, walls and pieces."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Iterable

from hexaroni.config import CONF
from hexaroni.effects import Effect, KillAllOn, SetStatus
from hexaroni.geometry import HexCoord, ScreenCoord
from hexaroni.kinds import ObjectType, Player
from hexaroni.status_types import DelayedEffect, Falling, StatusType
from hexaroni.statuses import Status


@dataclass
class ObjectProps:
    oid: int = 0
    selectable: bool = True
    draggable: bool = True
    dead: bool = False
    size: float = 1.0


def _kind_of(stype: StatusType | type[StatusType]) -> type[StatusType]:
    return stype if isinstance(stype, type) else type(stype)


@dataclass(eq=False)
class Object:
    """A board object; two objects are equal when their oids are."""

    otype: ObjectType
    coord: HexCoord
    player: Player
    props: ObjectProps = field(default_factory=ObjectProps)
    statuses: list[Status] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Object):
            return NotImplemented
        return self.props.oid == other.props.oid

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def tile(cls, oid: int, coord: HexCoord, lifespan: int) -> Object:
        """A ground tile that falls after ``lifespan`` moves, wobbling shortly before."""
        indicator_move_nr = lifespan - CONF.falling_tiles_heads_up
        if indicator_move_nr < 0:
            raise ValueError(
                f"tile lifespan {lifespan} shorter than the falling heads-up"
            )
        props = ObjectProps(oid=oid, size=1.1, selectable=False, draggable=False)
        tile = cls(ObjectType.TILE, coord, Player.GOD, props)
        tile.add_status(
            Status.new_delayed_effect_with_indicator(
                lifespan,
                KillAllOn(coord, Falling(), 2.0),
                indicator_move_nr,
                SetStatus(copy.deepcopy(tile), CONF.falling_tiles_indicator, None),
            )
        )
        return tile

    @classmethod
    def wall(cls, oid: int, coord: HexCoord) -> Object:
        props = ObjectProps(oid=oid, size=1.1, selectable=False, draggable=False)
        return cls(ObjectType.WALL, coord, Player.GOD, props)

    def tick(self, curr_move_nr: int, time: float = 0.0) -> list[Effect]:
        """Fire any delayed effect (and its indicator) due on this move."""
        delayed = self._find_status(DelayedEffect)
        if delayed is None:
            return []
        stype = delayed.stype
        effects: list[Effect] = []
        if stype.indicator_move_nr is not None and stype.indicator_move_nr == curr_move_nr:
            if stype.indicator is None:
                raise ValueError(
                    f"no indicator for delayed effect with indicator_move_nr set: {delayed!r}"
                )
            effects.append(stype.indicator)
        if stype.move_nr == curr_move_nr:
            self.remove_status(DelayedEffect)
            effects.append(stype.effect)
        return effects

    def is_tile(self) -> bool:
        return self.otype is ObjectType.TILE

    def owned_by(self, player: Player) -> bool:
        return self.player is player

    def screen_coord(self) -> ScreenCoord:
        return ScreenCoord.from_hexcoord(self.coord)

    def add_status(self, status: Status) -> None:
        existing = next((s for s in self.statuses if s.stype == status.stype), None)
        if existing is not None:
            raise ValueError(
                f"same status added twice (existing={existing!r} new={status!r})"
            )
        self.statuses.append(status)

    def add_statuses(self, statuses: Iterable[Status]) -> None:
        for status in statuses:
            self.add_status(status)

    def remove_status(self, stype: StatusType | type[StatusType]) -> None:
        """Drop every status of the same kind as ``stype``."""
        kind = _kind_of(stype)
        self.statuses = [s for s in self.statuses if type(s.stype) is not kind]

    def set_killed(self, status: Status | None = None) -> None:
        self.props.dead = True
        if status is not None:
            self.add_status(status)

    def _find_status(self, stype: StatusType | type[StatusType]) -> Status | None:
        kind = _kind_of(stype)
        return next((s for s in self.statuses if type(s.stype) is kind), None)