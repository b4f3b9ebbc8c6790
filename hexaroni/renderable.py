"""Building renderables for board objects from their state and the controls."""

from __future__ import annotations

from typing import Sequence

from hexaroni.config import CONF
from hexaroni.control import ControlStatus
from hexaroni.kinds import ObjectType
from hexaroni.meshes import (
    Renderable,
    obj_dasher_mesh,
    obj_jumper_mesh,
    obj_wall_mesh,
    tile_hex_mesh,
)
from hexaroni.objects import Object


def _add(a: Sequence[float], b: Sequence[float]) -> tuple[float, ...]:
    return tuple(x + y for x, y in zip(a, b))


def tile_renderable(tile: Object, control_status: ControlStatus, time: float) -> Renderable:
    """A tile coloured by whether it is dragged from, targeted or a possible move."""
    highlighted = False
    color: tuple[float, ...] = tuple(CONF.tile_base_color)
    drag = control_status.dragging
    if drag is not None:
        if drag.obj.coord == tile.coord:
            color = _add(color, CONF.tile_dragged_from_color)
            highlighted = True
    elif control_status.targeting is not None and control_status.targeting == tile:
        color = _add(color, CONF.tile_targeted_color)
        highlighted = True
    if drag is not None and drag.has_move_to(tile.coord):
        color = _add(color, CONF.tile_possible_move_color)
        highlighted = True
    return tile_hex_mesh(tile, color, highlighted, time)


def object_renderable(obj: Object, as_active: bool, time: float) -> Renderable:
    """The mesh for a wall or a piece."""
    player_color = CONF.player_color[obj.player]
    object_color = CONF.object_color.get(obj.otype)
    if object_color is None:
        raise ValueError(f"no renderable for object type {obj.otype.value}")
    if obj.otype is ObjectType.WALL:
        return obj_wall_mesh(obj, player_color, player_color, time)
    if obj.otype is ObjectType.DASHER:
        return obj_dasher_mesh(obj, object_color, player_color, as_active, time)
    return obj_jumper_mesh(obj, object_color, player_color, as_active, time)