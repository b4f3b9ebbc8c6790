"""Game tuning and presentation settings."""

from __future__ import annotations

from dataclasses import dataclass, field

from hexaroni.kinds import ObjectType, Player
from hexaroni.status_types import StatusType, Wobble

Color = tuple[float, float, float, float]
Vec3 = tuple[float, float, float]

_PINK: Color = (1.0, 0.43, 0.76, 1.0)
_SKYBLUE: Color = (0.4, 0.75, 1.0, 1.0)
_BLACK: Color = (0.0, 0.0, 0.0, 1.0)
_RED: Color = (0.9, 0.16, 0.22, 1.0)


def _default_player_colors() -> dict[Player, Color]:
    return {Player.A: _PINK, Player.B: _SKYBLUE, Player.GOD: _BLACK}


def _default_object_colors() -> dict[ObjectType, Color]:
    return {
        ObjectType.WALL: (0.06, 0.06, 0.06, 1.0),
        ObjectType.DASHER: _BLACK,
        ObjectType.JUMPER: _BLACK,
    }


@dataclass(frozen=True)
class Config:
    starting_player: Player = Player.A
    player_color: dict[Player, Color] = field(default_factory=_default_player_colors)
    object_color: dict[ObjectType, Color] = field(default_factory=_default_object_colors)
    game_start_countdown: float = 2.5
    play_move_timeout: float = 5.0
    move_application_time: float = 0.25
    kill_duration: float = 0.4
    tile_base_color: Color = (0.03, 0.03, 0.03, 1.0)
    tile_dragged_from_color: Color = _RED
    tile_targeted_color: Color = _RED
    tile_possible_move_color: Color = tuple(0.5 * c for c in _SKYBLUE)  # type: ignore[assignment]
    camera_up: Vec3 = (0.0, 0.0, 1.0)
    camera_position: Vec3 = (0.5, 1.5, -10.0)
    camera_target: Vec3 = (0.0, 0.0, 0.0)
    render_scale: float = 1.0
    falling_tiles_heads_up: int = 2
    falling_tiles_indicator: StatusType = Wobble(amplitude=0.2, speed=37.1)
    dasher_can_fly: bool = False


CONF = Config()