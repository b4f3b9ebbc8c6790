"""Moves and the rules that generate them."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from hexaroni.board import Board
from hexaroni.config import CONF
from hexaroni.effects import Effect, Kill
from hexaroni.geometry import HexCoord, ScreenCoord
from hexaroni.kinds import ObjectType, Player
from hexaroni.objects import Object

_JUMPER_KILL_DELAY_FRAC = 0.45
_DASHER_KILL_DELAY_SPAN = 0.65
# direction offsets of a jumper's hook: counter-clockwise first, then clockwise
_HOOK_TURNS = (5, 1)


@dataclass
class Move:
    """A piece travelling along ``path``, with the effects the move causes."""

    obj: Object
    path: list[HexCoord]
    effects: list[Effect] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.path = list(self.path)
        if len(self.path) < 2:
            raise ValueError("path must have at least two coordinates")

    def target(self) -> HexCoord:
        return self.path[-1]


def legal_moves(obj: Object, board: Board) -> list[Move]:
    """Every move the given piece may make on ``board``."""
    if obj.otype is ObjectType.DASHER:
        return _dasher_moves(obj, board)
    if obj.otype is ObjectType.JUMPER:
        return _jumper_moves(obj, board)
    return []


def _tile_available_for_step(
    coord: HexCoord, board: Board, tolerated: Player | None
) -> bool:
    """A living tile holding no piece, or only one of the tolerated player's."""
    tile = board.tile_at(coord)
    if tile is None or tile.props.dead:
        return False
    if tolerated is None:
        return True
    piece = board.piece_at(coord)
    return piece is None or piece.owned_by(tolerated)


def _jumper_moves(obj: Object, board: Board) -> list[Move]:
    opponent = obj.player.opponent()
    moves = []
    for direction in obj.coord.get_all_directions():
        intermediate = obj.coord.get_neighbor(direction, 2)
        if intermediate is None:
            continue
        for turn in _HOOK_TURNS:
            target = intermediate.get_neighbor((direction + turn) % 6, 1)
            if target is not None and _tile_available_for_step(target, board, opponent):
                moves.append(_jumper_move(obj, intermediate, target, board, opponent))
    return moves


def _jumper_move(
    obj: Object, intermediate: HexCoord, target: HexCoord, board: Board, opponent: Player
) -> Move:
    victim = board.contents(target)
    effects: list[Effect] = []
    if victim is not None and victim.owned_by(opponent):
        effects.append(
            Kill(copy.deepcopy(victim), copy.deepcopy(obj), _JUMPER_KILL_DELAY_FRAC)
        )
    return Move(copy.deepcopy(obj), [obj.coord, intermediate, target], effects)


def _dasher_moves(obj: Object, board: Board) -> list[Move]:
    opponent = obj.player.opponent()
    moves = []
    for direction in obj.coord.get_all_directions():
        path, victims = _dasher_path(obj, direction, board, opponent)
        if len(path) < 2:
            continue
        effects: list[Effect] = [
            Kill(
                copy.deepcopy(victim),
                copy.deepcopy(obj),
                _kill_delay_frac(obj.coord, path[-1], where),
            )
            for victim, where in victims
        ]
        moves.append(Move(copy.deepcopy(obj), path, effects))
    return moves


def _dasher_path(
    obj: Object, direction: int, board: Board, opponent: Player
) -> tuple[list[HexCoord], list[tuple[Object, HexCoord]]]:
    path = [obj.coord]
    victims: list[tuple[Object, HexCoord]] = []
    current = obj.coord
    while (step := current.get_neighbor(direction, 1)) is not None:
        steppable = _tile_available_for_step(step, board, opponent) or (
            CONF.dasher_can_fly and board.tile_at(step) is None
        )
        if not steppable:
            break
        victim = board.contents(step)
        if victim is not None:
            victims.append((victim, step))
        path.append(step)
        current = step
    return path, victims


def _kill_delay_frac(start: HexCoord, end: HexCoord, victim_coord: HexCoord) -> float:
    a = ScreenCoord.from_hexcoord(start)
    full = a.dist_from(ScreenCoord.from_hexcoord(end))
    to_victim = a.dist_from(ScreenCoord.from_hexcoord(victim_coord))
    return _DASHER_KILL_DELAY_SPAN * to_victim / full