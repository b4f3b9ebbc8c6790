"""Dragging a piece to choose where it moves."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hexaroni.geometry import HexCoord
from hexaroni.moves import Move, legal_moves
from hexaroni.objects import Object
from hexaroni.statuses import Status

if TYPE_CHECKING:
    from hexaroni.game_controller import GameController


@dataclass
class Drag:
    """A piece being dragged, with the targets and moves open to it."""

    obj: Object
    targets: list[HexCoord] = field(default_factory=list)
    moves: list[Move] = field(default_factory=list)

    @classmethod
    def create(cls, obj: Object, game: GameController) -> Drag:
        """Start dragging ``obj``; it is marked as dragged on the board.

        While the game does not allow moves the drag carries no targets.
        """
        if not game.game_state.allows_moves():
            return cls(copy.deepcopy(obj))
        own = game.board.get(obj)
        if own is None:
            raise ValueError(f"object oid={obj.props.oid} is not on the board")
        own.add_status(Status.new_dragged())
        moves = legal_moves(obj, game.board)
        return cls(copy.deepcopy(obj), [m.target() for m in moves], moves)

    def get_move_to(self, target: HexCoord) -> Move | None:
        return next((m for m in self.moves if m.target() == target), None)

    def has_move_to(self, target: HexCoord) -> bool:
        return target in self.targets

    def get_move(self, target: HexCoord) -> Move | None:
        return self.get_move_to(target)