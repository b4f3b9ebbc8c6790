"""Mouse and keyboard input turned into hover, target and drag state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

from hexaroni.drag import Drag
from hexaroni.geometry import ScreenCoord
from hexaroni.objects import Object
from hexaroni.transforms import Camera, project_point

if TYPE_CHECKING:
    from hexaroni.game_controller import GameController

_EPSILON = float(np.finfo(np.float32).eps)


class MouseAction(Enum):
    NONE = "none"
    DRAGGING = "dragging"
    DROP = "drop"


class KbdAction(Enum):
    QUIT = "quit"
    RELOAD_SHADER = "reload_shader"
    START_GAME = "start_game"
    RESET = "reset"


def mouse_to_board(
    mouse_x: float,
    mouse_y: float,
    screen_width: float,
    screen_height: float,
    camera: Camera,
) -> ScreenCoord | None:
    """Where the ray under the mouse meets the board plane z = 0, if it does."""
    ndc_x = 2.0 * mouse_x / screen_width - 1.0
    ndc_y = 2.0 * mouse_y / screen_height - 1.0
    inverse = np.linalg.inv(camera.matrix())
    near = project_point(inverse, (ndc_x, ndc_y, -1.0))
    far = project_point(inverse, (ndc_x, ndc_y, 1.0))
    origin = np.asarray(camera.position, dtype=float)
    direction = far - near
    direction /= np.linalg.norm(direction)
    if abs(direction[2]) <= _EPSILON:
        return None
    t = -origin[2] / direction[2]
    hit = origin + t * direction
    return ScreenCoord(float(hit[0]), float(hit[1]))


@dataclass
class ControlStatus:
    """What the pointer is doing to the board this frame."""

    action: MouseAction = MouseAction.NONE
    mouse_pos: ScreenCoord | None = None
    hovering: Object | None = None
    dragging: Drag | None = None
    targeting: Object | None = None

    def update(
        self,
        game: GameController,
        mouse_pos: ScreenCoord | None,
        pressed: bool = False,
        down: bool = False,
        released: bool = False,
    ) -> None:
        """Refresh from the board position under the mouse and the left button."""
        self.mouse_pos = mouse_pos
        self.hovering = self._hovered_object(game)
        self.targeting = self._targeted_tile(game)
        self.action = self._next_action(pressed, down, released)

    def _next_action(self, pressed: bool, down: bool, released: bool) -> MouseAction:
        if released:
            if self.action is MouseAction.DRAGGING:
                return MouseAction.DROP
        elif pressed and self.hovering is not None:
            return MouseAction.DRAGGING
        elif down:
            return self.action
        return MouseAction.NONE

    def _targeted_tile(self, game: GameController) -> Object | None:
        hovered = self.hovering
        if hovered is None:
            return self._hovered_tile(game)
        if hovered.props.dead:
            return None
        current = game.current_player()
        targetable = current if self.action is MouseAction.NONE else current.opponent()
        if self.mouse_pos is not None and hovered.owned_by(targetable):
            return game.get_tile_at_pos(self.mouse_pos)
        return None

    def _hovered_object(self, game: GameController) -> Object | None:
        if self.mouse_pos is None:
            return None
        piece = game.get_piece_at_pos(self.mouse_pos)
        if piece is not None and not piece.props.dead:
            return piece
        return None

    def _hovered_tile(self, game: GameController) -> Object | None:
        if self.mouse_pos is None:
            return None
        tile = game.get_tile_at_pos(self.mouse_pos)
        if tile is None:
            return None
        occupant = game.board.contents(tile.coord)
        if occupant is not None and not occupant.owned_by(game.current_player()):
            return None
        return tile