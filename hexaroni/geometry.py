"""Board coordinates on the hex grid and their positions in world space."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

# Axial steps per direction. Around a cell X the neighbours are laid out as
#
#     2   1
#   3   X   0
#     4   5
_DIRECTION_STEPS: tuple[tuple[int, int], ...] = (
    (0, 1),
    (-1, 1),
    (-1, 0),
    (0, -1),
    (1, -1),
    (1, 0),
)


@dataclass(frozen=True)
class HexCoord:
    """A cell of a square-indexed hex board of side ``board_size``."""

    x: int
    y: int
    board_size: int

    def __post_init__(self) -> None:
        if not (0 <= self.x < self.board_size and 0 <= self.y < self.board_size):
            raise ValueError(
                f"coord ({self.x}, {self.y}) out of bounds for board size {self.board_size}"
            )

    def get_all_directions(self) -> list[int]:
        """All six neighbour directions."""
        return list(range(len(_DIRECTION_STEPS)))

    def get_neighbor(self, direction: int, distance: int) -> HexCoord | None:
        """The cell ``distance`` steps away in ``direction``, or None if off the board."""
        if not 0 <= direction < len(_DIRECTION_STEPS):
            raise ValueError(f"{direction} is not a valid direction")
        dx, dy = _DIRECTION_STEPS[direction]
        x = self.x + dx * distance
        y = self.y + dy * distance
        if 0 <= x < self.board_size and 0 <= y < self.board_size:
            return HexCoord(x, y, self.board_size)
        return None

    def get_all_neighbours(self, distance: int) -> list[HexCoord]:
        """Every on-board cell ``distance`` steps away along a direction."""
        neighbours = (self.get_neighbor(d, distance) for d in self.get_all_directions())
        return [n for n in neighbours if n is not None]


@dataclass(frozen=True)
class ScreenCoord:
    """A point in world space."""

    x: float
    y: float
    z: float = 0.0

    @classmethod
    def from_hexcoord(cls, coord: HexCoord) -> ScreenCoord:
        """World position of the centre of a board cell."""
        s = float(coord.board_size)
        cx = coord.x - 0.5 * s
        cy = coord.y - 0.5 * s
        offset_x = 1.2 + cy
        offset_y = 1.2
        x = offset_x + 2.15 * cx - 0.6
        y = offset_y + 1.85 * cy - 0.6
        return cls(x, y, 0.0)

    def dist_from(self, other: ScreenCoord) -> float:
        return math.dist((self.x, self.y, self.z), (other.x, other.y, other.z))

    def as_vec(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def with_x(self, x: float) -> ScreenCoord:
        return ScreenCoord(x, self.y, self.z)

    def with_y(self, y: float) -> ScreenCoord:
        return ScreenCoord(self.x, y, self.z)

    def with_z(self, z: float) -> ScreenCoord:
        return ScreenCoord(self.x, self.y, z)

    def add(self, other: ScreenCoord) -> ScreenCoord:
        return ScreenCoord(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: ScreenCoord) -> ScreenCoord:
        return ScreenCoord(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, factor: float) -> ScreenCoord:
        return ScreenCoord(self.x * factor, self.y * factor, self.z * factor)