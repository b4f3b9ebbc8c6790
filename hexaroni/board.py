"""The board: tiles, walls and pieces, and queries over them."""

from __future__ import annotations

import math
from dataclasses import dataclass

from hexaroni.geometry import HexCoord
from hexaroni.kinds import ObjectType, Player
from hexaroni.objects import Object, ObjectProps
from hexaroni.statuses import Status


class InvalidBoardError(ValueError):
    """The given objects cannot make up a board."""


_TEST_SQUARE_SIZE = 7
_TEST_SQUARE_BASE_LIFESPAN = 48

_TEST_SQUARE_WALLS: tuple[tuple[int, int], ...] = (
    (3, 4),
    (2, 2),
    (3, 2),
    (4, 4),
    (0, 4),
    (6, 2),
)

_TEST_SQUARE_PIECES: tuple[tuple[ObjectType, int, int], ...] = (
    (ObjectType.DASHER, 1, 1),
    (ObjectType.DASHER, 5, 5),
    (ObjectType.DASHER, 1, 2),
    (ObjectType.DASHER, 4, 5),
    (ObjectType.DASHER, 2, 1),
    (ObjectType.DASHER, 5, 4),
    (ObjectType.DASHER, 4, 0),
    (ObjectType.DASHER, 2, 6),
    (ObjectType.JUMPER, 0, 3),
    (ObjectType.JUMPER, 6, 3),
    (ObjectType.JUMPER, 6, 6),
    (ObjectType.JUMPER, 0, 0),
    (ObjectType.JUMPER, 1, 4),
    (ObjectType.JUMPER, 5, 2),
    (ObjectType.JUMPER, 0, 5),
    (ObjectType.JUMPER, 6, 1),
)


def _fall_delay(x: int) -> int:
    """How many moves earlier a tile falls the farther it is from the centre line."""
    return math.floor(33.0 * abs(x - 3) / 7.0 + 0.5)


def _verify(objects: list[Object]) -> None:
    tiles = [o for o in objects if o.is_tile()]
    others = [o for o in objects if not o.is_tile()]

    tile_coords: set[HexCoord] = set()
    for tile in tiles:
        if tile.coord in tile_coords:
            raise InvalidBoardError(f"duplicate tile coord: {tile.coord!r}")
        tile_coords.add(tile.coord)

    object_coords: set[HexCoord] = set()
    for obj in others:
        if obj.coord in object_coords:
            raise InvalidBoardError(f"duplicate object coord: {obj.coord!r}")
        object_coords.add(obj.coord)

    oids: set[int] = set()
    for obj in tiles + others:
        if obj.props.oid in oids:
            raise InvalidBoardError(f"duplicate oid: oid={obj.props.oid}")
        oids.add(obj.props.oid)
        if obj.coord not in tile_coords:
            raise InvalidBoardError(f"object placed on non-tile: oid={obj.props.oid}")

    for player in (Player.A, Player.B):
        if not any(o.owned_by(player) for o in objects):
            raise InvalidBoardError(f"no pieces for {player.value}")


@dataclass
class Board:
    """A square hex board of side ``size`` holding tiles and the objects on them."""

    size: int
    objects: list[Object]

    def __post_init__(self) -> None:
        self.objects = list(self.objects)
        _verify(self.objects)

    @classmethod
    def test_square(cls) -> Board:
        """The standard 7x7 opening position."""
        size = _TEST_SQUARE_SIZE
        tiles = [
            Object.tile(
                y * size + x,
                HexCoord(x, y, size),
                _TEST_SQUARE_BASE_LIFESPAN - _fall_delay(x) - _fall_delay(y),
            )
            for x in range(size)
            for y in range(size)
        ]
        first_wall = len(tiles)
        walls = [
            Object.wall(first_wall + i, HexCoord(x, y, size))
            for i, (x, y) in enumerate(_TEST_SQUARE_WALLS)
        ]
        first_piece = first_wall + len(walls)
        pieces = [
            Object(
                otype,
                HexCoord(x, y, size),
                Player.A if (first_piece + i) % 2 == 0 else Player.B,
                ObjectProps(oid=first_piece + i),
            )
            for i, (otype, x, y) in enumerate(_TEST_SQUARE_PIECES)
        ]
        return cls(size, walls + pieces + tiles)

    def tiles(self) -> list[Object]:
        return [o for o in self.objects if o.is_tile()]

    def pieces(self) -> list[Object]:
        """Everything that is not a tile, walls included."""
        return [o for o in self.objects if not o.is_tile()]

    def tile_at(self, coord: HexCoord) -> Object | None:
        return next((t for t in self.tiles() if t.coord == coord), None)

    def piece_at(self, coord: HexCoord) -> Object | None:
        """The piece at ``coord``, dead or alive."""
        return next((p for p in self.pieces() if p.coord == coord), None)

    def get(self, obj: Object) -> Object | None:
        """The board's own object with the same oid as ``obj``."""
        return next((o for o in self.objects if o.props.oid == obj.props.oid), None)

    def add_object(self, obj: Object) -> None:
        self.objects.append(obj)

    def remove_object(self, obj: Object) -> None:
        self.objects = [o for o in self.objects if o.props.oid != obj.props.oid]

    def kill_piece_at(self, coord: HexCoord, status: Status | None = None) -> None:
        for piece in self.pieces():
            if piece.coord == coord:
                piece.set_killed(status)

    def kill_all_at(self, coord: HexCoord, status: Status | None = None) -> None:
        for obj in self.objects:
            if obj.coord == coord:
                obj.set_killed(status)

    def is_empty(self, coord: HexCoord) -> bool:
        piece = self.piece_at(coord)
        return piece is None or piece.props.dead

    def contents(self, coord: HexCoord) -> Object | None:
        """The living piece at ``coord``, if any."""
        return next(
            (p for p in self.pieces() if p.coord == coord and not p.props.dead), None
        )

    def owner(self, coord: HexCoord) -> Player | None:
        piece = self.contents(coord)
        return piece.player if piece is not None else None