"""Players and the kinds of objects on the board."""

from __future__ import annotations

from enum import Enum


class Player(Enum):
    A = "A"
    B = "B"
    GOD = "God"  # owns non-player objects

    def opponent(self) -> Player:
        if self is Player.A:
            return Player.B
        if self is Player.B:
            return Player.A
        raise ValueError("No one opposes god")


class ObjectType(Enum):
    DASHER = "Dasher"
    JUMPER = "Jumper"
    WALL = "Wall"
    TILE = "Tile"


class TileType(Enum):
    GROUND = "Ground"