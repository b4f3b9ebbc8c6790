"""The phases a game goes through."""

from __future__ import annotations

from dataclasses import dataclass

from hexaroni.kinds import Player


@dataclass(frozen=True)
class GameState:
    """Base of all game phases."""

    def allows_moves(self) -> bool:
        return not isinstance(self, (Waiting, Countdown))

    def on_apply_move(self, now: float) -> GameState:
        """The state after a move made at ``now``; only play advances."""
        return self

    def winner(self) -> Player | None:
        return None


@dataclass(frozen=True)
class Editing(GameState):
    pass


@dataclass(frozen=True)
class Waiting(GameState):
    pass


@dataclass(frozen=True)
class Countdown(GameState):
    started_at: float


@dataclass(frozen=True)
class Playing(GameState):
    current_player: Player
    move_start: float
    move_nr: int

    def on_apply_move(self, now: float) -> GameState:
        return Playing(self.current_player.opponent(), now, self.move_nr + 1)


@dataclass(frozen=True)
class GameOver(GameState):
    winner_player: Player

    def winner(self) -> Player | None:
        return self.winner_player