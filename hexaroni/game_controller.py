"""Drives a game: turns, timing, move application and effects."""

from __future__ import annotations

import copy
from time import monotonic
from typing import Callable, Iterable

from hexaroni.board import Board
from hexaroni.config import CONF
from hexaroni.effects import Effect, Kill, KillAllOn, SetStatus
from hexaroni.game_state import Countdown, GameOver, GameState, Playing, Waiting
from hexaroni.geometry import HexCoord, ScreenCoord
from hexaroni.kinds import ObjectType, Player
from hexaroni.moves import Move
from hexaroni.objects import Object
from hexaroni.statuses import Status

_JUMP_HEIGHT = 0.5


class GameController:
    """Owns the board and the game state; ``clock`` measures turn and countdown time."""

    def __init__(
        self, board: Board | None = None, clock: Callable[[], float] = monotonic
    ) -> None:
        self.board = board if board is not None else Board.test_square()
        self.game_state: GameState = Waiting()
        self._clock = clock

    def start_game(self) -> None:
        if not isinstance(self.game_state, Waiting):
            raise RuntimeError(f"attempted to start game from state: {self.game_state!r}")
        self.game_state = Countdown(self._clock())

    def apply_move(self, move: Move, time: float, move_duration: float) -> None:
        """Play ``move`` if it is allowed now; ignored otherwise."""
        if not self.game_state.allows_moves() or not move.obj.owned_by(
            self.current_player()
        ):
            return
        self._move_to(move.obj, move.target(), time, move_duration)
        effects = list(move.effects)
        if isinstance(self.game_state, Playing):
            effects.extend(self._tick_objects(self.game_state.move_nr, time))
        self._apply_effects(effects, time)

        winner = self._winner()
        if winner is not None:
            self.game_state = GameOver(winner)
        else:
            self.game_state = self.game_state.on_apply_move(self._clock())

    def current_player(self) -> Player:
        if isinstance(self.game_state, Playing):
            return self.game_state.current_player
        if isinstance(self.game_state, GameOver):
            return self.game_state.winner_player
        return Player.A

    def get_piece_at_pos(self, pos: ScreenCoord) -> Object | None:
        return self._closest(pos, self.board.pieces())

    def get_tile_at_pos(self, pos: ScreenCoord) -> Object | None:
        return self._closest(pos, self.board.tiles())

    def tick(self, time: float) -> None:
        """Start-of-frame update: drop expired statuses and finished dead
        objects, advance the countdown, and pass the turn when it times out."""
        finished = [
            o
            for o in self.board.objects
            if o.props.dead and all(s.is_expired(time) for s in o.statuses)
        ]
        for obj in self.board.objects:
            obj.statuses = [s for s in obj.statuses if not s.is_expired(time)]
        for obj in finished:
            self.board.remove_object(obj)

        state = self.game_state
        now = self._clock()
        if isinstance(state, Countdown):
            if now - state.started_at > CONF.game_start_countdown:
                self.game_state = Playing(CONF.starting_player, now, 0)
        elif isinstance(state, Playing):
            if now - state.move_start > CONF.play_move_timeout:
                self.game_state = state.on_apply_move(now)
                self._apply_effects(self._tick_objects(state.move_nr, time), time)

        winner = self._winner()
        if winner is not None:
            self.game_state = GameOver(winner)

    def _tick_objects(self, move_nr: int, time: float) -> list[Effect]:
        return [effect for o in self.board.objects for effect in o.tick(move_nr, time)]

    def _move_to(self, obj: Object, to: HexCoord, time: float, duration: float) -> None:
        target = self.board.get(obj)
        if target is None:
            return
        height = _JUMP_HEIGHT if target.otype is ObjectType.JUMPER else 0.0
        target.statuses.append(
            Status.new_move(
                ScreenCoord.from_hexcoord(target.coord),
                ScreenCoord.from_hexcoord(to),
                time,
                duration,
                height,
            )
        )
        target.coord = to

    def _winner(self) -> Player | None:
        alive = [p for p in self.board.pieces() if not p.props.dead]
        a_alive = any(p.owned_by(Player.A) for p in alive)
        b_alive = any(p.owned_by(Player.B) for p in alive)
        if a_alive and b_alive:
            return None
        if a_alive:
            return Player.A
        if b_alive:
            return Player.B
        return Player.GOD

    def _apply_effects(self, effects: Iterable[Effect], time: float) -> None:
        for effect in effects:
            match effect:
                case Kill(victim=victim):
                    target = self.board.get(victim)
                    if target is not None:
                        target.set_killed(effect.applying_status(time))
                case KillAllOn(coord=coord):
                    self.board.kill_all_at(coord, effect.applying_status(time))
                case SetStatus(obj=obj):
                    status = effect.applying_status(time)
                    target = self.board.get(obj)
                    if target is not None and status is not None:
                        target.add_status(status)

    @staticmethod
    def _closest(pos: ScreenCoord, candidates: list[Object]) -> Object | None:
        """A copy of the nearest object whose footprint covers ``pos``."""
        hits = [
            (dist, o)
            for o in candidates
            if (dist := pos.dist_from(o.screen_coord())) < o.props.size
        ]
        if not hits:
            return None
        _, best = min(hits, key=lambda hit: hit[0])
        return copy.deepcopy(best)