from itertools import product

import pytest

from hexaroni.board import Board
from hexaroni.config import CONF
from hexaroni.game_controller import GameController
from hexaroni.game_state import Countdown, GameOver, Playing, Waiting
from hexaroni.geometry import HexCoord, ScreenCoord
from hexaroni.kinds import ObjectType, Player
from hexaroni.moves import legal_moves
from hexaroni.objects import Object, ObjectProps
from hexaroni.status_types import Killed, Moving, Wobble

SIZE = 3


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def c(x, y):
    return HexCoord(x, y, SIZE)


def make_board(lifespan=10):
    tiles = [
        Object.tile(y * SIZE + x, c(x, y), lifespan) for x, y in product(range(SIZE), repeat=2)
    ]
    a = Object(ObjectType.DASHER, c(0, 0), Player.A, ObjectProps(oid=100))
    b = Object(ObjectType.DASHER, c(0, 2), Player.B, ObjectProps(oid=101))
    return Board(SIZE, [a, b, *tiles])


def playing_controller(lifespan=10):
    clock = FakeClock()
    game = GameController(make_board(lifespan), clock)
    game.start_game()
    clock.now += CONF.game_start_countdown + 1.0
    game.tick(0.0)
    return game, clock


def move_of(game, coord, target):
    piece = game.board.piece_at(coord)
    (move,) = [m for m in legal_moves(piece, game.board) if m.target() == target]
    return move


def test_default_controller_waits_on_standard_board():
    game = GameController()
    assert game.board.size == 7
    assert game.game_state == Waiting()
    assert game.current_player() is Player.A


def test_start_game_begins_countdown_once():
    clock = FakeClock()
    clock.now = 3.0
    game = GameController(make_board(), clock)
    game.start_game()
    assert game.game_state == Countdown(3.0)
    with pytest.raises(RuntimeError):
        game.start_game()


def test_countdown_turns_into_play():
    clock = FakeClock()
    game = GameController(make_board(), clock)
    game.start_game()
    clock.now += CONF.game_start_countdown / 2
    game.tick(0.0)
    assert game.game_state == Countdown(0.0)
    clock.now += CONF.game_start_countdown
    game.tick(0.0)
    assert game.game_state == Playing(CONF.starting_player, clock.now, 0)


def test_moves_ignored_before_play():
    game = GameController(make_board(), FakeClock())
    move = move_of(game, c(0, 0), c(2, 0))
    game.apply_move(move, 1.0, 0.25)
    assert game.board.piece_at(c(0, 0)).props.oid == 100
    assert game.game_state == Waiting()


def test_apply_move_moves_piece_and_passes_turn():
    game, clock = playing_controller()
    move = move_of(game, c(0, 0), c(2, 0))
    game.apply_move(move, 1.0, 0.25)
    moved = game.board.get(move.obj)
    assert moved.coord == c(2, 0)
    assert game.game_state == Playing(Player.B, clock.now, 1)
    (moving,) = [s for s in moved.statuses if isinstance(s.stype, Moving)]
    assert moving.stype.from_ == ScreenCoord.from_hexcoord(c(0, 0))
    assert moving.stype.to == ScreenCoord.from_hexcoord(c(2, 0))
    assert moving.stype.height == 0.0
    assert moving.start_time == 1.0
    assert moving.duration == 0.25


def test_move_of_wrong_player_is_ignored():
    game, _ = playing_controller()
    move = move_of(game, c(0, 2), c(2, 2))
    game.apply_move(move, 1.0, 0.25)
    assert game.board.piece_at(c(0, 2)).props.oid == 101
    assert game.current_player() is Player.A


def test_capturing_last_piece_wins():
    game, _ = playing_controller()
    move = move_of(game, c(0, 0), c(0, 2))
    game.apply_move(move, 1.0, 0.25)
    assert game.game_state == GameOver(Player.A)
    assert game.current_player() is Player.A
    victim = [p for p in game.board.pieces() if p.props.oid == 101][0]
    assert victim.props.dead
    assert any(isinstance(s.stype, Killed) for s in victim.statuses)


def test_tick_clears_expired_statuses_and_dead_objects():
    game, _ = playing_controller()
    move = move_of(game, c(0, 0), c(0, 2))
    game.apply_move(move, 1.0, 0.25)
    game.tick(100.0)
    assert [p.props.oid for p in game.board.pieces()] == [100]
    assert game.board.piece_at(c(0, 2)).statuses == []


def test_turn_times_out():
    game, clock = playing_controller()
    clock.now += CONF.play_move_timeout + 1.0
    game.tick(1.0)
    assert game.game_state == Playing(Player.B, clock.now, 1)


def test_tiles_wobble_then_fall_and_god_wins():
    game, clock = playing_controller(lifespan=CONF.falling_tiles_heads_up)
    clock.now += CONF.play_move_timeout + 1.0
    game.tick(1.0)
    assert all(
        any(isinstance(s.stype, Wobble) for s in t.statuses) for t in game.board.tiles()
    )
    assert not any(t.props.dead for t in game.board.tiles())
    clock.now += CONF.play_move_timeout + 1.0
    game.tick(2.0)
    clock.now += CONF.play_move_timeout + 1.0
    game.tick(3.0)
    assert all(t.props.dead for t in game.board.tiles())
    assert game.game_state == GameOver(Player.GOD)


def test_piece_and_tile_lookup_by_position():
    game = GameController(make_board(), FakeClock())
    pos = ScreenCoord.from_hexcoord(c(0, 0))
    found = game.get_piece_at_pos(pos)
    assert found == game.board.piece_at(c(0, 0))
    assert found is not game.board.piece_at(c(0, 0))
    assert game.get_tile_at_pos(pos).coord == c(0, 0)
    far = ScreenCoord(1000.0, 1000.0)
    assert game.get_piece_at_pos(far) is None
    assert game.get_tile_at_pos(far) is None