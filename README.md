# hexaroni

This package holds the rules and scene logic for a two-player game on a hex
board.

- **Dashers** slide in a straight line. They take every enemy piece they pass
  over.
- **Jumpers** leap two tiles and then hook one step to the side. They take an
  enemy piece on the tile where they land.
- **Walls** block the way.

The board falls apart as the game goes on. Outer tiles start to wobble a
couple of moves before they drop. When a tile drops, it takes down any piece
standing on it.

The package covers:

- the game state and turn timing;
- move generation;
- timed statuses and effects;
- the geometry for drawing the scene: model matrices, a perspective camera,
  and vertex and index data for tiles and pieces.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Quick start

```python
from hexaroni.game_controller import GameController
from hexaroni.kinds import Player
from hexaroni.moves import legal_moves

game = GameController()    # the standard 7x7 opening from Board.test_square()
game.start_game()          # Waiting -> Countdown
game.tick(0.0)             # call once per frame with the elapsed animation time

piece = next(p for p in game.board.pieces() if p.owned_by(Player.A))
for move in legal_moves(piece, game.board):
    print(move.target())
```

### Timing

`GameController` takes an optional `board` and an optional `clock`. The clock
is a no-argument callable, and it defaults to `time.monotonic`. The clock
measures the start countdown and the per-turn timeout. The `time` values you
pass to `tick` and `apply_move` only drive animations and status expiry.

### Playing moves

Once the countdown has run out, `tick` switches the game to the `Playing`
state. From then on, a move by the current player is applied with:

```python
game.apply_move(move, time, move_duration)
```

`apply_move` ignores the move while the game is waiting or counting down. It
also ignores a move for a piece that does not belong to the current player.

Otherwise `apply_move` does the following:

- moves the piece;
- applies the move's kills;
- fires any delayed board effects that are due, such as wobbling or falling
  tiles;
- passes the turn.

If the current player runs past the move timeout, `tick` passes the turn by
itself.

The game ends in `GameOver` when one side has no living pieces left. If both
sides are wiped out, the winner is `Player.GOD`.

Starting a game that is not waiting raises `RuntimeError`.

## Modules

- `hexaroni.geometry`: `HexCoord` and `ScreenCoord`.
  - `HexCoord` holds a board cell and finds neighbours in six directions. It
    raises `ValueError` when the cell is out of bounds.
  - `ScreenCoord` holds a world-space position.
- `hexaroni.kinds`: `Player` (`A`, `B`, `GOD`, with `opponent()`), `ObjectType`
  and `TileType`.
- `hexaroni.objects`: `Object` and `ObjectProps`.
  - Build objects with `Object.tile(...)`, `Object.wall(...)`, or with
    `Object(...)` for pieces.
  - Objects compare equal by `oid`.
- `hexaroni.status_types`: the status kinds `Selected`, `Dragged`, `Hovered`,
  `Targeted`, `Killed`, `Moving`, `Wobble`, `Falling` and `DelayedEffect`.
- `hexaroni.statuses`: `Status`, which pairs a status kind with an optional
  start time and duration.
- `hexaroni.effects`: the effects the controller applies.
  - The effects are `Kill`, `KillAllOn`, `SetStatus` and `NoOp`.
  - Each one can give the status it puts on its target, through
    `applying_status(time)`.
- `hexaroni.board`: `Board` with the built-in `Board.test_square()` setup.
  - Queries: `tiles()`, `pieces()`, `tile_at()`, `piece_at()`, `contents()`,
    `owner()`, `is_empty()`.
  - An inconsistent layout raises `InvalidBoardError`. That covers duplicate
    cells or oids, objects off the tiles, or a player without pieces.
- `hexaroni.game_state`: the states `Editing`, `Waiting`, `Countdown`,
  `Playing` and `GameOver`.
- `hexaroni.moves`: `Move` and `legal_moves(obj, board)`.
- `hexaroni.game_controller`: `GameController`.
- `hexaroni.drag`: `Drag`, a piece being dragged together with its possible
  targets and moves.
- `hexaroni.control`: turns mouse input into hover, target and drag state.
  - `ControlStatus.update(game, mouse_pos, pressed, down, released)` takes the
    board position under the pointer and the state of the left button.
  - `mouse_to_board(...)` casts a ray from a pixel position through a `Camera`
    onto the board plane.
  - `MouseAction` and `KbdAction` name the input actions.
- `hexaroni.transforms`: model matrices and camera geometry.
  - `create_model_matrix` and `status_matrix` build model matrices from the
    animated statuses.
  - `Camera` is a perspective camera.
  - `project_point` transforms a point by a 4x4 matrix.
- `hexaroni.meshes`: `Vertex`, `Mesh` and `Renderable`.
  - Mesh builders: `tile_hex_mesh`, `obj_wall_mesh`, `obj_jumper_mesh`,
    `obj_dasher_mesh` and `hud_quad`.
  - `texture_from_2_colors` produces a 2x1 RGBA texture.
- `hexaroni.renderable`: `tile_renderable` and `object_renderable` pick
  colours and meshes from the game and control state.

Defaults such as timeouts, colours, the falling-tile warning and camera
placement live in `hexaroni.config.Config`. The shared instance is
`hexaroni.config.CONF`.

## What the package does not do

The package has no command-line entry point, and it does not:

- open a window;
- read the keyboard or the mouse;
- load shaders;
- draw anything.

`KbdAction` only names the actions. Nothing maps keys to them.

The mesh and texture data is plain Python and numpy data. To play the game,
connect it to a windowing, input and rendering layer of your choice.