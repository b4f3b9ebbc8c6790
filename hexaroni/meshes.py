"""Triangle meshes for tiles, walls, pieces and the HUD."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from hexaroni.objects import Object
from hexaroni.transforms import create_model_matrix, project_point

Color = Sequence[float]

_TILE_INDICES = (
    0, 1, 2, 0, 2, 3, 0, 3, 4, 0, 4, 5, 0, 5, 6, 0, 6, 1, 10, 11, 5, 11, 12, 6, 12, 7, 1, 7, 8,
    2, 8, 9, 3, 9, 10, 4, 5, 4, 10, 6, 5, 11, 1, 6, 12, 2, 1, 7, 3, 2, 8, 4, 3, 9,
)
_WALL_INDICES = (
    0, 1, 4, 1, 2, 5, 2, 3, 6, 3, 0, 7, 0, 4, 7, 1, 5, 4, 2, 6, 5, 3, 7, 6, 4, 5, 7, 6, 7, 5,
)
_JUMPER_INDICES = (0, 1, 3, 1, 2, 3, 2, 0, 3)
_DASHER_INDICES = _WALL_INDICES + (4, 5, 8, 5, 6, 8, 6, 7, 8, 7, 4, 8)

_BLACK_BYTES = (0, 0, 0, 255)


@dataclass(frozen=True)
class Vertex:
    position: tuple[float, float, float]
    uv: tuple[float, float]
    color: tuple[int, int, int, int]
    normal: tuple[float, float, float, float]


@dataclass
class Mesh:
    vertices: list[Vertex]
    indices: list[int]
    texture: bytes | None = None


@dataclass
class Renderable:
    """A mesh and the world position it is drawn at, for depth sorting."""

    mesh: Mesh
    position: tuple[float, float, float] = field(default=(0.0, 0.0, 0.0))


def _tup(v: Sequence[float]) -> tuple[float, ...]:
    return tuple(float(c) for c in v)


def _normalize(v: Sequence[float]) -> np.ndarray:
    a = np.asarray(v, dtype=float)
    return a / np.linalg.norm(a)


def _extend(v: Sequence[float], w: float) -> tuple[float, float, float, float]:
    x, y, z = _tup(v)
    return (x, y, z, float(w))


def _color_bytes(color: Color) -> tuple[int, int, int, int]:
    """A float colour as saturated 8-bit channels."""
    r, g, b, a = (min(255, max(0, int(c * 255.0))) for c in color)
    return (r, g, b, a)


def _texture_bytes(color: Color) -> tuple[int, ...]:
    return tuple(min(max(int(c * 255.0), 0), 2**32 - 1) & 0xFF for c in color)


def texture_from_2_colors(color_a: Color, color_b: Color) -> bytes:
    """RGBA bytes of a 2x1 texture: ``color_a`` then ``color_b``."""
    return bytes(_texture_bytes(color_a) + _texture_bytes(color_b))


def hud_quad(
    x0: float, y0: float, x1: float, y1: float, screen_width: float, screen_height: float
) -> Mesh:
    """A screen-space rectangle; the corners are fractions of the screen size."""
    x0, x1 = screen_width * x0, screen_width * x1
    y0, y1 = screen_height * y0, screen_height * y1
    corners = (
        ((x0, y0), (0.0, 0.0)),
        ((x1, y0), (1.0, 0.0)),
        ((x0, y1), (0.0, 1.0)),
        ((x0, y1), (0.0, 1.0)),
        ((x1, y0), (1.0, 0.0)),
        ((x1, y1), (1.0, 1.0)),
    )
    vertices = [
        Vertex((float(x), float(y), 0.0), uv, _BLACK_BYTES, (0.0, 0.0, 0.0, 1.0))
        for (x, y), uv in corners
    ]
    return Mesh(vertices, list(range(6)))


def tile_hex_mesh(
    tile: Object, color: Color, as_highlighted: bool, time: float
) -> Renderable:
    """A hexagonal slab for a board tile."""
    model = create_model_matrix(tile, time)
    size = tile.props.size
    d = 0.86602
    thickness = 0.2 * size
    glow = 1.0 if as_highlighted else 0.0
    rgba = _color_bytes(color)

    position = project_point(model, (0.0, 0.0, 0.0))
    offsets = [
        np.array(o)
        for o in ((0.0, 1.0, 0.0), (-d, 0.5, 0.0), (-d, -0.5, 0.0),
                  (0.0, -1.0, 0.0), (d, -0.5, 0.0), (d, 0.5, 0.0))
    ]
    corners = [size * o for o in offsets]
    center = Vertex(_tup(position), (0.0, 1.0), rgba, (0.0, 0.0, -1.0, glow))
    top = [
        Vertex(
            _tup(project_point(model, cp)),
            (1.0, 1.0),
            rgba,
            _extend(_normalize((cp[0], cp[1], -1.0)), glow),
        )
        for cp in corners
    ]
    bottom = [
        Vertex(
            _tup(project_point(model, cp + np.array([0.0, 0.0, thickness]))),
            (1.0, 0.0),
            rgba,
            _extend(_normalize(o), glow),
        )
        for o, cp in zip(offsets, corners)
    ]
    mesh = Mesh([center, *top, *bottom], list(_TILE_INDICES))
    return Renderable(mesh, _tup(position))


def obj_wall_mesh(
    obj: Object, object_color: Color, player_color: Color, time: float
) -> Renderable:
    """A square-based block for a wall."""
    model = create_model_matrix(obj, time)
    size = obj.props.size
    d = 0.71
    rgba = _color_bytes(object_color)

    position = project_point(model, (0.0, 0.0, 0.0))
    offsets = [np.array(o) for o in ((d, 0.0, 0.0), (0.0, d, 0.0), (-d, 0.0, 0.0), (0.0, -d, 0.0))]
    bottom = [
        Vertex(_tup(project_point(model, size * o)), (0.0, 0.0), rgba, _extend(_normalize(o), 0.0))
        for o in offsets
    ]
    top = [
        Vertex(
            _tup(project_point(model, size * np.array([o[0], o[1], -d]))),
            (1.0, 1.0),
            rgba,
            _extend(_normalize((o[0], o[1], -d)), 0.0),
        )
        for o in offsets
    ]
    mesh = Mesh(
        [*bottom, *top], list(_WALL_INDICES), texture_from_2_colors(object_color, player_color)
    )
    return Renderable(mesh, _tup(position))


def obj_jumper_mesh(
    obj: Object, object_color: Color, player_color: Color, as_active: bool, time: float
) -> Renderable:
    """A triangular pyramid for a jumper."""
    model = create_model_matrix(obj, time)
    size = obj.props.size
    t = 0.25 * math.sqrt(3.0)
    d = 0.5 / math.sqrt(3.0)
    rgba = _color_bytes(object_color)

    position = project_point(model, (0.0, 0.0, 0.0))
    offsets = [np.array(o) for o in ((0.5, d, 0.0), (-0.5, d, 0.0), (0.0, -t, 0.0))]
    apex = Vertex(
        _tup(project_point(model, size * np.array([0.0, 0.0, -1.5]))),
        (1.2 if as_active else 0.7, 0.0),
        rgba,
        (0.0, 0.0, -1.0, 0.0),
    )
    bottom = [
        Vertex(_tup(project_point(model, size * o)), (0.0, 0.0), rgba, _extend(_normalize(o), 0.0))
        for o in offsets
    ]
    mesh = Mesh(
        [*bottom, apex], list(_JUMPER_INDICES), texture_from_2_colors(object_color, player_color)
    )
    return Renderable(mesh, _tup(position))


def obj_dasher_mesh(
    obj: Object, object_color: Color, player_color: Color, as_active: bool, time: float
) -> Renderable:
    """A block with a pointed roof for a dasher."""
    model = create_model_matrix(obj, time)
    size = obj.props.size
    d = 0.4
    rgba = _color_bytes(object_color)

    position = project_point(model, (0.0, 0.0, 0.0))
    offsets = [np.array(o) for o in ((d, d, 0.0), (-d, d, 0.0), (-d, -d, 0.0), (d, -d, 0.0))]
    bottom = [
        Vertex(
            _tup(project_point(model, size * o)),
            (0.0, 0.0),
            rgba,
            _tup(_normalize((o[0], o[1], o[2], 0.0))),
        )
        for o in offsets
    ]
    middle = [
        Vertex(
            _tup(project_point(model, size * np.array([o[0], o[1], -d]))),
            (0.1 if as_active else 0.0, 0.0),
            rgba,
            _tup(_normalize((o[0], o[1], d, 1.0))),
        )
        for o in offsets
    ]
    apex = Vertex(
        _tup(project_point(model, size * np.array([0.0, 0.0, -2.0 * d]))),
        (1.0 if as_active else 0.6, 0.0),
        rgba,
        _tup(_normalize((0.0, 0.0, -1.0, 1.0))),
    )
    mesh = Mesh(
        [*bottom, *middle, apex],
        list(_DASHER_INDICES),
        texture_from_2_colors(object_color, player_color),
    )
    return Renderable(mesh, _tup(position))