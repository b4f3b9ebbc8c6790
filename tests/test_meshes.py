import math

import pytest

from hexaroni.geometry import HexCoord
from hexaroni.kinds import ObjectType, Player
from hexaroni.meshes import (
    hud_quad,
    obj_dasher_mesh,
    obj_jumper_mesh,
    obj_wall_mesh,
    texture_from_2_colors,
    tile_hex_mesh,
)
from hexaroni.objects import Object, ObjectProps

RED = (1.0, 0.0, 0.0, 1.0)
BLUE = (0.0, 0.0, 1.0, 1.0)


def _tile():
    return Object.tile(0, HexCoord(3, 3, 7), 40)


def _piece(otype):
    return Object(otype, HexCoord(2, 3, 7), Player.A, ObjectProps(oid=7))


def _norm(v):
    return math.sqrt(sum(c * c for c in v))


def test_hud_quad_corners():
    mesh = hud_quad(0.1, 0.2, 0.5, 0.6, 800.0, 600.0)
    assert mesh.indices == [0, 1, 2, 3, 4, 5]
    assert mesh.vertices[0].position == pytest.approx((0.1 * 800.0, 0.2 * 600.0, 0.0))
    assert mesh.vertices[5].position == pytest.approx((0.5 * 800.0, 0.6 * 600.0, 0.0))
    assert all(v.color == (0, 0, 0, 255) for v in mesh.vertices)
    assert mesh.texture is None


def test_texture_from_two_colors():
    assert texture_from_2_colors(RED, BLUE) == bytes([255, 0, 0, 255, 0, 0, 255, 255])


def test_texture_negative_channel_is_zero():
    texture = texture_from_2_colors((-1.0, 0.0, 0.0, 1.0), BLUE)
    assert len(texture) == 8
    assert texture[0] == 0


def test_tile_mesh_structure():
    tile = _tile()
    renderable = tile_hex_mesh(tile, RED, False, 0.0)
    mesh = renderable.mesh
    assert len(mesh.vertices) == 13
    assert len(mesh.indices) == 54
    assert all(0 <= i < 13 for i in mesh.indices)
    assert renderable.position == pytest.approx(tuple(tile.screen_coord().as_vec()))


def test_tile_corners_and_thickness():
    tile = _tile()
    mesh = tile_hex_mesh(tile, RED, False, 0.0).mesh
    cx, cy, _ = mesh.vertices[0].position
    for v in mesh.vertices[1:7]:
        x, y, z = v.position
        assert math.hypot(x - cx, y - cy) == pytest.approx(tile.props.size, rel=1e-4)
        assert z == pytest.approx(0.0)
    for v in mesh.vertices[7:]:
        assert v.position[2] == pytest.approx(0.2 * tile.props.size)


@pytest.mark.parametrize("highlighted, glow", [(True, 1.0), (False, 0.0)])
def test_tile_glow(highlighted, glow):
    mesh = tile_hex_mesh(_tile(), RED, highlighted, 0.0).mesh
    assert all(v.normal[3] == glow for v in mesh.vertices)


def test_tile_color_saturates():
    mesh = tile_hex_mesh(_tile(), (2.0, -1.0, 0.0, 1.0), False, 0.0).mesh
    assert all(v.color == (255, 0, 0, 255) for v in mesh.vertices)


def test_wall_mesh():
    mesh = obj_wall_mesh(_piece(ObjectType.WALL), RED, BLUE, 0.0).mesh
    assert len(mesh.vertices) == 8
    assert len(mesh.indices) == 30
    assert mesh.texture == texture_from_2_colors(RED, BLUE)
    assert all(_norm(v.normal) == pytest.approx(1.0) for v in mesh.vertices)


@pytest.mark.parametrize("active, apex_u", [(True, 1.2), (False, 0.7)])
def test_jumper_mesh(active, apex_u):
    piece = _piece(ObjectType.JUMPER)
    mesh = obj_jumper_mesh(piece, RED, BLUE, active, 0.0).mesh
    assert len(mesh.vertices) == 4
    assert mesh.indices == [0, 1, 3, 1, 2, 3, 2, 0, 3]
    assert mesh.vertices[3].uv == (apex_u, 0.0)
    assert mesh.vertices[3].position[2] == pytest.approx(-1.5 * piece.props.size)
    assert all(_norm(v.normal) == pytest.approx(1.0) for v in mesh.vertices)


@pytest.mark.parametrize("active, apex_u", [(True, 1.0), (False, 0.6)])
def test_dasher_mesh(active, apex_u):
    mesh = obj_dasher_mesh(_piece(ObjectType.DASHER), RED, BLUE, active, 0.0).mesh
    assert len(mesh.vertices) == 9
    assert len(mesh.indices) == 42
    assert all(0 <= i < 9 for i in mesh.indices)
    assert mesh.vertices[8].uv == (apex_u, 0.0)
    assert all(_norm(v.normal) == pytest.approx(1.0) for v in mesh.vertices)
    assert mesh.texture == texture_from_2_colors(RED, BLUE)