import pytest

from rubikview.puzzle.facelets import (
    FACE_ORDER,
    format_net,
    pack_face,
    rotate_ring,
    unpack_face,
)
from rubikview.session import move_for


FACE_KEYS = {"U": "up", "D": "down", "L": "left", "R": "right", "F": "front", "B": "back"}


def test_solved_cube(cube):
    grids = cube.face_grids()
    for face in FACE_ORDER:
        assert grids[face] == [[face] * 3 for _ in range(3)]
    assert cube.is_solved()


def test_solved_signature(cube):
    sig = dict(zip(FACE_ORDER, cube.signature()))
    assert sig["U"] == 0x00000000
    assert sig["L"] == 0x11111111
    assert sig["F"] == 0x22222222
    assert sig["R"] == 0x33333333
    assert sig["B"] == 0x44444444
    assert sig["D"] == 0x55555555


def test_front_key_moves_left_stickers_to_top(cube):
    cube.apply(move_for("front"))
    grids = cube.face_grids()
    assert grids["U"][2] == ["L", "L", "L"]
    assert [row[0] for row in grids["R"]] == ["U", "U", "U"]
    assert grids["F"] == [["F"] * 3 for _ in range(3)]
    assert not cube.is_solved()


@pytest.mark.parametrize("face", FACE_ORDER)
def test_face_key_rotates_its_ring_clockwise(cube, face):
    # scramble first so each face shows a pattern
    for name in ["right", "up", "front", "left"]:
        cube.apply(move_for(name))
    before = pack_face(cube.face_grids()[face])
    cube.apply(move_for(FACE_KEYS[face]))
    assert pack_face(cube.face_grids()[face]) == rotate_ring(before, 2)


def test_four_turns_restore_signature(cube):
    cube.apply(move_for("up"))
    start = cube.signature()
    for _ in range(4):
        cube.apply(move_for("right", inverted=True))
    assert cube.signature() == start


def test_pack_unpack():
    grid = [["U", "L", "F"],
            ["D", "R", "R"],
            ["B", "B", "U"]]
    value = pack_face(grid)
    # top-left is the lowest nibble, then clockwise
    assert value & 0xF == 0
    assert (value >> 4) & 0xF == 1
    assert (value >> 28) & 0xF == 5
    assert unpack_face(value, center="R") == grid


def test_rotate_ring():
    assert rotate_ring(0x76543210, 2) == 0x54321076
    assert rotate_ring(0x76543210, 8) == 0x76543210
    assert rotate_ring(rotate_ring(0x76543210, 3), -3) == 0x76543210


def test_format_net(cube):
    lines = format_net(cube.face_grids()).splitlines()
    assert len(lines) == 9
    assert lines[0] == " " * 7 + "U U U"
    assert lines[4] == "L L L  F F F  R R R  B B B"
    assert lines[8] == " " * 7 + "D D D"
