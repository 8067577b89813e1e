"""
Stickers, face grids and the packed face encoding.

Sticker colors are not stored separately: each unit cube carries the
stickers of its home position on its local faces, and the orientation
matrix tells which world face each sticker currently shows on.

Face grids are read the usual way for an unfolded cube: F, R, B and L seen
from outside with U above, U seen from above with F at the bottom, D seen
from below with F at the top.

The eight outer squares of a face (the center never moves) pack into a
32-bit integer, one 4-bit color code per square, clockwise from the
top-left::

    0 --- 1 --- 2
    |           |
    7           3
    |           |
    6 --- 5 --- 4
"""

from typing import Dict, List, Optional, Tuple

import numpy as np

from rubikview.core.base import UnitCube
from rubikview.puzzle.cube_registry import CubeRegistry


FACE_ORDER: Tuple[str, ...] = ("U", "R", "F", "D", "L", "B")

FACE_NORMALS: Dict[str, Tuple[int, int, int]] = {
    "U": (0, 1, 0),
    "R": (1, 0, 0),
    "F": (0, 0, 1),
    "D": (0, -1, 0),
    "L": (-1, 0, 0),
    "B": (0, 0, -1),
}

FACE_COLORS: Dict[str, str] = {
    "U": "#FFFFFF",  # white
    "R": "#FF0000",  # red
    "F": "#00FF00",  # green
    "D": "#FFFF00",  # yellow
    "L": "#FFA500",  # orange
    "B": "#0000FF",  # blue
}

COLOR_TO_NIBBLE: Dict[str, int] = {"U": 0, "L": 1, "F": 2, "R": 3, "B": 4, "D": 5}
NIBBLE_TO_COLOR: Dict[int, str] = {v: k for k, v in COLOR_TO_NIBBLE.items()}

# (row, col) of each ring position
RING: Tuple[Tuple[int, int], ...] = (
    (0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (2, 1), (2, 0), (1, 0),
)

Grid = List[List[str]]


def sticker_faces(cube: UnitCube) -> List[Tuple[Tuple[int, int, int], str]]:
    """(local normal, color letter) for each sticker the cube carries."""
    stickers = []
    for face, normal in FACE_NORMALS.items():
        axis = int(np.flatnonzero(normal)[0])
        if cube.home[axis] == normal[axis]:
            stickers.append((normal, face))
    return stickers


def _grid_cell(face: str, address: Tuple[int, int, int]) -> Tuple[int, int]:
    i, j, k = address
    if face == "U":
        return k + 1, i + 1
    if face == "D":
        return 1 - k, i + 1
    if face == "F":
        return 1 - j, i + 1
    if face == "B":
        return 1 - j, 1 - i
    if face == "R":
        return 1 - j, 1 - k
    return 1 - j, k + 1  # L


def face_grids(registry: CubeRegistry) -> Dict[str, Grid]:
    """
    Current 3x3 color grid of every face.

    Uses committed addresses and orientations, so during a turn it shows
    the state before that turn.
    """
    grids: Dict[str, Grid] = {face: [["?"] * 3 for _ in range(3)] for face in FACE_ORDER}
    for cube in registry:
        orientation = np.asarray(cube.orientation)
        for local_normal, color in sticker_faces(cube):
            world = tuple(int(round(v)) for v in orientation @ np.array(local_normal))
            for face, normal in FACE_NORMALS.items():
                if world == normal:
                    row, col = _grid_cell(face, cube.address)
                    grids[face][row][col] = color
                    break
    return grids


def pack_face(grid: Grid) -> int:
    """Pack the eight outer squares of a face into a 32-bit integer."""
    value = 0
    for i, (row, col) in enumerate(RING):
        value |= (COLOR_TO_NIBBLE[grid[row][col]] & 0xF) << (4 * i)
    return value


def unpack_face(value: int, center: str) -> Grid:
    """Inverse of pack_face; the center square is supplied by the caller."""
    grid = [[center] * 3 for _ in range(3)]
    for i, (row, col) in enumerate(RING):
        grid[row][col] = NIBBLE_TO_COLOR[(value >> (4 * i)) & 0xF]
    return grid


def rotate_ring(value: int, shift: int) -> int:
    """
    Circular shift of the packed ring by `shift` positions.

    +2 is a clockwise quarter turn of the face as seen from outside.
    """
    shift %= 8
    result = 0
    for i in range(8):
        nib = (value >> (4 * i)) & 0xF
        result |= nib << (4 * ((i + shift) % 8))
    return result


def signature(registry: CubeRegistry) -> Tuple[int, ...]:
    """The six packed faces in U R F D L B order."""
    grids = face_grids(registry)
    return tuple(pack_face(grids[face]) for face in FACE_ORDER)


def is_solved(registry: CubeRegistry, grids: Optional[Dict[str, Grid]] = None) -> bool:
    grids = grids or face_grids(registry)
    return all(len({c for row in grid for c in row}) == 1 for grid in grids.values())


def format_net(grids: Dict[str, Grid]) -> str:
    """
    Plain text cube map::

              U
            L F R B
              D
    """
    def row_text(face: str, r: int) -> str:
        return " ".join(grids[face][r])

    pad = " " * 7
    lines = []
    for r in range(3):
        lines.append(pad + row_text("U", r))
    for r in range(3):
        lines.append("  ".join(row_text(face, r) for face in ("L", "F", "R", "B")))
    for r in range(3):
        lines.append(pad + row_text("D", r))
    return "\n".join(lines)
