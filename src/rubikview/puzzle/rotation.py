"""
Axis rotation matrices.

Float matrices drive the animation; integer quarter-turn matrices are used
when a turn is committed so positions, orientations and addresses stay exact.
All matrices follow the right-hand rule: a positive angle about an axis turns
counter-clockwise when looking down that axis towards the origin.
"""

import math
from typing import Dict

import numpy as np

from rubikview.core.base import Axis, QUARTER_TURN


# 90 degree rotations about X, Y, Z
QUARTER_TURN_MATRICES: Dict[Axis, np.ndarray] = {
    Axis.X: np.array([
        [1, 0, 0],
        [0, 0, -1],
        [0, 1, 0]
    ], dtype=int),
    Axis.Y: np.array([
        [0, 0, 1],
        [0, 1, 0],
        [-1, 0, 0]
    ], dtype=int),
    Axis.Z: np.array([
        [0, -1, 0],
        [1, 0, 0],
        [0, 0, 1]
    ], dtype=int),
}


def rotation_matrix(axis: Axis, angle: float) -> np.ndarray:
    """Rotation by `angle` radians about `axis`."""
    c = math.cos(angle)
    s = math.sin(angle)
    if axis is Axis.X:
        return np.array([[1, 0, 0], [0, c, -s], [0, s, c]])
    if axis is Axis.Y:
        return np.array([[c, 0, s], [0, 1, 0], [-s, 0, c]])
    return np.array([[c, -s, 0], [s, c, 0], [0, 0, 1]])


def quarter_turns(angle: float, tol: float = 1e-6) -> int:
    """
    Number of signed quarter turns in `angle`.

    Raises:
        ValueError: If the angle is not a whole multiple of 90 degrees.
    """
    turns = angle / QUARTER_TURN
    rounded = int(round(turns))
    if abs(turns - rounded) > tol:
        raise ValueError(f"Angle {angle} is not a multiple of a quarter turn")
    return rounded


def quarter_turn_matrix(axis: Axis, turns: int) -> np.ndarray:
    """Exact integer rotation for `turns` quarter turns (negative turns go backwards)."""
    return np.linalg.matrix_power(QUARTER_TURN_MATRICES[axis], turns % 4)
