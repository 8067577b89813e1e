"""
Pivot computation and the transient rotation group.

A turning layer is detached from world space into a group anchored at the
layer's pivot. Inside the group each cube keeps only its offset from the
pivot, so the turn itself is a pure rotation about the local origin.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

import numpy as np

from rubikview.core.base import Axis, LocalOffset, UnitCube
from rubikview.puzzle.rotation import rotation_matrix


@dataclass
class RotationGroup:
    """The cubes of one in-flight turn, their pivot and the group's current angle."""
    axis: Axis
    coordinate: int
    pivot: np.ndarray
    members: List[int]
    target_angle: float
    angle: float = 0.0
    tween: Optional[object] = field(default=None, repr=False)

    def matrix(self) -> np.ndarray:
        """The group's current rotation."""
        return rotation_matrix(self.axis, self.angle)

    def world_pose(self, cube: UnitCube) -> Tuple[np.ndarray, np.ndarray]:
        """World position and orientation of a member at the current angle."""
        if not isinstance(cube.placement, LocalOffset):
            raise RuntimeError(f"Cube {cube.id} is not a member of this rotation group")
        rot = self.matrix()
        position = rot @ cube.placement.offset + self.pivot
        orientation = rot @ cube.orientation
        return position, orientation


def compute_pivot(cubes: Iterable[UnitCube]) -> np.ndarray:
    """Arithmetic mean of the cubes' absolute positions."""
    positions = [cube.absolute_position() for cube in cubes]
    if not positions:
        raise ValueError("Cannot compute the pivot of an empty layer")
    return np.mean(np.stack(positions), axis=0)


def form_group(cubes: List[UnitCube], axis: Axis, coordinate: int,
               target_angle: float) -> RotationGroup:
    """
    Detach `cubes` into a new rotation group.

    Each cube's placement becomes a LocalOffset relative to the pivot.
    """
    pivot = compute_pivot(cubes)
    for cube in cubes:
        offset = cube.absolute_position() - pivot
        cube.placement = LocalOffset(offset=offset, pivot=pivot.copy())
    return RotationGroup(
        axis=axis,
        coordinate=coordinate,
        pivot=pivot,
        members=[cube.id for cube in cubes],
        target_angle=target_angle,
    )
