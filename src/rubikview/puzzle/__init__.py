"""
Puzzle state and the slice-rotation engine.

- CubeRegistry: the 26 unit cubes and their layer buckets per axis
- select_layer: move request -> cubes of one layer
- form_group / RotationGroup: pivot and the transient local frame of a turn
- RotationEngine: one animated turn at a time
- reindex_members: layer membership after a turn
- RubiksCube: all of the above behind one object
"""

from rubikview.puzzle.cube_registry import CubeRegistry
from rubikview.puzzle.layers import LayerSelection, resolve_axis, select_layer
from rubikview.puzzle.grouping import RotationGroup, compute_pivot, form_group
from rubikview.puzzle.tween import Tween
from rubikview.puzzle.driver import RotationEngine
from rubikview.puzzle.reindex import reindex_members, turned_address
from rubikview.puzzle.cube import CubePose, RubiksCube

__all__ = [
    "CubeRegistry",
    "LayerSelection",
    "resolve_axis",
    "select_layer",
    "RotationGroup",
    "compute_pivot",
    "form_group",
    "Tween",
    "RotationEngine",
    "reindex_members",
    "turned_address",
    "CubePose",
    "RubiksCube",
]
