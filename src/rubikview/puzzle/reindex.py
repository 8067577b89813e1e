"""
Layer membership after a completed turn.

A quarter turn about axis A keeps every member's A coordinate and permutes
the other two with a sign flip. With the right-hand rule a +90 degree turn
maps (y, z) -> (-z, y) about X, (x, z) -> (z, -x) about Y and
(x, y) -> (-y, x) about Z; a -90 degree turn is the inverse map.
"""

from typing import Iterable, Tuple

import numpy as np

from rubikview.core.base import Axis
from rubikview.puzzle.cube_registry import CubeRegistry
from rubikview.puzzle.rotation import quarter_turn_matrix


def turned_address(address: Tuple[int, int, int], axis: Axis, turns: int) -> Tuple[int, int, int]:
    """Address of a cube after `turns` quarter turns about `axis`."""
    rotated = quarter_turn_matrix(axis, turns) @ np.array(address, dtype=int)
    return tuple(int(v) for v in rotated)


def reindex_members(registry: CubeRegistry, cube_ids: Iterable[int], axis: Axis, turns: int):
    """
    Update the registry for every cube of a completed turn.

    `reindex` is called once per cube for each of the two axes orthogonal
    to `axis`; the bucket along `axis` itself is left alone.
    """
    # Compute every new address before touching the buckets.
    updates = [(cube_id, turned_address(registry.get(cube_id).address, axis, turns)) for cube_id in cube_ids]

    for cube_id, new in updates:
        for other in axis.others():
            registry.reindex(cube_id, other, new[other.index])
