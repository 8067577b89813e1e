"""
Layer selection: which cubes does a move request turn.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from rubikview.core.base import Axis, MoveRequest
from rubikview.puzzle.cube_registry import CubeRegistry
from rubikview.utils.display import LiveLogger, get_logger


@dataclass(frozen=True)
class LayerSelection:
    """A resolved layer: axis, coordinate along it, and its current members."""
    axis: Axis
    coordinate: int
    cube_ids: Tuple[int, ...]


def resolve_axis(vector: Tuple[int, int, int]) -> Optional[Tuple[Axis, int]]:
    """
    The driving axis and layer coordinate of a move vector.

    Returns:
        (axis, coordinate), or None unless exactly one component is non-zero
        and that component is 1 or -1.
    """
    nonzero = [(i, v) for i, v in enumerate(vector) if v != 0]
    if len(nonzero) != 1:
        return None
    index, value = nonzero[0]
    if value not in (1, -1):
        return None
    return Axis.from_index(index), int(value)


def select_layer(registry: CubeRegistry, move: MoveRequest,
                 logger: Optional[LiveLogger] = None) -> Optional[LayerSelection]:
    """
    Resolve a move request against the registry.

    Invalid vectors and empty layers are logged as warnings and yield None;
    neither is fatal.
    """
    logger = logger or get_logger()

    resolved = resolve_axis(move.vector)
    if resolved is None:
        logger.log_warning(f"Invalid move vector {tuple(move.vector)}: exactly one component must be 1 or -1")
        return None

    axis, coordinate = resolved
    cube_ids = registry.lookup_layer(axis, coordinate)
    if not cube_ids:
        logger.log_warning(f"Layer {axis.value}={coordinate} is empty, nothing to turn")
        return None

    return LayerSelection(axis=axis, coordinate=coordinate, cube_ids=cube_ids)
