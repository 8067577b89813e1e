"""
The 3x3x3 puzzle: cube registry plus rotation engine behind one object.
"""

import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from rubikview.core.base import MoveOutcome, MoveRequest, UnitCube
from rubikview.core.config import EngineConfig
from rubikview.puzzle import facelets
from rubikview.puzzle.cube_registry import CubeRegistry
from rubikview.puzzle.driver import RotationEngine
from rubikview.utils.display import LiveLogger


@dataclass
class CubePose:
    """Where a unit cube is drawn this frame."""
    cube: UnitCube
    position: np.ndarray
    orientation: np.ndarray


class RubiksCube:
    """26 unit cubes that can be turned one layer at a time."""

    def __init__(self, spacing: float = 1.0,
                 clock: Callable[[], float] = time.monotonic,
                 easing: str = "power2.inOut",
                 logger: Optional[LiveLogger] = None):
        self.registry = CubeRegistry.build_default(spacing=spacing)
        self.engine = RotationEngine(self.registry, clock=clock, easing=easing, logger=logger)

    @classmethod
    def from_config(cls, config: EngineConfig,
                    clock: Callable[[], float] = time.monotonic,
                    logger: Optional[LiveLogger] = None) -> "RubiksCube":
        return cls(spacing=config.spacing, clock=clock, easing=config.easing, logger=logger)

    @property
    def busy(self) -> bool:
        return self.engine.busy

    def request_move(self, move: MoveRequest) -> MoveOutcome:
        return self.engine.request_move(move)

    def tick(self, now: Optional[float] = None) -> bool:
        return self.engine.tick(now)

    def apply(self, move: MoveRequest, step: float = 0.05) -> MoveOutcome:
        """Request a move and run it to completion on a simulated clock."""
        outcome = self.engine.request_move(move)
        if outcome is MoveOutcome.ACCEPTED:
            self.engine.run_to_completion(step=step)
        return outcome

    def poses(self) -> List[CubePose]:
        """Current world pose of every cube, including cubes mid-turn."""
        group = self.engine.group
        result = []
        for cube in self.registry:
            if cube.detached and group is not None:
                position, orientation = group.world_pose(cube)
            else:
                position, orientation = cube.absolute_position(), np.asarray(cube.orientation, dtype=float)
            result.append(CubePose(cube=cube, position=position, orientation=orientation))
        return result

    def face_grids(self) -> Dict[str, facelets.Grid]:
        return facelets.face_grids(self.registry)

    def signature(self) -> Tuple[int, ...]:
        return facelets.signature(self.registry)

    def is_solved(self) -> bool:
        return facelets.is_solved(self.registry)

    def to_dict(self) -> Dict:
        return {
            "state": self.engine.state.value,
            "completed_moves": self.engine.completed_moves,
            "signature": [f"0x{v:08x}" for v in self.signature()],
            "solved": self.is_solved(),
            "cubes": [cube.to_dict() for cube in self.registry],
        }
