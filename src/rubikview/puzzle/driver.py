"""
The rotation engine: one animated slice turn at a time.

State machine::

    IDLE -> GROUPED -> ANIMATING -> COMMITTING -> IDLE

`request_move` performs IDLE -> GROUPED -> ANIMATING synchronously and
returns. Each later `tick` advances the tween; the tick on which the tween
completes commits the turn and returns the engine to IDLE. Requests that
arrive while a turn is in flight are dropped, never queued.
"""

import time
from typing import Callable, Optional

import numpy as np

from rubikview.core.base import Absolute, EngineState, LocalOffset, MoveOutcome, MoveRequest
from rubikview.puzzle.cube_registry import CubeRegistry
from rubikview.puzzle.grouping import RotationGroup, form_group
from rubikview.puzzle.layers import resolve_axis, select_layer
from rubikview.puzzle.reindex import reindex_members
from rubikview.puzzle.rotation import quarter_turn_matrix, quarter_turns
from rubikview.puzzle.tween import Tween
from rubikview.utils.display import LiveLogger, get_logger


class RotationEngine:
    """Drives slice turns over a cube registry."""

    def __init__(self, registry: CubeRegistry,
                 clock: Callable[[], float] = time.monotonic,
                 easing: str = "power2.inOut",
                 logger: Optional[LiveLogger] = None):
        self.registry = registry
        self.clock = clock
        self.easing = easing
        self.logger = logger or get_logger()
        self.state = EngineState.IDLE
        self.group: Optional[RotationGroup] = None
        self.completed_moves = 0
        self._turns = 0

    @property
    def busy(self) -> bool:
        return self.state is not EngineState.IDLE

    def request_move(self, move: MoveRequest) -> MoveOutcome:
        """
        Start a turn if the engine is idle.

        Returns:
            ACCEPTED when a turn started, BUSY when one is already in
            flight, INVALID_MOVE or EMPTY_LAYER when nothing could be turned.
        """
        if self.busy:
            return MoveOutcome.BUSY

        try:
            turns = quarter_turns(move.amount)
        except ValueError:
            turns = 0
        if turns == 0:
            self.logger.log_warning(f"Invalid turn amount {move.amount}: must be a non-zero multiple of 90 degrees")
            return MoveOutcome.INVALID_MOVE

        if move.duration < 0:
            self.logger.log_warning(f"Invalid turn duration {move.duration}")
            return MoveOutcome.INVALID_MOVE

        if resolve_axis(move.vector) is None:
            self.logger.log_warning(f"Invalid move vector {tuple(move.vector)}: exactly one component must be 1 or -1")
            return MoveOutcome.INVALID_MOVE

        selection = select_layer(self.registry, move, self.logger)
        if selection is None:
            return MoveOutcome.EMPTY_LAYER

        cubes = [self.registry.get(cube_id) for cube_id in selection.cube_ids]
        self.group = form_group(cubes, selection.axis, selection.coordinate, move.amount)
        self.state = EngineState.GROUPED
        self._turns = turns

        self.group.tween = Tween(
            start=self.group.angle,
            end=self.group.angle + move.amount,
            duration=move.duration,
            start_time=self.clock(),
            easing=self.easing,
        )
        self.state = EngineState.ANIMATING
        self.logger.log_move_start(
            self.completed_moves + 1,
            f"layer {selection.axis.value}={selection.coordinate:+d}, {turns:+d} quarter turn(s)",
        )
        return MoveOutcome.ACCEPTED

    def tick(self, now: Optional[float] = None) -> bool:
        """
        Advance the in-flight turn.

        Returns:
            True if a turn was committed during this tick.
        """
        if self.state is not EngineState.ANIMATING:
            return False
        if now is None:
            now = self.clock()

        group = self.group
        done = group.tween.update(now)
        group.angle = group.tween.value
        if done:
            self._commit()
            return True
        return False

    def _commit(self):
        self.state = EngineState.COMMITTING
        group = self.group
        rot = quarter_turn_matrix(group.axis, self._turns)

        for cube_id in group.members:
            cube = self.registry.get(cube_id)
            placement = cube.placement
            if not isinstance(placement, LocalOffset):
                raise RuntimeError(f"Cube {cube_id} left its rotation group before commit")
            position = rot @ placement.offset + placement.pivot
            position = np.round(position / self.registry.spacing) * self.registry.spacing
            cube.placement = Absolute(position=position)
            cube.orientation = rot @ cube.orientation

        reindex_members(self.registry, group.members, group.axis, self._turns)

        self.group = None
        self._turns = 0
        self.completed_moves += 1
        self.state = EngineState.IDLE
        self.logger.log_move_end(self.completed_moves, f"{len(group.members)} cubes turned")

    def run_to_completion(self, step: float = 0.05, max_steps: int = 100000) -> int:
        """
        Tick with a simulated clock until the in-flight turn commits.

        Returns:
            Number of ticks taken.
        """
        if self.state is not EngineState.ANIMATING:
            return 0
        now = self.group.tween.start_time
        for n in range(1, max_steps + 1):
            now += step
            if self.tick(now):
                return n
        raise RuntimeError("Turn did not complete")
