"""
Base types for the rubikview puzzle engine.

This module defines the value objects shared by the cube registry, the
rotation engine and the rendering layer: axes, move requests, unit cubes and
the two frames a unit cube can be expressed in.
"""

from __future__ import annotations
from typing import Any, Dict, Optional, Tuple, Union
from dataclasses import dataclass, field
from enum import Enum
import math

import numpy as np


QUARTER_TURN: float = math.pi / 2

LAYER_COORDINATES: Tuple[int, int, int] = (-1, 0, 1)


class Axis(Enum):
    """The three puzzle axes."""
    X = "x"
    Y = "y"
    Z = "z"

    @property
    def index(self) -> int:
        return "xyz".index(self.value)

    @classmethod
    def from_index(cls, index: int) -> "Axis":
        return (cls.X, cls.Y, cls.Z)[index]

    def others(self) -> Tuple["Axis", "Axis"]:
        """The two axes orthogonal to this one, in x, y, z order."""
        return tuple(a for a in Axis if a is not self)  # type: ignore[return-value]


class EngineState(Enum):
    """Lifecycle of the rotation engine."""
    IDLE = "idle"
    GROUPED = "grouped"
    ANIMATING = "animating"
    COMMITTING = "committing"


class MoveOutcome(Enum):
    """Result of submitting a move request."""
    ACCEPTED = "Accepted"
    BUSY = "Busy"
    INVALID_MOVE = "InvalidMove"
    EMPTY_LAYER = "EmptyLayer"


@dataclass(frozen=True)
class MoveRequest:
    """A single slice turn: which layer, how far, how long."""
    vector: Tuple[int, int, int]
    amount: float = QUARTER_TURN
    duration: float = 1.0

    def inverse(self) -> "MoveRequest":
        """The same layer turned back by the same amount."""
        return MoveRequest(self.vector, -self.amount, self.duration)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "vector": list(self.vector),
            "amount": self.amount,
            "duration": self.duration,
        }


@dataclass
class Absolute:
    """A unit cube placed directly in world space."""
    position: np.ndarray


@dataclass
class LocalOffset:
    """A unit cube detached into a rotation group, relative to its pivot."""
    offset: np.ndarray
    pivot: np.ndarray


Placement = Union[Absolute, LocalOffset]


@dataclass
class UnitCube:
    """One of the 26 small cubes of the puzzle."""
    id: int
    address: Tuple[int, int, int]
    placement: Placement
    orientation: np.ndarray = field(default_factory=lambda: np.eye(3, dtype=int))
    home: Optional[Tuple[int, int, int]] = None

    def __post_init__(self):
        for c in self.address:
            if c not in LAYER_COORDINATES:
                raise ValueError(f"Address components must be in {LAYER_COORDINATES}, got {self.address}")
        if self.home is None:
            self.home = self.address

    @property
    def detached(self) -> bool:
        return isinstance(self.placement, LocalOffset)

    def absolute_position(self) -> np.ndarray:
        """
        Absolute world position of the cube.

        Raises:
            RuntimeError: If the cube currently lives in a rotation group's
                local frame, where an absolute position would be stale.
        """
        if isinstance(self.placement, LocalOffset):
            raise RuntimeError(f"Cube {self.id} is detached into a rotation group")
        return self.placement.position

    def coordinate(self, axis: Axis) -> int:
        return self.address[axis.index]

    def to_dict(self) -> Dict[str, Any]:
        """Convert cube to dictionary representation."""
        data: Dict[str, Any] = {
            "id": self.id,
            "address": list(self.address),
            "home": list(self.home),
            "orientation": np.asarray(self.orientation).tolist(),
        }
        if isinstance(self.placement, Absolute):
            data["position"] = np.asarray(self.placement.position).tolist()
        else:
            data["offset"] = np.asarray(self.placement.offset).tolist()
            data["pivot"] = np.asarray(self.placement.pivot).tolist()
        return data
