"""
Core modules for rubikview.

This package contains the fundamental components:
- Value types shared by the engine and the view (axes, moves, unit cubes)
- Configuration management
- Registry for easing curves
"""

from rubikview.core.base import (
    QUARTER_TURN,
    LAYER_COORDINATES,
    Axis,
    EngineState,
    MoveOutcome,
    MoveRequest,
    Absolute,
    LocalOffset,
    UnitCube,
)

from rubikview.core.config import Config, load_config, create_default_config, validate_config, EngineConfig, ControlsConfig, ViewConfig, RunnerConfig

from rubikview.core.registry import register_easing, get_easing, EASING_REGISTRY

__all__ = [
    "QUARTER_TURN",
    "LAYER_COORDINATES",
    "Axis",
    "EngineState",
    "MoveOutcome",
    "MoveRequest",
    "Absolute",
    "LocalOffset",
    "UnitCube",
    "Config",
    "load_config",
    "create_default_config",
    "validate_config",
    "EngineConfig",
    "ControlsConfig",
    "ViewConfig",
    "RunnerConfig",
    "register_easing",
    "get_easing",
    "EASING_REGISTRY",
]
