"""
Configuration management for rubikview.

This module handles loading and validation of YAML configuration files and
provides typed configuration objects for the engine, the key bindings, the
3D view and the session runner.
"""

import yaml
from typing import Any, Dict, List, Optional, Tuple
from dataclasses import dataclass, field, fields
from pathlib import Path

from rubikview.core.registry import EASING_REGISTRY


@dataclass
class EngineConfig:
    """Configuration for the slice-rotation engine."""
    quarter_turn_duration: float = 1.0
    easing: str = "power2.inOut"
    spacing: float = 1.0

    def __post_init__(self):
        if not isinstance(self.quarter_turn_duration, (float, int)) or self.quarter_turn_duration < 0:
            raise ValueError("quarter_turn_duration must be a non-negative number")
        if not isinstance(self.easing, str) or not self.easing:
            raise ValueError("easing must be a non-empty string")
        if self.easing not in EASING_REGISTRY:
            raise ValueError(
                f"easing must be one of {sorted(EASING_REGISTRY)}, got '{self.easing}'"
            )
        if not isinstance(self.spacing, (float, int)) or self.spacing <= 0:
            raise ValueError("spacing must be a positive number")
        if self.quarter_turn_duration > 10:
            import warnings
            warnings.warn(
                f"quarter_turn_duration={self.quarter_turn_duration}s is very long. "
                f"Every key press will lock the puzzle for that long."
            )


@dataclass
class ControlsConfig:
    """Keyboard bindings. Key names follow matplotlib's key event names."""
    up: str = "u"
    down: str = "d"
    left: str = "l"
    right: str = "r"
    front: str = "f"
    back: str = "b"
    invert_modifier: str = "shift"
    reset_view: str = "c"

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"{f.name} must be a non-empty key name")
            setattr(self, f.name, value.lower())

    def move_keys(self) -> Dict[str, str]:
        """Key name -> move name for the six move keys."""
        return {
            self.up: "up",
            self.down: "down",
            self.left: "left",
            self.right: "right",
            self.front: "front",
            self.back: "back",
        }

    def duplicates(self) -> List[str]:
        seen: Dict[str, str] = {}
        dups = []
        for f in fields(self):
            key = getattr(self, f.name)
            if key in seen:
                dups.append(f"'{key}' is bound to both {seen[key]} and {f.name}")
            else:
                seen[key] = f.name
        return dups


@dataclass
class ViewConfig:
    """Camera and window configuration."""
    elev: float = 25.0
    azim: float = -35.0
    cube_size: float = 0.98
    figsize: Tuple[float, float] = (11.0, 6.0)
    show_net: bool = True
    tick_interval_ms: int = 16
    body_color: str = "#222222"

    def __post_init__(self):
        if not isinstance(self.elev, (float, int)):
            raise ValueError("elev must be a number")
        if not isinstance(self.azim, (float, int)):
            raise ValueError("azim must be a number")
        if not isinstance(self.cube_size, (float, int)) or not 0 < self.cube_size <= 1:
            raise ValueError("cube_size must be in (0, 1]")
        if not isinstance(self.figsize, (tuple, list)) or len(self.figsize) != 2:
            raise ValueError("figsize must be a pair of numbers")
        self.figsize = (float(self.figsize[0]), float(self.figsize[1]))
        if not isinstance(self.tick_interval_ms, int) or self.tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be a positive integer")


@dataclass
class RunnerConfig:
    """Configuration for the session runner and console output."""
    verbose: bool = True
    simulated_tick: float = 0.05

    def __post_init__(self):
        if not isinstance(self.simulated_tick, (float, int)) or self.simulated_tick <= 0:
            raise ValueError("simulated_tick must be a positive number")


@dataclass
class Config:
    """Main configuration object."""
    engine: EngineConfig = field(default_factory=EngineConfig)
    controls: ControlsConfig = field(default_factory=ControlsConfig)
    view: ViewConfig = field(default_factory=ViewConfig)
    runner: RunnerConfig = field(default_factory=RunnerConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        return cls(
            engine=EngineConfig(**(data.get("engine") or {})),
            controls=ControlsConfig(**(data.get("controls") or {})),
            view=ViewConfig(**(data.get("view") or {})),
            runner=RunnerConfig(**(data.get("runner") or {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert Config to dictionary."""
        view = dict(self.view.__dict__)
        view["figsize"] = list(self.view.figsize)
        return {
            "engine": dict(self.engine.__dict__),
            "controls": dict(self.controls.__dict__),
            "view": view,
            "runner": dict(self.runner.__dict__),
        }


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file. None gives the defaults.

    Returns:
        Config object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is malformed
        ValueError: If a section holds unknown or invalid fields
    """
    if config_path is None:
        return Config()

    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Error parsing YAML config: {e}")

    if not data:
        raise ValueError("Configuration file is empty")
    if not isinstance(data, dict):
        raise ValueError("Configuration file must contain a mapping")

    try:
        return Config.from_dict(data)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Error creating config from data: {e}")


def create_default_config(output_path: str = "config.yaml") -> Config:
    """
    Create a default configuration file.

    Args:
        output_path: Path where to save the default config

    Returns:
        Default Config object
    """
    config = Config()

    with open(output_path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(config.to_dict(), f, default_flow_style=False, indent=2, sort_keys=False)

    return config


def validate_config(config: Config) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Args:
        config: Configuration to validate

    Returns:
        List of validation messages
    """
    issues = []

    for dup in config.controls.duplicates():
        issues.append(f"ERROR: Duplicate key binding: {dup}")

    if config.engine.quarter_turn_duration == 0:
        issues.append("WARNING: quarter_turn_duration is 0, turns will not be animated")
    elif config.engine.quarter_turn_duration > 10:
        issues.append("WARNING: quarter_turn_duration above 10s locks the puzzle for a long time")

    if config.view.tick_interval_ms > 100:
        issues.append("WARNING: tick_interval_ms above 100 makes animation visibly choppy")

    if config.runner.simulated_tick > config.engine.quarter_turn_duration > 0:
        issues.append("WARNING: simulated_tick is longer than a quarter turn")

    return issues
