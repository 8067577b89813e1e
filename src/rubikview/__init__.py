"""
rubikview: an interactive 3x3x3 cube puzzle visualizer.

26 unit cubes are turned one layer at a time from the keyboard, with each
quarter turn animated over time. The engine keeps track of which cubes sit
in which layer along each axis, so every later turn picks up the right
cubes.

Example Usage:
```python
from rubikview import PuzzleSession, load_config
from rubikview.session import SimulatedClock

clock = SimulatedClock()
session = PuzzleSession(load_config("configs/default.yaml"), clock=clock)
session.play_keys(["r", "u", "R"], clock)
print(session.cube.is_solved())
```

Command-line Usage:
```bash
rubikview play
rubikview apply "r u R U" --snapshot cube.png
rubikview create-config --output config.yaml
```
"""

# Importing the puzzle package registers the easing curves used by the config
from rubikview.core.config import Config, load_config, validate_config
from rubikview.puzzle import RubiksCube, RotationEngine, CubeRegistry
from rubikview.session import PuzzleSession

__version__ = "0.1.0"

__all__ = [
    "Config",
    "load_config",
    "validate_config",
    "RubiksCube",
    "RotationEngine",
    "CubeRegistry",
    "PuzzleSession",
]
