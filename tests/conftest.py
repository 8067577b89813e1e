import matplotlib

matplotlib.use("Agg")

import pytest

from rubikview.core.config import Config
from rubikview.puzzle import CubeRegistry, RubiksCube
from rubikview.session import PuzzleSession, SimulatedClock
from rubikview.utils.display import LiveLogger


@pytest.fixture
def quiet_logger():
    return LiveLogger(verbose=False)


@pytest.fixture
def clock():
    return SimulatedClock()


@pytest.fixture
def registry():
    return CubeRegistry.build_default()


@pytest.fixture
def cube(clock, quiet_logger):
    return RubiksCube(clock=clock, logger=quiet_logger)


@pytest.fixture
def session(clock, quiet_logger):
    return PuzzleSession(Config(), clock=clock, logger=quiet_logger)

