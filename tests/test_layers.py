import numpy as np
import pytest

from rubikview.core.base import Absolute, Axis, MoveRequest, UnitCube
from rubikview.puzzle import CubeRegistry, resolve_axis, select_layer
from rubikview.session import MOVE_VECTORS


@pytest.mark.parametrize("name", sorted(MOVE_VECTORS))
def test_bound_vectors_resolve(name):
    vector = MOVE_VECTORS[name]
    assert sum(1 for v in vector if v != 0) == 1
    axis, coordinate = resolve_axis(vector)
    assert coordinate == sum(vector)
    assert vector[axis.index] == coordinate


@pytest.mark.parametrize("vector", [(0, 0, 0), (1, 1, 0), (1, -1, 1), (2, 0, 0), (0, -0.5, 0)])
def test_ambiguous_vectors_do_not_resolve(vector):
    assert resolve_axis(vector) is None


def test_select_right_layer(registry, quiet_logger):
    selection = select_layer(registry, MoveRequest(vector=(1, 0, 0)), quiet_logger)
    assert selection.axis is Axis.X
    assert selection.coordinate == 1
    assert len(selection.cube_ids) == 9
    assert all(registry.get(i).address[0] == 1 for i in selection.cube_ids)


def test_select_invalid_vector(registry, quiet_logger, capsys):
    assert select_layer(registry, MoveRequest(vector=(1, 1, 0)), quiet_logger) is None
    assert "Invalid move vector" in capsys.readouterr().out


def test_select_empty_layer(quiet_logger, capsys):
    registry = CubeRegistry()
    registry.add(UnitCube(id=0, address=(1, 1, 1), placement=Absolute(np.ones(3))))
    assert select_layer(registry, MoveRequest(vector=(-1, 0, 0)), quiet_logger) is None
    assert "empty" in capsys.readouterr().out
