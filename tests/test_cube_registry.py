import numpy as np
import pytest

from rubikview.core.base import Absolute, Axis, LocalOffset, UnitCube
from rubikview.puzzle import CubeRegistry


def test_default_has_26_cubes_without_center(registry):
    assert len(registry) == 26
    assert sorted(c.id for c in registry) == list(range(26))
    addresses = {c.address for c in registry}
    assert (0, 0, 0) not in addresses
    assert len(addresses) == 26


def test_layer_sizes(registry):
    for axis in Axis:
        assert len(registry.lookup_layer(axis, -1)) == 9
        assert len(registry.lookup_layer(axis, 0)) == 8
        assert len(registry.lookup_layer(axis, 1)) == 9


def test_positions_follow_spacing():
    registry = CubeRegistry.build_default(spacing=2.0)
    for c in registry:
        np.testing.assert_array_equal(c.absolute_position(), np.array(c.address) * 2.0)


def test_fresh_registry_is_consistent(registry):
    assert registry.verify() == []


def test_lookup_layer_rejects_bad_coordinate(registry):
    with pytest.raises(ValueError):
        registry.lookup_layer(Axis.X, 2)


def test_get_unknown_id(registry):
    with pytest.raises(KeyError):
        registry.get(99)


def test_add_duplicate_id(registry):
    with pytest.raises(ValueError):
        registry.add(UnitCube(id=0, address=(1, 1, 1), placement=Absolute(np.ones(3))))


def test_reindex_moves_between_buckets(registry):
    c = registry.find_by_address((1, 1, 1))
    registry.reindex(c.id, Axis.Y, -1)

    assert c.id not in registry.lookup_layer(Axis.Y, 1)
    assert c.id in registry.lookup_layer(Axis.Y, -1)
    assert c.address == (1, -1, 1)


def test_verify_reports_mismatch(registry):
    c = registry.find_by_address((1, 1, 1))
    c.address = (1, 0, 1)
    problems = registry.verify()
    assert any("filed under y=1" in p for p in problems)


def test_find_by_address(registry):
    c = registry.find_by_address((-1, 0, 1))
    assert c.address == (-1, 0, 1)
    assert registry.find_by_address((0, 0, 0)) is None


def test_unit_cube_rejects_bad_address():
    with pytest.raises(ValueError):
        UnitCube(id=0, address=(2, 0, 0), placement=Absolute(np.zeros(3)))


def test_detached_cube_has_no_absolute_position():
    c = UnitCube(id=0, address=(1, 0, 0),
                 placement=LocalOffset(offset=np.zeros(3), pivot=np.array([1.0, 0, 0])))
    assert c.detached
    with pytest.raises(RuntimeError):
        c.absolute_position()


def test_snapshot(registry):
    snap = registry.snapshot()
    assert len(snap) == 26
    address, position = snap[registry.find_by_address((1, 1, 1)).id]
    assert address == (1, 1, 1)
    assert position == (1.0, 1.0, 1.0)
