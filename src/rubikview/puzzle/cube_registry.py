"""
Cube registry: the 26 unit cubes and their layer membership on each axis.
"""

from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from rubikview.core.base import Absolute, Axis, LAYER_COORDINATES, UnitCube


class CubeRegistry:
    """
    Owns the unit cubes and three parallel layer indexes.

    Each index maps a layer coordinate (-1, 0, 1) to the ordered list of cube
    ids currently in that layer. The buckets are the single source of truth
    for which cubes a future move picks up.
    """

    def __init__(self, spacing: float = 1.0):
        self.spacing = spacing
        self.cubes: Dict[int, UnitCube] = {}
        self.layers: Dict[Axis, Dict[int, List[int]]] = {
            axis: {c: [] for c in LAYER_COORDINATES} for axis in Axis
        }

    @classmethod
    def build_default(cls, spacing: float = 1.0) -> "CubeRegistry":
        """Create the 26 cubes of a 3x3x3 puzzle, skipping the hidden center."""
        registry = cls(spacing=spacing)
        next_id = 0
        for x in LAYER_COORDINATES:
            for y in LAYER_COORDINATES:
                for z in LAYER_COORDINATES:
                    if x == 0 and y == 0 and z == 0:
                        continue
                    position = np.array([x, y, z], dtype=float) * spacing
                    registry.add(UnitCube(id=next_id, address=(x, y, z), placement=Absolute(position)))
                    next_id += 1
        return registry

    def add(self, cube: UnitCube):
        if cube.id in self.cubes:
            raise ValueError(f"Cube {cube.id} is already registered")
        self.cubes[cube.id] = cube
        for axis in Axis:
            self.layers[axis][cube.coordinate(axis)].append(cube.id)

    def __len__(self) -> int:
        return len(self.cubes)

    def __iter__(self) -> Iterator[UnitCube]:
        return iter(self.cubes.values())

    def get(self, cube_id: int) -> UnitCube:
        if cube_id not in self.cubes:
            raise KeyError(f"Unknown cube id {cube_id}")
        return self.cubes[cube_id]

    def lookup_layer(self, axis: Axis, coordinate: int) -> Tuple[int, ...]:
        """
        Cube ids currently in the layer at `coordinate` along `axis`.

        Raises:
            ValueError: If the coordinate is not one of -1, 0, 1.
        """
        if coordinate not in LAYER_COORDINATES:
            raise ValueError(f"Layer coordinate must be one of {LAYER_COORDINATES}, got {coordinate}")
        return tuple(self.layers[axis][coordinate])

    def reindex(self, cube_id: int, axis: Axis, new_coordinate: int):
        """Move a cube from its current bucket on `axis` to `new_coordinate`."""
        if new_coordinate not in LAYER_COORDINATES:
            raise ValueError(f"Layer coordinate must be one of {LAYER_COORDINATES}, got {new_coordinate}")
        cube = self.get(cube_id)
        old = cube.coordinate(axis)
        self.layers[axis][old].remove(cube_id)
        self.layers[axis][new_coordinate].append(cube_id)

        address = list(cube.address)
        address[axis.index] = new_coordinate
        cube.address = tuple(address)

    def find_by_address(self, address: Tuple[int, int, int]) -> Optional[UnitCube]:
        """The cube currently at `address`, found through the layer buckets."""
        x, y, z = address
        candidates = set(self.layers[Axis.X][x]) & set(self.layers[Axis.Y][y]) & set(self.layers[Axis.Z][z])
        if not candidates:
            return None
        return self.cubes[candidates.pop()]

    def verify(self) -> List[str]:
        """
        Check registry consistency.

        Returns:
            List of problems; empty when every cube sits in exactly one bucket
            per axis, that bucket agrees with its address, and all three
            indexes cover the full cube population.
        """
        problems = []
        population = set(self.cubes)

        for axis in Axis:
            seen: Dict[int, int] = {}
            for coordinate, ids in self.layers[axis].items():
                for cube_id in ids:
                    if cube_id in seen:
                        problems.append(
                            f"cube {cube_id} appears in {axis.value}={seen[cube_id]} and {axis.value}={coordinate}"
                        )
                        continue
                    seen[cube_id] = coordinate
                    cube = self.cubes.get(cube_id)
                    if cube is None:
                        problems.append(f"unknown cube {cube_id} in {axis.value}={coordinate}")
                    elif cube.coordinate(axis) != coordinate:
                        problems.append(
                            f"cube {cube_id} address {cube.address} filed under {axis.value}={coordinate}"
                        )
            if set(seen) != population:
                missing = sorted(population - set(seen))
                problems.append(f"{axis.value} index is missing cubes {missing}")

        addresses = [cube.address for cube in self.cubes.values()]
        if len(set(addresses)) != len(addresses):
            problems.append("two cubes share the same address")

        return problems

    def snapshot(self) -> Dict[int, Tuple[Tuple[int, int, int], Tuple[float, ...]]]:
        """id -> (address, absolute position) for every cube."""
        return {
            cube.id: (cube.address, tuple(float(v) for v in cube.absolute_position()))
            for cube in self.cubes.values()
        }
