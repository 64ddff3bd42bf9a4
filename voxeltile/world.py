"""A small, fixed-size voxel world."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

WORLD_SIZE = 8


@dataclass(frozen=True)
class Coord:
    """Integer voxel coordinate."""

    x: int
    y: int
    z: int


class Voxel(Enum):
    """Contents of one voxel cell."""

    AIR = "air"
    BRICK = "brick"


class World:
    """A cube of WORLD_SIZE³ voxels, all air at first."""

    def __init__(self) -> None:
        self._contents = [Voxel.AIR] * (WORLD_SIZE**3)

    @staticmethod
    def _index(coord: Coord) -> int:
        return coord.y * WORLD_SIZE * WORLD_SIZE + coord.z * WORLD_SIZE + coord.x

    @staticmethod
    def in_bounds(coord: Coord) -> bool:
        """Return whether the coordinate lies inside the world."""
        return (
            0 <= coord.x < WORLD_SIZE
            and 0 <= coord.y < WORLD_SIZE
            and 0 <= coord.z < WORLD_SIZE
        )

    def set(self, coord: Coord, voxel: Voxel) -> None:
        """Store a voxel; coordinates outside the world are ignored."""
        if self.in_bounds(coord):
            self._contents[self._index(coord)] = voxel

    def get(self, coord: Coord) -> Voxel:
        """Return the voxel at a coordinate; outside the world is air."""
        if self.in_bounds(coord):
            return self._contents[self._index(coord)]
        return Voxel.AIR


def seed_world(world: World) -> None:
    """Place a single brick at the centre of the world."""
    center = WORLD_SIZE // 2
    world.set(Coord(center, center, center), Voxel.BRICK)


def voxel_min_world(coord: Coord) -> tuple[float, float, float]:
    """Return the world-space minimum corner of a voxel (world centred on origin)."""
    half = WORLD_SIZE / 2.0
    return (coord.x - half, coord.y - half, coord.z - half)