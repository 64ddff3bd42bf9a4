"""Neighbour lookup for autotiling."""

from __future__ import annotations

from dataclasses import dataclass

from .world import Coord, Voxel, World


@dataclass(frozen=True)
class Neighbors:
    """Which of the six face neighbours of a voxel are solid."""

    nx: bool
    px: bool
    ny: bool
    py: bool
    nz: bool
    pz: bool


def neighbors(world: World, coord: Coord) -> Neighbors:
    """Return the solid face neighbours of a voxel."""

    def solid(dx: int, dy: int, dz: int) -> bool:
        return world.get(Coord(coord.x + dx, coord.y + dy, coord.z + dz)) is not Voxel.AIR

    return Neighbors(
        nx=solid(-1, 0, 0),
        px=solid(1, 0, 0),
        ny=solid(0, -1, 0),
        py=solid(0, 1, 0),
        nz=solid(0, 0, -1),
        pz=solid(0, 0, 1),
    )