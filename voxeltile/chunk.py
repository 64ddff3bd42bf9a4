"""Place one oriented tile for every solid voxel in the world."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from typing import Any, Optional

from .autotile import neighbors
from .classify import Quat, classify
from .tile_kind import TileKind
from .tileset import Tileset
from .world import WORLD_SIZE, Coord, Voxel, World, voxel_min_world


@dataclass(frozen=True)
class TileInstance:
    """A tile placed at a voxel's centre with the rotation chosen by autotiling."""

    coord: Coord
    kind: TileKind
    mesh: Any
    material: Any
    translation: tuple[float, float, float]
    rotation: Quat


def build_tile_instances(world: World, tileset: Tileset) -> Optional[list[TileInstance]]:
    """Return the tiles for every solid voxel, in y, z, x order.

    Returns None while the tileset is not ready, meaning existing instances
    should be kept. Voxels whose kind has no asset are skipped.
    """
    if not tileset.ready:
        return None

    instances: list[TileInstance] = []
    for y, z, x in product(range(WORLD_SIZE), repeat=3):
        coord = Coord(x, y, z)
        if world.get(coord) is Voxel.AIR:
            continue
        kind, rotation = classify(neighbors(world, coord))
        asset = tileset.get(kind)
        if asset is None:
            continue
        mx, my, mz = voxel_min_world(coord)
        instances.append(
            TileInstance(
                coord=coord,
                kind=kind,
                mesh=asset.mesh,
                material=asset.material,
                translation=(mx + 0.5, my + 0.5, mz + 0.5),
                rotation=rotation,
            )
        )
    return instances