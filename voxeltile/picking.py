"""Ray picking against voxels and mouse-style voxel editing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import product
from typing import Optional, Sequence

from .world import WORLD_SIZE, Coord, Voxel, World, voxel_min_world

IVec3 = tuple[int, int, int]

_PARALLEL_EPSILON = 1e-8


@dataclass(frozen=True)
class RayHit:
    """The nearest voxel struck by a ray, the face normal hit and the distance."""

    coord: Coord
    normal: IVec3
    t: float


def ray_aabb(
    origin: Sequence[float],
    direction: Sequence[float],
    box_min: Sequence[float],
    box_max: Sequence[float],
) -> Optional[tuple[float, IVec3]]:
    """Slab test of a ray against a box.

    Returns the entry distance and the normal of the entered face, or None
    when the ray's line misses the box.
    """
    tmin = -math.inf
    tmax = math.inf
    normal: IVec3 = (0, 0, 0)
    for axis, (o, d, lo, hi) in enumerate(zip(origin, direction, box_min, box_max)):
        if abs(d) < _PARALLEL_EPSILON:
            if o < lo or o > hi:
                return None
            continue
        inv = 1.0 / d
        t1 = (lo - o) * inv
        t2 = (hi - o) * inv
        sign = -1
        if t1 > t2:
            t1, t2 = t2, t1
            sign = 1
        if t1 > tmin:
            tmin = t1
            normal = tuple(sign if i == axis else 0 for i in range(3))  # type: ignore[assignment]
        tmax = min(tmax, t2)
        if tmin > tmax:
            return None
    return tmin, normal


def _normalized(direction: Sequence[float]) -> tuple[float, float, float]:
    length = math.sqrt(sum(c * c for c in direction))
    if length == 0.0 or not math.isfinite(length):
        raise ValueError("ray direction must be a non-zero finite vector")
    x, y, z = direction
    return (x / length, y / length, z / length)


def raycast_voxels(
    world: World, origin: Sequence[float], direction: Sequence[float]
) -> Optional[RayHit]:
    """Return the nearest solid voxel in front of the ray, if any.

    The direction is normalised, so ``t`` is a world-space distance.
    """
    unit = _normalized(direction)
    best: Optional[RayHit] = None
    for y, z, x in product(range(WORLD_SIZE), repeat=3):
        coord = Coord(x, y, z)
        if world.get(coord) is Voxel.AIR:
            continue
        lo = voxel_min_world(coord)
        hi = tuple(c + 1.0 for c in lo)
        hit = ray_aabb(origin, unit, lo, hi)
        if hit is None:
            continue
        t, normal = hit
        if t >= 0.0 and (best is None or t < best.t):
            best = RayHit(coord, normal, t)
    return best


def edit_voxels(
    world: World,
    origin: Sequence[float],
    direction: Sequence[float],
    add: bool,
    remove: bool,
) -> bool:
    """Remove the picked voxel or place a brick against the picked face.

    Removal wins when both are requested. Returns whether the world changed.
    """
    if not add and not remove:
        return False
    hit = raycast_voxels(world, origin, direction)
    if hit is None:
        return False
    if remove:
        world.set(hit.coord, Voxel.AIR)
        return True
    nx, ny, nz = hit.normal
    place = Coord(hit.coord.x + nx, hit.coord.y + ny, hit.coord.z + nz)
    if World.in_bounds(place) and world.get(place) is Voxel.AIR:
        world.set(place, Voxel.BRICK)
        return True
    return False