"""Build a face-culled cube mesh for the whole voxel world."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from itertools import product
from typing import Sequence

from .world import WORLD_SIZE, Coord, Voxel, World, voxel_min_world

Vec3 = tuple[float, float, float]
Vec2 = tuple[float, float]

_UVS: tuple[Vec2, ...] = ((0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0))


class Face(Enum):
    """One side of a unit cube, valued by its outward normal."""

    NEG_X = (-1, 0, 0)
    POS_X = (1, 0, 0)
    NEG_Y = (0, -1, 0)
    POS_Y = (0, 1, 0)
    NEG_Z = (0, 0, -1)
    POS_Z = (0, 0, 1)

    @property
    def normal(self) -> Vec3:
        """Outward unit normal of the face."""
        x, y, z = self.value
        return (float(x), float(y), float(z))


# Corner offsets of each face, wound counter-clockwise seen from outside.
_CORNERS: dict[Face, tuple[tuple[int, int, int], ...]] = {
    Face.NEG_X: ((0, 0, 0), (0, 0, 1), (0, 1, 1), (0, 1, 0)),
    Face.POS_X: ((1, 0, 0), (1, 1, 0), (1, 1, 1), (1, 0, 1)),
    Face.NEG_Y: ((0, 0, 0), (1, 0, 0), (1, 0, 1), (0, 0, 1)),
    Face.POS_Y: ((0, 1, 1), (1, 1, 1), (1, 1, 0), (0, 1, 0)),
    Face.NEG_Z: ((0, 0, 0), (0, 1, 0), (1, 1, 0), (1, 0, 0)),
    Face.POS_Z: ((1, 0, 1), (1, 1, 1), (0, 1, 1), (0, 0, 1)),
}


@dataclass
class ChunkMesh:
    """Triangle-list mesh data: per-vertex attributes and triangle indices."""

    positions: list[Vec3] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)
    uvs: list[Vec2] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def add_face(self, base: Sequence[float], face: Face) -> None:
        """Append one quad as two triangles."""
        positions, normals, uvs = face_vertices(base, face)
        first = len(self.positions)
        self.positions.extend(positions)
        self.normals.extend(normals)
        self.uvs.extend(uvs)
        self.indices.extend(
            (first, first + 1, first + 2, first, first + 2, first + 3)
        )

    @property
    def face_count(self) -> int:
        """Number of quads in the mesh."""
        return len(self.positions) // 4


def face_vertices(
    base: Sequence[float], face: Face
) -> tuple[list[Vec3], list[Vec3], list[Vec2]]:
    """Return the four positions, normals and UVs of a cube face at ``base``."""
    bx, by, bz = base
    positions = [(bx + dx, by + dy, bz + dz) for dx, dy, dz in _CORNERS[face]]
    normals = [face.normal] * 4
    return positions, normals, list(_UVS)


def build_chunk_mesh(world: World) -> ChunkMesh:
    """Mesh every solid voxel, emitting only faces that border air."""
    mesh = ChunkMesh()
    for y, z, x in product(range(WORLD_SIZE), repeat=3):
        coord = Coord(x, y, z)
        if world.get(coord) is Voxel.AIR:
            continue
        base = voxel_min_world(coord)
        for face in Face:
            dx, dy, dz = face.value
            if world.get(Coord(x + dx, y + dy, z + dz)) is Voxel.AIR:
                mesh.add_face(base, face)
    return mesh