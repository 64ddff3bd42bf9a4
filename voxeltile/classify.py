"""Choose a tile kind and orientation from a voxel's neighbours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .autotile import Neighbors
from .tile_kind import TileKind

IVec3 = tuple[int, int, int]
Vec3 = tuple[float, float, float]

_NX: IVec3 = (-1, 0, 0)
_PX: IVec3 = (1, 0, 0)
_NY: IVec3 = (0, -1, 0)
_PY: IVec3 = (0, 1, 0)
_NZ: IVec3 = (0, 0, -1)
_PZ: IVec3 = (0, 0, 1)

_AXES: tuple[IVec3, ...] = (_PX, _NX, _PY, _NY, _PZ, _NZ)


def _cross(a: Sequence[float], b: Sequence[float]) -> tuple[float, float, float]:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _dot3(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(p * q for p, q in zip(a, b))


@dataclass(frozen=True)
class Quat:
    """Unit quaternion; the default is the identity rotation."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_basis(cls, right: Sequence[float], up: Sequence[float], forward: Sequence[float]) -> "Quat":
        """Build the rotation whose matrix has the given vectors as columns."""
        m00, m01, m02 = right
        m10, m11, m12 = up
        m20, m21, m22 = forward
        if m22 <= 0.0:
            dif10 = m11 - m00
            omm22 = 1.0 - m22
            if dif10 <= 0.0:
                four_xsq = omm22 - dif10
                inv = 0.5 / math.sqrt(four_xsq)
                return cls(
                    w=(m12 - m21) * inv,
                    x=four_xsq * inv,
                    y=(m01 + m10) * inv,
                    z=(m02 + m20) * inv,
                )
            four_ysq = omm22 + dif10
            inv = 0.5 / math.sqrt(four_ysq)
            return cls(
                w=(m20 - m02) * inv,
                x=(m01 + m10) * inv,
                y=four_ysq * inv,
                z=(m12 + m21) * inv,
            )
        sum10 = m11 + m00
        opm22 = 1.0 + m22
        if sum10 <= 0.0:
            four_zsq = opm22 - sum10
            inv = 0.5 / math.sqrt(four_zsq)
            return cls(
                w=(m01 - m10) * inv,
                x=(m02 + m20) * inv,
                y=(m12 + m21) * inv,
                z=four_zsq * inv,
            )
        four_wsq = opm22 + sum10
        inv = 0.5 / math.sqrt(four_wsq)
        return cls(
            w=four_wsq * inv,
            x=(m12 - m21) * inv,
            y=(m20 - m02) * inv,
            z=(m01 - m10) * inv,
        )

    def rotate(self, v: Sequence[float]) -> Vec3:
        """Rotate a vector by this quaternion."""
        q = (self.x, self.y, self.z)
        t = tuple(2.0 * c for c in _cross(q, v))
        u = _cross(q, t)
        return (
            v[0] + self.w * t[0] + u[0],
            v[1] + self.w * t[1] + u[1],
            v[2] + self.w * t[2] + u[2],
        )

    def dot(self, other: "Quat") -> float:
        """Four-component dot product."""
        return self.w * other.w + self.x * other.x + self.y * other.y + self.z * other.z


def conn_dirs(nei: Neighbors) -> list[IVec3]:
    """Directions towards solid neighbours, in -x, +x, -y, +y, -z, +z order."""
    flags = (
        (nei.nx, _NX),
        (nei.px, _PX),
        (nei.ny, _NY),
        (nei.py, _PY),
        (nei.nz, _NZ),
        (nei.pz, _PZ),
    )
    return [d for present, d in flags if present]


def _is_straight(conns: Sequence[IVec3]) -> bool:
    return len(conns) == 2 and conns[0] == tuple(-c for c in conns[1])


def kind_from_conns(conns: Sequence[IVec3]) -> TileKind:
    """Pick the tile kind for a set of connections."""
    count = len(conns)
    if count == 0:
        return TileKind.SOLO
    if count == 1:
        return TileKind.END
    if count == 2:
        return TileKind.STRAIGHT if _is_straight(conns) else TileKind.CORNER
    if count == 3:
        return TileKind.TEE
    return TileKind.CROSS


_CANONICAL: dict[TileKind, tuple[IVec3, ...]] = {
    TileKind.SOLO: (),
    TileKind.END: (_NY,),
    TileKind.STRAIGHT: (_NY, _PY),
    TileKind.CORNER: (_NY, _PX),
    TileKind.TEE: (_NY, _PX, _NX),
    TileKind.CROSS: (_NY, _PY, _PX, _NX),
}


def canonical_conns(kind: TileKind) -> list[IVec3]:
    """Connections of the tile mesh as modelled, before rotation (Y is up)."""
    return list(_CANONICAL[kind])


def all_cube_rotations() -> list[Quat]:
    """The distinct rotations that map the cube onto itself."""
    rotations: list[Quat] = []
    for forward in _AXES:
        for up in _AXES:
            if abs(_dot3(forward, up)) > 0.001:
                continue
            r = Quat.from_basis(_cross(up, forward), up, forward)
            if not any(abs(q.dot(r)) > 0.9999 for q in rotations):
                rotations.append(r)
    return rotations


def rotate_dir(q: Quat, d: IVec3) -> IVec3:
    """Rotate an integer direction and snap it back to integers."""
    x, y, z = q.rotate(tuple(float(c) for c in d))
    return (int(round(x)), int(round(y)), int(round(z)))


def find_rotation(canon: Sequence[IVec3], actual: Sequence[IVec3]) -> Quat:
    """Find a cube rotation taking the canonical connections onto the actual ones.

    Falls back to the identity when none matches.
    """
    if not canon and not actual:
        return Quat()
    target = sorted(actual)
    for r in all_cube_rotations():
        if sorted(rotate_dir(r, d) for d in canon) == target:
            return r
    return Quat()


def classify(nei: Neighbors) -> tuple[TileKind, Quat]:
    """Return the tile kind and its rotation for a voxel's neighbours."""
    actual = conn_dirs(nei)
    kind = kind_from_conns(actual)
    return kind, find_rotation(canonical_conns(kind), actual)