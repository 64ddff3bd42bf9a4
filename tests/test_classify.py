import itertools
import math

import pytest

from voxeltile.autotile import Neighbors
from voxeltile.classify import (
    Quat,
    all_cube_rotations,
    canonical_conns,
    classify,
    conn_dirs,
    find_rotation,
    kind_from_conns,
    rotate_dir,
)
from voxeltile.tile_kind import TileKind

AXES = [(1, 0, 0), (-1, 0, 0), (0, 1, 0), (0, -1, 0), (0, 0, 1), (0, 0, -1)]
ALL_NEIGHBORS = [Neighbors(*flags) for flags in itertools.product([False, True], repeat=6)]


def test_identity_quat_leaves_vectors_alone():
    q = Quat()
    assert q.rotate((1.5, -2.0, 3.0)) == (1.5, -2.0, 3.0)
    assert q.dot(q) == 1.0


def test_from_basis_identity():
    q = Quat.from_basis((1, 0, 0), (0, 1, 0), (0, 0, 1))
    assert abs(q.dot(Quat())) == pytest.approx(1.0)


def test_from_basis_maps_axes_to_columns():
    right, up, forward = (0, 0, -1), (0, 1, 0), (1, 0, 0)
    q = Quat.from_basis(right, up, forward)
    assert q.rotate((1, 0, 0)) == pytest.approx(right, abs=1e-9)
    assert q.rotate((0, 1, 0)) == pytest.approx(up, abs=1e-9)
    assert q.rotate((0, 0, 1)) == pytest.approx(forward, abs=1e-9)


def test_cube_rotations_are_distinct_units():
    rots = all_cube_rotations()
    assert len(rots) == 24
    for q in rots:
        assert q.dot(q) == pytest.approx(1.0)
    for a, b in itertools.combinations(rots, 2):
        assert abs(a.dot(b)) <= 0.9999


def test_cube_rotations_permute_axes():
    for q in all_cube_rotations():
        assert sorted(rotate_dir(q, d) for d in AXES) == sorted(AXES)


def test_conn_dirs_order():
    nei = Neighbors(True, True, True, True, True, True)
    assert conn_dirs(nei) == [
        (-1, 0, 0),
        (1, 0, 0),
        (0, -1, 0),
        (0, 1, 0),
        (0, 0, -1),
        (0, 0, 1),
    ]


@pytest.mark.parametrize(
    "conns, kind",
    [
        ([], TileKind.SOLO),
        ([(0, 0, 1)], TileKind.END),
        ([(1, 0, 0), (-1, 0, 0)], TileKind.STRAIGHT),
        ([(1, 0, 0), (0, 1, 0)], TileKind.CORNER),
        ([(1, 0, 0), (-1, 0, 0), (0, 0, 1)], TileKind.TEE),
        ([(1, 0, 0), (-1, 0, 0), (0, 0, 1), (0, 0, -1)], TileKind.CROSS),
        (AXES, TileKind.CROSS),
    ],
)
def test_kind_from_conns(conns, kind):
    assert kind_from_conns(conns) is kind


def test_canonical_conns_match_their_kind():
    for kind in TileKind:
        assert kind_from_conns(canonical_conns(kind)) is kind


def test_find_rotation_empty_is_identity():
    assert find_rotation([], []) == Quat()


def test_find_rotation_no_match_falls_back_to_identity():
    assert find_rotation([(0, -1, 0)], [(1, 0, 0), (-1, 0, 0)]) == Quat()


def test_solo_classification():
    kind, rot = classify(Neighbors(False, False, False, False, False, False))
    assert kind is TileKind.SOLO
    assert rot == Quat()


def test_vertical_straight_needs_no_turn():
    kind, rot = classify(Neighbors(False, False, True, True, False, False))
    assert kind is TileKind.STRAIGHT
    assert sorted(rotate_dir(rot, d) for d in canonical_conns(kind)) == [(0, -1, 0), (0, 1, 0)]