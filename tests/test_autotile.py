from voxeltile.autotile import Neighbors, neighbors
from voxeltile.world import WORLD_SIZE, Coord, Voxel, World

NONE = Neighbors(False, False, False, False, False, False)


def test_isolated_voxel_has_no_neighbors():
    world = World()
    c = Coord(3, 3, 3)
    world.set(c, Voxel.BRICK)
    assert neighbors(world, c) == NONE


def test_each_direction_detected():
    c = Coord(3, 3, 3)
    offsets = {
        "nx": (-1, 0, 0),
        "px": (1, 0, 0),
        "ny": (0, -1, 0),
        "py": (0, 1, 0),
        "nz": (0, 0, -1),
        "pz": (0, 0, 1),
    }
    for name, (dx, dy, dz) in offsets.items():
        world = World()
        world.set(c, Voxel.BRICK)
        world.set(Coord(c.x + dx, c.y + dy, c.z + dz), Voxel.BRICK)
        result = neighbors(world, c)
        flags = {field: getattr(result, field) for field in offsets}
        assert flags == {field: field == name for field in offsets}


def test_all_neighbors_solid():
    world = World()
    c = Coord(2, 2, 2)
    for dx, dy, dz in [(-1, 0, 0), (1, 0, 0), (0, -1, 0), (0, 1, 0), (0, 0, -1), (0, 0, 1)]:
        world.set(Coord(c.x + dx, c.y + dy, c.z + dz), Voxel.BRICK)
    assert neighbors(world, c) == Neighbors(True, True, True, True, True, True)


def test_outside_world_counts_as_air():
    world = World()
    corner = Coord(0, 0, 0)
    far = Coord(WORLD_SIZE - 1, WORLD_SIZE - 1, WORLD_SIZE - 1)
    world.set(corner, Voxel.BRICK)
    world.set(far, Voxel.BRICK)
    assert neighbors(world, corner) == NONE
    assert neighbors(world, far) == NONE


def test_diagonals_are_ignored():
    world = World()
    c = Coord(4, 4, 4)
    world.set(Coord(5, 5, 4), Voxel.BRICK)
    world.set(Coord(3, 4, 5), Voxel.BRICK)
    assert neighbors(world, c) == NONE