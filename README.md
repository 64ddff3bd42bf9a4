# voxeltile

`voxeltile` models a small voxel world of 8×8×8 cells. It picks an autotile piece for each solid cell and builds the geometry that goes with it. It uses only the standard library.

## What is in it

- **`voxeltile.world`**: `World`, `Coord`, `Voxel` (`AIR`, `BRICK`) and `WORLD_SIZE`.
  - `World.get` returns air for coordinates outside the grid.
  - `World.set` ignores coordinates outside the grid.
  - `World.in_bounds` tells you whether a coordinate is inside the grid.
  - `seed_world` places one brick at the centre.
  - `voxel_min_world` gives a cell's minimum corner in world space. The grid is centred on the origin.
- **`voxeltile.tile_kind`**: `TileKind` has the members `SOLO`, `END`, `STRAIGHT`, `CORNER`, `TEE` and `CROSS`. `TileKind.from_name` maps a mesh name such as `"corner"` to its kind. It returns `None` for unknown names.
- **`voxeltile.autotile`**: `neighbors(world, coord)` returns a `Neighbors` record. The record says which of the six face neighbours are solid.
- **`voxeltile.classify`**: `classify(neighbors)` returns a `(TileKind, Quat)` pair. The `Quat` is one of the 24 cube rotations. It maps the tile's modelled connections onto the actual ones. If no rotation matches, the identity is returned. Helpers:
  - `conn_dirs`
  - `kind_from_conns`
  - `canonical_conns`
  - `all_cube_rotations`
  - `rotate_dir`
  - `find_rotation`
  - `Quat.from_basis`, `Quat.rotate` and `Quat.dot`
- **`voxeltile.meshing`**: `build_chunk_mesh(world)` returns a `ChunkMesh`.
  - It has one quad for every solid-cell face that borders air.
  - Each quad has four positions, normals and UVs, and six triangle indices.
  - `face_vertices` and `Face` describe a single face.
  - `ChunkMesh.face_count` gives the number of quads.
- **`voxeltile.picking`**: ray picking and editing.
  - `ray_aabb` is a slab test that returns the entry distance and the face normal.
  - `raycast_voxels` returns a `RayHit` for the nearest solid cell in front of a ray. The direction is normalised first. A zero direction raises `ValueError`.
  - `edit_voxels(world, origin, direction, add, remove)` either removes the cell that was hit, or places a brick against the face that was hit. Removal wins if both are set. The function returns whether the world changed.
- **`voxeltile.camera`**: `OrbitCamera` sits on a sphere around a target.
  - `orbit(dx, dy)` scales a pointer delta by the sensitivity and clamps the pitch to ±1.55 rad. It returns the new position.
  - `position()` computes the position from yaw and pitch.
- **`voxeltile.tileset`**: `Tileset.populate(named_meshes)` takes a mapping from mesh name to a sequence of `(mesh, material)` primitives.
  - It fills in one `TileAsset` per kind, from the first primitive.
  - A missing material becomes a plain grey one.
  - The call returns `True` on the call that makes the tileset ready, that is, when all six kinds are present.
  - `Tileset.get(kind)` looks up an asset.
- **`voxeltile.chunk`**: `build_tile_instances(world, tileset)` returns a `TileInstance` for every solid cell, in y, z, x order.
  - Each instance holds the tile's mesh, material, centre translation and rotation.
  - The function returns `None` while the tileset is not ready.

## Install

```
pip install .
```

## Example

```python
from voxeltile.world import World, Coord, Voxel, seed_world
from voxeltile.autotile import neighbors
from voxeltile.classify import classify
from voxeltile.meshing import build_chunk_mesh

world = World()
seed_world(world)  # one brick in the centre
world.set(Coord(4, 5, 4), Voxel.BRICK)

kind, rotation = classify(neighbors(world, Coord(4, 4, 4)))
print(kind)  # TileKind.END

mesh = build_chunk_mesh(world)
print(mesh.face_count)  # 10: two stacked cubes share one hidden face pair
```

## What it does not do

`voxeltile` is a library of data and geometry only. It has no window, renderer, lighting or input handling, and it has no command to run.

It does not read model files. `Tileset.source` only records a path. Meshes and materials reach `Tileset.populate` already loaded, in whatever form the caller uses.

The results are plain Python data for a drawing layer of your choosing:
- mesh arrays
- tile placements
- camera positions

## Tests

```
pip install ".[test]"
pytest
```