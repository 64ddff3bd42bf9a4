"""Voxel autotiling: world grid, tile classification, meshing, picking, camera and tilesets."""

__version__ = "0.1.0"