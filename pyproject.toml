[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxeltile"
version = "0.1.0"
description = "Voxel grid with neighbour-based autotiling, face meshing, ray picking and an orbit camera"
requires-python = ">=3.10"
dependencies = []
keywords = ["voxel", "autotiling", "mesh", "raycast", "3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["voxeltile"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
