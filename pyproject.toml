[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexgrid"
version = "0.1.0"
description = "Hierarchical hexagonal grid primitives: IJK coordinates, base cells, bounding boxes and ring traversal tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["hexagon", "grid", "geospatial", "icosahedron", "ijk", "gis"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hexgrid"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
