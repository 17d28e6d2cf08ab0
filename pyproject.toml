[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spatialdict"
version = "0.1.0"
description = "Point dictionaries with exact and ball searches: linear scan, Morton-ordered BST and 2-d tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["spatial", "kd-tree", "morton", "z-order", "binary search tree", "range search"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spatialdict-benchmark = "spatialdict.benchmark:main"
spatialdict-taxi = "spatialdict.taxi:main"

[tool.hatch.build.targets.wheel]
packages = ["spatialdict"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
