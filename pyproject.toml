[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "duckworks"
version = "1.0.0"
description = "Rubber duck sighting readers (CSV, JSON, free text) and small numerical kernels"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "csv",
    "json",
    "geocoordinates",
    "gemm",
    "matrix",
    "nearest-neighbor",
    "text-parsing",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
duckies = "duckworks.cli:main"
duckworks-nearest = "duckworks.nearest_neighbor:main"

[tool.hatch.build.targets.wheel]
packages = ["duckworks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
