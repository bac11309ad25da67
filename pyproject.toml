[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "conceptspace"
version = "0.3.0"
description = "Geometric knowledge representation with conceptual spaces: points, convex regions, metrics, similarity and spatial indexes"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "conceptual-spaces",
    "knowledge-representation",
    "semantic",
    "similarity",
    "spatial-index",
]
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
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["conceptspace"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
