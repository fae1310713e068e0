[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ssspgraph"
version = "0.1.0"
description = "Single-source shortest paths with Bellman-Ford over edge lists and METIS-partitioned graphs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "shortest-path",
    "bellman-ford",
    "sssp",
    "metis",
    "partitioning",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ssspgraph = "ssspgraph.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ssspgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
