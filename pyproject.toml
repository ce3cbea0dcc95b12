[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphwork"
version = "0.1.0"
description = "Classic graph and grid algorithms: traversals, components, shortest paths, spanning trees, topological order and backtracking searches."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "bfs",
    "dfs",
    "dijkstra",
    "prim",
    "topological-sort",
    "hamiltonian",
    "knights-tour",
    "connected-components",
    "bipartite",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphwork = "graphwork.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["graphwork"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
