[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazealgos"
version = "0.1.0"
description = "Classic data structures, graph search algorithms and a maze generator and solver"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "maze",
    "graph",
    "bfs",
    "dfs",
    "dijkstra",
    "a-star",
    "data-structures",
    "union-find",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mazealgos"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
