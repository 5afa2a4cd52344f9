[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cityroutes"
version = "0.1.0"
description = "Shortest routes between cities with Dijkstra's algorithm, cycle detection and small classic data structures"
requires-python = ">=3.10"
dependencies = []
keywords = ["dijkstra", "graph", "shortest-path", "cycle-detection", "hash-table", "linked-list", "queue"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
cityroutes = "cityroutes.dijkstra:main"

[tool.hatch.build.targets.wheel]
packages = ["cityroutes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
