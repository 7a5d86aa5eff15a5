[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphshell"
version = "0.1.0"
description = "Directed and undirected graphs with an interactive command shell: components, lowest cost walks, topological sorting and activity scheduling."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "directed graph",
    "undirected graph",
    "topological sort",
    "shortest path",
    "floyd-warshall",
    "critical path",
    "shell",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphshell = "graphshell.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["graphshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
