[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphbench"
version = "0.1.0"
description = "Graph representations, shortest-path and traversal algorithms, with a timing benchmark"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "dijkstra", "bellman-ford", "dfs", "benchmark", "adjacency matrix"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphbench = "graphbench.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["graphbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
