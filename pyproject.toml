[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rankbench"
version = "0.1.0"
description = "Small graph toolkit with a dense PageRank solver and timing benchmarks"
requires-python = ">=3.10"
dependencies = []
keywords = ["pagerank", "graph", "bfs", "dfs", "benchmark", "power iteration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
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
rankbench = "rankbench.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["rankbench"]

[tool.pytest.ini_options]
addopts = "-ra"
