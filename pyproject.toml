[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classicalgos"
version = "0.1.0"
description = "Floyd all-pairs shortest paths, longest common subsequence and 0/1 knapsack solvers with command-line tools"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "floyd-warshall",
    "shortest-path",
    "longest-common-subsequence",
    "knapsack",
    "dynamic-programming",
    "greedy",
]
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
classicalgos-floyd = "classicalgos.floyd:main"
classicalgos-lcs = "classicalgos.lcs:main"
classicalgos-knapsack-bruteforce = "classicalgos.bruteforce:main"
classicalgos-knapsack-generate = "classicalgos.generator:main"
classicalgos-knapsack-dynamic = "classicalgos.dynamic:main"
classicalgos-knapsack-greedy = "classicalgos.greedy:main"

[tool.hatch.build.targets.wheel]
packages = ["classicalgos"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
