[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bubbletrees"
version = "0.1.0"
description = "Build the independent spanning trees of the bubble-sort graph and export them as text or Graphviz DOT"
requires-python = ">=3.10"
dependencies = []
keywords = ["permutations", "bubble-sort graph", "spanning trees", "graphviz", "interconnection networks"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
bubbletrees = "bubbletrees.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bubbletrees"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
