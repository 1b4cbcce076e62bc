[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "cfsolvers"
version = "0.1.0"
description = "Solvers for competitive-programming problems on strings, arrays, graphs, grids, numbers and geometry"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "competitive-programming", "graphs", "strings", "combinatorics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
cfsolvers = "cfsolvers.cli:main"

[tool.setuptools.packages.find]
include = ["cfsolvers*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
