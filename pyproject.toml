[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tspgenetic"
version = "0.1.0"
description = "A genetic algorithm for the travelling salesman problem on TSPLIB coordinate files"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "tsp",
    "travelling salesman",
    "genetic algorithm",
    "pmx",
    "optimization",
    "tsplib",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
tspgenetic = "tspgenetic.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tspgenetic"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
