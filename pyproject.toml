[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fixed8"
version = "0.1.0"
description = "Fixed-point numbers with 8 fractional bits, and a point-in-triangle test built on them"
requires-python = ">=3.10"
dependencies = []
keywords = ["fixed-point", "arithmetic", "geometry", "triangle", "point-in-triangle"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fixed8 = "fixed8.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fixed8"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
