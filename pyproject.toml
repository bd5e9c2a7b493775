[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linalg"
version = "1.0.0"
description = "Pure-Python vector operations, coordinate conversions, a dense Matrix type and matrix rank."
requires-python = ">=3.10"
dependencies = []
keywords = ["linear algebra", "vector", "matrix", "rank", "coordinates", "geometry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["linalg"]

[tool.pytest.ini_options]
addopts = "-ra"
