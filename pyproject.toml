[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nodalcfd"
version = "0.1.0"
description = "Pieces of a nodal discontinuous Galerkin flow solver: exact Sod and density-wave solutions, 1D model settings, YAML run parameters and Delaunay mesh elements"
requires-python = ">=3.10"
keywords = [
    "cfd",
    "euler equations",
    "discontinuous galerkin",
    "sod shock tube",
    "exact solution",
    "delaunay",
    "in-circle test",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]
dependencies = [
    "numpy",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["nodalcfd"]

[tool.hatch.build.targets.sdist]
include = [
    "nodalcfd",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
