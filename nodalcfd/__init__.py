"""Exact Sod and density-wave solutions, 1D model settings, YAML run parameters and Delaunay mesh elements."""

__version__ = "0.1.0"