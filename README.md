# nodalcfd

Pieces of a nodal discontinuous Galerkin solver for compressible flow that
are useful on their own:

- **`nodalcfd.sod`** – the exact solution of Sod's shock tube on [0, 1]
  (`SodExact`, `GasState`), with the secant root finder `fzero` and the
  pressure residual `sod_residual` used to find the post-shock pressure.
- **`nodalcfd.euler_exact`** – reference solutions and error measures for
  checking 1D Euler results: `integrate`, `dwave_exact`, `dwave_error`,
  `sod_error`.
- **`nodalcfd.models1d`** – the catalogue of 1D model problems
  (`ModelType1D`), the settings of a run (`Model1D`), their defaults
  (`defaults`) and CFL limits (`limit_cfl`).
- **`nodalcfd.parameters`** – YAML input parameters for 2D runs
  (`InputParameters2D`) and plotting options (`PlotMeta`).
- **`nodalcfd.mesh_elements`** – the building blocks of a Delaunay mesh:
  `Point`, `Edge`, `Tri`, the point-location graph node `TriGraphNode`,
  `unique_vertices`, and the in-circle test `is_illegal_edge`.
  Inconsistent topology, such as an edge whose two vertices are the same,
  raises `TriangulationError`.

## Exact Sod shock tube

```python
from nodalcfd.sod import SodExact

sod = SodExact(0.1)                       # solution at t = 0.1
rho, p, u, energy, rho_u = sod.at(0.45)
x, rho, p, rho_u, energy = sod.sample()   # 20 points bracketing each wave
print(sod.x4)                             # shock position, about 0.6752
```

## Checking a solution

```python
import numpy as np
from nodalcfd.euler_exact import dwave_error, integrate, sod_error

integrate([0.0, 1.0, 2.0], [1.0, 1.0, 1.0])           # 2.0, trapezoidal rule

x = np.linspace(0.0, 2.0, 41)
rms, worst = dwave_error(x, 2.0 + np.sin(np.pi * (x - 0.3)), 0.3)

rms_rho, rms_rho_u, rms_e, max_rho, max_rho_u, max_e = sod_error(
    x_points, rho, rho_u, energy, t
)
```

`sod_error` compares only points with 0.05 < x < 0.5, away from the shock
and the contact discontinuity, but averages the RMS values over all points.
Arrays of different sizes raise `ValueError`.

## 1D model settings

```python
from nodalcfd.models1d import ModelType1D, defaults, limit_cfl

cfl, x_max, n, k, case = defaults(ModelType1D.EULER)   # (3.0, 1.0, 4, 500, 0)
limit_cfl(ModelType1D.ADVECT, 2.0)                      # prints a notice, returns 1.0
```

## Input parameters

```python
from nodalcfd.parameters import InputParameters2D

params = InputParameters2D.parse(b"""
Title: "Test Case"
CFL: 1.
FluxType: Lax
InitType: IVortex
PolynomialOrder: 1
FinalTime: 4
""")
print(params.describe())
```

Keys are matched case-insensitively and unknown keys are ignored; malformed
YAML or a value of the wrong type raises `ValueError`.

## Mesh elements

```python
from nodalcfd.mesh_elements import Edge, Tri, TriGraphNode, is_illegal_edge

tri = Tri()
for verts in [(0, 1), (1, 2), (2, 0)]:
    tri.add_edge(Edge(verts, immovable=True))
tri.vertices()        # ((0, 1, 2), (True, True, True))
tri.name()            # "0F_1F_2F"
TriGraphNode(tri).dot_lines()

# Is (-0.5, -0.5) inside the circle through (-1, -1), (1, -1), (-1, 1)?
is_illegal_edge(-0.5, -0.5, -1, -1, 1, -1, -1, 1)   # True
```

## What this package does not do

It holds no time-stepping solver: there is no 1D or 2D Euler, advection or
Maxwell solver to run, no interface flux functions, and no incremental point
insertion that builds a whole triangulation from the mesh elements. There is
no command-line program and no plotting; `PlotMeta` only records plotting
options.

## Tests

The test suite uses pytest and is installed with the `test` extra.