"""One-dimensional model problem selection and default settings."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum


class ModelType1D(IntEnum):
    """Available one-dimensional model problems and schemes."""

    ADVECT = 0
    MAXWELL = 1
    EULER = 2
    ADVECT_DFR = 3
    MAXWELL_DFR = 4
    EULER_DFR_ROE = 5
    EULER_DFR_LF = 6
    EULER_DFR_AVE = 7


_MAX_CFL = (1.0, 1.0, 3.0, 3.0, 1.0, 2.5, 3.0, 3.0)
_DEFAULT_K = (10, 100, 500, 50, 500, 500, 500, 40)
_DEFAULT_N = (3, 4, 4, 4, 3, 4, 4, 3)
_DEFAULT_CFL = (1.0, 1.0, 3.0, 3.0, 0.75, 2.5, 3.0, 0.5)
_DEFAULT_XMAX = (2 * math.pi, 1.0, 1.0, 2 * math.pi, 1.0, 1.0, 1.0, 1.0)
_DEFAULT_CASE = (0,) * 8


def limit_cfl(model: ModelType1D | int, cfl: float) -> float:
    """Clamp ``cfl`` to the largest stable value for ``model``."""
    cfl_max = _MAX_CFL[ModelType1D(model)]
    if cfl > cfl_max:
        print(
            "Input CFL is higher than max CFL for this method\n"
            f"Replacing with Max CFL: {cfl_max:8.2f}"
        )
        return cfl_max
    return cfl


def defaults(model: ModelType1D | int) -> tuple[float, float, int, int, int]:
    """Return default (cfl, x_max, n, k, case) for ``model``."""
    index = ModelType1D(model)
    return (
        _DEFAULT_CFL[index],
        _DEFAULT_XMAX[index],
        _DEFAULT_N[index],
        _DEFAULT_K[index],
        _DEFAULT_CASE[index],
    )


@dataclass
class Model1D:
    """Settings of a one-dimensional run."""

    k: int = _DEFAULT_K[ModelType1D.EULER]
    n: int = _DEFAULT_N[ModelType1D.EULER]
    delay: int = 0  # milliseconds between plot frames
    model_run: ModelType1D = ModelType1D.EULER
    cfl: float = _DEFAULT_CFL[ModelType1D.EULER]
    final_time: float = 100000.0
    x_max: float = _DEFAULT_XMAX[ModelType1D.EULER]
    case: int = _DEFAULT_CASE[ModelType1D.EULER]
    graph: bool = False