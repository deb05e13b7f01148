"""Exact reference solutions and error measures for one-dimensional Euler runs."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike

from nodalcfd.sod import SodExact

# Only flow left of the centre, away from the left wall, is compared with the
# exact Sod solution. This excludes the shock and the contact discontinuity.
_SOD_CHECK_MIN = 0.05
_SOD_CHECK_MAX = 0.5


def _flat(values: ArrayLike, name: str) -> np.ndarray:
    return np.asarray(values, dtype=float).ravel()


def _matching(*arrays: tuple[str, np.ndarray]) -> None:
    (first_name, first), *rest = arrays
    for name, array in rest:
        if array.size != first.size:
            raise ValueError(
                f"{name} has {array.size} values but {first_name} has {first.size}"
            )


def integrate(x: ArrayLike, u: ArrayLike) -> float:
    """Trapezoidal integral of ``u`` over the points ``x``, taken in the given order."""
    xs = _flat(x, "x")
    us = _flat(u, "u")
    _matching(("x", xs), ("u", us))
    if xs.size < 2:
        return 0.0
    return float(np.sum(0.5 * (us[1:] + us[:-1]) * np.diff(xs)))


def dwave_exact(x: ArrayLike, t: float) -> tuple[np.ndarray, np.ndarray]:
    """Exact density wave ``2 + sin(pi * (x - t))`` at the points ``x``.

    Returns the flattened positions and the densities there.
    """
    xs = _flat(x, "x")
    return xs, 2.0 + np.sin(math.pi * (xs - t))


def dwave_error(x: ArrayLike, rho: ArrayLike, t: float) -> tuple[float, float]:
    """RMS and maximum density error against the exact density wave at time ``t``."""
    xs = _flat(x, "x")
    rhos = _flat(rho, "rho")
    _matching(("x", xs), ("rho", rhos))
    if rhos.size == 0:
        raise ValueError("no points to compare")
    _, exact = dwave_exact(xs, t)
    err = np.abs(rhos - exact)
    rms = math.sqrt(float(np.sum(err * err)) / rhos.size)
    return rms, float(np.max(err))


def sod_error(
    x: ArrayLike, rho: ArrayLike, rho_u: ArrayLike, energy: ArrayLike, t: float
) -> tuple[float, float, float, float, float, float]:
    """Errors against the exact Sod solution at time ``t``.

    Only points with 0.05 < x < 0.5 contribute, but the RMS values are
    averaged over all points. Returns (rms_rho, rms_rho_u, rms_e,
    max_rho, max_rho_u, max_e).
    """
    xs = _flat(x, "x")
    rhos = _flat(rho, "rho")
    rho_us = _flat(rho_u, "rho_u")
    energies = _flat(energy, "energy")
    _matching(("x", xs), ("rho", rhos), ("rho_u", rho_us), ("energy", energies))
    if xs.size == 0:
        raise ValueError("no points to compare")

    sod = SodExact(t)
    sums = [0.0, 0.0, 0.0]
    maxima = [0.0, 0.0, 0.0]
    for xv, r, ru, e in zip(xs, rhos, rho_us, energies):
        if not _SOD_CHECK_MIN < xv < _SOD_CHECK_MAX:
            continue
        exact_rho, _, _, exact_e, exact_rho_u = sod.at(float(xv))
        for i, diff in enumerate((r - exact_rho, ru - exact_rho_u, e - exact_e)):
            sq = float(diff) ** 2
            sums[i] += sq
            maxima[i] = max(math.sqrt(sq), maxima[i])

    rms = [math.sqrt(s / xs.size) for s in sums]
    return rms[0], rms[1], rms[2], maxima[0], maxima[1], maxima[2]