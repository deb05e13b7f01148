"""Exact solution of Sod's shock tube problem."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable

_TOLERANCE = 1.0e-7


@dataclass(frozen=True)
class GasState:
    """Primitive state of a calorically perfect gas."""

    rho: float
    p: float
    u: float
    gamma: float

    def sound_speed(self) -> float:
        """Speed of sound, sqrt(gamma * p / rho)."""
        return math.sqrt(self.gamma * self.p / self.rho)


def fzero(f: Callable[[float], float], start: float) -> float:
    """Find a root of ``f`` with the secant method, starting near ``start``."""
    start_old = start / 2
    res = f(start_old)
    while abs(res) > _TOLERANCE:
        res_new = f(start)
        deriv = (start - start_old) / (res_new - res)
        start_new = abs(start - res_new * deriv)
        start_old, start, res = start, start_new, res_new
    return start


def sod_residual(p: float) -> float:
    """Residual of the pressure equation for the post-shock state of Sod's tube."""
    rho_l, p_l = 1.0, 1.0
    rho_r, p_r = 0.125, 0.1
    gamma = 1.4
    mu2 = (gamma - 1) / (gamma + 1)
    expo = (gamma - 1) / (2 * gamma)
    return (p - p_r) * math.sqrt((1 - mu2) / (rho_r * (p + mu2 * p_r))) - (
        p_l**expo - p**expo
    ) * math.sqrt(((1 - mu2 * mu2) * p_l ** (1 / gamma)) / (mu2 * mu2 * rho_l))


@dataclass
class SodExact:
    """Analytic Sod shock tube solution on [0, 1] at a given time."""

    t: float
    gamma: float = field(default=1.4, init=False)
    x_min: float = field(default=0.0, init=False)
    x_max: float = field(default=1.0, init=False)
    x0: float = field(default=0.0, init=False)
    x1: float = field(default=0.0, init=False)
    x2: float = field(default=0.0, init=False)
    x3: float = field(default=0.0, init=False)
    x4: float = field(default=0.0, init=False)
    rho_middle: float = field(default=0.0, init=False)
    left: GasState = field(init=False)
    right: GasState = field(init=False)
    post: GasState = field(init=False)

    def __init__(self, t: float) -> None:
        self.gamma = 1.4
        self.x_min = 0.0
        self.x_max = 1.0
        self.left = GasState(1.0, 1.0, 0.0, self.gamma)
        self.right = GasState(0.125, 0.1, 0.0, self.gamma)
        self.calc(t)

    def calc(self, t: float) -> None:
        """Compute the wave positions and intermediate states at time ``t``."""
        gamma = self.gamma
        mu2 = (gamma - 1) / (gamma + 1)
        left, right = self.left, self.right
        p_post = fzero(sod_residual, math.pi)

        self.t = t
        self.rho_middle = left.rho * (p_post / left.p) ** (1.0 / gamma)
        self.x0 = 0.5 * (self.x_max + self.x_min)
        ratio = p_post / right.p
        self.post = GasState(
            right.rho * (ratio + mu2) / (1 + mu2 * ratio),
            p_post,
            right.u
            + (p_post - right.p)
            / math.sqrt(0.5 * right.rho * ((gamma + 1) * p_post + (gamma - 1) * right.p)),
            gamma,
        )
        density_ratio = self.post.rho / right.rho
        v_shock = self.post.u * density_ratio / (density_ratio - 1.0)
        self.x1 = self.x0 - left.sound_speed() * t
        self.x3 = self.x0 + self.post.u * t
        self.x4 = self.x0 + v_shock * t
        c2 = left.sound_speed() - 0.5 * (gamma - 1.0) * self.post.u
        self.x2 = self.x0 + t * (self.post.u - c2)

    def at(self, x: float) -> tuple[float, float, float, float, float]:
        """Return (rho, p, u, total energy, momentum) at position ``x``."""
        gamma = self.gamma
        mu2 = (gamma - 1) / (gamma + 1)
        left, right = self.left, self.right
        rho = p = u = 0.0
        if x < self.x1:
            rho, p, u = left.rho, left.p, left.u
        elif self.x1 <= x <= self.x2:
            c_left = left.sound_speed()
            c = mu2 * ((self.x0 - x) / self.t) + (1.0 - mu2) * c_left
            rho = left.rho * (c / c_left) ** (2 / (gamma - 1))
            p = left.p * (rho / left.rho) ** gamma
            u = (1.0 - mu2) * ((-(self.x0 - x) / self.t) + c_left)
        elif self.x2 <= x <= self.x3:
            rho, p, u = self.rho_middle, self.post.p, self.post.u
        elif self.x3 <= x <= self.x4:
            rho, p, u = self.post.rho, self.post.p, self.post.u
        elif self.x4 < x:
            rho, p, u = right.rho, right.p, right.u
        energy = p / (gamma - 1.0) + 0.5 * u * u * rho
        return rho, p, u, energy, rho * u

    def sample(self) -> tuple[list[float], list[float], list[float], list[float], list[float]]:
        """Sample the solution at points bracketing each wave.

        Returns lists (x, rho, p, rho_u, energy).
        """
        tol = 0.0001
        x1 = self.x1
        mid_step = (self.x2 - self.x1) / 10.0
        xs = [
            self.x_min,
            x1 - tol,
            x1 + tol,
            *(x1 + i * mid_step for i in range(1, 10)),
            x1 + 10 * mid_step - 2.0 * tol,
            self.x2 - tol,
            self.x2 + tol,
            self.x3 - tol,
            self.x3 + tol,
            self.x4 - tol,
            self.x4 + tol,
            self.x_max,
        ]
        rho, p, rho_u, energy = [], [], [], []
        for x in xs:
            r, pr, _, e, ru = self.at(x)
            rho.append(r)
            p.append(pr)
            rho_u.append(ru)
            energy.append(e)
        return xs, rho, p, rho_u, energy