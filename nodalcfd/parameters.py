"""Solver input parameters read from YAML, and plotting options."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Optional

import yaml

_FIELD_KINDS = {
    "title": str,
    "cfl": float,
    "flux_type": str,
    "init_type": str,
    "polynomial_order": int,
    "final_time": float,
    "minf": float,
    "gamma": float,
    "alpha": float,
    "bcs": dict,
    "local_time_stepping": bool,
    "max_iterations": int,
    "implicit_solver": bool,
    "limiter": str,
    "kappa": float,
}

# Accepted YAML keys (compared case-insensitively) for each field.
_KEY_ALIASES = {
    "title": ("Title",),
    "cfl": ("CFL",),
    "flux_type": ("FluxType",),
    "init_type": ("InitType",),
    "polynomial_order": ("PolynomialOrder",),
    "final_time": ("FinalTime",),
    "minf": ("Minf",),
    "gamma": ("Gamma",),
    "alpha": ("Alpha",),
    "bcs": ("BCs",),
    "local_time_stepping": ("LocalTimeStepping", "LocalTimeStep"),
    "max_iterations": ("MaxIterations",),
    "implicit_solver": ("ImplicitSolver",),
    "limiter": ("Limiter",),
    "kappa": ("Kappa",),
}

_KEY_TO_FIELD = {
    alias.lower(): name for name, aliases in _KEY_ALIASES.items() for alias in aliases
}


def _as_float(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key}: expected a number, got {value!r}")
    return float(value)


def _as_int(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key}: expected an integer, got {value!r}")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if not isinstance(value, int):
        raise ValueError(f"{key}: expected an integer, got {value!r}")
    return value


def _convert_bcs(value: Any, key: str) -> dict[str, dict[int, dict[str, float]]]:
    if not isinstance(value, dict):
        raise ValueError(f"{key}: expected a mapping, got {value!r}")
    result: dict[str, dict[int, dict[str, float]]] = {}
    for name, groups in value.items():
        if groups is None:
            result[str(name)] = {}
            continue
        if not isinstance(groups, dict):
            raise ValueError(f"{key}[{name}]: expected a mapping, got {groups!r}")
        converted: dict[int, dict[str, float]] = {}
        for number, params in groups.items():
            try:
                index = int(number)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{key}[{name}]: invalid index {number!r}") from exc
            if params is None:
                converted[index] = {}
                continue
            if not isinstance(params, dict):
                raise ValueError(f"{key}[{name}][{index}]: expected a mapping")
            converted[index] = {
                str(pname): _as_float(pval, f"{key}[{name}][{index}][{pname}]")
                for pname, pval in params.items()
            }
        result[str(name)] = converted
    return result


def _convert(name: str, value: Any, key: str) -> Any:
    kind = _FIELD_KINDS[name]
    if kind is float:
        return _as_float(value, key)
    if kind is int:
        return _as_int(value, key)
    if kind is bool:
        if not isinstance(value, bool):
            raise ValueError(f"{key}: expected a boolean, got {value!r}")
        return value
    if kind is str:
        if not isinstance(value, str):
            raise ValueError(f"{key}: expected a string, got {value!r}")
        return value
    return _convert_bcs(value, key)


def _go_value(value: float) -> str:
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _format_bc(groups: dict[int, dict[str, float]]) -> str:
    parts = []
    for index in sorted(groups):
        params = groups[index]
        inner = " ".join(f"{k}:{_go_value(params[k])}" for k in sorted(params))
        parts.append(f"{index}:map[{inner}]")
    return "map[" + " ".join(parts) + "]"


@dataclass
class InputParameters2D:
    """Parameters of a two-dimensional run, as given in the YAML input file."""

    title: str = ""
    cfl: float = 0.0
    flux_type: str = ""
    init_type: str = ""
    polynomial_order: int = 0
    final_time: float = 0.0
    minf: float = 0.0
    gamma: float = 0.0
    alpha: float = 0.0
    bcs: dict[str, dict[int, dict[str, float]]] = field(default_factory=dict)
    local_time_stepping: bool = False
    max_iterations: int = 0
    implicit_solver: bool = False
    limiter: str = ""
    kappa: float = 0.0

    @classmethod
    def parse(cls, data: bytes | str) -> "InputParameters2D":
        """Build parameters from YAML text; unknown keys are ignored.

        Raises ValueError on malformed YAML or a value of the wrong type.
        """
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        try:
            document = yaml.safe_load(data)
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid YAML: {exc}") from exc
        params = cls()
        if document is None:
            return params
        if not isinstance(document, dict):
            raise ValueError("input parameters must be a YAML mapping")
        updates = {}
        for key, value in document.items():
            name = _KEY_TO_FIELD.get(str(key).lower())
            if name is None or value is None:
                continue
            updates[name] = _convert(name, value, str(key))
        return dataclasses.replace(params, **updates)

    def describe(self) -> str:
        """Human-readable summary of the main parameters."""
        lines = [
            f'"{self.title}"\t\t= Title',
            f"{self.cfl:8.5f}\t\t= CFL",
            f"{self.final_time:8.5f}\t\t= FinalTime",
            f"[{self.flux_type}]\t\t\t= Flux Type",
            f"[{self.init_type}]\t= InitType",
            f"[{self.polynomial_order}]\t\t\t\t= Polynomial Order",
        ]
        lines.extend(f"BCs[{key}] = {_format_bc(self.bcs[key])}" for key in sorted(self.bcs))
        return "\n".join(lines) + "\n"


@dataclass
class PlotMeta:
    """Options controlling live plotting of a solution."""

    plot: bool = False
    plot_mesh: bool = False
    scale: float = 0.0
    translate_x: float = 0.0
    translate_y: float = 0.0
    field: int = 0
    field_min: Optional[float] = None
    field_max: Optional[float] = None
    frame_time: timedelta = field(default_factory=timedelta)
    steps_before_plot: int = 0
    line_type: str = "none"