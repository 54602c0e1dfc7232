"""
defines the reconstruction schemes of the REA update:
    NoReconstruction    first order upwind, slopes are 0
    Slope(kind)         unlimited slopes (upwind, downwind, centered)
    Limiter(kind)       TVD limited slopes (minmod, superbee, mc)
"""

import dataclasses
import enum
from typing import Union
import numpy as np
from rea_advection.errors import ConfigurationError
from rea_advection.limiters import limiter_mc, limiter_minmod, limiter_superbee
from rea_advection.slopes import slope_centered, slope_downwind, slope_upwind


class SlopeKind(enum.Enum):
    UPWIND = "upwind"
    DOWNWIND = "downwind"
    CENTERED = "centered"


class LimiterKind(enum.Enum):
    MINMOD = "minmod"
    SUPERBEE = "superbee"
    MC = "mc"


_aliases = {
    SlopeKind: {
        "beam-warming": "upwind",
        "lax-wendroff": "downwind",
        "fromm": "centered",
    },
    LimiterKind: {
        "moncen": "mc",
        "monitored center": "mc",
        "monitored-center": "mc",
        "monitored_center": "mc",
    },
}

_slope_functions = {
    SlopeKind.UPWIND: slope_upwind,
    SlopeKind.DOWNWIND: slope_downwind,
    SlopeKind.CENTERED: slope_centered,
}

_limiter_functions = {
    LimiterKind.MINMOD: limiter_minmod,
    LimiterKind.SUPERBEE: limiter_superbee,
    LimiterKind.MC: limiter_mc,
}

_titles = {
    SlopeKind.UPWIND: "Beam-Warming scheme: upwind slope",
    SlopeKind.DOWNWIND: "Lax-Wendroff scheme: downwind slope",
    SlopeKind.CENTERED: "Fromm scheme: centered slope",
    LimiterKind.MINMOD: "Minmod limiter",
    LimiterKind.SUPERBEE: "Superbee limiter",
    LimiterKind.MC: "Monitored center limiter",
}


def as_kind(value, kind_type: type, name: str):
    """
    args:
        value:      member of kind_type or its (case insensitive) name
        kind_type:  SlopeKind or LimiterKind
        name:       parameter name for the error message
    returns:
        member of kind_type
    """
    if isinstance(value, kind_type):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        key = _aliases[kind_type].get(key, key)
        for kind in kind_type:
            if kind.value == key:
                return kind
    valid = [kind.value for kind in kind_type]
    raise ConfigurationError(f"Invalid {name} {value!r}, expected one of {valid}")


@dataclasses.dataclass(frozen=True)
class NoReconstruction:
    @property
    def title(self) -> str:
        return "Upwind scheme: no slope nor limiter"


@dataclasses.dataclass(frozen=True)
class Slope:
    kind: SlopeKind

    def __post_init__(self):
        object.__setattr__(self, "kind", as_kind(self.kind, SlopeKind, "slope"))

    @property
    def title(self) -> str:
        return _titles[self.kind]


@dataclasses.dataclass(frozen=True)
class Limiter:
    kind: LimiterKind

    def __post_init__(self):
        object.__setattr__(self, "kind", as_kind(self.kind, LimiterKind, "limiter"))

    @property
    def title(self) -> str:
        return _titles[self.kind]


Scheme = Union[NoReconstruction, Slope, Limiter]


def select_scheme(slope=None, limiter=None) -> Scheme:
    """
    args:
        slope:      None, SlopeKind or its name
        limiter:    None, LimiterKind or its name, overrides slope
    returns:
        upwind scheme if neither is set, otherwise the limiter or slope scheme
    """
    if limiter is not None:
        scheme = Limiter(limiter)
        if slope is not None:
            overridden = as_kind(slope, SlopeKind, "slope")
            print(
                f"Limiter '{scheme.kind.value}' overrides slope '{overridden.value}'"
            )
        return scheme
    if slope is not None:
        return Slope(slope)
    return NoReconstruction()


def compute_slopes(scheme: Scheme, u: np.ndarray, h: float) -> np.ndarray:
    """
    args:
        scheme: NoReconstruction, Slope or Limiter
        u:      cell averages   (..., n)
        h:      mesh size along the last axis
    returns:
        slopes of the piecewise linear reconstruction (..., n)
    """
    if isinstance(scheme, NoReconstruction):
        return np.zeros_like(u, dtype=float)
    if isinstance(scheme, Slope):
        return _slope_functions[scheme.kind](u, h)
    if isinstance(scheme, Limiter):
        return _limiter_functions[scheme.kind](u, h)
    raise ConfigurationError(f"Invalid scheme {scheme!r}")
