"""
validated simulation parameters and the uniform periodic meshes derived from them

the mesh size is not chosen independently but derived from the stability condition
    h = v * dt / C
"""

import dataclasses
import numbers
from typing import Optional
import numpy as np
from rea_advection.errors import ConfigurationError
from rea_advection.schemes import select_scheme

MESH_TOLERANCE = 1e-10

# keys of the dict driver configurations
_legacy_keys = {"CFL_number": "courant", "Limiter": "limiter", "Slope": "slope"}


def build_mesh(start: float, stop: float, h: float) -> np.ndarray:
    """
    args:
        start:  first mesh point
        stop:   nominal last mesh point
        h:      mesh size
    returns:
        start, start + h, ... up to stop, which is included only if (stop - start) / h
        is whole. the terminal point falls short of stop otherwise
    """
    n = int(np.floor((stop - start) / h * (1 + MESH_TOLERANCE))) + 1
    return start + h * np.arange(n)


def check_real(value, name: str):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigurationError(f"{name} must be a real number, got {value!r}")
    if not np.isfinite(value):
        raise ConfigurationError(f"{name} must be finite, got {value!r}")


def _check_time(t_init, t_final, t_step):
    for name, value in zip(("t_init", "t_final", "t_step"), (t_init, t_final, t_step)):
        check_real(value, name)
    if t_step <= 0:
        raise ConfigurationError(f"Non-positive time step t_step = {t_step}")
    if t_final < t_init:
        raise ConfigurationError(f"t_final = {t_final} precedes t_init = {t_init}")


def _check_courant(courant):
    check_real(courant, "courant")
    if not 0 < courant <= 1:
        raise ConfigurationError(f"CFL number must lie in (0, 1], got {courant}")


def _axis(
    axis: str,
    start: float,
    stop: float,
    speed: float,
    spacing: Optional[float],
    t_step: float,
    courant: float,
):
    """
    returns:
        mesh, h, courant number of the axis
    """
    check_real(start, f"{axis}_init")
    check_real(stop, f"{axis}_final")
    check_real(speed, f"advection speed in {axis}")
    if stop <= start:
        raise ConfigurationError(
            f"{axis}_final = {stop} must exceed {axis}_init = {start}"
        )
    if speed > 0:
        if spacing is not None:
            raise ConfigurationError(
                f"d{axis} = {spacing} is derived from the advection speed and cannot "
                "be set for a moving axis"
            )
        h = speed * t_step / courant
        axis_courant = courant
    elif speed == 0:
        if spacing is None:
            raise ConfigurationError(
                f"Zero advection speed in {axis}: d{axis} cannot be derived and must "
                "be given"
            )
        check_real(spacing, f"d{axis}")
        if spacing <= 0:
            raise ConfigurationError(f"Non-positive step size d{axis} = {spacing}")
        h = spacing
        axis_courant = 0.0
    else:
        raise ConfigurationError(
            f"Non-positive step size d{axis} = {speed * t_step / courant} from "
            f"advection speed {speed}"
        )
    mesh = build_mesh(start, stop, h)
    if len(mesh) < 3:
        raise ConfigurationError(
            f"Mesh in {axis} has {len(mesh)} points with d{axis} = {h}, at least 3 "
            "are required"
        )
    return mesh, h, axis_courant


def _from_dict(cls, config: dict):
    names = {field.name for field in dataclasses.fields(cls)}
    kwargs = {}
    for key, value in config.items():
        name = _legacy_keys.get(key, key)
        if name not in names:
            raise ConfigurationError(f"Unknown simulation parameter {key!r}")
        if name in ("slope", "limiter") and value is False:
            value = None
        kwargs[name] = value
    missing = [
        field.name
        for field in dataclasses.fields(cls)
        if field.name not in kwargs and field.default is dataclasses.MISSING
    ]
    if missing:
        raise ConfigurationError(f"Missing simulation parameters {missing}")
    return cls(**kwargs)


@dataclasses.dataclass
class SimulationParameters1D:
    """
    args:
        t_init:     starting time
        t_final:    final time
        t_step:     time step
        x_init:     first mesh point
        x_final:    nominal last mesh point
        adv_speed:  constant advection speed, >= 0
        courant:    CFL number in (0, 1]
        slope:      'upwind', 'downwind', 'centered' or None
        limiter:    'minmod', 'superbee', 'mc' or None, overrides slope
        dx:         mesh size, only for adv_speed = 0
    derived:
        hx:         mesh size
        x:          cell centers (nx,), x[0] is the periodic image of x[-1]
        nx:         number of cells
        nt:         number of time levels
        t:          time levels (nt,)
        courant_x:  CFL number of the x sweep
        scheme:     NoReconstruction, Slope or Limiter
    """

    t_init: float
    t_final: float
    t_step: float
    x_init: float
    x_final: float
    adv_speed: float
    courant: float
    slope: Optional[str] = None
    limiter: Optional[str] = None
    dx: Optional[float] = None

    def __post_init__(self):
        _check_time(self.t_init, self.t_final, self.t_step)
        _check_courant(self.courant)
        self.scheme = select_scheme(slope=self.slope, limiter=self.limiter)
        self.x, self.hx, self.courant_x = _axis(
            "x",
            self.x_init,
            self.x_final,
            self.adv_speed,
            self.dx,
            self.t_step,
            self.courant,
        )
        self.nx = len(self.x)
        self.nt = int((self.t_final - self.t_init) / self.t_step + 1)
        self.t = self.t_init + self.t_step * np.arange(self.nt)

    @classmethod
    def from_dict(cls, config: dict) -> "SimulationParameters1D":
        return _from_dict(cls, config)


@dataclasses.dataclass
class SimulationParameters2D:
    """
    args:
        t_init:         starting time
        t_final:        final time
        t_step:         time step
        x_init:         first mesh point in x
        x_final:        nominal last mesh point in x
        y_init:         first mesh point in y
        y_final:        nominal last mesh point in y
        adv_speed_x:    constant advection speed in x, >= 0
        adv_speed_y:    constant advection speed in y, >= 0
        courant:        CFL number in (0, 1], shared by both sweeps
        slope:          'upwind', 'downwind', 'centered' or None
        limiter:        'minmod', 'superbee', 'mc' or None, overrides slope
        dx:             mesh size in x, only for adv_speed_x = 0
        dy:             mesh size in y, only for adv_speed_y = 0
    derived:
        hx, hy:                 mesh sizes
        x, y:                   cell centers (nx,), (ny,)
        nx, ny:                 number of cells
        nt:                     number of time levels
        t:                      time levels (nt,)
        courant_x, courant_y:   CFL number of each sweep
        scheme:                 NoReconstruction, Slope or Limiter
    """

    t_init: float
    t_final: float
    t_step: float
    x_init: float
    x_final: float
    y_init: float
    y_final: float
    adv_speed_x: float
    adv_speed_y: float
    courant: float
    slope: Optional[str] = None
    limiter: Optional[str] = None
    dx: Optional[float] = None
    dy: Optional[float] = None

    def __post_init__(self):
        _check_time(self.t_init, self.t_final, self.t_step)
        _check_courant(self.courant)
        self.scheme = select_scheme(slope=self.slope, limiter=self.limiter)
        self.x, self.hx, self.courant_x = _axis(
            "x",
            self.x_init,
            self.x_final,
            self.adv_speed_x,
            self.dx,
            self.t_step,
            self.courant,
        )
        self.y, self.hy, self.courant_y = _axis(
            "y",
            self.y_init,
            self.y_final,
            self.adv_speed_y,
            self.dy,
            self.t_step,
            self.courant,
        )
        self.nx, self.ny = len(self.x), len(self.y)
        self.nt = int((self.t_final - self.t_init) / self.t_step + 1)
        self.t = self.t_init + self.t_step * np.arange(self.nt)

    @classmethod
    def from_dict(cls, config: dict) -> "SimulationParameters2D":
        return _from_dict(cls, config)
