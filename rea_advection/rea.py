"""
defines the REA update of Godunov's method for constant advection speed a > 0:
reconstruct a piecewise linear profile from the cell averages and slopes, evolve it
exactly over dt and average it back onto the mesh

    Q'[i] = Q[i] - C (Q[i] - Q[i-1]) - (C / 2) (h - a dt) (S[i] - S[i-1])

which reduces to first order upwind for S = 0
"""

import numpy as np
from rea_advection.errors import ConfigurationError, DimensionError
from rea_advection.parameters import check_real


def _check_step(a: float, h: float, dt: float, courant: float):
    for name, value in zip(("a", "h", "dt", "courant"), (a, h, dt, courant)):
        check_real(value, name)
    if not 0 <= courant <= 1:
        raise ConfigurationError(f"CFL number must lie in [0, 1], got {courant}")
    if a < 0:
        raise ConfigurationError(f"Negative advection speed a = {a}")
    if h <= 0:
        raise ConfigurationError(f"Non-positive mesh size h = {h}")
    if dt <= 0:
        raise ConfigurationError(f"Non-positive time step dt = {dt}")


def rea_step(
    u: np.ndarray,
    slopes: np.ndarray,
    a: float,
    h: float,
    dt: float,
    courant: float,
) -> np.ndarray:
    """
    args:
        u:          cell averages at t                  (..., n)
        slopes:     reconstruction slopes, None for 0   (..., n)
        a:          advection speed along the last axis
        h:          mesh size along the last axis
        dt:         time step
        courant:    CFL number of the sweep, 0 for a motionless axis
    returns:
        new array of cell averages at t + dt            (..., n)
    """
    _check_step(a, h, dt, courant)
    u = np.asarray(u, dtype=float)
    if u.ndim == 0 or u.shape[-1] < 2:
        raise DimensionError(
            f"REA update needs at least 2 cells along the last axis, got {u.shape}"
        )
    if slopes is None:
        slopes = np.zeros_like(u)
    slopes = np.asarray(slopes, dtype=float)
    if slopes.shape != u.shape:
        raise DimensionError(
            f"Slope field of shape {slopes.shape} does not match cell averages of "
            f"shape {u.shape}"
        )
    unew = np.empty_like(u)
    unew[..., 1:] = (
        u[..., 1:]
        - courant * (u[..., 1:] - u[..., :-1])
        - 0.5 * courant * (h - a * dt) * (slopes[..., 1:] - slopes[..., :-1])
    )
    unew[..., 0] = unew[..., -1]
    return unew


def first_order_upwind(u: np.ndarray, courant: float) -> np.ndarray:
    """
    args:
        u:          cell averages at t  (..., n)
        courant:    CFL number
    returns:
        upwind update at t + dt         (..., n)
    """
    u = np.asarray(u, dtype=float)
    unew = np.empty_like(u)
    unew[..., 1:] = u[..., 1:] - courant * (u[..., 1:] - u[..., :-1])
    unew[..., 0] = unew[..., -1]
    return unew
