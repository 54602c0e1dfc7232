"""
defines useful functions for periodic cell average arrays
"""

import numpy as np
from rea_advection.errors import DimensionError


def apply_periodic_wrap(u: np.ndarray) -> np.ndarray:
    """
    copy the last cell onto the first along every axis, rows before columns
    args:
        u:  (nx,) or (ny, nx)
    overwrites:
        u
    returns:
        u
    """
    if u.ndim == 2:
        u[0, :] = u[-1, :]
        u[:, 0] = u[:, -1]
    elif u.ndim == 1:
        u[0] = u[-1]
    else:
        raise DimensionError(f"Expected a 1d or 2d array, got shape {u.shape}")
    return u


def as_cell_averages(u0, shape: tuple) -> np.ndarray:
    """
    args:
        u0:     array like of cell averages
        shape:  expected mesh shape
    returns:
        float copy of u0 with the periodic wrap enforced
    """
    u = np.array(u0, dtype=float)
    if u.shape != tuple(shape):
        raise DimensionError(
            f"Initial cell averages of shape {u.shape} do not match mesh shape "
            f"{tuple(shape)}"
        )
    return apply_periodic_wrap(u)


def distinct_cells(u: np.ndarray) -> np.ndarray:
    """
    args:
        u:  (nx,) or (ny, nx)
    returns:
        u without the leading periodic images   (nx - 1,) or (ny - 1, nx - 1)
    """
    return u[(slice(1, None),) * u.ndim]


def mass(u: np.ndarray, cell_volume: float = 1.0) -> float:
    """
    args:
        u:              (nx,) or (ny, nx)
        cell_volume:    hx or hx * hy
    returns:
        integral of the piecewise constant solution over one period
    """
    return np.sum(distinct_cells(u)) * cell_volume


def total_variation(u: np.ndarray) -> float:
    """
    args:
        u:  (nx,) or (ny, nx)
    returns:
        periodic total variation, summed over every axis
    """
    return sum(np.sum(np.abs(np.diff(u, axis=axis))) for axis in range(u.ndim))
