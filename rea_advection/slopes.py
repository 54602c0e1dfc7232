"""
defines the finite difference slopes used for the piecewise linear reconstruction in
Godunov's REA scheme

every function acts along the last axis of the cell averages, so a 2d array is
treated as a stack of independent 1d lines. the first cell of a line is the periodic
image of the last one
"""

import numpy as np
from rea_advection.errors import DimensionError


def _as_lines(u: np.ndarray, name: str) -> np.ndarray:
    u = np.asarray(u, dtype=float)
    if u.ndim == 0 or u.shape[-1] < 2:
        raise DimensionError(
            f"{name} slopes need at least 2 cells along the last axis, got shape "
            f"{u.shape}"
        )
    return u


def slope_upwind(u: np.ndarray, h: float) -> np.ndarray:
    """
    backward differences (Beam-Warming)
    args:
        u:  cell averages   (..., n)
        h:  mesh size along the last axis
    returns:
        slopes              (..., n), the first slope is wrapped from the last
    """
    u = _as_lines(u, "upwind")
    slopes = np.empty_like(u)
    slopes[..., 1:] = (u[..., 1:] - u[..., :-1]) / h
    slopes[..., 0] = slopes[..., -1]
    return slopes


def slope_downwind(u: np.ndarray, h: float) -> np.ndarray:
    """
    forward differences (Lax-Wendroff)
    args:
        u:  cell averages   (..., n)
        h:  mesh size along the last axis
    returns:
        slopes              (..., n), the last slope is wrapped from the first
    """
    u = _as_lines(u, "downwind")
    slopes = np.empty_like(u)
    slopes[..., :-1] = (u[..., 1:] - u[..., :-1]) / h
    slopes[..., -1] = slopes[..., 0]
    return slopes


def slope_centered(
    u: np.ndarray, h: float, normalize_boundary: bool = False
) -> np.ndarray:
    """
    centered differences (Fromm)
    args:
        u:                  cell averages   (..., n)
        h:                  mesh size along the last axis
        normalize_boundary: divide the one sided difference of the last cell by h
    returns:
        slopes              (..., n)
    """
    u = _as_lines(u, "centered")
    slopes = np.empty_like(u)
    slopes[..., 1:-1] = (u[..., 2:] - u[..., :-2]) / (2 * h)
    # last cell falls back to a one sided difference, undivided unless normalized
    slopes[..., -1] = u[..., -1] - u[..., -2]
    if normalize_boundary:
        slopes[..., -1] /= h
    slopes[..., 0] = slopes[..., -1]
    return slopes
