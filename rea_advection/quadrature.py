"""
defines the cell averages of a continuous initial profile, computed with adaptive
quadrature over every cell of a periodic mesh
"""

import warnings
from typing import Callable
import numpy as np
from scipy.integrate import IntegrationWarning, dblquad, quad
from tqdm import tqdm
from rea_advection.errors import DimensionError, IntegrationError
from rea_advection.utils import apply_periodic_wrap

EPSABS = 1.49e-8
EPSREL = 1.49e-8


def _converged(value: float, bounds: tuple) -> float:
    if not np.isfinite(value):
        raise IntegrationError(f"Quadrature over cell {bounds} returned {value}")
    return value


def integral_1d(
    f: Callable,
    a: float,
    b: float,
    epsabs: float = EPSABS,
    epsrel: float = EPSREL,
    limit: int = 50,
) -> float:
    """
    args:
        f:      f(x)
        a, b:   interval
        epsabs, epsrel, limit:  see scipy.integrate.quad
    returns:
        integral of f over [a, b]
    """
    with warnings.catch_warnings():
        warnings.simplefilter("error", IntegrationWarning)
        try:
            value, _ = quad(f, a, b, epsabs=epsabs, epsrel=epsrel, limit=limit)
        except IntegrationWarning as warning:
            raise IntegrationError(
                f"Quadrature over cell {(a, b)} did not converge: {warning}"
            ) from warning
    return _converged(value, (a, b))


def integral_2d(
    f: Callable,
    xa: float,
    xb: float,
    ya: float,
    yb: float,
    epsabs: float = EPSABS,
    epsrel: float = EPSREL,
) -> float:
    """
    args:
        f:          f(x, y)
        xa, xb:     interval in x
        ya, yb:     interval in y
        epsabs, epsrel:     see scipy.integrate.dblquad
    returns:
        integral of f over [xa, xb] x [ya, yb]
    """
    bounds = ((xa, xb), (ya, yb))
    with warnings.catch_warnings():
        warnings.simplefilter("error", IntegrationWarning)
        try:
            # dblquad integrates func(y, x), y being the inner variable
            value, _ = dblquad(
                lambda y, x: f(x, y), xa, xb, ya, yb, epsabs=epsabs, epsrel=epsrel
            )
        except IntegrationWarning as warning:
            raise IntegrationError(
                f"Quadrature over cell {bounds} did not converge: {warning}"
            ) from warning
    return _converged(value, bounds)


def cell_average_1d(
    f: Callable,
    x: np.ndarray,
    h: float,
    epsabs: float = EPSABS,
    epsrel: float = EPSREL,
    limit: int = 50,
) -> np.ndarray:
    """
    args:
        f:      initial profile f(x)
        x:      cell centers (nx,)
        h:      mesh size
        epsabs, epsrel, limit:  quadrature tolerances
    returns:
        cell averages (nx,), the first cell is a copy of the last and is not
        integrated
    """
    x = np.asarray(x, dtype=float)
    if x.ndim != 1 or len(x) < 2:
        raise DimensionError(f"Expected at least 2 cell centers, got shape {x.shape}")
    ubar = np.zeros_like(x)
    for i in range(1, len(x)):
        a, b = x[i] - h / 2, x[i] + h / 2
        # rounded cell width, not h
        ubar[i] = integral_1d(f, a, b, epsabs, epsrel, limit) / (b - a)
    return apply_periodic_wrap(ubar)


def cell_average_2d(
    f: Callable,
    x: np.ndarray,
    y: np.ndarray,
    hx: float,
    hy: float,
    epsabs: float = EPSABS,
    epsrel: float = EPSREL,
    progress_bar: bool = False,
) -> np.ndarray:
    """
    args:
        f:              initial profile f(x, y)
        x:              cell centers in x (nx,)
        y:              cell centers in y (ny,)
        hx, hy:         mesh sizes
        epsabs, epsrel: quadrature tolerances
        progress_bar:   whether to print a progress bar over the rows
    returns:
        cell averages (ny, nx), the first row is a copy of the last row and the
        first column is a copy of the last column
    """
    x, y = np.asarray(x, dtype=float), np.asarray(y, dtype=float)
    if x.ndim != 1 or y.ndim != 1 or len(x) < 2 or len(y) < 2:
        raise DimensionError(
            f"Expected at least 2 cell centers per axis, got {x.shape} and {y.shape}"
        )
    ubar = np.zeros((len(y), len(x)))
    rows = range(1, len(y))
    if progress_bar:
        bar_format = "{l_bar}{bar}| {n_fmt}/{total_fmt} [{elapsed}]"
        rows = tqdm(rows, desc="cell averages", bar_format=bar_format)
    for j in rows:
        ya, yb = y[j] - hy / 2, y[j] + hy / 2
        for i in range(1, len(x)):
            xa, xb = x[i] - hx / 2, x[i] + hx / 2
            ubar[j, i] = integral_2d(f, xa, xb, ya, yb, epsabs, epsrel) / (
                (xb - xa) * (yb - ya)
            )
    return apply_periodic_wrap(ubar)
