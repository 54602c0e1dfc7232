"""
exact solutions of the periodic advection equation, the initial profile translated
by the distance travelled and wrapped back into one period
"""

from typing import Callable, Tuple
import numpy as np


def advection1d_solution(
    x: np.ndarray, t: float, a: float, profile: Callable, period: float = None
) -> np.ndarray:
    """
    args:
        x:          mesh (nx,), x[0] and x[-1] are the same point
        t:          elapsed time
        a:          advection speed
        profile:    f(x) at t = 0
        period:     domain length, x[-1] - x[0] if None
    returns:
        f(x - a t) with periodic wrap (nx,)
    """
    x = np.asarray(x, dtype=float)
    if period is None:
        period = x[-1] - x[0]
    return profile(x[0] + np.mod(x - a * t - x[0], period))


def advection2d_solution(
    x: np.ndarray,
    y: np.ndarray,
    t: float,
    u: float,
    v: float,
    profile: Callable,
    periods: Tuple[float, float] = None,
) -> np.ndarray:
    """
    args:
        x:          mesh in x (nx,)
        y:          mesh in y (ny,)
        t:          elapsed time
        u, v:       advection speeds in x and y
        profile:    f(x, y) at t = 0
        periods:    (Lx, Ly), taken from the meshes if None
    returns:
        f(x - u t, y - v t) with periodic wrap (ny, nx)
    """
    x, y = np.asarray(x, dtype=float), np.asarray(y, dtype=float)
    if periods is None:
        periods = (x[-1] - x[0], y[-1] - y[0])
    xx, yy = np.meshgrid(x, y)
    xx = x[0] + np.mod(xx - u * t - x[0], periods[0])
    yy = y[0] + np.mod(yy - v * t - y[0], periods[1])
    return profile(xx, yy)
