"""
TVD slope limiters built from the minmod and maxmod primitives
"""

import numpy as np
from rea_advection.errors import DimensionError
from rea_advection.slopes import slope_centered, slope_downwind, slope_upwind


def _operands(a, b):
    a, b = np.asarray(a, dtype=float), np.asarray(b, dtype=float)
    if a.shape != b.shape:
        raise DimensionError(f"Operand shapes differ: {a.shape} and {b.shape}")
    return a, b


def minmod(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    args:
        a   any shape
        b   same shape as a
    returns:
        0 where a and b disagree in sign, else the argument of smallest modulus
    """
    a, b = _operands(a, b)
    return np.where(a * b <= 0, 0.0, np.sign(a) * np.minimum(np.abs(a), np.abs(b)))


def maxmod(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    args:
        a   any shape
        b   same shape as a
    returns:
        0 where a and b disagree in sign, else the argument of largest modulus
    """
    a, b = _operands(a, b)
    return np.where(a * b <= 0, 0.0, np.sign(a) * np.maximum(np.abs(a), np.abs(b)))


def limiter_minmod(u: np.ndarray, h: float) -> np.ndarray:
    """
    args:
        u   cell averages   (..., n)
        h   mesh size along the last axis
    returns:
        minmod limited slopes (..., n)
    """
    return minmod(slope_upwind(u, h), slope_downwind(u, h))


def limiter_superbee(u: np.ndarray, h: float) -> np.ndarray:
    """
    args:
        u   cell averages   (..., n)
        h   mesh size along the last axis
    returns:
        superbee limited slopes (..., n)
    """
    upwind = slope_upwind(u, h)
    downwind = slope_downwind(u, h)
    sigma1 = minmod(downwind, 2 * upwind)
    sigma2 = minmod(2 * downwind, upwind)
    return maxmod(sigma1, sigma2)


def limiter_mc(u: np.ndarray, h: float) -> np.ndarray:
    """
    monotonized central limiter
    args:
        u   cell averages   (..., n)
        h   mesh size along the last axis
    returns:
        MC limited slopes (..., n)
    """
    bound = minmod(2 * slope_upwind(u, h), 2 * slope_downwind(u, h))
    return minmod(slope_centered(u, h), bound)
