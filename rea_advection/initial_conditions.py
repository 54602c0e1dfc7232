"""
initial profiles, defined pointwise so that they can be integrated over cells or
evaluated on a mesh
"""

import functools
from typing import Callable, Sequence
import numpy as np
from rea_advection.errors import ConfigurationError


def gaussian(x, x0: float = 15.0, sigma: float = 5.0, height: float = 5.0):
    """
    height * exp(-(x - x0)^2 / (2 sigma)), sigma being the variance
    """
    return height * np.exp(-((x - x0) ** 2) / (2 * sigma))


def rectangular(x, x0: float = 15.0, width: float = 5.0, height: float = 5.0):
    # closed interval [x0 - width / 2, x0 + width / 2]
    inside = np.logical_and(x >= x0 - width / 2, x <= x0 + width / 2)
    return 1.0 * height * inside


def wave_packet(
    x,
    x0: float = 15.0,
    sigma: float = 5.0,
    height: float = 5.0,
    frequency: float = 10.0,
):
    return gaussian(x, x0, sigma, height) * np.cos(frequency * x)


def gaussian_superposition(
    x,
    x0s: Sequence[float] = (10.0, 25.0),
    sigmas: Sequence[float] = (2.0, 5.0),
    heights: Sequence[float] = (3.0, 5.0),
):
    return sum(
        gaussian(x, x0, sigma, height)
        for x0, sigma, height in zip(x0s, sigmas, heights)
    )


def rectangular_superposition(
    x,
    x0s: Sequence[float] = (10.0, 25.0),
    widths: Sequence[float] = (4.0, 8.0),
    heights: Sequence[float] = (3.0, 5.0),
):
    return sum(
        rectangular(x, x0, width, height)
        for x0, width, height in zip(x0s, widths, heights)
    )


def gaussian_rectangular(
    x,
    x0s: Sequence[float] = (10.0, 30.0),
    widths: Sequence[float] = (2.0, 8.0),
    heights: Sequence[float] = (5.0, 3.0),
):
    """
    a gaussian (first entries) followed by a rectangle (second entries)
    """
    return gaussian(x, x0s[0], widths[0], heights[0]) + rectangular(
        x, x0s[1], widths[1], heights[1]
    )


def gaussian2d(
    x,
    y,
    q0: Sequence[float] = (0.0, 0.0),
    sigmas: Sequence[float] = (1.0, 1.0),
    height: float = 4.0,
):
    """
    height * exp(-(x - x0)^2 / (2 sigma_x) - (y - y0)^2 / (2 sigma_y))
    """
    return height * np.exp(
        -((x - q0[0]) ** 2) / (2 * sigmas[0]) - ((y - q0[1]) ** 2) / (2 * sigmas[1])
    )


def rectangular2d(
    x,
    y,
    q0: Sequence[float] = (0.0, 0.0),
    widths: Sequence[float] = (1.0, 1.0),
    height: float = 4.0,
):
    inside_x = np.logical_and(x >= q0[0] - widths[0] / 2, x <= q0[0] + widths[0] / 2)
    inside_y = np.logical_and(y >= q0[1] - widths[1] / 2, y <= q0[1] + widths[1] / 2)
    return 1.0 * height * np.logical_and(inside_x, inside_y)


profiles_1d = {
    "gaussian": gaussian,
    "rectangular": rectangular,
    "wave packet": wave_packet,
    "gaussian superposition": gaussian_superposition,
    "rectangular superposition": rectangular_superposition,
    "gaussian rectangular": gaussian_rectangular,
}

profiles_2d = {
    "gaussian2d": gaussian2d,
    "rectangular2d": rectangular2d,
}


def generate_ic(type: str, ndim: int = None, **params) -> Callable:
    """
    args:
        type    'gaussian', 'rectangular', 'wave packet', 'gaussian superposition',
                'rectangular superposition', 'gaussian rectangular', 'gaussian2d'
                or 'rectangular2d'
        ndim    1 or 2 to accept only the profiles of that dimension, None for all
        params  keyword arguments of the profile
    returns:
        f(x) or f(x, y)
    """
    if ndim is None:
        profiles = {**profiles_1d, **profiles_2d}
    elif ndim in (1, 2):
        profiles = profiles_1d if ndim == 1 else profiles_2d
    else:
        raise ConfigurationError(f"Initial conditions are 1d or 2d, got ndim = {ndim}")
    if type not in profiles:
        expected = "" if ndim is None else f" {ndim}d"
        raise ConfigurationError(
            f"Invalid{expected} initial condition {type!r}, expected one of "
            f"{list(profiles)}"
        )
    return functools.partial(profiles[type], **params)
