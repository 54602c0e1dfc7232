import pytest
import numpy as np
from rea_advection.errors import DimensionError
from rea_advection.limiters import (
    limiter_mc,
    limiter_minmod,
    limiter_superbee,
    maxmod,
    minmod,
)
from rea_advection.slopes import slope_downwind, slope_upwind

n_tests = 5
limiters = [limiter_minmod, limiter_superbee, limiter_mc]


@pytest.mark.parametrize(
    "a, b, expected_min, expected_max",
    [
        (1.0, 2.0, 1.0, 2.0),
        (-1.0, -3.0, -1.0, -3.0),
        (1.0, -1.0, 0.0, 0.0),
        (0.0, 5.0, 0.0, 0.0),
        (-2.0, 0.0, 0.0, 0.0),
    ],
)
def test_scalar_values(a, b, expected_min, expected_max):
    assert minmod(a, b) == expected_min
    assert maxmod(a, b) == expected_max


@pytest.mark.parametrize("unused_parameter", range(n_tests))
def test_minmod_maxmod_properties(unused_parameter):
    a = np.random.uniform(-1, 1, 50)
    b = np.random.uniform(-1, 1, 50)
    small, large = minmod(a, b), maxmod(a, b)
    same_sign = a * b > 0
    assert np.all(small[~same_sign] == 0)
    assert np.all(large[~same_sign] == 0)
    assert np.all(np.sign(small[same_sign]) == np.sign(a[same_sign]))
    assert np.all(np.abs(small) <= np.minimum(np.abs(a), np.abs(b)))
    assert np.all(np.abs(large) <= np.maximum(np.abs(a), np.abs(b)))
    assert np.all(np.abs(small) <= np.abs(large))
    np.testing.assert_array_equal(minmod(a, b), minmod(b, a))


def test_shape_mismatch():
    with pytest.raises(DimensionError):
        minmod(np.ones(3), np.ones(4))
    with pytest.raises(DimensionError):
        maxmod(np.ones((2, 3)), np.ones(3))


@pytest.mark.parametrize("unused_parameter", range(n_tests))
def test_bounds_on_monotone_profile(unused_parameter):
    """
    interior cells of an increasing profile, where both one sided slopes are positive
    """
    h = 0.1
    u = np.cumsum(np.random.uniform(0.1, 1, 30))
    up = slope_upwind(u, h)[1:-1]
    down = slope_downwind(u, h)[1:-1]
    smaller, larger = np.minimum(up, down), np.maximum(up, down)
    tol = 1e-12

    mm = limiter_minmod(u, h)[1:-1]
    assert mm == pytest.approx(smaller)

    sb = limiter_superbee(u, h)[1:-1]
    assert np.all(sb >= mm - tol)
    assert np.all(sb <= larger + tol)
    assert np.all(sb <= 2 * smaller + tol)

    mc = limiter_mc(u, h)[1:-1]
    assert np.all(mc >= smaller - tol)
    assert np.all(mc <= (up + down) / 2 + tol)
    assert np.all(mc <= 2 * smaller + tol)


@pytest.mark.parametrize("limiter", limiters)
def test_zero_slope_at_extremum(limiter):
    u = np.array([0.0, 1.0, 3.0, 1.0, 0.0])
    assert limiter(u, 1.0)[2] == 0
    assert limiter(-u, 1.0)[2] == 0


@pytest.mark.parametrize("limiter", limiters)
def test_rows_are_independent(limiter):
    rows = np.random.rand(4, 10)
    stacked = limiter(rows, 0.5)
    for j in range(rows.shape[0]):
        np.testing.assert_array_equal(stacked[j], limiter(rows[j], 0.5))


@pytest.mark.parametrize("limiter", limiters)
def test_periodic_boundary_slopes_agree(limiter):
    u = np.random.rand(12)
    u[0] = u[-1]
    slopes = limiter(u, 0.25)
    assert slopes[0] == slopes[-1]
