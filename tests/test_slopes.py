import pytest
import numpy as np
from rea_advection.errors import DimensionError
from rea_advection.slopes import slope_centered, slope_downwind, slope_upwind

u = np.array([1.0, 2.0, 4.0, 7.0])


@pytest.mark.parametrize(
    "slope, expected",
    [
        (slope_upwind, [3.0, 1.0, 2.0, 3.0]),
        (slope_downwind, [1.0, 2.0, 3.0, 1.0]),
        (slope_centered, [3.0, 1.5, 2.5, 3.0]),
    ],
)
def test_unit_mesh(slope, expected):
    assert slope(u, 1.0) == pytest.approx(expected)


def test_mesh_size_scaling():
    assert slope_upwind(u, 2.0) == pytest.approx([1.5, 0.5, 1.0, 1.5])
    assert slope_downwind(u, 2.0) == pytest.approx([0.5, 1.0, 1.5, 0.5])


def test_centered_boundary_difference():
    """
    the last cell uses an undivided one sided difference unless normalized
    """
    assert slope_centered(u, 2.0) == pytest.approx([3.0, 0.75, 1.25, 3.0])
    assert slope_centered(u, 2.0, normalize_boundary=True) == pytest.approx(
        [1.5, 0.75, 1.25, 1.5]
    )


@pytest.mark.parametrize("slope", [slope_upwind, slope_downwind, slope_centered])
def test_rows_are_independent(slope):
    rows = np.random.rand(5, 12)
    stacked = slope(rows, 0.1)
    for j in range(rows.shape[0]):
        np.testing.assert_array_equal(stacked[j], slope(rows[j], 0.1))


@pytest.mark.parametrize("slope", [slope_upwind, slope_downwind, slope_centered])
def test_constant_state(slope):
    assert np.all(slope(np.full(10, 3.0), 0.5) == 0)


@pytest.mark.parametrize("slope", [slope_upwind, slope_downwind, slope_centered])
def test_input_is_not_modified(slope):
    v = np.random.rand(10)
    v_copy = v.copy()
    slope(v, 0.1)
    np.testing.assert_array_equal(v, v_copy)


@pytest.mark.parametrize("slope", [slope_upwind, slope_downwind, slope_centered])
@pytest.mark.parametrize("bad_input", [np.array(1.0), np.array([1.0])])
def test_too_few_cells(slope, bad_input):
    with pytest.raises(DimensionError):
        slope(bad_input, 1.0)
