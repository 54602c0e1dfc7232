import dataclasses
import pytest
import numpy as np
from rea_advection.errors import ConfigurationError
from rea_advection.limiters import limiter_mc
from rea_advection.schemes import (
    Limiter,
    LimiterKind,
    NoReconstruction,
    Slope,
    SlopeKind,
    compute_slopes,
    select_scheme,
)
from rea_advection.slopes import slope_centered, slope_upwind


def test_default_is_upwind():
    scheme = select_scheme()
    assert scheme == NoReconstruction()
    assert scheme.title == "Upwind scheme: no slope nor limiter"


@pytest.mark.parametrize(
    "name, kind",
    [
        ("upwind", SlopeKind.UPWIND),
        ("Beam-Warming", SlopeKind.UPWIND),
        ("downwind", SlopeKind.DOWNWIND),
        ("lax-wendroff", SlopeKind.DOWNWIND),
        ("CENTERED", SlopeKind.CENTERED),
        ("fromm", SlopeKind.CENTERED),
        (SlopeKind.CENTERED, SlopeKind.CENTERED),
    ],
)
def test_slope_names(name, kind):
    assert select_scheme(slope=name) == Slope(kind)


@pytest.mark.parametrize(
    "name, kind",
    [
        ("minmod", LimiterKind.MINMOD),
        ("superbee", LimiterKind.SUPERBEE),
        ("mc", LimiterKind.MC),
        ("moncen", LimiterKind.MC),
        ("Monitored Center", LimiterKind.MC),
        (LimiterKind.SUPERBEE, LimiterKind.SUPERBEE),
    ],
)
def test_limiter_names(name, kind):
    assert select_scheme(limiter=name) == Limiter(kind)


def test_limiter_takes_precedence(capsys):
    scheme = select_scheme(slope="centered", limiter="superbee")
    assert scheme == Limiter(LimiterKind.SUPERBEE)
    assert "overrides" in capsys.readouterr().out


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(slope="quadratic"),
        dict(limiter="van leer"),
        dict(slope=1),
        dict(limiter=LimiterKind.MC, slope="sideways"),
        dict(slope=LimiterKind.MINMOD),
    ],
)
def test_invalid_names(kwargs):
    with pytest.raises(ConfigurationError):
        select_scheme(**kwargs)


def test_titles():
    assert Slope("upwind").title == "Beam-Warming scheme: upwind slope"
    assert Slope("downwind").title == "Lax-Wendroff scheme: downwind slope"
    assert Slope("centered").title == "Fromm scheme: centered slope"
    assert Limiter("minmod").title == "Minmod limiter"
    assert Limiter("superbee").title == "Superbee limiter"
    assert Limiter("mc").title == "Monitored center limiter"


def test_schemes_are_frozen():
    scheme = Slope("upwind")
    with pytest.raises(dataclasses.FrozenInstanceError):
        scheme.kind = SlopeKind.DOWNWIND


def test_compute_slopes_dispatch():
    u = np.random.rand(3, 16)
    assert np.all(compute_slopes(NoReconstruction(), u, 0.1) == 0)
    np.testing.assert_array_equal(
        compute_slopes(Slope("upwind"), u, 0.1), slope_upwind(u, 0.1)
    )
    np.testing.assert_array_equal(
        compute_slopes(Slope("fromm"), u, 0.1), slope_centered(u, 0.1)
    )
    np.testing.assert_array_equal(
        compute_slopes(Limiter("mc"), u, 0.1), limiter_mc(u, 0.1)
    )
    with pytest.raises(ConfigurationError):
        compute_slopes("superbee", u, 0.1)
