import math

import pytest

from meeus.julian import calendar_gregorian_to_jd
from meeus.nutation import (
    approx_nutation,
    mean_obliquity,
    mean_obliquity_laskar,
    nutation,
    nutation_in_ra,
)

SEC = math.pi / 180 / 3600


def _sec(rad):
    return rad / SEC


def test_nutation_example_22a():
    jd = calendar_gregorian_to_jd(1987, 4, 10)
    dpsi, deps = nutation(jd)
    assert _sec(dpsi) == pytest.approx(-3.788, abs=0.0005)
    assert _sec(deps) == pytest.approx(9.443, abs=0.0005)


def test_obliquity_example_22a():
    jd = calendar_gregorian_to_jd(1987, 4, 10)
    _, deps = nutation(jd)
    eps0 = mean_obliquity(jd)
    assert _sec(eps0) == pytest.approx(23 * 3600 + 26 * 60 + 27.407, abs=0.0005)
    assert _sec(eps0 + deps) == pytest.approx(23 * 3600 + 26 * 60 + 36.850, abs=0.0005)


def test_approx_nutation():
    jd = calendar_gregorian_to_jd(1987, 4, 10)
    dpsi, deps = approx_nutation(jd)
    assert abs(_sec(dpsi) + 3.788) <= 0.5
    assert abs(_sec(deps) - 9.443) <= 0.1


@pytest.mark.parametrize("year", [1000, 2000, 3000])
def test_iau_vs_laskar_near(year):
    jd = calendar_gregorian_to_jd(year, 0, 0)
    assert abs(_sec(mean_obliquity(jd) - mean_obliquity_laskar(jd))) <= 1


@pytest.mark.parametrize("year", [0, 4000])
def test_iau_vs_laskar_far(year):
    jd = calendar_gregorian_to_jd(year, 0, 0)
    assert abs(_sec(mean_obliquity(jd) - mean_obliquity_laskar(jd))) <= 10


def test_mean_obliquity_at_j2000():
    assert _sec(mean_obliquity(2451545.0)) == pytest.approx(84381.448, abs=1e-6)
    assert _sec(mean_obliquity_laskar(2451545.0)) == pytest.approx(84381.448, abs=1e-6)


def test_nutation_in_ra_consistent():
    jd = calendar_gregorian_to_jd(1987, 4, 10)
    dpsi, deps = nutation(jd)
    got = nutation_in_ra(jd)
    assert got == pytest.approx(dpsi * math.cos(mean_obliquity(jd) + deps))
    assert _sec(got) == pytest.approx(-3.788 * math.cos(math.radians(23.44)), abs=0.01)