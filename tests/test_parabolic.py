import math

import pytest

from meeus.julian import calendar_gregorian_to_jd
from meeus.parabolic import Elements


def test_example_34a():
    e = Elements(time_p=calendar_gregorian_to_jd(1998, 4, 14.4358), p_dis=1.487469)
    nu, r = e.anomaly_distance(calendar_gregorian_to_jd(1998, 8, 5))
    assert math.degrees(nu) == pytest.approx(66.78862, abs=5e-6)
    assert r == pytest.approx(2.133911, abs=5e-7)


def test_at_perihelion():
    e = Elements(time_p=2451545.0, p_dis=0.75)
    nu, r = e.anomaly_distance(2451545.0)
    assert nu == pytest.approx(0.0, abs=1e-12)
    assert r == pytest.approx(0.75)


@pytest.mark.parametrize("dt", [1.0, 30.0, 400.0])
def test_symmetric_about_perihelion(dt):
    e = Elements(time_p=2451545.0, p_dis=1.2)
    nu_after, r_after = e.anomaly_distance(2451545.0 + dt)
    nu_before, r_before = e.anomaly_distance(2451545.0 - dt)
    assert nu_before == pytest.approx(-nu_after)
    assert r_before == pytest.approx(r_after)
    assert r_after == pytest.approx(1.2 / math.cos(nu_after / 2) ** 2)
    assert r_after > 1.2