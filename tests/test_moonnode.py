import math

import pytest

from meeus.julian import jd_to_calendar
from meeus.moonnode import ascending, descending
from meeus.moonposition import position


def test_ascending_example_51a():
    jd = ascending(1987.37)
    assert jd == pytest.approx(2446938.76803, abs=5e-6)


def test_ascending_example_51a_calendar():
    y, m, d = jd_to_calendar(ascending(1987.37))
    assert (y, m, int(d)) == (1987, 5, 23)
    hours = (d - int(d)) * 24
    assert hours == pytest.approx(6 + 25 / 60 + 58 / 3600, abs=1 / 3600)


def test_descending_half_draconic_month_from_ascending():
    diff = abs(descending(1987.37) - ascending(1987.37))
    assert 12.5 < diff < 14.7


def test_ascending_period():
    step = 27.2122 / 365.25
    diff = ascending(1987.37 + step) - ascending(1987.37)
    assert diff == pytest.approx(27.21, abs=0.5)


@pytest.mark.parametrize("event", [ascending, descending])
def test_latitude_near_zero_at_node(event):
    jd = event(1987.37)
    _, lat, _ = position(jd)
    assert abs(math.degrees(lat)) < 0.1


def test_latitude_direction_at_nodes():
    ja = ascending(1987.37)
    assert position(ja + 0.2)[1] > position(ja - 0.2)[1]
    jd = descending(1987.37)
    assert position(jd + 0.2)[1] < position(jd - 0.2)[1]