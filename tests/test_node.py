import math

import pytest

from meeus import node
from meeus.julian import calendar_gregorian_to_jd, jd_to_calendar


def _halley():
    return (
        17.9400782,
        0.96727426,
        math.radians(111.84644),
        calendar_gregorian_to_jd(1986, 2, 9.45891),
    )


def _parabolic():
    return math.radians(154.9103), calendar_gregorian_to_jd(1989, 8, 20.291)


def test_elliptic_ascending():
    t, r = node.elliptic_ascending(*_halley())
    y, m, d = jd_to_calendar(t)
    assert (y, m) == (1985, 11)
    assert d == pytest.approx(9.16, abs=5e-3)
    assert r == pytest.approx(1.8045, abs=5e-5)


def test_elliptic_descending():
    t, r = node.elliptic_descending(*_halley())
    y, m, d = jd_to_calendar(t)
    assert (y, m) == (1986, 3)
    assert d == pytest.approx(10.37, abs=5e-3)
    assert r == pytest.approx(0.8493, abs=5e-5)


def test_parabolic_ascending():
    arg_p, time_p = _parabolic()
    t, r = node.parabolic_ascending(1.324502, arg_p, time_p)
    y, m, d = jd_to_calendar(t)
    assert (y, m, int(d)) == (1977, 9, 17)
    assert r == pytest.approx(28.07, abs=5e-3)


def test_parabolic_descending():
    arg_p, time_p = _parabolic()
    t, r = node.parabolic_descending(1.324502, arg_p, time_p)
    y, m, d = jd_to_calendar(t)
    assert (y, m) == (1989, 9)
    assert d == pytest.approx(17.636, abs=5e-4)
    assert r == pytest.approx(1.3901, abs=5e-5)


def test_node_at_perihelion_when_arg_p_is_zero():
    t, r = node.parabolic_ascending(1.5, 0.0, 2450000.5)
    assert t == pytest.approx(2450000.5)
    assert r == pytest.approx(1.5)
    t, r = node.elliptic_ascending(2.0, 0.5, 0.0, 2450000.5)
    assert t == pytest.approx(2450000.5)
    assert r == pytest.approx(1.0)