import math

import pytest

from meeus import moonillum
from meeus.julian import calendar_gregorian_to_jd


def _illuminated(i):
    return (1 + math.cos(i)) / 2


def test_phase_angle_eq():
    i = moonillum.phase_angle_eq(
        math.radians(134.6885),
        math.radians(13.7684),
        368410,
        math.radians(20.6579),
        math.radians(8.6964),
        149971520,
    )
    assert math.degrees(i) == pytest.approx(69.0756, abs=5e-5)


def test_phase_angle_eq2():
    i = moonillum.phase_angle_eq2(
        math.radians(134.6885),
        math.radians(13.7684),
        math.radians(20.6579),
        math.radians(8.6964),
    )
    assert _illuminated(i) == pytest.approx(0.6775, abs=5e-5)


def test_phase_angle3():
    i = moonillum.phase_angle3(calendar_gregorian_to_jd(1992, 4, 12))
    assert math.degrees(i) == pytest.approx(68.88, abs=5e-3)
    assert _illuminated(i) == pytest.approx(0.6801, abs=5e-5)


def test_phase_angle_ecl2_new_and_full():
    assert moonillum.phase_angle_ecl2(1.0, 0.0, 1.0) == pytest.approx(math.pi)
    assert moonillum.phase_angle_ecl2(1.0 + math.pi, 0.0, 1.0) == pytest.approx(
        0.0, abs=1e-7
    )


def test_phase_angle_ecl_close_to_ecl2_for_distant_sun():
    lon, lat, lon0 = math.radians(133.16), math.radians(-3.23), math.radians(22.34)
    i1 = moonillum.phase_angle_ecl(lon, lat, 368410, lon0, 1.5e8)
    i2 = moonillum.phase_angle_ecl2(lon, lat, lon0)
    assert i1 == pytest.approx(i2, abs=math.radians(0.2))
    assert i1 != i2