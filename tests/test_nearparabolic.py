import math

import pytest

from meeus.nearparabolic import Elements, NoConvergenceError

_TIME_P = 2451545.0 + 12345.625

# q, e, t, nu (deg), r  -- p. 247
_DATA = [
    (0.921326, 1, 138.4783, 102.74426, 2.364192),
    (0.1, 0.987, 254.9, 164.50029, 4.063777),
    (0.123456, 0.99997, -30.47, 221.91190, 0.965053),
    (3.363943, 1.05731, 1237.1, 109.40598, 10.668551),
    (0.5871018, 0.9672746, 20, 52.85331, 0.729116),
    (0.5871018, 0.9672746, 0, 0, 0.5871018),
]


@pytest.mark.parametrize("q, e, t, nu, r", _DATA)
def test_anomaly_distance(q, e, t, nu, r):
    el = Elements(time_p=_TIME_P, p_dis=q, ecc=e)
    got_nu, got_r = el.anomaly_distance(_TIME_P + t)
    assert math.degrees(got_nu) == pytest.approx(nu, abs=1e-5)
    assert got_r == pytest.approx(r, abs=1e-6)


# q, e, t, nu (deg), precision -- p. 248
_CONVERGING = [
    (0.1, 0.9, 10, 126, 0),
    (0.1, 0.9, 20, 142, 0),
    (0.1, 0.987, 10, 123, 0),
    (0.1, 0.987, 20, 137, 0),
    (0.1, 0.987, 30, 143, 0),
    (0.1, 0.987, 60, 152, 0),
    (0.1, 0.987, 100, 157, 0),
    (0.1, 0.987, 200, 163, 0),
    (0.1, 0.987, 400, 167, 0),
    (0.1, 0.999, 100, 156, 0),
    (0.1, 0.999, 200, 161, 0),
    (0.1, 0.999, 500, 166, 0),
    (0.1, 0.999, 1000, 169, 0),
    (0.1, 0.999, 5000, 174, 0),
    (1, 0.99999, 100000, 172.5, 1),
    (1, 0.99999, 10000000, 178.41, 2),
    (1, 0.99999, 14000000, 178.58, 2),
    (1, 0.99999, 17000000, 178.68, 2),
]


@pytest.mark.parametrize("q, e, t, nu, p", _CONVERGING)
def test_anomaly_converges(q, e, t, nu, p):
    el = Elements(time_p=_TIME_P, p_dis=q, ecc=e)
    got_nu, _ = el.anomaly_distance(_TIME_P + t)
    assert abs(math.degrees(got_nu) - nu) <= 10.0 ** -p


@pytest.mark.parametrize(
    "q, e, t",
    [(0.1, 0.9, 30), (0.1, 0.987, 500), (1, 0.99999, 18000000)],
)
def test_anomaly_fails_to_converge(q, e, t):
    el = Elements(time_p=_TIME_P, p_dis=q, ecc=e)
    with pytest.raises(NoConvergenceError):
        el.anomaly_distance(_TIME_P + t)