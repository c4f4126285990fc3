import pytest

from meeus.interp import (
    ExtremumOutsideError,
    InterpolationError,
    Len3,
    Len5,
    NoExtremumError,
    OutOfRangeError,
    horner,
    lagrange,
    lagrange_poly,
    len4_half,
)


def sexa(neg, d, m, s):
    v = d + m / 60 + s / 3600
    return -v if neg else v


def _len3_3a():
    return Len3(7, 9, [0.884226, 0.877366, 0.870531])


def test_len3_interpolate_n():
    h = sexa(False, 4, 21, 0)
    assert h == pytest.approx(4.35)
    assert _len3_3a().interpolate_n(h / 24) == pytest.approx(0.876125, abs=5e-7)


def test_len3_interpolate_x():
    x = 8 + (4 + 21 / 60) / 24
    assert _len3_3a().interpolate_x(x) == pytest.approx(0.876125, abs=5e-7)


def test_len3_extremum():
    d3 = Len3(12, 20, [1.3814294, 1.3812213, 1.3812453])
    x, y = d3.extremum()
    assert y == pytest.approx(1.3812030, abs=5e-8)
    assert x == pytest.approx(17.5864, abs=5e-5)


def test_len3_zero():
    y = [sexa(True, 0, 28, 13.4), sexa(False, 0, 6, 46.3), sexa(False, 0, 38, 23.2)]
    x = Len3(26, 28, y).zero(False)
    assert x == pytest.approx(26.79873, abs=5e-6)
    minutes = (x - 26) * 24 * 60
    assert int(minutes // 60) == 19
    assert int(minutes % 60) == 10


def test_len3_zero_strong():
    x = Len3(-1, 1, [-2, 3, 2]).zero(True)
    assert x == pytest.approx(-0.720759220056, abs=5e-13)


def test_len5_interpolate_x():
    y = [
        sexa(False, 0, 54, 36.125),
        sexa(False, 0, 54, 24.606),
        sexa(False, 0, 54, 15.486),
        sexa(False, 0, 54, 8.694),
        sexa(False, 0, 54, 4.133),
    ]
    d5 = Len5(27, 29, y)
    x = 28 + (3 + 20 / 60) / 24
    assert d5.interpolate_x(x) * 3600 == pytest.approx(54 * 60 + 13.369, abs=5e-4)


def test_len5_zero_and_compare_with_len3():
    y = [
        sexa(True, 1, 11, 21.23),
        sexa(True, 0, 28, 12.31),
        sexa(False, 0, 16, 7.02),
        sexa(False, 1, 1, 0.13),
        sexa(False, 1, 45, 46.33),
    ]
    z = Len5(25, 29, y).zero(False)
    assert z == pytest.approx(26.638587, abs=5e-7)
    z3 = Len3(26, 28, y[1:4]).zero(False)
    dz = z - z3
    assert dz == pytest.approx(0.000753, abs=5e-7)
    assert round(dz * 24 * 60, 1) == 1.1


def test_len4_half():
    half = len4_half(
        [
            sexa(False, 10, 18, 48.732),
            sexa(False, 10, 23, 22.835),
            sexa(False, 10, 27, 57.247),
            sexa(False, 10, 32, 31.983),
        ]
    )
    assert half * 3600 == pytest.approx(10 * 3600 + 25 * 60 + 40.001, abs=5e-4)


LAGRANGE_TABLE = [
    (29.43, 0.4913598528),
    (30.97, 0.5145891926),
    (27.69, 0.4646875083),
    (28.11, 0.4711658342),
    (31.58, 0.5236885653),
    (33.05, 0.5453707057),
]


@pytest.mark.parametrize(
    "x, expected",
    [(30, 0.5000000000), (0, 0.0000512249), (90, 0.9999648100)],
)
def test_lagrange(x, expected):
    assert lagrange(x, LAGRANGE_TABLE) == pytest.approx(expected, abs=5e-11)


def test_lagrange_poly():
    p = lagrange_poly([(1, -6), (3, 6), (4, 9), (6, 15)])
    assert [round(c * 5) for c in p] == [-87, 69, -13, 1]


def test_lagrange_poly_reproduces_table():
    table = [(1, -6), (3, 6), (4, 9), (6, 15)]
    p = lagrange_poly(table)
    for x, y in table:
        assert horner(x, *p) == pytest.approx(y)


def test_horner():
    assert horner(2, 1, 2, 3) == 17
    assert horner(5) == 0


def test_len3_wrong_length():
    with pytest.raises(InterpolationError):
        Len3(0, 1, [1, 2])


def test_len3_no_x_range():
    with pytest.raises(InterpolationError):
        Len3(1, 1, [1, 2, 3])


def test_len5_wrong_length():
    with pytest.raises(InterpolationError):
        Len5(0, 1, [1, 2, 3])


def test_len4_half_wrong_length():
    with pytest.raises(InterpolationError):
        len4_half([1, 2, 3])


def test_len3_strict_out_of_range():
    d3 = _len3_3a()
    with pytest.raises(OutOfRangeError, match="Argument x"):
        d3.interpolate_x_strict(10)
    with pytest.raises(OutOfRangeError, match="factor n"):
        d3.interpolate_n_strict(1.5)
    assert d3.interpolate_x_strict(9) == pytest.approx(0.870531)


def test_len5_strict_out_of_range():
    d5 = Len5(0, 4, [0, 1, 4, 9, 16])
    with pytest.raises(OutOfRangeError):
        d5.interpolate_x_strict(4)
    assert d5.interpolate_x_strict(2.5) == pytest.approx(6.25)


def test_len3_no_extremum():
    with pytest.raises(NoExtremumError):
        Len3(0, 2, [1, 2, 3]).extremum()


def test_len3_extremum_outside():
    with pytest.raises(ExtremumOutsideError):
        Len3(0, 2, [1, 2, 3.5]).extremum()


def test_len3_for_interpolate_x():
    y = [float(x * x) for x in range(11)]
    d3 = Len3.for_interpolate_x(7.3, 0, 10, y)
    assert (d3.x1, d3.x3) == (6, 8)
    assert d3.interpolate_x(7.3) == pytest.approx(53.29)


def test_len3_for_interpolate_x_clamps_to_end():
    y = [float(x * x) for x in range(11)]
    d3 = Len3.for_interpolate_x(10.0, 0, 10, y)
    assert (d3.x1, d3.x3) == (8, 10)
    assert d3.y == (64.0, 81.0, 100.0)