import math

import pytest

from meeus.iterate import IterationError, binary_root, decimal_places, full_precision


def better_sqrt(number):
    return lambda n: (n + number / n) / 2


def test_decimal_places():
    n = decimal_places(better_sqrt(159), 12.0, 8, 20)
    assert f"{n:.8f}" == "12.60952021"


def test_decimal_places_too_few_iterations():
    with pytest.raises(IterationError, match="Maximum iterations reached"):
        decimal_places(better_sqrt(159), 12.0, 8, 1)


def test_full_precision():
    x = full_precision(lambda x: (8 - x**5) / 17, 0.0, 20)
    assert f"{x:.9f}" == "0.469249878"
    assert x == pytest.approx(0.4692498784547387, abs=1e-15)


def _diverging(x):
    try:
        p = x**5
    except OverflowError:
        p = math.copysign(math.inf, x)
    return (8 - p) / 3


def test_full_precision_diverging():
    with pytest.raises(IterationError, match="Maximum iterations reached"):
        full_precision(_diverging, 0.0, 20)


def test_full_precision_converging():
    x = full_precision(lambda x: (8 - 3 * x) ** 0.2, 0.0, 30)
    assert f"{x:.9f}" == "1.321785627"
    assert x == pytest.approx(1.321785627117658, abs=1e-14)


def test_binary_root():
    x = binary_root(lambda x: x**5 + 17 * x - 8, 0, 1)
    assert x == pytest.approx(0.46924987845473876, abs=1e-15)


def test_binary_root_exact_zero():
    assert binary_root(lambda x: x - 0.5, 0, 1) == 0.5