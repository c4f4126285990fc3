import pytest

from meeus import moonphase


def test_mean_new_example_49a():
    assert moonphase.mean_new(1977.13) == pytest.approx(2443192.94102, abs=5e-6)


def test_new_example_49a():
    assert moonphase.new(1977.13) == pytest.approx(2443192.65118, abs=5e-6)


def test_mean_last_example_49b():
    assert moonphase.mean_last(2044.04) == pytest.approx(2467636.88597, abs=5e-6)


def test_last_example_49b():
    assert moonphase.last(2044.04) == pytest.approx(2467636.49186, abs=5e-6)


@pytest.mark.parametrize("year", [1977.13, 1995.5, 2044.04, 2100.7])
@pytest.mark.parametrize(
    "true_fn, mean_fn",
    [
        (moonphase.new, moonphase.mean_new),
        (moonphase.first, moonphase.mean_first),
        (moonphase.full, moonphase.mean_full),
        (moonphase.last, moonphase.mean_last),
    ],
)
def test_true_phase_near_mean(year, true_fn, mean_fn):
    assert abs(true_fn(year) - mean_fn(year)) < 0.75


def test_consecutive_mean_new_moons_one_synodic_month_apart():
    a = moonphase.mean_new(2000.0)
    b = moonphase.mean_new(2000.0 + 1 / 12.3685)
    assert b - a == pytest.approx(29.530588861, abs=1e-6)