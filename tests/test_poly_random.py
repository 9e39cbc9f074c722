# pylint: disable=missing-module-docstring
import pytest

from rational import Rational
from poly_random import make_rng, random_nonzero_polynomial, random_polynomial, run_trials


def test_seeded_generators_reproduce():
    a = [random_polynomial(make_rng(42), 6) for _ in range(3)]
    b = [random_polynomial(make_rng(42), 6) for _ in range(3)]
    assert a == b


def test_coefficients_in_range_and_integral():
    rng = make_rng(1)
    for _ in range(50):
        p = random_polynomial(rng, 4, low=-2, high=3)
        assert len(p) == 5
        for c in p:
            assert c.is_int()
            assert Rational(-2) <= c <= Rational(3)


def test_random_nonzero():
    rng = make_rng(3)
    for _ in range(50):
        assert not random_nonzero_polynomial(rng, 0, low=0, high=1).is_zero()


@pytest.mark.parametrize("degree, low, high", [(-1, -5, 5), (2, 3, 1)])
def test_random_polynomial_bad_arguments(degree, low, high):
    with pytest.raises(ValueError):
        random_polynomial(make_rng(0), degree, low, high)


def test_random_nonzero_rejects_zero_range():
    with pytest.raises(ValueError):
        random_nonzero_polynomial(make_rng(0), 3, low=0, high=0)


def test_run_trials():
    trials = list(run_trials(make_rng(8), 10))
    assert [t.index for t in trials] == list(range(1, 11))
    for t in trials:
        assert t.verified
        assert not t.g.is_zero()
        assert t.elapsed >= 0
        assert t.result.s * t.f + t.result.t * t.g == t.result.gcd
        assert len(t.f) <= 6 and len(t.g) <= 6


def test_run_trials_degree_bounds():
    with pytest.raises(ValueError):
        list(run_trials(make_rng(0), 1, min_degree=4, max_degree=2))
    for t in run_trials(make_rng(0), 5, min_degree=3, max_degree=3):
        assert len(t.f) == 4
        assert len(t.g) == 4
