# pylint: disable=missing-module-docstring
import pytest

from rational import Rational
from polynomial import Polynomial
from poly_random import make_rng, random_nonzero_polynomial, random_polynomial


def P(*coeffs):
    return Polynomial.from_ints(*coeffs)


def test_empty_input_is_zero_constant():
    p = Polynomial(())
    assert len(p) == 1
    assert p.is_zero()


@pytest.mark.parametrize(
    "poly, degree",
    [
        (P(0), 0),
        (P(0, 0, 0), 0),
        (P(5), 0),
        (P(1, 2, 3), 2),
        (P(1, 2, 3, 0, 0), 2),
        (P(0, 0, 0, 1), 3),
    ],
)
def test_degree(poly, degree):
    assert poly.degree() == degree


def test_is_zero_independent_of_length():
    assert P(0).is_zero()
    assert P(0, 0, 0, 0).is_zero()
    assert not P(0, 0, 1).is_zero()


def test_leading_coefficient():
    assert P(3, 0, -2, 0).leading_coefficient() == Rational(-2)


def test_equality_ignores_trailing_zeros():
    assert P(1, 2, 0, 0) == P(1, 2)
    assert P(0, 0) == Polynomial.zero()
    assert P(1, 2) != P(2, 1)


def test_add_sub():
    assert P(1, 2, 3) + P(1, -2) == P(2, 0, 3)
    assert P(1, 2, 3) - P(1, 2, 3) == Polynomial.zero()
    assert P(0, 0, 1) - P(1) == P(-1, 0, 1)


def test_add_result_length():
    p = P(1, 2, 0, 0)
    q = P(3, 0, 0, 0, 0)
    assert len(p + q) == 2


def test_mul():
    assert P(-1, 1) * P(1, 1) == P(-1, 0, 1)
    assert P(1, 1) * P(1, 1) * P(1, 1) == P(1, 3, 3, 1)


def test_mul_result_length_uses_degrees():
    assert len(P(1, 1, 0, 0) * P(2, 0, 0)) == 2


def test_mul_by_zero():
    assert (P(1, 2, 3) * Polynomial.zero()).is_zero()
    assert (Polynomial.zero() * P(1, 2, 3)).is_zero()


def test_scalar_mul_and_neg():
    assert P(1, 2) * Rational(1, 2) == Polynomial((Rational(1, 2), Rational(1)))
    assert 3 * P(1, 2) == P(3, 6)
    assert -P(1, -2) == P(-1, 2)


def test_operations_do_not_mutate():
    p, q = P(1, 2), P(3, 4, 5)
    p + q
    p * q
    p - q
    assert p == P(1, 2)
    assert q == P(3, 4, 5)


def test_evaluate():
    assert P(-1, 0, 1).evaluate(3) == Rational(8)
    assert P(1, 1).evaluate(Rational(-1, 2)) == Rational(1, 2)


def test_monomial():
    assert Polynomial.monomial(4, 3) == P(0, 0, 0, 4)
    with pytest.raises(ValueError):
        Polynomial.monomial(1, -1)


@pytest.mark.parametrize(
    "poly, text",
    [
        (P(0), "0"),
        (P(0, 0, 0), "0"),
        (P(5), "5"),
        (P(-1), "-1"),
        (P(0, 1), "x"),
        (P(0, -2), "-2*x"),
        (P(-1, 0, 1), "x^2 - 1"),
        (P(1, -1), "-x + 1"),
        (P(1, 1, 1), "x^2 + x + 1"),
        (P(3, 0, -4, 1), "x^3 - 4*x^2 + 3"),
        (Polynomial((Rational(1, 2), 0, 3)), "3*x^2 + 1/2"),
        (Polynomial((Rational(-2, 3), Rational(-1))), "-x - 2/3"),
    ],
)
def test_to_string(poly, text):
    assert str(poly) == text


def test_to_string_variable():
    assert P(1, 0, 1).to_string("t") == "t^2 + 1"


@pytest.mark.slow
def test_degree_of_product():
    rng = make_rng(2024)
    for _ in range(200):
        f = random_nonzero_polynomial(rng, int(rng.integers(0, 8)))
        g = random_nonzero_polynomial(rng, int(rng.integers(0, 8)))
        assert (f * g).degree() == f.degree() + g.degree()


@pytest.mark.slow
def test_degree_of_sum_bound_and_commutativity():
    rng = make_rng(7)
    for _ in range(200):
        f = random_polynomial(rng, int(rng.integers(0, 8)))
        g = random_polynomial(rng, int(rng.integers(0, 8)))
        assert (f + g).degree() <= max(f.degree(), g.degree())
        assert f * g == g * f
        assert f + g == g + f


def test_scalar_from_either_side():
    assert Rational(1, 2) * P(2, 4) == P(1, 2)
    assert P(2, 4) * Rational(1, 2) == P(1, 2)


@pytest.mark.parametrize("other", [0.5, "2", None, True])
def test_mul_unsupported_operand(other):
    assert P(1, 2).__mul__(other) is NotImplemented
    assert P(1, 2).__rmul__(other) is NotImplemented
    with pytest.raises(TypeError):
        P(1, 2) * other
    with pytest.raises(TypeError):
        other * P(1, 2)
