from fractions import Fraction

import pytest
import sympy
from hypothesis import given, settings, strategies as st

from contfrac.cfrac import of
from contfrac.convergents import convergent
from contfrac.errors import InvalidEmbeddingError
from contfrac.intfract import stream
from contfrac.termination import TerminationCertificate, as_rational, decide, fract_numerator_chain, step_bound


def test_seven_thirds_bound():
    q = Fraction(7, 3)
    assert step_bound(q) == 2
    assert decide(q) == TerminationCertificate(terminates=True, step_bound=2, terminated_at=2)
    assert stream(q, 1) is not None
    assert stream(q, 2) is None


def test_integer_bound_is_one():
    assert decide(12) == TerminationCertificate(True, 1, 1)
    assert decide(0) == TerminationCertificate(True, 1, 1)


def test_numerator_chain():
    assert fract_numerator_chain(Fraction(415, 93)) == [43, 7, 1, 0]
    assert decide(Fraction(415, 93)) == TerminationCertificate(True, 44, 4)


@pytest.mark.parametrize(
    "value,expected",
    [
        (3, Fraction(3)),
        ("7/3", Fraction(7, 3)),
        (sympy.Rational(-5, 4), Fraction(-5, 4)),
    ],
)
def test_as_rational(value, expected):
    assert as_rational(value) == expected


def test_float_is_rejected():
    with pytest.raises(InvalidEmbeddingError):
        decide(0.5)
    with pytest.raises(InvalidEmbeddingError):
        decide(sympy.Float(0.5))


def test_irrational_is_rejected():
    with pytest.raises(TypeError):
        decide(sympy.sqrt(2))


rationals = st.fractions(min_value=-10**6, max_value=10**6, max_denominator=10**9)


@settings(max_examples=300, deadline=None)
@given(rationals)
def test_stream_exhausted_by_bound(q):
    cert = decide(q)
    assert cert.terminates
    assert 1 <= cert.terminated_at <= cert.step_bound
    assert stream(q, cert.step_bound) is None
    chain = fract_numerator_chain(q)
    assert chain[-1] == 0
    assert all(a > b for a, b in zip(chain, chain[1:]))


@settings(max_examples=300, deadline=None)
@given(rationals)
def test_round_trip_through_last_convergent(q):
    end = decide(q).terminated_at
    assert convergent(of(q), end - 1) == q
