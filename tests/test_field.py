from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest
import sympy

from contfrac.errors import ContFracError, InvalidEmbeddingError
from contfrac.field import Field


@pytest.mark.parametrize(
    "value,field",
    [
        (3, Field.Rational),
        (Fraction(1, 2), Field.Rational),
        (Decimal("1.5"), Field.Rational),
        (np.int64(4), Field.Rational),
        (0.5, Field.Float),
        (np.float64(0.5), Field.Float),
        (sympy.sqrt(2), Field.Symbolic),
    ],
)
def test_of(value, field):
    assert Field.of(value) is field


def test_of_rejects_bool_and_strings():
    with pytest.raises(TypeError):
        Field.of(True)
    with pytest.raises(TypeError):
        Field.of("7/3")


@pytest.mark.parametrize("field", [Field.Rational, Field.Symbolic, Field.Float])
def test_floor_and_fract(field):
    x = field.coerce(Fraction(-7, 4))
    assert field.floor(x) == -2
    assert field.fract(x) == field.embed(Fraction(1, 4))


def test_invert_guards_zero():
    for field in Field:
        with pytest.raises(ZeroDivisionError):
            field.invert(field.zero())


def test_symbolic_invert_rationalizes():
    assert Field.Symbolic.invert(sympy.sqrt(2) - 1) == 1 + sympy.sqrt(2)


def test_exactness():
    assert Field.Rational.is_exact()
    assert Field.Symbolic.is_exact()
    assert not Field.Float.is_exact()


def test_coerce_float_into_exact_field():
    with pytest.raises(InvalidEmbeddingError):
        Field.Rational.coerce(0.1)
    with pytest.raises(InvalidEmbeddingError):
        Field.Symbolic.coerce(0.1)


def test_symbolic_coerce_checks():
    with pytest.raises(TypeError):
        Field.Symbolic.coerce(sympy.Symbol("x"))
    with pytest.raises(ValueError):
        Field.Symbolic.coerce(sympy.I)


def test_to_fraction():
    assert Field.Symbolic.to_fraction(sympy.Rational(3, 8)) == Fraction(3, 8)
    with pytest.raises(TypeError):
        Field.Symbolic.to_fraction(sympy.sqrt(2))
    with pytest.raises(InvalidEmbeddingError):
        Field.Float.to_fraction(0.5)


def test_sympy_floats_are_inexact():
    x = sympy.Float(0.1)
    assert Field.of(x) is Field.Float
    assert Field.of(sympy.sqrt(2) * x) is Field.Float
    with pytest.raises(InvalidEmbeddingError):
        Field.Symbolic.coerce(x)
    with pytest.raises(InvalidEmbeddingError):
        Field.Symbolic.coerce("0.1")
    with pytest.raises(InvalidEmbeddingError):
        Field.Rational.coerce(x)
    assert Field.Symbolic.coerce("1/10") == sympy.Rational(1, 10)


def test_float_overflow_is_reported():
    with pytest.raises(ContFracError):
        Field.Float.invert(5e-324)
    with pytest.raises(ContFracError):
        Field.Float.floor(float("inf"))
    with pytest.raises(ContFracError):
        Field.Float.floor(float("nan"))
