from __future__ import annotations
from decimal import Decimal
from enum import Enum
from fractions import Fraction
import math
from typing import Any, Optional

import numpy as np
import sympy

from contfrac.config import get_config
from contfrac.errors import ContFracError, InvalidEmbeddingError


class Field(Enum):
    """Number domains the expansion can run over.

    Each member supplies the operations the stream needs: floor, the
    fractional remainder, a guarded inversion and a zero test. `Rational`
    and `Symbolic` are exact; `Float` is only good for bounded, approximate
    expansions."""

    Rational = 1
    Symbolic = 2
    Float = 3

    @staticmethod
    def of(value: Any) -> Field:
        """Return the field a Python value naturally lives in."""
        match value:
            case bool():
                raise TypeError("booleans are not field elements")
            case int() | Fraction() | Decimal():
                return Field.Rational
            case float() | np.floating():
                return Field.Float
            case np.integer():
                return Field.Rational
            case sympy.Basic() if value.has(sympy.Float):
                return Field.Float
            case sympy.Basic():
                return Field.Symbolic
        raise TypeError(f"no field for values of type {type(value).__name__}")

    def is_exact(self) -> bool:
        match self:
            case Field.Rational | Field.Symbolic:
                return True
            case Field.Float:
                return False
        assert False, "unreachable"

    def coerce(self, value: Any) -> Any:
        """Convert `value` into this field's representation."""
        if isinstance(value, bool):
            raise TypeError("booleans are not field elements")
        match self:
            case Field.Rational:
                match value:
                    case float() | np.floating():
                        raise InvalidEmbeddingError(
                            f"refusing to read float {value!r} as an exact rational"
                        )
                    case np.integer():
                        return Fraction(int(value))
                    case sympy.Basic() if value.has(sympy.Float):
                        raise InvalidEmbeddingError(
                            f"refusing to read float {value!r} as an exact rational"
                        )
                    case sympy.Basic():
                        return self._sympy_to_fraction(value)
                return Fraction(value)
            case Field.Symbolic:
                match value:
                    case float() | np.floating():
                        raise InvalidEmbeddingError(
                            f"refusing to read float {value!r} as an exact real"
                        )
                    case Fraction():
                        return sympy.Rational(value.numerator, value.denominator)
                    case np.integer():
                        return sympy.Integer(int(value))
                expr = sympy.sympify(value)
                # "0.1" sympifies to a sympy.Float, which is no more exact than 0.1
                if expr.has(sympy.Float):
                    raise InvalidEmbeddingError(f"refusing to read float {expr} as an exact real")
                if expr.free_symbols:
                    raise TypeError(f"expression {expr} has free symbols")
                if expr.is_real is False:
                    raise ValueError(f"{expr} is not a real number")
                return expr
            case Field.Float:
                if isinstance(value, sympy.Basic):
                    return float(sympy.N(value))
                return float(value)
        assert False, "unreachable"

    def embed(self, q: Fraction) -> Any:
        """The image of the rational `q` in this field."""
        match self:
            case Field.Rational:
                return Fraction(q)
            case Field.Symbolic:
                return sympy.Rational(q.numerator, q.denominator)
            case Field.Float:
                return float(q)
        assert False, "unreachable"

    def zero(self) -> Any:
        return self.embed(Fraction(0))

    def floor(self, x: Any) -> int:
        match self:
            case Field.Rational:
                return math.floor(x)
            case Field.Symbolic:
                result = sympy.floor(x)
                if not isinstance(result, sympy.Integer):
                    raise ContFracError(f"could not decide the floor of {x}")
                return int(result)
            case Field.Float:
                if not np.isfinite(x):
                    raise ContFracError(f"no floor for non-finite float {x!r}")
                return int(np.floor(x))
        assert False, "unreachable"

    def sub(self, a: Any, b: Any) -> Any:
        return a - b

    def fract(self, x: Any, whole: Optional[int] = None) -> Any:
        """x - floor(x); pass `whole` when the floor is already known."""
        if whole is None:
            whole = self.floor(x)
        return self.sub(x, whole)

    def is_zero(self, x: Any) -> bool:
        match self:
            case Field.Rational:
                return x == 0
            case Field.Symbolic:
                zero = x.is_zero
                if zero is None:
                    zero = x.equals(0)
                if zero is None:
                    raise ContFracError(f"could not decide whether {x} is zero")
                return bool(zero)
            case Field.Float:
                return bool(x == 0.0)
        assert False, "unreachable"

    def invert(self, x: Any) -> Any:
        if self.is_zero(x):
            raise ZeroDivisionError("cannot invert zero")
        match self:
            case Field.Rational:
                return 1 / x
            case Field.Symbolic:
                inv = 1 / x
                if get_config().symbolic_simplify:
                    inv = sympy.expand(sympy.radsimp(inv))
                return inv
            case Field.Float:
                inv = 1.0 / x
                # subnormal remainders overflow on inversion
                if not np.isfinite(inv):
                    raise ContFracError(f"1/{x!r} overflows the float range")
                return inv
        assert False, "unreachable"

    def is_known_rational(self, x: Any) -> Optional[bool]:
        """True/False when membership in the rationals is known, None otherwise."""
        match self:
            case Field.Rational:
                return True
            case Field.Symbolic:
                return x.is_rational
            case Field.Float:
                return None
        assert False, "unreachable"

    def to_fraction(self, x: Any) -> Fraction:
        """Read a rational element of this field back as a `Fraction`."""
        match self:
            case Field.Rational:
                return Fraction(x)
            case Field.Symbolic:
                return self._sympy_to_fraction(x)
            case Field.Float:
                raise InvalidEmbeddingError(f"float {x!r} is not an exact rational")
        assert False, "unreachable"

    @staticmethod
    def _sympy_to_fraction(x: Any) -> Fraction:
        if not isinstance(x, sympy.Rational):
            x = sympy.simplify(x) if x.is_rational else x
        if not isinstance(x, sympy.Rational):
            raise TypeError(f"{x} is not a rational number")
        return Fraction(int(x.p), int(x.q))
