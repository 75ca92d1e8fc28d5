from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
import logging
from typing import Any, List

import numpy as np
import sympy

from contfrac.errors import InvalidEmbeddingError
from contfrac.field import Field
from contfrac.intfract import IntFractPair, int_fract_stream

logger = logging.getLogger(__name__)

__all__ = [
    "TerminationCertificate",
    "as_rational",
    "step_bound",
    "decide",
    "fract_numerator_chain",
]


@dataclass(frozen=True)
class TerminationCertificate:
    """Outcome of running a rational expansion to its end.

    `terminated_at` is the first index with no stream entry; it never
    exceeds `step_bound`."""

    terminates: bool
    step_bound: int
    terminated_at: int


def as_rational(q: Any) -> Fraction:
    """Read q as an exact rational, refusing floats and non-rational reals."""
    match q:
        case bool():
            raise TypeError("booleans are not rationals")
        case float() | np.floating():
            raise InvalidEmbeddingError(
                f"float {q!r} is an approximation; pass a Fraction or an int instead"
            )
        case sympy.Basic() if q.has(sympy.Float):
            raise InvalidEmbeddingError(
                f"float {q!r} is an approximation; pass a Fraction or an int instead"
            )
        case int() | Fraction() | Decimal() | np.integer():
            return Field.Rational.coerce(q)
        case sympy.Basic():
            if q.is_rational is not True:
                raise TypeError(f"{q} is not known to be rational")
            return Field.Symbolic.to_fraction(q)
        case str():
            return Fraction(q)
    raise TypeError(f"cannot read {type(q).__name__} as a rational")


def step_bound(q: Any) -> int:
    """|numerator of fract(q)| + 1, an index at which the stream of q is exhausted."""
    q = as_rational(q)
    fr = IntFractPair.of(q, Field.Rational).fract
    return abs(fr.numerator) + 1


def decide(q: Any) -> TerminationCertificate:
    """Run the expansion of a rational to its end.

    Total: the loop never runs past `step_bound(q)`, because the numerator of
    the fractional part drops by at least one on every step that does not
    end the stream."""
    q = as_rational(q)
    bound = step_bound(q)
    s = int_fract_stream(q, Field.Rational)
    start = s.get(0)
    assert start is not None
    for n in range(bound + 1):
        pair = s.get(n)
        if pair is None:
            logger.info("expansion of %s terminated at step %d (bound %d)", q, n, bound)
            return TerminationCertificate(terminates=True, step_bound=bound, terminated_at=n)
        assert pair.fract.numerator <= start.fract.numerator - n, (
            f"numerator of step {n} did not decrease: {pair.fract}"
        )
    raise AssertionError(f"expansion of {q} did not terminate within {bound} steps")


def fract_numerator_chain(q: Any) -> List[int]:
    """Numerators of the fractional parts along the stream of q, in order.

    Strictly decreasing, ending in 0."""
    q = as_rational(q)
    return [p.fract.numerator for p in int_fract_stream(q, Field.Rational).bounded(step_bound(q))]
