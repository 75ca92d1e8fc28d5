from __future__ import annotations
from fractions import Fraction
import logging
from typing import Any, Optional, Tuple

from contfrac.cfrac import ContinuedFraction, of
from contfrac.config import resolve_max_steps
from contfrac.convergents import convergent
from contfrac.errors import InvalidEmbeddingError, StepBudgetExceeded
from contfrac.field import Field
from contfrac.intfract import IntFractPair, int_fract_stream
from contfrac.termination import as_rational, decide, step_bound

logger = logging.getLogger(__name__)

__all__ = [
    "check_embedding",
    "embed",
    "embed_pair",
    "stream_coincides",
    "of_coincides",
    "rational_witness",
    "terminates_iff_rational",
]


def check_embedding(field: Field) -> None:
    """Reject fields whose floor and arithmetic are not exact."""
    if not field.is_exact():
        raise InvalidEmbeddingError(f"{field.name} does not embed the rationals exactly")


def embed(q: Any, field: Field) -> Any:
    check_embedding(field)
    return field.embed(as_rational(q))


def embed_pair(pair: IntFractPair[Fraction], field: Field) -> IntFractPair:
    return pair.map_fract(lambda fr: embed(fr, field))


def stream_coincides(q: Any, field: Field) -> bool:
    """Compare the stream of q with the stream of its image in `field`, entry by entry.

    The rational stream ends by `step_bound(q)`, so the comparison covers
    both streams up to and including the index where they stop."""
    q = as_rational(q)
    source = int_fract_stream(q, Field.Rational)
    target = int_fract_stream(embed(q, field), field)
    for n in range(step_bound(q) + 1):
        expected = source.get(n)
        actual = target.get(n)
        if expected is None or actual is None:
            if expected is not actual:
                logger.info("streams of %s diverge at %d: %s vs %s", q, n, expected, actual)
                return False
            return True
        if embed_pair(expected, field) != actual:
            logger.info("streams of %s differ at %d: %s vs %s", q, n, expected, actual)
            return False
    return True


def of_coincides(q: Any, field: Field) -> bool:
    """Same head and levels for the continued fraction of q and of its image."""
    q = as_rational(q)
    return of(q, Field.Rational).agrees_with(of(embed(q, field), field), step_bound(q))


def _search_witness(v: Any, field: Field, budget: int) -> Tuple[Optional[Fraction], ContinuedFraction]:
    cf = of(v, field)
    end = cf.terminates_within(budget)
    if end is None:
        logger.info("no termination for %s within %d steps", v, budget)
        return None, cf
    q = convergent(cf, end)
    assert field.is_zero(field.sub(v, field.embed(q))), f"convergent {q} does not reproduce {v}"
    return q, cf


def rational_witness(v: Any, field: Optional[Field] = None, max_steps: Optional[int] = None) -> Optional[Fraction]:
    """A rational equal to v, read off the convergent where the expansion stops.

    Returns None when the expansion is still going after max_steps levels."""
    if field is None:
        field = Field.of(v)
    check_embedding(field)
    q, _ = _search_witness(field.coerce(v), field, resolve_max_steps(max_steps))
    return q


def terminates_iff_rational(v: Any, field: Optional[Field] = None, max_steps: Optional[int] = None) -> bool:
    """Whether the expansion of v is finite, which happens exactly when v is rational.

    Values the field already knows to be rational are decided without a
    budget, through their rational expansion. Otherwise the expansion runs
    for at most max_steps levels; if it has not stopped by then and the field
    cannot tell whether v is rational, StepBudgetExceeded is raised."""
    if field is None:
        field = Field.of(v)
    check_embedding(field)
    v = field.coerce(v)
    known = field.is_known_rational(v)
    if known:
        q = field.to_fraction(v)
        cert = decide(q)
        assert stream_coincides(q, field), f"expansions of {q} differ in {field.name}"
        return cert.terminates
    budget = resolve_max_steps(max_steps)
    q, cf = _search_witness(v, field, budget)
    if q is not None:
        return True
    if known is False:
        return False
    # the search already pulled these levels, so take() only reads the cache
    raise StepBudgetExceeded(budget, cf.as_list(budget))
