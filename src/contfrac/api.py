from __future__ import annotations
from fractions import Fraction
import logging
from typing import Any, Iterator, Optional, Sequence

from contfrac.cfrac import ContinuedFraction, of
from contfrac.config import resolve_max_steps
from contfrac.convergents import ConvergentEvaluator, convergent_direct
from contfrac.convergents import convergent as _convergent
from contfrac.errors import StepBudgetExceeded
from contfrac.field import Field
from contfrac.intfract import IntFractPair, int_fract_stream
from contfrac.termination import TerminationCertificate, decide

logger = logging.getLogger(__name__)

__all__ = [
    "expand",
    "continued_fraction",
    "convergent",
    "convergents_up_to",
    "is_rational_terminating",
    "from_continued_fraction",
]


def expand(
    value: Any, max_steps: Optional[int] = None, field: Optional[Field] = None, strict: bool = False
) -> Iterator[IntFractPair]:
    """Yield the integer/fractional split of value and of each inverted remainder.

    At most max_steps pairs are produced. With strict=True, running out of
    steps before the expansion ends raises StepBudgetExceeded; otherwise the
    iteration just stops."""
    budget = resolve_max_steps(max_steps)
    s = int_fract_stream(value, field)
    if strict:
        yield from s.bounded(budget)
        return
    yield from s.take(budget)
    if s.get(budget) is not None:
        logger.info("expansion of %s truncated after %d steps", value, budget)


def continued_fraction(value: Any, max_steps: Optional[int] = None, field: Optional[Field] = None) -> ContinuedFraction:
    """The simple continued fraction of value, with at most max_steps levels."""
    budget = resolve_max_steps(max_steps)
    cf = of(value, field)
    truncated = cf.terms.get(budget) is not None
    if truncated:
        logger.info("continued fraction of %s truncated after %d levels", value, budget)
    return ContinuedFraction(cf.head, cf.terms.take(budget), truncated=truncated)


def convergent(value: Any, index: int, field: Optional[Field] = None) -> Fraction:
    if index < 0:
        raise ValueError(f"index must be non-negative, got {index}")
    return _convergent(of(value, field), index)


def convergents_up_to(
    value: Any, max_steps: Optional[int] = None, field: Optional[Field] = None, strict: bool = False
) -> Iterator[Fraction]:
    """Yield convergents 0, 1, ... until the expansion ends or max_steps are produced."""
    budget = resolve_max_steps(max_steps)
    evaluator = ConvergentEvaluator(of(value, field))
    produced = []
    for c in evaluator.convergents():
        if len(produced) == budget:
            if strict:
                raise StepBudgetExceeded(budget, produced)
            logger.info("convergents of %s truncated after %d", value, budget)
            return
        produced.append(c)
        yield c


def is_rational_terminating(q: Any) -> TerminationCertificate:
    return decide(q)


def from_continued_fraction(head: int, terms: Sequence[int]) -> Fraction:
    """The exact value of [head; terms...]."""
    cf = ContinuedFraction.from_terms(head, list(terms))
    return convergent_direct(cf, len(terms))
