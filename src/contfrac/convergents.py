from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from functools import reduce
import logging
from typing import Any, Generic, Iterator, Optional, TypeVar

import numpy as np

from contfrac.cfrac import GenContFract, Pair

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = [
    "Continuants",
    "next_continuants",
    "continuants_aux",
    "continuants",
    "numerator",
    "denominator",
    "convergent",
    "convergent_direct",
    "continuants_matrix",
    "determinant",
    "ConvergentEvaluator",
]


@dataclass(frozen=True)
class Continuants(Generic[T]):
    """Numerator a and denominator b of a convergent, before dividing."""

    a: T
    b: T
    __match_args__ = ("a", "b")


def _divide(a: Any, b: Any) -> Any:
    if isinstance(a, (int, Fraction)) and isinstance(b, (int, Fraction)):
        return Fraction(a) / b
    return a / b


def next_continuants(term: Pair, ppred: Continuants, pred: Continuants) -> Continuants:
    """The Wallis-Euler step: X_n = b * X_{n-1} + a * X_{n-2} for X in (A, B)."""
    return Continuants(
        term.b * pred.a + term.a * ppred.a,
        term.b * pred.b + term.a * ppred.b,
    )


def continuants_aux(gcf: GenContFract, n: int) -> Continuants:
    """(1, 0) at 0, (head, 1) at 1, then one recurrence step per level.

    Past the last level the value no longer changes."""
    if n < 0:
        raise ValueError(f"index must be non-negative, got {n}")
    ppred, pred = Continuants(1, 0), Continuants(gcf.head, 1)
    if n == 0:
        return ppred
    for i in range(n - 1):
        term = gcf.terms.get(i)
        if term is None:
            break
        ppred, pred = pred, next_continuants(term, ppred, pred)
    return pred


def continuants(gcf: GenContFract, n: int) -> Continuants:
    return continuants_aux(gcf, n + 1)


def numerator(gcf: GenContFract, n: int) -> Any:
    return continuants(gcf, n).a


def denominator(gcf: GenContFract, n: int) -> Any:
    return continuants(gcf, n).b


def convergent(gcf: GenContFract, n: int) -> Any:
    """The n-th convergent A_n / B_n; exact when the levels are rational."""
    c = continuants(gcf, n)
    return _divide(c.a, c.b)


def convergent_direct(gcf: GenContFract, n: int) -> Any:
    """The n-th convergent evaluated from the innermost level outwards.

    Agrees with `convergent` whenever no intermediate denominator vanishes,
    which is the case for every simple continued fraction."""
    acc: Any = 0
    for p in reversed(gcf.terms.take(n)):
        acc = _divide(p.a, p.b + acc)
    return _divide(gcf.head, 1) + acc


def continuants_matrix(gcf: GenContFract, n: int) -> Continuants:
    """`continuants(gcf, n)` as a product of 2x2 matrices.

    [[A_n, A_{n-1}], [B_n, B_{n-1}]] = [[h, 1], [1, 0]] @ prod [[b_k, 1], [a_k, 0]]
    The arrays hold Python objects so integers never overflow."""
    start = np.array([[gcf.head, 1], [1, 0]], dtype=object)
    steps = [np.array([[p.b, 1], [p.a, 0]], dtype=object) for p in gcf.terms.take(n)]
    m = reduce(np.matmul, steps, start)
    return Continuants(m[0, 0], m[1, 0])


def determinant(gcf: GenContFract, n: int) -> Any:
    """A_n * B_{n-1} - A_{n-1} * B_n.

    For a simple continued fraction that has not terminated before level n
    this is (-1)^(n+1), so consecutive convergents are in lowest terms."""
    cur = continuants_aux(gcf, n + 1)
    prev = continuants_aux(gcf, n)
    return cur.a * prev.b - prev.a * cur.b


class ConvergentEvaluator(Generic[T]):
    """Walks the convergents of a continued fraction one at a time.

    Only the last two continuant pairs are kept, so each `advance` costs one
    recurrence step no matter how far along the walk is."""

    gcf: GenContFract[T]
    index: int

    def __init__(self, gcf: GenContFract[T]) -> None:
        self.gcf = gcf
        self.index = -1
        self._ppred: Continuants = Continuants(1, 0)
        self._pred: Continuants = Continuants(gcf.head, 1)

    @property
    def continuants(self) -> Optional[Continuants]:
        return None if self.index < 0 else self._pred

    @property
    def current(self) -> Any:
        if self.index < 0:
            return None
        return _divide(self._pred.a, self._pred.b)

    @property
    def terminated(self) -> bool:
        """True once the current convergent is the value of the whole fraction."""
        return self.index >= 0 and self.gcf.terminated_at(self.index)

    def advance(self) -> Any:
        """Move to the next convergent and return it.

        After the last level the convergent stays the same."""
        if self.index >= 0:
            term = self.gcf.terms.get(self.index)
            if term is not None:
                self._ppred, self._pred = self._pred, next_continuants(term, self._ppred, self._pred)
        self.index += 1
        logger.debug("convergent %d: %s/%s", self.index, self._pred.a, self._pred.b)
        return self.current

    def convergents(self) -> Iterator[Any]:
        """Yield the remaining convergents, stopping after the final one."""
        while True:
            value = self.advance()
            yield value
            if self.terminated:
                return
