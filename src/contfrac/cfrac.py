from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Any, Callable, Generic, Iterable, List, Optional, Sequence, TypeVar

import numpy as np

from contfrac.field import Field
from contfrac.intfract import seq1
from contfrac.sequence import SealedSeq

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

__all__ = ["Pair", "GenContFract", "ContinuedFraction", "of"]


@dataclass(frozen=True)
class Pair(Generic[T]):
    """One level a/(b + ...) of a continued fraction: partial numerator a, partial denominator b."""

    a: T
    b: T
    __match_args__ = ("a", "b")

    def map(self, f: Callable[[T], U]) -> Pair[U]:
        return Pair(f(self.a), f(self.b))

    def __repr__(self) -> str:
        return f"Pair({self.a}, {self.b})"


class GenContFract(Generic[T]):
    """h + a0/(b0 + a1/(b1 + ...)) with a lazy, possibly infinite list of levels."""

    head: T
    terms: SealedSeq[Pair[T]]
    # Set when the levels were cut off by a step budget rather than ending.
    truncated: bool

    def __init__(
        self, head: T, terms: SealedSeq[Pair[T]] | Iterable[Pair[T]], truncated: bool = False
    ) -> None:
        self.head = head
        self.terms = terms if isinstance(terms, SealedSeq) else SealedSeq(terms)
        self.truncated = truncated

    @classmethod
    def from_terms(cls, head: T, partial_denominators: Sequence[T]) -> GenContFract[T]:
        """A finite fraction with every partial numerator equal to 1."""
        return cls(head, [Pair(1, b) for b in partial_denominators])

    def partial_numerators(self) -> SealedSeq[T]:
        return self.terms.map(lambda p: p.a)

    def partial_denominators(self) -> SealedSeq[T]:
        return self.terms.map(lambda p: p.b)

    def terminated_at(self, n: int) -> bool:
        return self.terms.terminated_at(n)

    def terminates_within(self, max_steps: int) -> Optional[int]:
        return self.terms.terminates_within(max_steps)

    def is_simple(self, max_steps: int) -> bool:
        """All partial numerators among the first max_steps levels are 1."""
        return all(p.a == 1 for p in self.terms.take(max_steps))

    def is_regular(self, max_steps: int) -> bool:
        """Simple, with positive partial denominators."""
        return all(p.a == 1 and p.b >= 1 for p in self.terms.take(max_steps))

    def map(self, f: Callable[[T], U]) -> GenContFract[U]:
        return GenContFract(f(self.head), self.terms.map(lambda p: p.map(f)), self.truncated)

    def as_list(self, max_steps: int) -> List[Pair[T]]:
        return self.terms.take(max_steps)

    def as_array(self, max_steps: int) -> np.ndarray:
        """The levels as an (n, 2) array of exact Python numbers, one row per (a, b)."""
        rows = [[p.a, p.b] for p in self.terms.take(max_steps)]
        return np.array(rows, dtype=object).reshape(len(rows), 2)

    def agrees_with(self, other: GenContFract, max_steps: int) -> bool:
        """Same head and same levels up to max_steps, including where they stop."""
        if self.head != other.head:
            return False
        for n in range(max_steps + 1):
            if self.terms.get(n) != other.terms.get(n):
                return False
            if self.terms.get(n) is None:
                break
        return True

    def __repr__(self) -> str:
        from contfrac.pretty import pp

        return f"{type(self).__name__}({pp(self)})"


class ContinuedFraction(GenContFract[int]):
    """A simple continued fraction: integer head, numerators 1, integer denominators."""

    def partial_denominator_list(self, max_steps: int) -> List[int]:
        return [p.b for p in self.terms.take(max_steps)]

    def as_array(self, max_steps: int) -> np.ndarray:
        """[a0, a1, a2, ...] as an object array of exact integers."""
        return np.array([self.head] + self.partial_denominator_list(max_steps), dtype=object)


def of(v: Any, field: Optional[Field] = None) -> ContinuedFraction:
    """The simple continued fraction of v.

    The head is the whole part of stream entry 0; level n takes the whole
    part of stream entry n+1 and is absent exactly when that entry is."""
    head, rest = seq1(v, field)
    logger.debug("continued fraction of %s: head %d", v, head.whole)
    return ContinuedFraction(head.whole, rest.map(lambda p: Pair(1, p.whole)))
