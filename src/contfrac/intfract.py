from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
import logging
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

from contfrac.field import Field
from contfrac.sequence import SealedSeq

logger = logging.getLogger(__name__)

F = TypeVar("F")
G = TypeVar("G")

__all__ = [
    "IntFractPair",
    "int_fract_stream",
    "stream",
    "seq1",
    "fract_numerator_decreases",
]


@dataclass(frozen=True)
class IntFractPair(Generic[F]):
    """A value split as whole + fract with 0 <= fract < 1."""

    whole: int
    fract: F
    __match_args__ = ("whole", "fract")

    @staticmethod
    def of(x: Any, field: Field) -> IntFractPair:
        whole = field.floor(x)
        return IntFractPair(whole, field.fract(x, whole))

    def map_fract(self, f: Callable[[F], G]) -> IntFractPair[G]:
        return IntFractPair(self.whole, f(self.fract))

    def __repr__(self) -> str:
        return f"IntFractPair({self.whole}, {self.fract})"


def _resolve(v: Any, field: Optional[Field]) -> Tuple[Any, Field]:
    if field is None:
        field = Field.of(v)
    return field.coerce(v), field


def int_fract_stream(v: Any, field: Optional[Field] = None) -> SealedSeq[IntFractPair]:
    """The stream of integer/fractional parts of v.

    Entry 0 splits v itself; entry n+1 splits 1/fract of entry n, unless that
    fract is zero, in which case the stream ends."""
    v, field = _resolve(v, field)

    def succ(pair: IntFractPair) -> Optional[IntFractPair]:
        if field.is_zero(pair.fract):
            return None
        nxt = IntFractPair.of(field.invert(pair.fract), field)
        logger.debug("stream step: 1/%s -> %s", pair.fract, nxt)
        return nxt

    return SealedSeq.unfold(IntFractPair.of(v, field), succ)


def stream(v: Any, n: int, field: Optional[Field] = None) -> Optional[IntFractPair]:
    return int_fract_stream(v, field).get(n)


def seq1(v: Any, field: Optional[Field] = None) -> Tuple[IntFractPair, SealedSeq[IntFractPair]]:
    """The head pair of the stream together with the stream of what follows it."""
    s = int_fract_stream(v, field)
    head = s.get(0)
    assert head is not None, "the stream always has an entry at index 0"
    return head, s.tail()


def fract_numerator_decreases(fr: Fraction) -> bool:
    """Check that splitting 1/fr yields a fractional part with a smaller numerator.

    Holds for every rational 0 < fr < 1; it is what bounds the length of a
    rational expansion."""
    fr = Fraction(fr)
    if not 0 < fr < 1:
        raise ValueError(f"expected 0 < fr < 1, got {fr}")
    nxt = IntFractPair.of(1 / fr, Field.Rational)
    return nxt.fract.numerator < fr.numerator
