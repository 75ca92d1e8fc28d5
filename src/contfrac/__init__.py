from contfrac.api import (
    continued_fraction,
    convergent,
    convergents_up_to,
    expand,
    from_continued_fraction,
    is_rational_terminating,
)
from contfrac.bridge import rational_witness, stream_coincides, terminates_iff_rational
from contfrac.cfrac import ContinuedFraction, GenContFract, Pair, of
from contfrac.convergents import ConvergentEvaluator
from contfrac.errors import ContFracError, InvalidEmbeddingError, StepBudgetExceeded
from contfrac.field import Field
from contfrac.intfract import IntFractPair, int_fract_stream, stream
from contfrac.pretty import pp, pps
from contfrac.sequence import SealedSeq
from contfrac.termination import TerminationCertificate, decide

__all__ = [
    "ContFracError",
    "ContinuedFraction",
    "ConvergentEvaluator",
    "Field",
    "GenContFract",
    "IntFractPair",
    "InvalidEmbeddingError",
    "Pair",
    "SealedSeq",
    "StepBudgetExceeded",
    "TerminationCertificate",
    "continued_fraction",
    "convergent",
    "convergents_up_to",
    "decide",
    "expand",
    "from_continued_fraction",
    "int_fract_stream",
    "is_rational_terminating",
    "of",
    "pp",
    "pps",
    "rational_witness",
    "stream",
    "stream_coincides",
    "terminates_iff_rational",
]
