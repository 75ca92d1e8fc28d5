from __future__ import annotations
from typing import List, Sequence


class ContFracError(Exception):
    """Base class for errors raised by contfrac."""


class StepBudgetExceeded(ContFracError):
    """A bounded expansion used up its step budget before the stream terminated.

    This is the expected outcome for irrational inputs. `prefix` holds the
    entries that were produced within the budget."""

    max_steps: int
    prefix: List

    def __init__(self, max_steps: int, prefix: Sequence = ()) -> None:
        super().__init__(f"expansion did not terminate within {max_steps} steps")
        self.max_steps = max_steps
        self.prefix = list(prefix)


class InvalidEmbeddingError(ContFracError, ValueError):
    """An inexact number domain was used where exact floor and arithmetic are required."""
