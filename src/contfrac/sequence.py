from __future__ import annotations
from itertools import count
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from contfrac.errors import StepBudgetExceeded

T = TypeVar("T")
U = TypeVar("U")


class SealedSeq(Generic[T]):
    """A lazy, possibly infinite sequence indexed from 0.

    Entries are pulled from the source on demand and cached. The first index
    at which the source runs dry is recorded, and every query at or past it
    answers None: once the sequence has terminated it stays terminated."""

    def __init__(self, source: Iterable[T]) -> None:
        self._source: Optional[Iterator[T]] = iter(source)
        self._cache: List[T] = []
        self._end: Optional[int] = None
        self._failure: Optional[Exception] = None

    @staticmethod
    def unfold(first: Optional[T], succ: Callable[[T], Optional[T]]) -> SealedSeq[T]:
        """The sequence first, succ(first), ... up to the first None."""

        def gen() -> Iterator[T]:
            current = first
            while current is not None:
                yield current
                current = succ(current)

        return SealedSeq(gen())

    def _pull(self, n: int) -> None:
        while self._end is None and len(self._cache) <= n:
            if self._failure is not None:
                raise self._failure
            assert self._source is not None
            try:
                item = next(self._source)
            except StopIteration:
                self._end = len(self._cache)
                self._source = None
                return
            except Exception as e:
                # The source is dead now; keep failing instead of reading as ended.
                self._failure = e
                raise
            self._cache.append(item)

    def get(self, n: int) -> Optional[T]:
        if n < 0:
            raise ValueError(f"index must be non-negative, got {n}")
        if self._end is not None and n >= self._end:
            return None
        self._pull(n)
        if n < len(self._cache):
            return self._cache[n]
        return None

    __getitem__ = get

    def terminated_at(self, n: int) -> bool:
        return self.get(n) is None

    def terminates_within(self, max_steps: int) -> Optional[int]:
        """The first index <= max_steps holding None, or None if there is none."""
        for n in range(max_steps + 1):
            if self.get(n) is None:
                return n
        return None

    @property
    def known_length(self) -> Optional[int]:
        """The terminating index, once it has been observed."""
        return self._end

    def take(self, n: int) -> List[T]:
        """Up to n leading entries; fewer if the sequence terminates first."""
        out: List[T] = []
        for i in range(n):
            x = self.get(i)
            if x is None:
                break
            out.append(x)
        return out

    def bounded(self, max_steps: int) -> Iterator[T]:
        """Iterate over at most max_steps entries.

        Raises StepBudgetExceeded if the sequence is still going after them."""
        prefix = self.take(max_steps)
        yield from prefix
        if self.get(max_steps) is not None:
            raise StepBudgetExceeded(max_steps, prefix)

    def __iter__(self) -> Iterator[T]:
        for i in count():
            x = self.get(i)
            if x is None:
                return
            yield x

    def map(self, f: Callable[[T], U]) -> SealedSeq[U]:
        return SealedSeq(f(x) for x in self)

    def tail(self) -> SealedSeq[T]:
        def gen() -> Iterator[T]:
            for i in count(1):
                x = self.get(i)
                if x is None:
                    return
                yield x

        return SealedSeq(gen())

    def __repr__(self) -> str:
        shown = self._cache[:8]
        body = ", ".join(repr(x) for x in shown)
        if self._end is not None and self._end <= len(shown):
            return f"SealedSeq([{body}])"
        return f"SealedSeq([{body}, ...])"
