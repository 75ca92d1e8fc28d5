import pytest
from contfrac.errors import StepBudgetExceeded
from contfrac.sequence import SealedSeq


def test_get_and_seal():
    s = SealedSeq(iter([10, 20, 30]))
    assert s.get(1) == 20
    assert s.known_length is None
    assert s.get(3) is None
    assert s.known_length == 3
    # once None, always None
    for n in range(3, 10):
        assert s.get(n) is None
    assert s[0] == 10


def test_restartable_iteration():
    s = SealedSeq(x * x for x in range(4))
    assert list(s) == [0, 1, 4, 9]
    assert list(s) == [0, 1, 4, 9]


def test_unfold_stops_at_none():
    s = SealedSeq.unfold(5, lambda x: x - 1 if x > 1 else None)
    assert list(s) == [5, 4, 3, 2, 1]
    assert s.terminates_within(10) == 5
    assert s.terminates_within(3) is None


def test_infinite_take_and_map():
    s = SealedSeq.unfold(1, lambda x: 2 * x)
    assert s.take(5) == [1, 2, 4, 8, 16]
    assert s.map(lambda x: x + 1).take(3) == [2, 3, 5]
    assert s.tail().take(3) == [2, 4, 8]


def test_bounded_raises_when_budget_runs_out():
    s = SealedSeq.unfold(0, lambda x: x + 1)
    with pytest.raises(StepBudgetExceeded) as info:
        list(s.bounded(4))
    assert info.value.max_steps == 4
    assert info.value.prefix == [0, 1, 2, 3]


def test_bounded_finite():
    s = SealedSeq(iter("abc"))
    assert list(s.bounded(3)) == ["a", "b", "c"]


def test_negative_index():
    with pytest.raises(ValueError):
        SealedSeq(iter([])).get(-1)


def test_source_failure_is_not_read_as_termination():
    def gen():
        yield 1
        raise RuntimeError("boom")

    s = SealedSeq(gen())
    assert s.get(0) == 1
    with pytest.raises(RuntimeError):
        s.get(1)
    with pytest.raises(RuntimeError):
        s.get(1)
