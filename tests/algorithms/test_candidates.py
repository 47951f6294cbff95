import pytest

from kspath.algorithms.candidates import CandidatePool
from kspath.paths import Path


def test_pool_pops_by_cost():
    pool = CandidatePool()
    pool.add(Path(("A", "C", "D"), 5))
    pool.add(Path(("A", "B", "D"), 2))
    pool.add(Path(("A", "D"), 3))
    assert len(pool) == 3
    assert [pool.pop().cost for _ in range(3)] == [2, 3, 5]
    assert not pool


def test_pool_ties_first_generated_wins():
    pool = CandidatePool()
    pool.add(Path(("A", "X", "D"), 4))
    pool.add(Path(("A", "B", "D"), 4))
    pool.add(Path(("A", "C", "D"), 4))
    assert pool.pop().nodes == ("A", "X", "D")
    assert pool.pop().nodes == ("A", "B", "D")
    assert pool.pop().nodes == ("A", "C", "D")


def test_pool_rejects_duplicates():
    pool = CandidatePool()
    assert pool.add(Path(("A", "B"), 1)) is True
    assert pool.add(Path(["A", "B"], 1)) is False
    assert len(pool) == 1
    assert ["A", "B"] in pool

    # A popped sequence stays known to the pool
    pool.pop()
    assert pool.add(Path(("A", "B"), 1)) is False
    assert ("A", "B") not in pool


def test_pool_peek_does_not_remove():
    pool = CandidatePool()
    pool.add(Path(("A", "B"), 1))
    assert pool.peek().nodes == ("A", "B")
    assert len(pool) == 1


def test_empty_pool_errors():
    pool = CandidatePool()
    with pytest.raises(IndexError):
        pool.pop()
    with pytest.raises(IndexError):
        pool.peek()
