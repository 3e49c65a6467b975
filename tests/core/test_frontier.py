import pytest

from uastar.core.frontier import Frontier


def test_pops_lowest_priority_first():
    frontier = Frontier()
    for priority, idx in [(3.0, 0), (1.0, 1), (2.0, 2)]:
        frontier.push(priority, idx)
    assert len(frontier) == 3
    assert [frontier.pop()[1] for _ in range(3)] == [1, 2, 0]
    assert not frontier


def test_equal_priorities_are_fifo():
    frontier = Frontier()
    for idx in (5, 3, 9):
        frontier.push(1.0, idx)
    assert [frontier.pop()[1] for _ in range(3)] == [5, 3, 9]


def test_duplicate_entries_allowed():
    frontier = Frontier()
    frontier.push(4.0, 0)
    frontier.push(2.0, 0)
    assert frontier.pop() == (2.0, 0)
    assert frontier.pop() == (4.0, 0)


def test_pop_empty_raises():
    frontier = Frontier()
    frontier.push(1.0, 0)
    frontier.clear()
    with pytest.raises(IndexError):
        frontier.pop()
