import pytest

from sllkit.core import from_values, values
from sllkit.search import (
    find_mid,
    find_mid_by_count,
    find_nth,
    nth_from_end,
    nth_from_end_by_length,
)

SIX = [10, 20, 30, 40, 50, 60]
FOUR = [10, 20, 30, 40]


def test_find_mid_even_returns_second_middle():
    assert find_mid(from_values(SIX)) == 40


def test_find_mid_odd():
    assert find_mid(from_values([10, 20, 30, 40, 50])) == 30


def test_find_mid_single():
    assert find_mid(from_values([10])) == 10


@pytest.mark.parametrize("size", range(1, 12))
def test_find_mid_matches_counting_version(size):
    data = list(range(100, 100 + size))
    head = from_values(data)
    assert find_mid(head) == find_mid_by_count(head, size)
    assert find_mid(head) == data[size // 2]


def test_find_mid_does_not_change_list():
    head = from_values(SIX)
    find_mid(head)
    assert values(head) == SIX


def test_find_mid_empty_raises():
    with pytest.raises(ValueError):
        find_mid(None)


def test_find_mid_by_count_source_list():
    assert find_mid_by_count(from_values(SIX), 6) == 40


def test_find_mid_by_count_exceeds():
    with pytest.raises(IndexError):
        find_mid_by_count(from_values([10, 20]), 10)


def test_find_mid_by_count_empty():
    with pytest.raises(ValueError):
        find_mid_by_count(None, 0)


def test_find_nth_first_and_second():
    head = from_values(FOUR)
    assert find_nth(head, 1) == 10
    assert find_nth(head, 2) == 20


def test_find_nth_every_position():
    head = from_values(FOUR)
    assert [find_nth(head, pos) for pos in range(1, 5)] == FOUR


def test_find_nth_beyond_end_raises():
    with pytest.raises(IndexError):
        find_nth(from_values(FOUR), 5)


@pytest.mark.parametrize("pos", [0, -1])
def test_find_nth_invalid_pos(pos):
    with pytest.raises(IndexError):
        find_nth(from_values(FOUR), pos)


def test_find_nth_empty():
    with pytest.raises(ValueError):
        find_nth(None, 1)


def test_nth_from_end_source_case():
    assert nth_from_end(from_values(SIX), 4) == 30


@pytest.mark.parametrize("n", range(1, 7))
def test_nth_from_end_both_ways_agree(n):
    head = from_values(SIX)
    assert nth_from_end(head, n) == SIX[-n]
    assert nth_from_end_by_length(head, n) == SIX[-n]


def test_nth_from_end_last_and_first():
    head = from_values(SIX)
    assert nth_from_end(head, 1) == 60
    assert nth_from_end(head, 6) == 10


@pytest.mark.parametrize("func", [nth_from_end, nth_from_end_by_length])
@pytest.mark.parametrize("n", [0, 7, -2])
def test_nth_from_end_out_of_range(func, n):
    with pytest.raises(IndexError):
        func(from_values(SIX), n)


@pytest.mark.parametrize("func", [nth_from_end, nth_from_end_by_length])
def test_nth_from_end_empty(func):
    with pytest.raises(ValueError):
        func(None, 1)