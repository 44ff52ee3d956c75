"""
Query Kernel -- Partitioning Tests

take / skip split a sequence at a count; take_while / skip_while split it at
the first element that fails a predicate. Both pairs recombine to the input.
"""

import pytest

from engine.kernel.query import skip, skip_while, take, take_while

NUMBERS = [1, 2, 3, 4, 5]


@pytest.mark.parametrize("count", [-1, 0, 1, 2, 5, 6])
def test_take_skip_recombine(count):
    assert list(take(NUMBERS, count)) + list(skip(NUMBERS, count)) == NUMBERS


def test_take():
    assert list(take(NUMBERS, 2)) == [1, 2]
    assert list(take(NUMBERS, 0)) == []
    assert list(take(NUMBERS, -3)) == []
    assert list(take(NUMBERS, 99)) == NUMBERS


def test_skip():
    assert list(skip(NUMBERS, 2)) == [3, 4, 5]
    assert list(skip(NUMBERS, 0)) == NUMBERS
    assert list(skip(NUMBERS, -3)) == NUMBERS
    assert list(skip(NUMBERS, 99)) == []


def test_take_stops_reading_source():
    """take does not pull more elements than it yields."""
    seen = []

    def source():
        for n in NUMBERS:
            seen.append(n)
            yield n

    assert list(take(source(), 2)) == [1, 2]
    assert seen == [1, 2]


def test_take_on_infinite_source():
    def naturals():
        n = 0
        while True:
            yield n
            n += 1

    assert list(take(skip(naturals(), 10), 3)) == [10, 11, 12]


@pytest.mark.parametrize("count", [1.5, "2", None, True])
def test_count_must_be_int(count):
    with pytest.raises(TypeError):
        take(NUMBERS, count)
    with pytest.raises(TypeError):
        skip(NUMBERS, count)


def test_take_while():
    assert list(take_while(NUMBERS, lambda n: n < 3)) == [1, 2]
    assert list(take_while(NUMBERS, lambda n: n > 10)) == []
    assert list(take_while([1, 5, 1], lambda n: n < 3)) == [1]


def test_skip_while():
    assert list(skip_while(NUMBERS, lambda n: n < 3)) == [3, 4, 5]
    assert list(skip_while(NUMBERS, lambda n: n < 10)) == []
    assert list(skip_while([1, 5, 1], lambda n: n < 3)) == [5, 1]


@pytest.mark.parametrize("source", [[], [1], [4, 1, 2], [1, 2, 9, 0]])
def test_while_pair_recombines(source):
    def small(n):
        return n < 3

    assert list(take_while(source, small)) + list(skip_while(source, small)) == source
