"""Tests for the shortest-line assignment policy."""

import pytest

from checkoutsim import CheckoutLine, shortest_line


def _lines(make_customer, depths: list[int]) -> list[CheckoutLine]:
    lines = [CheckoutLine(i) for i in range(len(depths))]
    next_id = 1
    for line, depth in zip(lines, depths):
        for _ in range(depth):
            line.enqueue(make_customer(next_id, 0.0, 3.0))
            next_id += 1
    return lines


@pytest.mark.parametrize(
    "depths,expected",
    [
        ([0], 0),
        ([0, 0, 0], 0),
        ([2, 1, 3], 1),
        ([3, 2, 2, 1, 1], 3),
        ([1, 1, 0, 0], 2),
        ([4, 4, 4, 3], 3),
    ],
)
def test_picks_shortest_lowest_index(make_customer, depths, expected):
    assert shortest_line(_lines(make_customer, depths)) == expected


def test_does_not_mutate_lines(make_customer):
    lines = _lines(make_customer, [2, 0, 1])
    before = [line.customer_ids() for line in lines]
    shortest_line(lines)
    assert [line.customer_ids() for line in lines] == before


def test_requires_lines():
    with pytest.raises(ValueError):
        shortest_line([])
