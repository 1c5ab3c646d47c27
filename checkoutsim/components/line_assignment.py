"""Policies that pick the checkout line a new arrival joins.

A policy is a plain callable taking the engine's lines (in index order) and
returning the index of the chosen line. It must not mutate the lines.
"""

from __future__ import annotations

from typing import Callable, Sequence

from checkoutsim.entities.checkout_line import CheckoutLine

LineAssignmentPolicy = Callable[[Sequence[CheckoutLine]], int]
"""Signature for line assignment policies: lines -> chosen line index."""


def shortest_line(lines: Sequence[CheckoutLine]) -> int:
    """Index of the line with the fewest customers.

    Ties go to the lowest index: a later line only wins when it is strictly
    shorter than the best seen so far.

    Raises:
        ValueError: If there are no lines to choose from.
    """
    if not lines:
        raise ValueError("shortest_line() requires at least one line")
    best = 0
    for i in range(1, len(lines)):
        if lines[i].depth < lines[best].depth:
            best = i
    return best
