"""Pluggable pieces of the checkout model."""

from checkoutsim.components.line_assignment import LineAssignmentPolicy, shortest_line

__all__ = [
    "LineAssignmentPolicy",
    "shortest_line",
]
