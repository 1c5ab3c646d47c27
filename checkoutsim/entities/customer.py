"""A simulated shopper: who they are, when they queue, how long they take."""

from __future__ import annotations

from dataclasses import dataclass, field

from checkoutsim.core.errors import InvariantViolation
from checkoutsim.core.temporal import Duration, Instant


@dataclass(frozen=True)
class Customer:
    """Identity and timing facts about one customer.

    Everything is fixed at construction except ``line_index``, which the
    engine sets exactly once when the customer joins a checkout line.

    Attributes:
        customer_id: Positive identity, assigned in generation order.
        arrival_time: When the customer steps into a checkout line.
        checkout_duration: Time spent at the register once at the front.
    """
    customer_id: int
    arrival_time: Instant
    checkout_duration: Duration
    line_index: int | None = field(default=None, init=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.customer_id, bool) or not isinstance(self.customer_id, int) or self.customer_id < 1:
            raise ValueError(f"customer_id must be a positive integer, got {self.customer_id!r}")
        if self.checkout_duration <= Duration(0):
            raise ValueError(f"checkout_duration must be positive, got {self.checkout_duration!r}")

    def assign_line(self, index: int) -> None:
        """Record the line this customer joined.

        Raises:
            InvariantViolation: If the customer was already assigned.
        """
        if self.line_index is not None:
            raise InvariantViolation(
                f"customer {self} already assigned to line {self.line_index}, "
                f"cannot reassign to line {index}"
            )
        object.__setattr__(self, "line_index", index)

    def __str__(self) -> str:
        return f"{self.customer_id:03d}"
