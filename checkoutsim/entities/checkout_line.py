"""One checkout lane: a FIFO of customers, the front one being served."""

from __future__ import annotations

from collections import deque
from typing import Iterator

from checkoutsim.core.errors import InvariantViolation
from checkoutsim.entities.customer import Customer


class CheckoutLine:
    """FIFO lane of waiting customers.

    The customer at the front is the one at the register. The engine keeps
    at most one pending departure per line, always for the front customer.
    """

    def __init__(self, index: int):
        self.index = index
        self._customers: deque[Customer] = deque()
        self.customers_served: int = 0

    @property
    def name(self) -> str:
        return f"L {self.index + 1}"

    @property
    def depth(self) -> int:
        """Number of customers waiting or being served."""
        return len(self._customers)

    def is_empty(self) -> bool:
        return not self._customers

    def enqueue(self, customer: Customer) -> None:
        self._customers.append(customer)

    def front(self) -> Customer | None:
        return self._customers[0] if self._customers else None

    def dequeue(self) -> Customer:
        """Remove and return the front customer.

        Raises:
            InvariantViolation: If the line is empty.
        """
        if not self._customers:
            raise InvariantViolation(f"cannot dequeue from empty checkout line {self.name}")
        self.customers_served += 1
        return self._customers.popleft()

    def customer_ids(self) -> tuple[int, ...]:
        return tuple(c.customer_id for c in self._customers)

    def __iter__(self) -> Iterator[Customer]:
        return iter(self._customers)

    def __len__(self) -> int:
        return len(self._customers)

    def __repr__(self) -> str:
        return f"CheckoutLine({self.name}, depth={self.depth})"
