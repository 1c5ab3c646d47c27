"""Customers and the checkout lines they wait in."""

from checkoutsim.entities.checkout_line import CheckoutLine
from checkoutsim.entities.customer import Customer

__all__ = [
    "CheckoutLine",
    "Customer",
]
