"""
Shared pytest fixtures for checkoutsim tests.
"""

import logging
from pathlib import Path

import pytest

from checkoutsim import Customer, Duration, Instant, SupermarketConfig


@pytest.fixture(scope="session")
def test_output_root() -> Path:
    """
    Returns the root test_output directory. Created once per test session.
    Files here persist after tests complete for easy access.
    """
    output_dir = Path(__file__).parent.parent / "test_output"
    output_dir.mkdir(exist_ok=True)
    return output_dir


@pytest.fixture
def test_output_dir(request, test_output_root) -> Path:
    """
    Returns a directory for the current test to write output files.
    Directory structure: test_output/<module_name>/<test_name>/
    """
    module_name = request.module.__name__.split(".")[-1]
    test_name = request.node.name

    test_dir = test_output_root / module_name / test_name
    test_dir.mkdir(parents=True, exist_ok=True)
    return test_dir


@pytest.fixture(autouse=True)
def reset_checkoutsim_logging():
    """Reset logging state before each test.

    Removes all handlers except NullHandler and resets the level so that
    logging configuration from one test cannot leak into another.
    """
    logger = logging.getLogger("checkoutsim")

    def _reset():
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)

    _reset()
    yield
    _reset()


@pytest.fixture
def make_customer():
    """Factory for customers with times given in minutes after opening (08:00)."""
    opening = SupermarketConfig().opening_time

    def _make(customer_id: int, arrive_min: float, checkout_min: float) -> Customer:
        return Customer(
            customer_id=customer_id,
            arrival_time=opening + Duration.from_minutes(arrive_min),
            checkout_duration=Duration.from_minutes(checkout_min),
        )

    return _make


@pytest.fixture
def opening() -> Instant:
    return SupermarketConfig().opening_time
