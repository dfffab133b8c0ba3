"""Shared fixtures for the route planner tests."""

from __future__ import annotations

import itertools

import pytest

from routeplanner.config import reset_config
from routeplanner.domain.models import Connection


@pytest.fixture
def make_connection():
    """Factory building valid connections with overridable fields."""
    numbers = itertools.count(100)

    def _make(
        origin: str = "A",
        destination: str = "B",
        departure="08:00",
        arrival="09:00",
        cost=100,
        company: str = "X",
        number=None,
    ) -> Connection:
        return Connection(
            number=number if number is not None else next(numbers),
            company=company,
            origin=origin,
            destination=destination,
            departure=departure,
            arrival=arrival,
            cost=cost,
        )

    return _make


@pytest.fixture(autouse=True)
def fresh_config():
    """Make sure environment overrides never leak between tests."""
    reset_config()
    yield
    reset_config()
