"""Duration and price aggregation over a path of connections.

Both computations are pure: they read an ordered sequence of
connections and return a new immutable value.

Duration
    Flight time is the sum of each connection's own elapsed time. The
    wait between two consecutive connections is the gap from the first
    arrival to the next departure; a gap of ``min_connection_minutes``
    or less means the next connection is caught on the following day,
    so a full day is added.

Price
    Costs are summed, then a flat ``discount_rate`` is taken off once
    per company used on more than one leg.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from .domain.errors import make_invalid_argument_error
from .domain.models import Connection, Duration, Itinerary, Price
from .times import MINUTES_PER_DAY, minutes_between

DEFAULT_MIN_CONNECTION_MINUTES = 30
DEFAULT_DISCOUNT_RATE = 0.25


def _check_path(method: str, path: Sequence[Connection]) -> Sequence[Connection]:
    if isinstance(path, (str, bytes)) or not isinstance(path, Sequence):
        raise make_invalid_argument_error(
            method, "path", path, "sequence of Connection"
        )
    for item in path:
        if not isinstance(item, Connection):
            raise make_invalid_argument_error(method, "path", item, "Connection")
    return path


def layover_minutes(
    previous: Connection,
    following: Connection,
    min_connection_minutes: int = DEFAULT_MIN_CONNECTION_MINUTES,
) -> int:
    """Minutes spent waiting between two consecutive connections."""
    gap = minutes_between(previous.arrival, following.departure)
    if gap > min_connection_minutes:
        return gap
    return gap + MINUTES_PER_DAY


def compute_duration(
    path: Sequence[Connection],
    min_connection_minutes: int = DEFAULT_MIN_CONNECTION_MINUTES,
) -> Duration:
    """Compute flight, wait and total time of a path, in minutes."""
    _check_path("compute_duration", path)

    flight_time = sum(
        minutes_between(connection.departure, connection.arrival)
        for connection in path
    )
    wait_time = sum(
        layover_minutes(previous, following, min_connection_minutes)
        for previous, following in zip(path, path[1:])
    )
    return Duration(
        total_time=flight_time + wait_time,
        flight_time=flight_time,
        wait_time=wait_time,
    )


def compute_price(
    path: Sequence[Connection],
    discount_rate: float = DEFAULT_DISCOUNT_RATE,
) -> Price:
    """Compute the discounted price of a path.

    Note:
        The discount is not capped. With four or more repeated
        companies at the default rate the total drops to zero or below.
    """
    _check_path("compute_price", path)

    cumulative_price = sum(connection.cost for connection in path)
    legs_by_company = Counter(connection.company for connection in path)
    number_of_stop_discounts = sum(1 for legs in legs_by_company.values() if legs > 1)

    total_price = cumulative_price
    if number_of_stop_discounts > 0:
        total_price = cumulative_price * (1 - discount_rate * number_of_stop_discounts)

    return Price(
        total_price=total_price,
        cumulative_price=cumulative_price,
        stop_discounts=dict(legs_by_company),
        number_of_stop_discounts=number_of_stop_discounts,
    )


def build_itinerary(
    origin: str,
    destination: str,
    path: Sequence[Connection],
    min_connection_minutes: int = DEFAULT_MIN_CONNECTION_MINUTES,
    discount_rate: float = DEFAULT_DISCOUNT_RATE,
) -> Itinerary:
    """Wrap a path in an itinerary with its duration and price set."""
    duration = compute_duration(path, min_connection_minutes)
    price = compute_price(path, discount_rate)
    itinerary = Itinerary(origin=origin, destination=destination, connections=tuple(path))
    itinerary.set_duration(duration)
    itinerary.set_price(price)
    return itinerary
