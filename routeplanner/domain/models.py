"""Domain models for the route planner.

Records loaded from schedule files (connections and client requests)
are frozen dataclasses validated on construction. Itineraries carry a
duration and a price computed once from their connections.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from ..times import MINUTES_PER_DAY, minutes_to_time, time_to_minutes
from .errors import GraphError, ValidationError, make_invalid_argument_error


class Preference(str, Enum):
    """What a client optimizes their itinerary for."""

    COST = "Cost"
    TIME = "Time"

    @classmethod
    def parse(cls, value: Union[str, "Preference"]) -> "Preference":
        return _parse_enum(cls, value, "preference")


class TripType(str, Enum):
    """Whether a client also needs a return itinerary."""

    ONE_WAY = "OneWay"
    ROUND_TRIP = "RoundTrip"

    @classmethod
    def parse(cls, value: Union[str, "TripType"]) -> "TripType":
        return _parse_enum(cls, value, "trip_type")


def _parse_enum(enum_cls: Any, value: Any, field_name: str) -> Any:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        for member in enum_cls:
            if member.value.lower() == value.strip().lower():
                return member
    allowed = ", ".join(member.value for member in enum_cls)
    raise ValidationError(
        f"{field_name} must be one of {allowed}, got {value!r}",
        field_name=field_name,
        value=str(value),
    )


def _require_text(value: Any, field_name: str, owner: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"{owner} requires a non-empty string for [{field_name}], got {value!r}",
            field_name=field_name,
            value=str(value),
        )
    return value.strip()


def _require_time(value: Any, field_name: str) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        if 0 <= value < MINUTES_PER_DAY:
            return value
    elif isinstance(value, str):
        try:
            return time_to_minutes(value)
        except GraphError as exc:
            raise ValidationError(
                f"Connection cannot parse [{field_name}] {value!r} as HH:MM",
                field_name=field_name,
                value=value,
                cause=exc,
            )
    raise ValidationError(
        f"Connection requires a time of day for [{field_name}], got {value!r}",
        field_name=field_name,
        value=str(value),
    )


def _format_amount(value: float) -> str:
    """Fixed-point amount with at most two decimals, e.g. ``1234567`` or ``12.5``."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _require_cost(value: Any) -> float:
    cost: Optional[float] = None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        cost = float(value)
    elif isinstance(value, str):
        try:
            cost = float(value.strip())
        except ValueError:
            cost = None
    if cost is None or not math.isfinite(cost) or cost <= 0:
        raise ValidationError(
            f"Connection requires a positive finite number for [cost], got {value!r}",
            field_name="cost",
            value=str(value),
        )
    return cost


@dataclass(frozen=True, slots=True)
class Connection:
    """A single scheduled leg between two locations.

    Departure and arrival are normalized to minutes of the day. Strings
    in ``HH:MM`` form (with an optional trailing ``Z``) are accepted.

    Attributes:
        number: Stable identifier of the connection (flight number)
        company: Operating company name
        origin: Location the connection departs from
        destination: Location the connection arrives at
        departure: Departure time, minute of day
        arrival: Arrival time, minute of day
        cost: Base cost of the connection
    """

    number: str
    company: str
    origin: str
    destination: str
    departure: int
    arrival: int
    cost: float

    def __post_init__(self) -> None:
        number = self.number
        if isinstance(number, int) and not isinstance(number, bool):
            number = str(number)
        set_ = object.__setattr__
        set_(self, "number", _require_text(number, "number", "Connection"))
        set_(self, "company", _require_text(self.company, "company", "Connection"))
        set_(self, "origin", _require_text(self.origin, "origin", "Connection"))
        set_(
            self,
            "destination",
            _require_text(self.destination, "destination", "Connection"),
        )
        set_(self, "departure", _require_time(self.departure, "departure"))
        set_(self, "arrival", _require_time(self.arrival, "arrival"))
        set_(self, "cost", _require_cost(self.cost))

        if self.origin == self.destination:
            raise ValidationError(
                f"Connection {self.number} cannot depart from and arrive at {self.origin}",
                field_name="destination",
                value=self.destination,
            )

    @property
    def name(self) -> str:
        """Company acronym followed by the number, e.g. ``AF123``."""
        acronym = "".join(word[0] for word in self.company.split()).upper()
        return f"{acronym}{self.number}"

    @property
    def departure_time(self) -> str:
        return minutes_to_time(self.departure)

    @property
    def arrival_time(self) -> str:
        return minutes_to_time(self.arrival)

    def describe(self) -> str:
        return (
            f"{self.name} {self.departure_time} ({self.origin}) / "
            f"{self.arrival_time} ({self.destination})"
        )


@dataclass(frozen=True, slots=True)
class ClientRequest:
    """A traveler asking for the best itinerary between two locations.

    Attributes:
        name: Client name
        origin: Location the client departs from
        destination: Location the client travels to
        preference: Optimize for cost or for time
        trip_type: One-way or round trip
    """

    name: str
    origin: str
    destination: str
    preference: Preference
    trip_type: TripType = TripType.ONE_WAY

    def __post_init__(self) -> None:
        set_ = object.__setattr__
        set_(self, "name", _require_text(self.name, "name", "ClientRequest"))
        set_(self, "origin", _require_text(self.origin, "origin", "ClientRequest"))
        set_(
            self,
            "destination",
            _require_text(self.destination, "destination", "ClientRequest"),
        )
        set_(self, "preference", Preference.parse(self.preference))
        set_(self, "trip_type", TripType.parse(self.trip_type))

    @property
    def is_round_trip(self) -> bool:
        return self.trip_type is TripType.ROUND_TRIP

    def describe(self) -> str:
        return (
            f"{self.name} [{self.origin} => {self.destination}] "
            f"({self.preference.value}) <{self.trip_type.value}>"
        )


@dataclass(frozen=True, slots=True)
class Duration:
    """Time spent on an itinerary, in minutes."""

    total_time: int = 0
    flight_time: int = 0
    wait_time: int = 0

    def compare(self, other: "Duration") -> int:
        """Return a negative, zero or positive number like a comparator."""
        if not isinstance(other, Duration):
            raise make_invalid_argument_error(
                "Duration.compare", "other", other, "Duration"
            )
        return self.total_time - other.total_time


@dataclass(frozen=True, slots=True)
class Price:
    """Cost of an itinerary.

    Attributes:
        total_price: Cumulative price after the stopover discount
        cumulative_price: Sum of every connection cost
        stop_discounts: Number of legs taken with each company
        number_of_stop_discounts: Companies used on more than one leg
    """

    total_price: float = 0.0
    cumulative_price: float = 0.0
    stop_discounts: Dict[str, int] = field(default_factory=dict)
    number_of_stop_discounts: int = 0

    def compare(self, other: "Price") -> float:
        if not isinstance(other, Price):
            raise make_invalid_argument_error("Price.compare", "other", other, "Price")
        return self.total_price - other.total_price

    def describe(self) -> str:
        discounts = (
            f", discounts: {self.number_of_stop_discounts}"
            if self.number_of_stop_discounts
            else ""
        )
        return (
            f"Price: {_format_amount(self.total_price)} "
            f"{{sum: {_format_amount(self.cumulative_price)}{discounts}}}"
        )


@dataclass
class Itinerary:
    """A path of connections enriched with its duration and price.

    Duration and price are assigned once, through ``set_duration`` and
    ``set_price``. Use ``from_path`` to build a fully computed itinerary.
    """

    origin: str
    destination: str
    connections: Tuple[Connection, ...]
    _duration: Optional[Duration] = field(default=None, init=False, repr=False)
    _price: Optional[Price] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.origin, str) or not self.origin:
            raise make_invalid_argument_error("Itinerary", "origin", self.origin)
        if not isinstance(self.destination, str) or not self.destination:
            raise make_invalid_argument_error(
                "Itinerary", "destination", self.destination
            )
        if isinstance(self.connections, (str, bytes)) or not isinstance(
            self.connections, (list, tuple)
        ):
            raise make_invalid_argument_error(
                "Itinerary", "connections", self.connections, "sequence of Connection"
            )
        self.connections = tuple(self.connections)

    @classmethod
    def from_path(
        cls,
        origin: str,
        destination: str,
        path: Tuple[Connection, ...],
        min_connection_minutes: int = 30,
        discount_rate: float = 0.25,
    ) -> "Itinerary":
        from ..itinerary import build_itinerary

        return build_itinerary(
            origin, destination, path, min_connection_minutes, discount_rate
        )

    @property
    def duration(self) -> Duration:
        return self._duration if self._duration is not None else Duration()

    @property
    def price(self) -> Price:
        return self._price if self._price is not None else Price()

    @property
    def is_computed(self) -> bool:
        return self._duration is not None and self._price is not None

    @property
    def stops(self) -> Tuple[str, ...]:
        """Every location visited, origin included."""
        if not self.connections:
            return ()
        return (self.connections[0].origin,) + tuple(
            connection.destination for connection in self.connections
        )

    def set_duration(self, duration: Duration) -> None:
        if not isinstance(duration, Duration):
            raise make_invalid_argument_error(
                "Itinerary.set_duration", "duration", duration, "Duration"
            )
        if self._duration is not None:
            raise make_invalid_argument_error(
                "Itinerary.set_duration", "duration", duration, "unset duration"
            )
        self._duration = duration

    def set_price(self, price: Price) -> None:
        if not isinstance(price, Price):
            raise make_invalid_argument_error(
                "Itinerary.set_price", "price", price, "Price"
            )
        if self._price is not None:
            raise make_invalid_argument_error(
                "Itinerary.set_price", "price", price, "unset price"
            )
        self._price = price


@dataclass(frozen=True, slots=True)
class Ticket:
    """The itineraries retained for one client.

    ``outbound`` or ``inbound`` is None when no route could be computed.
    ``inbound`` is only looked up for round-trip clients.
    """

    client: ClientRequest
    outbound: Optional[Itinerary] = None
    inbound: Optional[Itinerary] = None

    @property
    def itineraries(self) -> Tuple[Optional[Itinerary], ...]:
        if self.client.is_round_trip:
            return (self.outbound, self.inbound)
        return (self.outbound,)

    @property
    def is_complete(self) -> bool:
        return all(itinerary is not None for itinerary in self.itineraries)
