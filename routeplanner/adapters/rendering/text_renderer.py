"""Plain-text ticket renderer adapter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ...domain.models import Itinerary, Ticket
from ...times import human_readable_duration


@dataclass
class TextTicketRenderer:
    """Render a ticket as indented plain text.

    Example output::

        Ada [CDG => YUL] (Cost) <OneWay>
          |CDG => YUL  Price: 225 {sum: 300, discounts: 1}  Time: 4h 5m (flight 3h 20m, wait 45m)
          |  AF12 08:00 (CDG) / 09:30 (LHR)
          |  AF34 10:15 (LHR) / 12:05 (YUL)
    """

    separator: str = "\n  |"

    def render(self, ticket: Ticket) -> str:
        lines = [ticket.client.describe()]
        go_and_back = [(ticket.client.origin, ticket.client.destination)]
        if ticket.client.is_round_trip:
            go_and_back.append((ticket.client.destination, ticket.client.origin))

        for (origin, destination), itinerary in zip(go_and_back, ticket.itineraries):
            lines.extend(self._itinerary_lines(origin, destination, itinerary))
        return self.separator.join(lines)

    def _itinerary_lines(
        self, origin: str, destination: str, itinerary: Optional[Itinerary]
    ) -> List[str]:
        if itinerary is None:
            return [f"{origin} => {destination}  No route found"]

        duration = itinerary.duration
        header = (
            f"{origin} => {destination}  {itinerary.price.describe()}  "
            f"Time: {human_readable_duration(duration.total_time)} "
            f"(flight {human_readable_duration(duration.flight_time)}, "
            f"wait {human_readable_duration(duration.wait_time)})"
        )
        return [header] + [f"  {c.describe()}" for c in itinerary.connections]
