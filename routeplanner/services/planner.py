"""Itinerary planner service - Main orchestrator.

This service builds the connection network from the schedule
repository, enumerates every route for a client, prices and times
each one, and keeps the itinerary matching the client's preference.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..config import SearchConfig, get_config
from ..domain.models import ClientRequest, Itinerary, Ticket
from ..graph import Graph, build_graph, find_all_paths
from ..itinerary import build_itinerary
from ..ports.schedule import ScheduleRepositoryPort
from ..selection import select_best


@dataclass
class ItineraryPlannerService:
    """Main service for planning client itineraries.

    The graph is built once, on first use, and treated as read-only
    afterwards.

    Attributes:
        repository: Loads connections and client requests
        config: Path search and aggregation rules
    """

    repository: ScheduleRepositoryPort
    config: SearchConfig = field(default_factory=lambda: get_config().search)

    _graph: Optional[Graph] = field(default=None, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def graph(self) -> Graph:
        """Return the connection network, building it on first call.

        Every client origin and destination becomes a location, even
        when no connection serves it.

        Raises:
            ScheduleLoadError: If the schedule cannot be loaded.
        """
        if self._graph is not None:
            return self._graph

        connections = self.repository.load_connections()
        clients = self.repository.load_clients()
        locations = [
            key for client in clients for key in (client.origin, client.destination)
        ]
        self._graph = build_graph(locations, connections)
        self._logger.info(
            "Graph built",
            extra={"locations": self._graph.order, "connections": self._graph.size},
        )
        return self._graph

    def itineraries(self, origin: str, destination: str) -> List[Itinerary]:
        """Price and time every route from origin to destination."""
        paths = find_all_paths(
            self.graph(), origin, destination, max_legs=self.config.max_legs
        )
        self._logger.debug(
            "Paths enumerated",
            extra={"origin": origin, "destination": destination, "paths": len(paths)},
        )
        return [
            build_itinerary(
                origin,
                destination,
                path,
                min_connection_minutes=self.config.min_connection_minutes,
                discount_rate=self.config.stopover_discount_rate,
            )
            for path in paths
        ]

    def best_itinerary(self, client: ClientRequest, reverse: bool = False) -> Optional[Itinerary]:
        origin, destination = client.origin, client.destination
        if reverse:
            origin, destination = destination, origin

        best = select_best(self.itineraries(origin, destination), client.preference)
        if best is None:
            self._logger.warning(
                "No route found",
                extra={"client": client.name, "origin": origin, "destination": destination},
            )
        return best

    def plan(self, client: ClientRequest) -> Ticket:
        """Compute the ticket for one client.

        Round-trip clients also get the best itinerary back from their
        destination. A missing route leaves the itinerary as None.
        """
        self._logger.info(
            "Planning ticket",
            extra={
                "client": client.name,
                "origin": client.origin,
                "destination": client.destination,
                "preference": client.preference.value,
            },
        )
        outbound = self.best_itinerary(client)
        inbound = self.best_itinerary(client, reverse=True) if client.is_round_trip else None
        return Ticket(client=client, outbound=outbound, inbound=inbound)

    def plan_all(self, clients: Optional[Sequence[ClientRequest]] = None) -> List[Ticket]:
        """Compute a ticket for each client, defaulting to the repository's."""
        if clients is None:
            clients = self.repository.load_clients()
        return [self.plan(client) for client in clients]
