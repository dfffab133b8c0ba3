"""Top-level package for the route planner.

The planner models a network of scheduled connections as an attributed
multigraph, enumerates every simple route between two locations, and
picks the cheapest or fastest itinerary for each client.

    graph = create_graph()
    add_location(graph, "CDG")
    add_location(graph, "YUL")
    add_connection(graph, "CDG", "YUL", flight)
    paths = find_all_paths(graph, "CDG", "YUL")
    best = select_best([build_itinerary("CDG", "YUL", p) for p in paths], "Cost")
"""

from .domain import (
    ClientRequest,
    Connection,
    Duration,
    DuplicateKeyError,
    GraphError,
    InvalidArgumentError,
    Itinerary,
    Preference,
    Price,
    RoutePlannerError,
    ScheduleLoadError,
    SelfLoopError,
    Ticket,
    TripType,
    UnknownKeyError,
    ValidationError,
)
from .graph import (
    Graph,
    add_connection,
    add_location,
    build_graph,
    create_graph,
    find_all_paths,
)
from .itinerary import build_itinerary, compute_duration, compute_price
from .selection import select_best, select_cheapest, select_fastest
from .times import minutes_between

__all__ = [
    "ClientRequest",
    "Connection",
    "Duration",
    "DuplicateKeyError",
    "Graph",
    "GraphError",
    "InvalidArgumentError",
    "Itinerary",
    "Preference",
    "Price",
    "RoutePlannerError",
    "ScheduleLoadError",
    "SelfLoopError",
    "Ticket",
    "TripType",
    "UnknownKeyError",
    "ValidationError",
    "add_connection",
    "add_location",
    "build_graph",
    "build_itinerary",
    "compute_duration",
    "compute_price",
    "create_graph",
    "find_all_paths",
    "minutes_between",
    "select_best",
    "select_cheapest",
    "select_fastest",
]
