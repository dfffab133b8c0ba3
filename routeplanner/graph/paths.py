"""Exhaustive simple-path search between two locations.

The search is depth-first. A connection is only followed when its
destination is neither the starting location nor a location already
reached on the current path, which guarantees termination on cyclic
networks and that every returned path is simple.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..domain.errors import make_invalid_argument_error
from ..domain.models import Connection
from .store import Graph

Path = Tuple[Connection, ...]


def find_all_paths(
    graph: Graph,
    origin: str,
    destination: str,
    max_legs: Optional[int] = None,
) -> List[Path]:
    """Return every simple path of connections from origin to destination.

    Parameters
    ----------
    graph:
        Connection network as built by ``build_graph``.
    origin:
        Identifier of the departure location.
    destination:
        Identifier of the arrival location.
    max_legs:
        Optional upper bound on the number of connections in a path.

    Returns
    -------
    list[tuple[Connection, ...]]
        Paths in depth-first discovery order, following the order in
        which connections were registered at each location. Returns an
        empty list when no path exists.
    """
    if not isinstance(graph, Graph):
        raise make_invalid_argument_error("find_all_paths", "graph", graph, "Graph")
    if not isinstance(origin, str) or not origin:
        raise make_invalid_argument_error("find_all_paths", "origin", origin)
    if not isinstance(destination, str) or not destination:
        raise make_invalid_argument_error("find_all_paths", "destination", destination)
    if max_legs is not None and (
        isinstance(max_legs, bool) or not isinstance(max_legs, int) or max_legs < 1
    ):
        raise make_invalid_argument_error(
            "find_all_paths", "max_legs", max_legs, "positive integer"
        )

    if graph.is_empty() or origin not in graph or origin == destination:
        return []

    paths: List[Path] = []
    # Frames are popped last-in first-out; children are pushed in reverse
    # so they are explored in registration order.
    stack: List[Tuple[str, Path]] = [(origin, ())]

    while stack:
        location, path = stack.pop()

        if location == destination:
            paths.append(path)
            continue

        if max_legs is not None and len(path) >= max_legs:
            continue

        reached = {connection.destination for connection in path}
        children = [
            (connection.destination, path + (connection,))
            for connection in graph.connections_from(location)
            if connection.destination != origin
            and connection.destination not in reached
        ]
        stack.extend(reversed(children))

    return paths
