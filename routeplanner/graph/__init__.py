"""Graph-related utilities for representing the connection network.

This subpackage contains the attributed multigraph holding locations
and connections, and the path search running on top of it.
"""

from .paths import Path, find_all_paths
from .store import (
    CONNECTION_ATTRIBUTE,
    Edge,
    Graph,
    Node,
    add_connection,
    add_location,
    build_graph,
    create_graph,
)

__all__ = [
    "CONNECTION_ATTRIBUTE",
    "Edge",
    "Graph",
    "Node",
    "Path",
    "add_connection",
    "add_location",
    "build_graph",
    "create_graph",
    "find_all_paths",
]
