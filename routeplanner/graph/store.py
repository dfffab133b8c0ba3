"""In-memory attributed directed multigraph.

Nodes are locations keyed by a non-empty string. Edges are connections
between two distinct nodes, keyed by a generated id. The graph owns
every Edge; node indices only hold edge keys, so the outgoing index of
a node and the incoming index of its peer never share mutable state.

Every public method validates its arguments before mutating anything,
so a failed call leaves the graph exactly as it was.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    MutableMapping,
    Optional,
)

from ..domain.errors import (
    DuplicateKeyError,
    SelfLoopError,
    make_invalid_argument_error,
    make_unknown_key_error,
)
from ..domain.models import Connection

CONNECTION_ATTRIBUTE = "connection"


@dataclass
class Node:
    """A location in the graph.

    Attributes:
        key: The location identifier
        attributes: Free-form attribute bag
        outgoing: Destination key -> keys of edges leaving this node
        incoming: Origin key -> keys of edges arriving at this node
    """

    key: str
    attributes: Dict[str, Any] = field(default_factory=dict)
    outgoing: Dict[str, List[str]] = field(default_factory=dict)
    incoming: Dict[str, List[str]] = field(default_factory=dict)


@dataclass
class Edge:
    """A directed edge between two nodes."""

    key: str
    source: str
    target: str
    attributes: Dict[str, Any] = field(default_factory=dict)
    sequence: int = 0

    @property
    def connection(self) -> Optional[Connection]:
        return self.attributes.get(CONNECTION_ATTRIBUTE)


def _check_key(method: str, argument: str, value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise make_invalid_argument_error(method, argument, value)
    return value


def _check_attributes(method: str, value: Any) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise make_invalid_argument_error(method, "attributes", value, "mapping")
    return dict(value)


def _check_updater(method: str, value: Any) -> Callable[[Any], Any]:
    if not callable(value):
        raise make_invalid_argument_error(method, "updater", value, "callable")
    return value


class Graph:
    """Directed multigraph of locations and connections.

    Usage:
        graph = Graph()
        graph.add_node("CDG")
        graph.add_node("YUL")
        edge = graph.add_edge("CDG", "YUL", {"connection": flight})
    """

    def __init__(self) -> None:
        self._nodes: Dict[str, Node] = {}
        self._edges: Dict[str, Edge] = {}
        self._edge_ids = itertools.count(1)

    # -- counts ----------------------------------------------------------

    @property
    def order(self) -> int:
        """Number of nodes."""
        return len(self._nodes)

    @property
    def size(self) -> int:
        """Number of edges."""
        return len(self._edges)

    def is_empty(self) -> bool:
        return self.order == 0 and self.size == 0

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._nodes

    def __len__(self) -> int:
        return self.order

    # -- nodes -----------------------------------------------------------

    def has_node(self, key: str) -> bool:
        _check_key("Graph.has_node", "key", key)
        return key in self._nodes

    def add_node(self, key: str, attributes: Optional[Mapping[str, Any]] = None) -> str:
        """Register a new node and return its key.

        Raises:
            InvalidArgumentError: If key is not a non-empty string.
            DuplicateKeyError: If a node with this key already exists.
        """
        method = "Graph.add_node"
        _check_key(method, "key", key)
        bag = _check_attributes(method, attributes)
        if key in self._nodes:
            raise DuplicateKeyError(f'"{method}" node {{{key}}} already exists.', key=key)

        self._nodes[key] = Node(key=key, attributes=bag)
        return key

    def get_node(self, key: str) -> Node:
        return self._node("Graph.get_node", key)

    def nodes(self) -> Iterator[str]:
        return iter(self._nodes)

    def get_node_attribute(self, key: str, name: str) -> Any:
        method = "Graph.get_node_attribute"
        _check_key(method, "name", name)
        return self._node(method, key).attributes.get(name)

    def get_node_attributes(self, key: str) -> Dict[str, Any]:
        return self._node("Graph.get_node_attributes", key).attributes

    def set_node_attribute(self, key: str, name: str, value: Any) -> None:
        method = "Graph.set_node_attribute"
        _check_key(method, "name", name)
        self._node(method, key).attributes[name] = value

    def set_node_attributes(self, key: str, attributes: Mapping[str, Any]) -> None:
        method = "Graph.set_node_attributes"
        if attributes is None:
            raise make_invalid_argument_error(method, "attributes", attributes, "mapping")
        bag = _check_attributes(method, attributes)
        self._node(method, key).attributes = bag

    def update_node_attribute(
        self, key: str, name: str, updater: Callable[[Any], Any]
    ) -> None:
        method = "Graph.update_node_attribute"
        _check_key(method, "name", name)
        _check_updater(method, updater)
        self._update(self._node(method, key).attributes, name, updater)

    # -- edges -----------------------------------------------------------

    def has_edge(self, key: str) -> bool:
        _check_key("Graph.has_edge", "key", key)
        return key in self._edges

    def add_edge(
        self,
        source: str,
        target: str,
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Link two existing nodes and return the generated edge key.

        Raises:
            InvalidArgumentError: If source or target is not a non-empty string.
            UnknownKeyError: If source or target is not a registered node.
            SelfLoopError: If source and target are the same node.
        """
        method = "Graph.add_edge"
        _check_key(method, "source", source)
        _check_key(method, "target", target)
        bag = _check_attributes(method, attributes)
        source_node = self._node(method, source)
        target_node = self._node(method, target)
        if source == target:
            raise SelfLoopError(f'"{method}" can not link node {{{source}}} to itself.', key=source)

        sequence = next(self._edge_ids)
        key = f"edge-{sequence}"
        self._edges[key] = Edge(
            key=key, source=source, target=target, attributes=bag, sequence=sequence
        )
        source_node.outgoing.setdefault(target, []).append(key)
        target_node.incoming.setdefault(source, []).append(key)
        return key

    def get_edge(self, key: str) -> Edge:
        return self._edge("Graph.get_edge", key)

    def edges(self) -> Iterator[str]:
        return iter(self._edges)

    def get_edge_attribute(self, key: str, name: str) -> Any:
        method = "Graph.get_edge_attribute"
        _check_key(method, "name", name)
        return self._edge(method, key).attributes.get(name)

    def get_edge_attributes(self, key: str) -> Dict[str, Any]:
        return self._edge("Graph.get_edge_attributes", key).attributes

    def set_edge_attribute(self, key: str, name: str, value: Any) -> None:
        method = "Graph.set_edge_attribute"
        _check_key(method, "name", name)
        self._edge(method, key).attributes[name] = value

    def set_edge_attributes(self, key: str, attributes: Mapping[str, Any]) -> None:
        method = "Graph.set_edge_attributes"
        if attributes is None:
            raise make_invalid_argument_error(method, "attributes", attributes, "mapping")
        bag = _check_attributes(method, attributes)
        self._edge(method, key).attributes = bag

    def update_edge_attribute(
        self, key: str, name: str, updater: Callable[[Any], Any]
    ) -> None:
        method = "Graph.update_edge_attribute"
        _check_key(method, "name", name)
        _check_updater(method, updater)
        self._update(self._edge(method, key).attributes, name, updater)

    def out_edges(self, key: str) -> List[Edge]:
        """Edges leaving a node, in registration order."""
        node = self._node("Graph.out_edges", key)
        edges = [self._edges[edge_key] for keys in node.outgoing.values() for edge_key in keys]
        return sorted(edges, key=lambda edge: edge.sequence)

    def in_edges(self, key: str) -> List[Edge]:
        """Edges arriving at a node, in registration order."""
        node = self._node("Graph.in_edges", key)
        edges = [self._edges[edge_key] for keys in node.incoming.values() for edge_key in keys]
        return sorted(edges, key=lambda edge: edge.sequence)

    # -- connections -----------------------------------------------------

    def add_location(self, key: str) -> str:
        return self.add_node(key)

    def add_connection(self, connection: Connection) -> str:
        """Store a connection on a new edge between its endpoints."""
        if not isinstance(connection, Connection):
            raise make_invalid_argument_error(
                "Graph.add_connection", "connection", connection, "Connection"
            )
        return self.add_edge(
            connection.origin,
            connection.destination,
            {CONNECTION_ATTRIBUTE: connection},
        )

    def connections_from(self, key: str) -> List[Connection]:
        """Connections departing from a location, in registration order."""
        return [
            edge.connection
            for edge in self.out_edges(key)
            if edge.connection is not None
        ]

    def render(self) -> str:
        lines = ["Graph {"]
        for key in self._nodes:
            lines.append(f"  [{key}]")
            for index, edge in enumerate(self.out_edges(key), start=1):
                lines.append(f"    ({index}) {edge.source}->{edge.target}")
        lines.append("}")
        return "\n".join(lines) + "\n"

    # -- internals -------------------------------------------------------

    def _node(self, method: str, key: str) -> Node:
        _check_key(method, "key", key)
        node = self._nodes.get(key)
        if node is None:
            raise make_unknown_key_error(method, "node", key)
        return node

    def _edge(self, method: str, key: str) -> Edge:
        _check_key(method, "key", key)
        edge = self._edges.get(key)
        if edge is None:
            raise make_unknown_key_error(method, "edge", key)
        return edge

    @staticmethod
    def _update(
        bag: MutableMapping[str, Any], name: str, updater: Callable[[Any], Any]
    ) -> None:
        bag[name] = updater(bag.get(name))


def create_graph() -> Graph:
    return Graph()


def add_location(graph: Graph, key: str) -> str:
    if not isinstance(graph, Graph):
        raise make_invalid_argument_error("add_location", "graph", graph, "Graph")
    return graph.add_node(key)


def add_connection(graph: Graph, source: str, target: str, payload: Connection) -> str:
    """Add ``payload`` as an edge from ``source`` to ``target``."""
    if not isinstance(graph, Graph):
        raise make_invalid_argument_error("add_connection", "graph", graph, "Graph")
    if not isinstance(payload, Connection):
        raise make_invalid_argument_error(
            "add_connection", "payload", payload, "Connection"
        )
    return graph.add_edge(source, target, {CONNECTION_ATTRIBUTE: payload})


def build_graph(locations: Iterable[str], connections: Iterable[Connection]) -> Graph:
    """Create a graph holding every location and connection.

    Locations are deduplicated; connection endpoints missing from
    ``locations`` are added as well.
    """
    graph = Graph()
    connection_list = list(connections)
    for connection in connection_list:
        if not isinstance(connection, Connection):
            raise make_invalid_argument_error(
                "build_graph", "connections", connection, "Connection"
            )
    for key in itertools.chain(
        locations,
        (endpoint for c in connection_list for endpoint in (c.origin, c.destination)),
    ):
        if key not in graph:
            graph.add_node(key)
    for connection in connection_list:
        graph.add_connection(connection)
    return graph
