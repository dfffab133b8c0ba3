import pytest

from routeplanner.domain.errors import (
    DuplicateKeyError,
    GraphError,
    InvalidArgumentError,
    SelfLoopError,
    UnknownKeyError,
)
from routeplanner.graph import (
    CONNECTION_ATTRIBUTE,
    Edge,
    Graph,
    Node,
    add_connection,
    add_location,
    build_graph,
    create_graph,
)

NON_STRING_VALUES = [True, 0, 123, 1.5, None, [], ["a"], {}, {"a": 1}, object()]


def test_new_graph_is_empty():
    graph = create_graph()

    assert graph.order == 0
    assert graph.size == 0
    assert graph.is_empty()


def test_add_node_returns_key_and_stores_node():
    graph = Graph()

    key = graph.add_node("CDG", {"city": "Paris"})
    node = graph.get_node(key)

    assert key == "CDG"
    assert isinstance(node, Node)
    assert node.attributes == {"city": "Paris"}
    assert node.outgoing == {}
    assert node.incoming == {}
    assert graph.order == 1
    assert not graph.is_empty()


@pytest.mark.parametrize("value", NON_STRING_VALUES + [""])
def test_add_node_rejects_invalid_key(value):
    graph = Graph()

    with pytest.raises(InvalidArgumentError):
        graph.add_node(value)
    assert graph.is_empty()


def test_add_node_rejects_non_mapping_attributes():
    graph = Graph()

    with pytest.raises(InvalidArgumentError):
        graph.add_node("CDG", ["not", "a", "mapping"])
    assert graph.order == 0


def test_add_node_rejects_duplicate_key():
    graph = Graph()
    graph.add_node("CDG")

    with pytest.raises(DuplicateKeyError) as excinfo:
        graph.add_node("CDG")

    assert excinfo.value.key == "CDG"
    assert isinstance(excinfo.value, GraphError)
    assert graph.order == 1


@pytest.mark.parametrize("value", NON_STRING_VALUES + [""])
def test_has_node_rejects_invalid_key(value):
    with pytest.raises(InvalidArgumentError):
        Graph().has_node(value)


def test_has_node():
    graph = Graph()
    assert graph.has_node("CDG") is False
    graph.add_node("CDG")
    assert graph.has_node("CDG") is True
    assert "CDG" in graph
    assert 42 not in graph


def test_add_edge_registers_both_indices():
    graph = Graph()
    graph.add_node("A")
    graph.add_node("B")

    key = graph.add_edge("A", "B", {"name": "AF1"})

    edge = graph.get_edge(key)
    assert isinstance(edge, Edge)
    assert (edge.source, edge.target) == ("A", "B")
    assert graph.get_node("A").outgoing == {"B": [key]}
    assert graph.get_node("B").incoming == {"A": [key]}
    assert graph.get_node("A").incoming == {}
    assert graph.get_node("B").outgoing == {}
    assert graph.size == 1


def test_add_edge_keys_are_unique_and_sequential():
    graph = Graph()
    graph.add_node("A")
    graph.add_node("B")

    first = graph.add_edge("A", "B")
    second = graph.add_edge("A", "B")
    third = graph.add_edge("B", "A")

    assert len({first, second, third}) == 3
    assert [first, second, third] == ["edge-1", "edge-2", "edge-3"]
    assert graph.get_node("A").outgoing["B"] == [first, second]
    assert graph.get_node("B").incoming["A"] == [first, second]


def test_indices_do_not_share_state():
    graph = Graph()
    graph.add_node("A")
    graph.add_node("B")
    graph.add_edge("A", "B")

    graph.get_node("A").outgoing["B"].append("bogus")

    assert graph.get_node("B").incoming["A"] == ["edge-1"]


def test_add_edge_rejects_self_loop():
    graph = Graph()
    graph.add_node("A")

    with pytest.raises(SelfLoopError):
        graph.add_edge("A", "A")
    assert graph.size == 0
    assert graph.get_node("A").outgoing == {}


def test_add_edge_rejects_unknown_node():
    graph = Graph()
    graph.add_node("A")

    with pytest.raises(UnknownKeyError) as excinfo:
        graph.add_edge("A", "Z")

    assert excinfo.value.kind == "node"
    assert excinfo.value.key == "Z"
    assert graph.size == 0

    with pytest.raises(UnknownKeyError):
        graph.add_edge("Z", "A")


@pytest.mark.parametrize("value", NON_STRING_VALUES + [""])
def test_add_edge_rejects_invalid_endpoints(value):
    graph = Graph()
    graph.add_node("A")

    with pytest.raises(InvalidArgumentError):
        graph.add_edge(value, "A")
    with pytest.raises(InvalidArgumentError):
        graph.add_edge("A", value)


def test_failed_add_edge_does_not_consume_an_edge_key():
    graph = Graph()
    graph.add_node("A")
    graph.add_node("B")

    with pytest.raises(SelfLoopError):
        graph.add_edge("A", "A")

    assert graph.add_edge("A", "B") == "edge-1"


def test_node_attribute_accessors():
    graph = Graph()
    graph.add_node("A", {"a": 1})

    assert graph.get_node_attribute("A", "a") == 1
    assert graph.get_node_attribute("A", "missing") is None

    graph.set_node_attribute("A", "b", 2)
    graph.update_node_attribute("A", "a", lambda value: value + 10)
    assert graph.get_node_attributes("A") == {"a": 11, "b": 2}

    graph.set_node_attributes("A", {"c": 3})
    assert graph.get_node_attributes("A") == {"c": 3}


def test_node_attribute_accessors_validate_arguments():
    graph = Graph()
    graph.add_node("A")

    with pytest.raises(UnknownKeyError):
        graph.get_node_attribute("Z", "a")
    with pytest.raises(UnknownKeyError):
        graph.set_node_attribute("Z", "a", 1)
    with pytest.raises(UnknownKeyError):
        graph.get_node_attributes("Z")
    with pytest.raises(InvalidArgumentError):
        graph.get_node_attribute("A", "")
    with pytest.raises(InvalidArgumentError):
        graph.set_node_attribute("A", "", 1)
    with pytest.raises(InvalidArgumentError):
        graph.update_node_attribute("A", "a", "not callable")
    with pytest.raises(InvalidArgumentError):
        graph.set_node_attributes("A", None)
    with pytest.raises(InvalidArgumentError):
        graph.set_node_attributes("A", [1, 2])


def test_edge_attribute_accessors():
    graph = Graph()
    graph.add_node("A")
    graph.add_node("B")
    key = graph.add_edge("A", "B", {"seats": 10})

    graph.update_edge_attribute(key, "seats", lambda value: value - 1)
    graph.set_edge_attribute(key, "name", "AF1")

    assert graph.get_edge_attribute(key, "seats") == 9
    assert graph.get_edge_attributes(key) == {"seats": 9, "name": "AF1"}

    graph.set_edge_attributes(key, {})
    assert graph.get_edge_attributes(key) == {}


def test_edge_attribute_accessors_validate_arguments():
    graph = Graph()
    graph.add_node("A")
    graph.add_node("B")
    key = graph.add_edge("A", "B")

    with pytest.raises(UnknownKeyError) as excinfo:
        graph.get_edge_attribute("edge-99", "a")
    assert excinfo.value.kind == "edge"
    with pytest.raises(InvalidArgumentError):
        graph.get_edge_attribute(key, "")
    with pytest.raises(InvalidArgumentError):
        graph.update_edge_attribute(key, "a", None)
    with pytest.raises(InvalidArgumentError):
        graph.has_edge("")
    assert graph.has_edge(key)
    assert not graph.has_edge("edge-99")


def test_add_connection_stores_payload(make_connection):
    graph = Graph()
    graph.add_location("A")
    graph.add_location("B")
    flight = make_connection("A", "B")

    key = graph.add_connection(flight)

    assert graph.get_edge_attribute(key, CONNECTION_ATTRIBUTE) is flight
    assert graph.get_edge(key).connection is flight
    assert graph.connections_from("A") == [flight]
    assert graph.connections_from("B") == []


def test_connections_from_keeps_registration_order(make_connection):
    graph = build_graph(["A", "B", "C"], [])
    first = make_connection("A", "B")
    second = make_connection("A", "C")
    third = make_connection("A", "B")
    for flight in (first, second, third):
        graph.add_connection(flight)

    assert graph.connections_from("A") == [first, second, third]
    assert [edge.key for edge in graph.in_edges("B")] == ["edge-1", "edge-3"]


def test_module_level_helpers(make_connection):
    graph = create_graph()
    add_location(graph, "A")
    add_location(graph, "B")
    flight = make_connection("A", "B")

    key = add_connection(graph, "A", "B", flight)

    assert graph.get_edge(key).connection is flight

    with pytest.raises(InvalidArgumentError):
        add_location(None, "A")
    with pytest.raises(InvalidArgumentError):
        add_connection(graph, "A", "B", {"cost": 1})


def test_build_graph_adds_every_endpoint_once(make_connection):
    flights = [make_connection("A", "B"), make_connection("B", "C")]

    graph = build_graph(["A", "D", "A"], flights)

    assert sorted(graph.nodes()) == ["A", "B", "C", "D"]
    assert graph.size == 2


def test_build_graph_rejects_non_connections():
    with pytest.raises(InvalidArgumentError):
        build_graph(["A"], [("A", "B")])


def test_render_lists_outgoing_edges(make_connection):
    graph = build_graph([], [make_connection("A", "B"), make_connection("A", "B")])

    assert graph.render() == "Graph {\n  [A]\n    (1) A->B\n    (2) A->B\n  [B]\n}\n"


def test_in_edges_follow_incoming_index():
    graph = Graph()
    for key in ("A", "B", "C"):
        graph.add_node(key)
    first = graph.add_edge("A", "C")
    graph.add_edge("A", "B")
    second = graph.add_edge("B", "C")
    third = graph.add_edge("A", "C")

    edges = graph.in_edges("C")

    assert [edge.key for edge in edges] == [first, second, third]
    assert [edge.source for edge in edges] == ["A", "B", "A"]
    assert graph.in_edges("A") == []
    with pytest.raises(UnknownKeyError):
        graph.in_edges("Z")
