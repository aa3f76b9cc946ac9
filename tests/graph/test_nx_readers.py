"""Tests for graphwalk.graph.nx_readers NetworkX adapters."""

import networkx as nx
import pytest

from graphwalk.graph.nx_readers import (
    NxDirectedReader,
    NxMixedReader,
    NxUndirectedReader,
    attr_weight,
)
from graphwalk.graph.readers import (
    Connection,
    DirectedGraphArcsReader,
    DirectedGraphReader,
    MixedGraphConnectionsReader,
    UndirectedGraphEdgesReader,
)


class TestNxDirectedReader:
    """Tests for NxDirectedReader."""

    def test_satisfies_directed_protocols(self):
        reader = NxDirectedReader(nx.DiGraph())
        assert isinstance(reader, DirectedGraphArcsReader)
        assert isinstance(reader, DirectedGraphReader)

    def test_rejects_undirected_graph(self):
        with pytest.raises(TypeError):
            NxDirectedReader(nx.Graph())

    def test_accessors_follow_arc_direction(self):
        reader = NxDirectedReader(nx.DiGraph([("A", "B"), ("C", "A")]))
        assert list(reader.get_accessors("A")) == ["B"]
        assert list(reader.get_accessors("B")) == []

    def test_unknown_vertex_raises_key_error(self):
        reader = NxDirectedReader(nx.DiGraph([("A", "B")]))
        with pytest.raises(KeyError, match="Z"):
            reader.get_accessors("Z")

    def test_vertices_and_count(self):
        g = nx.DiGraph([("A", "B")])
        g.add_node("C")
        reader = NxDirectedReader(g)
        assert list(reader.iter_vertices()) == ["A", "B", "C"]
        assert reader.vertex_count() == 3

    def test_arcs_are_connections(self):
        reader = NxDirectedReader(nx.DiGraph([("A", "B"), ("B", "C")]))
        assert list(reader.iter_arcs()) == [
            Connection(tail="A", head="B"),
            Connection(tail="B", head="C"),
        ]

    def test_multigraph_parallel_arcs(self):
        g = nx.MultiDiGraph()
        g.add_edge("A", "B", cost=3)
        g.add_edge("A", "B", cost=1)
        reader = NxDirectedReader(g)
        assert list(reader.iter_arcs()) == [Connection("A", "B"), Connection("A", "B")]
        assert list(reader.get_accessors("A")) == ["B"]
        assert reader.weight_func()("A", "B") == 1.0

    def test_weight_func_attr_and_default(self):
        g = nx.DiGraph()
        g.add_edge("A", "B", cost=4, latency=7)
        g.add_edge("B", "C")
        reader = NxDirectedReader(g)
        assert reader.weight_func()("A", "B") == 4.0
        assert reader.weight_func("latency")("A", "B") == 7.0
        assert reader.weight_func()("B", "C") == 1.0
        assert reader.weight_func(default=2.5)("B", "C") == 2.5

    def test_weight_func_missing_connection(self):
        reader = NxDirectedReader(nx.DiGraph([("A", "B")]))
        with pytest.raises(KeyError):
            reader.weight_func()("B", "A")


class TestNxUndirectedReader:
    """Tests for NxUndirectedReader."""

    def test_satisfies_protocol(self):
        assert isinstance(NxUndirectedReader(nx.Graph()), UndirectedGraphEdgesReader)

    def test_rejects_directed_graph(self):
        with pytest.raises(TypeError):
            NxUndirectedReader(nx.DiGraph())

    def test_neighbours_both_ways(self):
        reader = NxUndirectedReader(nx.Graph([("A", "B")]))
        assert list(reader.get_neighbours("A")) == ["B"]
        assert list(reader.get_neighbours("B")) == ["A"]

    def test_unknown_vertex_raises_key_error(self):
        with pytest.raises(KeyError):
            NxUndirectedReader(nx.Graph()).get_neighbours("A")

    def test_weight_is_symmetric(self):
        g = nx.Graph()
        g.add_edge("A", "B", cost=3)
        weight = NxUndirectedReader(g).weight_func()
        assert weight("A", "B") == weight("B", "A") == 3.0


class TestNxMixedReader:
    """Tests for NxMixedReader."""

    def test_satisfies_protocol(self, mixed_reader):
        assert isinstance(mixed_reader, MixedGraphConnectionsReader)

    def test_rejects_wrong_directedness(self):
        with pytest.raises(TypeError):
            NxMixedReader(nx.Graph(), nx.Graph())
        with pytest.raises(TypeError):
            NxMixedReader(nx.DiGraph(), nx.DiGraph())

    def test_accessors_and_neighbours(self, mixed_reader):
        assert list(mixed_reader.get_accessors("A")) == ["B"]
        assert list(mixed_reader.get_neighbours("B")) == ["C"]

    def test_one_sided_vertices(self, mixed_reader):
        # C only has an undirected edge, A only an arc
        assert list(mixed_reader.get_accessors("C")) == []
        assert list(mixed_reader.get_neighbours("A")) == []

    def test_unknown_vertex_raises_key_error(self, mixed_reader):
        with pytest.raises(KeyError):
            mixed_reader.get_accessors("Z")
        with pytest.raises(KeyError):
            mixed_reader.get_neighbours("Z")

    def test_weight_prefers_arcs(self):
        arcs = nx.DiGraph()
        arcs.add_edge("A", "B", cost=5)
        edges = nx.Graph()
        edges.add_edge("A", "B", cost=1)
        edges.add_edge("B", "C", cost=2)
        weight = NxMixedReader(arcs, edges).weight_func()
        assert weight("A", "B") == 5.0
        assert weight("B", "A") == 1.0
        assert weight("C", "B") == 2.0


@pytest.fixture
def mixed_reader():
    arcs = nx.DiGraph([("A", "B")])
    edges = nx.Graph([("B", "C")])
    return NxMixedReader(arcs, edges)


def test_attr_weight_on_plain_graph():
    g = nx.DiGraph()
    g.add_edge(1, 2, weight=0.5)
    assert attr_weight(g, "weight")(1, 2) == 0.5
