"""NetworkX-backed graph readers.

Adapters exposing ``networkx`` graphs through the reader protocols of
``graphwalk.graph.readers``. The wrapped graphs are not copied; callers must
not mutate them while a traversal is running.

Example:
    >>> import networkx as nx
    >>> from graphwalk.graph.nx_readers import NxDirectedReader
    >>> from graphwalk.algorithms import check_path, directed_neighbours
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", cost=2)
    >>> G.add_edge("B", "C", cost=3)
    >>> reader = NxDirectedReader(G)
    >>> check_path(directed_neighbours(reader), "A", "C", None, reader.weight_func())
    (5.0, True)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator, Union

from graphwalk.algorithms.base import WeightFunc
from graphwalk.graph.readers import Connection, VertexID

if TYPE_CHECKING:
    import networkx as nx

    NxDirected = Union[nx.DiGraph, nx.MultiDiGraph]
    NxUndirected = Union[nx.Graph, nx.MultiGraph]
else:
    NxDirected = Any
    NxUndirected = Any


def _missing(vertex: VertexID) -> KeyError:
    return KeyError(f"Vertex '{vertex}' is not in the graph.")


def attr_weight(graph: Any, attr: str = "cost", default: float = 1.0) -> WeightFunc:
    """Build a weight function reading an edge attribute of a networkx graph.

    For multigraphs the smallest value among parallel edges is used.

    Args:
        graph: Any networkx graph.
        attr: Edge attribute holding the weight.
        default: Weight of edges without ``attr``.

    Returns:
        Callable ``(u, v) -> float`` for the connection leaving ``u`` towards ``v``.

    Raises:
        KeyError: (from the returned callable) if ``u`` and ``v`` are not connected.
    """
    multigraph = graph.is_multigraph()

    def weight(u: VertexID, v: VertexID) -> float:
        data = graph.get_edge_data(u, v)
        if data is None:
            raise KeyError(f"No connection '{u}' -> '{v}' in the graph.")
        if multigraph:
            return min(float(d.get(attr, default)) for d in data.values())
        return float(data.get(attr, default))

    return weight


class NxDirectedReader:
    """Full directed reader over ``nx.DiGraph`` or ``nx.MultiDiGraph``."""

    def __init__(self, graph: NxDirected) -> None:
        if not graph.is_directed():
            raise TypeError("NxDirectedReader requires a directed networkx graph.")
        self.graph = graph

    def get_accessors(self, vertex: VertexID) -> Iterator[VertexID]:
        if vertex not in self.graph:
            raise _missing(vertex)
        return iter(self.graph.successors(vertex))

    def iter_vertices(self) -> Iterator[VertexID]:
        return iter(self.graph.nodes)

    def vertex_count(self) -> int:
        return self.graph.number_of_nodes()

    def iter_arcs(self) -> Iterator[Connection]:
        # One Connection per parallel arc for multigraphs
        for tail, head in self.graph.edges():
            yield Connection(tail=tail, head=head)

    def weight_func(self, attr: str = "cost", default: float = 1.0) -> WeightFunc:
        return attr_weight(self.graph, attr, default)


class NxUndirectedReader:
    """Undirected reader over ``nx.Graph`` or ``nx.MultiGraph``."""

    def __init__(self, graph: NxUndirected) -> None:
        if graph.is_directed():
            raise TypeError("NxUndirectedReader requires an undirected networkx graph.")
        self.graph = graph

    def get_neighbours(self, vertex: VertexID) -> Iterator[VertexID]:
        if vertex not in self.graph:
            raise _missing(vertex)
        return iter(self.graph.neighbors(vertex))

    def weight_func(self, attr: str = "cost", default: float = 1.0) -> WeightFunc:
        return attr_weight(self.graph, attr, default)


class NxMixedReader:
    """Mixed reader combining a directed arc graph with an undirected edge graph.

    A vertex present in only one of the two graphs has no connections of the
    other kind. A vertex present in neither raises ``KeyError``.
    """

    def __init__(self, arcs: NxDirected, edges: NxUndirected) -> None:
        if not arcs.is_directed():
            raise TypeError("arcs must be a directed networkx graph.")
        if edges.is_directed():
            raise TypeError("edges must be an undirected networkx graph.")
        self.arcs = arcs
        self.edges = edges

    def _check(self, vertex: VertexID) -> None:
        if vertex not in self.arcs and vertex not in self.edges:
            raise _missing(vertex)

    def get_accessors(self, vertex: VertexID) -> Iterator[VertexID]:
        self._check(vertex)
        if vertex not in self.arcs:
            return iter(())
        return iter(self.arcs.successors(vertex))

    def get_neighbours(self, vertex: VertexID) -> Iterator[VertexID]:
        self._check(vertex)
        if vertex not in self.edges:
            return iter(())
        return iter(self.edges.neighbors(vertex))

    def weight_func(self, attr: str = "cost", default: float = 1.0) -> WeightFunc:
        """Weight of ``u -> v``, taken from the arc graph when the arc exists."""
        arc_weight = attr_weight(self.arcs, attr, default)
        edge_weight = attr_weight(self.edges, attr, default)

        def weight(u: VertexID, v: VertexID) -> float:
            if self.arcs.has_edge(u, v):
                return arc_weight(u, v)
            return edge_weight(u, v)

        return weight
