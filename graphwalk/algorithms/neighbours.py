"""Uniform outgoing-neighbour access across graph directionality.

Traversal algorithms ask one question of a graph: "where can I go from this
vertex?". The extractors below answer it for directed, undirected and mixed
readers so the algorithms are written once.

The mixed extractor chains accessors then neighbours without deduplication.
A vertex reachable through both relations is yielded twice; path search
tolerates this and path enumeration reports such paths once per route.
"""

from __future__ import annotations

from itertools import chain
from typing import Iterable, Protocol

from graphwalk.graph.readers import (
    DirectedGraphArcsReader,
    MixedGraphConnectionsReader,
    UndirectedGraphEdgesReader,
    VertexID,
)


class AllNeighboursExtractor(Protocol):
    def get_all_neighbours(self, node: VertexID) -> Iterable[VertexID]: ...


class DirectedNeighboursExtractor:
    """Follows outgoing arcs only."""

    def __init__(self, graph: DirectedGraphArcsReader) -> None:
        self.graph = graph

    def get_all_neighbours(self, node: VertexID) -> Iterable[VertexID]:
        return self.graph.get_accessors(node)

    def __repr__(self) -> str:
        return f"DirectedNeighboursExtractor({self.graph!r})"


class UndirectedNeighboursExtractor:
    """Follows undirected edges."""

    def __init__(self, graph: UndirectedGraphEdgesReader) -> None:
        self.graph = graph

    def get_all_neighbours(self, node: VertexID) -> Iterable[VertexID]:
        return self.graph.get_neighbours(node)

    def __repr__(self) -> str:
        return f"UndirectedNeighboursExtractor({self.graph!r})"


class MixedNeighboursExtractor:
    """Follows outgoing arcs, then undirected edges."""

    def __init__(self, graph: MixedGraphConnectionsReader) -> None:
        self.graph = graph

    def get_all_neighbours(self, node: VertexID) -> Iterable[VertexID]:
        return chain(self.graph.get_accessors(node), self.graph.get_neighbours(node))

    def __repr__(self) -> str:
        return f"MixedNeighboursExtractor({self.graph!r})"


def directed_neighbours(graph: DirectedGraphArcsReader) -> AllNeighboursExtractor:
    return DirectedNeighboursExtractor(graph)


def undirected_neighbours(graph: UndirectedGraphEdgesReader) -> AllNeighboursExtractor:
    return UndirectedNeighboursExtractor(graph)


def mixed_neighbours(graph: MixedGraphConnectionsReader) -> AllNeighboursExtractor:
    return MixedNeighboursExtractor(graph)
