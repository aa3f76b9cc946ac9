"""Read-only graph capabilities consumed by graphwalk algorithms.

Algorithms never touch graph storage directly. They depend on these small
protocols, so any object with the right methods can be traversed: the
NetworkX adapters in ``graphwalk.graph.nx_readers`` or a caller's own
structure.

Arcs flow from ``tail`` to ``head``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterable, Protocol, runtime_checkable

VertexID = Hashable


@dataclass(frozen=True)
class Connection:
    """A directed arc ``tail -> head``."""

    tail: VertexID
    head: VertexID


@runtime_checkable
class DirectedGraphArcsReader(Protocol):
    def get_accessors(self, vertex: VertexID) -> Iterable[VertexID]:
        """Vertices reachable from ``vertex`` by one outgoing arc."""
        ...


@runtime_checkable
class UndirectedGraphEdgesReader(Protocol):
    def get_neighbours(self, vertex: VertexID) -> Iterable[VertexID]:
        """Vertices sharing an undirected edge with ``vertex``."""
        ...


@runtime_checkable
class MixedGraphConnectionsReader(Protocol):
    def get_accessors(self, vertex: VertexID) -> Iterable[VertexID]: ...

    def get_neighbours(self, vertex: VertexID) -> Iterable[VertexID]: ...


@runtime_checkable
class DirectedGraphReader(Protocol):
    """Full directed reader: adjacency plus vertex and arc enumeration."""

    def get_accessors(self, vertex: VertexID) -> Iterable[VertexID]: ...

    def iter_vertices(self) -> Iterable[VertexID]: ...

    def vertex_count(self) -> int: ...

    def iter_arcs(self) -> Iterable[Connection]: ...
