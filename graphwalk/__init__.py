"""graphwalk: graph traversal over read-only capability interfaces.

graphwalk answers reachability and minimal-weight questions, enumerates
simple paths and computes single-source shortest distances on any graph that
exposes the small reader protocols in ``graphwalk.graph.readers``.

Primary API:
    check_path() - Dijkstra-like path existence and weight check
    all_paths() - Lazy, cancellable stream of all simple paths
    bellman_ford() - Single-source distances tolerating negative weights
    NxDirectedReader, NxUndirectedReader, NxMixedReader - NetworkX adapters

Example:
    import networkx as nx
    from graphwalk import NxDirectedReader, all_paths, directed_neighbours

    G = nx.DiGraph([(1, 2), (2, 3), (1, 3)])
    with all_paths(directed_neighbours(NxDirectedReader(G)), 1, 3) as paths:
        for path in paths:
            print(path)
"""

from __future__ import annotations

from graphwalk import logging
from graphwalk._version import __version__
from graphwalk.algorithms import (
    AllNeighboursExtractor,
    PathStream,
    all_directed_paths,
    all_mixed_paths,
    all_paths,
    all_undirected_paths,
    bellman_ford,
    check_directed_path,
    check_mixed_path,
    check_path,
    check_undirected_path,
    directed_neighbours,
    iter_simple_paths,
    mixed_neighbours,
    simple_weight,
    undirected_neighbours,
)
from graphwalk.config import ENUMERATION_CONFIG, PathEnumerationConfig
from graphwalk.errors import GraphWalkError, NegativeCycleError, NegativeWeightError
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
    VertexID,
)

__all__ = [
    # Version
    "__version__",
    # Graph capabilities
    "VertexID",
    "Connection",
    "DirectedGraphArcsReader",
    "UndirectedGraphEdgesReader",
    "MixedGraphConnectionsReader",
    "DirectedGraphReader",
    # NetworkX adapters
    "NxDirectedReader",
    "NxUndirectedReader",
    "NxMixedReader",
    "attr_weight",
    # Algorithms
    "AllNeighboursExtractor",
    "directed_neighbours",
    "undirected_neighbours",
    "mixed_neighbours",
    "check_path",
    "check_directed_path",
    "check_undirected_path",
    "check_mixed_path",
    "PathStream",
    "all_paths",
    "iter_simple_paths",
    "all_directed_paths",
    "all_undirected_paths",
    "all_mixed_paths",
    "bellman_ford",
    "simple_weight",
    # Errors
    "GraphWalkError",
    "NegativeWeightError",
    "NegativeCycleError",
    # Configuration
    "PathEnumerationConfig",
    "ENUMERATION_CONFIG",
    # Utilities
    "logging",
]
