"""Traversal algorithms over reader-protocol graphs.

- ``check_path``: Dijkstra-like reachability and minimal path weight.
- ``all_paths`` / ``iter_simple_paths``: every simple path between two vertices.
- ``bellman_ford``: single-source shortest distances with negative weights.
"""

from graphwalk.algorithms.all_paths import (
    PathStream,
    all_directed_paths,
    all_mixed_paths,
    all_paths,
    all_undirected_paths,
    iter_simple_paths,
)
from graphwalk.algorithms.base import Cost, StopFunc, WeightFunc, simple_weight
from graphwalk.algorithms.bellman_ford import bellman_ford
from graphwalk.algorithms.check_path import (
    check_directed_path,
    check_mixed_path,
    check_path,
    check_undirected_path,
)
from graphwalk.algorithms.neighbours import (
    AllNeighboursExtractor,
    DirectedNeighboursExtractor,
    MixedNeighboursExtractor,
    UndirectedNeighboursExtractor,
    directed_neighbours,
    mixed_neighbours,
    undirected_neighbours,
)

__all__ = [
    "AllNeighboursExtractor",
    "DirectedNeighboursExtractor",
    "UndirectedNeighboursExtractor",
    "MixedNeighboursExtractor",
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
    "Cost",
    "StopFunc",
    "WeightFunc",
    "simple_weight",
]
