"""Path existence and weight check with a Dijkstra-like search.

Notes:
    The search keeps no settled set. A vertex may be queued and expanded
    several times with different accumulated weights. With non-negative
    weights the frontier is processed in non-decreasing weight order, so the
    first time the destination is popped its weight is minimal. The
    destination itself is never expanded and never offered to ``stop_func``.

    Consequently, on a graph with cycles and an unreachable destination the
    frontier grows without bound unless ``stop_func`` prunes it. Callers
    traversing cyclic graphs should supply a ``stop_func`` (for example a
    weight ceiling) to guarantee termination.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import List, Optional, Tuple

from graphwalk.algorithms.base import Cost, StopFunc, WeightFunc, simple_weight
from graphwalk.algorithms.neighbours import (
    AllNeighboursExtractor,
    directed_neighbours,
    mixed_neighbours,
    undirected_neighbours,
)
from graphwalk.errors import NegativeWeightError
from graphwalk.graph.readers import (
    DirectedGraphArcsReader,
    MixedGraphConnectionsReader,
    UndirectedGraphEdgesReader,
    VertexID,
)
from graphwalk.logging import get_logger

logger = get_logger(__name__)


def check_path(
    extractor: AllNeighboursExtractor,
    src_node: VertexID,
    dst_node: VertexID,
    stop_func: Optional[StopFunc] = None,
    weight_func: WeightFunc = simple_weight,
) -> Tuple[Cost, bool]:
    """Check whether ``dst_node`` is reachable from ``src_node``.

    Args:
        extractor: Supplies outgoing neighbours of each vertex.
        src_node: Start vertex.
        dst_node: Target vertex.
        stop_func: Optional predicate ``(vertex, weight) -> bool``. A candidate
            for which it returns True is not queued, so nothing beyond it is
            explored. It is never consulted for ``dst_node`` itself.
        weight_func: Weight of the connection ``u -> v``. Must be
            non-negative for every connection traversed.

    Returns:
        ``(weight, True)`` with the minimal accumulated weight when a path
        exists, ``(-1.0, False)`` otherwise. ``src_node == dst_node`` yields
        ``(0.0, True)`` without calling ``weight_func``.

    Raises:
        NegativeWeightError: If any traversed connection has a negative
            weight. The error carries ``head``, ``tail`` and ``weight`` plus
            the ``from`` and ``to`` of this call.
    """
    try:
        return _check_path(extractor, src_node, dst_node, stop_func, weight_func)
    except NegativeWeightError as exc:
        exc.add_context("from", src_node).add_context("to", dst_node)
        exc.add_note("Check path graph with Dijkstra algorithm")
        raise


def _check_path(
    extractor: AllNeighboursExtractor,
    src_node: VertexID,
    dst_node: VertexID,
    stop_func: Optional[StopFunc],
    weight_func: WeightFunc,
) -> Tuple[Cost, bool]:
    if src_node == dst_node:
        return 0.0, True

    # Sequence numbers break weight ties so vertex ids are never compared
    seq = count()
    min_pq: List[Tuple[Cost, int, VertexID]] = [(0.0, next(seq), src_node)]

    while min_pq:
        current_weight, _, node_id = heappop(min_pq)

        # First pop of the destination carries its minimal weight
        if node_id == dst_node:
            logger.debug(
                "Path %r -> %r found with weight %s", src_node, dst_node, current_weight
            )
            return current_weight, True

        for neighbor_id in extractor.get_all_neighbours(node_id):
            arc_weight = weight_func(node_id, neighbor_id)
            if arc_weight < 0:
                raise NegativeWeightError(
                    head=node_id, tail=neighbor_id, weight=arc_weight
                )

            new_weight = current_weight + arc_weight
            if (
                neighbor_id == dst_node
                or stop_func is None
                or not stop_func(neighbor_id, new_weight)
            ):
                heappush(min_pq, (new_weight, next(seq), neighbor_id))

    logger.debug("No path %r -> %r", src_node, dst_node)
    return -1.0, False


def check_directed_path(
    graph: DirectedGraphArcsReader,
    src_node: VertexID,
    dst_node: VertexID,
    stop_func: Optional[StopFunc] = None,
    weight_func: WeightFunc = simple_weight,
) -> bool:
    """Return True if ``dst_node`` is reachable along outgoing arcs."""
    _, exists = check_path(
        directed_neighbours(graph), src_node, dst_node, stop_func, weight_func
    )
    return exists


def check_undirected_path(
    graph: UndirectedGraphEdgesReader,
    src_node: VertexID,
    dst_node: VertexID,
    stop_func: Optional[StopFunc] = None,
    weight_func: WeightFunc = simple_weight,
) -> bool:
    """Return True if ``dst_node`` is reachable along undirected edges."""
    _, exists = check_path(
        undirected_neighbours(graph), src_node, dst_node, stop_func, weight_func
    )
    return exists


def check_mixed_path(
    graph: MixedGraphConnectionsReader,
    src_node: VertexID,
    dst_node: VertexID,
    stop_func: Optional[StopFunc] = None,
    weight_func: WeightFunc = simple_weight,
) -> bool:
    """Return True if ``dst_node`` is reachable along arcs and edges."""
    _, exists = check_path(
        mixed_neighbours(graph), src_node, dst_node, stop_func, weight_func
    )
    return exists
