"""Single-source shortest paths with the Bellman-Ford algorithm.

Unlike ``check_path``, negative connection weights are accepted. Only a
negative cycle reachable from the source is rejected.
"""

from __future__ import annotations

import math
from typing import Dict

from graphwalk.algorithms.base import Cost, WeightFunc, simple_weight
from graphwalk.errors import NegativeCycleError
from graphwalk.graph.readers import DirectedGraphReader, VertexID
from graphwalk.logging import get_logger

logger = get_logger(__name__)


def bellman_ford(
    graph: DirectedGraphReader,
    source: VertexID,
    weight_func: WeightFunc = simple_weight,
) -> Dict[VertexID, Cost]:
    """Compute shortest distances from ``source`` to every vertex.

    Runs up to ``graph.vertex_count()`` relaxation passes over
    ``graph.iter_arcs()``, stopping early once a pass changes nothing, then
    one verification pass.

    Args:
        graph: Full directed reader.
        source: Source vertex.
        weight_func: Weight of the arc ``tail -> head``; may be negative.

    Returns:
        Mapping of every vertex to its distance from ``source``. Unreachable
        vertices map to ``math.inf``.

    Raises:
        KeyError: If ``source`` is not a vertex of ``graph``.
        NegativeCycleError: If a negative-weight cycle is reachable from
            ``source``. The error carries ``source`` and the ``tail``/``head``
            of an arc that could still be relaxed.
    """
    dist: Dict[VertexID, Cost] = {node: math.inf for node in graph.iter_vertices()}
    if source not in dist:
        raise KeyError(f"Source vertex '{source}' is not in the graph.")
    dist[source] = 0.0

    node_count = graph.vertex_count()
    for _ in range(node_count):
        changed = False
        for conn in graph.iter_arcs():
            candidate = dist[conn.tail] + weight_func(conn.tail, conn.head)
            if candidate < dist[conn.head]:
                dist[conn.head] = candidate
                changed = True
        if not changed:
            break

    for conn in graph.iter_arcs():
        if dist[conn.tail] + weight_func(conn.tail, conn.head) < dist[conn.head]:
            logger.debug(
                "Negative cycle reachable from %r through %r -> %r",
                source,
                conn.tail,
                conn.head,
            )
            raise NegativeCycleError(source=source, tail=conn.tail, head=conn.head)

    return dist
