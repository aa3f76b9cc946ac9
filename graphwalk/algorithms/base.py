from __future__ import annotations

from typing import Callable

from graphwalk.graph.readers import VertexID

#: Numeric weight of a connection or accumulated weight of a path.
Cost = float

#: Weight of the connection leaving the first vertex towards the second.
#: Must be deterministic for the duration of one algorithm call.
WeightFunc = Callable[[VertexID, VertexID], Cost]

#: Advisory pruning predicate ``(vertex, accumulated_weight) -> bool``.
#: Returning True means "do not expand further from this vertex".
StopFunc = Callable[[VertexID, Cost], bool]


def simple_weight(u: VertexID, v: VertexID) -> Cost:
    """Unit weight for every connection (path length in hops)."""
    return 1.0
