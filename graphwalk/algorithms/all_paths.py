"""Enumeration of all simple paths between two vertices.

``iter_simple_paths`` is a synchronous generator performing backtracking DFS
with an explicit stack. ``all_paths`` runs the same search on a background
thread and hands completed paths to the consumer through a bounded queue,
so the consumer can start processing before enumeration finishes.

A ``PathStream`` is one-shot. Closing it (explicitly, by leaving a ``with``
block, or when it is garbage collected) cancels the producer: the DFS polls
the cancel flag before every expansion and the producer stops waiting on a
full queue. The consumer waits with the same poll interval, so a close from
another thread or a producer thread that dies ends a pending ``next()``.
"""

from __future__ import annotations

import queue
import threading
from typing import Callable, Iterator, List, Optional

from graphwalk.algorithms.neighbours import (
    AllNeighboursExtractor,
    directed_neighbours,
    mixed_neighbours,
    undirected_neighbours,
)
from graphwalk.config import ENUMERATION_CONFIG, PathEnumerationConfig
from graphwalk.errors import GraphWalkError
from graphwalk.graph.readers import (
    DirectedGraphArcsReader,
    MixedGraphConnectionsReader,
    UndirectedGraphEdgesReader,
    VertexID,
)
from graphwalk.logging import get_logger

logger = get_logger(__name__)

_EXHAUSTED = object()


def iter_simple_paths(
    extractor: AllNeighboursExtractor,
    src_node: VertexID,
    dst_node: VertexID,
    cancelled: Optional[Callable[[], bool]] = None,
) -> Iterator[List[VertexID]]:
    """Yield every simple path from ``src_node`` to ``dst_node``.

    Paths are yielded in DFS pre-order as fresh lists of vertices, starting
    with ``src_node`` and ending with ``dst_node``. No vertex repeats within a
    path. The zero-length path is never yielded, so ``src_node == dst_node``
    produces nothing.

    Args:
        extractor: Supplies outgoing neighbours of each vertex.
        src_node: Start vertex.
        dst_node: Target vertex.
        cancelled: Optional callable polled before each expansion; the
            generator returns as soon as it reports True.

    Yields:
        List of vertex ids per path.
    """
    if src_node == dst_node:
        return

    # Invariant: path and on_stack hold the same vertices; stack[i] iterates
    # the neighbours of path[i].
    path: List[VertexID] = [src_node]
    on_stack = {src_node}
    stack: List[Iterator[VertexID]] = [iter(extractor.get_all_neighbours(src_node))]

    while stack:
        if cancelled is not None and cancelled():
            return

        next_node = next(stack[-1], _EXHAUSTED)
        if next_node is _EXHAUSTED:
            # backtrack
            stack.pop()
            on_stack.discard(path.pop())
            continue

        if next_node in on_stack:
            continue

        if next_node == dst_node:
            yield path + [next_node]
            continue

        on_stack.add(next_node)
        path.append(next_node)
        stack.append(iter(extractor.get_all_neighbours(next_node)))


class _Failure:
    """Carries a producer exception to the consumer."""

    __slots__ = ("exc",)

    def __init__(self, exc: BaseException) -> None:
        self.exc = exc


_DONE = object()


def _publish(
    out: queue.Queue,
    cancel: threading.Event,
    item: object,
    poll_interval: float,
) -> bool:
    while not cancel.is_set():
        try:
            out.put(item, timeout=poll_interval)
            return True
        except queue.Full:
            continue
    return False


def _produce(
    extractor: AllNeighboursExtractor,
    src_node: VertexID,
    dst_node: VertexID,
    out: queue.Queue,
    cancel: threading.Event,
    poll_interval: float,
) -> None:
    # Runs on the producer thread. It must not reference the PathStream so
    # that a dropped stream can be collected and cancel the search.
    produced = 0
    try:
        for path in iter_simple_paths(extractor, src_node, dst_node, cancel.is_set):
            if not _publish(out, cancel, path, poll_interval):
                break
            produced += 1
    except Exception as exc:
        logger.debug("Path enumeration %r -> %r failed: %s", src_node, dst_node, exc)
        _publish(out, cancel, _Failure(exc), poll_interval)
        return

    if cancel.is_set():
        logger.debug(
            "Path enumeration %r -> %r cancelled after %d paths",
            src_node,
            dst_node,
            produced,
        )
        return

    logger.debug(
        "Path enumeration %r -> %r finished with %d paths",
        src_node,
        dst_node,
        produced,
    )
    _publish(out, cancel, _DONE, poll_interval)


class PathStream:
    """Lazy, one-shot stream of simple paths fed by a producer thread.

    Iterate it to receive paths. Use it as a context manager, or call
    ``close()``, to stop the producer when not consuming every path.
    Exceptions raised while enumerating (for example a ``KeyError`` for an
    unknown vertex) are re-raised from ``__next__``.
    """

    def __init__(
        self,
        extractor: AllNeighboursExtractor,
        src_node: VertexID,
        dst_node: VertexID,
        config: Optional[PathEnumerationConfig] = None,
    ) -> None:
        self.src_node = src_node
        self.dst_node = dst_node
        self._config = config or ENUMERATION_CONFIG
        self._queue: queue.Queue = queue.Queue(maxsize=self._config.queue_size)
        self._cancel = threading.Event()
        self._finished = False
        self._thread = threading.Thread(
            target=_produce,
            args=(
                extractor,
                src_node,
                dst_node,
                self._queue,
                self._cancel,
                self._config.poll_interval,
            ),
            name=self._config.thread_name,
            daemon=True,
        )
        self._thread.start()

    def __iter__(self) -> PathStream:
        return self

    def __next__(self) -> List[VertexID]:
        item = self._next_item()
        if item is _DONE:
            self._finished = True
            self._thread.join(self._config.join_timeout)
            raise StopIteration
        if isinstance(item, _Failure):
            self._finished = True
            self._thread.join(self._config.join_timeout)
            raise item.exc
        return item

    def _next_item(self) -> object:
        """Wait for the next queued item, polling for cancellation.

        Returns ``_DONE`` once the stream is closed (possibly from another
        thread) and a ``_Failure`` if the producer exited without finishing.
        """
        while not self._finished:
            try:
                item = self._queue.get(timeout=self._config.poll_interval)
            except queue.Empty:
                if self._cancel.is_set():
                    return _DONE
                if self._thread.is_alive():
                    continue
                # The producer may have published right before exiting
                try:
                    return self._queue.get_nowait()
                except queue.Empty:
                    logger.debug(
                        "Path enumeration %r -> %r stopped without finishing",
                        self.src_node,
                        self.dst_node,
                    )
                    return _Failure(
                        GraphWalkError(
                            "Path enumeration stopped before completion",
                            source=self.src_node,
                            target=self.dst_node,
                        )
                    )
            if self._cancel.is_set():
                return _DONE
            return item
        return _DONE

    @property
    def running(self) -> bool:
        """True while the producer thread is alive."""
        return self._thread.is_alive()

    def close(self) -> None:
        """Cancel the producer and wait up to ``join_timeout`` for it to exit."""
        self._finished = True
        self._cancel.set()
        # Unblock a producer waiting on a full queue
        try:
            while True:
                self._queue.get_nowait()
        except queue.Empty:
            pass
        self._thread.join(self._config.join_timeout)

    def __enter__(self) -> PathStream:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __del__(self) -> None:
        cancel = getattr(self, "_cancel", None)
        if cancel is not None:
            cancel.set()

    def __repr__(self) -> str:
        return f"PathStream({self.src_node!r} -> {self.dst_node!r})"


def all_paths(
    extractor: AllNeighboursExtractor,
    src_node: VertexID,
    dst_node: VertexID,
    config: Optional[PathEnumerationConfig] = None,
) -> PathStream:
    """Stream every simple path from ``src_node`` to ``dst_node``.

    Args:
        extractor: Supplies outgoing neighbours of each vertex.
        src_node: Start vertex.
        dst_node: Target vertex.
        config: Producer settings; defaults to ``ENUMERATION_CONFIG``.

    Returns:
        PathStream yielding paths in DFS pre-order. Empty when
        ``src_node == dst_node``.
    """
    return PathStream(extractor, src_node, dst_node, config)


def all_directed_paths(
    graph: DirectedGraphArcsReader,
    src_node: VertexID,
    dst_node: VertexID,
    config: Optional[PathEnumerationConfig] = None,
) -> PathStream:
    return all_paths(directed_neighbours(graph), src_node, dst_node, config)


def all_undirected_paths(
    graph: UndirectedGraphEdgesReader,
    src_node: VertexID,
    dst_node: VertexID,
    config: Optional[PathEnumerationConfig] = None,
) -> PathStream:
    return all_paths(undirected_neighbours(graph), src_node, dst_node, config)


def all_mixed_paths(
    graph: MixedGraphConnectionsReader,
    src_node: VertexID,
    dst_node: VertexID,
    config: Optional[PathEnumerationConfig] = None,
) -> PathStream:
    return all_paths(mixed_neighbours(graph), src_node, dst_node, config)
