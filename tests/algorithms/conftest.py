"""Shared graph fixtures for algorithm tests."""

import networkx as nx
import pytest

from graphwalk.graph.nx_readers import NxDirectedReader, NxMixedReader, NxUndirectedReader


@pytest.fixture
def diamond1():
    # Cost:
    #  1→2 [1], 2→3 [1], 1→3 [5], 3→4 [1], 2→4 [10]
    #
    #       [1]       [10]
    #   1────────►2─────────►4
    #   │         │          ▲
    #   │[5]      │[1]       │[1]
    #   ▼         ▼          │
    #   3◄────────┘          │
    #   └────────────────────┘
    g = nx.DiGraph()
    g.add_nodes_from([1, 2, 3, 4])
    g.add_edge(1, 2, cost=1)
    g.add_edge(1, 3, cost=5)
    g.add_edge(2, 3, cost=1)
    g.add_edge(2, 4, cost=10)
    g.add_edge(3, 4, cost=1)
    return NxDirectedReader(g)


@pytest.fixture
def diamond1_neg_cycle(diamond1):
    # diamond1 plus 1→2 [1], 2→3 [-1], 3→1 [-1]: cycle 1→2→3→1 weighs -1
    g = diamond1.graph.copy()
    g.add_edge(1, 2, cost=1)
    g.add_edge(2, 3, cost=-1)
    g.add_edge(3, 1, cost=-1)
    return NxDirectedReader(g)


@pytest.fixture
def neg_arc1():
    # Cost:
    #     [-1]       [1]
    #  A◄──────S────────►B
    #                    │[1]
    #                    ▼
    #                    T
    g = nx.DiGraph()
    g.add_edge("S", "A", cost=-1)
    g.add_edge("S", "B", cost=1)
    g.add_edge("B", "T", cost=1)
    return NxDirectedReader(g)


@pytest.fixture
def cycle_with_island():
    # A◄──►B   C (isolated)
    g = nx.DiGraph()
    g.add_edge("A", "B", cost=1)
    g.add_edge("B", "A", cost=1)
    g.add_node("C")
    return NxDirectedReader(g)


@pytest.fixture
def complete5():
    """Fully connected directed graph with 5 nodes."""
    return NxDirectedReader(nx.complete_graph(["A", "B", "C", "D", "E"], nx.DiGraph))


@pytest.fixture
def complete9():
    """Fully connected directed graph with 9 nodes (millions of simple paths)."""
    return NxDirectedReader(nx.complete_graph(9, nx.DiGraph))


@pytest.fixture
def triangle1():
    # Cost:
    #        [1]
    #     A───────B
    #      \     /
    #   [3] \   / [1]
    #        \ /
    #         C
    g = nx.Graph()
    g.add_edge("A", "B", cost=1)
    g.add_edge("B", "C", cost=1)
    g.add_edge("A", "C", cost=3)
    return NxUndirectedReader(g)


@pytest.fixture
def mixed1():
    # Arcs:   A──►B [2],  B──►C [2]
    # Edges:  A───B [1],  C───D [1]
    arcs = nx.DiGraph()
    arcs.add_edge("A", "B", cost=2)
    arcs.add_edge("B", "C", cost=2)
    edges = nx.Graph()
    edges.add_edge("A", "B", cost=1)
    edges.add_edge("C", "D", cost=1)
    return NxMixedReader(arcs, edges)
