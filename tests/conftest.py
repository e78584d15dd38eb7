"""Shared graph fixtures.

Diagrams show directed arcs with their weights in brackets; unlabeled arcs
weigh 1.
"""

from __future__ import annotations

import random

import networkx as nx
import pytest

from graphsearch.graph.adjacency import AdjacencyGraph
from graphsearch.graph.nx_graph import NetworkXGraph
from graphsearch.logging import reset_logging, setup_root_logger


@pytest.fixture(autouse=True)
def _fresh_logging():
    """Give each test the default logging configuration."""
    reset_logging()
    setup_root_logger()
    yield
    reset_logging()
    setup_root_logger()


@pytest.fixture
def two_vertex():
    #  A◄──────►B
    return AdjacencyGraph({"A": ["B"]}, directed=False)


@pytest.fixture
def fan():
    #      ┌──►B
    #  A───┤
    #      └──►C
    return AdjacencyGraph({"A": ["B", "C"], "B": [], "C": []})


@pytest.fixture
def diamond():
    #      ┌──►B───┐
    #  A───┤       ├──►D
    #      └──►C───┘
    return AdjacencyGraph({"A": ["B", "C"], "B": ["D"], "C": ["D"]})


@pytest.fixture
def dead_ends():
    #  A───►B───►C
    #  ▲         │
    #  └─────────┘
    #  A───►E───►F
    return AdjacencyGraph({"A": ["B", "E"], "B": ["C"], "C": ["A"], "E": ["F"]})


@pytest.fixture
def shortcut():
    #  A───►B───►C───►D
    #  │              ▲
    #  └──────────────┘
    return AdjacencyGraph({"A": ["B", "D"], "B": ["C"], "C": ["D"]})


@pytest.fixture
def weighted_detour():
    #      [5]      [5]
    #  A───────►B───────►C
    #  │                 ▲
    #  │[1]              │[1]
    #  ▼       [1]       │
    #  D────────────────►E
    return AdjacencyGraph(
        {"A": ["B", "D"], "B": ["C"], "D": ["E"], "E": ["C"]},
        weights={("A", "B"): 5, ("B", "C"): 5},
    )


@pytest.fixture
def late_shortcut():
    #      [1]      [1]
    #  A───────►B───────►C
    #  │                 ▲
    #  └─────────────────┘
    #          [5]
    # B is listed before C, so C is first discovered over the expensive arc.
    return AdjacencyGraph(
        {"A": ["B", "C"], "B": ["C"]},
        weights={("A", "C"): 5},
    )


@pytest.fixture
def disconnected():
    #  A◄──────►B     X───►Y
    return AdjacencyGraph({"A": ["B"], "B": ["A"], "X": ["Y"]})


@pytest.fixture
def long_chain():
    # 0───►1───►2───► ... ───►4999
    n = 5000
    return AdjacencyGraph({i: [i + 1] for i in range(n - 1)})


@pytest.fixture
def random_digraphs():
    """Random weighted digraphs wrapped for searching, with their NetworkX source."""
    graphs = []
    for seed in range(8):
        rng = random.Random(seed)
        g = nx.gnp_random_graph(25, 0.12, seed=seed, directed=True)
        for u, v in g.edges:
            g[u][v]["weight"] = rng.randint(1, 20)
        graphs.append((g, NetworkXGraph(g)))
    return graphs
