"""Properties shared by all three searches, checked on random digraphs."""

import networkx as nx
import pytest

from graphsearch.algorithms.bfs import breadth_first_search
from graphsearch.algorithms.dfs import depth_first_search
from graphsearch.algorithms.dijkstra import dijkstra_shortest_path

SEARCHES = {
    "dfs": lambda graph, s, t: depth_first_search(graph, s, t),
    "bfs": lambda graph, s, t: breadth_first_search(graph, s, t),
    "dijkstra": lambda graph, s, t: dijkstra_shortest_path(graph, s, t, graph.weight),
}


@pytest.mark.parametrize("name", sorted(SEARCHES))
def test_paths_are_connected_walks_between_endpoints(name, random_digraphs):
    search = SEARCHES[name]
    for g, graph in random_digraphs:
        for target in nx.descendants(g, 0):
            path = search(graph, 0, target)
            assert path.start == 0
            assert path.target == target
            for u, v in zip(path.vertices, path.vertices[1:]):
                assert g.has_edge(u, v)
            assert set(path.vertices) <= path.visited


@pytest.mark.parametrize("name", sorted(SEARCHES))
def test_reachability_agrees_with_networkx(name, random_digraphs):
    search = SEARCHES[name]
    for g, graph in random_digraphs:
        reachable = nx.descendants(g, 0)
        for target in g.nodes:
            if target == 0:
                continue
            assert (search(graph, 0, target) is not None) == (target in reachable)


@pytest.mark.parametrize("name", sorted(SEARCHES))
def test_start_equals_target_is_single_vertex(name, diamond):
    path = SEARCHES[name](diamond, "C", "C")
    assert path.vertices == ["C"]
    assert path.total_weight == 0.0
    assert path.visited == {"C"}


def test_bfs_never_longer_than_other_searches(random_digraphs):
    for g, graph in random_digraphs:
        for target in nx.descendants(g, 0):
            bfs_edges = breadth_first_search(graph, 0, target).edge_count
            assert bfs_edges <= depth_first_search(graph, 0, target).edge_count
            assert (
                bfs_edges
                <= dijkstra_shortest_path(graph, 0, target, graph.weight).edge_count
            )


def test_recalculate_weight_is_idempotent(random_digraphs):
    for g, graph in random_digraphs:
        for target in nx.descendants(g, 0):
            path = depth_first_search(graph, 0, target)
            first = path.recalculate_total_weight(graph.weight)
            assert path.recalculate_total_weight(graph.weight) == first
