# pylint: disable=invalid-name
"""Line-profile Dijkstra on a dense weighted digraph."""

import networkx as nx
from line_profiler import LineProfiler

from graphsearch.algorithms.dijkstra import dijkstra_shortest_path
from graphsearch.graph.nx_graph import NetworkXGraph

g = nx.DiGraph()
for node_num in range(300):
    for other in range(node_num):
        g.add_edge(node_num, other, weight=(node_num * 31 + other) % 97 + 1)
        g.add_edge(other, node_num, weight=(other * 17 + node_num) % 89 + 1)

graph = NetworkXGraph(g)

lp = LineProfiler()
lp_wrapper = lp(dijkstra_shortest_path)
lp_wrapper(graph, 0, 299, graph.weight, relax_queued=True)
lp.print_stats()

# Compare with the NetworkX implementation on the same graph:
# nx.dijkstra_path_length(g, 0, 299)
