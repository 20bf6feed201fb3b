"""Graph conversion utilities between RateGraph and NetworkX graphs."""

from typing import Any

import networkx as nx

from dexrate.graph.rate_graph import RateGraph


def to_digraph(graph: RateGraph, rate_attr: str = "rate") -> nx.DiGraph:
    """Convert a RateGraph to a NetworkX DiGraph.

    Both directions of every rate become DiGraph edges, each carrying its
    rate under ``rate_attr``.

    Args:
        graph: The RateGraph to convert.
        rate_attr: Edge attribute name for the rate.

    Returns:
        A NetworkX DiGraph with nodes added in sorted order.
    """
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(graph.vertices())
    for src, dst, rate in graph.edges():
        nx_graph.add_edge(src, dst, **{rate_attr: rate})
    return nx_graph


def from_digraph(nx_graph: Any, rate_attr: str = "rate") -> RateGraph:
    """Convert a NetworkX graph carrying rates into a RateGraph.

    Every edge is inserted through ``RateGraph.add_rate``, so reciprocal
    edges are created. When the input holds both directions with rates that
    are not reciprocal, the edge iterated last wins. Isolated nodes are
    dropped since a RateGraph only knows vertices that have edges.

    Args:
        nx_graph: A NetworkX DiGraph (or Graph) with a rate on every edge.
        rate_attr: Edge attribute name holding the rate.

    Returns:
        A new RateGraph.

    Raises:
        ValueError: If an edge lacks ``rate_attr``, is a self-loop, or has a
            zero rate.
    """
    graph = RateGraph()
    for u, v, data in nx_graph.edges(data=True):
        if rate_attr not in data:
            raise ValueError(f"Edge '{u}' -> '{v}' has no '{rate_attr}' attribute.")
        graph.add_rate(u, v, float(data[rate_attr]))
    return graph
