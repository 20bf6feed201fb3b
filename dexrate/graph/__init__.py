"""Rate graph and its NetworkX conversions."""

from dexrate.graph.convert import from_digraph, to_digraph
from dexrate.graph.rate_graph import RateGraph, RateTriple

__all__ = ["RateGraph", "RateTriple", "from_digraph", "to_digraph"]
