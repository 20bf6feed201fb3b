"""dexrate: best compounded conversion rates over rate graphs.

A rate graph stores multiplicative conversion rates between vertices (for
example currencies). Adding ``A -> B`` also adds the reciprocal ``B -> A``.
The search finds the best compounded rate over simple paths between two
vertices, together with the path realizing it.

Primary API:
    RateGraph - Graph with automatic inverse edges
    best_rate() / best_path() - Best compounded rate (and path) for one pair
    all_pairs_best_paths() - Best paths for every reachable ordered pair
    rate_matrix() - All-pairs best rates as a pandas DataFrame
    to_digraph() / from_digraph() - NetworkX conversion

Example:
    from dexrate import RateGraph, best_path

    graph = RateGraph()
    graph.add_rate("A", "B", 2.0)
    graph.add_rate("B", "C", 0.25)

    path = best_path(graph, "A", "C")
    print(path)  # A -> B -> C: 0.5
"""

from __future__ import annotations

from dexrate import cli, logging
from dexrate._version import __version__
from dexrate.algorithms.best_rate import all_pairs_best_paths, best_path, best_rate
from dexrate.analysis.rate_matrix import rate_matrix, rate_records
from dexrate.config import SEARCH_CONFIG, SearchConfig
from dexrate.dsl.loader import load_rates_yaml
from dexrate.graph.convert import from_digraph, to_digraph
from dexrate.graph.rate_graph import RateGraph
from dexrate.model.path import RatePath

__all__ = [
    # Version
    "__version__",
    # Model
    "RateGraph",
    "RatePath",
    # Search
    "best_path",
    "best_rate",
    "all_pairs_best_paths",
    # Analysis
    "rate_matrix",
    "rate_records",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Input and conversion
    "load_rates_yaml",
    "from_digraph",
    "to_digraph",
    # Utilities
    "cli",
    "logging",
]
