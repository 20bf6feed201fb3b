"""All-pairs best rate records and matrix.

Runs the best-rate search for every ordered vertex pair and exposes the
result either as long-form records or as a source x destination pandas
matrix. Unreachable pairs and the diagonal are NaN in the matrix.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd

from dexrate.algorithms.best_rate import all_pairs_best_paths
from dexrate.config import SearchConfig
from dexrate.graph.rate_graph import RateGraph


def rate_records(
    graph: RateGraph, config: Optional[SearchConfig] = None
) -> List[Dict[str, Any]]:
    """Return one record per reachable ordered pair.

    Each record has ``source``, ``destination``, ``rate`` and ``path`` (the
    vertex sequence as strings).
    """
    return [
        {
            "source": src,
            "destination": dst,
            "rate": path.rate,
            "path": [str(v) for v in path],
        }
        for src, dst, path in all_pairs_best_paths(graph, config)
    ]


def rate_matrix(graph: RateGraph, config: Optional[SearchConfig] = None) -> pd.DataFrame:
    """Return the best rates as a DataFrame indexed by source.

    Rows and columns both cover every vertex of ``graph`` in sorted order.
    """
    vertices = list(graph.vertices())
    records = rate_records(graph, config)
    if records:
        df = pd.DataFrame(records, columns=["source", "destination", "rate"])
        matrix = df.pivot_table(
            index="source", columns="destination", values="rate", aggfunc="max"
        )
        matrix = matrix.reindex(index=vertices, columns=vertices)
    else:
        matrix = pd.DataFrame(index=vertices, columns=vertices, dtype=float)
    matrix.index.name = "source"
    matrix.columns.name = "destination"
    return matrix
