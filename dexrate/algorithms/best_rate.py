"""Best compounded rate search.

Implements a breadth-first exploration of simple paths with rate relaxation:

- Each dequeued path is checked against the best rate recorded for its
  terminal vertex. A path that does not strictly improve on that rate is
  dominated and dropped. A strictly better path updates the record and is
  expanded again, so a vertex can be re-expanded several times.
- A path reaching the destination becomes a candidate and is not expanded.
  Candidates are compared with strict ``>``; on a tie the earlier one stays.
- Neighbors already on a path are never appended, which bounds every path by
  the vertex count and guarantees termination on cyclic graphs.

The search never mutates the graph. Every call owns its queue and its
best-known map, so concurrent searches over an unchanging graph are safe.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Iterator, Optional, Tuple

from dexrate.config import SEARCH_CONFIG, SearchConfig
from dexrate.graph.rate_graph import RateGraph
from dexrate.logging import get_logger
from dexrate.model.path import RatePath
from dexrate.types import Rate, Vertex

logger = get_logger(__name__)


def best_path(
    graph: RateGraph,
    src: Vertex,
    dst: Vertex,
    config: Optional[SearchConfig] = None,
) -> Optional[RatePath]:
    """Find the simple path from ``src`` to ``dst`` with the highest rate.

    Args:
        graph: Graph to search. Must not be mutated during the call.
        src: Source vertex.
        dst: Destination vertex.
        config: Search configuration; defaults to ``SEARCH_CONFIG``.

    Returns:
        The best path found, or None if ``dst`` is unreachable or
        ``src == dst`` (a vertex is not its own path endpoint).
    """
    if src == dst:
        return None

    cfg = config or SEARCH_CONFIG
    best_known: Dict[Vertex, Rate] = {}
    queue: Deque[RatePath] = deque([RatePath.start(src)])
    best: Optional[RatePath] = None
    expanded = 0

    while queue:
        path = queue.popleft()
        assert len(path) < cfg.max_path_len, f"runaway path: {path}"
        node = path.terminal

        # Relaxation: only a strictly better rate may pass a known vertex.
        known = best_known.get(node)
        if known is not None:
            if known >= path.rate:
                continue
            logger.debug("Relaxed '%s': %s -> %s", node, known, path.rate)
        best_known[node] = path.rate

        if node == dst:
            if best is None:
                best = path
            elif path > best:
                logger.debug("Using new path (%s) over (%s)", path, best)
                best = path
            continue

        expanded += 1
        for neighbor, rate in graph.neighbors(node).items():
            if neighbor not in path:
                queue.append(path.extended(neighbor, rate))

    logger.debug(
        "best_path(%s, %s): expanded %d path(s), result %s", src, dst, expanded, best
    )
    return best


def best_rate(
    graph: RateGraph,
    src: Vertex,
    dst: Vertex,
    config: Optional[SearchConfig] = None,
) -> Optional[Rate]:
    """Return the best compounded rate from ``src`` to ``dst``, or None."""
    path = best_path(graph, src, dst, config)
    if path is None:
        return None
    return path.rate


def all_pairs_best_paths(
    graph: RateGraph,
    config: Optional[SearchConfig] = None,
) -> Iterator[Tuple[Vertex, Vertex, RatePath]]:
    """Yield ``(src, dst, path)`` for every reachable ordered pair.

    Pairs are visited in vertex order; ``src == dst`` and unreachable pairs
    are skipped.
    """
    for src in graph.vertices():
        for dst in graph.vertices():
            if src == dst:
                continue
            path = best_path(graph, src, dst, config)
            if path is not None:
                yield src, dst, path
