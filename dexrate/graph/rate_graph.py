"""Rate graph with automatic inverse edges.

`RateGraph` stores, for every vertex, the multiplicative rates to its
neighbors. Inserting ``src -> dst`` with rate ``r`` also stores
``dst -> src`` with rate ``1 / r``, so the graph is always bidirectionally
consistent even though callers only supply one direction.
"""

from __future__ import annotations

import math
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from dexrate.dsl.loader import load_rates_yaml
from dexrate.logging import get_logger
from dexrate.types import Rate, Vertex

logger = get_logger(__name__)

RateTriple = Tuple[Vertex, Vertex, Rate]

_EMPTY: Mapping[Vertex, Rate] = MappingProxyType({})


class RateGraph:
    """Vertex -> {neighbor -> rate} adjacency with reciprocal edges.

    The graph has no deletion operation; re-adding an edge overwrites the
    previous rate in both directions (last write wins).
    """

    def __init__(self) -> None:
        self._adj: Dict[Vertex, Dict[Vertex, Rate]] = {}

    @classmethod
    def from_rates(cls, rates: Iterable[RateTriple]) -> RateGraph:
        """Build a graph from ``(src, dst, rate)`` triples."""
        graph = cls()
        graph.add_rates(rates)
        return graph

    @classmethod
    def from_yaml(cls, yaml_str: str) -> RateGraph:
        """Build a graph from a YAML rate document.

        See :func:`dexrate.dsl.loader.load_rates_yaml` for the format.
        """
        data = load_rates_yaml(yaml_str)
        return cls.from_rates(
            (str(entry["source"]), str(entry["target"]), float(entry["rate"]))
            for entry in data.get("rates", [])
        )

    @classmethod
    def from_yaml_file(cls, path: Union[str, Path]) -> RateGraph:
        """Build a graph from a YAML rate file on disk."""
        return cls.from_yaml(Path(path).read_text(encoding="utf-8"))

    #
    # Mutation
    #
    def add_rate(self, src: Vertex, dst: Vertex, rate: Rate) -> None:
        """Insert ``src -> dst`` at ``rate`` and ``dst -> src`` at ``1 / rate``.

        Args:
            src: Source vertex.
            dst: Destination vertex. Must differ from ``src``.
            rate: Non-zero, finite conversion rate whose reciprocal is also
                non-zero and finite.

        Raises:
            ValueError: If ``src == dst``, ``rate == 0``, or either ``rate``
                or ``1 / rate`` is not finite.
        """
        if src == dst:
            raise ValueError(f"Self-loop rate on vertex '{src}' is not allowed.")
        if rate == 0:
            raise ValueError(f"Rate from '{src}' to '{dst}' must be non-zero.")
        if not math.isfinite(rate):
            raise ValueError(
                f"Rate from '{src}' to '{dst}' must be finite, got {rate}."
            )
        inverse = 1.0 / rate
        if inverse == 0 or not math.isfinite(inverse):
            raise ValueError(
                f"Rate from '{src}' to '{dst}' has no usable reciprocal: {rate}."
            )

        self._adj.setdefault(src, {})[dst] = rate
        self._adj.setdefault(dst, {})[src] = inverse

    def add_rates(self, rates: Iterable[RateTriple]) -> None:
        """Insert every ``(src, dst, rate)`` triple via :meth:`add_rate`."""
        count = 0
        for src, dst, rate in rates:
            self.add_rate(src, dst, rate)
            count += 1
        logger.debug("Added %d rate(s); graph has %d vertices", count, len(self))

    #
    # Queries
    #
    def vertices(self) -> Iterator[Vertex]:
        """Yield all known vertices in sorted order.

        Each call returns a new generator, so the sequence can be restarted.
        """
        yield from sorted(self._adj)

    def neighbors(self, v: Vertex) -> Mapping[Vertex, Rate]:
        """Return a read-only ``{neighbor: rate}`` view of edges leaving ``v``.

        Unknown vertices yield an empty mapping.
        """
        nbrs = self._adj.get(v)
        if nbrs is None:
            return _EMPTY
        return MappingProxyType(nbrs)

    def rate(self, src: Vertex, dst: Vertex) -> Optional[Rate]:
        """Return the direct edge rate ``src -> dst``, or None if absent."""
        return self._adj.get(src, {}).get(dst)

    def edges(self) -> Iterator[RateTriple]:
        """Yield every stored ``(src, dst, rate)``, inverses included."""
        for src in self.vertices():
            for dst in sorted(self._adj[src]):
                yield src, dst, self._adj[src][dst]

    def __contains__(self, v: object) -> bool:
        return v in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        n_edges = sum(len(nbrs) for nbrs in self._adj.values())
        return f"RateGraph(vertices={len(self)}, edges={n_edges})"
