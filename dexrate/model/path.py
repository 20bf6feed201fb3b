"""Simple path with a compounded rate.

A `RatePath` is an ordered sequence of distinct vertices plus the product of
the edge rates traversed so far. Appending a vertex already on the path is
rejected, so a path can never revisit a vertex. Paths compare by rate only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Dict, Iterator, List, Set, Tuple

from dexrate.types import Rate, Vertex

# Vertices shown by ``str()`` before the path is elided
DISPLAY_LIMIT = 10


@total_ordering
@dataclass(eq=False)
class RatePath:
    """A simple path and its running compounded rate.

    The vertex list is private and only grows through :meth:`append`, which
    keeps it free of duplicates. Read it through :attr:`vertices`.

    Attributes:
        rate: Product of the edge rates along the path.
    """

    _vertices: List[Vertex]
    rate: Rate = 1.0
    _members: Set[Vertex] = field(init=False, default_factory=set, repr=False)

    def __post_init__(self) -> None:
        self._vertices = list(self._vertices)
        if not self._vertices:
            raise ValueError("A path needs at least one vertex.")
        self._members.update(self._vertices)
        if len(self._members) != len(self._vertices):
            raise ValueError(f"Path {self._vertices} repeats a vertex.")

    @classmethod
    def start(cls, vertex: Vertex) -> RatePath:
        """Return the single-vertex path at ``vertex`` with rate 1.0."""
        return cls([vertex])

    def append(self, vertex: Vertex, edge_rate: Rate) -> bool:
        """Extend the path by ``vertex`` and multiply in ``edge_rate``.

        Returns:
            False (leaving the path untouched) if ``vertex`` is already on
            the path, otherwise True.
        """
        if vertex in self._members:
            return False
        self._vertices.append(vertex)
        self._members.add(vertex)
        self.rate *= edge_rate
        return True

    def extended(self, vertex: Vertex, edge_rate: Rate) -> RatePath:
        """Return a copy of this path extended by ``vertex``.

        Raises:
            ValueError: If ``vertex`` is already on the path.
        """
        branch = self.copy()
        if not branch.append(vertex, edge_rate):
            raise ValueError(f"Vertex '{vertex}' is already on path {self}.")
        return branch

    def copy(self) -> RatePath:
        return RatePath(self._vertices, self.rate)

    def contains(self, vertex: Vertex) -> bool:
        return vertex in self._members

    __contains__ = contains

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        """Vertices in traversal order, source first."""
        return tuple(self._vertices)

    @property
    def source(self) -> Vertex:
        return self._vertices[0]

    @property
    def terminal(self) -> Vertex:
        """Return the last vertex of the path."""
        return self._vertices[-1]

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __eq__(self, other: Any) -> bool:
        """Compare by rate only, ignoring the vertices."""
        if not isinstance(other, RatePath):
            return NotImplemented
        return self.rate == other.rate

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, RatePath):
            return NotImplemented
        return self.rate < other.rate

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"RatePath({list(self._vertices)}, rate={self.rate})"

    def __str__(self) -> str:
        shown = " -> ".join(str(v) for v in self._vertices[:DISPLAY_LIMIT])
        if len(self._vertices) > DISPLAY_LIMIT:
            shown += " -> ..."
        return f"{shown}: {self.rate}"

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {"vertices": [str(v) for v in self._vertices], "rate": self.rate}
