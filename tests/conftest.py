"""Shared rate graph fixtures."""

from __future__ import annotations

import pytest

from dexrate.graph.rate_graph import RateGraph


@pytest.fixture
def one_hop():
    #      [1.4]      [0.2]
    #  A ───────► B ───────► C
    #  │                     ▲
    #  └─────────────────────┘
    #           [0.1]
    g = RateGraph()
    g.add_rate("A", "B", 1.4)
    g.add_rate("A", "C", 0.1)
    g.add_rate("B", "C", 0.2)
    return g


@pytest.fixture
def direct():
    # Same triangle as one_hop, but A -> C beats A -> B -> C.
    g = RateGraph()
    g.add_rate("A", "B", 1.4)
    g.add_rate("A", "C", 0.29)
    g.add_rate("B", "C", 0.2)
    return g


@pytest.fixture
def two_hops():
    #      [1.4]      [0.2]      [0.2]      [2.5]
    #  A ───────► B ───────► C ───────► D ───────► F
    #  A ─[0.1]─► C
    #  A ─[0.055]──────────────────────► D
    g = RateGraph()
    g.add_rate("A", "B", 1.4)
    g.add_rate("A", "C", 0.1)
    g.add_rate("A", "D", 0.055)
    g.add_rate("B", "C", 0.2)
    g.add_rate("C", "D", 0.2)
    g.add_rate("D", "F", 2.5)
    return g


@pytest.fixture
def demo():
    # Graph used by the command line when no rate file is given.
    g = RateGraph()
    g.add_rate("A", "B", 1.4)
    g.add_rate("A", "C", 0.1)
    g.add_rate("B", "C", 0.2)
    g.add_rate("C", "D", 0.2)
    g.add_rate("D", "F", 2.5)
    return g


@pytest.fixture
def square_with_diagonal():
    #        [2]
    #   A ───────► B
    #   │ ╲        │
    #  [1] ╲[3]   [2]
    #   ▼    ╲►    ▼
    #   D ◄─────── C
    #        [0.5]
    g = RateGraph()
    g.add_rate("A", "B", 2.0)
    g.add_rate("B", "C", 2.0)
    g.add_rate("C", "D", 0.5)
    g.add_rate("A", "D", 1.0)
    g.add_rate("A", "C", 3.0)
    return g


@pytest.fixture
def rates_yaml() -> str:
    return """
rates:
  - {source: USD, target: EUR, rate: 0.8}
  - {source: EUR, target: GBP, rate: 0.9}
  - {source: USD, target: GBP, rate: 0.7}
  - {source: GBP, target: JPY, rate: 150}
"""
