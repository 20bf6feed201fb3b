import math

import pytest

from dexrate.graph.rate_graph import RateGraph


def test_add_rate_creates_inverse():
    g = RateGraph()
    g.add_rate("A", "B", 4.0)

    assert g.rate("A", "B") == 4.0
    assert g.rate("B", "A") == 0.25
    assert dict(g.neighbors("A")) == {"B": 4.0}
    assert dict(g.neighbors("B")) == {"A": 0.25}


def test_add_rate_last_write_wins():
    g = RateGraph()
    g.add_rate("A", "B", 2.0)
    g.add_rate("A", "B", 4.0)
    assert g.rate("A", "B") == 4.0
    assert g.rate("B", "A") == 0.25

    # Re-adding in the opposite direction overwrites both sides as well
    g.add_rate("B", "A", 5.0)
    assert g.rate("B", "A") == 5.0
    assert g.rate("A", "B") == pytest.approx(0.2)
    assert len(g) == 2


def test_add_rate_rejects_self_loop():
    g = RateGraph()
    with pytest.raises(ValueError, match="Self-loop"):
        g.add_rate("A", "A", 1.0)
    assert len(g) == 0


def test_add_rate_rejects_zero_rate():
    g = RateGraph()
    with pytest.raises(ValueError, match="non-zero"):
        g.add_rate("A", "B", 0.0)
    assert "A" not in g
    assert "B" not in g


def test_vertices_sorted_and_restartable():
    g = RateGraph()
    g.add_rate("D", "F", 2.5)
    g.add_rate("B", "A", 1.4)
    g.add_rate("C", "A", 0.1)

    vertices = g.vertices()
    assert iter(vertices) is vertices
    assert list(vertices) == ["A", "B", "C", "D", "F"]
    assert list(vertices) == []
    assert list(g.vertices()) == ["A", "B", "C", "D", "F"]


def test_vertices_are_lazy():
    g = RateGraph()
    g.add_rate("A", "B", 1.0)
    vertices = g.vertices()
    assert next(vertices) == "A"
    assert next(vertices) == "B"
    with pytest.raises(StopIteration):
        next(vertices)


def test_neighbors_of_unknown_vertex_is_empty():
    g = RateGraph()
    g.add_rate("A", "B", 1.0)
    assert len(g.neighbors("Z")) == 0
    assert g.rate("Z", "A") is None
    assert g.rate("A", "Z") is None


def test_neighbors_is_read_only(one_hop):
    nbrs = one_hop.neighbors("A")
    with pytest.raises(TypeError):
        nbrs["D"] = 1.0  # type: ignore[index]
    assert "D" not in one_hop


def test_edges_lists_both_directions(one_hop):
    edges = list(one_hop.edges())
    assert len(edges) == 6
    assert edges[0] == ("A", "B", 1.4)
    for src, dst, rate in edges:
        assert one_hop.rate(dst, src) == pytest.approx(1.0 / rate)


def test_from_rates_and_add_rates():
    g = RateGraph.from_rates([("A", "B", 2.0), ("B", "C", 3.0)])
    assert list(g.vertices()) == ["A", "B", "C"]
    assert g.rate("C", "B") == pytest.approx(1 / 3)

    g.add_rates([("C", "D", 0.5)])
    assert g.rate("D", "C") == 2.0


def test_non_string_vertices():
    g = RateGraph()
    g.add_rate(3, 1, 2.0)
    g.add_rate(2, 1, 4.0)
    assert list(g.vertices()) == [1, 2, 3]


def test_repr(one_hop):
    assert repr(one_hop) == "RateGraph(vertices=3, edges=6)"


def test_from_yaml(rates_yaml):
    g = RateGraph.from_yaml(rates_yaml)
    assert list(g.vertices()) == ["EUR", "GBP", "JPY", "USD"]
    assert g.rate("USD", "EUR") == 0.8
    assert g.rate("JPY", "GBP") == pytest.approx(1 / 150)


def test_from_yaml_coerces_vertex_names():
    g = RateGraph.from_yaml("rates:\n  - {source: 1, target: 2, rate: 2}\n")
    assert list(g.vertices()) == ["1", "2"]
    assert g.rate("2", "1") == 0.5


def test_from_yaml_file(tmp_path, rates_yaml):
    path = tmp_path / "rates.yaml"
    path.write_text(rates_yaml)
    g = RateGraph.from_yaml_file(path)
    assert len(g) == 4


@pytest.mark.parametrize("rate", [math.inf, -math.inf, math.nan])
def test_add_rate_rejects_non_finite_rate(rate):
    g = RateGraph()
    with pytest.raises(ValueError, match="must be finite"):
        g.add_rate("A", "B", rate)
    assert len(g) == 0


def test_add_rate_rejects_rate_without_reciprocal():
    # 1 / 1e-320 overflows to inf
    g = RateGraph()
    with pytest.raises(ValueError, match="no usable reciprocal"):
        g.add_rate("A", "B", 1e-320)
    assert g.rate("B", "A") is None


def test_from_yaml_rejects_infinite_rate():
    with pytest.raises(ValueError, match="must be finite"):
        RateGraph.from_yaml("rates:\n  - {source: A, target: B, rate: .inf}\n")
