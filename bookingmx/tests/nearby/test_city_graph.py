import math

import pytest

from bookingmx.nearby.city_graph import CityGraph, Neighbor


def make_ring(n, km=10):
    return [{"from": f"C{i}", "to": f"C{(i + 1) % n}", "km": km} for i in range(n)]


class TestMalformedEdges:
    """Тесты для некорректных данных графа."""

    @pytest.mark.parametrize("edges", [None, {}, "A-B"])
    def test_rejects_non_list(self, edges):
        with pytest.raises(TypeError, match="list"):
            CityGraph.from_edges(edges)

    @pytest.mark.parametrize(
        "edge", [{"from": 1, "to": "B", "km": 10}, {"from": "A", "to": {}, "km": 10}]
    )
    def test_rejects_non_string_cities(self, edge):
        with pytest.raises(TypeError, match="strings"):
            CityGraph.from_edges([edge])

    @pytest.mark.parametrize(
        "edge", [{"from": "", "to": "B", "km": 10}, {"from": "A", "to": "", "km": 10}]
    )
    def test_rejects_empty_cities(self, edge):
        with pytest.raises(TypeError, match="empty"):
            CityGraph.from_edges([edge])

    @pytest.mark.parametrize("km", [-1, math.nan, math.inf, "10", None])
    def test_rejects_bad_distance(self, km):
        with pytest.raises(ValueError, match="non-negative finite"):
            CityGraph.from_edges([{"from": "A", "to": "B", "km": km}])

    def test_ignores_self_loops(self):
        graph = CityGraph.from_edges([{"from": "A", "to": "A", "km": 0}])
        assert graph.size == 0
        assert graph.edge_count == 0


class TestLargeGraphs:
    def test_ring_of_1000_nodes(self):
        graph = CityGraph.from_edges(make_ring(1000))

        assert graph.size == 1000
        assert graph.edge_count == 1000
        assert graph.validate()

    def test_parallel_edges_keep_minimum(self):
        graph = CityGraph.from_edges(
            [
                {"from": "A", "to": "B", "km": 20},
                {"from": "A", "to": "B", "km": 15},
                {"from": "B", "to": "A", "km": 22},
            ]
        )

        assert graph.neighbors("A") == [Neighbor("B", 15)]
        assert graph.neighbors("B") == [Neighbor("A", 15)]


def test_neighbors_of_unknown_city_is_empty():
    assert CityGraph().neighbors("nowhere") == []
