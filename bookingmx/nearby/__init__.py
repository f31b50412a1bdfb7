"""
Ближайшие к направлению города.

Расстояние по большому кругу, граф "направление -> ближайшие города"
для отображения и взвешенный неориентированный граф расстояний между городами.
"""

from .city_graph import CityGraph, Neighbor
from .graph import (
    City,
    GraphEdge,
    GraphNode,
    NearbyCity,
    NearbyGraph,
    assert_city,
    build_graph,
    compute_nearby,
    normalize_input,
)
from .haversine import distance_km

__all__ = [
    "City",
    "CityGraph",
    "GraphEdge",
    "GraphNode",
    "NearbyCity",
    "NearbyGraph",
    "Neighbor",
    "assert_city",
    "build_graph",
    "compute_nearby",
    "distance_km",
    "normalize_input",
]
