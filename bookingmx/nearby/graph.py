"""
Граф ближайших городов относительно направления.

Вход: направление и список городов (словари с id, name, lat, lng).
Выход: NearbyGraph со списком узлов и взвешенных ребер "направление -> город".
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Iterable, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from bookingmx.config import settings

from .haversine import distance_km

REQUIRED_FIELDS = ("id", "name", "lat", "lng")


class City(BaseModel):
    """Город с координатами."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    lat: float
    lng: float


class NearbyCity(City):
    """Город с расстоянием до направления."""

    distance_km: float


class GraphNode(BaseModel):
    id: str
    label: str
    type: Literal["destination", "city"]


class GraphEdge(BaseModel):
    source: str
    target: str
    weight: float


class NearbyGraph(BaseModel):
    nodes: List[GraphNode]
    edges: List[GraphEdge]
    count: int


def assert_city(city: Any) -> None:
    """Проверяет сырые данные города. Бросает TypeError."""
    if not isinstance(city, Mapping):
        raise TypeError("City must be a mapping")
    for key in REQUIRED_FIELDS:
        if key not in city:
            raise TypeError(f"City missing required field: {key}")
    if not isinstance(city["id"], str) or not city["id"].strip():
        raise TypeError("City.id must be a non-empty string")
    if not isinstance(city["name"], str) or not city["name"].strip():
        raise TypeError("City.name must be a non-empty string")
    for key in ("lat", "lng"):
        if isinstance(city[key], bool) or not isinstance(city[key], (int, float)):
            raise TypeError("City lat/lng must be numbers")


def _to_float(value: Any) -> float:
    # Нечисловые координаты становятся NaN и отклоняются в distance_km
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _coerce(city: Mapping) -> dict:
    for key in REQUIRED_FIELDS:
        if key not in city:
            raise TypeError(f"City missing required field: {key}")
    return {
        "id": str(city["id"]),
        "name": str(city["name"]),
        "lat": _to_float(city["lat"]),
        "lng": _to_float(city["lng"]),
    }


def normalize_input(
    destination: Any, cities: Optional[Iterable[Any]]
) -> Tuple[City, List[City]]:
    """Валидирует направление и очищает список городов.

    Пустые элементы отбрасываются, поля приводятся к типам, дубликаты по id
    удаляются (остается первый), само направление исключается из списка.
    """
    assert_city(destination)
    dest = City(**destination)

    raw = list(cities) if isinstance(cities, (list, tuple)) else []
    result: List[City] = []
    seen = set()
    for item in raw:
        if not item:
            continue
        if not isinstance(item, Mapping):
            raise TypeError("City must be a mapping")
        data = _coerce(item)
        assert_city(data)
        if data["id"] in seen or data["id"] == dest.id:
            continue
        seen.add(data["id"])
        result.append(City(**data))
    return dest, result


def compute_nearby(
    destination: City,
    cities: Iterable[City],
    max_distance_km: Optional[float] = None,
    top_k: Optional[int] = None,
) -> List[NearbyCity]:
    """Возвращает до top_k городов в радиусе max_distance_km, ближайшие первыми."""
    if max_distance_km is None:
        max_distance_km = settings.nearby_max_distance_km
    if top_k is None:
        top_k = settings.nearby_top_k
    if max_distance_km <= 0:
        raise ValueError("max_distance_km must be > 0")
    if top_k <= 0:
        raise ValueError("top_k must be > 0")

    augmented = [
        NearbyCity(**city.model_dump(), distance_km=distance_km(destination, city))
        for city in cities
    ]
    nearby = [c for c in augmented if c.distance_km <= max_distance_km]
    nearby.sort(key=lambda c: c.distance_km)
    return nearby[:top_k]


def _format_km(value: float) -> str:
    return f"{value:.3f}".rstrip("0").rstrip(".")


def build_graph(
    destination: Any,
    cities: Optional[Iterable[Any]],
    max_distance_km: Optional[float] = None,
    top_k: Optional[int] = None,
) -> NearbyGraph:
    dest, candidates = normalize_input(destination, cities)
    nearby = compute_nearby(dest, candidates, max_distance_km, top_k)

    nodes = [GraphNode(id=dest.id, label=dest.name, type="destination")]
    nodes.extend(
        GraphNode(
            id=c.id, label=f"{c.name} ({_format_km(c.distance_km)} km)", type="city"
        )
        for c in nearby
    )
    edges = [
        GraphEdge(source=dest.id, target=c.id, weight=c.distance_km) for c in nearby
    ]
    return NearbyGraph(nodes=nodes, edges=edges, count=len(nearby))
