"""
Расстояние по большому кругу между двумя точками (lat, lng) в километрах.
"""

import math
from collections.abc import Mapping
from typing import Any, Tuple

EARTH_RADIUS_KM = 6371


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and not math.isnan(value)
    )


def _coordinate(point: Any) -> Tuple[float, float]:
    """Извлекает (lat, lng) из словаря или объекта и проверяет диапазоны."""
    if isinstance(point, Mapping):
        lat, lng = point.get("lat"), point.get("lng")
    else:
        lat, lng = getattr(point, "lat", None), getattr(point, "lng", None)

    if not (_is_number(lat) and _is_number(lng)):
        raise TypeError("Invalid coordinate: expected numeric lat and lng")
    if not (-90 <= lat <= 90 and -180 <= lng <= 180):
        raise ValueError("Coordinate out of range")
    return float(lat), float(lng)


def distance_km(a: Any, b: Any) -> float:
    """Возвращает расстояние между a и b в км, округленное до метра."""
    lat1, lng1 = _coordinate(a)
    lat2, lng2 = _coordinate(b)

    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    s = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(s), math.sqrt(1 - s))
    return round(EARTH_RADIUS_KM * c, 3)
