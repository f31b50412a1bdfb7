import math
from collections.abc import Mapping
from typing import Any, Dict, List, NamedTuple, Sequence


class Neighbor(NamedTuple):
    city: str
    km: float


class CityGraph:
    """Взвешенный неориентированный граф расстояний между городами.

    Петли игнорируются, из параллельных ребер сохраняется кратчайшее.
    """

    def __init__(self) -> None:
        self._adj: Dict[str, Dict[str, float]] = {}

    @classmethod
    def from_edges(
        cls, edges: Sequence[Mapping[str, Any]], validate: bool = True
    ) -> "CityGraph":
        """Строит граф из ребер вида {"from": ..., "to": ..., "km": ...}."""
        if not isinstance(edges, (list, tuple)):
            raise TypeError("edges must be a list")
        graph = cls()
        for edge in edges:
            if not isinstance(edge, Mapping):
                raise TypeError("edge must be a mapping with from/to/km")
            graph.add_edge(edge.get("from"), edge.get("to"), edge.get("km"))
        if validate:
            graph.validate()
        return graph

    def add_edge(self, u: str, v: str, km: float) -> None:
        if not isinstance(u, str) or not isinstance(v, str):
            raise TypeError("from/to must be strings")
        if u == "" or v == "":
            raise TypeError("from/to cannot be empty")
        if not self._valid_km(km):
            raise ValueError("km must be a non-negative finite number")
        if u == v:
            return
        self._link(u, v, km)
        self._link(v, u, km)

    def _link(self, a: str, b: str, km: float) -> None:
        neighbors = self._adj.setdefault(a, {})
        neighbors[b] = min(neighbors.get(b, km), km)

    @staticmethod
    def _valid_km(km: Any) -> bool:
        return (
            isinstance(km, (int, float))
            and not isinstance(km, bool)
            and math.isfinite(km)
            and km >= 0
        )

    def validate(self) -> bool:
        """Проверяет отсутствие петель и корректность весов."""
        for u, neighbors in self._adj.items():
            for v, km in neighbors.items():
                if u == v:
                    raise ValueError(f"Self-loop on {u}")
                if not self._valid_km(km):
                    raise ValueError("km must be a non-negative finite number")
        return True

    def neighbors(self, city: str) -> List[Neighbor]:
        return [Neighbor(v, km) for v, km in self._adj.get(city, {}).items()]

    @property
    def size(self) -> int:
        """Количество узлов."""
        return len(self._adj)

    @property
    def edge_count(self) -> int:
        """Количество уникальных неориентированных ребер."""
        return sum(len(n) for n in self._adj.values()) // 2
