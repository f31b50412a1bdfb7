"""
Инфраструктурный слой: реализации портов прикладного слоя.
"""

from .loggers import ConsoleLogger
from .repositories import InMemoryReservationRepository

__all__ = [
    "ConsoleLogger",
    "InMemoryReservationRepository",
]
