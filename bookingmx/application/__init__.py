"""
Прикладной слой: порты внешних коллабораторов и сервис бронирований.
"""

from .interfaces import AvailabilityChecker, ILogger, ReservationRepository
from .services import ReservationApplicationService

__all__ = [
    "AvailabilityChecker",
    "ILogger",
    "ReservationRepository",
    "ReservationApplicationService",
]
