"""
Доменный слой бронирования.
"""

from .exceptions import (
    DomainException,
    InvalidReservationError,
    ReservationConflictError,
    ReservationNotFoundError,
)
from .reservation import Reservation, ReservationStatus
from .validator import ReservationValidator

__all__ = [
    "Reservation",
    "ReservationStatus",
    "ReservationValidator",
    # Исключения
    "DomainException",
    "InvalidReservationError",
    "ReservationConflictError",
    "ReservationNotFoundError",
]
