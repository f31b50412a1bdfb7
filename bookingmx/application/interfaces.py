"""
Интерфейсы (порты) для контекста бронирования.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Optional, Protocol

from bookingmx.domain.reservation import Reservation


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def debug(self, message: str, **kwargs: Any) -> None: ...
    def info(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...


class ReservationRepository(ABC):
    """Абстрактный репозиторий для бронирований."""

    @abstractmethod
    def save(self, reservation: Reservation) -> Reservation:
        """Сохраняет бронирование и возвращает сохраненное значение."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, reservation_id: str) -> Optional[Reservation]:
        """Находит бронирование по его идентификатору."""
        raise NotImplementedError


class AvailabilityChecker(ABC):
    """Проверка пересечения запрошенных дат с существующими бронированиями."""

    @abstractmethod
    def has_conflict(self, room_id: str, check_in: date, check_out: date) -> bool:
        raise NotImplementedError
