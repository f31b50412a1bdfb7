from typing import Dict, Optional

from bookingmx.application.interfaces import ILogger, ReservationRepository
from bookingmx.domain.reservation import Reservation
from bookingmx.infrastructure.loggers import ConsoleLogger


class InMemoryReservationRepository(ReservationRepository):
    """Реализация репозитория в памяти для хранения бронирований."""

    def __init__(self, logger: Optional[ILogger] = None) -> None:
        self._reservations: Dict[str, Reservation] = {}
        self._logger = logger or ConsoleLogger()

    def save(self, reservation: Reservation) -> Reservation:
        """Сохраняет или заменяет бронирование с тем же ID."""
        self._logger.debug(
            "Saving reservation",
            reservation_id=reservation.id,
            status=reservation.status.value,
        )
        self._reservations[reservation.id] = reservation
        return reservation

    def find_by_id(self, reservation_id: str) -> Optional[Reservation]:
        return self._reservations.get(reservation_id)

    def __len__(self) -> int:
        return len(self._reservations)
