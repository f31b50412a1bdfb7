from datetime import date
from typing import Optional

from bookingmx.application.interfaces import (
    AvailabilityChecker,
    ILogger,
    ReservationRepository,
)
from bookingmx.domain.exceptions import (
    DomainException,
    InvalidReservationError,
    ReservationConflictError,
    ReservationNotFoundError,
)
from bookingmx.domain.reservation import Reservation
from bookingmx.domain.validator import ReservationValidator
from bookingmx.infrastructure.loggers import ConsoleLogger


class ReservationApplicationService:
    """Сервис приложения для создания, изменения и отмены бронирований.

    Все проверки выполняются до сохранения: при любой ошибке репозиторий
    не вызывается, а исключение пробрасывается вызывающему коду.
    """

    def __init__(
        self,
        repository: ReservationRepository,
        availability: AvailabilityChecker,
        logger: Optional[ILogger] = None,
    ):
        self.repository = repository
        self.availability = availability
        self._logger = logger or ConsoleLogger()

    def create(self, reservation: Reservation) -> Reservation:
        """Создает бронирование, если номер свободен на выбранные даты."""
        try:
            if self.availability.has_conflict(
                reservation.room_id, reservation.check_in, reservation.check_out
            ):
                raise ReservationConflictError(
                    "Dates overlap with existing reservation"
                )

            saved = self.repository.save(reservation)
        except Exception as e:
            self._log_failure("Ошибка при создании бронирования", e, reservation.id)
            raise

        self._logger.info("Reservation created", reservation_id=saved.id)
        return saved

    def edit_dates(
        self, reservation_id: str, new_check_in: date, new_check_out: date
    ) -> Reservation:
        """Переносит бронирование на новые даты."""
        try:
            existing = self._get_or_raise(reservation_id)

            if existing.is_canceled:
                raise ReservationConflictError(
                    "Cannot change dates of a canceled reservation"
                )

            if not ReservationValidator.validate_dates(new_check_in, new_check_out):
                raise InvalidReservationError(
                    "Check-out date must be after check-in date"
                )

            # Проверяем доступность того же номера на новый период
            if self.availability.has_conflict(
                existing.room_id, new_check_in, new_check_out
            ):
                raise ReservationConflictError(
                    "New dates overlap with existing reservation"
                )

            saved = self.repository.save(
                existing.reschedule(new_check_in, new_check_out)
            )
        except Exception as e:
            self._log_failure(
                "Ошибка при изменении дат бронирования", e, reservation_id
            )
            raise

        self._logger.info(
            "Reservation dates changed",
            reservation_id=saved.id,
            check_in=saved.check_in,
            check_out=saved.check_out,
        )
        return saved

    def cancel(self, reservation_id: str) -> Reservation:
        """Отменяет бронирование. Повторная отмена считается конфликтом."""
        try:
            existing = self._get_or_raise(reservation_id)
            saved = self.repository.save(existing.cancel())
        except Exception as e:
            self._log_failure("Ошибка при отмене бронирования", e, reservation_id)
            raise

        self._logger.info("Reservation canceled", reservation_id=saved.id)
        return saved

    def _get_or_raise(self, reservation_id: str) -> Reservation:
        reservation = self.repository.find_by_id(reservation_id)
        if reservation is None:
            raise ReservationNotFoundError(reservation_id)
        return reservation

    def _log_failure(
        self, message: str, error: Exception, reservation_id: str
    ) -> None:
        # Нарушения доменных правил ожидаемы, остальное считается сбоем
        if isinstance(error, DomainException):
            self._logger.warning(f"{message}: {error}", reservation_id=reservation_id)
        else:
            self._logger.error(f"{message}: {error}", reservation_id=reservation_id)
