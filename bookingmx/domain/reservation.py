"""
Агрегат 'Бронирование'.

Бронирование неизменяемо: переходы состояния (перенос дат, отмена)
возвращают новый экземпляр, а хранилище заменяет ссылку при сохранении.
"""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exceptions import ReservationConflictError
from .validator import ReservationValidator


class ReservationStatus(str, Enum):
    """Статусы бронирования."""

    CONFIRMED = "confirmed"
    CANCELED = "canceled"


class Reservation(BaseModel):
    """Бронирование номера в отеле."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    hotel_id: str
    room_id: str
    check_in: date
    check_out: date
    guests: int = Field(..., gt=0)
    status: ReservationStatus = ReservationStatus.CONFIRMED

    @model_validator(mode="after")
    def check_out_after_check_in(self) -> Reservation:
        if not ReservationValidator.validate_dates(self.check_in, self.check_out):
            raise ValueError("Check-out date must be after check-in date")
        return self

    @property
    def is_canceled(self) -> bool:
        return self.status == ReservationStatus.CANCELED

    @property
    def nights(self) -> int:
        """Количество ночей в бронировании."""
        return (self.check_out - self.check_in).days

    def reschedule(self, check_in: date, check_out: date) -> Reservation:
        """Возвращает копию бронирования с новыми датами."""
        if self.is_canceled:
            raise ReservationConflictError(
                "Cannot change dates of a canceled reservation"
            )
        # model_copy не запускает валидаторы, поэтому собираем модель заново
        data = self.model_dump()
        data.update(check_in=check_in, check_out=check_out)
        return Reservation.model_validate(data)

    def cancel(self) -> Reservation:
        """Возвращает отмененную копию бронирования."""
        if self.is_canceled:
            raise ReservationConflictError("Reservation already canceled")
        return self.model_copy(update={"status": ReservationStatus.CANCELED})
