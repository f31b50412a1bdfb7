"""
Общие фикстуры для тестов BookingMX.
"""

from datetime import date, timedelta

import pytest

from bookingmx.domain.reservation import Reservation, ReservationStatus
from bookingmx.infrastructure.loggers import ConsoleLogger


@pytest.fixture
def today() -> date:
    return date.today()


@pytest.fixture
def sample_reservation(today: date) -> Reservation:
    """Бронирование r-123: номер room-12, заезд через 3 дня, выезд через 7."""
    return Reservation(
        id="r-123",
        hotel_id="hotel-1",
        room_id="room-12",
        check_in=today + timedelta(days=3),
        check_out=today + timedelta(days=7),
        guests=2,
        status=ReservationStatus.CONFIRMED,
    )


@pytest.fixture
def quiet_logger() -> ConsoleLogger:
    """Логгер, который пропускает только ошибки."""
    return ConsoleLogger(level="ERROR")
