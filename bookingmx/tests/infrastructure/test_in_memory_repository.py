from datetime import timedelta

from bookingmx.domain.reservation import ReservationStatus
from bookingmx.infrastructure.repositories import InMemoryReservationRepository


def test_find_by_id_returns_none_for_unknown_id(quiet_logger):
    repo = InMemoryReservationRepository(logger=quiet_logger)

    assert repo.find_by_id("missing") is None
    assert len(repo) == 0


def test_save_returns_and_stores_reservation(quiet_logger, sample_reservation):
    repo = InMemoryReservationRepository(logger=quiet_logger)

    saved = repo.save(sample_reservation)

    assert saved is sample_reservation
    assert repo.find_by_id("r-123") == sample_reservation


def test_save_replaces_previous_value(quiet_logger, sample_reservation):
    """Тест: сохранение с тем же ID заменяет ссылку в хранилище."""
    repo = InMemoryReservationRepository(logger=quiet_logger)
    repo.save(sample_reservation)

    moved = sample_reservation.reschedule(
        sample_reservation.check_in + timedelta(days=2),
        sample_reservation.check_out + timedelta(days=2),
    )
    repo.save(moved.cancel())

    stored = repo.find_by_id("r-123")
    assert stored.status == ReservationStatus.CANCELED
    assert stored.check_in == moved.check_in
    assert len(repo) == 1
