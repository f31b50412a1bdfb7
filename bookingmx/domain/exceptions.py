"""
Исключения доменного слоя бронирования.
"""


class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class ReservationConflictError(DomainException):
    """Пересечение дат или недопустимый переход статуса."""

    pass


class ReservationNotFoundError(DomainException):
    """Исключение: бронирование не найдено."""

    def __init__(self, reservation_id: str):
        super().__init__(f"Reservation {reservation_id} not found")
        self.reservation_id = reservation_id


class InvalidReservationError(DomainException):
    """Исключение при нарушении правил валидации бронирования."""

    pass
