from datetime import date
from typing import Optional


class ReservationValidator:
    """Проверки дат и количества гостей. Не имеет состояния и не бросает исключений."""

    @staticmethod
    def validate_dates(check_in: Optional[date], check_out: Optional[date]) -> bool:
        """Дата заезда должна быть строго раньше даты выезда."""
        if check_in is None or check_out is None:
            return False
        return check_in < check_out

    @staticmethod
    def validate_guests(guests: int, capacity: int) -> bool:
        return 0 < guests <= capacity
