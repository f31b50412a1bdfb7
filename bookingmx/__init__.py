"""
BookingMX: бронирование номеров в отеле.

Содержит:
- Доменную модель бронирования и валидатор дат/количества гостей
- Сервис приложения для создания, изменения и отмены бронирований
- Адаптеры инфраструктуры (хранилище в памяти, консольный логгер)
- Граф ближайших к направлению городов
"""

from . import application, domain, infrastructure, nearby

__all__ = [
    "application",
    "domain",
    "infrastructure",
    "nearby",
]
