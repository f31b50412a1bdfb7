"""Настройки BookingMX, читаемые из окружения (префикс BOOKINGMX_)."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class BookingSettings(BaseSettings):
    """Настройки приложения с валидацией Pydantic."""

    model_config = SettingsConfigDict(
        env_prefix="BOOKINGMX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Логирование
    log_level: str = Field(default="INFO", description="Минимальный уровень логов")

    # Поиск ближайших городов
    nearby_max_distance_km: float = Field(
        default=300.0, gt=0, description="Радиус поиска ближайших городов, км"
    )
    nearby_top_k: int = Field(
        default=5, gt=0, description="Максимальное число ближайших городов"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {list(LOG_LEVELS)}")
        return v.upper()


settings = BookingSettings()
