import pytest
from pydantic import ValidationError

from bookingmx.config import BookingSettings


def test_defaults(monkeypatch):
    monkeypatch.delenv("BOOKINGMX_LOG_LEVEL", raising=False)
    monkeypatch.delenv("BOOKINGMX_NEARBY_TOP_K", raising=False)
    monkeypatch.delenv("BOOKINGMX_NEARBY_MAX_DISTANCE_KM", raising=False)

    config = BookingSettings(_env_file=None)

    assert config.log_level == "INFO"
    assert config.nearby_max_distance_km == 300
    assert config.nearby_top_k == 5


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("BOOKINGMX_LOG_LEVEL", "debug")
    monkeypatch.setenv("BOOKINGMX_NEARBY_TOP_K", "3")

    config = BookingSettings(_env_file=None)

    assert config.log_level == "DEBUG"
    assert config.nearby_top_k == 3


@pytest.mark.parametrize(
    "name, value",
    [
        ("BOOKINGMX_LOG_LEVEL", "verbose"),
        ("BOOKINGMX_NEARBY_TOP_K", "0"),
        ("BOOKINGMX_NEARBY_MAX_DISTANCE_KM", "-1"),
    ],
)
def test_invalid_values_are_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        BookingSettings(_env_file=None)
