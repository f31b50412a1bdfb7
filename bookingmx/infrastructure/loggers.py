import json
import sys
from typing import Any, Optional

from bookingmx.config import LOG_LEVELS, settings


class ConsoleLogger:
    """Простая реализация логгера, выводящая сообщения в консоль.

    Сообщения ниже уровня ``level`` (по умолчанию из настроек) отбрасываются.
    Ошибки и предупреждения пишутся в stderr, остальное в stdout.
    """

    def __init__(self, level: Optional[str] = None):
        level = (level or settings.log_level).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {list(LOG_LEVELS)}")
        self._threshold = LOG_LEVELS.index(level)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._emit("DEBUG", message, kwargs, sys.stdout)

    def info(self, message: str, **kwargs: Any) -> None:
        self._emit("INFO", message, kwargs, sys.stdout)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._emit("WARNING", message, kwargs, sys.stderr)

    def error(self, message: str, **kwargs: Any) -> None:
        self._emit("ERROR", message, kwargs, sys.stderr)

    def _emit(self, level: str, message: str, context: dict, stream) -> None:
        if LOG_LEVELS.index(level) < self._threshold:
            return
        print(f"[{level}] {message}", file=stream, flush=True)
        if context:
            print(
                "  Context:",
                json.dumps(context, default=str, indent=2, ensure_ascii=False),
                file=stream,
                flush=True,
            )
