"""Настройка логирования"""

import logging
import re
import sys
from typing import ClassVar, Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class SecretFilter(logging.Filter):
    """
    Фильтр, заменяющий зарегистрированные секреты на [REDACTED]

    Записи не отбрасываются, только изменяются.
    """

    _secrets: ClassVar[set[str]] = set()
    _pattern: ClassVar[Optional[re.Pattern[str]]] = None

    def filter(self, record: logging.LogRecord) -> bool:
        if self._pattern is not None:
            record.msg = self._pattern.sub("[REDACTED]", str(record.msg))
            if record.args:
                record.args = tuple(
                    self._pattern.sub("[REDACTED]", arg) if isinstance(arg, str) else arg
                    for arg in record.args
                )
        return True

    @classmethod
    def register_secret(cls, secret: Optional[str]) -> None:
        """Регистрирует секрет для скрытия в логах (пустые значения игнорируются)"""
        if secret:
            cls._secrets.add(secret)
            cls._rebuild_pattern()

    @classmethod
    def clear_secrets(cls) -> None:
        cls._secrets.clear()
        cls._pattern = None

    @classmethod
    def _rebuild_pattern(cls) -> None:
        # Длинные секреты первыми, чтобы не оставлять хвосты при пересечениях
        escaped = [re.escape(s) for s in sorted(cls._secrets, key=len, reverse=True)]
        cls._pattern = re.compile("|".join(escaped)) if escaped else None


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
) -> None:
    """
    Настраивает логирование для приложения

    Args:
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Формат строки логирования (опционально)
    """
    if format_string is None:
        format_string = DEFAULT_FORMAT

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(SecretFilter())

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string,
        handlers=[handler],
        force=True,
    )
