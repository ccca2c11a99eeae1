"""Централизованная конфигурация логирования.

Использование:
    from s3check.logging_config import setup_logging

    # В точке входа
    setup_logging()

Логи пишутся в stderr: stdout занят отчётом.

Переменные окружения:
    LOG_LEVEL - уровень логирования (DEBUG, INFO, WARNING, ERROR). По умолчанию: INFO
    LOG_FORMAT - формат логов (json, text). По умолчанию: text
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any


class JSONFormatter(logging.Formatter):
    """JSON formatter для structured logging."""

    # Поля, которые добавляются в extra для контекста
    EXTRA_FIELDS = frozenset({
        "bucket",
        "region",
        "endpoint_url",
        "local_root",
        "entry_count",
        "error_code",
        "exit_code",
    })

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in self.EXTRA_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_data[field] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Читаемый форматтер для консоли."""

    FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

    def __init__(self) -> None:
        super().__init__(self.FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def get_log_level() -> int:
    """Получить уровень логирования из env."""
    level_str = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_str, logging.INFO)


def get_log_format() -> str:
    """Получить формат логов из env: 'json' или 'text'."""
    return os.getenv("LOG_FORMAT", "text").lower()


def setup_logging() -> None:
    """Настроить логирование для всего приложения.

    Существующие handlers корневого логгера заменяются.
    """
    log_level = get_log_level()

    if get_log_format() == "json":
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = HumanReadableFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Уровни для сторонних библиотек (уменьшаем шум)
    for name in ("boto3", "botocore", "s3transfer", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)


class LogContext:
    """Context manager для добавления контекста к логам.

    Пример:
        with LogContext(bucket="my-bucket", region="eu-central-1"):
            logger.info("Listing")  # Запись получит bucket и region
    """

    def __init__(self, **context: Any) -> None:
        self.context = context
        self._old_factory: Any = None

    def __enter__(self) -> "LogContext":
        self._old_factory = logging.getLogRecordFactory()
        context = self.context
        old_factory = self._old_factory

        def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
            record = old_factory(*args, **kwargs)
            for key, value in context.items():
                setattr(record, key, value)
            return record

        logging.setLogRecordFactory(record_factory)
        return self

    def __exit__(self, *args: Any) -> None:
        if self._old_factory is not None:
            logging.setLogRecordFactory(self._old_factory)
