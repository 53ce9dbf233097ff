"""Настройка структуры и вывода логирования.

Один лог-файл на сессию (= один запуск сервера):
  - app_<SESSION_ID>.log — HTTP-запросы и операции с заметками

При непрерывной работе файл ротируется каждые 4 часа (до 12 ротаций на сессию).
Все файлы хранятся в data/logs/sessions/.
"""

from __future__ import annotations

import logging
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from .config import LOGS_DIR

# Идентификатор сессии — дата и время запуска сервера (один раз при импорте)
SESSION_ID: str = datetime.now().strftime("%Y-%m-%d_%H-%M")

SESSIONS_DIR: Path = LOGS_DIR / "sessions"
APP_LOG_FILE: Path = SESSIONS_DIR / f"app_{SESSION_ID}.log"


# --- Форматтеры ---

class SafeExtraFormatter(logging.Formatter):
    """Formatter со стабильными extra-полями (подставляет '-' если поле отсутствует)."""

    _EXTRA_FIELDS = ("client_ip", "method", "path", "status_code", "duration_ms", "event", "note", "details")

    def format(self, record: logging.LogRecord) -> str:
        for field in self._EXTRA_FIELDS:
            if not hasattr(record, field):
                setattr(record, field, "-")
        return super().format(record)


_APP_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    " | event=%(event)s | method=%(method)s | path=%(path)s"
    " | status=%(status_code)s | duration_ms=%(duration_ms)s"
    " | ip=%(client_ip)s | note=%(note)s | details=%(details)s"
)


# --- Настройка ---

_CONFIGURED = False


def setup_logging(log_file: Path = APP_LOG_FILE) -> Path:
    """Настраивает логирование и возвращает путь к файлу лога."""
    global _CONFIGURED
    if _CONFIGURED:
        return log_file

    log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)

    # Убрать все существующие хендлеры
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    formatter = SafeExtraFormatter(_APP_FORMAT)

    # Ротация каждые 4 часа, хранить до 12 файлов (48 ч непрерывной работы)
    file_handler = TimedRotatingFileHandler(
        log_file, when="H", interval=4, backupCount=12, encoding="utf-8"
    )
    file_handler.setFormatter(formatter)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(stream_handler)

    _CONFIGURED = True
    root_logger.info(
        "Logging configured",
        extra={"event": "app.startup", "details": f"session={SESSION_ID} | app_log={log_file}"},
    )
    return log_file
