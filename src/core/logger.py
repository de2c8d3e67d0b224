"""Logging estructurado (una línea JSON por evento).

Los campos pasados vía `extra={...}` se agregan al objeto JSON.

La librería solo pide loggers con `get_logger`; el handler JSON lo instala
la CLI con `configure_logging`, así una aplicación anfitriona puede enrutar
los registros con sus propios handlers.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any

ROOT_LOGGER = "call2fa"

_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    """Produce un objeto JSON por registro."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key in _STANDARD_ATTRS or key.startswith("_") or key in payload:
                continue
            payload[key] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Logger de librería, sin handlers propios."""

    return logging.getLogger(name)


def configure_logging(level: str | None = None) -> logging.Logger:
    """Instala el handler JSON en el logger `call2fa` una sola vez.

    Sin `level` se usa `CALL2FA_LOG_LEVEL` (default INFO). Llamadas
    repetidas solo ajustan el nivel.
    """

    logger = logging.getLogger(ROOT_LOGGER)
    level_name = (level or os.getenv("CALL2FA_LOG_LEVEL", "INFO")).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    if getattr(logger, "_configured", False):
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    logger._configured = True  # type: ignore[attr-defined]
    return logger
