import json
import logging
import os
import subprocess
import sys
from pathlib import Path

from core.logger import JsonFormatter, configure_logging, get_logger

SRC = Path(__file__).resolve().parents[1] / "src"


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("call2fa.client", logging.WARNING, __file__, 1, "call2fa.unexpected_status", (), None)
    record.status_code = 500

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "call2fa.client"
    assert payload["message"] == "call2fa.unexpected_status"
    assert payload["status_code"] == 500
    assert "lineno" not in payload


def test_library_logger_has_no_handlers():
    logger = get_logger("call2fa.client")

    assert logger.handlers == []
    assert logger.propagate is True


def test_configure_logging_installs_handler_once():
    first = configure_logging("debug")
    second = configure_logging("warning")

    assert first is second is logging.getLogger("call2fa")
    assert len(first.handlers) == 1
    assert isinstance(first.handlers[0].formatter, JsonFormatter)
    assert first.level == logging.WARNING
    assert first.propagate is False


def test_configure_logging_reads_env_level(monkeypatch):
    monkeypatch.setenv("CALL2FA_LOG_LEVEL", "error")

    assert configure_logging().level == logging.ERROR


def test_client_import_ignores_invalid_settings():
    env = {**os.environ, "CALL2FA_HTTP_TIMEOUT_SECONDS": "0"}

    completed = subprocess.run(
        [sys.executable, "-c", "import adapters.call2fa_client"],
        cwd=SRC,
        env=env,
        capture_output=True,
        text=True,
    )

    assert completed.returncode == 0, completed.stderr
