"""Configuración del cliente Call2FA.

Responsabilidad:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) y comandos lean config de forma consistente.

Nota: las credenciales solo se leen, nunca se escriben a disco desde aquí.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URI = "https://api-call2fa.rikkicom.io"
DEFAULT_API_VERSION = "v1"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "call2fa"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "call2fa"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "call2fa"
    return Path.home() / ".config" / "call2fa"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Orden de carga: variables de entorno, `.env` del proyecto y luego el
    `.env` global del usuario.
    """

    model_config = SettingsConfigDict(
        env_prefix="CALL2FA_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_uri: str = Field(
        default=DEFAULT_BASE_URI,
        min_length=8,
        description="URL base del servicio Call2FA (sin barra final).",
    )
    api_version: str = Field(
        default=DEFAULT_API_VERSION,
        min_length=1,
        description="Segmento de versión de la API (p.ej. 'v1').",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="call2fa-python/0.1",
        min_length=1,
        description="User-Agent enviado al servicio.",
    )
    log_level: str = Field(
        default="INFO",
        description="Nivel de log (DEBUG, INFO, WARNING...).",
    )

    login: str | None = Field(
        default=None,
        description="Login de la API (solo lo usa la CLI).",
    )
    password: SecretStr | None = Field(
        default=None,
        description="Password de la API (solo lo usa la CLI).",
    )

    def normalized_base_uri(self) -> str:
        return self.base_uri.rstrip("/")
