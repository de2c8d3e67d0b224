"""Modelos del dominio (Pydantic v2).

Cuerpos de petición del servicio Call2FA y la respuesta de autenticación.
Las respuestas de las llamadas no tienen esquema: se devuelven como JSON
genérico (`JsonValue`).

Nota:
- Estos modelos describen *qué* se envía, no *cómo* se envía.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

JsonValue = Union[dict[str, Any], list[Any], str, int, float, bool, None]


class AuthRequest(BaseModel):
    """Par de credenciales; vive solo durante la autenticación."""

    model_config = ConfigDict(frozen=True)

    login: str = Field(..., description="Login de la API del cliente.")
    password: str = Field(..., repr=False, description="Password de la API del cliente.")


class AuthResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    jwt: str = Field(
        ...,
        min_length=1,
        description="Token bearer emitido por el servicio.",
    )


class CallRequest(BaseModel):
    """Llamada simple con URL de callback opcional."""

    phone_number: str = Field(..., description="Número a llamar (formato E.164).")
    callback_url: str | None = Field(
        default=None,
        description="URL que recibe el resultado de la llamada. Se omite si está vacía.",
    )

    @field_validator("callback_url")
    @classmethod
    def _empty_as_missing(cls, value: str | None) -> str | None:
        return value or None


class CallWithCodeRequest(BaseModel):
    """Llamada que dicta un código de verificación en el idioma indicado."""

    phone_number: str = Field(..., description="Número a llamar (formato E.164).")
    code: str = Field(..., description="Código a dictar.")
    lang: str = Field(..., description="Idioma de la locución (p.ej. 'en', 'uk').")


class PoolCallRequest(BaseModel):
    # El pool id y el modo de seis dígitos viajan en la ruta.
    phone_number: str = Field(..., description="Número a llamar (formato E.164).")


def dump_body(model: BaseModel) -> dict[str, Any]:
    """Serializa un DTO al cuerpo JSON, omitiendo los campos ausentes."""

    return model.model_dump(mode="json", exclude_none=True)
