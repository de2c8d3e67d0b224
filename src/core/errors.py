"""Errores del cliente Call2FA.

Cada variante de fallo es una clase propia para que el llamador pueda
distinguirlas con `except`:

- validación: un parámetro obligatorio llegó vacío (antes de cualquier I/O);
- transporte: httpx no pudo completar la petición;
- protocolo: el servicio respondió con un status inesperado;
- decodificación: el cuerpo no es el JSON esperado.
"""

from __future__ import annotations


class Call2FAError(Exception):
    """Base de todos los errores del cliente."""


class EmptyParameterError(Call2FAError, ValueError):
    """Un parámetro obligatorio está vacío."""

    parameter = "parameter"

    def __init__(self) -> None:
        super().__init__(f"The {self.parameter} parameter is empty")


class EmptyLoginError(EmptyParameterError):
    parameter = "login"


class EmptyPasswordError(EmptyParameterError):
    parameter = "password"


class EmptyPhoneNumberError(EmptyParameterError):
    parameter = "phone number"


class EmptyPoolIdError(EmptyParameterError):
    parameter = "pool ID"


class EmptyCodeError(EmptyParameterError):
    parameter = "code"


class EmptyLangError(EmptyParameterError):
    parameter = "lang"


class EmptyIdError(EmptyParameterError):
    parameter = "call ID"


class RequestFailedError(Call2FAError):
    """Fallo de red (DNS, TCP, TLS, timeout). La causa httpx queda en `__cause__`."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"HTTP request failed: {reason}")


class UnexpectedStatusCodeError(Call2FAError):
    """El servicio devolvió un status distinto del esperado para el endpoint."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"API returned an unexpected status code: {status_code}")


class DeserializationFailedError(Call2FAError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to deserialize JSON response: {reason}")


class JwtNotFoundError(DeserializationFailedError):
    """La respuesta de autenticación no trae un `jwt` utilizable."""

    def __init__(self) -> None:
        Call2FAError.__init__(self, "JWT not found in authentication response")
