"""Adaptador para la API de Rikkicom Call2FA.

Responsabilidad:
- Autenticarse con login/password y guardar el JWT devuelto.
- Originar llamadas (simple, con código, vía pool de últimos dígitos).
- Consultar el estado de una llamada.

Cada operación valida sus parámetros antes de tocar la red, hace un único
round trip y traduce el status HTTP a excepciones de `core.errors`. No hay
reintentos ni refresco del token.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.models import (
    AuthRequest,
    AuthResponse,
    CallRequest,
    CallWithCodeRequest,
    JsonValue,
    PoolCallRequest,
    dump_body,
)
from core.errors import (
    DeserializationFailedError,
    EmptyCodeError,
    EmptyIdError,
    EmptyLangError,
    EmptyLoginError,
    EmptyParameterError,
    EmptyPasswordError,
    EmptyPhoneNumberError,
    EmptyPoolIdError,
    JwtNotFoundError,
    RequestFailedError,
    UnexpectedStatusCodeError,
)
from core.interfaces.call_service import Call2FAService
from core.logger import get_logger

logger = get_logger("call2fa.client")


def _require(value: str, error: type[EmptyParameterError]) -> None:
    if not value:
        raise error()


def _send(
    http_client: httpx.Client,
    method: str,
    uri: str,
    *,
    expected: HTTPStatus,
    body: BaseModel | None = None,
    jwt: str | None = None,
) -> httpx.Response:
    headers: dict[str, str] = {}
    if jwt:
        headers["Authorization"] = f"Bearer {jwt}"

    try:
        response = http_client.request(
            method,
            uri,
            json=dump_body(body) if body is not None else None,
            headers=headers,
        )
    except httpx.HTTPError as exc:
        logger.warning(
            "call2fa.request_failed",
            extra={"method": method, "uri": uri, "error": str(exc)},
        )
        raise RequestFailedError(str(exc)) from exc

    logger.debug(
        "call2fa.response",
        extra={"method": method, "uri": uri, "status_code": response.status_code},
    )
    if response.status_code != expected:
        logger.warning(
            "call2fa.unexpected_status",
            extra={
                "method": method,
                "uri": uri,
                "status_code": response.status_code,
                "expected": int(expected),
            },
        )
        raise UnexpectedStatusCodeError(response.status_code)
    return response


def _decode(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise DeserializationFailedError(str(exc)) from exc


class Client(Call2FAService):
    """Cliente autenticado del servicio Call2FA.

    Se construye con `Client.create(login, password)`. El token queda fijo
    durante toda la vida del objeto; solo la versión de la API es mutable.
    """

    def __init__(
        self,
        *,
        http_client: httpx.Client,
        base_uri: str,
        version: str,
        jwt: str,
    ) -> None:
        self._http = http_client
        self._base_uri = base_uri
        self._version = version
        self._jwt = jwt

    @classmethod
    def create(
        cls,
        login: str,
        password: str,
        *,
        settings: AppSettings | None = None,
        http_client: httpx.Client | None = None,
    ) -> Client:
        """Valida credenciales, se autentica y devuelve un cliente listo.

        Si se pasa `http_client`, el cliente resultante pasa a ser su dueño.
        """

        _require(login, EmptyLoginError)
        _require(password, EmptyPasswordError)

        settings = settings or AppSettings()
        base_uri = settings.normalized_base_uri()
        version = settings.api_version

        owns_transport = http_client is None
        http = http_client or build_client(settings)
        try:
            jwt = cls._receive_jwt(http, base_uri, version, AuthRequest(login=login, password=password))
        except Exception:
            if owns_transport:
                http.close()
            raise

        logger.debug("call2fa.authenticated", extra={"base_uri": base_uri, "version": version})
        return cls(http_client=http, base_uri=base_uri, version=version, jwt=jwt)

    @staticmethod
    def _receive_jwt(
        http_client: httpx.Client,
        base_uri: str,
        version: str,
        credentials: AuthRequest,
    ) -> str:
        uri = f"{base_uri}/{version}/auth/"
        response = _send(http_client, "POST", uri, expected=HTTPStatus.OK, body=credentials)
        payload = _decode(response)
        if not isinstance(payload, dict):
            raise JwtNotFoundError()
        try:
            return AuthResponse.model_validate(payload).jwt
        except ValidationError as exc:
            raise JwtNotFoundError() from exc

    # ------------------------------------------------------------------
    # Operaciones
    # ------------------------------------------------------------------

    def call(self, phone_number: str, callback_url: str = "") -> JsonValue:
        """Inicia una llamada simple."""

        _require(phone_number, EmptyPhoneNumberError)
        body = CallRequest(phone_number=phone_number, callback_url=callback_url)
        return self._post("call", body)

    def call_via_last_digits(
        self, phone_number: str, pool_id: str, use_six_digits: bool = False
    ) -> JsonValue:
        """Inicia una llamada en modo "últimos dígitos" desde un pool."""

        _require(phone_number, EmptyPhoneNumberError)
        _require(pool_id, EmptyPoolIdError)

        method = f"pool/{pool_id}/call"
        if use_six_digits:
            method += "/six-digits"
        return self._post(method, PoolCallRequest(phone_number=phone_number))

    def call_with_code(self, phone_number: str, code: str, lang: str) -> JsonValue:
        """Inicia una llamada que dicta `code` en el idioma `lang`."""

        _require(phone_number, EmptyPhoneNumberError)
        _require(code, EmptyCodeError)
        _require(lang, EmptyLangError)

        body = CallWithCodeRequest(phone_number=phone_number, code=code, lang=lang)
        return self._post("code/call", body)

    def info(self, call_id: str) -> JsonValue:
        _require(call_id, EmptyIdError)
        uri = self.make_full_uri(f"call/{call_id}")
        response = _send(self._http, "GET", uri, expected=HTTPStatus.OK, jwt=self._jwt)
        return _decode(response)

    def _post(self, method: str, body: BaseModel) -> JsonValue:
        uri = self.make_full_uri(method)
        response = _send(
            self._http, "POST", uri, expected=HTTPStatus.CREATED, body=body, jwt=self._jwt
        )
        return _decode(response)

    # ------------------------------------------------------------------
    # Estado
    # ------------------------------------------------------------------

    def make_full_uri(self, method: str) -> str:
        """URI completa a un método de la API (siempre con barra final)."""

        return f"{self._base_uri}/{self._version}/{method}/"

    @property
    def base_uri(self) -> str:
        return self._base_uri

    @property
    def version(self) -> str:
        return self._version

    def set_version(self, version: str) -> None:
        self._version = version

    @property
    def jwt(self) -> str:
        return self._jwt

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Client(base_uri={self._base_uri!r}, version={self._version!r})"
