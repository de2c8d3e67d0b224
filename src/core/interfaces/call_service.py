"""Contrato de un servicio de llamadas 2FA.

La CLI depende de este Protocol y no del cliente HTTP concreto, así los
comandos se pueden probar con un doble.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import JsonValue


@runtime_checkable
class Call2FAService(Protocol):
    """Contrato mínimo para originar llamadas y consultarlas.

    Reglas de diseño:
    - Todas las operaciones son síncronas y hacen a lo sumo un round trip.
    - Las respuestas se devuelven como JSON genérico, sin esquema.
    """

    def call(self, phone_number: str, callback_url: str = "") -> JsonValue:
        ...

    def call_via_last_digits(
        self, phone_number: str, pool_id: str, use_six_digits: bool = False
    ) -> JsonValue:
        ...

    def call_with_code(self, phone_number: str, code: str, lang: str) -> JsonValue:
        ...

    def info(self, call_id: str) -> JsonValue:
        """Estado de una llamada por su identificador."""

        ...
