"""Errores del cliente BTP CLI.

Por qué una jerarquía propia:
- La CLI y los consumidores capturan `BtpCliError` en un solo punto.
- Los errores lógicos del backend llevan la `CommandResponse` para que el
  llamador pueda decidir (p.ej. 404 = "no existe", no un fallo).

Los errores de transporte (`httpx.TransportError`) no se envuelven.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.domain.commands import CommandResponse


class BtpCliError(Exception):
    """Base de todos los errores del cliente."""


class EncodingError(BtpCliError):
    """Un input no se puede convertir a mapa de parámetros (error de programación)."""


class ResponseStatusError(BtpCliError):
    """El status HTTP no es el esperado.

    El mensaje siempre termina en `[Status: <code>; Correlation ID: <id>]`.
    """

    def __init__(self, reason: str, *, status_code: int, correlation_id: str) -> None:
        super().__init__(f"{reason} [Status: {status_code}; Correlation ID: {correlation_id}]")
        self.reason = reason
        self.status_code = status_code
        self.correlation_id = correlation_id


class CommandError(BtpCliError):
    """Error asociado a una respuesta de comando ya recibida."""

    def __init__(self, message: str, *, command_response: CommandResponse) -> None:
        super().__init__(message)
        self.command_response = command_response

    @property
    def status_code(self) -> int:
        return self.command_response.status_code


class BackendError(CommandError):
    """El backend reportó un status lógico >= 400 (header `X-CPCLI-Backend-Status`)."""


class ResponseDecodingError(CommandError):
    """El body de una respuesta correcta no encaja con el tipo esperado."""
