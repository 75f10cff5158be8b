"""Contrato del ejecutor de comandos.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Las fachadas reciben el ejecutor por constructor; en tests se puede
  sustituir por un cliente con transporte simulado.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.commands import CommandOptions, CommandRequest, CommandResponse
from core.domain.models import LoggedInUser


@runtime_checkable
class CommandExecutor(Protocol):
    """Contrato mínimo que necesitan las fachadas.

    Reglas de diseño:
    - `execute` es síncrono y bloqueante.
    - Los errores lógicos del backend se lanzan como excepción, con la
      `CommandResponse` adjunta.
    """

    def execute(self, request: CommandRequest, *options: CommandOptions) -> CommandResponse:
        """Despacha un comando y devuelve la respuesta con el body abierto."""

        ...

    def get_global_account_subdomain(self) -> str: ...

    def get_logged_in_user(self) -> LoggedInUser | None: ...
