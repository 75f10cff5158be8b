"""Fachada `connectivity/destination-trust`.

El backend guarda dos certificados de confianza por subaccount: el activo y el
pasivo (el siguiente en rotar). El parámetro `passive` elige cuál leer.
"""

from __future__ import annotations

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.connectivity import DestinationTrustResponse
from core.domain.commands import CommandResponse, new_get_request


class ConnectivityDestinationTrustFacade(CommandFacade):
    command = "connectivity/destination-trust"

    def get_by_subaccount(self, subaccount_id: str, active: bool) -> tuple[DestinationTrustResponse, CommandResponse]:
        params = {
            "subaccount": subaccount_id,
            "passive": "false" if active else "true",
        }
        return self._execute(DestinationTrustResponse, new_get_request(self.command, params))
