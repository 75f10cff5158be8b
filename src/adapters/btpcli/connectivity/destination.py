"""Fachada `connectivity/destination`."""

from __future__ import annotations

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.connectivity import DestinationResponse
from core.domain.commands import CommandResponse, new_get_request


class ConnectivityDestinationFacade(CommandFacade):
    command = "connectivity/destination"

    def get_by_subaccount(
        self, subaccount_id: str, name: str, service_instance_id: str = ""
    ) -> tuple[DestinationResponse, CommandResponse]:
        """Lee un destino del subaccount o, si se indica, de una instancia del servicio."""

        params = {"name": name, "subaccount": subaccount_id}
        if service_instance_id:
            params["serviceInstance"] = service_instance_id
        return self._execute(DestinationResponse, new_get_request(self.command, params))
