"""Fachada `services/binding`."""

from __future__ import annotations

from dataclasses import dataclass

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.servicemanager import ServiceBindingResponseObject
from adapters.btpcli.services._filters import list_params
from core.domain.commands import (
    CommandResponse,
    new_create_request,
    new_delete_request,
    new_get_request,
    new_list_request,
)
from core.tfutils import cli_param, to_btpcli_params_map


@dataclass
class SubaccountServiceBindingCreateInput:
    subaccount: str = cli_param("subaccount")
    service_instance_id: str = cli_param("serviceInstanceID")
    name: str = cli_param("name")
    parameters: str = cli_param("parameters", default="")
    # JSON ya serializado.
    labels: str | None = cli_param("labels", default=None)


class ServicesBindingFacade(CommandFacade):
    command = "services/binding"

    def list(
        self, subaccount_id: str, fields_filter: str = "", labels_filter: str = ""
    ) -> tuple[list[ServiceBindingResponseObject], CommandResponse]:
        return self._execute(
            list[ServiceBindingResponseObject],
            new_list_request(self.command, list_params(subaccount_id, fields_filter, labels_filter)),
        )

    def get_by_id(self, subaccount_id: str, binding_id: str) -> tuple[ServiceBindingResponseObject, CommandResponse]:
        params = {"subaccount": subaccount_id, "id": binding_id}
        return self._execute(ServiceBindingResponseObject, new_get_request(self.command, params))

    def get_by_name(self, subaccount_id: str, name: str) -> tuple[ServiceBindingResponseObject, CommandResponse]:
        params = {"subaccount": subaccount_id, "name": name}
        return self._execute(ServiceBindingResponseObject, new_get_request(self.command, params))

    def create(self, args: SubaccountServiceBindingCreateInput) -> tuple[ServiceBindingResponseObject, CommandResponse]:
        return self._execute(
            ServiceBindingResponseObject,
            new_create_request(self.command, to_btpcli_params_map(args)),
        )

    def delete(self, subaccount_id: str, binding_id: str) -> tuple[ServiceBindingResponseObject, CommandResponse]:
        params = {"subaccount": subaccount_id, "id": binding_id}
        return self._execute(ServiceBindingResponseObject, new_delete_request(self.command, params))
