"""Fachada `services/broker` (brokers registrados en un subaccount)."""

from __future__ import annotations

from dataclasses import dataclass

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.servicemanager import ServiceBrokerResponseObject
from adapters.btpcli.services._filters import list_params
from core.domain.commands import (
    CommandResponse,
    new_get_request,
    new_list_request,
    new_register_request,
    new_unregister_request,
    new_update_request,
)
from core.tfutils import cli_param, to_btpcli_params_map


@dataclass
class SubaccountServiceBrokerRegisterInput:
    subaccount: str = cli_param("subaccount")
    name: str = cli_param("name")
    url: str = cli_param("url")
    user: str = cli_param("user")
    password: str = cli_param("password")
    description: str = cli_param("description", default="")
    labels: dict[str, list[str]] | None = cli_param("labels", default=None)


@dataclass
class SubaccountServiceBrokerUpdateInput:
    id: str = cli_param("id")
    subaccount: str = cli_param("subaccount")
    new_name: str = cli_param("newName", default="")
    description: str = cli_param("description", default="")
    user: str = cli_param("user", default="")
    password: str = cli_param("password", default="")
    url: str = cli_param("url", default="")
    labels: dict[str, list[str]] | None = cli_param("labels", default=None)


class ServicesBrokerFacade(CommandFacade):
    command = "services/broker"

    def list(
        self, subaccount_id: str, fields_filter: str = "", labels_filter: str = ""
    ) -> tuple[list[ServiceBrokerResponseObject], CommandResponse]:
        return self._execute(
            list[ServiceBrokerResponseObject],
            new_list_request(self.command, list_params(subaccount_id, fields_filter, labels_filter)),
        )

    def get_by_id(self, subaccount_id: str, broker_id: str) -> tuple[ServiceBrokerResponseObject, CommandResponse]:
        params = {"subaccount": subaccount_id, "id": broker_id}
        return self._execute(ServiceBrokerResponseObject, new_get_request(self.command, params))

    def get_by_name(self, subaccount_id: str, name: str) -> tuple[ServiceBrokerResponseObject, CommandResponse]:
        params = {"subaccount": subaccount_id, "name": name}
        return self._execute(ServiceBrokerResponseObject, new_get_request(self.command, params))

    def register(self, args: SubaccountServiceBrokerRegisterInput) -> tuple[ServiceBrokerResponseObject, CommandResponse]:
        return self._execute(
            ServiceBrokerResponseObject,
            new_register_request(self.command, to_btpcli_params_map(args)),
        )

    def update(self, args: SubaccountServiceBrokerUpdateInput) -> tuple[ServiceBrokerResponseObject, CommandResponse]:
        return self._execute(
            ServiceBrokerResponseObject,
            new_update_request(self.command, to_btpcli_params_map(args)),
        )

    def unregister(self, subaccount_id: str, broker_id: str) -> CommandResponse:
        params = {"subaccount": subaccount_id, "id": broker_id, "confirm": "true"}
        return self._execute_without_body(new_unregister_request(self.command, params))
