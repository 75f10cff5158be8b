"""Fachada `accounts/environment-instance`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.provisioning import (
    EnvironmentInstanceResponseObject,
    EnvironmentInstancesResponseCollection,
)
from core.domain.commands import (
    CommandResponse,
    new_create_request,
    new_delete_request,
    new_get_request,
    new_list_request,
    new_update_request,
)
from core.tfutils import cli_param, to_btpcli_params_map


@dataclass
class SubaccountEnvironmentInstanceCreateInput:
    subaccount_id: str = cli_param("subaccount")
    environment_type: str = cli_param("environmentType")
    service: str = cli_param("service")
    plan: str = cli_param("plan")
    display_name: str = cli_param("displayName", default="")
    landscape: str = cli_param("landscapeLabel", default="")
    parameters: str = cli_param("parameters", default="")


class AccountsEnvironmentInstanceFacade(CommandFacade):
    command = "accounts/environment-instance"

    def list(self, subaccount_id: str) -> tuple[EnvironmentInstancesResponseCollection, CommandResponse]:
        return self._execute(
            EnvironmentInstancesResponseCollection,
            new_list_request(self.command, {"subaccount": subaccount_id}),
        )

    def get(self, subaccount_id: str, environment_id: str) -> tuple[EnvironmentInstanceResponseObject, CommandResponse]:
        return self._execute(
            EnvironmentInstanceResponseObject,
            new_get_request(
                self.command,
                {
                    "subaccount": subaccount_id,
                    "environmentID": environment_id,
                },
            ),
        )

    def create(
        self, args: SubaccountEnvironmentInstanceCreateInput
    ) -> tuple[EnvironmentInstanceResponseObject, CommandResponse]:
        return self._execute(
            EnvironmentInstanceResponseObject,
            new_create_request(self.command, to_btpcli_params_map(args)),
        )

    def update(
        self, subaccount_id: str, environment_id: str, plan: str, parameters: str
    ) -> tuple[dict[str, Any], CommandResponse]:
        return self._execute(
            dict[str, Any],
            new_update_request(
                self.command,
                {
                    "subaccount": subaccount_id,
                    "environmentID": environment_id,
                    "plan": plan,
                    "parameters": parameters,
                },
            ),
        )

    def delete(self, subaccount_id: str, environment_id: str) -> tuple[EnvironmentInstanceResponseObject, CommandResponse]:
        return self._execute(
            EnvironmentInstanceResponseObject,
            new_delete_request(
                self.command,
                {
                    "subaccount": subaccount_id,
                    "environmentID": environment_id,
                    "confirm": "true",
                },
            ),
        )
