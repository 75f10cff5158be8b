"""Fachada `accounts/resource-provider` (siempre a nivel de global account)."""

from __future__ import annotations

from dataclasses import dataclass

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.provisioning import ResourceProviderResponseObject
from core.domain.commands import (
    CommandResponse,
    new_create_request,
    new_delete_request,
    new_get_request,
    new_list_request,
)
from core.tfutils import cli_param, to_btpcli_params_map


@dataclass
class GlobalAccountResourceProviderCreateInput:
    provider: str = cli_param("provider")
    technical_name: str = cli_param("technicalName")
    display_name: str = cli_param("displayName", default="")
    description: str = cli_param("description", default="")
    configuration_info: str = cli_param("configurationInfo", default="")


class AccountsResourceProviderFacade(CommandFacade):
    command = "accounts/resource-provider"

    def list(self) -> tuple[list[ResourceProviderResponseObject], CommandResponse]:
        return self._execute(
            list[ResourceProviderResponseObject],
            new_list_request(self.command, {"globalAccount": self._global_account()}),
        )

    def get(self, provider: str, technical_name: str) -> tuple[ResourceProviderResponseObject, CommandResponse]:
        return self._execute(
            ResourceProviderResponseObject,
            new_get_request(
                self.command,
                {
                    "globalAccount": self._global_account(),
                    "provider": provider,
                    "technicalName": technical_name,
                },
            ),
        )

    def create(self, args: GlobalAccountResourceProviderCreateInput) -> tuple[ResourceProviderResponseObject, CommandResponse]:
        params = to_btpcli_params_map(args)
        params["globalAccount"] = self._global_account()
        return self._execute(ResourceProviderResponseObject, new_create_request(self.command, params))

    def delete(self, provider: str, technical_name: str) -> tuple[ResourceProviderResponseObject, CommandResponse]:
        return self._execute(
            ResourceProviderResponseObject,
            new_delete_request(
                self.command,
                {
                    "globalAccount": self._global_account(),
                    "provider": provider,
                    "technicalName": technical_name,
                    "confirm": "true",
                },
            ),
        )
