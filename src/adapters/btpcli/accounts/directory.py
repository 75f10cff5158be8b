"""Fachada `accounts/directory`."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.cis import DirectoryResponseObject
from core.domain.commands import (
    CommandResponse,
    new_create_request,
    new_delete_request,
    new_enable_request,
    new_get_request,
    new_update_request,
)
from core.tfutils import cli_param, to_btpcli_params_map


@dataclass
class DirectoryCreateInput:
    display_name: str = cli_param("displayName")
    description: str | None = cli_param("description", default=None)
    parent_id: str | None = cli_param("parentID", default=None)
    subdomain: str | None = cli_param("subdomain", default=None)
    labels: dict[str, list[str]] | None = cli_param("labels", default=None)
    global_account: str = cli_param("globalAccount", default="")
    features: list[str] | None = cli_param("directoryFeatures", default=None)


@dataclass
class DirectoryUpdateInput:
    directory_id: str = cli_param("directoryID")
    global_account: str = cli_param("globalAccount", default="")
    display_name: str | None = cli_param("displayName", default=None)
    description: str | None = cli_param("description", default=None)
    labels: dict[str, list[str]] | None = cli_param("labels", default=None)


@dataclass
class DirectoryEnableInput:
    """Convierte un directory normal en uno con gestión propia."""

    directory_id: str = cli_param("directoryID")
    features: list[str] = cli_param("directoryFeatures")
    subdomain: str | None = cli_param("subdomain", default=None)
    global_account: str = cli_param("globalAccount", default="")


class AccountsDirectoryFacade(CommandFacade):
    command = "accounts/directory"

    def get(self, directory_id: str) -> tuple[DirectoryResponseObject, CommandResponse]:
        return self._execute(
            DirectoryResponseObject,
            new_get_request(
                self.command,
                {
                    "globalAccount": self._global_account(),
                    "directoryID": directory_id,
                },
            ),
        )

    def create(self, args: DirectoryCreateInput) -> tuple[DirectoryResponseObject, CommandResponse]:
        params = to_btpcli_params_map(dataclasses.replace(args, global_account=self._global_account()))
        return self._execute(DirectoryResponseObject, new_create_request(self.command, params))

    def update(self, args: DirectoryUpdateInput) -> tuple[DirectoryResponseObject, CommandResponse]:
        params = to_btpcli_params_map(dataclasses.replace(args, global_account=self._global_account()))
        return self._execute(DirectoryResponseObject, new_update_request(self.command, params))

    def delete(self, directory_id: str) -> tuple[DirectoryResponseObject, CommandResponse]:
        return self._execute(
            DirectoryResponseObject,
            new_delete_request(
                self.command,
                {
                    "globalAccount": self._global_account(),
                    "directoryID": directory_id,
                    "forceDelete": "true",
                    "confirm": "true",
                },
            ),
        )

    def enable(self, args: DirectoryEnableInput) -> tuple[DirectoryResponseObject, CommandResponse]:
        params = to_btpcli_params_map(dataclasses.replace(args, global_account=self._global_account()))
        return self._execute(DirectoryResponseObject, new_enable_request(self.command, params))
