"""Fachada `accounts/label`."""

from __future__ import annotations

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.cis import LabelsResponseObject
from core.domain.commands import CommandResponse, new_list_request


class AccountsLabelFacade(CommandFacade):
    command = "accounts/label"

    def list_by_subaccount(self, subaccount_id: str) -> tuple[LabelsResponseObject, CommandResponse]:
        return self._execute(
            LabelsResponseObject,
            new_list_request(
                self.command,
                {
                    "globalAccount": self._global_account(),
                    "subaccountID": subaccount_id,
                },
            ),
        )

    def list_by_directory(self, directory_id: str) -> tuple[LabelsResponseObject, CommandResponse]:
        return self._execute(
            LabelsResponseObject,
            new_list_request(
                self.command,
                {
                    "globalAccount": self._global_account(),
                    "directoryID": directory_id,
                },
            ),
        )
