"""Fachadas de solo lectura: entornos y regiones disponibles."""

from __future__ import annotations

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.cis import DataCenterResponseCollection
from adapters.btpcli.models.provisioning import AvailableEnvironmentResponseCollection
from core.domain.commands import CommandResponse, new_list_request


class AccountsAvailableEnvironmentFacade(CommandFacade):
    command = "accounts/available-environment"

    def list(self, subaccount_id: str) -> tuple[AvailableEnvironmentResponseCollection, CommandResponse]:
        return self._execute(
            AvailableEnvironmentResponseCollection,
            new_list_request(self.command, {"subaccount": subaccount_id}),
        )


class AccountsAvailableRegionFacade(CommandFacade):
    command = "accounts/available-region"

    def list(self) -> tuple[DataCenterResponseCollection, CommandResponse]:
        return self._execute(
            DataCenterResponseCollection,
            new_list_request(self.command, {"globalAccount": self._global_account()}),
        )
