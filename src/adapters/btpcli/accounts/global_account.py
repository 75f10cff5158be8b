"""Fachada `accounts/global-account`."""

from __future__ import annotations

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.cis import GlobalAccountHierarchyResponseObject, GlobalAccountResponseObject
from core.domain.commands import CommandResponse, new_get_request


class AccountsGlobalAccountFacade(CommandFacade):
    command = "accounts/global-account"

    def get(self) -> tuple[GlobalAccountResponseObject, CommandResponse]:
        return self._execute(
            GlobalAccountResponseObject,
            new_get_request(self.command, {"globalAccount": self._global_account()}),
        )

    def get_with_hierarchy(self) -> tuple[GlobalAccountHierarchyResponseObject, CommandResponse]:
        return self._execute(
            GlobalAccountHierarchyResponseObject,
            new_get_request(
                self.command,
                {
                    "globalAccount": self._global_account(),
                    "showHierarchy": "true",
                },
            ),
        )
