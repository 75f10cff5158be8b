"""Fachada `security/available-idp`: tenants IAS disponibles para trust."""

from __future__ import annotations

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.xsuaa_authz import IdentityProvider
from core.domain.commands import CommandResponse, new_get_request, new_list_request


class SecurityIdentityProviderFacade(CommandFacade):
    command = "security/available-idp"

    def list_by_global_account(self) -> tuple[list[IdentityProvider], CommandResponse]:
        return self._execute(
            list[IdentityProvider],
            new_list_request(self.command, {"globalAccount": self._global_account()}),
        )

    def get_by_global_account(self, host: str) -> tuple[IdentityProvider, CommandResponse]:
        params = {"iasTenantUrl": host, "globalAccount": self._global_account()}
        return self._execute(IdentityProvider, new_get_request(self.command, params))

    def list_by_subaccount(self, subaccount_id: str) -> tuple[list[IdentityProvider], CommandResponse]:
        return self._execute(list[IdentityProvider], new_list_request(self.command, {"subaccount": subaccount_id}))

    def get_by_subaccount(self, subaccount_id: str, host: str) -> tuple[IdentityProvider, CommandResponse]:
        params = {"subaccount": subaccount_id, "iasTenantUrl": host}
        return self._execute(IdentityProvider, new_get_request(self.command, params))
