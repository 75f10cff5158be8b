"""Fachada `security/user`: consulta de usuarios por origin."""

from __future__ import annotations

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.xsuaa_authz import XsuaaUser
from core.domain.commands import CommandResponse, new_get_request, new_list_request


class SecurityUserFacade(CommandFacade):
    command = "security/user"

    def list_by_global_account(self, origin: str) -> tuple[list[str], CommandResponse]:
        params = {"globalAccount": self._global_account(), "origin": origin}
        return self._execute(list[str], new_list_request(self.command, params))

    def get_by_global_account(self, username: str, origin: str) -> tuple[XsuaaUser, CommandResponse]:
        params = {"globalAccount": self._global_account(), "userName": username, "origin": origin}
        return self._execute(XsuaaUser, new_get_request(self.command, params))

    def list_by_subaccount(self, subaccount_id: str, origin: str) -> tuple[list[str], CommandResponse]:
        params = {"subaccount": subaccount_id, "origin": origin}
        return self._execute(list[str], new_list_request(self.command, params))

    def get_by_subaccount(self, subaccount_id: str, username: str, origin: str) -> tuple[XsuaaUser, CommandResponse]:
        params = {"subaccount": subaccount_id, "userName": username, "origin": origin}
        return self._execute(XsuaaUser, new_get_request(self.command, params))

    def list_by_directory(self, directory_id: str, origin: str) -> tuple[list[str], CommandResponse]:
        params = {"directory": directory_id, "origin": origin}
        return self._execute(list[str], new_list_request(self.command, params))

    def get_by_directory(self, directory_id: str, username: str, origin: str) -> tuple[XsuaaUser, CommandResponse]:
        params = {"directory": directory_id, "userName": username, "origin": origin}
        return self._execute(XsuaaUser, new_get_request(self.command, params))
