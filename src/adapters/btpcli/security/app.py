"""Fachada `security/app` (aplicaciones XSUAA registradas)."""

from __future__ import annotations

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.xsuaa_authz import App
from core.domain.commands import CommandResponse, new_get_request, new_list_request


class SecurityAppFacade(CommandFacade):
    command = "security/app"

    def list_by_global_account(self) -> tuple[list[App], CommandResponse]:
        return self._execute(list[App], new_list_request(self.command, {"globalAccount": self._global_account()}))

    def get_by_global_account(self, app_id: str) -> tuple[App, CommandResponse]:
        params = {"globalAccount": self._global_account(), "appId": app_id}
        return self._execute(App, new_get_request(self.command, params))

    def list_by_subaccount(self, subaccount_id: str) -> tuple[list[App], CommandResponse]:
        return self._execute(list[App], new_list_request(self.command, {"subaccount": subaccount_id}))

    def get_by_subaccount(self, subaccount_id: str, app_id: str) -> tuple[App, CommandResponse]:
        return self._execute(App, new_get_request(self.command, {"subaccount": subaccount_id, "appId": app_id}))

    def list_by_directory(self, directory_id: str) -> tuple[list[App], CommandResponse]:
        return self._execute(list[App], new_list_request(self.command, {"directory": directory_id}))

    def get_by_directory(self, directory_id: str, app_id: str) -> tuple[App, CommandResponse]:
        return self._execute(App, new_get_request(self.command, {"directory": directory_id, "appId": app_id}))
