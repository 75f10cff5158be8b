"""Fachada `accounts/subscription`."""

from __future__ import annotations

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.saas_manager import (
    EntitledApplicationsResponseCollection,
    EntitledApplicationsResponseObject,
)
from core.domain.commands import CommandResponse, new_get_request, new_list_request


class AccountsSubscriptionFacade(CommandFacade):
    command = "accounts/subscription"

    def list(self, subaccount_id: str) -> tuple[list[EntitledApplicationsResponseObject], CommandResponse]:
        collection, res = self._execute(
            EntitledApplicationsResponseCollection,
            new_list_request(self.command, {"subaccount": subaccount_id}),
        )
        return collection.applications, res

    def get(
        self, subaccount_id: str, app_name: str, plan_name: str = ""
    ) -> tuple[EntitledApplicationsResponseObject, CommandResponse]:
        params = {
            "subaccount": subaccount_id,
            "appName": app_name,
        }
        if plan_name:
            params["planName"] = plan_name
        return self._execute(EntitledApplicationsResponseObject, new_get_request(self.command, params))
