"""Fachada `accounts/subaccount`.

Incluye la suscripción/desuscripción a aplicaciones SaaS, que el backend
expone como acciones del propio comando de subaccount.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.cis import ResponseCollectionSubaccountResponseObject, SubaccountResponseObject
from adapters.btpcli.models.saas_manager import SubscriptionAssignmentResponseObject
from core.domain.commands import (
    CommandResponse,
    new_create_request,
    new_delete_request,
    new_get_request,
    new_list_request,
    new_subscribe_request,
    new_unsubscribe_request,
    new_update_request,
)
from core.errors import BtpCliError
from core.tfutils import cli_param, to_btpcli_params_map

logger = logging.getLogger(__name__)

# Mensajes con los que el backend rechaza `forceDelete=true`; se reintenta sin forzar.
_FORCE_DELETE_REJECTIONS = (
    "Subaccount cannot be deleted with forceDelete=true due to the global account settings",
    "Subaccount is marked as used for production and cannot be deleted with forceDelete=true",
)


@dataclass
class SubaccountCreateInput:
    display_name: str = cli_param("displayName")
    region: str = cli_param("region")
    subdomain: str = cli_param("subdomain")
    beta_enabled: bool = cli_param("betaEnabled", default=False)
    description: str = cli_param("description", default="")
    directory: str = cli_param("directoryID", default="")
    labels: dict[str, list[str]] | None = cli_param("labels", default=None)
    used_for_production: str = cli_param("usedForProduction", default="")
    global_account: str = cli_param("globalAccount", default="")
    admin_directory_id: str = cli_param("adminDirectory", default="")


@dataclass
class SubaccountUpdateInput:
    subaccount_id: str = cli_param("subaccount")
    beta_enabled: bool = cli_param("betaEnabled", default=False)
    description: str = cli_param("description", default="")
    directory: str = cli_param("directoryID", default="")
    display_name: str = cli_param("displayName", default="")
    labels: dict[str, list[str]] | None = cli_param("labels", default=None)
    used_for_production: str = cli_param("usedForProduction", default="")
    global_account: str = cli_param("globalAccount", default="")


class AccountsSubaccountFacade(CommandFacade):
    command = "accounts/subaccount"

    def list(self, labels_filter: str = "") -> tuple[ResponseCollectionSubaccountResponseObject, CommandResponse]:
        params = {"globalAccount": self._global_account()}
        if labels_filter:
            params["labelsFilter"] = labels_filter
        return self._execute(ResponseCollectionSubaccountResponseObject, new_list_request(self.command, params))

    def get(self, subaccount_id: str) -> tuple[SubaccountResponseObject, CommandResponse]:
        return self._execute(
            SubaccountResponseObject,
            new_get_request(
                self.command,
                {
                    "globalAccount": self._global_account(),
                    "subaccount": subaccount_id,
                },
            ),
        )

    def create(self, args: SubaccountCreateInput) -> tuple[SubaccountResponseObject, CommandResponse]:
        params = to_btpcli_params_map(dataclasses.replace(args, global_account=self._global_account()))
        return self._execute(SubaccountResponseObject, new_create_request(self.command, params))

    def update(self, args: SubaccountUpdateInput) -> tuple[SubaccountResponseObject, CommandResponse]:
        params = to_btpcli_params_map(dataclasses.replace(args, global_account=self._global_account()))
        return self._execute(SubaccountResponseObject, new_update_request(self.command, params))

    def delete(self, subaccount_id: str, directory_id: str = "") -> tuple[SubaccountResponseObject, CommandResponse]:
        params = {
            "globalAccount": self._global_account(),
            "subaccount": subaccount_id,
            "confirm": "true",
            "forceDelete": "true",
        }
        if directory_id:
            params["directoryID"] = directory_id

        try:
            return self._execute(SubaccountResponseObject, new_delete_request(self.command, params))
        except BtpCliError as exc:
            if not any(rejection in str(exc) for rejection in _FORCE_DELETE_REJECTIONS):
                raise
            logger.info("Force delete of subaccount %s rejected, retrying without force", subaccount_id)

        return self._execute(
            SubaccountResponseObject,
            new_delete_request(self.command, {**params, "forceDelete": "false"}),
        )

    def subscribe(
        self,
        subaccount_id: str,
        app_name: str,
        plan_name: str = "",
        parameters: str = "{}",
    ) -> tuple[SubscriptionAssignmentResponseObject, CommandResponse]:
        params = {
            "subaccount": subaccount_id,
            "appName": app_name,
        }
        if parameters != "{}":
            params["subscriptionParams"] = parameters
        if plan_name:
            params["planName"] = plan_name
        return self._execute(SubscriptionAssignmentResponseObject, new_subscribe_request(self.command, params))

    def unsubscribe(self, subaccount_id: str, app_name: str) -> tuple[SubscriptionAssignmentResponseObject, CommandResponse]:
        return self._execute(
            SubscriptionAssignmentResponseObject,
            new_unsubscribe_request(
                self.command,
                {
                    "subaccount": subaccount_id,
                    "appName": app_name,
                    "confirm": "true",
                },
            ),
        )
