"""Fachada `security/trust`.

Por qué `refreshTrust=true` en el update:
- Sin él el backend no vuelve a leer los metadatos del tenant IAS y la
  configuración queda desactualizada.
"""

from __future__ import annotations

from dataclasses import dataclass

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.xsuaa_trust import (
    ModifyTrustConfigurationResponseObject,
    TrustConfigurationResponseObject,
)
from core.domain.commands import (
    CommandResponse,
    new_create_request,
    new_delete_request,
    new_get_request,
    new_list_request,
    new_update_request,
)
from core.tfutils import cli_param, to_btpcli_params_map


@dataclass
class TrustConfigurationCreateInput:
    identity_provider: str = cli_param("iasTenantUrl")
    name: str | None = cli_param("name", default=None)
    description: str | None = cli_param("description", default=None)
    origin: str | None = cli_param("origin", default=None)
    domain: str | None = cli_param("domain", default=None)


@dataclass
class TrustConfigurationUpdateInput:
    origin_key: str = cli_param("originKey")
    identity_provider: str = cli_param("iasTenantUrl")
    name: str | None = cli_param("name", default=None)
    description: str | None = cli_param("description", default=None)
    domain: str | None = cli_param("domain", default=None)
    link_text: str | None = cli_param("linkText", default=None)
    available_for_user_logon: bool = cli_param("userLogon", default=False)
    auto_create_shadow_users: bool = cli_param("shadowUsers", default=False)
    status: str = cli_param("status", default="")


class SecurityTrustFacade(CommandFacade):
    command = "security/trust"

    def list_by_global_account(self) -> tuple[list[TrustConfigurationResponseObject], CommandResponse]:
        return self._execute(
            list[TrustConfigurationResponseObject],
            new_list_request(self.command, {"globalAccount": self._global_account()}),
        )

    def get_by_global_account(self, origin: str) -> tuple[TrustConfigurationResponseObject, CommandResponse]:
        params = {"globalAccount": self._global_account(), "origin": origin}
        return self._execute(TrustConfigurationResponseObject, new_get_request(self.command, params))

    def create_by_global_account(
        self, args: TrustConfigurationCreateInput
    ) -> tuple[ModifyTrustConfigurationResponseObject, CommandResponse]:
        params = to_btpcli_params_map(args)
        params["globalAccount"] = self._global_account()
        return self._execute(ModifyTrustConfigurationResponseObject, new_create_request(self.command, params))

    def delete_by_global_account(self, origin_key: str) -> tuple[ModifyTrustConfigurationResponseObject, CommandResponse]:
        params = {"globalAccount": self._global_account(), "originKey": origin_key, "confirm": "true"}
        return self._execute(ModifyTrustConfigurationResponseObject, new_delete_request(self.command, params))

    def list_by_subaccount(self, subaccount_id: str) -> tuple[list[TrustConfigurationResponseObject], CommandResponse]:
        return self._execute(
            list[TrustConfigurationResponseObject],
            new_list_request(self.command, {"subaccount": subaccount_id}),
        )

    def get_by_subaccount(
        self, subaccount_id: str, origin: str
    ) -> tuple[TrustConfigurationResponseObject, CommandResponse]:
        params = {"subaccount": subaccount_id, "origin": origin}
        return self._execute(TrustConfigurationResponseObject, new_get_request(self.command, params))

    def create_by_subaccount(
        self, subaccount_id: str, args: TrustConfigurationCreateInput
    ) -> tuple[ModifyTrustConfigurationResponseObject, CommandResponse]:
        params = to_btpcli_params_map(args)
        params["subaccount"] = subaccount_id
        return self._execute(ModifyTrustConfigurationResponseObject, new_create_request(self.command, params))

    def update_by_subaccount(
        self, subaccount_id: str, args: TrustConfigurationUpdateInput
    ) -> tuple[TrustConfigurationResponseObject, CommandResponse]:
        params = to_btpcli_params_map(args)
        params["subaccount"] = subaccount_id
        params["refreshTrust"] = "true"
        return self._execute(TrustConfigurationResponseObject, new_update_request(self.command, params))

    def delete_by_subaccount(
        self, subaccount_id: str, origin_key: str
    ) -> tuple[ModifyTrustConfigurationResponseObject, CommandResponse]:
        params = {"subaccount": subaccount_id, "originKey": origin_key, "confirm": "true"}
        return self._execute(ModifyTrustConfigurationResponseObject, new_delete_request(self.command, params))
