"""Fachada `security/settings` (configuración del tenant XSUAA)."""

from __future__ import annotations

from dataclasses import dataclass

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.xsuaa_settings import TenantSettingsResp
from core.domain.commands import CommandResponse, new_list_request, new_update_request
from core.tfutils import cli_param, to_btpcli_params_map


@dataclass
class SecuritySettingsUpdateInput:
    iframe_domains: str = cli_param("iFrameDomain", default="")
    custom_email_domains: str = cli_param("customEmailDomains", default="")
    default_idp: str = cli_param("defaultIdp", default="")
    treat_users_with_same_email_as_same_user: bool = cli_param("treatUsersWithSameEmailAsSameUser", default=False)
    home_redirect: str = cli_param("homeRedirect", default="")
    access_token_validity: int = cli_param("accessTokenValidity", default=-1)
    refresh_token_validity: int = cli_param("refreshTokenValidity", default=-1)


class SecuritySettingsFacade(CommandFacade):
    command = "security/settings"

    def list_by_global_account(self) -> tuple[TenantSettingsResp, CommandResponse]:
        return self._execute(TenantSettingsResp, new_list_request(self.command, {"globalAccount": self._global_account()}))

    def list_by_subaccount(self, subaccount_id: str) -> tuple[TenantSettingsResp, CommandResponse]:
        return self._execute(TenantSettingsResp, new_list_request(self.command, {"subaccount": subaccount_id}))

    def update_by_global_account(self, args: SecuritySettingsUpdateInput) -> tuple[TenantSettingsResp, CommandResponse]:
        params = to_btpcli_params_map(args)
        params["globalAccount"] = self._global_account()
        return self._execute(TenantSettingsResp, new_update_request(self.command, params))

    def update_by_subaccount(
        self, subaccount_id: str, args: SecuritySettingsUpdateInput
    ) -> tuple[TenantSettingsResp, CommandResponse]:
        params = to_btpcli_params_map(args)
        params["subaccount"] = subaccount_id
        return self._execute(TenantSettingsResp, new_update_request(self.command, params))
