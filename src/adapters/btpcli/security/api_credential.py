"""Fachada `security/api-credential`."""

from __future__ import annotations

from dataclasses import dataclass

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.xsuaa_api import ApiCredentialSubaccount
from core.domain.commands import CommandResponse, new_create_request
from core.tfutils import cli_param, to_btpcli_params_map


@dataclass
class ApiCredentialCreateInput:
    subaccount_id: str = cli_param("subaccount")
    name: str = cli_param("name", default="")
    certificate: str = cli_param("certificate", default="")
    read_only: bool = cli_param("readOnly", default=False)


class SecurityApiCredentialFacade(CommandFacade):
    command = "security/api-credential"

    def create_by_subaccount(self, args: ApiCredentialCreateInput) -> tuple[ApiCredentialSubaccount, CommandResponse]:
        return self._execute(ApiCredentialSubaccount, new_create_request(self.command, to_btpcli_params_map(args)))
