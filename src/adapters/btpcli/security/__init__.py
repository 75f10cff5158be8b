"""Fachadas del dominio de seguridad (`security/*`).

Casi todos los comandos existen por global account, directory y subaccount;
los métodos llevan el nivel en el nombre (`list_by_subaccount`, ...).
"""

from adapters.btpcli.security.api_credential import ApiCredentialCreateInput, SecurityApiCredentialFacade
from adapters.btpcli.security.app import SecurityAppFacade
from adapters.btpcli.security.identity_provider import SecurityIdentityProviderFacade
from adapters.btpcli.security.role import (
    DirectoryRoleCreateInput,
    GlobalAccountRoleCreateInput,
    SecurityRoleFacade,
    SubaccountRoleCreateInput,
)
from adapters.btpcli.security.role_collection import SecurityRoleCollectionFacade
from adapters.btpcli.security.settings import SecuritySettingsFacade, SecuritySettingsUpdateInput
from adapters.btpcli.security.trust import (
    SecurityTrustFacade,
    TrustConfigurationCreateInput,
    TrustConfigurationUpdateInput,
)
from adapters.btpcli.security.user import SecurityUserFacade
from core.interfaces.executor import CommandExecutor


class SecurityFacade:
    def __init__(self, cli_client: CommandExecutor) -> None:
        self.api_credential = SecurityApiCredentialFacade(cli_client)
        self.app = SecurityAppFacade(cli_client)
        self.identity_provider = SecurityIdentityProviderFacade(cli_client)
        self.role = SecurityRoleFacade(cli_client)
        self.role_collection = SecurityRoleCollectionFacade(cli_client)
        self.settings = SecuritySettingsFacade(cli_client)
        self.trust = SecurityTrustFacade(cli_client)
        self.user = SecurityUserFacade(cli_client)


__all__ = [
    "ApiCredentialCreateInput",
    "DirectoryRoleCreateInput",
    "GlobalAccountRoleCreateInput",
    "SecurityApiCredentialFacade",
    "SecurityAppFacade",
    "SecurityFacade",
    "SecurityIdentityProviderFacade",
    "SecurityRoleCollectionFacade",
    "SecurityRoleFacade",
    "SecuritySettingsFacade",
    "SecuritySettingsUpdateInput",
    "SecurityTrustFacade",
    "SecurityUserFacade",
    "SubaccountRoleCreateInput",
    "TrustConfigurationCreateInput",
    "TrustConfigurationUpdateInput",
]
