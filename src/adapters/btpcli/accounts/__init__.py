"""Fachadas del dominio de cuentas (`accounts/*`).

Por qué un paquete:
- Agrupa un módulo por comando del backend (directory, subaccount, ...).
- `AccountsFacade` las reúne con el mismo ejecutor inyectado.
"""

from adapters.btpcli.accounts.available import AccountsAvailableEnvironmentFacade, AccountsAvailableRegionFacade
from adapters.btpcli.accounts.directory import (
    AccountsDirectoryFacade,
    DirectoryCreateInput,
    DirectoryEnableInput,
    DirectoryUpdateInput,
)
from adapters.btpcli.accounts.entitlement import AccountsEntitlementFacade, UnfoldedAssignment, UnfoldedEntitlement
from adapters.btpcli.accounts.environment_instance import (
    AccountsEnvironmentInstanceFacade,
    SubaccountEnvironmentInstanceCreateInput,
)
from adapters.btpcli.accounts.global_account import AccountsGlobalAccountFacade
from adapters.btpcli.accounts.label import AccountsLabelFacade
from adapters.btpcli.accounts.resource_provider import (
    AccountsResourceProviderFacade,
    GlobalAccountResourceProviderCreateInput,
)
from adapters.btpcli.accounts.subaccount import AccountsSubaccountFacade, SubaccountCreateInput, SubaccountUpdateInput
from adapters.btpcli.accounts.subscription import AccountsSubscriptionFacade
from core.interfaces.executor import CommandExecutor


class AccountsFacade:
    def __init__(self, cli_client: CommandExecutor) -> None:
        self.available_environment = AccountsAvailableEnvironmentFacade(cli_client)
        self.available_region = AccountsAvailableRegionFacade(cli_client)
        self.directory = AccountsDirectoryFacade(cli_client)
        self.entitlement = AccountsEntitlementFacade(cli_client)
        self.environment_instance = AccountsEnvironmentInstanceFacade(cli_client)
        self.global_account = AccountsGlobalAccountFacade(cli_client)
        self.label = AccountsLabelFacade(cli_client)
        self.resource_provider = AccountsResourceProviderFacade(cli_client)
        self.subaccount = AccountsSubaccountFacade(cli_client)
        self.subscription = AccountsSubscriptionFacade(cli_client)


__all__ = [
    "AccountsAvailableEnvironmentFacade",
    "AccountsAvailableRegionFacade",
    "AccountsDirectoryFacade",
    "AccountsEntitlementFacade",
    "AccountsEnvironmentInstanceFacade",
    "AccountsFacade",
    "AccountsGlobalAccountFacade",
    "AccountsLabelFacade",
    "AccountsResourceProviderFacade",
    "AccountsSubaccountFacade",
    "AccountsSubscriptionFacade",
    "DirectoryCreateInput",
    "DirectoryEnableInput",
    "DirectoryUpdateInput",
    "GlobalAccountResourceProviderCreateInput",
    "SubaccountCreateInput",
    "SubaccountEnvironmentInstanceCreateInput",
    "SubaccountUpdateInput",
    "UnfoldedAssignment",
    "UnfoldedEntitlement",
]
