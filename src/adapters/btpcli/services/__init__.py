"""Fachadas del service manager (`services/*`)."""

from adapters.btpcli.services.binding import ServicesBindingFacade, SubaccountServiceBindingCreateInput
from adapters.btpcli.services.broker import (
    ServicesBrokerFacade,
    SubaccountServiceBrokerRegisterInput,
    SubaccountServiceBrokerUpdateInput,
)
from adapters.btpcli.services.catalog import ServicesOfferingFacade, ServicesPlanFacade, ServicesPlatformFacade
from adapters.btpcli.services.instance import (
    ServiceInstanceCreateInput,
    ServiceInstanceUpdateInput,
    ServicesInstanceFacade,
    compute_label_param,
)
from core.interfaces.executor import CommandExecutor


class ServicesFacade:
    def __init__(self, cli_client: CommandExecutor) -> None:
        self.binding = ServicesBindingFacade(cli_client)
        self.broker = ServicesBrokerFacade(cli_client)
        self.instance = ServicesInstanceFacade(cli_client)
        self.offering = ServicesOfferingFacade(cli_client)
        self.plan = ServicesPlanFacade(cli_client)
        self.platform = ServicesPlatformFacade(cli_client)


__all__ = [
    "ServiceInstanceCreateInput",
    "ServiceInstanceUpdateInput",
    "ServicesBindingFacade",
    "ServicesBrokerFacade",
    "ServicesFacade",
    "ServicesInstanceFacade",
    "ServicesOfferingFacade",
    "ServicesPlanFacade",
    "ServicesPlatformFacade",
    "SubaccountServiceBindingCreateInput",
    "SubaccountServiceBrokerRegisterInput",
    "SubaccountServiceBrokerUpdateInput",
    "compute_label_param",
]
