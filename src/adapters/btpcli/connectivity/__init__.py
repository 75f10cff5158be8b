"""Fachadas de connectivity (destinos, fragmentos, certificados, trust)."""

from adapters.btpcli.connectivity.destination import ConnectivityDestinationFacade
from adapters.btpcli.connectivity.destination_certificate import (
    CertificateFile,
    ConnectivityDestinationCertificateFacade,
    DestinationCertificateCreateInput,
    DestinationCertificateGetInput,
)
from adapters.btpcli.connectivity.destination_fragment import ConnectivityDestinationFragmentFacade
from adapters.btpcli.connectivity.destination_trust import ConnectivityDestinationTrustFacade
from core.interfaces.executor import CommandExecutor


class ConnectivityFacade:
    def __init__(self, cli_client: CommandExecutor) -> None:
        self.destination = ConnectivityDestinationFacade(cli_client)
        self.destination_certificate = ConnectivityDestinationCertificateFacade(cli_client)
        self.destination_fragment = ConnectivityDestinationFragmentFacade(cli_client)
        self.destination_trust = ConnectivityDestinationTrustFacade(cli_client)


__all__ = [
    "CertificateFile",
    "ConnectivityDestinationCertificateFacade",
    "ConnectivityDestinationFacade",
    "ConnectivityDestinationFragmentFacade",
    "ConnectivityDestinationTrustFacade",
    "ConnectivityFacade",
    "DestinationCertificateCreateInput",
    "DestinationCertificateGetInput",
]
