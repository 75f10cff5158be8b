"""Punto de entrada único para las fachadas de comandos.

Por qué una fachada raíz:
- Todas las fachadas comparten el mismo `V2Client` (y por tanto la misma
  sesión y el mismo `httpx.Client`).
- Login/logout se delegan al cliente; el resto son grupos por dominio.
"""

from __future__ import annotations

from adapters.btpcli.accounts import AccountsFacade
from adapters.btpcli.client import V2Client
from adapters.btpcli.connectivity import ConnectivityFacade
from adapters.btpcli.security import SecurityFacade
from adapters.btpcli.services import ServicesFacade
from core.domain.models import (
    IdTokenLoginRequest,
    LoggedInUser,
    LoginRequest,
    LoginResponse,
    LogoutRequest,
    LogoutResponse,
)


class ClientFacade:
    def __init__(self, cli_client: V2Client) -> None:
        self._cli_client = cli_client
        self.accounts = AccountsFacade(cli_client)
        self.security = SecurityFacade(cli_client)
        self.connectivity = ConnectivityFacade(cli_client)
        self.services = ServicesFacade(cli_client)

    @property
    def client(self) -> V2Client:
        return self._cli_client

    def close(self) -> None:
        self._cli_client.close()

    def __enter__(self) -> ClientFacade:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def login(self, login_request: LoginRequest) -> LoginResponse:
        return self._cli_client.login(login_request)

    def id_token_login(self, login_request: IdTokenLoginRequest) -> LoginResponse:
        return self._cli_client.id_token_login(login_request)

    def logout(self, logout_request: LogoutRequest) -> LogoutResponse:
        return self._cli_client.logout(logout_request)

    def get_global_account_subdomain(self) -> str:
        return self._cli_client.get_global_account_subdomain()

    def get_logged_in_user(self) -> LoggedInUser | None:
        return self._cli_client.get_logged_in_user()
