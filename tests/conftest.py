"""
tests/conftest.py - fixtures comunes

El backend de la BTP CLI se simula con `httpx.MockTransport`: cada test
registra un handler que recibe la `httpx.Request` y devuelve la respuesta.

Usage:
    def test_something(backend, client):
        backend.respond(json_body={...}, backend_status=200)
        client.execute(...)
        assert backend.requests[0].url.path == "/command/v2.38.0/..."
"""

from __future__ import annotations

import itertools
import os
import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from adapters.btpcli.client import V2Client
from adapters.btpcli.facade import ClientFacade
from core.domain.models import LoggedInUser
from core.domain.protocol import HEADER_CLI_BACKEND_MEDIA_TYPE, HEADER_CLI_BACKEND_STATUS
from core.domain.session import Session

SERVER_URL = "https://cli.example.test"


# =============================================================================
# Backend simulado
# =============================================================================


class FakeBackend:
    """Graba las requests y responde con lo que el test haya configurado."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._handler: Callable[[httpx.Request], httpx.Response] = lambda _request: httpx.Response(200)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self._handler(request)

    def handle(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._handler = handler

    def respond(
        self,
        *,
        status_code: int = 200,
        json_body: Any = None,
        content: bytes = b"",
        backend_status: int | None = 200,
        headers: dict[str, str] | None = None,
    ) -> None:
        response_headers = dict(headers or {})
        if backend_status is not None:
            response_headers[HEADER_CLI_BACKEND_STATUS] = str(backend_status)
            response_headers.setdefault(HEADER_CLI_BACKEND_MEDIA_TYPE, "application/json")

        body = json.dumps(json_body).encode() if json_body is not None else content
        self.handle(lambda _request: httpx.Response(status_code, content=body, headers=response_headers))

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self) -> dict[str, Any]:
        return json.loads(self.last_request.content)

    def last_params(self) -> dict[str, str]:
        return self.last_body()["paramValues"]


def sequential_ids(prefix: str = "corr") -> Callable[[], str]:
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def client(backend: FakeBackend) -> V2Client:
    http = httpx.Client(transport=httpx.MockTransport(backend))
    cli = V2Client(http, SERVER_URL, user_agent="tests/1.0", correlation_id_factory=sequential_ids())
    yield cli
    cli.close()


@pytest.fixture
def logged_in_client(client: V2Client) -> V2Client:
    """Cliente con una sesión ya establecida (sin pasar por el login)."""

    client.session = Session(
        global_account_subdomain="my-ga",
        identity_provider="",
        logged_in_user=LoggedInUser(username="john.doe", email="john.doe@example.com", issuer="accounts.sap.com"),
        refresh_token="refresh-0",
    )
    return client


@pytest.fixture
def facade(logged_in_client: V2Client) -> ClientFacade:
    return ClientFacade(logged_in_client)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Aísla la configuración del usuario y las variables BTP_* del entorno real."""

    for key in list(os.environ):
        if key.startswith("BTP_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)
    yield
