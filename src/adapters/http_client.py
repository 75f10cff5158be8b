"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y redirecciones para todo el cliente.
- El backend puede redirigir (3xx) durante la autenticación y espera que el
  refresh token, el subdominio y el ID token sigan viajando en el siguiente
  salto; httpx no copia headers de la respuesta a la nueva petición, así que
  seguimos las redirecciones aquí.
- Facilita testeo: se puede construir sobre un `httpx.MockTransport`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from core.config import BtpSettings
from core.domain.protocol import (
    HEADER_CLI_REFRESH_TOKEN,
    HEADER_CLI_REPLACEMENT_REFRESH_TOKEN,
    HEADER_CLI_SUBDOMAIN,
    HEADER_ID_TOKEN,
)

logger = logging.getLogger(__name__)

# (header de la respuesta anterior, header de la nueva petición)
_FORWARDED_HEADERS: tuple[tuple[str, str], ...] = (
    (HEADER_CLI_REPLACEMENT_REFRESH_TOKEN, HEADER_CLI_REFRESH_TOKEN),
    (HEADER_CLI_SUBDOMAIN, HEADER_CLI_SUBDOMAIN),
    (HEADER_ID_TOKEN, HEADER_ID_TOKEN),
)


def copy_response_header_to_request_header(
    response: httpx.Response | None,
    request: httpx.Request,
    source: str,
    target: str,
) -> None:
    """Copia `source` de la respuesta anterior a `target` de la petición."""

    if response is None:
        return
    value = response.headers.get(source)
    if value:
        request.headers[target] = value


class BtpCliTransport:
    """Envuelve un `httpx.Client` y sigue las redirecciones propagando headers.

    Expone el subconjunto de la API de `httpx.Client` que usa el cliente de
    comandos (`build_request`, `send`, `close`).
    """

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    @property
    def client(self) -> httpx.Client:
        return self._client

    def build_request(self, method: str, url: httpx.URL | str, **kwargs: Any) -> httpx.Request:
        return self._client.build_request(method, url, **kwargs)

    def send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response:
        history: list[httpx.Response] = []
        response = self._client.send(request, stream=stream, follow_redirects=False)

        while response.next_request is not None:
            next_request = response.next_request
            if len(history) >= self._client.max_redirects:
                response.close()
                raise httpx.TooManyRedirects("Exceeded maximum allowed redirects.", request=next_request)

            for source, target in _FORWARDED_HEADERS:
                copy_response_header_to_request_header(response, next_request, source, target)

            logger.debug("Following redirect %s -> %s", response.status_code, next_request.url)
            response.read()
            response.close()
            history.append(response)
            response = self._client.send(next_request, stream=stream, follow_redirects=False)

        response.history = history
        return response

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> BtpCliTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def inject_btpcli_transport(client: httpx.Client | BtpCliTransport) -> BtpCliTransport:
    """Devuelve `client` envuelto (idempotente)."""

    if isinstance(client, BtpCliTransport):
        return client
    return BtpCliTransport(client)


def build_http_client(
    settings: BtpSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono con defaults seguros.

    Por qué un builder:
    - Centraliza timeout y límite de redirecciones desde la configuración.
    - `transport` permite inyectar un `httpx.MockTransport` en tests.
    """

    settings = settings or BtpSettings()
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        max_redirects=settings.max_redirects,
        transport=transport,
    )
