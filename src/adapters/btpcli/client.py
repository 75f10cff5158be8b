"""Cliente de comandos de la BTP CLI (protocolo v2).

Por qué un cliente propio:
- El backend no es REST: todo comando es un `POST command/<versión>/<ruta>?<acción>`
  y el resultado lógico viaja en el header `X-CPCLI-Backend-Status`, no en el
  status HTTP.
- La sesión (refresh token) rota en cada respuesta y hay que reescribirla con
  el lock de la sesión tomado.
- Cada llamada lleva un correlation ID nuevo para poder rastrearla en soporte.
"""

from __future__ import annotations

import json
import logging
import uuid
from collections.abc import Callable
from dataclasses import is_dataclass
from http import HTTPStatus
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from adapters.btpcli.models.errors import BackendErrorResponse
from adapters.http_client import BtpCliTransport, build_http_client, inject_btpcli_transport
from core.config import BtpSettings
from core.domain.commands import CommandOptions, CommandRequest, CommandResponse
from core.domain.models import (
    IdTokenLoginRequest,
    LoggedInUser,
    LoginRequest,
    LoginResponse,
    LogoutRequest,
    LogoutResponse,
)
from core.domain.protocol import (
    CLI_TARGET_PROTOCOL_VERSION,
    HEADER_CLI_BACKEND_MEDIA_TYPE,
    HEADER_CLI_BACKEND_STATUS,
    HEADER_CLI_CUSTOM_IDP,
    HEADER_CLI_FORMAT,
    HEADER_CLI_REFRESH_TOKEN,
    HEADER_CLI_REPLACEMENT_REFRESH_TOKEN,
    HEADER_CLI_SUBDOMAIN,
    HEADER_CORRELATION_ID,
)
from core.domain.session import Session
from core.errors import BackendError, BtpCliError, ResponseDecodingError, ResponseStatusError
from core.tfutils import to_btpcli_params_map

logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)

UNEXPECTED_STATUS_MESSAGE = "received response with unexpected status"
COMMAND_TIMEOUT_MESSAGE = "Command timed out. Please try again later."

_OUTDATED_VERSION_MESSAGE = "Login failed due to outdated provider version. Update to the latest version of the provider."
_LOGIN_TIMEOUT_MESSAGE = "Login timed out. Please try again later."


def _global_account_not_found(subdomain: str) -> str:
    return (
        f"Global account '{subdomain}' not found. "
        "Try again and make sure to provide the global account's subdomain."
    )


def new_correlation_id() -> str:
    return str(uuid.uuid4())


def _to_jsonable(args: Any) -> Any:
    if isinstance(args, BaseModel):
        return args.model_dump(mode="json", by_alias=True, exclude_none=True)
    if is_dataclass(args) and not isinstance(args, type):
        return to_btpcli_params_map(args)
    return args


class V2Client:
    """Cliente síncrono del protocolo v2.

    Estado:
    - cliente HTTP (envuelto en `BtpCliTransport`) y URL base del servidor;
    - generador de correlation IDs (sustituible en tests);
    - la `Session` actual, `None` hasta el primer login.
    """

    def __init__(
        self,
        http_client: httpx.Client | BtpCliTransport,
        server_url: httpx.URL | str,
        *,
        user_agent: str = "btp-cli-client/0.1.0",
        correlation_id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._http = inject_btpcli_transport(http_client)
        self.server_url = httpx.URL(str(server_url))
        self.user_agent = user_agent
        self.new_correlation_id = correlation_id_factory or new_correlation_id
        self.session: Session | None = None

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> V2Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _init_trace(self) -> str:
        return self.new_correlation_id()

    def _do_request(
        self,
        method: str,
        endpoint: str,
        body: Any,
        correlation_id: str | None,
    ) -> httpx.Response:
        url = self.server_url.join(endpoint)
        content = b""
        if body is not None:
            content = json.dumps(_to_jsonable(body), ensure_ascii=False).encode("utf-8")

        headers = {
            "User-Agent": self.user_agent,
            "Content-Type": "application/json",
            HEADER_CLI_FORMAT: "json",
        }

        session = self.session
        if session is not None:
            with session:
                headers[HEADER_CLI_REFRESH_TOKEN] = session.refresh_token
                headers[HEADER_CLI_SUBDOMAIN] = session.global_account_subdomain
                if session.identity_provider:
                    headers[HEADER_CLI_CUSTOM_IDP] = session.identity_provider

        if correlation_id:
            headers[HEADER_CORRELATION_ID] = correlation_id

        request = self._http.build_request(method, url, content=content, headers=headers)
        response = self._http.send(request, stream=True)

        if session is not None:
            # Se sobrescribe siempre, aunque el header venga vacío.
            with session:
                session.refresh_token = response.headers.get(HEADER_CLI_REPLACEMENT_REFRESH_TOKEN, "")

        return response

    def _do_post_request(self, endpoint: str, body: Any, correlation_id: str | None) -> httpx.Response:
        return self._do_request("POST", endpoint, body, correlation_id)

    def _check_response_for_errors(
        self,
        response: httpx.Response,
        good_state: int,
        known_error_states: dict[int, str],
        correlation_id: str,
    ) -> None:
        if response.status_code == good_state:
            return

        reason = known_error_states.get(response.status_code, UNEXPECTED_STATUS_MESSAGE)
        raise ResponseStatusError(reason, status_code=response.status_code, correlation_id=correlation_id)

    def _parse_response(
        self,
        response: httpx.Response,
        target: type[_ModelT],
        correlation_id: str,
        good_state: int,
        known_error_states: dict[int, str],
        *,
        allow_empty: bool = False,
    ) -> _ModelT:
        try:
            self._check_response_for_errors(response, good_state, known_error_states, correlation_id)
            content = response.read()
        finally:
            response.close()

        if allow_empty and not content.strip():
            return target()
        try:
            return target.model_validate_json(content)
        except ValidationError as exc:
            raise ResponseDecodingError(
                f"unable to decode response of '{target.__name__}': {exc} [Correlation ID: {correlation_id}]",
                command_response=CommandResponse(status_code=response.status_code),
            ) from exc

    def login(self, login_request: LoginRequest) -> LoginResponse:
        """Autentica con usuario/password y crea una sesión nueva."""

        correlation_id = self._init_trace()
        subdomain = login_request.global_account_subdomain

        response = self._do_post_request(f"login/{CLI_TARGET_PROTOCOL_VERSION}", login_request, correlation_id)
        login_response = self._parse_response(
            response,
            LoginResponse,
            correlation_id,
            HTTPStatus.OK,
            {
                HTTPStatus.UNAUTHORIZED: "Login failed. Check your credentials.",
                HTTPStatus.FORBIDDEN: (
                    f"You cannot access global account '{subdomain}'. Make sure you have at least read "
                    "access to the global account, a directory, or a subaccount."
                ),
                HTTPStatus.NOT_FOUND: _global_account_not_found(subdomain),
                HTTPStatus.PRECONDITION_FAILED: _OUTDATED_VERSION_MESSAGE,
                HTTPStatus.GATEWAY_TIMEOUT: _LOGIN_TIMEOUT_MESSAGE,
            },
        )

        self.session = Session(
            global_account_subdomain=subdomain,
            identity_provider=login_request.identity_provider,
            logged_in_user=LoggedInUser(
                username=login_response.username,
                email=login_response.email,
                issuer=login_response.issuer,
            ),
            refresh_token=login_response.refresh_token,
        )
        logger.info("Logged in to global account '%s' (correlation id %s)", subdomain, correlation_id)
        return login_response

    def id_token_login(self, login_request: IdTokenLoginRequest) -> LoginResponse:
        """Autentica con un ID token; el identity provider sale del `issuer`."""

        correlation_id = self._init_trace()
        subdomain = login_request.global_account_subdomain

        response = self._do_post_request(
            f"login/{CLI_TARGET_PROTOCOL_VERSION}/idtoken", login_request, correlation_id
        )
        login_response = self._parse_response(
            response,
            LoginResponse,
            correlation_id,
            HTTPStatus.OK,
            {
                HTTPStatus.BAD_REQUEST: "Login failed. Invalid provider configuration.",
                HTTPStatus.UNAUTHORIZED: "Login failed. Please check ID Token validity.",
                HTTPStatus.NOT_FOUND: _global_account_not_found(subdomain),
                HTTPStatus.PRECONDITION_FAILED: _OUTDATED_VERSION_MESSAGE,
                HTTPStatus.GATEWAY_TIMEOUT: _LOGIN_TIMEOUT_MESSAGE,
            },
            allow_empty=True,
        )

        self.session = Session(
            global_account_subdomain=subdomain,
            identity_provider=login_response.issuer,
            logged_in_user=LoggedInUser(
                username=login_response.username,
                email=login_response.email,
                issuer=login_response.issuer,
            ),
            refresh_token=login_response.refresh_token,
        )
        logger.info("Logged in to global account '%s' via ID token (correlation id %s)", subdomain, correlation_id)
        return login_response

    def logout(self, logout_request: LogoutRequest) -> LogoutResponse:
        """Cierra la sesión en el backend. La sesión en memoria se conserva."""

        correlation_id = self._init_trace()
        response = self._do_post_request(f"logout/{CLI_TARGET_PROTOCOL_VERSION}", logout_request, correlation_id)
        return self._parse_response(
            response,
            LogoutResponse,
            correlation_id,
            HTTPStatus.OK,
            {HTTPStatus.GATEWAY_TIMEOUT: "Logout timed out. Please try again later."},
            allow_empty=True,
        )

    def execute(self, request: CommandRequest, *options: CommandOptions) -> CommandResponse:
        """Despacha un comando.

        Devuelve la `CommandResponse` con el body abierto (el llamador lo cierra).
        Si el backend reporta un status >= 400 lanza `BackendError` con la
        respuesta adjunta, para que el llamador pueda mirar `status_code`.
        """

        correlation_id = self._init_trace()
        endpoint = f"command/{CLI_TARGET_PROTOCOL_VERSION}/{request.command}?{request.action.value}"
        logger.debug("Executing %s?%s (correlation id %s)", request.command, request.action.value, correlation_id)

        response = self._do_post_request(endpoint, {"paramValues": _to_jsonable(request.args)}, correlation_id)

        opts = options[0] if options else CommandOptions()
        known_error_states = {**opts.known_error_states, HTTPStatus.GATEWAY_TIMEOUT: COMMAND_TIMEOUT_MESSAGE}

        try:
            self._check_response_for_errors(response, opts.good_state, known_error_states, correlation_id)
            backend_status = response.headers.get(HEADER_CLI_BACKEND_STATUS, "")
            try:
                status_code = int(backend_status)
            except ValueError as exc:
                raise BtpCliError(f"unable to convert reported backend status code: {exc}") from exc
        except Exception:
            response.close()
            raise

        if status_code >= 400:
            try:
                content = response.read()
            finally:
                response.close()
            message = _backend_error_message(content, status_code)
            logger.warning(
                "Command %s?%s failed with backend status %d (correlation id %s)",
                request.command,
                request.action.value,
                status_code,
                correlation_id,
            )
            raise BackendError(message, command_response=CommandResponse(status_code=status_code))

        return CommandResponse(
            status_code=status_code,
            content_type=response.headers.get(HEADER_CLI_BACKEND_MEDIA_TYPE, ""),
            body=response,
        )

    def get_global_account_subdomain(self) -> str:
        if self.session is None:
            return ""
        return self.session.global_account_subdomain

    def get_logged_in_user(self) -> LoggedInUser | None:
        if self.session is None:
            return None
        return self.session.logged_in_user


def _backend_error_message(content: bytes, status_code: int) -> str:
    try:
        backend_error = BackendErrorResponse.model_validate_json(content)
    except ValidationError:
        return f"the backend responded with an unknown error: {status_code}"
    return backend_error.describe()


def new_v2_client(
    settings: BtpSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> V2Client:
    """Construye un `V2Client` a partir de la configuración."""

    settings = settings or BtpSettings()
    return V2Client(
        build_http_client(settings, transport=transport),
        settings.server_url,
        user_agent=settings.user_agent,
    )
