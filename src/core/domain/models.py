"""Modelos del protocolo de login/logout (Pydantic v2).

Por qué Pydantic en el dominio:
- Los alias de `Field` fijan el nombre exacto en el cable (`userName`,
  `refreshToken`, ...) sin ensuciar los nombres Python.
- La validación del body de login ocurre en un único sitio.

Nota:
- Estos modelos describen *qué* viaja, no *cómo* se envía.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class LoggedInUser(BaseModel):
    """Usuario autenticado tal como lo reporta el backend tras el login."""

    username: str = Field(default="", description="Usuario (vacío en login por ID token).")
    email: str = Field(default="", description="Email del usuario.")
    issuer: str = Field(default="", description="Identity provider que emitió la identidad.")


class LoginRequest(_WireModel):
    identity_provider: str = Field(
        default="",
        alias="customIdp",
        description="Identity provider propio; vacío para el SAP ID service.",
    )
    global_account_subdomain: str = Field(
        ...,
        alias="subdomain",
        description="Subdominio de la global account.",
    )
    username: str = Field(..., alias="userName")
    password: str = Field(..., alias="password", repr=False)


class IdTokenLoginRequest(_WireModel):
    global_account_subdomain: str = Field(..., alias="subdomain")
    id_token: str = Field(..., alias="idToken", repr=False)


class LoginResponse(_WireModel):
    issuer: str = Field(default="", description="Issuer del token (identity provider).")
    username: str = Field(default="", alias="user")
    email: str = Field(default="", alias="mail")
    refresh_token: str = Field(default="", alias="refreshToken", repr=False)


class LogoutRequest(_WireModel):
    identity_provider: str = Field(default="", alias="customIdp")
    global_account_subdomain: str = Field(..., alias="subdomain")
    refresh_token: str = Field(default="", alias="refreshToken", repr=False)


class LogoutResponse(_WireModel):
    """El backend responde `{}`."""


def new_login_request(subdomain: str, username: str, password: str) -> LoginRequest:
    return LoginRequest(global_account_subdomain=subdomain, username=username, password=password)


def new_login_request_with_custom_idp(
    idp: str, subdomain: str, username: str, password: str
) -> LoginRequest:
    return LoginRequest(
        identity_provider=idp,
        global_account_subdomain=subdomain,
        username=username,
        password=password,
    )


def new_id_token_login_request(subdomain: str, id_token: str) -> IdTokenLoginRequest:
    return IdTokenLoginRequest(global_account_subdomain=subdomain, id_token=id_token)
