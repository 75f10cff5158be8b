"""Modelos de credenciales de API (xsuaa api-credential)."""

from __future__ import annotations

from adapters.btpcli.models.base import ResponseModel


class ApiCredentialSubaccount(ResponseModel):
    name: str = ""
    client_id: str = ""
    client_secret: str = ""
    certificate: str = ""
    key: str = ""
    url: str = ""
    token_url: str = ""
    api_url: str = ""
    read_only: bool = False
    credential_type: str = ""
