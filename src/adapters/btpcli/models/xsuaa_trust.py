"""Modelos de configuraciones de confianza (trust) de XSUAA."""

from __future__ import annotations

from adapters.btpcli.models.base import ResponseModel


class TrustConfigurationResponseObject(ResponseModel):
    origin_key: str = ""
    name: str = ""
    description: str = ""
    type: str = ""
    identity_provider: str = ""
    domain: str = ""
    link_text: str = ""
    protocol: str = ""
    read_only: bool = False
    status: str = ""
    available_for_user_logon: str = ""
    create_shadow_users_during_logon: str = ""
    sso_provider_id: str = ""
    sso_provider_name: str = ""


class ModifyTrustConfigurationResponseObject(ResponseModel):
    origin_key: str = ""
    name: str = ""
    description: str = ""
    status: str = ""
