"""Modelos de la configuración de seguridad del tenant XSUAA."""

from __future__ import annotations

from pydantic import Field

from adapters.btpcli.models.base import ResponseModel


class Binding(ResponseModel):
    credential_type: str = ""
    enabled: bool = False


class LinksSettings(ResponseModel):
    logout: dict | None = None
    home_redirect: str = ""


class SamlConfigSettingsResp(ResponseModel):
    disable_in_response_to_check: bool = False


class TokenPolicySettingsResp(ResponseModel):
    access_token_validity: int = 0
    active_key_id: str = ""
    key_ids: list[str] = Field(default_factory=list)
    refresh_token_unique: bool = False
    refresh_token_validity: int = 0


class TenantSettingsResp(ResponseModel):
    credential_type_infos: list[Binding] = Field(default_factory=list, alias="CredentialTypeInfos")
    custom_email_domains: list[str] = Field(default_factory=list)
    default_idp: str = ""
    iframe_domains: str = ""
    links: LinksSettings | None = None
    saml_config_settings: SamlConfigSettingsResp | None = None
    token_policy_settings: TokenPolicySettingsResp | None = None
    treat_users_with_same_email_as_same_user: bool = False
