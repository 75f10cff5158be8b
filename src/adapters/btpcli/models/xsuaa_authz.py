"""Modelos de autorización de XSUAA (roles, role collections, usuarios, apps)."""

from __future__ import annotations

from pydantic import Field

from adapters.btpcli.models.base import ResponseModel


class RoleReference(ResponseModel):
    name: str = ""
    description: str = ""
    role_template_app_id: str = ""
    role_template_name: str = ""


class UserReference(ResponseModel):
    id: str = ""
    username: str = ""
    origin: str = ""
    email: str = ""
    given_name: str = ""
    family_name: str = ""


class GroupReference(ResponseModel):
    name: str = ""
    description: str = ""


class AttributeValue(ResponseModel):
    attribute_name: str = ""
    attribute_value_origin: str = ""
    attribute_values: list[str] = Field(default_factory=list)
    value_required: bool = False


class Scope(ResponseModel):
    name: str = ""
    description: str = ""


class Role(ResponseModel):
    name: str = ""
    description: str = ""
    role_template_app_id: str = ""
    role_template_name: str = ""
    is_read_only: bool = False
    attribute_list: list[AttributeValue] = Field(default_factory=list)
    scopes: list[Scope] = Field(default_factory=list)


class RoleCollection(ResponseModel):
    name: str = ""
    description: str = ""
    is_read_only: bool = False
    role_references: list[RoleReference] = Field(default_factory=list)
    user_references: list[UserReference] = Field(default_factory=list)
    group_references: list[GroupReference] = Field(default_factory=list)


class XsuaaUser(ResponseModel):
    id: str = ""
    username: str = ""
    origin: str = ""
    email: str = ""
    given_name: str = ""
    family_name: str = ""
    verified: bool = False
    active: bool = False
    role_collections: list[str] = Field(default_factory=list)


class App(ResponseModel):
    appid: str = ""
    xsappname: str = ""
    description: str = ""
    tenant_mode: str = ""
    service_instance_id: str = ""
    plan_id: str = ""
    plan_name: str = ""
    org_id: str = ""
    space_id: str = ""
    user_name: str = ""
    authorities: list[str] = Field(default_factory=list)
    foreign_scope_references: list[str] = Field(default_factory=list)
    scopes: list[Scope] = Field(default_factory=list)


class IdentityProvider(ResponseModel):
    common_host: str = ""
    description: str = ""
    display_name: str = ""
    host: str = ""
    id: str = ""
    type: str = ""
    custom_host: str = ""
