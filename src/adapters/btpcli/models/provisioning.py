"""Modelos del servicio de provisioning (entornos y resource providers)."""

from __future__ import annotations

from pydantic import Field

from adapters.btpcli.models.base import ResponseModel, Timestamp

STATE_OK = "OK"
STATE_CREATING = "CREATING"
STATE_CREATION_FAILED = "CREATION_FAILED"
STATE_DELETING = "DELETING"
STATE_DELETION_FAILED = "DELETION_FAILED"
STATE_UPDATING = "UPDATING"
STATE_UPDATE_FAILED = "UPDATE_FAILED"

OPERATION_CREATE = "PROVISION"
OPERATION_UPDATE = "UPDATE"
OPERATION_DELETE = "DEPROVISION"


class EnvironmentInstanceResponseObject(ResponseModel):
    id: str = ""
    name: str = ""
    broker_id: str = ""
    global_account_guid: str = Field(default="", alias="globalAccountGUID")
    subaccount_guid: str = Field(default="", alias="subaccountGUID")
    tenant_id: str = ""
    service_id: str = ""
    service_name: str = ""
    plan_id: str = ""
    plan_name: str = ""
    operation: str = ""
    parameters: str = ""
    labels: str = ""
    custom_labels: dict[str, list[str]] | None = None
    type: str = ""
    state: str = ""
    status: str = ""
    environment_type: str = ""
    landscape_label: str = ""
    platform_id: str = ""
    dashboard_url: str = ""
    created_date: Timestamp = None
    modified_date: Timestamp = None


class EnvironmentInstancesResponseCollection(ResponseModel):
    environment_instances: list[EnvironmentInstanceResponseObject] = Field(default_factory=list)


class AvailableEnvironmentResponseObject(ResponseModel):
    availability_level: str = ""
    create_schema: str = ""
    update_schema: str = ""
    description: str = ""
    environment_type: str = ""
    landscape_label: str = ""
    plan_id: str = ""
    plan_name: str = ""
    service_id: str = ""
    service_name: str = ""
    technical_key: str = ""


class AvailableEnvironmentResponseCollection(ResponseModel):
    available_environments: list[AvailableEnvironmentResponseObject] = Field(default_factory=list)


class ResourceProviderResponseObject(ResponseModel):
    resource_provider: str = ""
    technical_name: str = ""
    display_name: str = ""
    description: str = ""
    resource_type: str = ""
    additional_info: dict | None = None
