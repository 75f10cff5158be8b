"""Modelos del servicio de cuentas (global account, directorios, subaccounts)."""

from __future__ import annotations

from pydantic import Field

from adapters.btpcli.models.base import ResponseModel, Timestamp

STATE_OK = "OK"
STATE_CANCELED = "CANCELED"
STATE_CREATING = "CREATING"
STATE_CREATION_FAILED = "CREATION_FAILED"
STATE_DELETING = "DELETING"
STATE_DELETION_FAILED = "DELETION_FAILED"
STATE_MIGRATING = "MIGRATING"
STATE_MIGRATION_FAILED = "MIGRATION_FAILED"
STATE_MIGRATED = "MIGRATED"
STATE_MOVE_FAILED = "MOVE_FAILED"
STATE_MOVING = "MOVING"
STATE_PENDING_REVIEW = "PENDING_REVIEW"
STATE_PROCESSING = "PROCESSING"
STATE_PROCESSING_FAILED = "PROCESSING_FAILED"
STATE_STARTED = "STARTED"
STATE_UPDATE_FAILED = "UPDATE_FAILED"
STATE_UPDATING = "UPDATING"


class PropertyResponseObject(ResponseModel):
    account_guid: str = Field(default="", alias="accountGUID")
    key: str = ""
    value: str = ""


class DirectoryResponseObject(ResponseModel):
    guid: str = ""
    display_name: str = ""
    description: str = ""
    subdomain: str = ""
    entity_state: str = ""
    state_message: str = ""
    directory_type: str = ""
    directory_features: list[str] = Field(default_factory=list)
    global_account_guid: str = Field(default="", alias="globalAccountGUID")
    parent_guid: str = Field(default="", alias="parentGUID")
    parent_type: str = ""
    labels: dict[str, list[str]] | None = None
    custom_properties: list[PropertyResponseObject] = Field(default_factory=list)
    created_by: str = ""
    created_date: Timestamp = None
    modified_date: Timestamp = None


class SubaccountResponseObject(ResponseModel):
    guid: str = ""
    display_name: str = ""
    description: str = ""
    subdomain: str = ""
    region: str = ""
    state: str = ""
    state_message: str = ""
    beta_enabled: bool = False
    used_for_production: str = ""
    global_account_guid: str = Field(default="", alias="globalAccountGUID")
    parent_guid: str = Field(default="", alias="parentGUID")
    parent_features: list[str] = Field(default_factory=list)
    technical_name: str = ""
    labels: dict[str, list[str]] | None = None
    custom_properties: list[PropertyResponseObject] = Field(default_factory=list)
    created_by: str = ""
    created_date: Timestamp = None
    modified_date: Timestamp = None


class ResponseCollectionSubaccountResponseObject(ResponseModel):
    value: list[SubaccountResponseObject] = Field(default_factory=list)


class SubaccountHierarchyResponseObject(SubaccountResponseObject):
    pass


class DirectoryHierarchyResponseObject(DirectoryResponseObject):
    children: list[DirectoryHierarchyResponseObject] = Field(default_factory=list)
    subaccounts: list[SubaccountHierarchyResponseObject] = Field(default_factory=list)


class GlobalAccountResponseObject(ResponseModel):
    guid: str = ""
    display_name: str = ""
    description: str = ""
    subdomain: str = ""
    entity_state: str = ""
    state_message: str = ""
    commercial_model: str = ""
    consumption_based: bool = False
    license_type: str = ""
    geo_access: str = ""
    cost_center: str = ""
    contract_status: str = ""
    use_for: str = ""
    origin: str = ""
    labels: dict[str, list[str]] | None = None
    created_date: Timestamp = None
    modified_date: Timestamp = None


class GlobalAccountHierarchyResponseObject(GlobalAccountResponseObject):
    children: list[DirectoryHierarchyResponseObject] = Field(default_factory=list)
    subaccounts: list[SubaccountHierarchyResponseObject] = Field(default_factory=list)


class DataCenterResponseObject(ResponseModel):
    display_name: str = ""
    domain: str = ""
    environment: str = ""
    iaas_provider: str = ""
    name: str = ""
    provisioning_service_url: str = ""
    region: str = ""
    saas_registry_service_url: str = ""
    supports_trial: bool = False


class DataCenterResponseCollection(ResponseModel):
    datacenters: list[DataCenterResponseObject] = Field(default_factory=list)


class LabelsResponseObject(ResponseModel):
    labels: dict[str, list[str]] = Field(default_factory=dict)
