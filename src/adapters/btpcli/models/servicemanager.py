"""Modelos del service manager (instancias, bindings, brokers, ofertas)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import Field

from adapters.btpcli.models.base import ResponseModel, Timestamp

STATE_SUCCEEDED = "succeeded"
STATE_IN_PROGRESS = "in progress"
STATE_FAILED = "failed"

OPERATION_CREATE = "create"
OPERATION_UPDATE = "update"
OPERATION_DELETE = "delete"

LABEL_OP_ADD = "add"
LABEL_OP_REMOVE = "remove"


class LastOperation(ResponseModel):
    id: str = ""
    ready: bool = False
    type: str = ""
    state: str = ""
    description: str = ""
    resource_id: str = ""
    resource_type: str = ""
    created_at: Timestamp = None
    updated_at: Timestamp = None


class ServiceInstanceResponseObject(ResponseModel):
    id: str = ""
    name: str = ""
    ready: bool = False
    usable: bool = False
    shared: bool = False
    service_plan_id: str = ""
    platform_id: str = ""
    dashboard_url: str = ""
    context: dict[str, Any] | None = None
    parameters: dict[str, Any] | None = None
    labels: dict[str, list[str]] | None = None
    last_operation: LastOperation | None = None
    created_at: Timestamp = None
    updated_at: Timestamp = None


class ServiceBindingResponseObject(ResponseModel):
    id: str = ""
    name: str = ""
    ready: bool = False
    service_instance_id: str = ""
    context: dict[str, Any] | None = None
    parameters: dict[str, Any] | None = None
    credentials: dict[str, Any] | None = None
    bind_resource: dict[str, Any] | None = None
    labels: dict[str, list[str]] | None = None
    last_operation: LastOperation | None = None
    created_at: Timestamp = None
    updated_at: Timestamp = None


class ServiceBrokerResponseObject(ResponseModel):
    id: str = ""
    name: str = ""
    ready: bool = False
    description: str = ""
    broker_url: str = ""
    labels: dict[str, list[str]] | None = None
    last_operation: LastOperation | None = None
    created_at: Timestamp = None
    updated_at: Timestamp = None


class ServiceOfferingResponseObject(ResponseModel):
    id: str = ""
    name: str = ""
    ready: bool = False
    description: str = ""
    bindable: bool = False
    instances_retrievable: bool = False
    bindings_retrievable: bool = False
    plan_updateable: bool = False
    allow_context_updates: bool = False
    catalog_id: str = ""
    catalog_name: str = ""
    broker_id: str = ""
    tags: list[str] = Field(default_factory=list)
    metadata: dict[str, Any] | None = None
    created_at: Timestamp = None
    updated_at: Timestamp = None


class ServicePlanResponseObject(ResponseModel):
    id: str = ""
    name: str = ""
    ready: bool = False
    description: str = ""
    catalog_id: str = ""
    catalog_name: str = ""
    free: bool = False
    bindable: bool = False
    service_offering_id: str = ""
    metadata: dict[str, Any] | None = None
    created_at: Timestamp = None
    updated_at: Timestamp = None


class ServicePlatformResponseObject(ResponseModel):
    id: str = ""
    name: str = ""
    type: str = ""
    description: str = ""
    ready: bool = False
    labels: dict[str, list[str]] | None = None
    created_at: Timestamp = None
    updated_at: Timestamp = None


@dataclass
class ServiceManagerLabel:
    """Operación de etiqueta para los updates del service manager."""

    op: str
    key: str
    values: list[str] = field(default_factory=list)
