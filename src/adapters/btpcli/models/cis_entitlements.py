"""Modelos del servicio de entitlements."""

from __future__ import annotations

from pydantic import Field

from adapters.btpcli.models.base import ResponseModel


class AssignedServicePlanSubaccountDto(ResponseModel):
    entity_id: str = ""
    entity_type: str = ""
    entity_state: str = ""
    state_message: str = ""
    amount: float = 0
    auto_assign: bool = False
    auto_distribute_amount: int = 0
    unlimited_amount_assigned: bool = False
    parent_id: str = ""
    parent_type: str = ""
    parent_remaining_amount: float = 0
    parent_amount: float = 0


class AssignedServicePlanResponseObject(ResponseModel):
    name: str = ""
    display_name: str = ""
    unique_identifier: str = ""
    category: str = ""
    beta: bool = False
    unlimited: bool = False
    amount: float = 0
    remaining_amount: float = 0
    assignment_info: list[AssignedServicePlanSubaccountDto] = Field(default_factory=list)


class AssignedServiceResponseObject(ResponseModel):
    name: str = ""
    display_name: str = ""
    business_category: dict | None = None
    service_plans: list[AssignedServicePlanResponseObject] = Field(default_factory=list)


class ServicePlanResponseObject(ResponseModel):
    name: str = ""
    display_name: str = ""
    description: str = ""
    unique_identifier: str = ""
    category: str = ""
    beta: bool = False
    unlimited: bool = False
    amount: float = 0
    remaining_amount: float = 0
    provisioning_method: str = ""


class EntitledServicesResponseObject(ResponseModel):
    name: str = ""
    display_name: str = ""
    description: str = ""
    owner_type: str = ""
    service_plans: list[ServicePlanResponseObject] = Field(default_factory=list)


class EntitledAndAssignedServicesResponseObject(ResponseModel):
    entitled_services: list[EntitledServicesResponseObject] = Field(default_factory=list)
    assigned_services: list[AssignedServiceResponseObject] = Field(default_factory=list)


class EntitlementAssignmentResponseObject(ResponseModel):
    job_status_id: str = ""
