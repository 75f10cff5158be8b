"""Fachada `accounts/entitlement`.

Asignaciones de cuota a subaccounts y directorios. Las búsquedas
(`get_assigned_by_subaccount`, `get_entitled_by_directory`) listan y filtran
en el cliente porque el backend no tiene un `get` para una sola asignación.
"""

from __future__ import annotations

from dataclasses import dataclass

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.cis_entitlements import (
    AssignedServicePlanResponseObject,
    AssignedServicePlanSubaccountDto,
    AssignedServiceResponseObject,
    EntitledAndAssignedServicesResponseObject,
    EntitledServicesResponseObject,
    EntitlementAssignmentResponseObject,
    ServicePlanResponseObject,
)
from core.domain.commands import CommandResponse, new_assign_request, new_list_request

SUBACCOUNT_ENTITY_TYPE = "SUBACCOUNT"
DIRECTORY_ENTITY_TYPE = "DIRECTORY"


def _bool(value: bool) -> str:
    return "true" if value else "false"


@dataclass
class UnfoldedAssignment:
    service: AssignedServiceResponseObject
    plan: AssignedServicePlanResponseObject
    assignment: AssignedServicePlanSubaccountDto


@dataclass
class UnfoldedEntitlement:
    service: EntitledServicesResponseObject
    plan: ServicePlanResponseObject


class AccountsEntitlementFacade(CommandFacade):
    command = "accounts/entitlement"

    def list_by_global_account(self) -> tuple[EntitledAndAssignedServicesResponseObject, CommandResponse]:
        return self._execute(
            EntitledAndAssignedServicesResponseObject,
            new_list_request(self.command, {"globalAccount": self._global_account()}),
        )

    def list_by_subaccount(self, subaccount_id: str) -> tuple[EntitledAndAssignedServicesResponseObject, CommandResponse]:
        return self._execute(
            EntitledAndAssignedServicesResponseObject,
            new_list_request(self.command, {"subaccountFilter": subaccount_id}),
        )

    def list_by_directory(self, directory_id: str) -> tuple[EntitledAndAssignedServicesResponseObject, CommandResponse]:
        return self._execute(
            EntitledAndAssignedServicesResponseObject,
            new_list_request(self.command, {"directory": directory_id}),
        )

    def _assign(self, params: dict[str, str]) -> CommandResponse:
        _, res = self._execute(EntitlementAssignmentResponseObject, new_assign_request(self.command, params))
        return res

    def assign_to_subaccount(
        self, subaccount_id: str, service_name: str, service_plan_name: str, amount: int
    ) -> CommandResponse:
        return self._assign(
            {
                "subaccount": subaccount_id,
                "serviceName": service_name,
                "servicePlanName": service_plan_name,
                "amount": str(amount),
            }
        )

    def enable_in_subaccount(self, subaccount_id: str, service_name: str, service_plan_name: str) -> CommandResponse:
        return self._assign(
            {
                "subaccount": subaccount_id,
                "serviceName": service_name,
                "servicePlanName": service_plan_name,
                "enable": "true",
            }
        )

    def disable_in_subaccount(self, subaccount_id: str, service_name: str, service_plan_name: str) -> CommandResponse:
        return self._assign(
            {
                "subaccount": subaccount_id,
                "serviceName": service_name,
                "servicePlanName": service_plan_name,
                "enable": "false",
            }
        )

    def assign_to_directory(
        self,
        directory_id: str,
        service_name: str,
        service_plan_name: str,
        amount: int,
        distribute: bool,
        auto_assign: bool,
        auto_distribute_amount: int,
    ) -> CommandResponse:
        return self._assign(
            {
                "directory": directory_id,
                "serviceName": service_name,
                "servicePlanName": service_plan_name,
                "amount": str(amount),
                "distribute": _bool(distribute),
                "autoAssign": _bool(auto_assign),
                "autoDistributeAmount": str(auto_distribute_amount),
            }
        )

    def enable_in_directory(
        self, directory_id: str, service_name: str, service_plan_name: str, distribute: bool, auto_assign: bool
    ) -> CommandResponse:
        return self._assign(
            {
                "directory": directory_id,
                "serviceName": service_name,
                "servicePlanName": service_plan_name,
                "enable": "true",
                "distribute": _bool(distribute),
                "autoAssign": _bool(auto_assign),
            }
        )

    def disable_in_directory(
        self, directory_id: str, service_name: str, service_plan_name: str, distribute: bool, auto_assign: bool
    ) -> CommandResponse:
        return self._assign(
            {
                "directory": directory_id,
                "serviceName": service_name,
                "servicePlanName": service_plan_name,
                "enable": "false",
                "distribute": _bool(distribute),
                "autoAssign": _bool(auto_assign),
            }
        )

    def get_assigned_by_subaccount(
        self, subaccount_id: str, service_name: str, service_plan_name: str
    ) -> tuple[UnfoldedAssignment | None, CommandResponse]:
        entitlements, res = self.list_by_subaccount(subaccount_id)

        for service in entitlements.assigned_services:
            if service.name != service_name:
                continue
            for plan in service.service_plans:
                if plan.name != service_plan_name:
                    continue
                for assignment in plan.assignment_info:
                    if assignment.entity_type == SUBACCOUNT_ENTITY_TYPE and assignment.entity_id == subaccount_id:
                        return UnfoldedAssignment(service=service, plan=plan, assignment=assignment), res

        return None, res

    def get_entitled_by_directory(
        self, directory_id: str, service_name: str, service_plan_name: str
    ) -> tuple[UnfoldedEntitlement | None, CommandResponse]:
        entitlements, res = self.list_by_directory(directory_id)

        for service in entitlements.entitled_services:
            if service.name != service_name:
                continue
            for plan in service.service_plans:
                if plan.name == service_plan_name:
                    return UnfoldedEntitlement(service=service, plan=plan), res

        return None, res
