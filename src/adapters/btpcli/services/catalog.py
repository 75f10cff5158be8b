"""Fachadas de solo lectura del catálogo: ofertas, planes y plataformas."""

from __future__ import annotations

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.servicemanager import (
    ServiceOfferingResponseObject,
    ServicePlanResponseObject,
    ServicePlatformResponseObject,
)
from adapters.btpcli.services._filters import list_params
from core.domain.commands import CommandResponse, new_get_request, new_list_request


class ServicesOfferingFacade(CommandFacade):
    command = "services/offering"

    def list(
        self, subaccount_id: str, fields_filter: str = "", labels_filter: str = "", environment: str = ""
    ) -> tuple[list[ServiceOfferingResponseObject], CommandResponse]:
        params = list_params(subaccount_id, fields_filter, labels_filter, environment)
        return self._execute(list[ServiceOfferingResponseObject], new_list_request(self.command, params))

    def get_by_id(self, subaccount_id: str, offering_id: str) -> tuple[ServiceOfferingResponseObject, CommandResponse]:
        params = {"subaccount": subaccount_id, "id": offering_id}
        return self._execute(ServiceOfferingResponseObject, new_get_request(self.command, params))

    def get_by_name(self, subaccount_id: str, name: str) -> tuple[ServiceOfferingResponseObject, CommandResponse]:
        params = {"subaccount": subaccount_id, "name": name}
        return self._execute(ServiceOfferingResponseObject, new_get_request(self.command, params))


class ServicesPlanFacade(CommandFacade):
    command = "services/plan"

    def list(
        self, subaccount_id: str, fields_filter: str = "", labels_filter: str = "", environment: str = ""
    ) -> tuple[list[ServicePlanResponseObject], CommandResponse]:
        params = list_params(subaccount_id, fields_filter, labels_filter, environment)
        return self._execute(list[ServicePlanResponseObject], new_list_request(self.command, params))

    def get_by_id(self, subaccount_id: str, plan_id: str) -> tuple[ServicePlanResponseObject, CommandResponse]:
        params = {"subaccount": subaccount_id, "id": plan_id}
        return self._execute(ServicePlanResponseObject, new_get_request(self.command, params))

    def get_by_name(
        self, subaccount_id: str, name: str, offering_name: str
    ) -> tuple[ServicePlanResponseObject, CommandResponse]:
        # Los nombres de plan solo son únicos dentro de una oferta.
        params = {"subaccount": subaccount_id, "name": name, "offeringName": offering_name}
        return self._execute(ServicePlanResponseObject, new_get_request(self.command, params))


class ServicesPlatformFacade(CommandFacade):
    command = "services/platform"

    def list(
        self, subaccount_id: str, fields_filter: str = "", labels_filter: str = ""
    ) -> tuple[list[ServicePlatformResponseObject], CommandResponse]:
        params = list_params(subaccount_id, fields_filter, labels_filter)
        return self._execute(list[ServicePlatformResponseObject], new_list_request(self.command, params))

    def get_by_id(self, subaccount_id: str, platform_id: str) -> tuple[ServicePlatformResponseObject, CommandResponse]:
        params = {"subaccount": subaccount_id, "id": platform_id}
        return self._execute(ServicePlatformResponseObject, new_get_request(self.command, params))

    def get_by_name(self, subaccount_id: str, name: str) -> tuple[ServicePlatformResponseObject, CommandResponse]:
        params = {"subaccount": subaccount_id, "name": name}
        return self._execute(ServicePlatformResponseObject, new_get_request(self.command, params))
