"""Fachada `connectivity/destination-fragment`.

Los fragmentos viven en el subaccount o en una instancia del servicio de
destinos; `service_instance_id` vacío significa nivel subaccount.
"""

from __future__ import annotations

import json

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.connectivity import DestinationFragment
from core.domain.commands import (
    CommandResponse,
    new_create_request,
    new_delete_request,
    new_get_request,
    new_list_request,
    new_update_request,
)


def _scope_params(subaccount_id: str, service_instance_id: str) -> dict[str, str]:
    params = {"subaccount": subaccount_id}
    if service_instance_id:
        params["serviceInstance"] = service_instance_id
    return params


def _content_param(content: dict[str, str]) -> str:
    return json.dumps(content, separators=(",", ":"), ensure_ascii=False)


class ConnectivityDestinationFragmentFacade(CommandFacade):
    command = "connectivity/destination-fragment"

    def get(self, subaccount_id: str, name: str, service_instance_id: str = "") -> tuple[DestinationFragment, CommandResponse]:
        params = {"name": name, **_scope_params(subaccount_id, service_instance_id)}
        return self._execute(DestinationFragment, new_get_request(self.command, params))

    def list(self, subaccount_id: str, service_instance_id: str = "") -> tuple[list[DestinationFragment], CommandResponse]:
        params = _scope_params(subaccount_id, service_instance_id)
        return self._execute(list[DestinationFragment], new_list_request(self.command, params))

    def create(
        self, subaccount_id: str, content: dict[str, str], service_instance_id: str = ""
    ) -> tuple[DestinationFragment, CommandResponse]:
        params = {**_scope_params(subaccount_id, service_instance_id), "content": _content_param(content)}
        return self._execute(DestinationFragment, new_create_request(self.command, params))

    def update(
        self, subaccount_id: str, content: dict[str, str], service_instance_id: str = ""
    ) -> tuple[DestinationFragment, CommandResponse]:
        params = {**_scope_params(subaccount_id, service_instance_id), "content": _content_param(content)}
        return self._execute(DestinationFragment, new_update_request(self.command, params))

    def delete(
        self, subaccount_id: str, name: str, service_instance_id: str = ""
    ) -> tuple[DestinationFragment, CommandResponse]:
        params = {**_scope_params(subaccount_id, service_instance_id), "name": name}
        return self._execute(DestinationFragment, new_delete_request(self.command, params))
