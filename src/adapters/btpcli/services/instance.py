"""Fachada `services/instance`.

Por qué create/update releen la instancia:
- El service manager responde 202 (operación asíncrona) sin la instancia
  final; el estado real se obtiene con un `get` posterior.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import dataclass, field
from http import HTTPStatus

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.servicemanager import (
    LABEL_OP_ADD,
    LABEL_OP_REMOVE,
    ServiceInstanceResponseObject,
    ServiceManagerLabel,
)
from adapters.btpcli.services._filters import list_params
from core.domain.commands import (
    CommandResponse,
    new_create_request,
    new_delete_request,
    new_get_request,
    new_list_request,
    new_update_request,
)
from core.errors import BackendError
from core.tfutils import cli_param, to_btpcli_params_map

logger = logging.getLogger(__name__)


@dataclass
class ServiceInstanceCreateInput:
    name: str = cli_param("name")
    subaccount: str = cli_param("subaccount")
    service_plan_id: str = cli_param("plan")
    parameters: str | None = cli_param("parameters", default=None)
    labels: dict[str, list[str]] | None = cli_param("labels", default=None)


@dataclass
class ServiceInstanceUpdateInput:
    id: str = cli_param("id")
    subaccount: str = cli_param("subaccount")
    new_name: str = cli_param("newName", default="")
    service_plan_id: str = cli_param("plan", default="")
    parameters: str | None = cli_param("parameters", default=None)
    # Etiquetas deseadas y actuales; el diff se calcula en `update`.
    labels_plan: dict[str, list[str]] = field(default_factory=dict)
    labels_state: dict[str, list[str]] = field(default_factory=dict)


def compute_label_param(labels_plan: dict[str, list[str]], labels_state: dict[str, list[str]]) -> str:
    """Traduce el cambio de etiquetas a operaciones `add`/`remove`.

    - Clave en ambos lados con valores distintos: `remove` de los viejos y
      `add` de los nuevos.
    - Solo en el plan: `add`. Solo en el estado: `remove`.
    - Sin cambios devuelve "" (el parámetro no se envía).
    """

    diff: list[ServiceManagerLabel] = []

    for key, values in labels_state.items():
        if key in labels_plan and values != labels_plan[key]:
            diff.append(ServiceManagerLabel(op=LABEL_OP_REMOVE, key=key, values=values))
            diff.append(ServiceManagerLabel(op=LABEL_OP_ADD, key=key, values=labels_plan[key]))

    for key, values in labels_plan.items():
        if key not in labels_state:
            diff.append(ServiceManagerLabel(op=LABEL_OP_ADD, key=key, values=values))

    for key, values in labels_state.items():
        if key not in labels_plan:
            diff.append(ServiceManagerLabel(op=LABEL_OP_REMOVE, key=key, values=values))

    if not diff:
        return ""
    return json.dumps([dataclasses.asdict(label) for label in diff], separators=(",", ":"))


class ServicesInstanceFacade(CommandFacade):
    command = "services/instance"

    def list(
        self, subaccount_id: str, fields_filter: str = "", labels_filter: str = ""
    ) -> tuple[list[ServiceInstanceResponseObject], CommandResponse]:
        return self._execute(
            list[ServiceInstanceResponseObject],
            new_list_request(self.command, list_params(subaccount_id, fields_filter, labels_filter)),
        )

    def get_by_id(self, subaccount_id: str, instance_id: str) -> tuple[ServiceInstanceResponseObject, CommandResponse]:
        params = {"subaccount": subaccount_id, "id": instance_id, "parameters": "false"}
        return self._execute(ServiceInstanceResponseObject, new_get_request(self.command, params))

    def get_by_name(self, subaccount_id: str, name: str) -> tuple[ServiceInstanceResponseObject, CommandResponse]:
        params = {"subaccount": subaccount_id, "name": name, "parameters": "false"}
        return self._execute(ServiceInstanceResponseObject, new_get_request(self.command, params))

    def create(self, args: ServiceInstanceCreateInput) -> tuple[ServiceInstanceResponseObject, CommandResponse]:
        instance, response = self._execute(
            ServiceInstanceResponseObject,
            new_create_request(self.command, to_btpcli_params_map(args)),
        )
        if response.status_code != HTTPStatus.ACCEPTED:
            return instance, response

        logger.debug("Instance %s accepted asynchronously, reading it back", args.name)
        return self.get_by_name(args.subaccount, args.name)

    def update(self, args: ServiceInstanceUpdateInput) -> tuple[ServiceInstanceResponseObject, CommandResponse]:
        params = to_btpcli_params_map(args)
        labels = compute_label_param(args.labels_plan, args.labels_state)
        if labels:
            params["labels"] = labels

        response = self._execute_without_body(new_update_request(self.command, params))
        if response.status_code != HTTPStatus.ACCEPTED:
            raise BackendError(
                f"the backend responded with an unknown error: {response.status_code}",
                command_response=response,
            )
        return self.get_by_id(args.subaccount, args.id)

    def delete(self, subaccount_id: str, instance_id: str) -> CommandResponse:
        params = {"subaccount": subaccount_id, "id": instance_id, "confirm": "true"}
        return self._execute_without_body(new_delete_request(self.command, params))
