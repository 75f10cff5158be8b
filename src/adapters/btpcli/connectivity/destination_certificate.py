"""Fachada `connectivity/destination-certificate`.

Por qué `create` relee el certificado:
- El backend no devuelve nada útil al subir un fichero; el resultado que
  interesa (nodos, fechas) solo sale de un `get` posterior por nombre.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from adapters.btpcli.base import CommandFacade
from adapters.btpcli.models.destinations import DestinationCertificateResponseObject
from core.domain.commands import (
    CommandResponse,
    new_create_request,
    new_delete_request,
    new_get_request,
    new_list_request,
)

SCOPE_SUBACCOUNT = "subaccount"
SCOPE_SERVICE_INSTANCE = "serviceInstance"


@dataclass
class CertificateFile:
    filename: str
    content: str


@dataclass
class DestinationCertificateCreateInput:
    subaccount_id: str
    certificate: CertificateFile
    service_instance_id: str = ""


@dataclass
class DestinationCertificateGetInput:
    subaccount_id: str
    certificate_name: str
    service_instance_id: str = ""


def _scope_params(subaccount_id: str, service_instance_id: str) -> dict[str, str]:
    params = {"subaccount": subaccount_id}
    if service_instance_id:
        params["serviceInstance"] = service_instance_id
    return params


class ConnectivityDestinationCertificateFacade(CommandFacade):
    command = "connectivity/destination-certificate"

    def create(
        self, args: DestinationCertificateCreateInput
    ) -> tuple[DestinationCertificateResponseObject, CommandResponse]:
        params = _scope_params(args.subaccount_id, args.service_instance_id)
        params["file"] = json.dumps(
            {"filename": args.certificate.filename, "value": args.certificate.content},
            separators=(",", ":"),
        )
        self._execute(Any, new_create_request(self.command, params))

        return self.get(
            DestinationCertificateGetInput(
                subaccount_id=args.subaccount_id,
                certificate_name=args.certificate.filename,
                service_instance_id=args.service_instance_id,
            )
        )

    def get(self, args: DestinationCertificateGetInput) -> tuple[DestinationCertificateResponseObject, CommandResponse]:
        params = _scope_params(args.subaccount_id, args.service_instance_id)
        params["certName"] = args.certificate_name
        return self._execute(DestinationCertificateResponseObject, new_get_request(self.command, params))

    def delete(self, args: DestinationCertificateGetInput) -> CommandResponse:
        params = _scope_params(args.subaccount_id, args.service_instance_id)
        params["certName"] = args.certificate_name
        return self._execute_without_body(new_delete_request(self.command, params))

    def list(
        self, subaccount_id: str, service_instance_id: str = ""
    ) -> tuple[dict[str, list[DestinationCertificateResponseObject]], CommandResponse]:
        """Certificados agrupados por nivel (`subaccount` y, opcionalmente, `serviceInstance`).

        La `CommandResponse` devuelta es la de la última consulta.
        """

        params = {"subaccount": subaccount_id, "namesOnly": "false"}
        certificates, response = self._execute(
            list[DestinationCertificateResponseObject], new_list_request(self.command, params)
        )
        result = {SCOPE_SUBACCOUNT: certificates}

        if service_instance_id:
            params = {**params, "serviceInstance": service_instance_id}
            certificates, response = self._execute(
                list[DestinationCertificateResponseObject], new_list_request(self.command, params)
            )
            result[SCOPE_SERVICE_INSTANCE] = certificates

        return result, response
