"""Modelos de certificados del servicio de destinos."""

from __future__ import annotations

from pydantic import Field

from adapters.btpcli.models.base import ResponseModel


class NodeResponseObject(ResponseModel):
    type: str = ""
    format: str = ""
    algorithm: str = ""
    alias: str = ""
    subject: str = ""
    issuer: str = ""
    common_name: str = ""
    not_before: str = ""
    not_after: str = ""
    certificate: str = ""


class CreationDataResponseObject(ResponseModel):
    # Este bloque llega en snake_case.
    generation_method: str = Field(default="", alias="generation_method")
    common_name: str = Field(default="", alias="common_name")
    has_password: bool = Field(default=False, alias="has_password")
    auto_renew: bool = Field(default=False, alias="auto_renew")
    validity_duration: str = Field(default="", alias="validity_duration")
    validity_time_units: str = Field(default="", alias="validity_time_units")


class DestinationCertificateResponseObject(ResponseModel):
    name: str = ""
    nodes: list[NodeResponseObject] = Field(default_factory=list)
    creation: CreationDataResponseObject = Field(default_factory=CreationDataResponseObject)
