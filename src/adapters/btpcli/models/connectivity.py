"""Modelos de destinos, fragmentos y certificados de confianza (connectivity)."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from adapters.btpcli.models.base import ResponseModel


class DestinationResponse(ResponseModel):
    """Destino tal como lo devuelve el backend.

    Las propiedades del destino (`Name`, `Type`, `URL`, ...) van en
    `destination_configuration` con las claves originales.
    """

    owner: dict[str, Any] | None = None
    destination_configuration: dict[str, Any] = Field(default_factory=dict)
    system_metadata: dict[str, Any] | None = None
    certificates: list[dict[str, Any]] = Field(default_factory=list)
    auth_tokens: list[dict[str, Any]] = Field(default_factory=list)

    def configuration_value(self, key: str) -> str:
        value = self.destination_configuration.get(key, "")
        return value if isinstance(value, str) else str(value)


class DestinationFragment(ResponseModel):
    """Fragmento de destino: `FragmentName` más propiedades libres (extra)."""

    fragment_name: str = Field(default="", alias="FragmentName")


class DestinationTrustCertificate(ResponseModel):
    name: str = ""
    type: str = ""
    expiration: str = ""
    certificate: str = ""


class DestinationTrustResponse(ResponseModel):
    active: DestinationTrustCertificate | None = None
    passive: DestinationTrustCertificate | None = None
    certificates: list[DestinationTrustCertificate] = Field(default_factory=list)
