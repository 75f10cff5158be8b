"""Sobre de error del backend (status lógico >= 400)."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class BrokerError(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    description: str | None = Field(default=None, alias="Description")


class ConfigurationViolation(BaseModel):
    model_config = ConfigDict(extra="allow")

    configuration: str = ""
    errors: list[str] = Field(default_factory=list)


class BackendErrorResponse(BaseModel):
    """Error reportado por el backend.

    El texto principal suele venir en `error`; algunos servicios usan
    `ErrorMessage` o `description`. El service manager añade `broker_error` y
    el servicio de destinos la lista `violations`. Cualquiera de los textos
    puede llegar como `null`.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    error: str | None = None
    error_message: str | None = Field(default=None, alias="ErrorMessage")
    description: str | None = None
    broker_error: BrokerError | None = None
    violations: list[ConfigurationViolation] | None = None

    def describe(self) -> str:
        error = self.error or ""
        message = error or self.error_message or self.description or "unknown backend error"

        if self.broker_error is not None:
            return f"{error} - {self.broker_error.description or ''}"

        if self.violations:
            details = [
                f"Configuration '{v.configuration}': {'; '.join(v.errors)}" for v in self.violations if v.errors
            ]
            if details:
                return f"{self.error_message or ''} - {' | '.join(details)}"

        return message
