"""Ejecución genérica de comandos con decodificación tipada.

Por qué aquí:
- Todas las fachadas hacen lo mismo: ejecutar, leer el body, decodificar a un
  tipo concreto y cerrar la respuesta. `do_execute` concentra ese ciclo.
- Un body vacío no es un error: equivale al valor "cero" del tipo pedido.
"""

from __future__ import annotations

import typing
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from core.domain.commands import CommandOptions, CommandRequest, CommandResponse
from core.errors import ResponseDecodingError
from core.interfaces.executor import CommandExecutor

T = TypeVar("T")


def first_element_or_default(items: typing.Sequence[T], default: T) -> T:
    return nth_element_or_default(items, 0, default)


def nth_element_or_default(items: typing.Sequence[T], n: int, default: T) -> T:
    if n >= len(items):
        return default
    return items[n]


@lru_cache(maxsize=None)
def _type_adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def zero_value(target: Any) -> Any:
    """Valor por defecto de `target` para respuestas sin body."""

    origin = typing.get_origin(target) or target
    if isinstance(origin, type):
        if issubclass(origin, BaseModel):
            return origin()
        if issubclass(origin, (list, tuple)):
            return origin()
        if issubclass(origin, dict):
            return {}
        if issubclass(origin, (str, bytes, int, float, bool)):
            return origin()
    return None


def do_execute(
    cli_client: CommandExecutor,
    request: CommandRequest,
    target: Any,
    *options: CommandOptions,
) -> tuple[Any, CommandResponse]:
    """Ejecuta `request` y decodifica el body JSON como `target`.

    El body se cierra siempre. Los errores de `execute` se propagan tal cual.
    """

    response = cli_client.execute(request, *options)
    try:
        content = response.read()
    finally:
        response.close()

    if not content.strip():
        return zero_value(target), response

    try:
        return _type_adapter(target).validate_json(content), response
    except ValidationError as exc:
        raise ResponseDecodingError(
            f"unable to decode response of '{request.command}?{request.action.value}': {exc}",
            command_response=response,
        ) from exc


class CommandFacade:
    """Base de las fachadas: un comando del backend y el ejecutor inyectado."""

    command: str = ""

    def __init__(self, cli_client: CommandExecutor) -> None:
        self._cli_client = cli_client

    def _global_account(self) -> str:
        return self._cli_client.get_global_account_subdomain()

    def _execute(self, target: Any, request: CommandRequest, *options: CommandOptions) -> tuple[Any, CommandResponse]:
        return do_execute(self._cli_client, request, target, *options)

    def _execute_without_body(self, request: CommandRequest, *options: CommandOptions) -> CommandResponse:
        """Para acciones sin resultado útil (add/remove/assign): se descarta el body."""

        response = self._cli_client.execute(request, *options)
        response.close()
        return response
