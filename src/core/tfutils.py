"""Utilidades para construir parámetros de comandos y clasificar errores.

Por qué aquí:
- Las fachadas describen sus inputs como dataclasses con metadata `btpcli`;
  `to_btpcli_params_map` las aplana al mapa `str -> str` que espera el backend.
- Los predicados de reintento son funciones puras: el que decide reintentar
  es el llamador, nunca el cliente.
"""

from __future__ import annotations

import dataclasses
import json
import math
import types
import typing
from collections.abc import Callable, Iterable
from datetime import timedelta
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel

from core.domain.values import BoolValue, StringValue
from core.errors import EncodingError

BTPCLI_TAG = "btpcli"

DEFAULT_TIMEOUT = timedelta(minutes=10)

_T = TypeVar("_T")


def cli_param(name: str, **kwargs: Any) -> Any:
    """`dataclasses.field` con el nombre del parámetro en el cable.

    `name` admite opciones separadas por coma; `"content,json"` serializa el
    campo completo como JSON.
    """

    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[BTPCLI_TAG] = name
    return dataclasses.field(metadata=metadata, **kwargs)


def _parse_cli_tag(tag: str) -> tuple[str, bool]:
    parts = tag.split(",")
    return parts[0], len(parts) > 1 and parts[1] == "json"


@lru_cache(maxsize=None)
def _resolved_hints(cls: type) -> dict[str, Any]:
    return typing.get_type_hints(cls)


def _is_optional_of(hint: Any, inner: Any) -> bool:
    args = typing.get_args(hint)
    origin = typing.get_origin(hint)
    if origin not in (typing.Union, types.UnionType):
        return False
    non_none = [a for a in args if a is not type(None)]
    return len(args) == 2 and len(non_none) == 1 and non_none[0] == inner


def _is_label_map(hint: Any) -> bool:
    return hint == dict[str, list[str]]


def _dump_json(value: Any) -> str:
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json", by_alias=True, exclude_none=True)
    elif dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = dataclasses.asdict(value)
    return json.dumps(value, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


def _encode_value(hint: Any, value: Any) -> str:
    if hint is StringValue:
        if value.is_null() or value.is_unknown():
            return ""
        return value.value_string()
    if hint is BoolValue:
        if value.is_null() or value.is_unknown():
            return ""
        return "true" if value.value_bool() else "false"
    if hint is bool:
        return "true" if value else "false"
    if hint is int:
        return str(value)
    if hint is str:
        return value
    if _is_optional_of(hint, str):
        return "" if value is None else value
    if _is_optional_of(hint, bool):
        if value is None:
            return ""
        return "true" if value else "false"
    if _is_label_map(hint) or _is_optional_of(hint, dict[str, list[str]]):
        return "" if value is None else _dump_json(value)
    if hint == list[str] or _is_optional_of(hint, list[str]):
        return "" if value is None else ",".join(value)

    type_name = getattr(hint, "__name__", None) if not typing.get_args(hint) else None
    raise EncodingError(f"unsupported type '{type_name or hint}'")


def to_btpcli_params_map(obj: Any) -> dict[str, str]:
    """Aplana un input dataclass al mapa de parámetros del backend.

    Reglas:
    - Solo los campos con metadata `btpcli` participan.
    - Los valores que quedan vacíos (null, unknown, "" o `None`) no se emiten;
      `bool` siempre se emite como "true"/"false".
    - `None` como input devuelve `{}`.
    """

    if obj is None:
        return {}
    if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
        raise EncodingError(f"unsupported type: {type(obj).__name__}")

    hints = _resolved_hints(type(obj))
    out: dict[str, str] = {}

    for f in dataclasses.fields(obj):
        tag = f.metadata.get(BTPCLI_TAG)
        if not tag:
            continue

        cli_parameter, as_json = _parse_cli_tag(tag)
        value = getattr(obj, f.name)

        try:
            encoded = _dump_json(value) if as_json else _encode_value(hints.get(f.name, f.type), value)
        except EncodingError as exc:
            raise EncodingError(f"unable to encode '{cli_parameter}': {exc}") from exc

        if not encoded:
            continue
        out[cli_parameter] = encoded

    return out


def calculate_delay_and_min_timeout(timeout: timedelta) -> tuple[timedelta, timedelta]:
    """Intervalo de polling = 1/100 del timeout, redondeado a segundos.

    10 minutos -> 6 segundos; 1 hora -> 36 segundos. El timeout mínimo entre
    sondeos es el mismo intervalo.
    """

    delay = timedelta(seconds=math.floor(timeout.total_seconds() / 100 + 0.5))
    return delay, delay


def set_difference(
    set_a: Iterable[_T],
    set_b: Iterable[_T],
    is_equal: Callable[[_T, _T], bool] | None = None,
) -> list[_T]:
    """Elementos de `set_a` que no están en `set_b` (orden de `set_a`)."""

    is_equal = is_equal or (lambda x, y: x == y)
    set_b = list(set_b)
    return [a for a in set_a if not any(is_equal(b, a) for b in set_b)]


_ENTITLEMENT_RETRY_MARKERS = (
    "[Error: 30004/400]",  # entitlement bloqueado por otra operación
    "[Error: 11006/429]",  # rate limit
)

_ENV_INSTANCE_RETRY_MARKER = "Command timed out. Please try again later."


def is_retriable_error_for_entitlement(err: BaseException | None) -> bool:
    if err is None:
        return False
    message = str(err)
    return any(marker in message for marker in _ENTITLEMENT_RETRY_MARKERS)


def is_retriable_error_for_env_instance(err: BaseException | None) -> bool:
    if err is None:
        return False
    return _ENV_INSTANCE_RETRY_MARKER in str(err)
