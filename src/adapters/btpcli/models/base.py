"""Base común de los modelos de respuesta."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

# El backend serializa fechas como epoch en milisegundos o como texto ISO.
Timestamp = Union[int, float, str, None]


class ResponseModel(BaseModel):
    """Campos en camelCase en el cable, snake_case en Python; todo con default."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )
