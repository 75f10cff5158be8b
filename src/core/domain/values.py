"""Valores opcionales con estado null/unknown.

Los inputs de los comandos distinguen tres estados por atributo: con valor,
nulo (no configurado) y desconocido (se conocerá más tarde). Solo los valores
conocidos y no nulos viajan al backend.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ValueState(str, Enum):
    KNOWN = "known"
    NULL = "null"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class StringValue:
    value: str = ""
    state: ValueState = ValueState.KNOWN

    @classmethod
    def of(cls, value: str) -> StringValue:
        return cls(value=value)

    @classmethod
    def null(cls) -> StringValue:
        return cls(state=ValueState.NULL)

    @classmethod
    def unknown(cls) -> StringValue:
        return cls(state=ValueState.UNKNOWN)

    def is_null(self) -> bool:
        return self.state is ValueState.NULL

    def is_unknown(self) -> bool:
        return self.state is ValueState.UNKNOWN

    def value_string(self) -> str:
        return self.value


@dataclass(frozen=True)
class BoolValue:
    value: bool = False
    state: ValueState = ValueState.KNOWN

    @classmethod
    def of(cls, value: bool) -> BoolValue:
        return cls(value=value)

    @classmethod
    def null(cls) -> BoolValue:
        return cls(state=ValueState.NULL)

    @classmethod
    def unknown(cls) -> BoolValue:
        return cls(state=ValueState.UNKNOWN)

    def is_null(self) -> bool:
        return self.state is ValueState.NULL

    def is_unknown(self) -> bool:
        return self.state is ValueState.UNKNOWN

    def value_bool(self) -> bool:
        return self.value
