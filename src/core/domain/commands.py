"""Requests y responses del protocolo de comandos.

Un comando es `acción + ruta + parámetros`: el backend lo recibe como
`POST command/<versión>/<ruta>?<acción>` con `{"paramValues": ...}` en el body.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol


class Action(str, Enum):
    """Verbos que acepta el backend (van literalmente como query string)."""

    ADD = "add"
    ASSIGN = "assign"
    CREATE = "create"
    DELETE = "delete"
    DISABLE = "disable"
    ENABLE = "enable"
    GET = "get"
    LIST = "list"
    REGISTER = "register"
    REMOVE = "remove"
    SHARE = "share"
    SUBSCRIBE = "subscribe"
    UNASSIGN = "unassign"
    UNREGISTER = "unregister"
    UNSHARE = "unshare"
    UNSUBSCRIBE = "unsubscribe"
    UPDATE = "update"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CommandRequest:
    action: Action
    command: str
    args: Any = None


@dataclass
class CommandOptions:
    """Overrides por llamada del chequeo de status HTTP."""

    good_state: int = 200
    known_error_states: dict[int, str] = field(default_factory=dict)


class ResponseBody(Protocol):
    def read(self) -> bytes: ...

    def close(self) -> None: ...


@dataclass
class CommandResponse:
    """Resultado lógico de un comando.

    `status_code` es el status que reporta el backend en un header, no el
    status HTTP (que es 200 para cualquier respuesta bien formada). `body`
    queda abierto: quien lo recibe lo tiene que cerrar.
    """

    status_code: int = 0
    content_type: str = ""
    body: ResponseBody | None = None

    def read(self) -> bytes:
        if self.body is None:
            return b""
        return self.body.read()

    def close(self) -> None:
        if self.body is not None:
            self.body.close()


def new_command_request(action: Action | str, command: str, args: Any = None) -> CommandRequest:
    return CommandRequest(action=Action(action), command=command, args=args)


def new_add_request(command: str, args: Any = None) -> CommandRequest:
    return new_command_request(Action.ADD, command, args)


def new_assign_request(command: str, args: Any = None) -> CommandRequest:
    return new_command_request(Action.ASSIGN, command, args)


def new_create_request(command: str, args: Any = None) -> CommandRequest:
    return new_command_request(Action.CREATE, command, args)


def new_delete_request(command: str, args: Any = None) -> CommandRequest:
    return new_command_request(Action.DELETE, command, args)


def new_disable_request(command: str, args: Any = None) -> CommandRequest:
    return new_command_request(Action.DISABLE, command, args)


def new_enable_request(command: str, args: Any = None) -> CommandRequest:
    return new_command_request(Action.ENABLE, command, args)


def new_get_request(command: str, args: Any = None) -> CommandRequest:
    return new_command_request(Action.GET, command, args)


def new_list_request(command: str, args: Any = None) -> CommandRequest:
    return new_command_request(Action.LIST, command, args)


def new_register_request(command: str, args: Any = None) -> CommandRequest:
    return new_command_request(Action.REGISTER, command, args)


def new_remove_request(command: str, args: Any = None) -> CommandRequest:
    return new_command_request(Action.REMOVE, command, args)


def new_share_request(command: str, args: Any = None) -> CommandRequest:
    return new_command_request(Action.SHARE, command, args)


def new_subscribe_request(command: str, args: Any = None) -> CommandRequest:
    return new_command_request(Action.SUBSCRIBE, command, args)


def new_unassign_request(command: str, args: Any = None) -> CommandRequest:
    return new_command_request(Action.UNASSIGN, command, args)


def new_unregister_request(command: str, args: Any = None) -> CommandRequest:
    return new_command_request(Action.UNREGISTER, command, args)


def new_unshare_request(command: str, args: Any = None) -> CommandRequest:
    return new_command_request(Action.UNSHARE, command, args)


def new_unsubscribe_request(command: str, args: Any = None) -> CommandRequest:
    return new_command_request(Action.UNSUBSCRIBE, command, args)


def new_update_request(command: str, args: Any = None) -> CommandRequest:
    return new_command_request(Action.UPDATE, command, args)
