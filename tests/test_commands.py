"""core/domain/commands.py: requests y responses de comandos"""

from __future__ import annotations

import pytest

from core.domain import commands
from core.domain.commands import Action, CommandOptions, CommandResponse, new_command_request


class _Body:
    def __init__(self, content: bytes) -> None:
        self.content = content
        self.closed = False

    def read(self) -> bytes:
        return self.content

    def close(self) -> None:
        self.closed = True


class TestAction:
    def test_values_are_wire_verbs(self):
        assert Action.GET.value == "get"
        assert Action.UNSUBSCRIBE.value == "unsubscribe"
        assert str(Action.REGISTER) == "register"

    @pytest.mark.parametrize("action", list(Action))
    def test_every_action_has_a_constructor(self, action):
        constructor = getattr(commands, f"new_{action.value}_request")

        request = constructor("accounts/subaccount", {"subaccount": "123"})

        assert request.action is action
        assert request.command == "accounts/subaccount"
        assert request.args == {"subaccount": "123"}


class TestCommandRequest:
    def test_generic_constructor_accepts_strings(self):
        request = new_command_request("list", "security/role")

        assert request.action is Action.LIST
        assert request.args is None

    def test_unknown_action(self):
        with pytest.raises(ValueError):
            new_command_request("explode", "accounts/subaccount")


class TestCommandOptions:
    def test_defaults(self):
        options = CommandOptions()

        assert options.good_state == 200
        assert options.known_error_states == {}

    def test_known_error_states_are_not_shared(self):
        first, second = CommandOptions(), CommandOptions()
        first.known_error_states[404] = "missing"

        assert second.known_error_states == {}


class TestCommandResponse:
    def test_read_and_close(self):
        body = _Body(b'{"ok": true}')
        response = CommandResponse(status_code=201, content_type="application/json", body=body)

        assert response.read() == b'{"ok": true}'
        response.close()
        assert body.closed

    def test_without_body(self):
        response = CommandResponse(status_code=404)

        assert response.read() == b""
        response.close()
        assert response.content_type == ""
