"""cli/main.py y cli/doctor.py (Typer)"""

from __future__ import annotations

import json

import httpx
import pytest
import typer
from typer.testing import CliRunner

from adapters.btpcli.client import V2Client
from cli import main
from cli.main import _parse_params, app
from core.config import write_user_env_vars
from core.domain.protocol import HEADER_CLI_BACKEND_MEDIA_TYPE, HEADER_CLI_BACKEND_STATUS

runner = CliRunner()

LOGIN_RESPONSE = {"issuer": "accounts.sap.com", "user": "john.doe", "mail": "john@test.com", "refreshToken": "r1"}


class _FakeServer:
    """Responde al login y a un único comando."""

    def __init__(self, command_body: bytes = b"{}", backend_status: int = 200) -> None:
        self.command_body = command_body
        self.backend_status = backend_status
        self.login_body = json.dumps(LOGIN_RESPONSE).encode()
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if request.url.path.startswith("/login"):
            return httpx.Response(200, content=self.login_body)
        return httpx.Response(
            200,
            content=self.command_body,
            headers={
                HEADER_CLI_BACKEND_STATUS: str(self.backend_status),
                HEADER_CLI_BACKEND_MEDIA_TYPE: "application/json",
            },
        )


@pytest.fixture
def server(monkeypatch) -> _FakeServer:
    fake = _FakeServer()

    def _client(settings):
        http = httpx.Client(transport=httpx.MockTransport(fake))
        return V2Client(http, settings.server_url, user_agent=settings.user_agent)

    monkeypatch.setattr(main, "new_v2_client", _client)
    monkeypatch.setenv("BTP_GLOBALACCOUNT", "my-ga")
    monkeypatch.setenv("BTP_USERNAME", "john.doe")
    monkeypatch.setenv("BTP_PASSWORD", "secret")
    return fake


class TestParseParams:
    def test_pairs(self):
        assert _parse_params(["subaccount=123", "labels={\"a\":[\"b\"]}", "empty="]) == {
            "subaccount": "123",
            "labels": '{"a":["b"]}',
            "empty": "",
        }

    @pytest.mark.parametrize("raw", ["novalue", "=value"])
    def test_invalid(self, raw):
        with pytest.raises(typer.BadParameter):
            _parse_params([raw])


class TestExecute:
    def test_dispatches_command(self, server):
        server.command_body = b'{"guid": "123", "displayName": "Dev"}'

        result = runner.invoke(app, ["execute", "get", "accounts/subaccount", "-p", "subaccount=123"])

        assert result.exit_code == 0, result.output
        login, command = server.requests
        assert json.loads(login.content)["subdomain"] == "my-ga"
        assert command.url.path == "/command/v2.38.0/accounts/subaccount"
        assert command.url.query == b"get"
        assert json.loads(command.content) == {"paramValues": {"subaccount": "123"}}
        assert "Dev" in result.output

    def test_writes_output_file(self, server, tmp_path):
        server.command_body = b'[{"name": "Viewer"}]'
        output = tmp_path / "roles.json"

        result = runner.invoke(app, ["execute", "list", "security/role", "--output", str(output)])

        assert result.exit_code == 0, result.output
        assert json.loads(output.read_text(encoding="utf-8")) == [{"name": "Viewer"}]

    def test_backend_error_exits_with_1(self, server):
        server.command_body = b'{"error": "Subaccount not found"}'
        server.backend_status = 404

        result = runner.invoke(app, ["execute", "get", "accounts/subaccount", "-p", "subaccount=x"])

        assert result.exit_code == 1
        assert "Subaccount not found" in result.output

    def test_unknown_action_is_rejected(self, server):
        result = runner.invoke(app, ["execute", "explode", "accounts/subaccount"])

        assert result.exit_code != 0
        assert server.requests == []

    def test_missing_credentials(self, server, monkeypatch):
        monkeypatch.delenv("BTP_PASSWORD")

        result = runner.invoke(app, ["execute", "list", "security/role"])

        assert result.exit_code != 0
        assert server.requests == []


class TestLogin:
    def test_shows_session(self, server):
        result = runner.invoke(app, ["login"])

        assert result.exit_code == 0, result.output
        assert "my-ga" in result.output
        assert "john.doe" in result.output
        assert "r1" not in result.output

    def test_id_token_has_priority(self, server, monkeypatch):
        monkeypatch.setenv("BTP_IDTOKEN", "token-123")

        result = runner.invoke(app, ["login"])

        assert result.exit_code == 0, result.output
        assert server.requests[0].url.path == "/login/v2.38.0/idtoken"
        assert json.loads(server.requests[0].content) == {"subdomain": "my-ga", "idToken": "token-123"}

    def test_undecodable_login_exits_with_1(self, server):
        server.login_body = b"<html>maintenance</html>"

        result = runner.invoke(app, ["login"])

        assert result.exit_code == 1
        assert "unable to decode response" in result.output
        assert "json_invalid" in result.output


class TestDoctor:
    def test_configure_writes_user_env(self, tmp_path, monkeypatch):
        env_path = tmp_path / "user.env"
        monkeypatch.setattr("cli.doctor.write_user_env_vars", lambda values: write_user_env_vars(values, env_path=env_path))

        result = runner.invoke(
            app,
            ["doctor", "configure"],
            input="https://cli.example.test\nmy-ga\njane\n\n",
        )

        assert result.exit_code == 0, result.output
        content = env_path.read_text(encoding="utf-8")
        assert "BTP_SERVER_URL=https://cli.example.test" in content
        assert "BTP_GLOBALACCOUNT=my-ga" in content
        assert "BTP_USERNAME=jane" in content

    def test_run_reports_missing_settings(self, monkeypatch):
        monkeypatch.setattr("cli.doctor._check_http", lambda _settings: (False, "unreachable"))

        result = runner.invoke(app, ["doctor", "run"])

        assert result.exit_code == 0, result.output
        assert "MISSING" in result.output
        assert "unreachable" in result.output
