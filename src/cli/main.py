"""CLI principal (Typer).

Por qué Typer:
- Comandos declarativos con tipado, ayuda automática y validación de opciones.
- Se integra con Rich para tablas y paneles.

Los errores del cliente (`BtpCliError`) y de red (`httpx.HTTPError`) se
capturan aquí, en el borde: se imprimen en rojo y la CLI sale con código 1.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import httpx
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.btpcli.client import V2Client, new_v2_client
from adapters.json_exporter import export_result_json
from cli import doctor
from cli.ui_components import build_result_panel, build_session_table, print_banner
from core.config import BtpSettings
from core.domain.commands import Action, new_command_request
from core.domain.models import new_id_token_login_request, new_login_request_with_custom_idp
from core.errors import BtpCliError

app = typer.Typer(
    name="btp-cli-client",
    no_args_is_help=True,
    help="Client for the SAP BTP CLI backend.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )
    # httpx loguea cada request en INFO; solo interesa en modo verbose.
    logging.getLogger("httpx").setLevel(logging.DEBUG if level.upper() == "DEBUG" else logging.WARNING)


def _parse_params(raw: list[str]) -> dict[str, str]:
    params: dict[str, str] = {}
    for item in raw:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"expected key=value, got '{item}'", param_hint="--param")
        params[key.strip()] = value
    return params


def _login(client: V2Client, settings: BtpSettings) -> None:
    """Login con ID token si está configurado; si no, usuario y password."""

    if not settings.globalaccount:
        raise typer.BadParameter("global account subdomain is required (BTP_GLOBALACCOUNT)")

    if settings.idtoken:
        client.id_token_login(new_id_token_login_request(settings.globalaccount, settings.idtoken))
        return

    if not settings.username or not settings.password:
        raise typer.BadParameter("set BTP_USERNAME and BTP_PASSWORD, or BTP_IDTOKEN")

    client.login(
        new_login_request_with_custom_idp(
            settings.idp,
            settings.globalaccount,
            settings.username,
            settings.password,
        )
    )


def _settings(
    globalaccount: str | None,
    server_url: str | None,
    verbose: bool,
) -> BtpSettings:
    overrides: dict[str, object] = {}
    if globalaccount:
        overrides["globalaccount"] = globalaccount
    if server_url:
        overrides["server_url"] = server_url
    if verbose:
        overrides["log_level"] = "DEBUG"

    settings = BtpSettings(**overrides)
    _configure_logging(settings.log_level)
    return settings


def _fail(exc: Exception) -> None:
    _console.print(f"[red]Error:[/red] {escape(str(exc))}")
    raise typer.Exit(code=1) from exc


@app.command()
def login(
    globalaccount: str | None = typer.Option(None, "--subdomain", "-s", help="Global account subdomain."),
    server_url: str | None = typer.Option(None, "--url", help="CLI server URL."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Authenticate and show the resulting session."""

    settings = _settings(globalaccount, server_url, verbose)
    print_banner(_console)

    try:
        with new_v2_client(settings) as client:
            _login(client, settings)
            _console.print(build_session_table(client.get_global_account_subdomain(), client.get_logged_in_user()))
    except (BtpCliError, httpx.HTTPError) as exc:
        _fail(exc)


@app.command()
def execute(
    action: Action = typer.Argument(..., help="Command action (get, list, create, ...)."),
    command: str = typer.Argument(..., help="Backend command, e.g. accounts/subaccount."),
    param: list[str] = typer.Option([], "--param", "-p", help="Parameter as key=value (repeatable)."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the JSON result to this file."),
    globalaccount: str | None = typer.Option(None, "--subdomain", "-s", help="Global account subdomain."),
    server_url: str | None = typer.Option(None, "--url", help="CLI server URL."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Log in and dispatch a single command to the backend."""

    settings = _settings(globalaccount, server_url, verbose)
    params = _parse_params(param)
    logger.debug("Dispatching %s %s with %d parameters", action.value, command, len(params))

    try:
        with new_v2_client(settings) as client:
            _login(client, settings)
            response = client.execute(new_command_request(action, command, params))
            try:
                content = response.read()
            finally:
                response.close()
    except (BtpCliError, httpx.HTTPError) as exc:
        _fail(exc)
        return

    _console.print(build_result_panel(action.value, command, response))

    if not content.strip():
        _console.print("[dim]Empty response body.[/dim]")
        return

    try:
        result = json.loads(content)
    except ValueError:
        # Algunos comandos devuelven texto plano.
        _console.print(content.decode("utf-8", errors="replace"))
        return

    if output is not None:
        path = export_result_json(result=result, output_path=output)
        _console.print(f"[green]Saved result to:[/green] {path}")
        return

    _console.print_json(data=result)


def run() -> None:
    """Entry point del script `btp-cli-client`."""

    app()


if __name__ == "__main__":
    run()
