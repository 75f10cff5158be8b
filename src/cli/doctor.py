"""Doctor command for environment diagnostics."""

from __future__ import annotations

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_http_client
from core.config import BtpSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(settings: BtpSettings) -> tuple[bool, str]:
    """Best-effort: cualquier respuesta HTTP cuenta como servidor alcanzable."""

    try:
        with build_http_client(settings) as client:
            response = client.get(settings.server_url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = BtpSettings()

    table = Table(title="btp-cli-client Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Server URL", "OK", settings.server_url)
    if settings.globalaccount:
        table.add_row("Global account", "OK", settings.globalaccount)
    else:
        table.add_row("Global account", "MISSING", "Set BTP_GLOBALACCOUNT or run `doctor configure`")

    if settings.idtoken:
        table.add_row("Credentials", "OK", "ID token login")
    elif settings.username and settings.password:
        table.add_row("Credentials", "OK", f"Password login as {settings.username}")
    else:
        table.add_row("Credentials", "MISSING", "Set BTP_USERNAME/BTP_PASSWORD or BTP_IDTOKEN")
    table.add_row("Identity provider", "OK", settings.idp or "SAP ID service (default)")

    # Connectivity (best-effort)
    ok_http, detail_http = _check_http(settings)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] Check the server URL and any proxy settings (HTTPS_PROXY)."
        )


@app.command()
def configure() -> None:
    """Interactive setup (stores config in the user config .env).

    The password is never stored; provide it through BTP_PASSWORD.
    """

    settings = BtpSettings()

    server_url = typer.prompt("Server URL", default=settings.server_url, show_default=True).strip()
    globalaccount = typer.prompt(
        "Global account subdomain",
        default=settings.globalaccount,
        show_default=bool(settings.globalaccount),
    ).strip()
    username = typer.prompt("Username", default=settings.username or "", show_default=bool(settings.username)).strip()
    idp = typer.prompt("Custom identity provider (empty for default)", default=settings.idp, show_default=False).strip()

    if not server_url or not globalaccount:
        raise typer.BadParameter("server URL and global account are required")

    env_path = write_user_env_vars(
        {
            "BTP_SERVER_URL": server_url,
            "BTP_GLOBALACCOUNT": globalaccount,
            "BTP_USERNAME": username or None,
            "BTP_IDP": idp,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
