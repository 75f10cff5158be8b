"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.commands import CommandResponse
from core.domain.models import LoggedInUser


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Permite desactivar banner en modos no interactivos (JSON/pipelines).
    """

    title = Text("btp-cli-client", style="bold cyan")
    subtitle = Text("SAP BTP CLI backend • Comandos • Sesión", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_session_table(global_account: str, user: LoggedInUser | None) -> Table:
    """Tabla con la sesión actual. Nunca muestra tokens."""

    table = Table(title="Session")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("Global account", global_account or "-")
    if user is None:
        table.add_row("User", "not logged in")
        return table

    table.add_row("User", user.username or "-")
    table.add_row("Email", user.email or "-")
    table.add_row("Issuer", user.issuer or "-")
    return table


def build_result_panel(action: str, command: str, response: CommandResponse) -> Panel:
    """Panel de cabecera para el resultado de un `execute`."""

    title = Text(f"{action} {command}", style="bold yellow")
    body = Text()
    body.append(f"Backend status: {response.status_code}\n")
    body.append(f"Media type: {response.content_type or '-'}", style="dim")
    return Panel(body, title=title, border_style="yellow")
