"""Componentes de UI para CLI (Rich).

Separa los detalles visuales de los comandos para reutilizar tablas y
mensajes en `main` y `doctor`.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.domain.models import Activity, Catalog
from core.errors import TimeularError


def build_activities_table(catalog: Catalog) -> Table:
    """Tabla Rich con id y nombre, en el orden del catálogo."""

    table = Table(title="Activities")
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    for activity in catalog:
        table.add_row(Text(activity.id), Text(activity.name))
    return table


def print_error(console: Console, error: TimeularError) -> None:
    message = Text()
    message.append("error: ", style="bold red")
    message.append(f"{error.kind}: ", style="red")
    message.append(str(error))
    console.print(message, soft_wrap=True)


def print_started(console: Console, activity: Activity, note: str) -> None:
    line = Text.assemble(("started ", "green"), (activity.name, "bold"))
    if note:
        line.append(f" ({note})", style="dim")
    console.print(line, soft_wrap=True)


def print_stopped(console: Console) -> None:
    console.print(Text("stopped tracking", style="green"))
