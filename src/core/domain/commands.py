"""Comandos soportados por el cliente.

`Command` es una unión cerrada: `ListCommand | StartCommand | StopCommand`.
Quien despacha debe cubrir los tres casos (ver `CommandRunner.run`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from core.domain.models import Activity, Catalog, CommandTimestamp


@dataclass(frozen=True)
class ListCommand:
    """List every activity in the catalog."""


@dataclass(frozen=True)
class StartCommand:
    """Start tracking the first activity whose name matches `pattern`."""

    pattern: str
    note: str = ""


@dataclass(frozen=True)
class StopCommand:
    """Stop whatever the server is currently tracking."""


Command = Union[ListCommand, StartCommand, StopCommand]


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one invocation, for the presentation layer."""

    command: Command
    timestamp: CommandTimestamp
    catalog: Catalog = field(default_factory=tuple)
    activity: Activity | None = None
