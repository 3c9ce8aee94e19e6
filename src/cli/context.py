"""Per-invocation CLI state shared by the root app and the doctor sub-app."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import typer
from rich.console import Console

from cli.ui_components import print_error
from core.config import AppSettings
from core.errors import TimeularError
from core.logging import configure_logging


@dataclass
class CliState:
    """Global options, turned into `AppSettings` only when a command runs.

    Loading is deferred so `--help` works even with a broken environment.
    """

    loader: Callable[..., AppSettings]
    console: Console
    overrides: dict[str, object] = field(default_factory=dict)
    _settings: AppSettings | None = None

    def settings(self) -> AppSettings:
        if self._settings is None:
            try:
                self._settings = self.loader(**self.overrides)
            except TimeularError as exc:
                print_error(self.console, exc)
                raise typer.Exit(code=1) from exc
            configure_logging(self._settings.log_level, console=self.console)
        return self._settings
