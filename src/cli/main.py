"""Typer application: `timeular list | start | stop | doctor`.

Credentials come from the TIMEULAR_KEY and TIMEULAR_SECRET environment
variables (or a `.env` file, see `timeular doctor setup`).
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console

from adapters.http_client import build_async_client
from cli import doctor
from cli.context import CliState
from cli.ui_components import build_activities_table, print_error, print_started, print_stopped
from core.config import AppSettings, load_settings
from core.domain.commands import Command, CommandResult, ListCommand, StartCommand, StopCommand
from core.errors import TimeularError
from core.services.command_runner import CommandRunner

logger = logging.getLogger(__name__)

app = typer.Typer(
    no_args_is_help=True,
    help=(
        "Command line client for the Timeular API.\n\n"
        "Takes creds in the TIMEULAR_KEY and TIMEULAR_SECRET env vars."
    ),
)
app.add_typer(doctor.app, name="doctor")

_err_console = Console(stderr=True)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)."
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Fail when the API answers a tracking call with a non-2xx status."
    ),
) -> None:
    overrides: dict[str, object] = {}
    if log_level:
        overrides["log_level"] = log_level
    if strict:
        overrides["strict_status"] = True
    ctx.obj = CliState(loader=load_settings, console=_err_console, overrides=overrides)


async def _run_command(settings: AppSettings, command: Command) -> CommandResult:
    credentials = settings.credentials()
    async with build_async_client(settings) as client:
        runner = CommandRunner.from_client(
            client, credentials, strict_status=settings.strict_status
        )
        return await runner.run(command)


def _execute(ctx: typer.Context, command: Command) -> CommandResult:
    state: CliState = ctx.obj
    settings = state.settings()
    try:
        return asyncio.run(_run_command(settings, command))
    except TimeularError as exc:
        logger.debug("command failed", exc_info=exc)
        print_error(_err_console, exc)
        raise typer.Exit(code=1) from exc


@app.command(name="list")
def list_activities(
    ctx: typer.Context,
    ids: bool = typer.Option(False, "--ids", help="Show a table with activity ids."),
) -> None:
    """List available activities."""

    result = _execute(ctx, ListCommand())
    if ids:
        Console().print(build_activities_table(result.catalog))
        return
    for activity in result.catalog:
        typer.echo(activity.name)


@app.command()
def start(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Activity name (case-insensitive regex)."),
    note: str = typer.Argument("", help="Optional note for the tracking."),
) -> None:
    """Start activity by (regex of) name."""

    result = _execute(ctx, StartCommand(pattern=name, note=note))
    if result.activity is not None:
        print_started(_err_console, result.activity, note)


@app.command()
def stop(ctx: typer.Context) -> None:
    """Stop the current tracking."""

    _execute(ctx, StopCommand())
    print_stopped(_err_console)


def run() -> None:
    app(prog_name="timeular")
