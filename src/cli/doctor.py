"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from adapters.http_client import build_async_client
from adapters.timeular_api import SessionAuthenticator
from cli.context import CliState
from core.config import AppSettings, load_settings, write_user_env_vars
from core.errors import TimeularError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get("/")
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc)


async def _check_sign_in(settings: AppSettings) -> tuple[bool, str]:
    try:
        credentials = settings.credentials()
        async with build_async_client(settings) as client:
            await SessionAuthenticator(client).authenticate(credentials)
        return True, "token issued"
    except TimeularError as exc:
        return False, f"{exc.kind}: {exc}"


def _settings_from(ctx: typer.Context) -> AppSettings:
    state = ctx.obj
    if state is None:
        state = CliState(loader=load_settings, console=Console(stderr=True))
    return state.settings()


@app.command()
def run(ctx: typer.Context) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = _settings_from(ctx)

    table = Table(title="Timeular CLI Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    for label, value in (("TIMEULAR_KEY", settings.key), ("TIMEULAR_SECRET", settings.secret)):
        table.add_row(label, "OK" if value is not None else "MISSING", "set" if value is not None else "not set")
    table.add_row("Base URL", "OK", Text(settings.base_url))
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Strict status", "ON" if settings.strict_status else "OFF", "")

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", Text(detail_http))

    # Sign-in (real request)
    ok_auth, detail_auth = asyncio.run(_check_sign_in(settings))
    table.add_row("Sign-in", "OK" if ok_auth else "FAIL", Text(detail_auth))

    _console.print(table)

    if not ok_auth:
        _console.print(
            "\n[yellow]Note:[/yellow] run `timeular doctor setup` to store credentials in your user config."
        )
        raise typer.Exit(code=1)


@app.command()
def setup() -> None:
    """Interactive credential setup (stores them in the user config .env)."""

    api_key = typer.prompt("API key").strip()
    api_secret = typer.prompt("API secret", hide_input=True, confirmation_prompt=False).strip()

    if not api_key or not api_secret:
        raise typer.BadParameter("key and secret are required")

    env_path = write_user_env_vars(
        {
            "TIMEULAR_KEY": api_key,
            "TIMEULAR_SECRET": api_secret,
        }
    )

    _console.print(f"[green]Saved credentials to:[/green] {env_path}")
