"""Doctor command for environment diagnostics."""

from __future__ import annotations

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_client
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        with build_client(settings) as client:
            response = client.get("")
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="PSN-Trophies Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if settings.access_token:
        table.add_row("Access token", "OK", "Bearer token configured")
    else:
        table.add_row("Access token", "MISSING", "Run `doctor set-token` or pass --token")
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("Page size", "OK", str(settings.page_size))
    table.add_row("Language", "OK", settings.default_language.label())

    # Connectivity (best-effort)
    ok_http, detail_http = _check_http(settings)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command(name="set-token")
def set_token() -> None:
    """Store an access token in the user config .env (no manual editing)."""

    token = typer.prompt("Access token", hide_input=True, confirmation_prompt=False).strip()
    if not token:
        raise typer.BadParameter("token is required")

    env_path = write_user_env_vars({"PSN_TROPHIES_ACCESS_TOKEN": token})
    _console.print(f"[green]Saved access token to:[/green] {env_path}")
