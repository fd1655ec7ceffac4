"""CLI principal (Typer).

Por qué Typer + Rich:
- Opciones tipadas (Enums de plataforma/idioma) sin parsers manuales.
- Salida legible en terminal; `--json` para pipelines.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import httpx
import typer
from rich.console import Console

from adapters.json_exporter import export_titles_json
from adapters.psn.user import User
from cli.doctor import app as doctor_app
from cli.ui_components import build_title_panel, build_titles_table, print_banner
from core.config import AppSettings
from core.domain.language import Language
from core.domain.platform import Platform
from core.errors import MissingPlatformError, NoTrophiesError
from core.logging import setup_logging

app = typer.Typer(no_args_is_help=True, help="Query a user's trophy titles.")
app.add_typer(doctor_app, name="doctor")

_console = Console()


def _build_user(online_id: str, settings: AppSettings, token: str | None) -> User:
    return User.from_settings(online_id, settings, access_token=token)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable DEBUG logging."),
) -> None:
    settings = AppSettings()
    setup_logging("DEBUG" if verbose else settings.log_level, json_output=settings.log_json)


@app.command()
def titles(
    online_id: str = typer.Argument(..., help="Online ID of the user to query."),
    platform: Optional[List[Platform]] = typer.Option(
        None, "--platform", "-p", help="Platform to include (repeatable)."
    ),
    name: str = typer.Option("", "--name", "-n", help="Only titles whose name contains this text."),
    case_insensitive: bool = typer.Option(False, "--case-insensitive", help="Match --name ignoring case."),
    groups: Optional[bool] = typer.Option(
        None, "--groups/--no-groups", help="Only titles with (or without) trophy groups."
    ),
    language: Optional[Language] = typer.Option(None, "--language", "-l", help="npLanguage for names."),
    first: bool = typer.Option(False, "--first", help="Show only the first matching title."),
    json_path: Optional[Path] = typer.Option(None, "--json", help="Also export the titles to this JSON file."),
    token: Optional[str] = typer.Option(None, "--token", help="Bearer access token (overrides settings)."),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the welcome banner."),
) -> None:
    """List the trophy titles of ONLINE_ID."""

    settings = AppSettings()
    if banner:
        print_banner(_console)

    with _build_user(online_id, settings, token) as user:
        query = user.trophy_titles(settings).platforms(*(platform or []))
        query.with_name(name, case_sensitive=not case_insensitive)
        query.with_language(language or settings.default_language)
        if groups is not None:
            query.has_trophy_groups(groups)

        try:
            if first:
                found = [query.first()]
                _console.print(build_title_panel(found[0]))
            else:
                found = list(query.iterate())
                _console.print(build_titles_table(found))
                _console.print(f"[dim]{len(found)} title(s)[/dim]")
        except MissingPlatformError as exc:
            raise typer.BadParameter(
                "at least one --platform is required", param_hint="--platform"
            ) from exc
        except NoTrophiesError:
            _console.print("[yellow]No trophy titles matched.[/yellow]")
            raise typer.Exit(code=1)
        except httpx.HTTPError as exc:
            _console.print(f"[red]Request failed:[/red] {exc}")
            raise typer.Exit(code=2)

    if json_path is not None:
        out = export_titles_json(titles=found, output_path=json_path)
        _console.print(f"[green]Saved JSON to:[/green] {out}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
