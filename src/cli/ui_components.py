"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import TrophyTitle


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Permite desactivar banner en modos no interactivos (JSON/pipelines).
    """

    title = Text("PSN-TROPHIES", style="bold cyan")
    subtitle = Text("Trophy titles • Filtros • Paginación perezosa", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_titles_table(titles: Iterable[TrophyTitle]) -> Table:
    """Crea una tabla Rich con los títulos; consume el iterable."""

    table = Table(title="Trophy Titles")
    table.add_column("Name", style="cyan")
    table.add_column("Platform", style="white", no_wrap=True)
    table.add_column("Groups", style="green")
    table.add_column("Trophies", style="magenta", justify="right")
    table.add_column("Progress", style="yellow", justify="right")
    for t in titles:
        progress = f"{t.compared_user.progress}%" if t.compared_user else "-"
        table.add_row(
            t.name,
            t.platform,
            "yes" if t.has_trophy_groups else "no",
            str(t.total_defined),
            progress,
        )
    return table


def build_title_panel(title: TrophyTitle) -> Panel:
    """Panel con el detalle de un único título."""

    body = Text()
    body.append(title.name + "\n", style="bold")
    if title.detail:
        body.append(title.detail.strip() + "\n\n")
    d = title.defined_trophies
    body.append(
        f"Platinum {d.platinum} • Gold {d.gold} • Silver {d.silver} • Bronze {d.bronze}\n"
    )
    body.append(f"Platform: {title.platform or '-'}\n", style="dim")
    body.append(f"Trophy groups: {'yes' if title.has_trophy_groups else 'no'}", style="dim")
    if title.compared_user:
        body.append(f"\nProgress: {title.compared_user.progress}%")

    return Panel(body, title=Text(title.np_communication_id, style="bold yellow"), border_style="yellow")
