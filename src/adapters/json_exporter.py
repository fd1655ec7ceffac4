"""Exportación JSON de trophy titles.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Se exporta con los alias originales del endpoint (camelCase).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from core.domain.models import TrophyTitle


def export_titles_json(*, titles: Iterable[TrophyTitle], output_path: Path) -> Path:
    """Exporta los títulos a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [title.model_dump(mode="json", by_alias=True) for title in titles]
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
