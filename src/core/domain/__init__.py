"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP, CLI, ni SDKs: solo conceptos del problema.
"""

from core.domain.language import Language
from core.domain.models import (
    ComparedUserProgress,
    DefinedTrophies,
    TrophyTitle,
    TrophyTitlesPage,
)
from core.domain.platform import Platform
from core.domain.query import TrophyTitlesRequest
from core.domain.tristate import TriState

__all__ = [
    "ComparedUserProgress",
    "DefinedTrophies",
    "Language",
    "Platform",
    "TriState",
    "TrophyTitle",
    "TrophyTitlesPage",
    "TrophyTitlesRequest",
]
