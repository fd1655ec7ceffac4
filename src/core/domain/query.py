"""Contexto de una consulta de trophy titles.

Por qué un dataclass congelado:
- `iterate()` toma una foto de la configuración del builder; reconfigurar el
  builder después no altera un pipeline ya construido.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.domain.language import Language
from core.domain.platform import Platform
from core.domain.tristate import TriState
from core.interfaces.user import TrophyUser


@dataclass(frozen=True)
class TrophyTitlesRequest:
    """Parámetros que controlan una consulta de trophy titles."""

    user: TrophyUser
    platforms: tuple[Platform, ...]
    language: Language = Language.ENGLISH
    name: str = ""
    name_case_sensitive: bool = True
    has_trophy_groups: TriState = TriState.UNSET

    @property
    def platform_param(self) -> str:
        """Valor del parámetro `platform` (`"PS4,PSVITA"`)."""

        return ",".join(str(getattr(p, "value", p)) for p in self.platforms)
