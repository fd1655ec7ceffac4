"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- El endpoint de trofeos devuelve camelCase; los alias permiten exponer
  nombres pythónicos sin perder el formato original al exportar.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.platform import Platform


class DefinedTrophies(BaseModel):
    """Número de trofeos definidos por tipo para un título."""

    model_config = ConfigDict(extra="ignore")

    bronze: int = Field(default=0, ge=0)
    silver: int = Field(default=0, ge=0)
    gold: int = Field(default=0, ge=0)
    platinum: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        return self.bronze + self.silver + self.gold + self.platinum


class ComparedUserProgress(BaseModel):
    """Progreso del usuario consultado (`comparedUser`) en un título."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    online_id: str = Field(
        ...,
        alias="onlineId",
        description="Online ID del usuario comparado.",
    )
    progress: int = Field(
        default=0,
        ge=0,
        le=100,
        description="Porcentaje de progreso (0..100).",
    )
    earned_trophies: DefinedTrophies = Field(
        default_factory=DefinedTrophies,
        alias="earnedTrophies",
        description="Trofeos obtenidos por tipo.",
    )
    last_update_date: datetime | None = Field(
        default=None,
        alias="lastUpdateDate",
        description="Última vez que el usuario obtuvo un trofeo en el título.",
    )


class TrophyTitle(BaseModel):
    """Un título (juego/app) con sistema de trofeos.

    Por qué existe:
    - Es la unidad que producen las páginas del endpoint y la que filtran
      los decoradores (`name`, `has_trophy_groups`).
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    np_communication_id: str = Field(
        ...,
        alias="npCommunicationId",
        min_length=1,
        description="Identificador del set de trofeos (p.ej. 'NPWR12345_00').",
    )
    name: str = Field(
        ...,
        alias="trophyTitleName",
        description="Nombre visible del título.",
    )
    detail: str | None = Field(
        default=None,
        alias="trophyTitleDetail",
        description="Descripción del set de trofeos.",
    )
    icon_url: str | None = Field(
        default=None,
        alias="trophyTitleIconUrl",
        description="URL del icono del título.",
    )
    # La API lo escribe así ("Platfrom").
    platform: str = Field(
        default="",
        alias="trophyTitlePlatfrom",
        description="Plataformas separadas por coma (p.ej. 'PS4,PSVITA').",
    )
    has_trophy_groups: bool = Field(
        default=False,
        alias="hasTrophyGroups",
        description="Indica si el título tiene grupos de trofeos (p.ej. DLC).",
    )
    defined_trophies: DefinedTrophies = Field(
        default_factory=DefinedTrophies,
        alias="definedTrophies",
        description="Trofeos definidos por tipo.",
    )
    compared_user: ComparedUserProgress | None = Field(
        default=None,
        alias="comparedUser",
        description="Progreso del usuario consultado (si la API lo incluye).",
    )

    @property
    def platforms(self) -> list[Platform]:
        return Platform.parse_list(self.platform)

    @property
    def total_defined(self) -> int:
        return self.defined_trophies.total


class TrophyTitlesPage(BaseModel):
    """Una página de `trophyTitles` tal como la devuelve el endpoint."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    total_results: int = Field(
        ...,
        alias="totalResults",
        ge=0,
        description="Total de títulos disponibles para la consulta.",
    )
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=0, ge=0)
    trophy_titles: list[TrophyTitle] = Field(
        default_factory=list,
        alias="trophyTitles",
        description="Títulos de esta página.",
    )
