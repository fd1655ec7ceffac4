"""Servicios del Core: consultas de trophy titles y sus filtros."""

from core.services.filters import (
    TrophyTitleFilter,
    TrophyTitleHasGroupsFilter,
    TrophyTitleNameFilter,
)
from core.services.trophy_titles import TrophyTitlesQuery

__all__ = [
    "TrophyTitleFilter",
    "TrophyTitleHasGroupsFilter",
    "TrophyTitleNameFilter",
    "TrophyTitlesQuery",
]
