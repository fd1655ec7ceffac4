"""Filtros decoradores sobre iteradores de trophy titles.

Cada filtro envuelve exactamente un iterador interno y expone el mismo
protocolo de iteración. Al pedir el siguiente elemento, avanza el iterador
interno hasta encontrar uno que acepte o hasta que el interno se agote.

Los filtros no hacen I/O: cualquier página nueva la pide la fuente base.
`StopIteration` y los errores del iterador interno se propagan sin tocar.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

from core.domain.models import TrophyTitle
from core.logging import get_logger

logger = get_logger(__name__)


class TrophyTitleFilter(Iterator[TrophyTitle], ABC):
    """Base de los filtros: omite los títulos que `accept` rechaza."""

    def __init__(self, inner: Iterator[TrophyTitle]) -> None:
        self._inner = inner

    @property
    def inner(self) -> Iterator[TrophyTitle]:
        return self._inner

    @abstractmethod
    def accept(self, title: TrophyTitle) -> bool:
        """Predicado del filtro."""

    def __iter__(self) -> "TrophyTitleFilter":
        return self

    def __next__(self) -> TrophyTitle:
        while True:
            title = next(self._inner)
            if self.accept(title):
                return title
            logger.debug(
                "Trophy title rejected",
                extra={"filter": type(self).__name__, "title": title.name},
            )


class TrophyTitleNameFilter(TrophyTitleFilter):
    """Acepta títulos cuyo nombre contiene `name`."""

    def __init__(self, inner: Iterator[TrophyTitle], name: str, *, case_sensitive: bool = True) -> None:
        super().__init__(inner)
        self.name = name
        self.case_sensitive = case_sensitive
        self._needle = name if case_sensitive else name.casefold()

    def accept(self, title: TrophyTitle) -> bool:
        haystack = title.name if self.case_sensitive else title.name.casefold()
        return self._needle in haystack


class TrophyTitleHasGroupsFilter(TrophyTitleFilter):
    """Acepta títulos cuyo `has_trophy_groups` es igual a `value`."""

    def __init__(self, inner: Iterator[TrophyTitle], value: bool) -> None:
        super().__init__(inner)
        self.value = value

    def accept(self, title: TrophyTitle) -> bool:
        return title.has_trophy_groups == self.value
