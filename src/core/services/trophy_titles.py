"""Builder fluido de consultas de trophy titles.

Flujo:
- Los métodos de configuración (`platforms`, `with_name`, ...) solo guardan
  estado y devuelven el mismo builder; no hacen I/O.
- `iterate()` valida, toma una foto de la configuración y compone el
  pipeline: fuente base -> filtro por nombre -> filtro por grupos.
- Cada llamada a `iterate()` construye un pipeline nuevo; nada se cachea.
"""

from __future__ import annotations

from typing import Iterator

from adapters.psn.trophy_titles import TrophyTitlesIterator
from core.config import AppSettings
from core.domain.language import Language
from core.domain.models import TrophyTitle
from core.domain.platform import Platform
from core.domain.query import TrophyTitlesRequest
from core.domain.tristate import TriState
from core.errors import MissingPlatformError, NoTrophiesError
from core.interfaces.user import TrophyUser
from core.logging import get_logger, query_context
from core.services.filters import TrophyTitleHasGroupsFilter, TrophyTitleNameFilter

logger = get_logger(__name__)

_EMPTY = object()


class TrophyTitlesQuery:
    """Consulta de los trophy titles de un usuario.

    Ejemplo::

        query = TrophyTitlesQuery(user).platforms(Platform.PS4).with_name("Horizon")
        for title in query:
            print(title.name)
    """

    def __init__(self, user: TrophyUser, settings: AppSettings | None = None) -> None:
        self._user = user
        self._settings = settings or AppSettings()
        self._platforms: tuple[Platform, ...] = ()
        self._language: Language | None = None
        self._name = ""
        self._name_case_sensitive = True
        # UNSET: no llamar a has_trophy_groups() devuelve todos los títulos.
        self._has_trophy_groups = TriState.UNSET

    def platforms(self, *platforms: Platform) -> "TrophyTitlesQuery":
        """Filtra por las plataformas indicadas (reemplaza las anteriores)."""

        self._platforms = tuple(platforms)
        return self

    def has_trophy_groups(self, value: bool = True) -> "TrophyTitlesQuery":
        """Filtra títulos con (o sin) grupos de trofeos."""

        self._has_trophy_groups = TriState.from_bool(value)
        return self

    def with_name(self, name: str, *, case_sensitive: bool = True) -> "TrophyTitlesQuery":
        """Filtra títulos cuyo nombre contiene `name`; `""` desactiva el filtro."""

        self._name = name
        self._name_case_sensitive = case_sensitive
        return self

    def with_language(self, language: Language) -> "TrophyTitlesQuery":
        self._language = language
        return self

    def get_user(self) -> TrophyUser:
        return self._user

    def get_platforms(self) -> tuple[Platform, ...]:
        return self._platforms

    def get_language(self) -> Language:
        """Idioma configurado o `Language.default()` si no se fijó ninguno."""

        return self._language or Language.default()

    def request(self) -> TrophyTitlesRequest:
        """Foto inmutable de la configuración actual."""

        return TrophyTitlesRequest(
            user=self._user,
            platforms=self._platforms,
            language=self.get_language(),
            name=self._name,
            name_case_sensitive=self._name_case_sensitive,
            has_trophy_groups=self._has_trophy_groups,
        )

    def iterate(self) -> Iterator[TrophyTitle]:
        """Construye el iterador con los filtros aplicados.

        Raises:
            MissingPlatformError: si no se llamó a `platforms()` con al menos
                una plataforma. Se lanza antes de cualquier I/O.
        """

        if not self._platforms:
            raise MissingPlatformError(
                "TrophyTitlesQuery.platforms() must be called with at least one platform.",
                details={"online_id": self._user.online_id},
            )

        request = self.request()

        iterator: Iterator[TrophyTitle] = TrophyTitlesIterator(request, self._settings)

        if request.name:
            iterator = TrophyTitleNameFilter(
                iterator,
                request.name,
                case_sensitive=request.name_case_sensitive,
            )

        if request.has_trophy_groups.is_set:
            iterator = TrophyTitleHasGroupsFilter(iterator, request.has_trophy_groups.as_bool())

        with query_context(request.user.online_id):
            logger.debug(
                "Built trophy titles pipeline",
                extra={
                    "platform": request.platform_param,
                    "language": request.language.value,
                    "name_filter": request.name or None,
                    "has_groups_filter": request.has_trophy_groups.value,
                },
            )
        return iterator

    def __iter__(self) -> Iterator[TrophyTitle]:
        return self.iterate()

    def first(self) -> TrophyTitle:
        """Primer título que pasa los filtros.

        Raises:
            MissingPlatformError: sin plataformas configuradas.
            NoTrophiesError: la secuencia filtrada está vacía.
        """

        title = next(self.iterate(), _EMPTY)
        if title is _EMPTY:
            raise NoTrophiesError(
                "Client has no trophy titles.",
                details={
                    "online_id": self._user.online_id,
                    "name": self._name or None,
                    "has_trophy_groups": self._has_trophy_groups.value,
                },
            )
        return title  # type: ignore[return-value]
