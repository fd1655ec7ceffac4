"""Fuente base de trophy titles (paginada y perezosa).

Lógica:
- No hace I/O al construirse; la primera página se pide en el primer `next()`.
- Cada página se decodifica a `TrophyTitlesPage` y se entrega título a título.
- Se pide la siguiente página solo cuando la actual se ha consumido.

Errores:
- HTTP no 2xx -> `httpx.HTTPStatusError` (sin capturar).
- Cuerpo inválido -> `pydantic.ValidationError` (sin capturar).
"""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator

from core.config import AppSettings
from core.domain.models import TrophyTitle, TrophyTitlesPage
from core.domain.query import TrophyTitlesRequest
from core.logging import get_logger, query_context

logger = get_logger(__name__)

TROPHY_TITLES_PATH = "trophyTitles"


class TrophyTitlesIterator(Iterator[TrophyTitle]):
    """Itera los trophy titles de un usuario pidiendo páginas bajo demanda."""

    def __init__(self, request: TrophyTitlesRequest, settings: AppSettings | None = None) -> None:
        self._request = request
        self._settings = settings or AppSettings()
        self._client = request.user.get_http_client()
        self._buffer: deque[TrophyTitle] = deque()
        self._offset = 0
        self._exhausted = False
        self.total_results: int | None = None
        self.pages_fetched = 0

    def __iter__(self) -> "TrophyTitlesIterator":
        return self

    def __next__(self) -> TrophyTitle:
        while not self._buffer:
            if self._exhausted:
                raise StopIteration
            self._fetch_page()
        return self._buffer.popleft()

    def _params(self) -> dict[str, Any]:
        return {
            "fields": "@default",
            "npLanguage": self._request.language.value,
            "platform": self._request.platform_param,
            "offset": self._offset,
            "limit": self._settings.page_size,
            "comparedUser": self._request.user.online_id,
        }

    def _fetch_page(self) -> None:
        with query_context(self._request.user.online_id):
            self._fetch_page_in_context()

    def _fetch_page_in_context(self) -> None:
        params = self._params()
        logger.debug(
            "Fetching trophy titles page",
            extra={"offset": params["offset"], "limit": params["limit"], "platform": params["platform"]},
        )

        response = self._client.get(TROPHY_TITLES_PATH, params=params)
        response.raise_for_status()
        page = TrophyTitlesPage.model_validate(response.json())

        self.pages_fetched += 1
        self.total_results = page.total_results
        self._offset += len(page.trophy_titles)
        self._buffer.extend(page.trophy_titles)

        if not page.trophy_titles or self._offset >= page.total_results:
            self._exhausted = True

        logger.debug(
            "Fetched trophy titles page",
            extra={
                "received": len(page.trophy_titles),
                "total_results": page.total_results,
                "exhausted": self._exhausted,
            },
        )
