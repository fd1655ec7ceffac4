"""Usuario dueño de los trofeos.

Por qué aquí (adapters) y no en el dominio:
- Sostiene un `httpx.Client`; el dominio no conoce HTTP.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from adapters.http_client import build_client
from core.config import AppSettings

if TYPE_CHECKING:
    from core.services.trophy_titles import TrophyTitlesQuery


class User:
    """Un usuario de la red con su cliente HTTP ya autenticado."""

    def __init__(self, online_id: str, http_client: httpx.Client, settings: AppSettings | None = None) -> None:
        self.online_id = online_id
        self._http_client = http_client
        self.settings = settings

    @classmethod
    def from_settings(
        cls,
        online_id: str,
        settings: AppSettings | None = None,
        *,
        access_token: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> "User":
        settings = settings or AppSettings()
        client = build_client(settings, access_token=access_token, transport=transport)
        return cls(online_id, client, settings=settings)

    def get_http_client(self) -> httpx.Client:
        return self._http_client

    def trophy_titles(self, settings: AppSettings | None = None) -> "TrophyTitlesQuery":
        """Builder de trophy titles para este usuario.

        Sin `settings` explícitos se usan los del usuario (`from_settings`).
        """

        from core.services.trophy_titles import TrophyTitlesQuery  # noqa: PLC0415

        return TrophyTitlesQuery(self, settings=settings or self.settings)

    def close(self) -> None:
        self._http_client.close()

    def __enter__(self) -> "User":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"User(online_id={self.online_id!r})"
