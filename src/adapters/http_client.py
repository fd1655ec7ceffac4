"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers, base URL y el header de autorización.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.

Nota: retries y rate limiting no se gestionan aquí.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    access_token: str | None = None,
    transport: httpx.BaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las consultas se comporten igual.
    - `access_token` tiene prioridad sobre `settings.access_token`.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    token = access_token or settings.access_token
    if token:
        headers["Authorization"] = f"Bearer {token}"
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        base_url=settings.api_base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
