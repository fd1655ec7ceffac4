"""Contrato del usuario dueño de los trofeos.

Por qué Protocol:
- El Core solo necesita un handle HTTP y un identificador; no le importa
  cómo se autentica el cliente ni de dónde sale el token.
- Permite sustituir el usuario real por un doble en tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class TrophyUser(Protocol):
    """Contrato mínimo para consultar trofeos de un usuario.

    Reglas de diseño:
    - `get_http_client` devuelve un cliente ya configurado (base URL, auth).
    - `online_id` identifica al usuario comparado en el endpoint.
    """

    online_id: str

    def get_http_client(self) -> httpx.Client:
        """Cliente HTTP usado por la fuente base de títulos."""

        ...
