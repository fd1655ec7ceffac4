"""Plataformas (familias de consola) soportadas por el endpoint de trofeos.

Por qué un Enum:
- El Core no interpreta los valores: solo los compara y los pasa tal cual
  al parámetro `platform` del endpoint.
"""

from __future__ import annotations

from enum import Enum


class Platform(str, Enum):
    """Identificador de plataforma tal como lo espera la API."""

    PS3 = "PS3"
    PS4 = "PS4"
    PS5 = "PS5"
    PSVITA = "PSVITA"

    @classmethod
    def parse_list(cls, raw: str | None) -> list["Platform"]:
        """Parsea `"PS4,PSVITA"` a `[Platform.PS4, Platform.PSVITA]`.

        Valores desconocidos se ignoran.
        """

        if not raw:
            return []
        out: list[Platform] = []
        for part in raw.split(","):
            value = part.strip().upper()
            if value in cls._value2member_map_:
                out.append(cls(value))
        return out
